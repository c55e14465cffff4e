# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Config loading with layered precedence."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .loaders import (
    PROJECT_CONFIG_FILENAME,
    PYPROJECT_FILENAME,
    ConfigSource,
    DefaultConfigSource,
    MappingConfigSource,
    PyProjectConfigSource,
    TomlConfigSource,
)
from .models import Config, ConfigError

LOGGER = logging.getLogger(__name__)


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``base`` updated recursively with ``override``."""

    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def default_sources(root: Path, overrides: Mapping[str, Any] | None = None) -> list[ConfigSource]:
    """Return the configuration sources consulted for ``root`` in precedence order.

    Later sources win: defaults, ``pyproject.toml``, ``.ruffqa.toml``, then
    ``overrides``.

    Args:
        root: Project directory searched for configuration files.
        overrides: Optional values supplied by the caller, e.g. CLI flags.

    Returns:
        list[ConfigSource]: Sources ordered from lowest to highest precedence.
    """

    sources: list[ConfigSource] = [
        DefaultConfigSource(),
        PyProjectConfigSource(root / PYPROJECT_FILENAME),
        TomlConfigSource(root / PROJECT_CONFIG_FILENAME),
    ]
    if overrides:
        sources.append(MappingConfigSource(overrides))
    return sources


def load_from_sources(sources: Sequence[ConfigSource]) -> Config:
    """Merge ``sources`` in order and validate the result.

    Args:
        sources: Configuration sources ordered from lowest to highest precedence.

    Returns:
        Config: Validated configuration.

    Raises:
        ConfigError: If a source cannot be read or the merged data is invalid.
    """

    merged: dict[str, Any] = {}
    for source in sources:
        fragment = source.load()
        if fragment:
            LOGGER.debug("applying configuration from %s", source.describe())
        merged = _deep_merge(merged, fragment)
    try:
        return Config.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def load_config(root: Path, overrides: Mapping[str, Any] | None = None) -> Config:
    """Load the configuration for ``root``."""

    return load_from_sources(default_sources(root, overrides))


__all__ = ["default_sources", "load_config", "load_from_sources"]
