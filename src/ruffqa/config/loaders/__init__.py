# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Configuration source implementations."""

from __future__ import annotations

from .sources import (
    PROJECT_CONFIG_FILENAME,
    PYPROJECT_FILENAME,
    ConfigSource,
    DefaultConfigSource,
    MappingConfigSource,
    PyProjectConfigSource,
    TomlConfigSource,
)

__all__ = [
    "ConfigSource",
    "DefaultConfigSource",
    "MappingConfigSource",
    "PROJECT_CONFIG_FILENAME",
    "PYPROJECT_FILENAME",
    "PyProjectConfigSource",
    "TomlConfigSource",
]
