# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Locate the analyzer's user-level configuration file."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Final

CONFIG_DIR_NAME: Final[str] = "ruff"
CONFIG_FILENAME: Final[str] = "pyproject.toml"
_APPDATA_ENV: Final[str] = "APPDATA"
_XDG_CONFIG_ENV: Final[str] = "XDG_CONFIG_HOME"
_POSIX_PLATFORMS: Final[tuple[str, ...]] = ("linux", "freebsd", "openbsd", "netbsd", "sunos", "aix", "cygwin")


class UnsupportedPlatformError(RuntimeError):
    """Raised when no default configuration location is known for a platform."""


def default_config_path(
    platform: str | None = None,
    *,
    env: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> Path:
    """Return the user-level ``pyproject.toml`` the analyzer reads by default.

    Args:
        platform: Platform identifier in :data:`sys.platform` form.
        env: Environment mapping consulted for ``APPDATA``/``XDG_CONFIG_HOME``.
        home: Home directory override.

    Returns:
        Path: Location of the default configuration file.

    Raises:
        UnsupportedPlatformError: If ``platform`` is not recognised.
    """

    platform = platform or sys.platform
    env = os.environ if env is None else env
    home = Path.home() if home is None else home

    if platform.startswith("win"):
        base = Path(env[_APPDATA_ENV]) if env.get(_APPDATA_ENV) else home / "AppData" / "Roaming"
    elif platform == "darwin":
        base = home / "Library" / "Application Support"
    elif platform.startswith(_POSIX_PLATFORMS):
        base = Path(env[_XDG_CONFIG_ENV]) if env.get(_XDG_CONFIG_ENV) else home / ".config"
    else:
        raise UnsupportedPlatformError(f'Default config path has not been set on platform "{platform}"')
    return base / CONFIG_DIR_NAME / CONFIG_FILENAME


__all__ = ["CONFIG_DIR_NAME", "CONFIG_FILENAME", "UnsupportedPlatformError", "default_config_path"]
