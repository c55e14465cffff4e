# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for locating the analyzer's user-level configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from ruffqa.platform import UnsupportedPlatformError, default_config_path

HOME = Path("/home/dev")


def test_windows_prefers_appdata() -> None:
    path = default_config_path("win32", env={"APPDATA": "/appdata"}, home=HOME)

    assert path == Path("/appdata") / "ruff" / "pyproject.toml"


def test_windows_without_appdata_uses_roaming_profile() -> None:
    assert default_config_path("win32", env={}, home=HOME) == HOME / "AppData" / "Roaming" / "ruff" / "pyproject.toml"


def test_macos_uses_application_support() -> None:
    path = default_config_path("darwin", env={"XDG_CONFIG_HOME": "/xdg"}, home=HOME)

    assert path == HOME / "Library" / "Application Support" / "ruff" / "pyproject.toml"


@pytest.mark.parametrize("platform", ["linux", "freebsd13"])
def test_posix_honours_xdg_config_home(platform: str) -> None:
    assert default_config_path(platform, env={"XDG_CONFIG_HOME": "/xdg"}, home=HOME) == Path(
        "/xdg/ruff/pyproject.toml"
    )
    assert default_config_path(platform, env={}, home=HOME) == HOME / ".config" / "ruff" / "pyproject.toml"


def test_unknown_platform_raises() -> None:
    with pytest.raises(UnsupportedPlatformError, match="emscripten"):
        default_config_path("emscripten", env={}, home=HOME)
