# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Platform specific helpers."""

from __future__ import annotations

from .paths import UnsupportedPlatformError, default_config_path

__all__ = ["UnsupportedPlatformError", "default_config_path"]
