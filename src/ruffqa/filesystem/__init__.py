# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filesystem helpers."""

from __future__ import annotations

from .paths import PathInput, normalize_path

__all__ = ["PathInput", "normalize_path"]
