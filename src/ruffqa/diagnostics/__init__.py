# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Diagnostic translation from analyzer output to reporting records."""

from __future__ import annotations

from .translator import (
    SYNTAX_ERROR_CODE,
    UNCATEGORIZED_MARKER,
    build_excerpt,
    translate,
    translate_all,
)

__all__ = [
    "SYNTAX_ERROR_CODE",
    "UNCATEGORIZED_MARKER",
    "build_excerpt",
    "translate",
    "translate_all",
]
