# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared logging helpers."""

from __future__ import annotations

from .public import MessageLevel, configure_logging, emoji, fail, info, notify, ok, warn

__all__ = [
    "MessageLevel",
    "configure_logging",
    "emoji",
    "fail",
    "info",
    "notify",
    "ok",
    "warn",
]
