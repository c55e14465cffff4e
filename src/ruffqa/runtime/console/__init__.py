# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Console management helpers."""

from __future__ import annotations

from .manager import ConsoleKey, RichConsoleManager, detect_tty, get_console_manager

__all__ = ["ConsoleKey", "RichConsoleManager", "detect_tty", "get_console_manager"]
