# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Analyzer command construction."""

from __future__ import annotations

from .command_options import append_check_args, build_check_args, build_format_args, stdin_target

__all__ = ["append_check_args", "build_check_args", "build_format_args", "stdin_target"]
