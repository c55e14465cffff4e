# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parsers turning analyzer output into raw diagnostics."""

from __future__ import annotations

from .base import iter_records, load_json_payload
from .ruff import parse_ruff

__all__ = ["iter_records", "load_json_payload", "parse_ruff"]
