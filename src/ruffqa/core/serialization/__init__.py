# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers for converting diagnostics to serializable data."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeAlias

from ruffqa.core.models import Diagnostic, JsonValue

SerializableMapping: TypeAlias = dict[str, JsonValue]


def serialize_diagnostic(diag: Diagnostic) -> SerializableMapping:
    """Convert a diagnostic into a JSON-friendly mapping."""
    (start_row, start_col), (end_row, end_col) = diag.range
    return {
        "file": diag.file.as_posix(),
        "severity": diag.severity.value,
        "code": diag.code,
        "message": diag.message,
        "linter": diag.linter_name,
        "range": [[start_row, start_col], [end_row, end_col]],
    }


def serialize_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[JsonValue]:
    """Serialize ``diagnostics`` preserving their order."""
    return [serialize_diagnostic(diag) for diag in diagnostics]


__all__ = [
    "SerializableMapping",
    "serialize_diagnostic",
    "serialize_diagnostics",
]
