# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the ruffqa package."""

from __future__ import annotations

from pathlib import Path
from typing import Final, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ruffqa.core.severity import Severity

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = "JsonScalar | list[JsonValue] | dict[str, JsonValue]"

LINTER_NAME: Final[str] = "ruff"

Point = tuple[int, int]
Range = tuple[Point, Point]


class SourceLocation(BaseModel):
    """One-based row/column pair as emitted by the analyzer."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    row: int
    column: int


class RawDiagnostic(BaseModel):
    """Capture an analyzer-native diagnostic prior to translation.

    Rows and columns are 1-based and count any lines injected by preprocessing.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    filename: str | None = None
    code: str | None = None
    message: str
    location: SourceLocation
    end_location: SourceLocation

    @field_validator("filename", mode="before")
    @classmethod
    def _blank_filename(cls, value: str | None) -> str | None:
        """Treat empty filenames as missing.

        Args:
            value: Filename reported by the analyzer.

        Returns:
            str | None: Filename or ``None`` when blank.
        """

        if isinstance(value, str) and not value.strip():
            return None
        return value


class Diagnostic(BaseModel):
    """Position-corrected, severity-classified diagnostic delivered to the reporting surface."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    code: str | None = None
    message: str
    file: Path
    range: Range = Field(description="0-based ((start_row, start_col), (end_row, end_col))")
    linter_name: str = LINTER_NAME

    @property
    def start(self) -> Point:
        """Return the 0-based start position."""

        return self.range[0]

    @property
    def end(self) -> Point:
        """Return the 0-based end position."""

        return self.range[1]


__all__ = [
    "Diagnostic",
    "JsonScalar",
    "JsonValue",
    "LINTER_NAME",
    "Point",
    "Range",
    "RawDiagnostic",
    "SourceLocation",
]
