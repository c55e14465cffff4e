# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate analyzer-native diagnostics into reporting-surface records."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Final

from ruffqa.core.models import Diagnostic, Range, RawDiagnostic, SourceLocation
from ruffqa.core.severity import Classification, Severity, SeverityClassifier

SYNTAX_ERROR_CODE: Final[str] = "E999"
UNCATEGORIZED_MARKER: Final[str] = "*"
EXCERPT_SEPARATOR: Final[str] = " — "


def build_excerpt(code: str | None, message: str) -> str:
    """Return the display message, prefixed by ``code`` when one is present."""

    return f"{code}{EXCERPT_SEPARATOR}{message}" if code else message


def _to_point(location: SourceLocation, *, hidden_lines: int, column: int | None = None) -> tuple[int, int]:
    row = location.row - 1 - hidden_lines
    col = (location.column if column is None else column) - 1
    return max(row, 0), max(col, 0)


def translate(
    file_path: Path | str,
    raw: RawDiagnostic,
    hidden_lines: int,
    classifier: SeverityClassifier,
    *,
    mark_uncategorized: bool = False,
) -> Diagnostic | None:
    """Translate one analyzer diagnostic into a :class:`Diagnostic`.

    Diagnostics pointing at lines injected by preprocessing are discarded.
    Codeless diagnostics and the syntax-error sentinel are forced to errors
    anchored at column 1 with no code. Every other code goes through the
    severity cascade; unmatched codes default to errors and, when
    ``mark_uncategorized`` is set, gain a trailing ``*``.

    Args:
        file_path: Path the diagnostic is reported against.
        raw: Diagnostic as emitted by the analyzer.
        hidden_lines: Number of whole lines prepended by preprocessing.
        classifier: Severity cascade built from configuration.
        mark_uncategorized: Append a marker to codes no prefix matched.

    Returns:
        Diagnostic | None: Translated diagnostic, or ``None`` when it refers to an
        injected line.
    """

    if raw.location.row <= hidden_lines:
        return None

    start_column: int | None = None
    code = raw.code
    if code is None or code == SYNTAX_ERROR_CODE:
        severity = Severity.ERROR
        start_column = 1
        code = None
    else:
        classification = classifier.classify(code)
        severity = classification.to_severity(Severity.ERROR)
        if classification is Classification.UNMATCHED and mark_uncategorized:
            code = f"{code}{UNCATEGORIZED_MARKER}"

    position: Range = (
        _to_point(raw.location, hidden_lines=hidden_lines, column=start_column),
        _to_point(raw.end_location, hidden_lines=hidden_lines),
    )
    return Diagnostic(
        severity=severity,
        code=code,
        message=build_excerpt(code, raw.message),
        file=Path(file_path),
        range=position,
    )


def translate_all(
    file_path: Path | str,
    diagnostics: Iterable[RawDiagnostic],
    hidden_lines: int,
    classifier: SeverityClassifier,
    *,
    mark_uncategorized: bool = False,
) -> list[Diagnostic]:
    """Translate every diagnostic reported against ``file_path``, dropping discarded ones."""

    results: list[Diagnostic] = []
    for raw in diagnostics:
        translated = translate(
            file_path,
            raw,
            hidden_lines,
            classifier,
            mark_uncategorized=mark_uncategorized,
        )
        if translated is not None:
            results.append(translated)
    return results


__all__ = [
    "EXCERPT_SEPARATOR",
    "SYNTAX_ERROR_CODE",
    "UNCATEGORIZED_MARKER",
    "build_excerpt",
    "translate",
    "translate_all",
]
