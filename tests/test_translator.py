# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for translating analyzer records into reporting diagnostics."""

from __future__ import annotations

from pathlib import Path

from conftest import ruff_record

from ruffqa.core.models import LINTER_NAME, RawDiagnostic
from ruffqa.core.severity import Severity, SeverityClassifier, SeverityRuleSet
from ruffqa.diagnostics import translate, translate_all
from ruffqa.diagnostics.translator import EXCERPT_SEPARATOR, build_excerpt

FILE = Path("/work/pkg/module.py")


def _raw(code: str | None, *, start: tuple[int, int] = (1, 1), end: tuple[int, int] = (1, 2)) -> RawDiagnostic:
    return RawDiagnostic.model_validate(ruff_record(code, "something is wrong", start=start, end=end))


def test_position_is_converted_to_zero_based_range() -> None:
    diagnostic = translate(FILE, _raw("E501", start=(5, 3), end=(9, 7)), 0, SeverityClassifier())

    assert diagnostic is not None
    assert diagnostic.range == ((4, 2), (8, 6))
    assert diagnostic.file == FILE
    assert diagnostic.linter_name == LINTER_NAME


def test_error_prefix_yields_error_with_code_excerpt() -> None:
    classifier = SeverityClassifier(SeverityRuleSet.from_lists(error=["E"], warning=[]))

    diagnostic = translate(FILE, _raw("E501"), 0, classifier)

    assert diagnostic is not None
    assert diagnostic.severity is Severity.ERROR
    assert diagnostic.code == "E501"
    assert diagnostic.message == f"E501{EXCERPT_SEPARATOR}something is wrong"


def test_missing_code_forces_error_at_first_column() -> None:
    diagnostic = translate(FILE, _raw(None, start=(3, 12), end=(3, 20)), 0, SeverityClassifier())

    assert diagnostic is not None
    assert diagnostic.severity is Severity.ERROR
    assert diagnostic.code is None
    assert diagnostic.message == "something is wrong"
    assert diagnostic.range == ((2, 0), (2, 19))


def test_syntax_error_sentinel_is_treated_like_missing_code() -> None:
    classifier = SeverityClassifier(SeverityRuleSet.from_lists(error=[], warning=["E"]))

    diagnostic = translate(FILE, _raw("E999", start=(2, 8)), 0, classifier)

    assert diagnostic is not None
    assert diagnostic.severity is Severity.ERROR
    assert diagnostic.code is None
    assert diagnostic.start == (1, 0)


def test_injected_lines_are_discarded_and_following_rows_shift() -> None:
    classifier = SeverityClassifier()

    assert translate(FILE, _raw("F821", start=(1, 1)), 1, classifier) is None
    kept = translate(FILE, _raw("F821", start=(2, 1), end=(2, 4)), 1, classifier)

    assert kept is not None
    assert kept.range == ((0, 0), (0, 3))


def test_discarding_is_stable_across_repeated_calls() -> None:
    raw = _raw("F821", start=(1, 5))
    classifier = SeverityClassifier()

    assert [translate(FILE, raw, 1, classifier) for _ in range(3)] == [None, None, None]


def test_unmatched_code_is_marked_when_requested() -> None:
    classifier = SeverityClassifier(SeverityRuleSet.from_lists(error=["E"], warning=["W"]))

    marked = translate(FILE, _raw("UP006"), 0, classifier, mark_uncategorized=True)
    plain = translate(FILE, _raw("UP006"), 0, classifier, mark_uncategorized=False)

    assert marked is not None and plain is not None
    assert marked.severity is Severity.ERROR
    assert marked.code == "UP006*"
    assert marked.message.startswith("UP006*")
    assert plain.code == "UP006"


def test_warning_and_info_classifications() -> None:
    classifier = SeverityClassifier(SeverityRuleSet.from_lists(error=["F"], warning=["W"], info=["D"]))

    warning = translate(FILE, _raw("W291"), 0, classifier, mark_uncategorized=True)
    info = translate(FILE, _raw("D103"), 0, classifier, mark_uncategorized=True)

    assert warning is not None and info is not None
    assert warning.severity is Severity.WARNING
    assert info.severity is Severity.INFO
    assert info.code == "D103"


def test_translate_all_skips_discarded_records() -> None:
    raws = [_raw("F401", start=(1, 1)), _raw("F401", start=(4, 1)), _raw("W605", start=(6, 2))]

    results = translate_all(FILE, raws, 1, SeverityClassifier())

    assert [diag.start for diag in results] == [(2, 0), (4, 1)]


def test_build_excerpt() -> None:
    assert build_excerpt(None, "plain") == "plain"
    assert build_excerpt("E1", "msg") == f"E1{EXCERPT_SEPARATOR}msg"
