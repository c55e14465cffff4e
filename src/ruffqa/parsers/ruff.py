# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parser for Ruff's ``--output-format=json`` diagnostics."""

from __future__ import annotations

from pydantic import ValidationError

from ruffqa.core.models import RawDiagnostic
from ruffqa.errors import ParseError

from .base import iter_records, load_json_payload


def parse_ruff(stdout: str) -> list[RawDiagnostic]:
    """Parse Ruff JSON output into raw diagnostics.

    Args:
        stdout: Standard output captured from ``ruff check --output-format=json``.

    Returns:
        list[RawDiagnostic]: Diagnostics in the order Ruff reported them.

    Raises:
        ParseError: If the output is not JSON or a record does not match the schema.
    """

    results: list[RawDiagnostic] = []
    for index, item in enumerate(iter_records(load_json_payload(stdout))):
        try:
            results.append(RawDiagnostic.model_validate(item))
        except ValidationError as exc:
            raise ParseError(f"diagnostic #{index} does not match the expected schema: {exc}") from exc
    return results


__all__ = ["parse_ruff"]
