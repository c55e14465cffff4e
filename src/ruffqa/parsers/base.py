# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared parser infrastructure."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import cast

from ruffqa.core.models import JsonValue
from ruffqa.errors import ParseError


def load_json_payload(stdout: str) -> JsonValue:
    """Decode analyzer stdout, treating blank output as an empty payload.

    Args:
        stdout: Raw standard output captured from the analyzer.

    Returns:
        JsonValue: Decoded JSON document.

    Raises:
        ParseError: If ``stdout`` is not valid JSON.
    """

    stdout = stdout.strip()
    if not stdout:
        return []
    try:
        return cast(JsonValue, json.loads(stdout))
    except json.JSONDecodeError as exc:
        raise ParseError(f"analyzer output is not valid JSON: {exc}") from exc


def iter_records(payload: JsonValue) -> list[JsonValue]:
    """Return the record entries contained in ``payload``.

    The analyzer emits a JSON array, but object payloads are accepted too and
    their values are taken in insertion order.

    Args:
        payload: Decoded JSON document.

    Returns:
        list[JsonValue]: Record candidates awaiting validation.

    Raises:
        ParseError: If ``payload`` is neither an array nor an object.
    """

    if isinstance(payload, Mapping):
        return list(payload.values())
    if isinstance(payload, Sequence) and not isinstance(payload, (str, bytes, bytearray)):
        return list(payload)
    raise ParseError(f"expected a JSON array of diagnostics, got {type(payload).__name__}")


__all__ = ["iter_records", "load_json_payload"]
