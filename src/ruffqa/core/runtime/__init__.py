# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Runtime helpers for executing the analyzer."""

from __future__ import annotations

from .process import (
    DEFAULT_MAX_OUTPUT_BYTES,
    DEFAULT_TIMEOUT,
    ProcessOptions,
    ProcessResult,
    run_process,
)

__all__ = [
    "DEFAULT_MAX_OUTPUT_BYTES",
    "DEFAULT_TIMEOUT",
    "ProcessOptions",
    "ProcessResult",
    "run_process",
]
