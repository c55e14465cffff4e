# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Buffer-scope linting, project scanning, and formatting."""

from __future__ import annotations

from .buffer import BufferLinter
from .formatter import Formatter
from .project import ProjectScanner, ScanPhase

__all__ = ["BufferLinter", "Formatter", "ProjectScanner", "ScanPhase"]
