# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Protocols describing the collaborators consumed by the diagnostic pipeline."""

from __future__ import annotations

from .core import ConsoleManager
from .reporting import Document, Notifier, ReportingSurface, Selection, SelectableDocument

__all__ = [
    "ConsoleManager",
    "Document",
    "Notifier",
    "ReportingSurface",
    "SelectableDocument",
    "Selection",
]
