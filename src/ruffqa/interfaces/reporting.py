# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Host-side collaborators: documents, reporting surfaces, and notifications."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from ruffqa.core.models import Diagnostic, Point


@runtime_checkable
class Document(Protocol):
    """In-memory text buffer backed by a path on disk."""

    @property
    def path(self) -> Path:
        """Return the path the buffer is associated with."""

        raise NotImplementedError

    def get_text(self) -> str:
        """Return the live buffer contents."""

        raise NotImplementedError

    def set_text(self, text: str) -> None:
        """Replace the entire buffer contents with ``text``."""

        raise NotImplementedError


@runtime_checkable
class Selection(Protocol):
    """A selected region inside a document."""

    def is_empty(self) -> bool:
        """Return ``True`` when the selection covers no text."""

        raise NotImplementedError

    def get_text(self) -> str:
        """Return the selected text."""

        raise NotImplementedError

    def insert_text(self, text: str) -> None:
        """Replace the selected text with ``text`` and keep it selected."""

        raise NotImplementedError


@runtime_checkable
class SelectableDocument(Document, Protocol):
    """Document exposing a cursor and selections, as used by the formatter."""

    def get_cursor(self) -> Point:
        """Return the 0-based cursor position."""

        raise NotImplementedError

    def set_cursor(self, position: Point) -> None:
        """Move the cursor to ``position``."""

        raise NotImplementedError

    def selections(self) -> Sequence[Selection]:
        """Return the active selections."""

        raise NotImplementedError


@runtime_checkable
class ReportingSurface(Protocol):
    """Diagnostic sink owned by the host; scoped per producer identity."""

    def set_messages(self, file_path: Path, diagnostics: Sequence[Diagnostic]) -> None:
        """Replace the diagnostics shown for ``file_path``."""

        raise NotImplementedError

    def set_all_messages(self, diagnostics: Sequence[Diagnostic], *, show_project_view: bool) -> None:
        """Replace every diagnostic owned by this producer in one call."""

        raise NotImplementedError

    def clear_messages(self) -> None:
        """Remove every diagnostic owned by this producer."""

        raise NotImplementedError


@runtime_checkable
class Notifier(Protocol):
    """User-visible notification channel."""

    def info(self, message: str) -> None:
        """Show an informational notification."""

        raise NotImplementedError

    def warn(self, message: str) -> None:
        """Show a warning notification."""

        raise NotImplementedError

    def error(self, message: str) -> None:
        """Show an error notification."""

        raise NotImplementedError


__all__ = [
    "Document",
    "Notifier",
    "ReportingSurface",
    "SelectableDocument",
    "Selection",
]
