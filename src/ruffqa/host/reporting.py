# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Console implementations of the reporting surface and notifier."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Final

from rich import box
from rich.table import Table
from rich.text import Text

from ..core.logging import fail, info, warn
from ..core.models import Diagnostic
from ..core.severity import Severity
from ..runtime.console.manager import get_console_manager

MISSING_CODE_PLACEHOLDER: Final[str] = "-"
LOCATION_SEPARATOR: Final[str] = ":"


def severity_color(sev: Severity) -> str:
    """Return the rich colour name associated with a severity level."""

    return {
        Severity.ERROR: "red",
        Severity.WARNING: "yellow",
        Severity.INFO: "cyan",
    }.get(sev, "yellow")


def display_location(diagnostic: Diagnostic) -> str:
    """Return ``file:line:column`` using 1-based numbering for humans."""

    row, column = diagnostic.start
    return f"{diagnostic.file}{LOCATION_SEPARATOR}{row + 1}{LOCATION_SEPARATOR}{column + 1}"


def _sort_key(diagnostic: Diagnostic) -> tuple[str, int, int]:
    row, column = diagnostic.start
    return (diagnostic.file.as_posix(), row, column)


class ConsoleReporter:
    """Collect diagnostics per file and render them as a Rich table."""

    def __init__(self, *, use_color: bool = True, use_emoji: bool = True) -> None:
        self.use_color = use_color
        self.use_emoji = use_emoji
        self.show_project_view = False
        self._files: dict[Path, list[Diagnostic]] = {}

    def set_messages(self, file_path: Path, diagnostics: Sequence[Diagnostic]) -> None:
        if diagnostics:
            self._files[Path(file_path)] = list(diagnostics)
        else:
            self._files.pop(Path(file_path), None)

    def set_all_messages(self, diagnostics: Sequence[Diagnostic], *, show_project_view: bool) -> None:
        self._files.clear()
        for diagnostic in diagnostics:
            self._files.setdefault(diagnostic.file, []).append(diagnostic)
        self.show_project_view = show_project_view

    def clear_messages(self) -> None:
        self._files.clear()

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Return every collected diagnostic ordered by file and position."""

        collected = [diagnostic for entries in self._files.values() for diagnostic in entries]
        return sorted(collected, key=_sort_key)

    def has_errors(self) -> bool:
        """Return ``True`` when any collected diagnostic is an error."""

        return any(diagnostic.severity is Severity.ERROR for diagnostic in self.diagnostics)

    def render(self) -> None:
        """Print the collected diagnostics followed by a one-line summary."""

        console = get_console_manager().get(color=self.use_color, emoji=self.use_emoji)
        diagnostics = self.diagnostics
        if not diagnostics:
            info("No diagnostics reported", use_emoji=self.use_emoji, use_color=self.use_color)
            return

        table = Table(box=box.SIMPLE_HEAVY if self.use_color else box.SIMPLE)
        table.add_column("Location", overflow="fold")
        table.add_column("Severity")
        table.add_column("Code")
        table.add_column("Message", overflow="fold")
        for diagnostic in diagnostics:
            severity = Text(diagnostic.severity.value)
            if self.use_color:
                severity.stylize(severity_color(diagnostic.severity))
            table.add_row(
                display_location(diagnostic),
                severity,
                diagnostic.code or MISSING_CODE_PLACEHOLDER,
                diagnostic.message,
            )
        console.print(table)
        summary = f"{len(diagnostics)} diagnostic(s) in {len(self._files)} file(s)"
        if self.has_errors():
            fail(summary, use_emoji=self.use_emoji, use_color=self.use_color)
        else:
            warn(summary, use_emoji=self.use_emoji, use_color=self.use_color)


class ConsoleNotifier:
    """Route notifications to the shared console helpers."""

    def __init__(self, *, use_color: bool | None = None, use_emoji: bool = True) -> None:
        self.use_color = use_color
        self.use_emoji = use_emoji

    def info(self, message: str) -> None:
        info(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def error(self, message: str) -> None:
        fail(message, use_emoji=self.use_emoji, use_color=self.use_color)


__all__ = [
    "ConsoleNotifier",
    "ConsoleReporter",
    "display_location",
    "severity_color",
]
