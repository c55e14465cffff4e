# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich consoles for report output (stdout) and log records (stderr)."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import cache
from typing import Literal, TextIO

from rich.console import Console

from ruffqa.interfaces.core import ConsoleManager

ColorSystem = Literal["auto", "standard", "256", "truecolor", "windows"]


def _stream_is_tty(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def detect_tty(*, stderr: bool = False) -> bool:
    """Return ``True`` when the chosen standard stream is a terminal.

    Args:
        stderr: Inspect ``sys.stderr`` instead of ``sys.stdout``.

    Returns:
        bool: Terminal support of the stream as currently bound.
    """

    return _stream_is_tty(sys.stderr if stderr else sys.stdout)


@dataclass(frozen=True, slots=True)
class ConsoleKey:
    """Presentation flags a cached console was built for."""

    color: bool
    emoji: bool
    stderr: bool
    tty: bool

    @property
    def color_system(self) -> ColorSystem | None:
        return "auto" if self.color and self.tty else None


class RichConsoleManager(ConsoleManager):
    """Hand out one Rich console per presentation preset.

    Diagnostics tables, notifications and JSON go to stdout; log records go
    to stderr so machine-readable stdout stays clean.
    """

    def __init__(self) -> None:
        self._consoles: dict[ConsoleKey, Console] = {}

    def get(self, *, color: bool, emoji: bool, stderr: bool = False) -> Console:
        """Return the console matching the requested preset.

        Consoles resolve their stream lazily, so a redirected ``sys.stdout``
        (as under test runners) is honoured by cached instances.

        Args:
            color: Request ANSI colour; only honoured on a terminal.
            emoji: Render emoji shortcodes.
            stderr: Write to standard error instead of standard output.

        Returns:
            Console: Cached console for the preset.
        """

        key = ConsoleKey(color=color, emoji=emoji, stderr=stderr, tty=detect_tty(stderr=stderr))
        console = self._consoles.get(key)
        if console is None:
            console = Console(
                stderr=stderr,
                color_system=key.color_system,
                force_terminal=key.tty,
                no_color=key.color_system is None,
                emoji=emoji,
                soft_wrap=True,
            )
            self._consoles[key] = console
        return console

    def log_console(self, *, color: bool | None = None) -> Console:
        """Return the stderr console used by the logging handler."""

        use_color = detect_tty(stderr=True) if color is None else color
        return self.get(color=use_color, emoji=False, stderr=True)

    def clear(self) -> None:
        """Forget every cached console."""

        self._consoles.clear()


@cache
def get_console_manager() -> RichConsoleManager:
    """Return the process-wide console manager."""

    return RichConsoleManager()


__all__ = [
    "ConsoleKey",
    "RichConsoleManager",
    "detect_tty",
    "get_console_manager",
]
