# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console notifications and log-record routing.

Notifications (``info``/``ok``/``warn``/``fail``) are user-facing lines on
stdout. Library diagnostics use :mod:`logging`; :func:`configure_logging`
routes those records to stderr through Rich.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Final

from rich.logging import RichHandler
from rich.text import Text

from ruffqa.runtime.console.manager import detect_tty, get_console_manager

_LOG_FORMAT: Final[str] = "%(message)s"
_LOG_DATE_FORMAT: Final[str] = "[%X]"


class MessageLevel(Enum):
    """Notification levels with their emoji prefix and Rich style."""

    INFO = ("ℹ️ ", "cyan")
    OK = ("✅ ", "green")
    WARN = ("⚠️ ", "yellow")
    FAIL = ("❌ ", "red")

    @property
    def prefix(self) -> str:
        return self.value[0]

    @property
    def style(self) -> str:
        return self.value[1]


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def notify(level: MessageLevel, msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print one notification line.

    Args:
        level: Severity of the notification.
        msg: Message text.
        use_emoji: Prefix the line with the level's emoji.
        use_color: Force colour on or off; ``None`` follows the terminal.
    """

    color = detect_tty() if use_color is None else use_color
    text = Text(f"{emoji(level.prefix, use_emoji)}{msg}")
    if color:
        text.stylize(level.style)
    get_console_manager().get(color=color, emoji=use_emoji).print(text)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    notify(MessageLevel.INFO, msg, use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    notify(MessageLevel.OK, msg, use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    notify(MessageLevel.WARN, msg, use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    notify(MessageLevel.FAIL, msg, use_emoji=use_emoji, use_color=use_color)


def configure_logging(*, verbose: bool) -> None:
    """Send ``ruffqa`` log records to stderr through a Rich handler.

    Args:
        verbose: Show debug records (scan progress, skipped roots) and rich
            tracebacks; otherwise only warnings and above.
    """

    handler = RichHandler(
        console=get_console_manager().log_console(),
        rich_tracebacks=verbose,
        show_path=verbose,
    )
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=_LOG_FORMAT,
        datefmt=_LOG_DATE_FORMAT,
        handlers=[handler],
        force=True,
    )


__all__ = [
    "MessageLevel",
    "configure_logging",
    "emoji",
    "fail",
    "info",
    "notify",
    "ok",
    "warn",
]
