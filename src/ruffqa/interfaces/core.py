# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Console service interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from rich.console import Console


@runtime_checkable
class ConsoleManager(Protocol):
    """Provide consoles keyed by colour, emoji, and target stream."""

    def get(self, *, color: bool, emoji: bool, stderr: bool = False) -> Console:
        """Return a console for the requested presentation preset."""

        raise NotImplementedError

    def clear(self) -> None:
        """Drop cached consoles."""

        raise NotImplementedError


__all__ = ["ConsoleManager"]
