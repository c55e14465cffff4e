# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exception hierarchy raised by the diagnostic pipeline."""

from __future__ import annotations

from collections.abc import Sequence


class RuffQAError(RuntimeError):
    """Base class for failures raised by ruffqa."""


class ProcessError(RuffQAError):
    """Raised when the analyzer process fails, times out, or overflows its output budget."""

    def __init__(
        self,
        message: str,
        *,
        command: Sequence[str] = (),
        returncode: int | None = None,
        stderr: str | None = None,
    ) -> None:
        """Initialise the error with captured subprocess metadata.

        Args:
            message: Human readable summary of the failure.
            command: Command sequence that was executed.
            returncode: Exit status reported by the subprocess when it finished.
            stderr: Captured standard error stream.
        """

        super().__init__(message)
        self.command = tuple(command)
        self.returncode = returncode
        self.stderr = stderr


class ParseError(RuffQAError):
    """Raised when analyzer output is not a valid diagnostic payload."""


__all__ = ["ParseError", "ProcessError", "RuffQAError"]
