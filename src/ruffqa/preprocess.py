# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Mask interactive-shell syntax before handing buffer text to the analyzer.

Interactive sessions accept lines the analyzer would reject outright: magic
commands (``%timeit``, ``%%capture``) and introspection (``?np``, ``np??``).
Those lines are commented out in place, which keeps line numbering intact, and
a single line of placeholder assignments for ``_``, ``__`` and ``___`` is
prepended. Only the prepended line shifts positions, so ``hidden_lines`` counts
whole injected lines rather than rewritten ones.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

PLACEHOLDER_LINE: Final[str] = "_ = 0 ; __ = 0 ; ___ = 0"
MAGIC_PREFIX: Final[str] = "%"
COMMENT_PREFIX: Final[str] = "# "
_INTROSPECTION: Final[re.Pattern[str]] = re.compile(r"^([ \t]*)(\?\??[\w.]+|\S+\?\??)([ \t]*)$")
# Only the analyzer's own line terminators; str.splitlines also breaks on \f and \u2028.
_LINE: Final[re.Pattern[str]] = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+\Z")


@dataclass(frozen=True, slots=True)
class MaskedLine:
    """A line rewritten in place, kept so fixed output can be restored."""

    masked: str
    original: str


@dataclass(frozen=True, slots=True)
class PreprocessResult:
    """Text handed to the analyzer plus the bookkeeping needed to undo it."""

    text: str
    hidden_lines: int = 0
    masked: tuple[MaskedLine, ...] = ()

    def restore(self, processed: str) -> str:
        """Undo the preprocessing on analyzer output derived from :attr:`text`.

        Used after fix-only runs, whose stdout is the corrected version of the
        preprocessed text. The injected placeholder line is removed and masked
        lines are returned to their original form, matched in order.

        Args:
            processed: Text emitted by the analyzer.

        Returns:
            str: Text suitable for writing back into the user's document.
        """

        if not self.hidden_lines and not self.masked:
            return processed
        lines = _split_lines(processed)
        if self.hidden_lines and lines and _strip_eol(lines[0]).strip() == PLACEHOLDER_LINE:
            lines = lines[self.hidden_lines :]
        cursor = 0
        for entry in self.masked:
            for index in range(cursor, len(lines)):
                body = _strip_eol(lines[index])
                if body == entry.masked:
                    lines[index] = entry.original + lines[index][len(body) :]
                    cursor = index + 1
                    break
        return "".join(lines)


def _split_lines(text: str) -> list[str]:
    return _LINE.findall(text)


def _strip_eol(line: str) -> str:
    return line.rstrip("\r\n")


def _mask_line(body: str) -> str | None:
    """Return the commented form of ``body`` or ``None`` when it needs no masking."""

    if body.startswith(MAGIC_PREFIX):
        return f"{COMMENT_PREFIX}{body}"
    match = _INTROSPECTION.match(body)
    if match:
        indent, expression, trailing = match.groups()
        return f"{indent}{COMMENT_PREFIX}{expression}{trailing}"
    return None


def preprocess(text: str, *, allow_interactive: bool) -> PreprocessResult:
    """Rewrite ``text`` so the analyzer accepts interactive-shell syntax.

    Args:
        text: Raw document text.
        allow_interactive: When ``False`` the text is returned unchanged.

    Returns:
        PreprocessResult: Transformed text and the number of prepended lines.
    """

    if not allow_interactive:
        return PreprocessResult(text=text)

    rewritten: list[str] = []
    masked: list[MaskedLine] = []
    for line in _split_lines(text):
        body = _strip_eol(line)
        replacement = _mask_line(body)
        if replacement is None:
            rewritten.append(line)
            continue
        masked.append(MaskedLine(masked=replacement, original=body))
        rewritten.append(replacement + line[len(body) :])
    return PreprocessResult(
        text=f"{PLACEHOLDER_LINE}\n{''.join(rewritten)}",
        hidden_lines=1,
        masked=tuple(masked),
    )


__all__ = [
    "COMMENT_PREFIX",
    "MAGIC_PREFIX",
    "MaskedLine",
    "PLACEHOLDER_LINE",
    "PreprocessResult",
    "preprocess",
]
