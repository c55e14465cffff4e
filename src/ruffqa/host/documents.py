# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""File-backed documents used when driving the pipeline from a terminal."""

from __future__ import annotations

from pathlib import Path

from ..filesystem.paths import normalize_path


class FileDocument:
    """An in-memory buffer loaded from, and optionally saved back to, a file."""

    def __init__(self, path: Path | str, text: str | None = None, *, encoding: str = "utf-8") -> None:
        """Create a buffer for ``path``.

        Args:
            path: File backing the buffer.
            text: Initial contents; read from ``path`` lazily when omitted.
            encoding: Encoding used for reading and saving.
        """

        self._path = normalize_path(path)
        self._encoding = encoding
        self._text = text
        self._dirty = False

    @property
    def path(self) -> Path:
        return self._path

    @property
    def dirty(self) -> bool:
        """Return ``True`` when the buffer differs from what was last read or saved."""

        return self._dirty

    def get_text(self) -> str:
        if self._text is None:
            self._text = self._path.read_text(encoding=self._encoding)
        return self._text

    def set_text(self, text: str) -> None:
        if text != self.get_text():
            self._dirty = True
        self._text = text

    def save(self) -> bool:
        """Write the buffer back to disk when it changed.

        Returns:
            bool: ``True`` when the file was rewritten.
        """

        if not self._dirty or self._text is None:
            return False
        self._path.write_text(self._text, encoding=self._encoding)
        self._dirty = False
        return True


__all__ = ["FileDocument"]
