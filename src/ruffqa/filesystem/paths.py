# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Path keys shared by the scanner, documents, and open-file exclusion."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

PathInput = str | PathLike[str]


def normalize_path(path: PathInput, *, base_dir: PathInput | None = None) -> Path:
    """Return the absolute key under which ``path`` is tracked.

    Analyzer output names files relative to the scanned root while hosts hand
    over absolute, possibly symlinked, paths; both must compare equal.

    Args:
        path: Path from the host or from an analyzer record.
        base_dir: Anchor for relative paths, usually the scanned workspace root.
            Defaults to the current working directory.

    Returns:
        Path: Absolute path with ``~`` expanded and symlinks resolved when the
        filesystem allows it.

    Raises:
        ValueError: If ``path`` is ``None``.
    """

    if path is None:
        raise ValueError("path must not be None")
    candidate = Path(path).expanduser()
    if not candidate.is_absolute():
        anchor = Path.cwd() if base_dir is None else Path(base_dir).expanduser()
        candidate = anchor / candidate
    try:
        return candidate.resolve()
    except (OSError, RuntimeError):
        # Symlink loops or unreadable parents: keep the lexical absolute form.
        return candidate.absolute()


__all__ = ["PathInput", "normalize_path"]
