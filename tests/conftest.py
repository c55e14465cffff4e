# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest

from ruffqa.config import Config
from ruffqa.core.models import Diagnostic
from ruffqa.core.runtime.process import ProcessResult


class RecordingSurface:
    """Reporting surface that keeps every call for later assertions."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def set_messages(self, file_path: Path, diagnostics: Sequence[Diagnostic]) -> None:
        self.calls.append(("set_messages", (Path(file_path), list(diagnostics))))

    def set_all_messages(self, diagnostics: Sequence[Diagnostic], *, show_project_view: bool) -> None:
        self.calls.append(("set_all_messages", (list(diagnostics), show_project_view)))

    def clear_messages(self) -> None:
        self.calls.append(("clear_messages", None))

    def payloads(self, name: str) -> list[Any]:
        return [payload for call, payload in self.calls if call == name]


class RecordingNotifier:
    """Notifier collecting messages per level."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def warn(self, message: str) -> None:
        self.messages.append(("warn", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))


class MemoryDocument:
    """In-memory document used in place of an editor buffer."""

    def __init__(self, path: Path, text: str) -> None:
        self._path = path
        self.text = text

    @property
    def path(self) -> Path:
        return self._path

    def get_text(self) -> str:
        return self.text

    def set_text(self, text: str) -> None:
        self.text = text


def ruff_record(
    code: str | None,
    message: str,
    *,
    filename: str | None = "module.py",
    start: tuple[int, int] = (1, 1),
    end: tuple[int, int] = (1, 2),
) -> dict[str, Any]:
    """Return one record shaped like ``ruff check --output-format=json``."""

    return {
        "filename": filename,
        "code": code,
        "message": message,
        "location": {"row": start[0], "column": start[1]},
        "end_location": {"row": end[0], "column": end[1]},
        "fix": None,
        "url": None,
    }


def make_result(
    stdout: str | list[dict[str, Any]] = "",
    *,
    returncode: int = 0,
    stderr: str = "",
) -> ProcessResult:
    """Build a :class:`ProcessResult` as returned by ``run_process``."""

    payload = stdout if isinstance(stdout, str) else json.dumps(stdout)
    return ProcessResult(command=("ruff",), returncode=returncode, stdout=payload, stderr=stderr)


@pytest.fixture
def config() -> Config:
    """Return a default configuration."""

    return Config()


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def document_factory(tmp_path: Path) -> Callable[..., MemoryDocument]:
    """Return a factory creating in-memory documents under ``tmp_path``."""

    def _factory(text: str, name: str = "module.py") -> MemoryDocument:
        return MemoryDocument(tmp_path / name, text)

    return _factory
