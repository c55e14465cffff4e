# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for whole-document and selection formatting."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from conftest import make_result

from ruffqa.errors import ProcessError
from ruffqa.interfaces import SelectableDocument
from ruffqa.linting import Formatter

RUN_PROCESS = "ruffqa.linting.formatter.run_process"


class FakeSelection:
    def __init__(self, text: str) -> None:
        self.text = text

    def is_empty(self) -> bool:
        return not self.text

    def get_text(self) -> str:
        return self.text

    def insert_text(self, text: str) -> None:
        self.text = text


class EditorDocument:
    def __init__(self, path: Path, text: str, selections: list[FakeSelection] | None = None) -> None:
        self._path = path
        self.text = text
        self.cursor = (0, 0)
        self._selections = selections or []
        self.set_text_calls = 0

    @property
    def path(self) -> Path:
        return self._path

    def get_text(self) -> str:
        return self.text

    def set_text(self, text: str) -> None:
        self.set_text_calls += 1
        self.text = text
        self.cursor = (0, 0)

    def get_cursor(self) -> tuple[int, int]:
        return self.cursor

    def set_cursor(self, position: tuple[int, int]) -> None:
        self.cursor = position

    def selections(self) -> list[FakeSelection]:
        return self._selections


@pytest.mark.asyncio
async def test_format_document_keeps_cursor(config, tmp_path) -> None:
    document = EditorDocument(tmp_path / "mod.py", "x=1\n")
    document.cursor = (0, 2)
    mock_run = AsyncMock(return_value=make_result("x = 1\n"))

    with patch(RUN_PROCESS, mock_run):
        await Formatter(config).format_document(document)

    assert isinstance(document, SelectableDocument)
    assert document.text == "x = 1\n"
    assert document.cursor == (0, 2)
    executable, args = mock_run.call_args.args
    assert executable == "ruff"
    assert args == ["format", f"--stdin-filename={document.path}", "--quiet"]
    assert mock_run.call_args.kwargs["stdin"] == "x=1\n"


@pytest.mark.asyncio
async def test_plain_document_is_formatted(config, document_factory) -> None:
    document = document_factory("y=2\n")

    with patch(RUN_PROCESS, AsyncMock(return_value=make_result("y = 2\n"))):
        await Formatter(config).format_document(document)

    assert document.text == "y = 2\n"


@pytest.mark.asyncio
async def test_empty_document_is_left_alone(config, tmp_path) -> None:
    document = EditorDocument(tmp_path / "mod.py", "")
    mock_run = AsyncMock()

    with patch(RUN_PROCESS, mock_run):
        await Formatter(config).format_document(document)

    mock_run.assert_not_called()
    assert document.set_text_calls == 0


@pytest.mark.asyncio
async def test_each_non_empty_selection_is_formatted(config, tmp_path) -> None:
    selections = [FakeSelection("a=1\n"), FakeSelection(""), FakeSelection("b=2\n")]
    document = EditorDocument(tmp_path / "mod.py", "a=1\n\nb=2\n", selections)

    async def _format(executable, args, *, options=None, stdin=None):
        return make_result(stdin.replace("=", " = "))

    with patch(RUN_PROCESS, AsyncMock(side_effect=_format)) as mock_run:
        count = await Formatter(config).format_selections(document)

    assert count == 2
    assert mock_run.await_count == 2
    assert [selection.text for selection in selections] == ["a = 1\n", "", "b = 2\n"]


@pytest.mark.asyncio
async def test_formatter_failure_leaves_document_untouched(config, tmp_path) -> None:
    document = EditorDocument(tmp_path / "mod.py", "def (:\n")

    with patch(RUN_PROCESS, AsyncMock(return_value=make_result("", returncode=2, stderr="error: Failed to parse"))):
        with pytest.raises(ProcessError):
            await Formatter(config).format_document(document)

    assert document.text == "def (:\n"
