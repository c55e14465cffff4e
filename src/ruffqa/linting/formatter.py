# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pipe document text through ``ruff format``."""

from __future__ import annotations

import logging

from ..config.models import Config
from ..core.runtime.process import run_process
from ..interfaces.reporting import Document, SelectableDocument
from ..tooling.command_options import build_format_args

LOGGER = logging.getLogger(__name__)


class Formatter:
    """Format whole documents or individual selections."""

    def __init__(self, config: Config) -> None:
        self.config = config

    async def format_text(self, document: Document, text: str) -> str:
        """Return ``text`` formatted as if it lived in ``document``.

        Raises:
            ProcessError: If the formatter fails or writes to stderr.
        """

        config = self.config
        path = document.path
        result = await run_process(
            config.executable,
            build_format_args(path),
            options=config.process_options(path.parent),
            stdin=text,
        )
        result.raise_for_failure()
        return result.stdout

    async def format_document(self, document: Document) -> None:
        """Replace the whole document with its formatted text, keeping the cursor."""

        text = document.get_text()
        if not text:
            return
        formatted = await self.format_text(document, text)
        if isinstance(document, SelectableDocument):
            cursor = document.get_cursor()
            document.set_text(formatted)
            document.set_cursor(cursor)
        else:
            document.set_text(formatted)

    async def format_selections(self, document: SelectableDocument) -> int:
        """Format every non-empty selection of ``document`` independently.

        Returns:
            int: Number of selections that were formatted.
        """

        formatted_count = 0
        for selection in document.selections():
            if selection.is_empty():
                continue
            formatted = await self.format_text(document, selection.get_text())
            selection.insert_text(formatted)
            formatted_count += 1
        LOGGER.debug("formatted %d selection(s) in %s", formatted_count, document.path)
        return formatted_count


__all__ = ["Formatter"]
