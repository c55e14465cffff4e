# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lint a single open document by streaming its live text to the analyzer."""

from __future__ import annotations

import logging

from ..config.models import Config
from ..core.models import Diagnostic
from ..core.runtime.process import run_process
from ..diagnostics.translator import translate_all
from ..interfaces.reporting import Document
from ..parsers.ruff import parse_ruff
from ..preprocess import preprocess
from ..tooling.command_options import build_check_args, stdin_target

LOGGER = logging.getLogger(__name__)


class BufferLinter:
    """Run preprocess → analyzer → translation for one document.

    The linter reads the configuration object it was given on every call, so
    toggles applied to that object take effect on the next lint. It never
    touches project scan state.
    """

    def __init__(self, config: Config) -> None:
        """Bind the linter to ``config``.

        Args:
            config: Shared configuration, read afresh on each lint.
        """

        self.config = config

    async def lint(self, document: Document, apply_fixes: bool = False) -> list[Diagnostic]:
        """Lint ``document`` or apply the analyzer's fixes to it.

        Args:
            document: Buffer to analyse.
            apply_fixes: When ``True`` the corrected text replaces the buffer
                contents and no diagnostics are returned.

        Returns:
            list[Diagnostic]: Diagnostics for ``document``; empty when linting is
            disabled or fixes were applied.

        Raises:
            ProcessError: If the analyzer fails, times out, or writes to stderr.
            ParseError: If the analyzer output is not a valid diagnostic payload.
        """

        config = self.config
        if not config.state:
            return []

        path = document.path
        prepared = preprocess(document.get_text(), allow_interactive=config.allow_interactive)
        args = build_check_args(config, stdin_target(path), fix_only=apply_fixes)
        LOGGER.debug("linting %s (fix=%s, hidden_lines=%d)", path, apply_fixes, prepared.hidden_lines)
        result = await run_process(
            config.executable,
            args,
            options=config.process_options(path.parent),
            stdin=prepared.text,
        )
        result.raise_for_failure()

        if apply_fixes:
            document.set_text(prepared.restore(result.stdout))
            return []

        return translate_all(
            path,
            parse_ruff(result.stdout),
            prepared.hidden_lines,
            config.classifier(),
            mark_uncategorized=config.mark_uncategorized,
        )


__all__ = ["BufferLinter"]
