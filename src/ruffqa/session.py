# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Host-facing controller wiring configuration, linters, scanner, and formatter.

A host creates one :class:`LinterSession` per running instance. The session
exposes the on-edit linter provider, user commands (fix, format, toggles), and
the lifecycle hooks that keep buffer-scope and project-scope diagnostics from
overlapping.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Awaitable, Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .config.models import Config
from .core.models import LINTER_NAME, Diagnostic
from .errors import RuffQAError
from .interfaces.reporting import Document, Notifier, ReportingSurface, SelectableDocument
from .linting.buffer import BufferLinter
from .linting.formatter import Formatter
from .linting.project import ProjectScanner
from .platform.paths import UnsupportedPlatformError, default_config_path

LOGGER = logging.getLogger(__name__)

GRAMMAR_SCOPES: Final[tuple[str, ...]] = ("source.python", "source.python.django")
PYTHON_SUFFIXES: Final[frozenset[str]] = frozenset({".py", ".pyi", ".pyw"})
_PYTHON_SHEBANG: Final[re.Pattern[str]] = re.compile(r"^#!.*\bpython[0-9.]*\b")
FORMATTER_FAILED: Final[str] = "`ruff` formatter has failed"

LintCallback = Callable[[Document], Awaitable[list[Diagnostic]]]


@dataclass(frozen=True, slots=True)
class LinterProvider:
    """Registration record handed to the host's on-edit linting service."""

    name: str
    scope: str
    lints_on_change: bool
    grammar_scopes: tuple[str, ...]
    lint: LintCallback


def is_python_document(document: Document) -> bool:
    """Return ``True`` when ``document`` holds Python source.

    Extensionless files count when their first line is a Python shebang.
    """

    suffix = document.path.suffix
    if suffix:
        return suffix in PYTHON_SUFFIXES
    first_line = document.get_text().partition("\n")[0]
    return _PYTHON_SHEBANG.match(first_line) is not None


class LinterSession:
    """Own the configuration and every diagnostic producer for one host."""

    def __init__(
        self,
        config: Config,
        notifier: Notifier,
        project_surface: ReportingSurface | None = None,
    ) -> None:
        """Wire the producers to ``config``.

        Args:
            config: Configuration shared by every producer; toggles mutate it.
            notifier: Channel for user-visible failures.
            project_surface: Reporting surface for the project-wide identity.
        """

        self.config = config
        self.notifier = notifier
        self.buffer_linter = BufferLinter(config)
        self.scanner = ProjectScanner(config, project_surface)
        self.formatter = Formatter(config)

    def provide_linter(self) -> LinterProvider:
        """Return the provider the host calls on every edit."""

        return LinterProvider(
            name=LINTER_NAME,
            scope="file",
            lints_on_change=True,
            grammar_scopes=GRAMMAR_SCOPES,
            lint=self.lint,
        )

    async def lint(self, document: Document) -> list[Diagnostic]:
        """Lint ``document``; errors propagate to the host's linting service."""

        if not is_python_document(document):
            return []
        return await self.buffer_linter.lint(document)

    async def fix(self, document: Document) -> None:
        """Apply the analyzer's fixes to ``document``."""

        try:
            await self.buffer_linter.lint(document, apply_fixes=True)
        except RuffQAError as exc:
            LOGGER.debug("fix failed for %s", document.path, exc_info=True)
            self.notifier.error(f"`ruff` fix has failed: {exc}")

    async def format_editor(self, document: Document) -> None:
        """Format the whole document."""

        try:
            await self.formatter.format_document(document)
        except RuffQAError:
            LOGGER.debug("format failed for %s", document.path, exc_info=True)
            self.notifier.error(FORMATTER_FAILED)

    async def format_selected(self, document: SelectableDocument) -> None:
        """Format each non-empty selection of the document."""

        try:
            await self.formatter.format_selections(document)
        except RuffQAError:
            LOGGER.debug("selection format failed for %s", document.path, exc_info=True)
            self.notifier.error(FORMATTER_FAILED)

    def toggle_state(self) -> bool:
        """Flip the global enable flag and return the new value."""

        self.config.state = not self.config.state
        return self.config.state

    def toggle_noqa(self) -> bool:
        """Flip ``noqa`` handling and return the new value."""

        self.config.use_noqa = not self.config.use_noqa
        return self.config.use_noqa

    async def scan(self, roots: Sequence[Path | str], open_paths: Iterable[Path | str] = ()) -> None:
        """Run a project-wide scan."""

        await self.scanner.scan(roots, open_paths)

    def on_document_opened(self, path: Path | str) -> None:
        """Hand the opened document over to the buffer-scope linter."""

        self.scanner.clear_file_messages(path)

    def on_roots_changed(self, roots: Sequence[Path | str]) -> None:
        """Drop project-wide results after the workspace roots changed."""

        LOGGER.debug("workspace roots changed: %s", ", ".join(str(root) for root in roots))
        self.scanner.clear_all_messages()

    def default_config_path(self) -> Path | None:
        """Return the analyzer's user-level configuration file for this platform."""

        try:
            return default_config_path()
        except UnsupportedPlatformError as exc:
            self.notifier.error(str(exc))
            return None

    def dispose(self) -> None:
        """Tear down the session, clearing project-wide results."""

        self.scanner.dispose()


__all__ = [
    "FORMATTER_FAILED",
    "GRAMMAR_SCOPES",
    "LinterProvider",
    "LinterSession",
    "is_python_document",
]
