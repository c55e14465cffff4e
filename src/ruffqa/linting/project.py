# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Project-wide scanning across every workspace root.

The scanner reads committed disk state for each root and reports through its
own identity on the reporting surface. Open documents belong to the buffer
linter: their diagnostics are excluded from scans, and opening a document
hands authority over by clearing whatever the scanner last reported for it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from enum import Enum
from pathlib import Path

from ..config.models import Config
from ..core.models import Diagnostic
from ..core.runtime.process import run_process
from ..diagnostics.translator import translate
from ..errors import ParseError, ProcessError
from ..filesystem.paths import PathInput, normalize_path
from ..interfaces.reporting import ReportingSurface
from ..parsers.ruff import parse_ruff
from ..tooling.command_options import build_check_args

LOGGER = logging.getLogger(__name__)


class ScanPhase(str, Enum):
    """States of the scanner's re-entrancy guard."""

    IDLE = "idle"
    SCANNING = "scanning"


class ProjectScanner:
    """Scan every workspace root and keep track of files holding scanner diagnostics."""

    def __init__(self, config: Config, surface: ReportingSurface | None = None) -> None:
        """Create a scanner bound to ``config``.

        Args:
            config: Shared configuration, read afresh on each scan.
            surface: Reporting surface for the project-wide identity. May be
                supplied later through :meth:`register`.
        """

        self.config = config
        self._surface = surface
        self._phase = ScanPhase.IDLE
        self._tracked: set[Path] = set()
        self._failed_roots: tuple[Path, ...] = ()

    def register(self, surface: ReportingSurface) -> None:
        """Attach the reporting surface the scanner writes to."""

        self._surface = surface

    @property
    def phase(self) -> ScanPhase:
        """Return the current guard state."""

        return self._phase

    @property
    def is_scanning(self) -> bool:
        """Return ``True`` while a scan is in flight."""

        return self._phase is ScanPhase.SCANNING

    @property
    def tracked_files(self) -> frozenset[Path]:
        """Return the files currently holding scanner-sourced diagnostics."""

        return frozenset(self._tracked)

    @property
    def failed_roots(self) -> tuple[Path, ...]:
        """Return the roots whose analyzer run failed during the last completed scan."""

        return self._failed_roots

    async def scan(self, roots: Sequence[PathInput], open_paths: Iterable[PathInput] = ()) -> None:
        """Scan ``roots`` sequentially and publish the results in one call.

        A request made while another scan is in flight is dropped. Failures
        confined to one root yield no diagnostics for that root and are listed
        in :attr:`failed_roots`; any other failure is logged and leaves the
        previous results and tracked files in place.

        Args:
            roots: Workspace roots to scan.
            open_paths: Paths of documents currently open in the host; their
                diagnostics are left to the buffer linter.
        """

        surface = self._surface
        if surface is None or not self.config.state:
            return
        if self._phase is ScanPhase.SCANNING:
            LOGGER.debug("project scan already in progress; request dropped")
            return

        self._phase = ScanPhase.SCANNING
        try:
            if not roots:
                return
            excluded = {normalize_path(path) for path in open_paths}
            collected: list[Diagnostic] = []
            failed: list[Path] = []
            for root in roots:
                root_path = normalize_path(root)
                try:
                    collected.extend(await self._scan_root(root_path, excluded))
                except (ProcessError, ParseError) as exc:
                    LOGGER.warning("project scan of %s failed: %s", root_path, exc)
                    failed.append(root_path)
            self._failed_roots = tuple(failed)
            surface.set_all_messages(collected, show_project_view=True)
            self._tracked = {diagnostic.file for diagnostic in collected}
            LOGGER.debug("project scan reported %d diagnostic(s) in %d file(s)", len(collected), len(self._tracked))
        except Exception:  # pylint: disable=broad-exception-caught -- scan failures must not escape to the host
            LOGGER.exception("project scan failed")
        finally:
            self._phase = ScanPhase.IDLE

    async def _scan_root(self, root: Path, excluded: set[Path]) -> list[Diagnostic]:
        config = self.config
        args = build_check_args(config, str(root))
        result = await run_process(config.executable, args, options=config.process_options(root))
        result.raise_for_failure()
        raw_diagnostics = parse_ruff(result.stdout)

        classifier = config.classifier()
        diagnostics: list[Diagnostic] = []
        for raw in raw_diagnostics:
            if raw.filename is None:
                continue
            file_path = normalize_path(raw.filename, base_dir=root)
            if file_path in excluded:
                continue
            translated = translate(
                file_path,
                raw,
                0,
                classifier,
                mark_uncategorized=config.mark_uncategorized,
            )
            if translated is not None:
                diagnostics.append(translated)
        return diagnostics

    def clear_file_messages(self, path: PathInput) -> None:
        """Hand ``path`` over to the buffer linter.

        Does nothing unless the scanner currently reports diagnostics for ``path``.

        Args:
            path: Path of the document that was just opened.
        """

        key = normalize_path(path)
        if key not in self._tracked:
            return
        self._tracked.discard(key)
        if self._surface is not None:
            self._surface.set_messages(key, [])

    def clear_all_messages(self) -> None:
        """Remove every scanner-owned diagnostic and forget all tracked files."""

        if self._surface is not None:
            self._surface.clear_messages()
        self._tracked.clear()

    def dispose(self) -> None:
        """Clear scanner output and detach from the reporting surface."""

        self.clear_all_messages()
        self._surface = None


__all__ = ["ProjectScanner", "ScanPhase"]
