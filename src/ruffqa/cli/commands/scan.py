# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Project-wide scan across one or more workspace roots."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer

from ...core.logging import fail
from ...session import LinterSession
from ..shared import (
    CONFIG_OPTION,
    EMOJI_OPTION,
    EXECUTABLE_OPTION,
    EXIT_FAILURE,
    IGNORE_NOQA_OPTION,
    IGNORE_OPTION,
    JSON_OPTION,
    ROOT_OPTION,
    SELECT_OPTION,
    TARGET_VERSION_OPTION,
    VERBOSE_OPTION,
    CommonOptions,
    emit,
    make_reporter,
    prepare,
)

ROOTS_ARGUMENT = Annotated[
    list[Path] | None,
    typer.Argument(help="Workspace roots to scan (defaults to the current directory).", file_okay=False),
]
OPEN_OPTION = Annotated[
    list[Path] | None,
    typer.Option("--open", help="Path treated as an open document and excluded from results (repeatable)."),
]


def scan_command(
    roots: ROOTS_ARGUMENT = None,
    open_paths: OPEN_OPTION = None,
    root: ROOT_OPTION = Path("."),
    executable: EXECUTABLE_OPTION = None,
    config_file: CONFIG_OPTION = None,
    select: SELECT_OPTION = None,
    ignore: IGNORE_OPTION = None,
    target_version: TARGET_VERSION_OPTION = None,
    ignore_noqa: IGNORE_NOQA_OPTION = False,
    as_json: JSON_OPTION = False,
    use_emoji: EMOJI_OPTION = True,
    verbose: VERBOSE_OPTION = False,
) -> None:
    """Scan every root on disk and report the diagnostics in one view."""

    options = CommonOptions(
        root=root.resolve(),
        executable=executable,
        config_path=config_file,
        select=select,
        ignore=ignore,
        target_version=target_version,
        ignore_noqa=ignore_noqa,
        use_emoji=use_emoji,
        verbose=verbose,
    )
    config, notifier = prepare(options)
    reporter = make_reporter(options)
    session = LinterSession(config, notifier, project_surface=reporter)
    scan_roots = [path.resolve() for path in roots] if roots else [Path.cwd()]
    asyncio.run(session.scan(scan_roots, open_paths or ()))
    code = emit(reporter, as_json=as_json)
    failed_roots = session.scanner.failed_roots
    if failed_roots:
        listed = ", ".join(str(path) for path in failed_roots)
        fail(f"Analyzer failed for {listed}", use_emoji=options.use_emoji)
        raise typer.Exit(code=EXIT_FAILURE)
    raise typer.Exit(code=code)


def register(app: typer.Typer) -> None:
    """Attach the scan command to ``app``."""

    app.command("scan")(scan_command)


__all__ = ["register", "scan_command"]
