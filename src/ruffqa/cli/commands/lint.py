# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lint (and optionally fix) individual files as if they were open buffers."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path
from typing import Annotated

import typer

from ...core.logging import fail, warn
from ...errors import RuffQAError
from ...host.documents import FileDocument
from ...host.reporting import ConsoleReporter
from ...session import LinterSession, is_python_document
from ..shared import (
    CONFIG_OPTION,
    EMOJI_OPTION,
    EXECUTABLE_OPTION,
    EXIT_FAILURE,
    IGNORE_NOQA_OPTION,
    IGNORE_OPTION,
    INTERACTIVE_OPTION,
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

FILES_ARGUMENT = Annotated[
    list[Path],
    typer.Argument(help="Python files to lint.", exists=True, dir_okay=False, resolve_path=True),
]
FIX_OPTION = Annotated[
    bool,
    typer.Option("--fix", help="Apply the analyzer's fixes and save the files before linting."),
]


def lint_command(
    files: FILES_ARGUMENT,
    fix: FIX_OPTION = False,
    root: ROOT_OPTION = Path("."),
    executable: EXECUTABLE_OPTION = None,
    config_file: CONFIG_OPTION = None,
    select: SELECT_OPTION = None,
    ignore: IGNORE_OPTION = None,
    target_version: TARGET_VERSION_OPTION = None,
    ignore_noqa: IGNORE_NOQA_OPTION = False,
    allow_interactive: INTERACTIVE_OPTION = False,
    as_json: JSON_OPTION = False,
    use_emoji: EMOJI_OPTION = True,
    verbose: VERBOSE_OPTION = False,
) -> None:
    """Lint files through the buffer pipeline and report their diagnostics."""

    options = CommonOptions(
        root=root.resolve(),
        executable=executable,
        config_path=config_file,
        select=select,
        ignore=ignore,
        target_version=target_version,
        ignore_noqa=ignore_noqa,
        allow_interactive=allow_interactive,
        use_emoji=use_emoji,
        verbose=verbose,
    )
    config, notifier = prepare(options)
    session = LinterSession(config, notifier)
    reporter = make_reporter(options)
    try:
        asyncio.run(_lint_files(session, reporter, files, fix=fix))
    except RuffQAError as exc:
        fail(f"`ruff` lint has failed: {exc}", use_emoji=use_emoji)
        raise typer.Exit(code=EXIT_FAILURE) from exc
    raise typer.Exit(code=emit(reporter, as_json=as_json))


async def _lint_files(
    session: LinterSession,
    reporter: ConsoleReporter,
    files: Sequence[Path],
    *,
    fix: bool,
) -> None:
    for path in files:
        document = FileDocument(path)
        if not is_python_document(document):
            warn(f"Skipping non-Python file {path}", use_emoji=reporter.use_emoji)
            continue
        if fix:
            await session.fix(document)
            document.save()
        reporter.set_messages(document.path, await session.lint(document))


def register(app: typer.Typer) -> None:
    """Attach the lint command to ``app``."""

    app.command("lint")(lint_command)


__all__ = ["lint_command", "register"]
