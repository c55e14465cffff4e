# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Format files in place with ``ruff format``."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path
from typing import Annotated

import typer

from ...core.logging import fail, info, ok
from ...errors import RuffQAError
from ...host.documents import FileDocument
from ...session import FORMATTER_FAILED, LinterSession, is_python_document
from ..shared import (
    EMOJI_OPTION,
    EXECUTABLE_OPTION,
    EXIT_DIAGNOSTICS,
    EXIT_FAILURE,
    EXIT_OK,
    ROOT_OPTION,
    VERBOSE_OPTION,
    CommonOptions,
    prepare,
)

FILES_ARGUMENT = Annotated[
    list[Path],
    typer.Argument(help="Python files to format.", exists=True, dir_okay=False, resolve_path=True),
]
CHECK_OPTION = Annotated[
    bool,
    typer.Option("--check", help="Report files that would change without rewriting them."),
]


def format_command(
    files: FILES_ARGUMENT,
    check: CHECK_OPTION = False,
    root: ROOT_OPTION = Path("."),
    executable: EXECUTABLE_OPTION = None,
    use_emoji: EMOJI_OPTION = True,
    verbose: VERBOSE_OPTION = False,
) -> None:
    """Format files through the analyzer and write the results back."""

    options = CommonOptions(root=root.resolve(), executable=executable, use_emoji=use_emoji, verbose=verbose)
    config, notifier = prepare(options)
    session = LinterSession(config, notifier)
    try:
        changed = asyncio.run(_format_files(session, files, write=not check))
    except RuffQAError as exc:
        fail(f"{FORMATTER_FAILED}: {exc}", use_emoji=use_emoji)
        raise typer.Exit(code=EXIT_FAILURE) from exc

    if not changed:
        ok("All files already formatted", use_emoji=use_emoji)
        raise typer.Exit(code=EXIT_OK)
    verb = "Would reformat" if check else "Reformatted"
    for path in changed:
        info(f"{verb} {path}", use_emoji=use_emoji)
    raise typer.Exit(code=EXIT_DIAGNOSTICS if check else EXIT_OK)


async def _format_files(session: LinterSession, files: Sequence[Path], *, write: bool) -> list[Path]:
    changed: list[Path] = []
    for path in files:
        document = FileDocument(path)
        if not is_python_document(document):
            continue
        await session.formatter.format_document(document)
        if not document.dirty:
            continue
        changed.append(document.path)
        if write:
            document.save()
    return changed


def register(app: typer.Typer) -> None:
    """Attach the format command to ``app``."""

    app.command("format")(format_command)


__all__ = ["format_command", "register"]
