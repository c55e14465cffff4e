# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration inspection commands."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from ...session import LinterSession
from ..shared import (
    EMOJI_OPTION,
    EXIT_FAILURE,
    ROOT_OPTION,
    VERBOSE_OPTION,
    CommonOptions,
    prepare,
)


def config_path_command(
    root: ROOT_OPTION = Path("."),
    use_emoji: EMOJI_OPTION = True,
    verbose: VERBOSE_OPTION = False,
) -> None:
    """Print the analyzer's user-level configuration file for this platform."""

    config, notifier = prepare(CommonOptions(root=root.resolve(), use_emoji=use_emoji, verbose=verbose))
    path = LinterSession(config, notifier).default_config_path()
    if path is None:
        raise typer.Exit(code=EXIT_FAILURE)
    typer.echo(str(path))


def show_config_command(
    root: ROOT_OPTION = Path("."),
    use_emoji: EMOJI_OPTION = True,
    verbose: VERBOSE_OPTION = False,
) -> None:
    """Print the effective configuration as JSON."""

    config, _ = prepare(CommonOptions(root=root.resolve(), use_emoji=use_emoji, verbose=verbose))
    typer.echo(json.dumps(config.to_dict(), indent=2, sort_keys=True))


def register(app: typer.Typer) -> None:
    """Attach the configuration commands to ``app``."""

    app.command("config-path")(config_path_command)
    app.command("show-config")(show_config_command)


__all__ = ["config_path_command", "register", "show_config_command"]
