# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Option declarations and helpers shared by the CLI commands."""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any, Final

import typer

from ..config import Config, ConfigError, load_config
from ..core.logging import configure_logging, fail
from ..core.models import Diagnostic
from ..core.serialization import serialize_diagnostics
from ..host.reporting import ConsoleNotifier, ConsoleReporter
from ..runtime.console.manager import detect_tty, get_console_manager

EXIT_OK: Final[int] = 0
EXIT_DIAGNOSTICS: Final[int] = 1
EXIT_FAILURE: Final[int] = 2

ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", "-r", help="Directory searched for pyproject.toml / .ruffqa.toml.", file_okay=False),
]
EXECUTABLE_OPTION = Annotated[
    str | None,
    typer.Option("--executable", help="Analyzer executable (defaults to 'ruff' on PATH)."),
]
SELECT_OPTION = Annotated[
    list[str] | None,
    typer.Option("--select", help="Rule code or prefix to enable (repeatable)."),
]
IGNORE_OPTION = Annotated[
    list[str] | None,
    typer.Option("--ignore", help="Rule code or prefix to disable (repeatable)."),
]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option("--config", help="Analyzer configuration file passed through to ruff.", dir_okay=False),
]
TARGET_VERSION_OPTION = Annotated[
    str | None,
    typer.Option("--target-version", help="Minimum Python version, e.g. py312."),
]
IGNORE_NOQA_OPTION = Annotated[
    bool,
    typer.Option("--ignore-noqa", help="Ignore '# noqa' suppressions."),
]
INTERACTIVE_OPTION = Annotated[
    bool,
    typer.Option("--allow-interactive", help="Mask IPython magics and introspection before analysis."),
]
JSON_OPTION = Annotated[
    bool,
    typer.Option("--json", help="Emit diagnostics as JSON instead of a table."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
VERBOSE_OPTION = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Show debug logging."),
]


@dataclass(slots=True)
class CommonOptions:
    """Values gathered from the shared options of every command."""

    root: Path
    executable: str | None = None
    config_path: Path | None = None
    select: Sequence[str] | None = None
    ignore: Sequence[str] | None = None
    target_version: str | None = None
    ignore_noqa: bool = False
    allow_interactive: bool = False
    use_emoji: bool = True
    verbose: bool = False

    def overrides(self) -> dict[str, Any]:
        """Return the configuration overrides expressed on the command line."""

        values: dict[str, Any] = {
            "executable": self.executable,
            "config_path": str(self.config_path) if self.config_path is not None else None,
            "select": normalize_cli_values(self.select) or None,
            "ignore": normalize_cli_values(self.ignore) or None,
            "target_version": self.target_version,
            "use_noqa": False if self.ignore_noqa else None,
            "allow_interactive": True if self.allow_interactive else None,
        }
        return {key: value for key, value in values.items() if value is not None}


def normalize_cli_values(values: Sequence[str] | None) -> tuple[str, ...]:
    """Return sanitized CLI values preserving order."""

    if not values:
        return ()
    return tuple(entry.strip() for entry in values if entry and entry.strip())


def prepare(options: CommonOptions) -> tuple[Config, ConsoleNotifier]:
    """Configure logging and load the configuration for ``options``.

    Raises:
        typer.Exit: If the configuration is invalid.
    """

    configure_logging(verbose=options.verbose)
    notifier = ConsoleNotifier(use_emoji=options.use_emoji)
    try:
        config = load_config(options.root, options.overrides())
    except ConfigError as exc:
        fail(str(exc), use_emoji=options.use_emoji)
        raise typer.Exit(code=EXIT_FAILURE) from exc
    return config, notifier


def make_reporter(options: CommonOptions) -> ConsoleReporter:
    """Return a console reporter honouring the presentation options."""

    return ConsoleReporter(use_color=detect_tty(), use_emoji=options.use_emoji)


def emit(reporter: ConsoleReporter, *, as_json: bool) -> int:
    """Render the collected diagnostics and return the process exit code."""

    if as_json:
        _emit_json(reporter.diagnostics)
    else:
        reporter.render()
    return EXIT_DIAGNOSTICS if reporter.has_errors() else EXIT_OK


def _emit_json(diagnostics: Iterable[Diagnostic]) -> None:
    console = get_console_manager().get(color=False, emoji=False)
    console.print_json(json.dumps(serialize_diagnostics(diagnostics)))


__all__ = [
    "CONFIG_OPTION",
    "CommonOptions",
    "EMOJI_OPTION",
    "EXECUTABLE_OPTION",
    "EXIT_DIAGNOSTICS",
    "EXIT_FAILURE",
    "EXIT_OK",
    "IGNORE_NOQA_OPTION",
    "IGNORE_OPTION",
    "INTERACTIVE_OPTION",
    "JSON_OPTION",
    "ROOT_OPTION",
    "SELECT_OPTION",
    "TARGET_VERSION_OPTION",
    "VERBOSE_OPTION",
    "emit",
    "make_reporter",
    "normalize_cli_values",
    "prepare",
]
