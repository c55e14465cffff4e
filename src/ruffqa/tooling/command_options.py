# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build analyzer command lines from configuration."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from ..config.models import Config

CHECK_BASE_ARGS: Final[tuple[str, ...]] = ("check", "--quiet", "--output-format=json")
FORMAT_SUBCOMMAND: Final[str] = "format"
QUIET_FLAG: Final[str] = "--quiet"
FIX_ONLY_FLAG: Final[str] = "--fix-only"
IGNORE_NOQA_FLAG: Final[str] = "--ignore-noqa"


@dataclass(frozen=True, slots=True)
class ListOption:
    """Map a configuration list onto a ``--flag=a,b,c`` argument."""

    flag: str
    attribute: str

    def render(self, config: Config) -> str | None:
        values: Sequence[str] = getattr(config, self.attribute)
        if not values:
            return None
        return f"--{self.flag}={','.join(values)}"


_LIST_OPTIONS: Final[tuple[ListOption, ...]] = (
    ListOption("select", "select"),
    ListOption("ignore", "ignore"),
    ListOption("fixable", "fixable"),
    ListOption("unfixable", "unfixable"),
)


def stdin_target(path: Path | str) -> str:
    """Return the target argument used when the buffer is streamed on stdin."""

    return f"--stdin-filename={path}"


def append_check_args(args: list[str], config: Config) -> list[str]:
    """Append the configuration-driven ``check`` options to ``args``.

    Args:
        args: Argument list being assembled; mutated in place.
        config: Active configuration.

    Returns:
        list[str]: ``args`` for call chaining.
    """

    if config.config_path is not None:
        args.append(f"--config={config.config_path}")
    for option in _LIST_OPTIONS:
        rendered = option.render(config)
        if rendered is not None:
            args.append(rendered)
    if not config.use_noqa:
        args.append(IGNORE_NOQA_FLAG)
    if config.target_version:
        args.append(f"--target-version={config.target_version}")
    return args


def build_check_args(config: Config, target: str, *, fix_only: bool = False) -> list[str]:
    """Return the full ``check`` argument list for ``target``.

    Args:
        config: Active configuration.
        target: ``--stdin-filename=<path>`` for buffers or a bare project root.
        fix_only: Request corrected source instead of diagnostics.

    Returns:
        list[str]: Arguments passed to the analyzer executable.
    """

    args = append_check_args([*CHECK_BASE_ARGS, target], config)
    if fix_only:
        args.append(FIX_ONLY_FLAG)
    return args


def build_format_args(path: Path | str) -> list[str]:
    """Return the ``format`` argument list for a buffer streamed on stdin."""

    return [FORMAT_SUBCOMMAND, stdin_target(path), QUIET_FLAG]


__all__ = [
    "CHECK_BASE_ARGS",
    "FIX_ONLY_FLAG",
    "IGNORE_NOQA_FLAG",
    "append_check_args",
    "build_check_args",
    "build_format_args",
    "stdin_target",
]
