# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the ruffqa integration layer."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.runtime.process import DEFAULT_MAX_OUTPUT_BYTES, DEFAULT_TIMEOUT, ProcessOptions
from ..core.severity import (
    DEFAULT_ERROR_PREFIXES,
    DEFAULT_INFO_PREFIXES,
    DEFAULT_WARNING_PREFIXES,
    SeverityClassifier,
    SeverityRuleSet,
)
from ..errors import RuffQAError

DEFAULT_EXECUTABLE: Final[str] = "ruff"
_LIST_SEPARATOR: Final[str] = ","


class ConfigError(RuffQAError):
    """Raised when configuration input is invalid."""


def _split_codes(value: Any) -> Any:
    """Accept either a sequence of codes or a comma separated string.

    Args:
        value: Raw value supplied by a configuration source.

    Returns:
        Any: Tuple of stripped, non-empty entries when ``value`` is a string or
        iterable of strings; otherwise ``value`` unchanged for pydantic to reject.
    """

    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split(_LIST_SEPARATOR) if part.strip())
    if isinstance(value, Iterable):
        return tuple(str(part).strip() for part in value if str(part).strip())
    return value


class SeverityConfig(BaseModel):
    """Code prefixes assigned to each severity."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    error: tuple[str, ...] = DEFAULT_ERROR_PREFIXES
    warning: tuple[str, ...] = DEFAULT_WARNING_PREFIXES
    info: tuple[str, ...] = DEFAULT_INFO_PREFIXES

    @field_validator("error", "warning", "info", mode="before")
    @classmethod
    def _coerce_lists(cls, value: Any) -> Any:
        """Accept comma separated prefix strings."""

        return _split_codes(value)

    def rule_set(self) -> SeverityRuleSet:
        """Return the immutable rule set described by this section."""

        return SeverityRuleSet.from_lists(error=self.error, warning=self.warning, info=self.info)


class ExecutionConfig(BaseModel):
    """Resource limits applied to every analyzer invocation."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    max_output_bytes: int = Field(default=DEFAULT_MAX_OUTPUT_BYTES, gt=0)


class Config(BaseModel):
    """Top-level configuration consumed by the linters, scanner, and formatter."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    state: bool = True
    executable: str = DEFAULT_EXECUTABLE
    config_path: Path | None = None
    target_version: str | None = None
    use_noqa: bool = True
    mark_uncategorized: bool = True
    allow_interactive: bool = False
    select: tuple[str, ...] = ()
    ignore: tuple[str, ...] = ()
    fixable: tuple[str, ...] = ()
    unfixable: tuple[str, ...] = ()
    severity: SeverityConfig = Field(default_factory=SeverityConfig)
    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)

    @field_validator("select", "ignore", "fixable", "unfixable", mode="before")
    @classmethod
    def _coerce_lists(cls, value: Any) -> Any:
        """Accept comma separated code strings."""

        return _split_codes(value)

    @field_validator("target_version", mode="before")
    @classmethod
    def _blank_target_version(cls, value: Any) -> Any:
        """Treat an empty target version as unset."""

        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("executable")
    @classmethod
    def _require_executable(cls, value: str) -> str:
        """Reject blank executables."""

        if not value.strip():
            raise ValueError("executable must not be empty")
        return value.strip()

    def classifier(self) -> SeverityClassifier:
        """Return a classifier built from the configured severity prefixes."""

        return SeverityClassifier(self.severity.rule_set())

    def process_options(self, cwd: Path | None) -> ProcessOptions:
        """Return process options rooted at ``cwd`` honouring the execution limits.

        Args:
            cwd: Working directory for the analyzer invocation.

        Returns:
            ProcessOptions: Options passed to :func:`ruffqa.core.runtime.process.run_process`.
        """

        return ProcessOptions(
            cwd=cwd,
            timeout=self.execution.timeout,
            max_output_bytes=self.execution.max_output_bytes,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible representation of the configuration."""

        return self.model_dump(mode="json")


__all__ = [
    "Config",
    "ConfigError",
    "DEFAULT_EXECUTABLE",
    "ExecutionConfig",
    "SeverityConfig",
]
