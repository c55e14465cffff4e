# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and the prefix-cascade classifier."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Final

CodePredicate = Callable[[str], bool]


class Severity(str, Enum):
    """Severity levels understood by the reporting surface."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Classification(str, Enum):
    """Outcome of classifying a diagnostic code against the configured prefixes."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    UNMATCHED = "unmatched"

    def to_severity(self, default: Severity = Severity.ERROR) -> Severity:
        """Return the reporting severity for this classification.

        Args:
            default: Severity used when the code matched no configured prefix.

        Returns:
            Severity: Matching severity, or ``default`` for ``UNMATCHED``.
        """

        if self is Classification.UNMATCHED:
            return default
        return Severity(self.value)


DEFAULT_ERROR_PREFIXES: Final[tuple[str, ...]] = ("E", "F")
DEFAULT_WARNING_PREFIXES: Final[tuple[str, ...]] = ("W",)
DEFAULT_INFO_PREFIXES: Final[tuple[str, ...]] = ()


@dataclass(frozen=True, slots=True)
class SeverityRuleSet:
    """Three independently configured lists of code prefixes."""

    error: tuple[str, ...] = DEFAULT_ERROR_PREFIXES
    warning: tuple[str, ...] = DEFAULT_WARNING_PREFIXES
    info: tuple[str, ...] = DEFAULT_INFO_PREFIXES

    @classmethod
    def from_lists(
        cls,
        *,
        error: Iterable[str] = (),
        warning: Iterable[str] = (),
        info: Iterable[str] = (),
    ) -> SeverityRuleSet:
        """Build a rule set from arbitrary iterables, dropping blank prefixes.

        Args:
            error: Prefixes classified as errors.
            warning: Prefixes classified as warnings.
            info: Prefixes classified as informational.

        Returns:
            SeverityRuleSet: Immutable rule set.
        """

        return cls(
            error=_clean_prefixes(error),
            warning=_clean_prefixes(warning),
            info=_clean_prefixes(info),
        )


def _clean_prefixes(prefixes: Iterable[str]) -> tuple[str, ...]:
    return tuple(prefix.strip() for prefix in prefixes if prefix and prefix.strip())


def prefix_matcher(prefixes: Iterable[str]) -> CodePredicate:
    """Return a predicate testing whether a code starts with any of ``prefixes``.

    Args:
        prefixes: Code prefixes such as ``"E"`` or ``"PLR09"``.

    Returns:
        CodePredicate: Callable returning ``True`` for matching codes.
    """

    candidates = tuple(prefixes)
    return _PrefixPredicate(candidates)


@dataclass(frozen=True, slots=True)
class _PrefixPredicate:
    prefixes: tuple[str, ...]

    def __call__(self, code: str) -> bool:
        return any(code.startswith(prefix) for prefix in self.prefixes)


@dataclass(slots=True)
class SeverityClassifier:
    """Classify diagnostic codes through the error → warning → info cascade."""

    rules: SeverityRuleSet = field(default_factory=SeverityRuleSet)
    _cascade: tuple[tuple[CodePredicate, Classification], ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._cascade = (
            (prefix_matcher(self.rules.error), Classification.ERROR),
            (prefix_matcher(self.rules.warning), Classification.WARNING),
            (prefix_matcher(self.rules.info), Classification.INFO),
        )

    def classify(self, code: str) -> Classification:
        """Return the classification for ``code``.

        Args:
            code: Diagnostic code reported by the analyzer.

        Returns:
            Classification: First matching severity in priority order, otherwise
            :attr:`Classification.UNMATCHED`.
        """

        for predicate, classification in self._cascade:
            if predicate(code):
                return classification
        return Classification.UNMATCHED


__all__ = [
    "Classification",
    "CodePredicate",
    "DEFAULT_ERROR_PREFIXES",
    "DEFAULT_INFO_PREFIXES",
    "DEFAULT_WARNING_PREFIXES",
    "Severity",
    "SeverityClassifier",
    "SeverityRuleSet",
    "prefix_matcher",
]
