"""
Entry component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from factorial_lab.components.factorial import FactorialValidationError

DEFAULT_LABEL = "factorial value:"
DEFAULT_ARGUMENT = 5


@dataclass(frozen=True)
class EntryInput:
    """Input for the entry sequence."""

    label: str = DEFAULT_LABEL
    n: int = DEFAULT_ARGUMENT


@dataclass(frozen=True)
class EntryOutput:
    """Output from the entry sequence."""

    lines: tuple[str, ...]
    errors: tuple[FactorialValidationError, ...]
    success: bool
