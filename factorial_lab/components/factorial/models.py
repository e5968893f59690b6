"""
Factorial component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

# --- Errors ---


class InvalidArgumentError(ValueError, TypeError):
    """Raised when factorial is called outside its domain."""


@dataclass(frozen=True)
class FactorialValidationError:
    """Factorial argument validation error."""

    code: str
    message: str
    field: str | None = "n"


# --- Input Models ---


@dataclass(frozen=True)
class FactorialInput:
    """Input for computing a factorial."""

    n: int


# --- Output Models ---


@dataclass(frozen=True)
class FactorialOutput:
    """Output from factorial computation."""

    value: int | None
    errors: tuple[FactorialValidationError, ...]
    success: bool
