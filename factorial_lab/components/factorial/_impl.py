"""
FactorialService - Recursive factorial of a non-negative integer.

Functional Core - pure business logic.
"""

from __future__ import annotations

from .models import FactorialValidationError, InvalidArgumentError

# Largest argument the recursive core accepts through the service layer.
# Keeps call depth well below the default interpreter recursion limit.
MAX_RECURSIVE_ARGUMENT = 500

# --- Core Function ---


def factorial(n: int) -> int:
    """
    Return n! computed by self-recursion.

    0! is 1, and n! is n * (n - 1)! for n > 0.

    Raises:
        InvalidArgumentError: If n is not an int or is negative.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgumentError(f"factorial() requires an int, got {type(n).__name__}")
    if n < 0:
        raise InvalidArgumentError(f"factorial() is undefined for negative values: {n}")

    if n == 0:
        return 1
    return n * factorial(n - 1)


# --- Validation Functions ---


def validate_factorial_argument(
    n: object,
    max_argument: int | None = None,
) -> list[FactorialValidationError]:
    """Validate a factorial argument."""
    errors: list[FactorialValidationError] = []

    if isinstance(n, bool) or not isinstance(n, int):
        errors.append(
            FactorialValidationError(
                code="argument_not_integer",
                message=f"Argument must be an integer, got {type(n).__name__}",
            )
        )
        return errors

    if n < 0:
        errors.append(
            FactorialValidationError(
                code="argument_negative",
                message="Argument must be zero or greater",
            )
        )
    elif max_argument is not None and n > max_argument:
        errors.append(
            FactorialValidationError(
                code="argument_too_large",
                message=f"Argument must be {max_argument} or less",
            )
        )

    return errors


# --- Factorial Service ---


class FactorialService:
    """
    Factorial service.

    Guards the recursive core against arguments that would exhaust the stack.
    """

    def __init__(self, max_argument: int | None = None) -> None:
        """Initialize service. The limit never exceeds MAX_RECURSIVE_ARGUMENT."""
        if max_argument is None:
            max_argument = MAX_RECURSIVE_ARGUMENT
        self._max_argument = min(max_argument, MAX_RECURSIVE_ARGUMENT)

    @property
    def max_argument(self) -> int:
        return self._max_argument

    def compute(self, n: int) -> tuple[int | None, list[FactorialValidationError]]:
        """
        Compute n!.

        Returns:
            Tuple of (value, errors). Value is None if validation fails.
        """
        errors = validate_factorial_argument(n, max_argument=self._max_argument)
        if errors:
            return None, errors

        return factorial(n), []
