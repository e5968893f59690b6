"""
Factorial component - Recursive factorial of a non-negative integer.
"""

from ._impl import (
    MAX_RECURSIVE_ARGUMENT,
    FactorialService,
    factorial,
    validate_factorial_argument,
)
from .component import run_compute
from .models import (
    FactorialInput,
    FactorialOutput,
    FactorialValidationError,
    InvalidArgumentError,
)

__all__ = [
    # Entry points
    "run_compute",
    # Core
    "factorial",
    "validate_factorial_argument",
    "FactorialService",
    "MAX_RECURSIVE_ARGUMENT",
    # Models
    "FactorialInput",
    "FactorialOutput",
    "FactorialValidationError",
    "InvalidArgumentError",
]
