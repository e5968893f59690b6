"""
Factorial component - Factorial computation.

Shell Layer - converts core results into component outputs.
"""

from __future__ import annotations

import logging

from ._impl import FactorialService
from .models import FactorialInput, FactorialOutput

logger = logging.getLogger(__name__)


def run_compute(
    input_data: FactorialInput,
    service: FactorialService,
) -> FactorialOutput:
    """Compute the factorial of the input argument."""
    value, errors = service.compute(input_data.n)

    if errors:
        logger.warning(
            "Rejected factorial argument %r: %s",
            input_data.n,
            ", ".join(e.code for e in errors),
        )
    else:
        logger.debug("factorial(%d) computed", input_data.n)

    return FactorialOutput(
        value=value,
        errors=tuple(errors),
        success=len(errors) == 0,
    )
