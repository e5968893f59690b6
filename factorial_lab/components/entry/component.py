"""
Entry component - Prints the label and the factorial of the fixed argument.

Shell Layer - handles output and error conversion.

The sequence has two steps: write the label, then compute and write the
value. The label is written even if the computation is rejected.
"""

from __future__ import annotations

import logging

from factorial_lab.components.factorial import (
    FactorialInput,
    FactorialService,
    run_compute,
)

from ._impl import build_entry_lines
from .models import EntryInput, EntryOutput
from .ports import OutputPort

logger = logging.getLogger(__name__)


def run_entry(
    input_data: EntryInput,
    service: FactorialService,
    writer: OutputPort,
) -> EntryOutput:
    """Run the entry sequence against the given writer."""
    writer.write_line(input_data.label)

    result = run_compute(FactorialInput(n=input_data.n), service)
    if not result.success or result.value is None:
        logger.error("Entry sequence aborted after label: factorial(%r) rejected", input_data.n)
        return EntryOutput(
            lines=(input_data.label,),
            errors=result.errors,
            success=False,
        )

    lines = build_entry_lines(input_data.label, result.value)
    writer.write_line(lines[1])

    return EntryOutput(lines=lines, errors=(), success=True)
