"""
Entry component - Program entry sequence.
"""

from ._impl import build_entry_lines
from .component import run_entry
from .models import DEFAULT_ARGUMENT, DEFAULT_LABEL, EntryInput, EntryOutput
from .ports import OutputPort

__all__ = [
    # Entry points
    "run_entry",
    # Core
    "build_entry_lines",
    # Models
    "EntryInput",
    "EntryOutput",
    "DEFAULT_LABEL",
    "DEFAULT_ARGUMENT",
    # Ports
    "OutputPort",
]
