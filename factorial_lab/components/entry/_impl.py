"""
Entry sequence - Functional Core.
"""

from __future__ import annotations


def build_entry_lines(label: str, value: int) -> tuple[str, str]:
    """Return the label line and the decimal value line."""
    return label, str(value)
