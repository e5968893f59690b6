"""
Entry component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol


class OutputPort(Protocol):
    """Line-oriented output interface."""

    def write_line(self, text: str) -> None:
        """Write text followed by a newline."""
        ...
