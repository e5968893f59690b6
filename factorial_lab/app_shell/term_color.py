"""
Terminal colours for diagnostic output.

Colours are ANSI SGR codes; the reset sequence restores the default style.
"""

from __future__ import annotations

import logging
from enum import IntEnum

RESET = "\x1b[0m"


class Color(IntEnum):
    RED = 91
    GREEN = 92
    YELLOW = 93
    BLUE = 94


LEVEL_COLORS: dict[int, Color] = {
    logging.DEBUG: Color.BLUE,
    logging.INFO: Color.GREEN,
    logging.WARNING: Color.YELLOW,
    logging.ERROR: Color.RED,
    logging.CRITICAL: Color.RED,
}


def colored(text: str, color: Color) -> str:
    """Wrap text in the escape codes for color."""
    return f"\x1b[{int(color)}m{text}{RESET}"


class ColorFormatter(logging.Formatter):
    """Formatter that colours the level name when enabled."""

    def __init__(self, fmt: str | None = None, use_color: bool = True) -> None:
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_color:
            return super().format(record)

        color = LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)

        original = record.levelname
        record.levelname = colored(original, color)
        try:
            return super().format(record)
        finally:
            record.levelname = original
