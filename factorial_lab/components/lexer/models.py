"""
Lexer component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# --- Tokens ---


class TokenKind(str, Enum):
    NUMBER = "number"
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"


@dataclass(frozen=True)
class Token:
    """A lexed token. Columns are zero-based character offsets."""

    kind: TokenKind
    column: int
    value: float | None = None


# --- Errors ---


class LexerError(ValueError):
    """Raised when source text cannot be tokenized."""

    def __init__(self, code: str, message: str, column: int) -> None:
        super().__init__(message)
        self.code = code
        self.column = column


@dataclass(frozen=True)
class LexerValidationError:
    """Tokenization error."""

    code: str
    message: str
    column: int


# --- Input Models ---


@dataclass(frozen=True)
class TokenizeInput:
    """Input for tokenizing source text."""

    source: str


# --- Output Models ---


@dataclass(frozen=True)
class TokenizeOutput:
    """Output from tokenization."""

    tokens: tuple[Token, ...]
    errors: tuple[LexerValidationError, ...]
    success: bool
