"""
Lexer component - Tokenizes arithmetic source text.
"""

from ._impl import tokenize
from .component import run_tokenize
from .models import (
    LexerError,
    LexerValidationError,
    Token,
    TokenizeInput,
    TokenizeOutput,
    TokenKind,
)

__all__ = [
    # Entry points
    "run_tokenize",
    # Core
    "tokenize",
    # Models
    "Token",
    "TokenKind",
    "TokenizeInput",
    "TokenizeOutput",
    "LexerError",
    "LexerValidationError",
]
