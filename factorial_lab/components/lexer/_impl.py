"""
Lexer - Turns arithmetic source text into tokens.

Recognises decimal numbers, the four arithmetic operators and parentheses.
Whitespace separates tokens and is otherwise ignored.

Functional Core - pure business logic.
"""

from __future__ import annotations

from .models import LexerError, Token, TokenKind

SYMBOLS: dict[str, TokenKind] = {
    "+": TokenKind.ADD,
    "-": TokenKind.SUBTRACT,
    "*": TokenKind.MULTIPLY,
    "/": TokenKind.DIVIDE,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
}


def _is_number_char(c: str) -> bool:
    return c == "." or (c.isascii() and c.isdigit())


def _scan_number(source: str, start: int) -> tuple[Token, int]:
    """Scan a run of digits and points starting at start; return the token and the next index."""
    end = start
    while end < len(source) and _is_number_char(source[end]):
        end += 1

    text = source[start:end]
    if text.count(".") > 1 or text == ".":
        raise LexerError(
            code="invalid_number",
            message=f"invalid number {text!r} at column {start}",
            column=start,
        )

    return Token(kind=TokenKind.NUMBER, column=start, value=float(text)), end


def tokenize(source: str) -> list[Token]:
    """
    Tokenize source text.

    Raises:
        LexerError: On a number with more than one decimal point
            (code "invalid_number") or an unknown character
            (code "undefined_token"). Lexing stops at the first error.
    """
    tokens: list[Token] = []
    i = 0

    while i < len(source):
        c = source[i]

        if c.isspace():
            i += 1
            continue

        if _is_number_char(c):
            token, i = _scan_number(source, i)
            tokens.append(token)
            continue

        kind = SYMBOLS.get(c)
        if kind is None:
            raise LexerError(
                code="undefined_token",
                message=f"undefined token {c!r} at column {i}",
                column=i,
            )

        tokens.append(Token(kind=kind, column=i))
        i += 1

    return tokens
