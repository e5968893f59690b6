"""
Lexer component unit tests.
"""

from __future__ import annotations

import pytest

from factorial_lab.components.lexer import (
    LexerError,
    Token,
    TokenizeInput,
    TokenKind,
    run_tokenize,
    tokenize,
)


def kinds(tokens: list[Token]) -> list[TokenKind]:
    return [t.kind for t in tokens]


class TestTokenize:
    """Test the tokenizer core."""

    def test_empty_source(self) -> None:
        assert tokenize("") == []
        assert tokenize("  \n\t ") == []

    def test_integer(self) -> None:
        assert tokenize("120") == [Token(kind=TokenKind.NUMBER, column=0, value=120.0)]

    def test_decimal_forms(self) -> None:
        values = [t.value for t in tokenize("3.5 .5 7.")]
        assert values == [3.5, 0.5, 7.0]

    def test_operators_and_parens(self) -> None:
        assert kinds(tokenize("+-*/()")) == [
            TokenKind.ADD,
            TokenKind.SUBTRACT,
            TokenKind.MULTIPLY,
            TokenKind.DIVIDE,
            TokenKind.LEFT_PAREN,
            TokenKind.RIGHT_PAREN,
        ]

    def test_expression(self) -> None:
        tokens = tokenize("5 * (4 - 1)")

        assert kinds(tokens) == [
            TokenKind.NUMBER,
            TokenKind.MULTIPLY,
            TokenKind.LEFT_PAREN,
            TokenKind.NUMBER,
            TokenKind.SUBTRACT,
            TokenKind.NUMBER,
            TokenKind.RIGHT_PAREN,
        ]
        assert [t.column for t in tokens] == [0, 2, 4, 5, 7, 9, 10]

    def test_number_ends_at_operator(self) -> None:
        tokens = tokenize("2*3")
        assert [t.value for t in tokens] == [2.0, None, 3.0]

    def test_operators_have_no_value(self) -> None:
        assert tokenize("+")[0].value is None


class TestTokenizeErrors:
    """Test the two failure cases."""

    def test_number_with_two_points(self) -> None:
        with pytest.raises(LexerError) as exc_info:
            tokenize("1 + 1.2.3")

        assert exc_info.value.code == "invalid_number"
        assert exc_info.value.column == 4

    def test_lone_point(self) -> None:
        with pytest.raises(LexerError) as exc_info:
            tokenize("2 + .")

        assert exc_info.value.code == "invalid_number"

    def test_undefined_token(self) -> None:
        with pytest.raises(LexerError, match="undefined token 'x' at column 2") as exc_info:
            tokenize("1 x 2")

        assert exc_info.value.code == "undefined_token"
        assert exc_info.value.column == 2

    def test_lexer_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            tokenize("#")


class TestRunTokenize:
    """Test run_tokenize."""

    def test_success(self) -> None:
        result = run_tokenize(TokenizeInput(source="5 * 4"))

        assert result.success is True
        assert result.errors == ()
        assert kinds(list(result.tokens)) == [
            TokenKind.NUMBER,
            TokenKind.MULTIPLY,
            TokenKind.NUMBER,
        ]

    def test_error_is_reported_not_raised(self) -> None:
        result = run_tokenize(TokenizeInput(source="fact(5)"))

        assert result.success is False
        assert result.tokens == ()
        assert len(result.errors) == 1
        assert result.errors[0].code == "undefined_token"
        assert result.errors[0].column == 0

    def test_does_not_write_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        run_tokenize(TokenizeInput(source="1..2"))
        run_tokenize(TokenizeInput(source="1 + 2"))

        assert capsys.readouterr().out == ""
