"""
Lexer component - Source text tokenization.

Shell Layer - converts lexer failures into component outputs.
"""

from __future__ import annotations

import logging

from ._impl import tokenize
from .models import LexerError, LexerValidationError, TokenizeInput, TokenizeOutput

logger = logging.getLogger(__name__)


def run_tokenize(input_data: TokenizeInput) -> TokenizeOutput:
    """Tokenize the input source."""
    try:
        tokens = tokenize(input_data.source)
    except LexerError as e:
        logger.warning("Tokenization failed: %s", e)
        return TokenizeOutput(
            tokens=(),
            errors=(LexerValidationError(code=e.code, message=str(e), column=e.column),),
            success=False,
        )

    logger.debug("Tokenized %d tokens", len(tokens))
    return TokenizeOutput(tokens=tuple(tokens), errors=(), success=True)
