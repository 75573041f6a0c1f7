"""Literal decoding and trivia skipping package.

Provides the immutable cursor, the literal AST nodes, the cursor-level
parsers that tokenizers thread through their own grammar rules, and the
string-level decode() entry point.

Python 3.13+.
"""

import logging

from bracelex.constants import MAX_SOURCE_SIZE
from bracelex.diagnostics import DiagnosticCode, ErrorTemplate, LiteralSyntaxError

from .ast import (
    ByteLiteral,
    ByteTextLiteral,
    CharLiteral,
    Literal,
    RawTextLiteral,
    Span,
    TextLiteral,
)
from .cursor import Cursor, ParseResult
from .failure import ParseErrorContext, clear_parse_error, get_last_parse_error
from .parser import optional_trivia, parse_literal, skip_trivia

__all__ = [
    "ByteLiteral",
    "ByteTextLiteral",
    "CharLiteral",
    "Cursor",
    "Literal",
    "ParseErrorContext",
    "ParseResult",
    "RawTextLiteral",
    "Span",
    "TextLiteral",
    "clear_parse_error",
    "decode",
    "get_last_parse_error",
    "parse_literal",
    "skip_trivia",
]

logger = logging.getLogger(__name__)


def decode(source: str) -> Literal:
    """Decode source text holding exactly one literal token.

    Leading and trailing whitespace and comments are allowed.

    Args:
        source: Literal source, delimiters included

    Returns:
        The literal AST node

    Raises:
        LiteralSyntaxError: If source is not exactly one well-formed literal.
            The diagnostic carries the failure code and line/column.
        ValueError: If source exceeds MAX_SOURCE_SIZE characters

    Example:
        >>> from bracelex.syntax import decode
        >>> decode('"caf\\\\u{e9}"').value
        'café'
        >>> decode("r#\\"a \\"quoted\\" b\\"#").hashes
        1
    """
    if len(source) > MAX_SOURCE_SIZE:
        msg = f"Source exceeds maximum size ({len(source)} > {MAX_SOURCE_SIZE} characters)"
        raise ValueError(msg)

    result = parse_literal(Cursor(source, 0))
    if result is None:
        context = get_last_parse_error() or ParseErrorContext(
            DiagnosticCode.UNKNOWN_LITERAL, "Expected a literal", 0
        )
        logger.debug("Literal decode failed at %d: %s", context.position, context.message)
        raise LiteralSyntaxError(ErrorTemplate.literal_syntax_error(context, source))

    trivia = optional_trivia(result.cursor)
    if trivia is None:
        context = get_last_parse_error() or ParseErrorContext(
            DiagnosticCode.UNTERMINATED_BLOCK_COMMENT, "Unterminated block comment", result.cursor.pos
        )
        logger.debug("Unterminated block comment after literal at %d", context.position)
        raise LiteralSyntaxError(ErrorTemplate.literal_syntax_error(context, source))

    rest = trivia.cursor
    if not rest.is_eof:
        context = ParseErrorContext(
            DiagnosticCode.TRAILING_INPUT,
            f"Unexpected input after literal: {rest.current!r}",
            rest.pos,
        )
        logger.debug("Trailing input after literal at %d", rest.pos)
        raise LiteralSyntaxError(ErrorTemplate.literal_syntax_error(context, source))

    return result.value
