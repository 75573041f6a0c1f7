"""Literal token dispatch.

Recognizes the opening delimiter of a literal, hands the body to the
matching decoder and wraps the value in an AST node with its span:

    "..."         decode_text       TextLiteral
    '.'           decode_char       CharLiteral
    b"..."        decode_byte_text  ByteTextLiteral
    b'.'          decode_byte       ByteLiteral
    r#*"..."#*    decode_raw_text   RawTextLiteral
"""

import logging

from bracelex.constants import BYTE_PREFIX, CHAR_QUOTE, RAW_MARKER, RAW_PREFIX, TEXT_QUOTE
from bracelex.diagnostics import DiagnosticCode
from bracelex.syntax.ast import (
    ByteLiteral,
    ByteTextLiteral,
    CharLiteral,
    Literal,
    RawTextLiteral,
    Span,
    TextLiteral,
)
from bracelex.syntax.cursor import Cursor, ParseResult
from bracelex.syntax.failure import get_last_parse_error, set_parse_error
from bracelex.syntax.parser.escape import decode_byte, decode_byte_text, decode_char, decode_text
from bracelex.syntax.parser.raw import decode_raw_text
from bracelex.syntax.parser.trivia import optional_trivia

__all__ = ["parse_literal"]

logger = logging.getLogger(__name__)


def _decode_at(cursor: Cursor) -> ParseResult[Literal] | None:
    """Dispatch on the opening delimiter at the cursor (no trivia skipping)."""
    start = cursor.pos

    if cursor.starts_with(TEXT_QUOTE):
        text = decode_text(cursor.advance())
        if text is None:
            return None
        span = Span(start, text.cursor.pos)
        return ParseResult(TextLiteral(text.value, span), text.cursor)

    if cursor.starts_with(CHAR_QUOTE):
        char = decode_char(cursor.advance(), allow_eof=False)
        if char is None:
            return None
        span = Span(start, char.cursor.pos)
        return ParseResult(CharLiteral(char.value, span), char.cursor)

    if cursor.starts_with(BYTE_PREFIX + TEXT_QUOTE):
        data = decode_byte_text(cursor.advance(2))
        if data is None:
            return None
        span = Span(start, data.cursor.pos)
        return ParseResult(ByteTextLiteral(data.value, span), data.cursor)

    if cursor.starts_with(BYTE_PREFIX + CHAR_QUOTE):
        byte = decode_byte(cursor.advance(2), allow_eof=False)
        if byte is None:
            return None
        span = Span(start, byte.cursor.pos)
        return ParseResult(ByteLiteral(byte.value, span), byte.cursor)

    if cursor.starts_with(RAW_PREFIX + RAW_MARKER) or cursor.starts_with(RAW_PREFIX + TEXT_QUOTE):
        raw = decode_raw_text(cursor.advance())
        if raw is None:
            return None
        span = Span(start, raw.cursor.pos)
        node = RawTextLiteral(raw.value.text, raw.value.hashes, span)
        return ParseResult(node, raw.cursor)

    set_parse_error(
        DiagnosticCode.UNKNOWN_LITERAL,
        "Expected a literal",
        start,
        (TEXT_QUOTE, CHAR_QUOTE, 'b"', "b'", 'r"', "r#"),
    )
    return None


def parse_literal(cursor: Cursor) -> ParseResult[Literal] | None:
    """Parse one literal token, skipping leading trivia.

    Character and byte literals must be closed by "'" here; end of input
    in place of the quote is a failure.

    Example:
        >>> result = parse_literal(Cursor('  b"\\\\x7f"', 0))
        >>> result.value
        ByteTextLiteral(value=b'\\x7f', span=Span(start=2, end=10))

    Args:
        cursor: Current position in source

    Returns:
        ParseResult(literal node, cursor past the token), or None
    """
    trivia = optional_trivia(cursor)
    if trivia is None:
        logger.debug("Unterminated block comment before literal at %d", cursor.pos)
        return None
    cursor = trivia.cursor

    result = _decode_at(cursor)
    if result is None:
        error = get_last_parse_error()
        logger.debug(
            "No literal at position %d: %s",
            cursor.pos,
            error.message if error else "unknown failure",
        )
        return None

    logger.debug("Parsed %s literal at %d-%d", result.value.kind, cursor.pos, result.cursor.pos)
    return result
