"""Literal and trivia parsers.

Every parser takes a Cursor and returns ParseResult[T] | None.

Module Organization:
- escape.py: Quoted literal bodies (text, char, byte text, byte)
- raw.py: Raw string bodies with '#' delimiter runs
- trivia.py: Whitespace and comment skipping, word breaks
- tokens.py: Punctuation and keyword matchers built on trivia skipping
- literal.py: Literal dispatch on the opening delimiter

Public API:
    parse_literal: Parse one literal token into an AST node
    skip_trivia: Skip whitespace and non-doc comments
    optional_trivia: skip_trivia where having nothing to skip succeeds
    decode_*: Decode a literal body positioned after its opening delimiter
"""

from bracelex.syntax.parser.escape import decode_byte, decode_byte_text, decode_char, decode_text
from bracelex.syntax.parser.literal import parse_literal
from bracelex.syntax.parser.raw import RawText, decode_raw_text
from bracelex.syntax.parser.tokens import keyword, punct
from bracelex.syntax.parser.trivia import (
    block_comment,
    classify_comment,
    is_whitespace,
    is_xid_continue,
    optional_trivia,
    skip_trivia,
    skip_whitespace,
    word_break,
)

__all__ = [
    "RawText",
    "block_comment",
    "classify_comment",
    "decode_byte",
    "decode_byte_text",
    "decode_char",
    "decode_raw_text",
    "decode_text",
    "is_whitespace",
    "is_xid_continue",
    "keyword",
    "optional_trivia",
    "parse_literal",
    "punct",
    "skip_trivia",
    "skip_whitespace",
    "word_break",
]
