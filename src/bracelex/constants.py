"""Shared constants for bracelex.

This module provides centralized configuration constants used across
the cursor, the literal decoders and the trivia skipper. Placing constants
here avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Delimiters: Quote and marker characters recognized by the decoders
- Escape limits: Bounds for hex and brace escapes
- Character tables: Whitespace classification
- Input limits: DoS prevention via size constraints

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Delimiters
    "TEXT_QUOTE",
    "CHAR_QUOTE",
    "RAW_MARKER",
    "BYTE_PREFIX",
    "RAW_PREFIX",
    # Escape limits
    "MAX_UNICODE_ESCAPE_DIGITS",
    "MAX_ASCII_ESCAPE",
    "MAX_CODE_POINT",
    "SURROGATE_RANGE_START",
    "SURROGATE_RANGE_END",
    "HEX_DIGITS",
    # Character tables
    "WHITE_SPACE_CHARS",
    "BIDI_MARKS",
    # Input limits
    "MAX_SOURCE_SIZE",
]

# ============================================================================
# DELIMITERS
# ============================================================================

# Closing delimiter of text and byte-text literals.
TEXT_QUOTE: str = '"'

# Closing delimiter of character and byte literals.
CHAR_QUOTE: str = "'"

# Marker counted on both sides of a raw string body: r##"..."##
RAW_MARKER: str = "#"

# Literal prefixes recognized by the literal dispatcher.
BYTE_PREFIX: str = "b"
RAW_PREFIX: str = "r"

# ============================================================================
# ESCAPE LIMITS
# ============================================================================

# \u{...} accepts 1 to 6 hex digits (enough for U+10FFFF).
MAX_UNICODE_ESCAPE_DIGITS: int = 6

# \xHH in text and character literals must stay within 7-bit ASCII.
MAX_ASCII_ESCAPE: int = 0x7F

# Maximum valid Unicode code point per Unicode Standard.
MAX_CODE_POINT: int = 0x10FFFF

# UTF-16 surrogate code point range (D800-DFFF).
# Surrogates are not scalar values and are rejected by \u{...}.
SURROGATE_RANGE_START: int = 0xD800
SURROGATE_RANGE_END: int = 0xDFFF

# Valid hexadecimal digit characters for escape parsing.
HEX_DIGITS: str = "0123456789abcdefABCDEF"

# ============================================================================
# CHARACTER TABLES
# ============================================================================

# Code points with the Unicode White_Space property (PropList.txt).
# str.isspace() is NOT used: it also accepts the information separators
# U+001C..U+001F, which are not White_Space.
WHITE_SPACE_CHARS: frozenset[str] = frozenset(
    "\u0009\u000a\u000b\u000c\u000d"  # TAB, LF, VT, FF, CR
    "\u0020"  # SPACE
    "\u0085"  # NEXT LINE
    "\u00a0"  # NO-BREAK SPACE
    "\u1680"  # OGHAM SPACE MARK
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028"  # LINE SEPARATOR
    "\u2029"  # PARAGRAPH SEPARATOR
    "\u202f"  # NARROW NO-BREAK SPACE
    "\u205f"  # MEDIUM MATHEMATICAL SPACE
    "\u3000"  # IDEOGRAPHIC SPACE
)

# Left-to-right mark and right-to-left mark. The language's own lexer skips
# them as whitespace even though they are not White_Space.
BIDI_MARKS: frozenset[str] = frozenset("\u200e\u200f")

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum source size in characters accepted by bracelex.decode_literal().
# Cursor-level parsers have no limit; callers bound their own input.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024
