"""Escape decoding for quoted literal bodies.

Four entry points, one per literal kind. Each receives a cursor positioned
just after the opening delimiter and returns the decoded value with a
cursor past the closing delimiter, or None.

    decode_text       "..."   -> str
    decode_char       '.'     -> str (one scalar value)
    decode_byte_text  b"..."  -> bytes
    decode_byte       b'.'    -> int

Supported escape sequences:
    \\n \\r \\t \\\\ \\0 \\' \\"   control and literal characters
    \\xHH                 00-7F in text/char literals, 00-FF in byte literals
    \\u{H..HHHHHH}        1-6 hex digits, text/char literals only
    \\<line end>          line continuation, text and byte-text literals only

Line endings inside a body are normalized: CRLF decodes to LF, a bare CR
is rejected. Any malformed escape fails the whole decode; there is no
partial result.

Error Context:
    Functions store error context on failure via set_parse_error().
    Retrieve with get_last_parse_error() for detailed diagnostics.
"""

from bracelex.constants import (
    CHAR_QUOTE,
    HEX_DIGITS,
    MAX_ASCII_ESCAPE,
    MAX_CODE_POINT,
    MAX_UNICODE_ESCAPE_DIGITS,
    SURROGATE_RANGE_END,
    SURROGATE_RANGE_START,
    TEXT_QUOTE,
    WHITE_SPACE_CHARS,
)
from bracelex.diagnostics import DiagnosticCode
from bracelex.syntax.cursor import Cursor, ParseResult
from bracelex.syntax.failure import clear_parse_error, set_parse_error

__all__ = [
    "decode_byte",
    "decode_byte_text",
    "decode_char",
    "decode_text",
]

# Single-character escapes shared by every literal kind.
_SIMPLE_ESCAPES: dict[str, str] = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    "0": "\0",
    "'": "'",
    '"': '"',
}

# First digit of \xHH in text literals: keeps the value within 7-bit ASCII.
_ASCII_HEX_LEADS: str = "01234567"


def _parse_hex_pair(cursor: Cursor, *, ascii_only: bool) -> tuple[int, Cursor] | None:
    """Parse the two digits of a \\xHH escape.

    Args:
        cursor: Position AFTER the 'x'
        ascii_only: Restrict the first digit to 0-7 (text and char literals)
    """
    digits = cursor.slice_ahead(2)
    leads = _ASCII_HEX_LEADS if ascii_only else HEX_DIGITS
    if len(digits) < 2 or digits[0] not in leads or digits[1] not in HEX_DIGITS:
        upper = f"{MAX_ASCII_ESCAPE:02X}" if ascii_only else "FF"
        set_parse_error(
            DiagnosticCode.INVALID_HEX_ESCAPE,
            f"Invalid hex escape (expected 2 hex digits in 00-{upper})",
            cursor.pos,
            ("0-9", "a-f", "A-F"),
        )
        return None
    return (int(digits, 16), cursor.advance(2))


def _parse_unicode_escape(cursor: Cursor) -> tuple[str, Cursor] | None:
    """Parse the braced part of a \\u{...} escape.

    Digits are read one at a time until the closing brace. A seventh digit,
    an empty pair of braces, or a missing brace fails.

    Args:
        cursor: Position AFTER the 'u'
    """
    opened = cursor.expect("{")
    if opened is None:
        set_parse_error(
            DiagnosticCode.INVALID_UNICODE_ESCAPE,
            "Invalid Unicode escape (expected '{' after \\u)",
            cursor.pos,
            ("{",),
        )
        return None

    start = opened
    cursor = opened
    count = 0
    while not cursor.is_eof:
        ch = cursor.current
        if ch == "}" and count > 0:
            break
        if ch not in HEX_DIGITS or count == MAX_UNICODE_ESCAPE_DIGITS:
            set_parse_error(
                DiagnosticCode.INVALID_UNICODE_ESCAPE,
                f"Invalid Unicode escape (expected 1 to {MAX_UNICODE_ESCAPE_DIGITS} "
                "hex digits followed by '}')",
                cursor.pos,
                ("0-9", "a-f", "A-F", "}"),
            )
            return None
        count += 1
        cursor = cursor.advance()
    else:
        set_parse_error(
            DiagnosticCode.INVALID_UNICODE_ESCAPE,
            "Unexpected EOF in Unicode escape",
            cursor.pos,
            ("}",),
        )
        return None

    hex_digits = start.slice_to(cursor.pos)
    code_point = int(hex_digits, 16)
    if code_point > MAX_CODE_POINT:
        set_parse_error(
            DiagnosticCode.INVALID_CODE_POINT,
            f"Invalid Unicode code point: U+{hex_digits.upper()} (max U+10FFFF)",
            start.pos,
        )
        return None
    if SURROGATE_RANGE_START <= code_point <= SURROGATE_RANGE_END:
        set_parse_error(
            DiagnosticCode.INVALID_CODE_POINT,
            f"Invalid surrogate code point: U+{hex_digits.upper()} (surrogates not allowed)",
            start.pos,
        )
        return None
    return (chr(code_point), cursor.advance())  # Skip closing }


def _parse_text_escape(cursor: Cursor) -> tuple[str, Cursor] | None:
    """Parse escape sequence after backslash in a text or char literal.

    Args:
        cursor: Position AFTER the backslash

    Returns:
        (escaped_char, new_cursor) on success, None on invalid escape
    """
    if cursor.is_eof:
        set_parse_error(
            DiagnosticCode.UNTERMINATED_LITERAL, "Unexpected EOF in escape sequence", cursor.pos
        )
        return None

    escape_ch = cursor.current
    if escape_ch in _SIMPLE_ESCAPES:
        return (_SIMPLE_ESCAPES[escape_ch], cursor.advance())
    if escape_ch == "x":
        pair = _parse_hex_pair(cursor.advance(), ascii_only=True)
        if pair is None:
            return None
        value, cursor = pair
        return (chr(value), cursor)
    if escape_ch == "u":
        return _parse_unicode_escape(cursor.advance())

    set_parse_error(
        DiagnosticCode.INVALID_ESCAPE, f"Invalid escape sequence: \\{escape_ch}", cursor.pos
    )
    return None


def _parse_byte_escape(cursor: Cursor) -> tuple[int, Cursor] | None:
    """Parse escape sequence after backslash in a byte or byte-text literal.

    Same as the text escapes minus \\u{...}, with \\xHH covering 00-FF.

    Args:
        cursor: Position AFTER the backslash
    """
    if cursor.is_eof:
        set_parse_error(
            DiagnosticCode.UNTERMINATED_LITERAL, "Unexpected EOF in escape sequence", cursor.pos
        )
        return None

    escape_ch = cursor.current
    if escape_ch in _SIMPLE_ESCAPES:
        return (ord(_SIMPLE_ESCAPES[escape_ch]), cursor.advance())
    if escape_ch == "x":
        return _parse_hex_pair(cursor.advance(), ascii_only=False)

    set_parse_error(
        DiagnosticCode.INVALID_ESCAPE,
        f"Invalid escape sequence in byte literal: \\{escape_ch}",
        cursor.pos,
    )
    return None


def _is_line_end(cursor: Cursor) -> bool:
    return not cursor.is_eof and cursor.current in ("\n", "\r")


def _skip_line_continuation(cursor: Cursor) -> Cursor:
    """Skip the line ending after a backslash and all leading whitespace.

    The line ending itself is whitespace, so one loop covers both.
    """
    while not cursor.is_eof and cursor.current in WHITE_SPACE_CHARS:
        cursor = cursor.advance()
    return cursor


def _bare_carriage_return(cursor: Cursor) -> None:
    set_parse_error(
        DiagnosticCode.BARE_CARRIAGE_RETURN,
        "Bare carriage return in literal (expected CRLF)",
        cursor.pos,
        ("\n",),
    )


def _close_single(cursor: Cursor, *, allow_eof: bool) -> Cursor | None:
    """Require the closing quote right after a single-value literal."""
    if cursor.is_eof:
        if allow_eof:
            return cursor
        set_parse_error(
            DiagnosticCode.UNTERMINATED_LITERAL,
            "Unterminated literal",
            cursor.pos,
            (CHAR_QUOTE,),
        )
        return None
    if cursor.current == CHAR_QUOTE:
        return cursor.advance()
    set_parse_error(
        DiagnosticCode.UNCLOSED_CHAR_LITERAL,
        f"Expected closing quote after single value, found {cursor.current!r}",
        cursor.pos,
        (CHAR_QUOTE,),
    )
    return None


def decode_text(cursor: Cursor) -> ParseResult[str] | None:
    """Decode a text literal body up to and including the closing '"'.

    Examples:
        hello"           → "hello"
        tab\\there"       → "tab<TAB>here"
        \\u{1F600}"       → emoji character
        a\\<LF>    b"     → "ab" (line continuation)

    Args:
        cursor: Position just after the opening quote

    Returns:
        ParseResult(text, cursor past closing quote), or None
    """
    clear_parse_error()

    chars: list[str] = []
    while not cursor.is_eof:
        ch = cursor.current

        if ch == TEXT_QUOTE:
            return ParseResult("".join(chars), cursor.advance())

        if ch == "\r":
            if cursor.peek(1) != "\n":
                _bare_carriage_return(cursor)
                return None
            chars.append("\n")
            cursor = cursor.advance(2)

        elif ch == "\\":
            cursor = cursor.advance()
            if _is_line_end(cursor):
                cursor = _skip_line_continuation(cursor)
                continue
            escape = _parse_text_escape(cursor)
            if escape is None:
                return None
            escaped_char, cursor = escape
            chars.append(escaped_char)

        else:
            chars.append(ch)
            cursor = cursor.advance()

    set_parse_error(
        DiagnosticCode.UNTERMINATED_LITERAL,
        "Unterminated text literal",
        cursor.pos,
        (TEXT_QUOTE,),
    )
    return None


def decode_byte_text(cursor: Cursor) -> ParseResult[bytes] | None:
    """Decode a byte-text literal body up to and including the closing '"'.

    Unescaped characters must be ASCII; anything from U+0080 up must be
    written as a \\xHH escape.

    Examples:
        abc"        → b"abc"
        \\xEF\\x00"   → b"\\xef\\x00"
        é"          → None (non-ASCII)

    Args:
        cursor: Position just after the opening quote

    Returns:
        ParseResult(bytes, cursor past closing quote), or None
    """
    clear_parse_error()

    data = bytearray()
    while not cursor.is_eof:
        ch = cursor.current

        if ch == TEXT_QUOTE:
            return ParseResult(bytes(data), cursor.advance())

        if ch == "\r":
            if cursor.peek(1) != "\n":
                _bare_carriage_return(cursor)
                return None
            data.append(0x0A)
            cursor = cursor.advance(2)

        elif ch == "\\":
            cursor = cursor.advance()
            if _is_line_end(cursor):
                cursor = _skip_line_continuation(cursor)
                continue
            escape = _parse_byte_escape(cursor)
            if escape is None:
                return None
            byte, cursor = escape
            data.append(byte)

        elif ord(ch) > MAX_ASCII_ESCAPE:
            set_parse_error(
                DiagnosticCode.NON_ASCII_BYTE,
                f"Non-ASCII character {ch!r} in byte literal",
                cursor.pos,
            )
            return None

        else:
            data.append(ord(ch))
            cursor = cursor.advance()

    set_parse_error(
        DiagnosticCode.UNTERMINATED_LITERAL,
        "Unterminated byte-text literal",
        cursor.pos,
        (TEXT_QUOTE,),
    )
    return None


def decode_char(cursor: Cursor, *, allow_eof: bool = True) -> ParseResult[str] | None:
    """Decode a character literal body: one scalar value then "'".

    Line continuation does not apply to character literals. CRLF decodes to LF
    and a bare CR fails, as in text literals.

    Args:
        cursor: Position just after the opening quote
        allow_eof: Accept end of input in place of the closing quote

    Returns:
        ParseResult(char, cursor past closing quote), or None.
        "ab'" fails: a second unit before the delimiter.
    """
    clear_parse_error()

    if cursor.is_eof:
        set_parse_error(
            DiagnosticCode.UNTERMINATED_LITERAL, "Empty character literal", cursor.pos
        )
        return None

    ch = cursor.current
    if ch == "\\":
        escape = _parse_text_escape(cursor.advance())
        if escape is None:
            return None
        value, cursor = escape
    elif ch == "\r":
        if cursor.peek(1) != "\n":
            _bare_carriage_return(cursor)
            return None
        value, cursor = "\n", cursor.advance(2)
    else:
        value, cursor = ch, cursor.advance()

    closed = _close_single(cursor, allow_eof=allow_eof)
    if closed is None:
        return None
    return ParseResult(value, closed)


def decode_byte(cursor: Cursor, *, allow_eof: bool = True) -> ParseResult[int] | None:
    """Decode a byte literal body: one byte value then "'".

    Args:
        cursor: Position just after the opening quote
        allow_eof: Accept end of input in place of the closing quote

    Returns:
        ParseResult(byte value 0-255, cursor past closing quote), or None
    """
    clear_parse_error()

    if cursor.is_eof:
        set_parse_error(DiagnosticCode.UNTERMINATED_LITERAL, "Empty byte literal", cursor.pos)
        return None

    ch = cursor.current
    if ch == "\\":
        escape = _parse_byte_escape(cursor.advance())
        if escape is None:
            return None
        value, cursor = escape
    elif ch == "\r":
        if cursor.peek(1) != "\n":
            _bare_carriage_return(cursor)
            return None
        value, cursor = 0x0A, cursor.advance(2)
    elif ord(ch) > MAX_ASCII_ESCAPE:
        set_parse_error(
            DiagnosticCode.NON_ASCII_BYTE,
            f"Non-ASCII character {ch!r} in byte literal",
            cursor.pos,
        )
        return None
    else:
        value, cursor = ord(ch), cursor.advance()

    closed = _close_single(cursor, allow_eof=allow_eof)
    if closed is None:
        return None
    return ParseResult(value, closed)
