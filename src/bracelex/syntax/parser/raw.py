"""Raw string scanning.

A raw string opens with a run of n '#' markers and a '"', and closes at
the first '"' followed by n markers. The body is copied verbatim: no
escape processing, bare carriage returns are dropped.

    r##"a "# b"##   body 'a "# b', n = 2
"""

from dataclasses import dataclass

from bracelex.constants import RAW_MARKER, TEXT_QUOTE
from bracelex.diagnostics import DiagnosticCode
from bracelex.syntax.cursor import Cursor, ParseResult
from bracelex.syntax.failure import clear_parse_error, set_parse_error

__all__ = ["RawText", "decode_raw_text"]


@dataclass(frozen=True, slots=True)
class RawText:
    """Decoded raw string body.

    Attributes:
        text: Body text with carriage returns removed
        hashes: Number of '#' markers on each side of the body
    """

    text: str
    hashes: int


def decode_raw_text(cursor: Cursor) -> ParseResult[RawText] | None:
    """Scan a raw string from its marker run through the closing markers.

    The closing delimiter is the FIRST '"' (left to right) whose following
    text starts with the opening marker run. A longer run after that quote
    is not consumed beyond n markers.

    Args:
        cursor: Position at the first '#' (or the '"' when n = 0)

    Returns:
        ParseResult(RawText, cursor past the closing markers), or None if the
        opening run holds anything but '#' before '"' or no close is found
    """
    clear_parse_error()

    hashes = 0
    while not cursor.is_eof and cursor.current == RAW_MARKER:
        hashes += 1
        cursor = cursor.advance()

    if cursor.is_eof or cursor.current != TEXT_QUOTE:
        set_parse_error(
            DiagnosticCode.INVALID_RAW_DELIMITER,
            "Invalid raw string delimiter (expected '#' or '\"')",
            cursor.pos,
            (RAW_MARKER, TEXT_QUOTE),
        )
        return None
    cursor = cursor.advance()  # Skip opening "

    closing = RAW_MARKER * hashes
    chars: list[str] = []
    while not cursor.is_eof:
        ch = cursor.current
        cursor = cursor.advance()
        if ch == TEXT_QUOTE and cursor.starts_with(closing):
            return ParseResult(RawText("".join(chars), hashes), cursor.advance(hashes))
        if ch != "\r":
            chars.append(ch)

    set_parse_error(
        DiagnosticCode.UNTERMINATED_LITERAL,
        f"Unterminated raw string (expected '\"{closing}')",
        cursor.pos,
        (TEXT_QUOTE + closing,),
    )
    return None
