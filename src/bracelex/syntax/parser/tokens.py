"""Punctuation and keyword matchers.

Both skip leading trivia first, so grammar rules never handle whitespace
or comments themselves. Keywords additionally require a word break, which
separates punctuation ("+" vs "+=") from keywords ("fn" vs "fnord").
"""

from bracelex.diagnostics import DiagnosticCode
from bracelex.syntax.cursor import Cursor, ParseResult
from bracelex.syntax.failure import set_parse_error
from bracelex.syntax.parser.trivia import optional_trivia, word_break

__all__ = ["keyword", "punct"]


def punct(cursor: Cursor, token: str) -> ParseResult[str] | None:
    """Match punctuation such as "+" or "+=" after optional trivia.

    Example:
        >>> punct(Cursor("  /* c */ += 1", 0), "+=").cursor.pos
        12

    Returns:
        ParseResult(token, cursor past the token), or None
    """
    trivia = optional_trivia(cursor)
    if trivia is None:
        return None
    cursor = trivia.cursor
    if cursor.starts_with(token):
        return ParseResult(token, cursor.advance(len(token)))

    set_parse_error(
        DiagnosticCode.EXPECTED_TOKEN, f"Expected {token!r}", cursor.pos, (token,)
    )
    return None


def keyword(cursor: Cursor, token: str) -> ParseResult[str] | None:
    """Match a keyword such as "fn" or "struct" after optional trivia.

    Example:
        >>> keyword(Cursor("fn main", 0), "fn") is not None
        True
        >>> keyword(Cursor("fnord", 0), "fn") is None
        True

    Returns:
        ParseResult(token, cursor past the keyword), or None when the token
        is missing or is a prefix of a longer identifier
    """
    matched = punct(cursor, token)
    if matched is None:
        return None
    if word_break(matched.cursor) is None:
        return None
    return matched
