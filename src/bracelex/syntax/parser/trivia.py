"""Trivia skipping and word-break detection.

Trivia is whitespace plus comments that are not documentation. A tokenizer
skips it before each token attempt. Doc comments are significant tokens
and always stop the skip:

    //  ...      line comment, skipped
    ///  ...     doc comment (//// and longer are plain again)
    //!  ...     inner doc comment, never skipped
    /*  ... */   block comment, nests, skipped
    /** ... */   doc comment (/*** and longer are plain again)
    /*! ... */   inner doc comment, never skipped

Block comments are matched with an integer depth counter, so nesting
depth never grows the Python stack.
"""

from bracelex.constants import BIDI_MARKS, WHITE_SPACE_CHARS
from bracelex.diagnostics import DiagnosticCode
from bracelex.enums import CommentKind
from bracelex.syntax.cursor import Cursor, ParseResult
from bracelex.syntax.failure import clear_parse_error, get_last_parse_error, set_parse_error

__all__ = [
    "block_comment",
    "classify_comment",
    "is_whitespace",
    "is_xid_continue",
    "optional_trivia",
    "skip_trivia",
    "skip_whitespace",
    "word_break",
]

_TRIVIA_WHITESPACE: frozenset[str] = WHITE_SPACE_CHARS | BIDI_MARKS


def is_whitespace(ch: str) -> bool:
    """Check if a character is whitespace between tokens.

    Unicode White_Space plus the left-to-right and right-to-left marks.

    Example:
        >>> is_whitespace("\\u2003")  # EM SPACE
        True
        >>> is_whitespace("\\u200e")  # LEFT-TO-RIGHT MARK
        True
        >>> is_whitespace("\\x1c")  # str.isspace() says True
        False
    """
    return ch in _TRIVIA_WHITESPACE


def is_xid_continue(ch: str) -> bool:
    """Check if a character can continue an identifier (XID_Continue).

    str.isidentifier() classifies every character after the first with
    XID_Continue, so prefixing "_" isolates that property.
    """
    return len(ch) == 1 and f"_{ch}".isidentifier()


def classify_comment(cursor: Cursor) -> CommentKind | None:
    """Classify the comment starting at the cursor, if any.

    Example:
        >>> classify_comment(Cursor("/// docs", 0))
        <CommentKind.OUTER_DOC: 'outer_doc'>
        >>> classify_comment(Cursor("//// rule", 0))
        <CommentKind.LINE: 'line'>
        >>> classify_comment(Cursor("/ 2", 0)) is None
        True
    """
    if cursor.starts_with("//"):
        if cursor.starts_with("//!"):
            return CommentKind.INNER_DOC
        if cursor.starts_with("///") and not cursor.starts_with("////"):
            return CommentKind.OUTER_DOC
        return CommentKind.LINE
    if cursor.starts_with("/*"):
        if cursor.starts_with("/*!"):
            return CommentKind.INNER_DOC
        if cursor.starts_with("/**") and not cursor.starts_with("/***"):
            return CommentKind.OUTER_DOC
        return CommentKind.BLOCK
    return None


def _scan_block_comment(cursor: Cursor) -> ParseResult[str] | None:
    """Depth-counting scan from a '/*' to its matching '*/'."""
    source = cursor.source
    upper = len(source) - 1
    depth = 0
    i = cursor.pos
    while i < upper:
        pair = source[i : i + 2]
        if pair == "/*":
            depth += 1
            i += 2
        elif pair == "*/":
            depth -= 1
            i += 2
            if depth == 0:
                return ParseResult(cursor.slice_to(i), Cursor(source, i))
        else:
            i += 1

    set_parse_error(
        DiagnosticCode.UNTERMINATED_BLOCK_COMMENT,
        f"Unterminated block comment (depth {depth} at end of input)",
        cursor.pos,
        ("*/",),
    )
    return None


def block_comment(cursor: Cursor) -> ParseResult[str] | None:
    """Match one block comment, including any nested comments.

    Doc comments are matched too; the doc/plain decision belongs to
    skip_trivia().

    Example:
        >>> block_comment(Cursor("/* a /* b */ c */ d", 0)).value
        '/* a /* b */ c */'

    Returns:
        ParseResult(full comment text, cursor past the final '*/'), or None
        if the cursor is not at '/*' or the comment never closes
    """
    clear_parse_error()

    if not cursor.starts_with("/*"):
        set_parse_error(
            DiagnosticCode.EXPECTED_TOKEN, "Expected block comment", cursor.pos, ("/*",)
        )
        return None
    return _scan_block_comment(cursor)


def skip_trivia(cursor: Cursor) -> ParseResult[None] | None:
    """Skip the longest run of whitespace and non-doc comments.

    Args:
        cursor: Current position in source

    Returns:
        ParseResult(None, cursor past the trivia). None when nothing was
        skipped (so calling it again right after a success fails instead
        of looping) or when a block comment never closes.

    Design:
        A line comment runs through the next LF, or to end of input.
    """
    clear_parse_error()

    start_pos = cursor.pos
    while not cursor.is_eof:
        kind = classify_comment(cursor)

        if kind is CommentKind.LINE:
            newline = cursor.source.find("\n", cursor.pos)
            if newline < 0:
                return ParseResult(None, cursor.finish())
            cursor = Cursor(cursor.source, newline + 1)
            continue

        if kind is CommentKind.BLOCK:
            comment = _scan_block_comment(cursor)
            if comment is None:
                return None
            cursor = comment.cursor
            continue

        if is_whitespace(cursor.current):
            cursor = cursor.advance()
            continue

        break

    if cursor.pos == start_pos:
        set_parse_error(
            DiagnosticCode.NO_TRIVIA, "Expected whitespace or comment", cursor.pos
        )
        return None
    return ParseResult(None, cursor)


def optional_trivia(cursor: Cursor) -> ParseResult[None] | None:
    """Skip trivia if there is any.

    Having nothing to skip is a success here. The only failure is an
    unterminated block comment, whose context is kept for the caller.

    Example:
        >>> optional_trivia(Cursor("x", 0)).cursor.pos
        0
        >>> optional_trivia(Cursor(" /* open", 0)) is None
        True
    """
    result = skip_trivia(cursor)
    if result is not None:
        return result

    error = get_last_parse_error()
    if error is not None and error.code is DiagnosticCode.UNTERMINATED_BLOCK_COMMENT:
        return None
    clear_parse_error()
    return ParseResult(None, cursor)


def skip_whitespace(cursor: Cursor) -> Cursor:
    """Skip trivia if there is any; never fails.

    Returns:
        Cursor past the trivia, or the input cursor unchanged when there is
        nothing to skip (or the trivia holds an unterminated block comment)
    """
    result = skip_trivia(cursor)
    return cursor if result is None else result.cursor


def word_break(cursor: Cursor) -> ParseResult[None] | None:
    """Check that the cursor does not sit inside an identifier-like word.

    Consumes nothing. Used after matching a keyword so that "fn" does not
    match the start of "fnord".

    Returns:
        ParseResult(None, cursor) at end of input or before a character that
        cannot continue an identifier; None otherwise
    """
    clear_parse_error()

    if cursor.is_eof or not is_xid_continue(cursor.current):
        return ParseResult(None, cursor)

    set_parse_error(
        DiagnosticCode.WORD_NOT_BROKEN,
        f"Expected word break, found identifier character {cursor.current!r}",
        cursor.pos,
    )
    return None
