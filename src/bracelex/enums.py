"""Enumerations for bracelex type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LiteralKind(StrEnum):
    """Kind of literal token.

    StrEnum provides automatic string conversion: str(LiteralKind.TEXT) == "text"
    """

    TEXT = "text"
    """Text literal: "hello\\n" """

    CHAR = "char"
    """Character literal: 'a'"""

    BYTE_TEXT = "byte_text"
    """Byte-text literal: b"GET\\r\\n" """

    BYTE = "byte"
    """Byte literal: b'\\xff'"""

    RAW_TEXT = "raw_text"
    """Raw text literal: r#"no \\escapes"#"""


class CommentKind(StrEnum):
    """Kind of comment recognized at a token boundary.

    StrEnum provides automatic string conversion: str(CommentKind.LINE) == "line"
    """

    LINE = "line"
    """Plain line comment: // note (also //// note)"""

    BLOCK = "block"
    """Plain block comment: /* note */ (also /*** note */)"""

    OUTER_DOC = "outer_doc"
    """Outer doc comment: /// docs or /** docs */"""

    INNER_DOC = "inner_doc"
    """Inner doc comment: //! docs or /*! docs */"""


__all__ = [
    "CommentKind",
    "LiteralKind",
]
