"""Literal token AST node definitions.

One frozen node per literal kind, each carrying its decoded value and the
source span of the whole token (prefix and delimiters included).
Includes type guards as static methods.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

from bracelex.enums import LiteralKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base types
    "Span",
    # Literals
    "TextLiteral",
    "CharLiteral",
    "ByteTextLiteral",
    "ByteLiteral",
    "RawTextLiteral",
    # Type aliases
    "Literal",
]


@dataclass(frozen=True, slots=True)
class Span:
    """Source position span.

    Tracks character offsets in source text for error reporting and tooling.

    Attributes:
        start: Starting offset (inclusive)
        end: Ending offset (exclusive)

    Example:
        Source: 'x = b"ab";'
        ByteTextLiteral span: Span(start=4, end=9)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"Span start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class TextLiteral:
    """Text literal: "text"

    Escapes are decoded; CRLF is normalized to LF.
    """

    value: str
    span: Span | None = None

    kind = LiteralKind.TEXT

    @staticmethod
    def guard(node: object) -> TypeIs["TextLiteral"]:
        """Type guard for TextLiteral."""
        return isinstance(node, TextLiteral)


@dataclass(frozen=True, slots=True)
class CharLiteral:
    """Character literal: 'c' (exactly one scalar value)."""

    value: str
    span: Span | None = None

    kind = LiteralKind.CHAR

    @staticmethod
    def guard(node: object) -> TypeIs["CharLiteral"]:
        """Type guard for CharLiteral."""
        return isinstance(node, CharLiteral)


@dataclass(frozen=True, slots=True)
class ByteTextLiteral:
    """Byte-text literal: b"bytes" """

    value: bytes
    span: Span | None = None

    kind = LiteralKind.BYTE_TEXT

    @staticmethod
    def guard(node: object) -> TypeIs["ByteTextLiteral"]:
        """Type guard for ByteTextLiteral."""
        return isinstance(node, ByteTextLiteral)


@dataclass(frozen=True, slots=True)
class ByteLiteral:
    """Byte literal: b'c'

    The value is the byte as an int in 0-255.
    """

    value: int
    span: Span | None = None

    kind = LiteralKind.BYTE

    @staticmethod
    def guard(node: object) -> TypeIs["ByteLiteral"]:
        """Type guard for ByteLiteral."""
        return isinstance(node, ByteLiteral)


@dataclass(frozen=True, slots=True)
class RawTextLiteral:
    """Raw text literal: r#"text"#

    The body is verbatim apart from dropped carriage returns.
    """

    value: str
    hashes: int
    """Number of '#' markers on each side of the body."""

    span: Span | None = None

    kind = LiteralKind.RAW_TEXT

    @staticmethod
    def guard(node: object) -> TypeIs["RawTextLiteral"]:
        """Type guard for RawTextLiteral."""
        return isinstance(node, RawTextLiteral)


type Literal = TextLiteral | CharLiteral | ByteTextLiteral | ByteLiteral | RawTextLiteral
