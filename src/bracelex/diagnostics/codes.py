"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        3000-3099: Cursor errors
        3100-3199: Literal decoding errors
        3200-3299: Trivia and token errors
        3300-3399: Literal dispatch errors (string-level API)
    """

    # Cursor errors (3000-3099)
    UNEXPECTED_EOF = 3001

    # Literal decoding errors (3100-3199)
    UNTERMINATED_LITERAL = 3101
    INVALID_ESCAPE = 3102
    INVALID_HEX_ESCAPE = 3103
    INVALID_UNICODE_ESCAPE = 3104
    INVALID_CODE_POINT = 3105
    BARE_CARRIAGE_RETURN = 3106
    NON_ASCII_BYTE = 3107
    UNCLOSED_CHAR_LITERAL = 3108
    INVALID_RAW_DELIMITER = 3109

    # Trivia and token errors (3200-3299)
    UNTERMINATED_BLOCK_COMMENT = 3201
    NO_TRIVIA = 3202
    WORD_NOT_BROKEN = 3203
    EXPECTED_TOKEN = 3204

    # Literal dispatch errors (3300-3399)
    UNKNOWN_LITERAL = 3301
    TRAILING_INPUT = 3302


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. For multi-byte UTF-8 characters, character offset differs
        from byte offset.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or
                line/column are less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools (editors, linters).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when no source is attached)
        hint: Suggestion for fixing the error
        expected: Tokens the parser expected at the error location
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    expected: tuple[str, ...] = ()
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[INVALID_ESCAPE]: Invalid escape sequence: \\q
              --> line 1, column 3
              = help: Valid escapes are \\n \\r \\t \\\\ \\0 \\' \\" \\x and \\u{...}

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
