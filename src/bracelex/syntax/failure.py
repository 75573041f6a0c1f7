"""Failure context side channel for cursor-level parsers.

Parsers return ``None`` on failure and nothing else. The innermost parser
that gives up also records a ParseErrorContext here so that tooling can
explain the failure without changing the success/failure contract.

Storage is thread-local: concurrent callers never see each other's context.
Each public parser clears the context on entry, so after a successful
call get_last_parse_error() returns None.
"""

from dataclasses import dataclass
from threading import local as thread_local

from bracelex.diagnostics import DiagnosticCode

__all__ = [
    "ParseErrorContext",
    "clear_parse_error",
    "get_last_parse_error",
]

_error_thread_local = thread_local()


@dataclass(frozen=True, slots=True)
class ParseErrorContext:
    """Context information for parse failures.

    Attributes:
        code: Failure category
        message: Human-readable error description
        position: Character position in source where scanning stopped
        expected: What the parser expected to find (optional)
    """

    code: DiagnosticCode
    message: str
    position: int
    expected: tuple[str, ...] = ()


def set_parse_error(
    code: DiagnosticCode, message: str, position: int, expected: tuple[str, ...] = ()
) -> None:
    """Store parse error context for later retrieval."""
    _error_thread_local.last_error = ParseErrorContext(
        code=code, message=message, position=position, expected=expected
    )


def get_last_parse_error() -> ParseErrorContext | None:
    """Get the last parse error context (if any).

    Example:
        >>> result = decode_text(cursor)
        >>> if result is None:
        ...     error = get_last_parse_error()
        ...     print(f"Error at position {error.position}: {error.message}")
    """
    return getattr(_error_thread_local, "last_error", None)


def clear_parse_error() -> None:
    """Clear the last parse error context."""
    _error_thread_local.last_error = None
