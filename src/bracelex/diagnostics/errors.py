"""bracelex exception hierarchy with structured diagnostics.

Cursor-level parsers never raise; they return None. Exceptions are used
only by the string-level API and by Cursor.current at end of input.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class BraceLexError(Exception):
    """Base exception for all bracelex errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize BraceLexError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class LiteralSyntaxError(BraceLexError):
    """Source text is not exactly one well-formed literal.

    Raised by bracelex.decode_literal(). The diagnostic carries the failure
    code and the line/column where the innermost parser gave up.
    """
