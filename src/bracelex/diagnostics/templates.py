"""Error message templates.

Centralized templates for diagnostics that leave the library as exceptions.
Python 3.13+. Zero external dependencies.
"""

from typing import TYPE_CHECKING

from .codes import Diagnostic, DiagnosticCode, SourceSpan

if TYPE_CHECKING:
    from bracelex.syntax.failure import ParseErrorContext

# Hints keyed by failure code. Codes without an entry get no hint.
_HINTS: dict[DiagnosticCode, str] = {
    DiagnosticCode.UNTERMINATED_LITERAL: "Add the closing delimiter",
    DiagnosticCode.INVALID_ESCAPE: (
        "Valid escapes are \\n \\r \\t \\\\ \\0 \\' \\\" \\x.. and \\u{...} "
        "(\\u{...} is not allowed in byte literals)"
    ),
    DiagnosticCode.INVALID_HEX_ESCAPE: (
        "Text literals accept \\x00 to \\x7F; byte literals accept \\x00 to \\xFF"
    ),
    DiagnosticCode.INVALID_UNICODE_ESCAPE: "Write 1 to 6 hex digits inside braces: \\u{1F600}",
    DiagnosticCode.INVALID_CODE_POINT: (
        "Code points must be at most 10FFFF and outside the surrogate range D800-DFFF"
    ),
    DiagnosticCode.BARE_CARRIAGE_RETURN: "Use \\r\\n line endings or write the \\r escape",
    DiagnosticCode.NON_ASCII_BYTE: "Write non-ASCII bytes as \\x escapes",
    DiagnosticCode.UNCLOSED_CHAR_LITERAL: "Character and byte literals hold exactly one value",
    DiagnosticCode.INVALID_RAW_DELIMITER: "Raw strings open with r, zero or more '#', then '\"'",
    DiagnosticCode.UNTERMINATED_BLOCK_COMMENT: "Every '/*' needs a matching '*/'",
}


class ErrorTemplate:
    """Centralized error message templates.

    Exception constructors never build messages inline; they receive a
    Diagnostic from here. This keeps messages testable and consistent.
    """

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Unexpected end of input.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            span=None,
            hint="Check for unclosed literals or incomplete syntax",
        )

    @staticmethod
    def literal_syntax_error(context: "ParseErrorContext", source: str) -> Diagnostic:
        """Turn a recorded parser failure into a located diagnostic.

        Args:
            context: Failure recorded by the innermost failing parser
            source: Source text the position refers to

        Returns:
            Diagnostic carrying the failure code, message and a span
            with 1-indexed line and column
        """
        position = min(max(context.position, 0), len(source))
        line = source.count("\n", 0, position) + 1
        last_newline = source.rfind("\n", 0, position)
        column = position - last_newline if last_newline >= 0 else position + 1
        return Diagnostic(
            code=context.code,
            message=context.message,
            span=SourceSpan(start=position, end=position, line=line, column=column),
            hint=_HINTS.get(context.code),
            expected=context.expected,
        )
