"""Diagnostic system for bracelex errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import BraceLexError, LiteralSyntaxError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "BraceLexError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "LiteralSyntaxError",
    "OutputFormat",
    "SourceSpan",
]
