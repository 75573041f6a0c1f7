"""bracelex - literal decoding and trivia skipping for curly-brace languages.

The lexical core of a recursive-descent parser: decodes escaped literal
tokens (text, characters, byte strings, bytes, raw strings) into values,
and skips whitespace and non-doc comments between tokens.

Public API:
    decode_literal - Decode source holding exactly one literal token
    Cursor - Immutable input position threaded through parsers
    ParseResult - Parsed value plus the cursor after it
    parse_literal - Cursor-level literal parser
    skip_trivia - Cursor-level whitespace and comment skipper

Exceptions:
    BraceLexError - Base exception class
    LiteralSyntaxError - decode_literal() input is not one valid literal

Submodules:
    bracelex.syntax.parser - decode_text, decode_char, decode_byte_text,
        decode_byte, decode_raw_text, word_break, punct, keyword
    bracelex.syntax.ast - Literal AST node types
    bracelex.diagnostics - Diagnostic codes, templates and formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import BraceLexError, LiteralSyntaxError
from .syntax import Cursor, ParseResult, parse_literal, skip_trivia
from .syntax import decode as decode_literal

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("bracelex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BraceLexError",
    "Cursor",
    "LiteralSyntaxError",
    "ParseResult",
    "__version__",
    "decode_literal",
    "parse_literal",
    "skip_trivia",
]
