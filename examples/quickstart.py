"""Quickstart Example - Decoding Literals and Skipping Trivia.

Demonstrates the two layers of bracelex:

1. decode_literal: one literal token from a string, errors as exceptions
2. Cursor-level parsers threaded through a hand-written tokenizer
3. Failure context after a cursor-level parser returns None
4. Diagnostic output formats

Python 3.13+.
"""

from __future__ import annotations


def example_1_decode_literal() -> None:
    """Decode single literals with the string-level API."""
    from bracelex import decode_literal

    print("=" * 60)
    print("Example 1: decode_literal")
    print("=" * 60)

    sources = [
        '"caf\\u{e9} \\x41\\t!"',
        "'\\u{1F600}'",
        'b"GET /\\r\\n"',
        "b'\\xff'",
        'r#"C:\\path "quoted""#',
        '"one \\\n     line"',
    ]
    for source in sources:
        node = decode_literal(source)
        print(f"{source!r:32} -> {node.kind:9} {node.value!r}")
    print()


def example_2_tokenizer() -> None:
    """Thread a cursor through keywords, punctuation and literals."""
    from bracelex import Cursor
    from bracelex.syntax.parser import keyword, parse_literal, punct

    print("=" * 60)
    print("Example 2: Cursor-Level Tokenizing")
    print("=" * 60)

    source = 'let /* greeting */ msg = "hello\\nworld"; // done'
    cursor = Cursor(source, 0)

    steps = [
        ("keyword", lambda c: keyword(c, "let")),
        ("keyword", lambda c: keyword(c, "msg")),
        ("punct", lambda c: punct(c, "=")),
        ("literal", parse_literal),
        ("punct", lambda c: punct(c, ";")),
    ]
    for label, step in steps:
        result = step(cursor)
        if result is None:
            print(f"{label}: no match at {cursor.pos}")
            return
        print(f"{label:8} {result.value!r}")
        cursor = result.cursor

    print(f"Remaining after trivia: {cursor.rest!r}")
    print()


def example_3_failure_context() -> None:
    """Inspect why a cursor-level parser failed."""
    from bracelex import Cursor
    from bracelex.syntax import get_last_parse_error
    from bracelex.syntax.parser import decode_text

    print("=" * 60)
    print("Example 3: Failure Context")
    print("=" * 60)

    for body in ['ok \\q"', 'x\\u{D800}"', "never closed"]:
        result = decode_text(Cursor(body, 0))
        error = get_last_parse_error()
        if result is None and error is not None:
            print(f"{body!r:18} {error.code.name} at {error.position}: {error.message}")
    print()


def example_4_diagnostics() -> None:
    """Render a LiteralSyntaxError in every output format."""
    from bracelex import LiteralSyntaxError, decode_literal
    from bracelex.diagnostics import DiagnosticFormatter, OutputFormat

    print("=" * 60)
    print("Example 4: Diagnostics")
    print("=" * 60)

    try:
        decode_literal('\n  b"caf\u00e9"')
    except LiteralSyntaxError as e:
        print(e)
        print()
        if e.diagnostic is not None:
            for output_format in (OutputFormat.SIMPLE, OutputFormat.JSON):
                print(DiagnosticFormatter(output_format=output_format).format(e.diagnostic))
    print()


def main() -> None:
    """Run all quickstart examples."""
    print()
    print("bracelex Quickstart Examples")
    print()

    example_1_decode_literal()
    example_2_tokenizer()
    example_3_failure_context()
    example_4_diagnostics()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
