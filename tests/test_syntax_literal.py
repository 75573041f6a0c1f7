"""Tests for syntax.parser.literal: literal dispatch and AST nodes."""

from __future__ import annotations

import logging

import pytest
from hypothesis import event, given

from bracelex.diagnostics import DiagnosticCode
from bracelex.enums import LiteralKind
from bracelex.syntax.ast import (
    ByteLiteral,
    ByteTextLiteral,
    CharLiteral,
    RawTextLiteral,
    Span,
    TextLiteral,
)
from bracelex.syntax.cursor import Cursor
from bracelex.syntax.failure import get_last_parse_error
from bracelex.syntax.parser.literal import parse_literal
from tests.strategies import raw_bodies, text_bodies, trivia_runs


class TestParseLiteralDispatch:
    """Opening delimiter selects the decoder."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ('"hi"', TextLiteral("hi", Span(0, 4))),
            ("'x'", CharLiteral("x", Span(0, 3))),
            ('b"hi"', ByteTextLiteral(b"hi", Span(0, 5))),
            ("b'x'", ByteLiteral(0x78, Span(0, 4))),
            ('r"a\\b"', RawTextLiteral("a\\b", 0, Span(0, 6))),
            ('r#"a"b"#', RawTextLiteral('a"b', 1, Span(0, 8))),
        ],
    )
    def test_each_kind(self, source: str, expected: object) -> None:
        """Every literal kind produces its node with a full-token span."""
        result = parse_literal(Cursor(source, 0))

        assert result is not None
        assert result.value == expected
        assert result.cursor.is_eof

    def test_leading_trivia_excluded_from_span(self) -> None:
        """The span starts at the literal, after skipped trivia."""
        result = parse_literal(Cursor('  /* c */ "x" ;', 0))

        assert result is not None
        assert result.value.span == Span(10, 13)
        assert result.cursor.rest == " ;"

    @pytest.mark.parametrize("source", ["x", "123", "", "r x", "b", "br\"x\"", "/// doc\n\"x\""])
    def test_not_a_literal(self, source: str) -> None:
        """Anything else fails as an unknown literal."""
        assert parse_literal(Cursor(source, 0)) is None
        error = get_last_parse_error()

        assert error is not None
        assert error.code is DiagnosticCode.UNKNOWN_LITERAL

    def test_unterminated_comment_before_literal(self) -> None:
        """An open block comment in leading trivia is the reported failure."""
        assert parse_literal(Cursor('/* open "x"', 0)) is None
        error = get_last_parse_error()

        assert error is not None
        assert error.code is DiagnosticCode.UNTERMINATED_BLOCK_COMMENT
        assert error.position == 0

    def test_char_literal_requires_closing_quote(self) -> None:
        """End of input in place of the closing quote fails here."""
        assert parse_literal(Cursor("'a", 0)) is None
        error = get_last_parse_error()

        assert error is not None
        assert error.code is DiagnosticCode.UNTERMINATED_LITERAL

    def test_byte_literal_requires_closing_quote(self) -> None:
        """Same for byte literals."""
        assert parse_literal(Cursor("b'a", 0)) is None

    def test_decoder_failure_propagates(self) -> None:
        """The innermost failure context survives the dispatch."""
        assert parse_literal(Cursor('"bad \\q"', 0)) is None
        error = get_last_parse_error()

        assert error is not None
        assert error.code is DiagnosticCode.INVALID_ESCAPE
        assert error.position == 6

    def test_failure_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Failures are logged at DEBUG level only."""
        with caplog.at_level(logging.DEBUG, logger="bracelex.syntax.parser.literal"):
            parse_literal(Cursor("x", 0))

        assert any("No literal at position 0" in r.message for r in caplog.records)
        assert all(r.levelno == logging.DEBUG for r in caplog.records)


class TestLiteralNodes:
    """AST node kinds, guards and span validation."""

    @pytest.mark.parametrize(
        ("node", "kind"),
        [
            (TextLiteral("a"), LiteralKind.TEXT),
            (CharLiteral("a"), LiteralKind.CHAR),
            (ByteTextLiteral(b"a"), LiteralKind.BYTE_TEXT),
            (ByteLiteral(97), LiteralKind.BYTE),
            (RawTextLiteral("a", 0), LiteralKind.RAW_TEXT),
        ],
    )
    def test_kind(self, node: object, kind: LiteralKind) -> None:
        """Each node reports its literal kind."""
        assert node.kind is kind  # type: ignore[attr-defined]

    def test_guards(self) -> None:
        """Type guards accept only their own node type."""
        text = TextLiteral("a")

        assert TextLiteral.guard(text)
        assert not CharLiteral.guard(text)
        assert not RawTextLiteral.guard("a")

    def test_span_validation(self) -> None:
        """Negative starts and reversed spans are rejected."""
        with pytest.raises(ValueError, match="start must be >= 0"):
            Span(-1, 0)
        with pytest.raises(ValueError, match="must be >= start"):
            Span(5, 4)

    def test_nodes_are_frozen(self) -> None:
        """Nodes are immutable."""
        node = TextLiteral("a")

        with pytest.raises(AttributeError):
            node.value = "b"  # type: ignore[misc]


class TestParseLiteralProperties:
    """Property-based checks for dispatch."""

    @given(trivia=trivia_runs(), body=text_bodies())
    def test_text_after_trivia(self, trivia: str, body: tuple[str, str]) -> None:
        """PROPERTY: Text literals after trivia decode with an exact span."""
        source, expected = body
        event(f"trivia_len={min(len(trivia), 40) // 10 * 10}")

        full = trivia + '"' + source
        result = parse_literal(Cursor(full, 0))

        assert result is not None
        assert result.value == TextLiteral(expected, Span(len(trivia), len(full)))

    @given(raw=raw_bodies())
    def test_raw_strings(self, raw: tuple[str, str, int]) -> None:
        """PROPERTY: Raw strings report their marker count."""
        source, body, hashes = raw
        event(f"hashes={hashes}")

        result = parse_literal(Cursor("r" + source, 0))

        assert result is not None
        assert RawTextLiteral.guard(result.value)
        assert result.value.value == body
        assert result.value.hashes == hashes
