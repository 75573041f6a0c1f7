"""Hypothesis strategies for bracelex property-based testing.

- literals: Literal bodies, escapes and trivia runs

Usage:
    from tests.strategies import text_bodies, trivia_runs

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - text_escapes, text_bodies, raw_bodies, block_comments, trivia_runs
"""

from .literals import (
    BIDI_MARKS,
    PLAIN_BYTE_CHARS,
    SIMPLE_ESCAPES,
    WHITE_SPACE,
    block_comments,
    byte_escapes,
    byte_text_bodies,
    line_comments,
    line_continuations,
    plain_text_chars,
    raw_bodies,
    text_bodies,
    text_escapes,
    trivia_runs,
)

__all__ = [
    "BIDI_MARKS",
    "PLAIN_BYTE_CHARS",
    "SIMPLE_ESCAPES",
    "WHITE_SPACE",
    "block_comments",
    "byte_escapes",
    "byte_text_bodies",
    "line_comments",
    "line_continuations",
    "plain_text_chars",
    "raw_bodies",
    "text_bodies",
    "text_escapes",
    "trivia_runs",
]
