"""Hypothesis strategies for literal bodies and trivia runs.

String strategies return (source, expected) pairs so that tests can feed
the source to a decoder and compare against the value it must produce.

Strategy Categories:
- Escape strategies: One escape sequence and its decoded value
- Body strategies: Literal bodies including the closing delimiter
- Trivia strategies: Whitespace and non-doc comment runs
"""

from __future__ import annotations

import string

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

# =============================================================================
# Constants
# =============================================================================

SIMPLE_ESCAPES: dict[str, str] = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    "0": "\0",
    "'": "'",
    '"': '"',
}

# Unicode White_Space (what str.isspace() would say minus U+001C-U+001F)
WHITE_SPACE: str = (
    "\t\n\u000b\u000c\r \u0085\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

BIDI_MARKS: str = "\u200e\u200f"

# Characters that need no escaping inside a text literal
plain_text_chars = st.characters(
    exclude_categories=("Cs",),
    exclude_characters='"\\\r',
)

# Printable ASCII minus the delimiters, for byte-text bodies
PLAIN_BYTE_CHARS: str = "".join(
    ch for ch in string.printable if ch not in '"\\\r'
)


# =============================================================================
# Escape Strategies
# =============================================================================


@composite
def text_escapes(draw: st.DrawFn) -> tuple[str, str]:
    """Generate one escape valid in text literals.

    Events emitted:
    - escape={kind}: simple, hex or unicode
    """
    kind = draw(st.sampled_from(["simple", "hex", "unicode"]))
    event(f"escape={kind}")

    if kind == "simple":
        key = draw(st.sampled_from(sorted(SIMPLE_ESCAPES)))
        return (f"\\{key}", SIMPLE_ESCAPES[key])

    if kind == "hex":
        value = draw(st.integers(min_value=0, max_value=0x7F))
        digits = f"{value:02x}" if draw(st.booleans()) else f"{value:02X}"
        return (f"\\x{digits}", chr(value))

    ch = draw(st.characters(exclude_categories=("Cs",)))
    digits = f"{ord(ch):x}"
    # Zero padding up to the 6-digit limit is allowed
    padding = draw(st.integers(min_value=0, max_value=6 - len(digits)))
    return (f"\\u{{{'0' * padding}{digits}}}", ch)


@composite
def byte_escapes(draw: st.DrawFn) -> tuple[str, int]:
    """Generate one escape valid in byte and byte-text literals."""
    if draw(st.booleans()):
        key = draw(st.sampled_from(sorted(SIMPLE_ESCAPES)))
        return (f"\\{key}", ord(SIMPLE_ESCAPES[key]))
    value = draw(st.integers(min_value=0, max_value=0xFF))
    return (f"\\x{value:02x}", value)


@composite
def line_continuations(draw: st.DrawFn) -> tuple[str, str]:
    """Generate a backslash line continuation and the text after it.

    The continuation swallows every following whitespace character, so it
    always ends in a non-whitespace character to keep the value predictable.
    """
    line_end = draw(st.sampled_from(["\n", "\r\n"]))
    indent = draw(st.text(WHITE_SPACE, max_size=4))
    resume = draw(st.sampled_from(string.ascii_letters + string.digits))
    return (f"\\{line_end}{indent}{resume}", resume)


# =============================================================================
# Body Strategies
# =============================================================================


@composite
def text_bodies(draw: st.DrawFn) -> tuple[str, str]:
    """Generate a text literal body (closing quote included) and its value.

    Mixes plain characters, escapes, CRLF line endings and line
    continuations.

    Events emitted:
    - text_parts={n}: Number of body parts
    """
    parts = draw(
        st.lists(
            st.one_of(
                st.text(plain_text_chars, min_size=1, max_size=5).map(lambda s: (s, s)),
                text_escapes(),
                st.just(("\r\n", "\n")),
                line_continuations(),
            ),
            max_size=10,
        )
    )
    event(f"text_parts={len(parts)}")

    source = "".join(src for src, _ in parts)
    value = "".join(val for _, val in parts)
    return (source + '"', value)


@composite
def byte_text_bodies(draw: st.DrawFn) -> tuple[str, bytes]:
    """Generate a byte-text literal body (closing quote included) and its value."""
    parts = draw(
        st.lists(
            st.one_of(
                st.text(PLAIN_BYTE_CHARS, min_size=1, max_size=5).map(
                    lambda s: (s, s.encode("ascii"))
                ),
                byte_escapes().map(lambda pair: (pair[0], bytes([pair[1]]))),
            ),
            max_size=10,
        )
    )
    source = "".join(src for src, _ in parts)
    value = b"".join(val for _, val in parts)
    return (source + '"', value)


@composite
def raw_bodies(draw: st.DrawFn) -> tuple[str, str, int]:
    """Generate a raw string from its marker run to its closing markers.

    Returns:
        (source, body, hashes). With at least one marker the body may hold
        '"' since it contains no '#' to complete an early close.

    Events emitted:
    - raw_hashes={n}: Marker run length
    """
    hashes = draw(st.integers(min_value=0, max_value=4))
    event(f"raw_hashes={hashes}")

    excluded = "\r#" if hashes else '\r"'
    body = draw(
        st.text(
            st.characters(exclude_categories=("Cs",), exclude_characters=excluded),
            max_size=30,
        )
    )
    markers = "#" * hashes
    return (f'{markers}"{body}"{markers}', body, hashes)


# =============================================================================
# Trivia Strategies
# =============================================================================

# Comment text that cannot open or close a nested block comment
_comment_text = st.text(
    st.characters(exclude_categories=("Cs",), exclude_characters="/*\n\r"),
    max_size=15,
)


@composite
def line_comments(draw: st.DrawFn) -> str:
    """Generate a plain line comment ending in LF (never a doc comment)."""
    text = draw(_comment_text)
    if draw(st.booleans()):
        return f"//// {text}\n"
    return f"// {text}\n"


@composite
def block_comments(draw: st.DrawFn, max_depth: int = 3) -> str:
    """Generate a plain (possibly nested) block comment.

    Events emitted:
    - comment_depth={n}: Nesting depth
    """
    depth = draw(st.integers(min_value=1, max_value=max_depth))
    event(f"comment_depth={depth}")

    comment = f" {draw(_comment_text)} "
    for _ in range(depth):
        before = draw(_comment_text)
        comment = f"/* {before}{comment}*/"
    return comment


@composite
def trivia_runs(draw: st.DrawFn) -> str:
    """Generate a non-empty run of whitespace and non-doc comments."""
    pieces = draw(
        st.lists(
            st.one_of(
                st.text(WHITE_SPACE + BIDI_MARKS, min_size=1, max_size=4),
                line_comments(),
                block_comments(),
            ),
            min_size=1,
            max_size=6,
        )
    )
    event(f"trivia_pieces={len(pieces)}")
    return "".join(pieces)
