"""Immutable cursor infrastructure for literal decoding and trivia skipping.

Implements the immutable cursor pattern for zero-`None` scanning.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Positions are code-point offsets, so every cut point is a
      scalar-value boundary; no mid-sequence slicing is possible
    - Line:column computed on-demand (O(n) only for errors)

Result Convention:
    Every parser has the signature

        def parse_foo(cursor: Cursor) -> ParseResult[Foo] | None

    ``None`` is the failure variant and carries no payload.

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass

from bracelex.diagnostics import ErrorTemplate

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency (cursors are created per unit scanned)
        3. Simple position - Just an integer offset into the source
        4. EOF is a property - Not a return value
        5. current raises - No None handling needed!

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> new_cursor = cursor.advance()
        >>> new_cursor.current
        'e'
        >>> cursor.current  # Original unchanged (immutability)
        'h'
        >>> cursor.remaining
        5
        >>> cursor.finish().is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Returns:
            True if position >= source length
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of input

        Design Note:
            Callers check ``is_eof`` first, so mypy knows current is
            ALWAYS str, never None.
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    @property
    def rest(self) -> str:
        """Remaining input from the current position to end of source."""
        return self.source[self.pos :]

    @property
    def remaining(self) -> int:
        """Number of characters left before end of input.

        O(1). Comparing ``remaining`` before and after an inner parser
        detects zero-progress parses in repetition layered on top.
        """
        return max(len(self.source) - self.pos, 0)

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def starts_with(self, pattern: str) -> bool:
        """Pure prefix test against the remaining input.

        Example:
            >>> Cursor("//! doc", 0).starts_with("//!")
            True
            >>> Cursor("//", 0).starts_with("///")
            False
        """
        return self.source.startswith(pattern, self.pos)

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at new position (original unchanged).
            The position is clamped to end of input.

        Design Note:
            Immutability prevents infinite loops!

                while not cursor.is_eof:
                    cursor = cursor.advance()  # Must reassign!
                    # If we forget reassignment, loop exits (cursor unchanged)

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor2 = cursor.advance(2)
            >>> cursor.pos  # Original unchanged
            0
            >>> cursor2.pos
            2
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def finish(self) -> "Cursor":
        """Return an empty cursor positioned at end of input."""
        return Cursor(self.source, len(self.source))

    def until(self, count: int) -> str:
        """Consumed prefix: the next ``count`` characters.

        Example:
            >>> Cursor("/* a */ b", 0).until(7)
            '/* a */'
        """
        return self.source[self.pos : self.pos + count]

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos.

        Store the start cursor, scan with a derived cursor, then slice:

            >>> start_cursor = Cursor("hello world", 0)
            >>> cursor = start_cursor
            >>> while not cursor.is_eof and cursor.current != ' ':
            ...     cursor = cursor.advance()
            >>> start_cursor.slice_to(cursor.pos)
            'hello'
        """
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> str:
        """Get up to n characters without advancing cursor.

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor.slice_ahead(3)
            'hel'
            >>> cursor.slice_ahead(10)  # More than available
            'hello'
        """
        return self.source[self.pos : self.pos + n]

    def expect(self, char: str) -> "Cursor | None":
        """Consume character if it matches expected, return None otherwise.

        Example:
            >>> Cursor("'x", 0).expect("'").pos
            1
            >>> Cursor("x", 0).expect("'") is None
            True
        """
        if not self.is_eof and self.current == char:
            return self.advance()
        return None

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position.
            Only call for error reporting, not during normal scanning!

        Example:
            >>> Cursor("line1\\nline2", 8).compute_line_col()
            (2, 3)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Design:
        - Generic over result type T
        - Frozen for immutability
        - Contains BOTH parsed value AND new cursor
        - Parsers return ParseResult[T] | None

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> result = ParseResult('h', cursor.advance())
        >>> result.value
        'h'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor
