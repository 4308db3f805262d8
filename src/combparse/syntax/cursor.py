"""Immutable input view for combinator parsing.

Every parser receives a Cursor and hands a new Cursor forward; nothing is
mutated, so a failing branch never has to undo consumption.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns a NEW cursor
    - Two cursors over equal text at the same offset are equal values

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable suffix view over a source string.

    Example:
        >>> cursor = Cursor.of("hello")
        >>> cursor.current
        'h'
        >>> cursor.advance(2).rest
        'llo'
        >>> cursor.rest  # Original unchanged
        'hello'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int = 0

    @classmethod
    def of(cls, source: str) -> "Cursor":
        """Create a cursor at the start of source."""
        return cls(source, 0)

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def rest(self) -> str:
        """The unconsumed suffix of the source."""
        return self.source[self.pos :]

    @property
    def remaining_length(self) -> int:
        """Number of unconsumed characters."""
        return max(len(self.source) - self.pos, 0)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns None only when peeking beyond EOF.
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF).

        Example:
            >>> cursor = Cursor.of("hello")
            >>> cursor.advance().pos
            1
            >>> cursor.advance(10).pos
            5
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def startswith(self, text: str) -> bool:
        """Check whether the unconsumed input begins with text."""
        return self.source.startswith(text, self.pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos.

        Usage:
            >>> start = Cursor.of("hello world")
            >>> end = start.advance(5)
            >>> start.slice_to(end.pos)
            'hello'
        """
        return self.source[self.pos : end_pos]

    def consumed_until(self, other: "Cursor") -> str:
        """Text consumed between this cursor and a later one over the same source."""
        return self.slice_to(other.pos)

    def is_suffix_of(self, other: "Cursor") -> bool:
        """Check this cursor views the same source at or after other's offset."""
        return self.source == other.source and self.pos >= other.pos
