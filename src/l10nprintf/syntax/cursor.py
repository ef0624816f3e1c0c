"""Immutable cursor for scanning format strings and escape sequences.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
"""

from dataclasses import dataclass

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("%5d", 0)
        >>> cursor.current
        '%'
        >>> digits, rest = cursor.advance().take_while("0123456789")
        >>> digits, rest.current
        ('5', 'd')
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True if position >= source length."""
        return self.pos >= len(self.source)

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
        """Character at position + offset, or None beyond EOF."""
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF)."""
        return Cursor(self.source, min(self.pos + count, len(self.source)))

    def take_while(self, chars: str, limit: int | None = None) -> tuple[str, "Cursor"]:
        """Consume the run of characters drawn from chars.

        Args:
            chars: Accepted characters
            limit: Maximum run length (None = unbounded)

        Returns:
            Tuple of (consumed text, cursor after the run)
        """
        end = self.pos
        stop = len(self.source) if limit is None else min(len(self.source), self.pos + limit)
        while end < stop and self.source[end] in chars:
            end += 1
        return self.source[self.pos : end], Cursor(self.source, end)

    def find(self, char: str) -> "Cursor":
        """Cursor at the next occurrence of char, or at EOF."""
        index = self.source.find(char, self.pos)
        return Cursor(self.source, len(self.source) if index < 0 else index)

    def slice_to(self, end_pos: int) -> str:
        """Source substring from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    @property
    def rest(self) -> str:
        """Remaining text from the current position."""
        return self.source[self.pos :]
