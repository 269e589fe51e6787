"""Immutable input cursor for lockstep parsing.

Python 3.13+. Zero external dependencies.

Design:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns a NEW cursor, so a loop that forgets to
      reassign cannot make progress by accident
    - Digit matching is ASCII-only: str.isdigit() also accepts Arabic-Indic,
      fullwidth and superscript digits, none of which are valid here
"""

from dataclasses import dataclass

from strictdate.constants import ASCII_DIGITS

__all__ = ["ASCII_DIGITS", "Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable position in the input string.

    Example:
        >>> cursor = Cursor("2020-02-29", 0)
        >>> digits = cursor.take_digits(4)
        >>> digits
        '2020'
        >>> cursor.advance(len(digits)).current
        '-'
        >>> cursor.pos  # Original unchanged
        0
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True if every character has been consumed."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Character at the current position.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected end of input at offset {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Character at position + offset, or None beyond the end."""
        target = self.pos + offset
        if target >= len(self.source):
            return None
        return self.source[target]

    def advance(self, count: int = 1) -> "Cursor":
        """Return a new cursor advanced by count positions (clamped at EOF)."""
        return Cursor(self.source, min(self.pos + count, len(self.source)))

    def slice_ahead(self, count: int) -> str:
        """Up to count characters starting at the current position."""
        return self.source[self.pos : self.pos + count]

    def slice_to(self, end_pos: int) -> str:
        """Source text from the current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    @property
    def remaining(self) -> str:
        """All unconsumed input."""
        return self.source[self.pos :]

    def startswith(self, text: str) -> bool:
        """Check whether the unconsumed input begins with text."""
        return self.source.startswith(text, self.pos)

    def take_digits(self, limit: int) -> str:
        """Longest run of ASCII digits at the cursor, at most limit long.

        Does not advance; callers advance by len() of the result.
        """
        end = self.pos
        stop = min(self.pos + limit, len(self.source))
        while end < stop and self.source[end] in ASCII_DIGITS:
            end += 1
        return self.source[self.pos : end]
