"""Immutable scan position over a string.

A TextCursor pairs the text being scanned with an offset into it. Scanners
never move a cursor in place; they return a new one further along.

Thread Safety:
TextCursor is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TextCursor:
    """View of ``value`` from ``position`` onwards.

    Positions count code points (Python string indices), and always satisfy
    ``0 <= position <= len(value)``.

    Examples:
        >>> cur = TextCursor("*foo*")
        >>> cur.char_at()
        '*'
        >>> cur.advance(1).remaining
        'foo*'
        >>> cur.move_to(5).at_end()
        True

    """

    value: str
    position: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.position <= len(self.value):
            msg = f"position {self.position} outside 0..{len(self.value)}"
            raise ValueError(msg)

    def advance(self, n: int = 1) -> TextCursor:
        """Return a cursor ``n`` code points further on, stopping at the end."""
        return self.move_to(self.position + n)

    def move_to(self, pos: int) -> TextCursor:
        """Return a cursor at absolute position ``pos`` (clamped into range)."""
        pos = max(0, min(pos, len(self.value)))
        if pos == self.position:
            return self
        return TextCursor(self.value, pos)

    def char_at(self) -> str:
        """Character at the current position, or "" at end of text."""
        if self.position >= len(self.value):
            return ""
        return self.value[self.position]

    def at_end(self) -> bool:
        return self.position >= len(self.value)

    def substring(self, start: int, end: int) -> str:
        """Literal slice ``value[start:end]``."""
        return self.value[start:end]

    @property
    def remaining(self) -> str:
        """The unscanned suffix."""
        return self.value[self.position :]
