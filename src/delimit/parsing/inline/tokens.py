"""Delimiter value type for the emphasis resolver.

NamedTuple chosen for immutability and cheap construction: a partially
consumed opener is replaced on the stack by a copy with a smaller count,
never edited.

Usage:
    from delimit.parsing.inline.tokens import Delimiter

    delim = Delimiter(count=2, can_open=True, can_close=False)
    match delim:
        case Delimiter(count=1):
            ...

"""

from __future__ import annotations

from typing import NamedTuple


class Delimiter(NamedTuple):
    """One scanned run of ``*`` with its flanking classification.

    Attributes:
        count: Delimiters still available in the run (>= 1).
        can_open: The run is left-flanking and may open emphasis.
        can_close: The run is right-flanking and may close emphasis.

    """

    count: int
    can_open: bool
    can_close: bool

    def consume(self, n: int) -> Delimiter:
        """Copy of this delimiter with ``n`` fewer characters left."""
        return self._replace(count=self.count - n)

    @property
    def literal(self) -> str:
        """The run as literal text, for delimiters that never matched."""
        return "*" * self.count


__all__ = ["Delimiter"]
