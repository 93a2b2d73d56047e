"""Exception classes for delimit.

Malformed markup never raises: unmatched delimiters and backticks degrade to
literal text. The exceptions here cover misuse of the node API and the
driver's progress guard.
"""

from __future__ import annotations


class DelimitError(Exception):
    """Base exception for all delimit errors."""

    pass


class NodeClosedError(DelimitError):
    """Attempt to modify a block node that has already been closed.

    Closed nodes are final: ``with_data`` and ``add_child`` refuse them, so the
    ``closed`` flag can never go back to False.
    """

    def __init__(self, node_type: str) -> None:
        """Initialize closed-node error.

        Args:
            node_type: Class name of the closed node (e.g., "Paragraph")
        """
        self.node_type = node_type
        super().__init__(f"{node_type} is closed and cannot be modified")


class ParseStallError(DelimitError):
    """The inline driver loop failed to advance its cursor.

    Every scanning branch consumes at least one character, so this only
    surfaces if a scanner is broken. Raised instead of looping forever.
    """

    def __init__(self, position: int, char: str) -> None:
        """Initialize stall error.

        Args:
            position: Cursor position that did not advance
            char: Character at that position ("" at end of text)
        """
        self.position = position
        self.char = char
        super().__init__(f"inline parser stalled at offset {position} ({char!r})")
