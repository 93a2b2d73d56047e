"""Driver loop for inline parsing.

Walks a TextCursor over one paragraph or heading string, dispatching on the
current character to the code-span scanner, the emphasis resolver, or the
plain-text branch, until the text is exhausted. Pending output is kept on two
parallel stacks:

- ``_delimiters``: openers that have not been matched yet
- ``_segments``: the nodes produced strictly inside each opener

Both always have the same length. ``_segments[i]`` collects everything
scanned after ``_delimiters[i]``; when the opener is matched the segment
becomes the emphasis node's children, and when it never is, the opener
degrades to literal ``*`` text followed by its segment.

The loop is iterative with O(1) native stack usage, whatever the nesting.

Thread Safety:
All state is instance-local. Use one parser instance per text run.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from delimit.errors import ParseStallError
from delimit.nodes import Inline, SoftBreak, Text
from delimit.parsing.charsets import PLAIN_LINE_RUN, PLAIN_RUN
from delimit.utils.logger import get_logger

if TYPE_CHECKING:
    from delimit.config import ParseConfig
    from delimit.cursor import TextCursor
    from delimit.parsing.inline.tokens import Delimiter

logger = get_logger(__name__)


class InlineParsingCoreMixin:
    """Driver loop, output routing and end-of-input flush.

    Required Host Attributes:
        - _cursor: TextCursor
        - _config: ParseConfig
        - _nodes: list[Inline]
        - _delimiters: list[Delimiter]
        - _segments: list[list[Inline]]

    Required Host Methods (from other mixins):
        - _parse_code_span() -> None
        - _parse_emphasis() -> None

    """

    _cursor: TextCursor
    _config: ParseConfig
    _nodes: list[Inline]
    _delimiters: list[Delimiter]
    _segments: list[list[Inline]]

    @property
    def position(self) -> int:
        """Offset of the next character to scan."""
        return self._cursor.position

    @property
    def stack_depths(self) -> tuple[int, int]:
        """Current ``(delimiter stack, segment stack)`` lengths."""
        return len(self._delimiters), len(self._segments)

    def at_end(self) -> bool:
        return self._cursor.at_end()

    def step(self) -> bool:
        """Scan one construct at the cursor.

        Returns:
            False if the text was already exhausted, True otherwise.

        Raises:
            ParseStallError: If the branch taken did not move the cursor.
        """
        if self._cursor.at_end():
            return False
        start = self._cursor.position
        char = self._cursor.char_at()

        match char:
            case "`":
                self._parse_code_span()
            case "*":
                self._parse_emphasis()
            case "\n" if self._config.softbreaks:
                self._emit(SoftBreak())
                self._cursor = self._cursor.advance(1)
            case _:
                self._parse_text()

        if self._cursor.position <= start:
            raise ParseStallError(start, char)
        return True

    def _parse_text(self) -> None:
        """Emit the maximal run without delimiters as one Text node."""
        pattern = PLAIN_LINE_RUN if self._config.softbreaks else PLAIN_RUN
        run = pattern.match(self._cursor.value, self._cursor.position)
        if run is None:
            # Dispatch sent a delimiter here; step() reports the stall
            return
        self._emit(Text(run.group()))
        self._cursor = self._cursor.move_to(run.end())

    def _emit(self, node: Inline) -> None:
        """Append ``node`` to the innermost open segment (or the top level)."""
        if self._segments:
            self._segments[-1].append(node)
        else:
            self._nodes.append(node)

    def _flatten(self, start: int, into: list[Inline]) -> None:
        """Turn every pending opener from ``start`` upwards into literal text.

        Each opener contributes its ``*`` run followed by its segment, in push
        order, appended to ``into``. Both stacks are truncated to ``start``.
        """
        for opener, segment in zip(self._delimiters[start:], self._segments[start:]):
            into.append(Text(opener.literal))
            into.extend(segment)
        del self._delimiters[start:]
        del self._segments[start:]

    def _finish(self) -> tuple[Inline, ...]:
        """Flush unmatched openers and return the top-level nodes."""
        if self._delimiters:
            logger.debug(
                "%d unmatched opener(s) flushed as literal text",
                len(self._delimiters),
            )
            self._flatten(0, self._nodes)
        return tuple(self._nodes)


__all__ = ["InlineParsingCoreMixin"]
