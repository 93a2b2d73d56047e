"""Emphasis parsing for delimit.

Scans ``*`` runs, classifies them with the CommonMark flanking rules, and
resolves openers against closers on the parser's delimiter stack.
See: https://spec.commonmark.org/0.31.2/#emphasis-and-strong-emphasis

Matching is a simplified form of the CommonMark algorithm:

- any pending opener is compatible with any closer (there is no "multiple
  of 3" rejection);
- the matched count is the smaller of the two runs; 1 gives Emphasis and
  2 or more gives Strong, so ``***a***`` is a single Strong;
- a leftover opener stays on the stack with the reduced count, a leftover
  closer is scanned again from where the matched part ended;
- a run that can neither open nor close anything is dropped unless
  ``ParseConfig.keep_inert_delimiters`` is set.

Thread Safety:
All methods use instance-local state only.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from delimit.nodes import Emphasis, Strong, Text
from delimit.parsing.charsets import (
    STAR_RUN,
    is_unicode_punctuation,
    is_unicode_whitespace,
)
from delimit.parsing.inline.tokens import Delimiter
from delimit.utils.logger import get_logger

if TYPE_CHECKING:
    from delimit.config import ParseConfig
    from delimit.cursor import TextCursor
    from delimit.nodes import Inline

logger = get_logger(__name__)


class EmphasisMixin:
    """Mixin for ``*`` delimiter scanning and resolution.

    Required Host Attributes:
        - _cursor: TextCursor
        - _config: ParseConfig
        - _delimiters: list[Delimiter]
        - _segments: list[list[Inline]]
        - _star_run: tuple[int, int] (bounds of the last ``*`` run scanned)

    Required Host Methods:
        - _emit(node) -> None
        - _flatten(start, into) -> None

    """

    _cursor: TextCursor
    _config: ParseConfig
    _delimiters: list[Delimiter]
    _segments: list[list[Inline]]
    _star_run: tuple[int, int]

    def _is_left_flanking(self, before: str, after: str) -> bool:
        """Check if delimiter run is left-flanking.

        Left-flanking: not followed by whitespace, and either:
        - not followed by punctuation, OR
        - preceded by whitespace or punctuation
        """
        if is_unicode_whitespace(after):
            return False
        if not is_unicode_punctuation(after):
            return True
        return is_unicode_whitespace(before) or is_unicode_punctuation(before)

    def _is_right_flanking(self, before: str, after: str) -> bool:
        """Check if delimiter run is right-flanking.

        Right-flanking: not preceded by whitespace, and either:
        - not preceded by punctuation, OR
        - followed by whitespace or punctuation
        """
        if is_unicode_whitespace(before):
            return False
        if not is_unicode_punctuation(before):
            return True
        return is_unicode_whitespace(after) or is_unicode_punctuation(after)

    def _scan_delimiter(self, cursor: TextCursor) -> Delimiter:
        """Classify the ``*`` run containing the cursor position.

        ``count`` only covers the part of the run from the cursor onwards,
        while flanking looks at the characters outside the whole run. A
        closer that was partly consumed therefore keeps its flags when it is
        scanned again.

        The bounds of the last run scanned are cached, so re-scanning the
        rest of a closer is O(1) instead of walking back to its start.
        """
        text = cursor.value
        pos = cursor.position

        delim_start, delim_end = self._star_run
        if not delim_start <= pos < delim_end:
            run = STAR_RUN.match(text, pos)
            delim_end = run.end() if run else pos
            delim_start = pos
            while delim_start > 0 and text[delim_start - 1] == "*":
                delim_start -= 1
            self._star_run = (delim_start, delim_end)

        before = text[delim_start - 1] if delim_start > 0 else ""
        after = text[delim_end] if delim_end < len(text) else ""

        return Delimiter(
            count=delim_end - pos,
            can_open=self._is_left_flanking(before, after),
            can_close=self._is_right_flanking(before, after),
        )

    def _opener_matches(self, opener: Delimiter, closer: Delimiter) -> bool:
        """Whether ``opener`` may be closed by ``closer``.

        Flanking was settled when both runs were scanned, and only openers are
        ever pushed, so every stacked delimiter qualifies.
        """
        return opener.can_open and closer.can_close

    def _find_opener(self, closer: Delimiter) -> int:
        """Stack index of the nearest compatible opener, or -1."""
        for depth in range(len(self._delimiters) - 1, -1, -1):
            if self._opener_matches(self._delimiters[depth], closer):
                return depth
        return -1

    def _parse_emphasis(self) -> None:
        """Resolve the ``*`` run at the cursor against the delimiter stack."""
        delim = self._scan_delimiter(self._cursor)
        depth = self._find_opener(delim) if delim.can_close else -1

        if depth == -1:
            if delim.can_open:
                self._delimiters.append(delim)
                self._segments.append([])
            elif self._config.keep_inert_delimiters:
                self._emit(Text(delim.literal))
            else:
                logger.debug(
                    "dropping inert run of %d '*' at offset %d",
                    delim.count,
                    self._cursor.position,
                )
            self._cursor = self._cursor.advance(delim.count)
            return

        # Openers above the match were crossed by this closer: literal text now
        self._flatten(depth + 1, self._segments[depth])

        opener = self._delimiters[-1]
        matched = min(opener.count, delim.count)
        node = self._wrap(self._segments[-1], matched)

        if opener.count > matched:
            self._delimiters[-1] = opener.consume(matched)
            self._segments[-1] = [node]
        else:
            self._delimiters.pop()
            self._segments.pop()
            self._emit(node)

        # A longer closer is only advanced past its matched part
        self._cursor = self._cursor.advance(matched)

    def _wrap(self, children: list[Inline], count: int) -> Inline:
        if count == 1:
            return Emphasis(tuple(children))
        return Strong(tuple(children))
