"""Code span scanning for delimit.

A code span opens with a run of N backticks and closes at the next run of
exactly N backticks; shorter or longer runs in between are part of the
content. Content is kept verbatim: no space stripping, no newline folding.

Without a closer the opening run degrades to literal text and scanning
resumes right after it. The text is not retried as code from a later
backtick inside that run.

Thread Safety:
All methods use instance-local state only.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from delimit.nodes import CodeSpan, Text
from delimit.parsing.charsets import BACKTICK_RUN
from delimit.utils.logger import get_logger

if TYPE_CHECKING:
    from delimit.cursor import TextCursor

logger = get_logger(__name__)


class CodeSpanMixin:
    """Mixin for backtick code spans.

    Required Host Attributes:
        - _cursor: TextCursor

    Required Host Methods:
        - _emit(node) -> None

    """

    _cursor: TextCursor

    def _parse_code_span(self) -> None:
        """Scan a code span (or its literal fallback) at a backtick."""
        cursor = self._cursor
        opening = BACKTICK_RUN.match(cursor.value, cursor.position)
        if opening is None:
            return
        open_len = opening.end() - opening.start()
        content_start = opening.end()

        close_start = self._find_code_span_close(cursor.value, content_start, open_len)
        if close_start == -1:
            logger.debug(
                "unterminated code span of %d backtick(s) at offset %d",
                open_len,
                cursor.position,
            )
            self._emit(Text(opening.group()))
            self._cursor = cursor.move_to(content_start)
            return

        self._emit(CodeSpan(cursor.substring(content_start, close_start)))
        self._cursor = cursor.move_to(close_start + open_len)

    def _find_code_span_close(self, text: str, start: int, backtick_count: int) -> int:
        """Offset of the first backtick run of ``backtick_count`` after ``start``.

        Returns -1 if no such run exists.
        """
        for run in BACKTICK_RUN.finditer(text, start):
            if run.end() - run.start() == backtick_count:
                return run.start()
        return -1
