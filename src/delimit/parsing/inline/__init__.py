"""Inline parsing subsystem for delimit.

Provides mixins for parsing inline content:
- Emphasis and strong (``*``)
- Code spans (`` ` ``)
- Plain text and soft breaks (driver loop)

Architecture:
A single left-to-right pass with a delimiter stack and a parallel stack of
output segments, resolving emphasis as soon as a closer is seen.
See: https://spec.commonmark.org/0.31.2/#emphasis-and-strong-emphasis

"""

from __future__ import annotations

from delimit.parsing.inline.code_span import CodeSpanMixin
from delimit.parsing.inline.core import InlineParsingCoreMixin
from delimit.parsing.inline.emphasis import EmphasisMixin
from delimit.parsing.inline.tokens import Delimiter


class InlineParsingMixin(
    InlineParsingCoreMixin,
    EmphasisMixin,
    CodeSpanMixin,
):
    """Combined inline parsing mixin.

    Required Host Attributes:
        - _cursor: TextCursor
        - _config: ParseConfig
        - _nodes: list[Inline]
        - _delimiters: list[Delimiter]
        - _segments: list[list[Inline]]

    """

    pass


__all__ = [
    "InlineParsingMixin",
    "InlineParsingCoreMixin",
    "EmphasisMixin",
    "CodeSpanMixin",
    "Delimiter",
]
