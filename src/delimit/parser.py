"""Inline parser and block-tree transformer.

InlineParser parses one paragraph or heading string into inline nodes.
parse_inlines() walks a finished block tree and replaces the raw text of
every paragraph and heading with its parsed inline nodes.

Architecture:
The parser uses the same mixin layout as the rest of the parsing package:
- `InlineParsingCoreMixin`: driver loop, output routing, flush
- `EmphasisMixin`: ``*`` scanning and resolution
- `CodeSpanMixin`: backtick code spans

Thread Safety:
- Each InlineParser instance is single-use and instance-local
- Configuration is read from ContextVar (thread-local)
- The resulting trees are immutable and safe to share

"""

from __future__ import annotations

import dataclasses

from delimit.config import ParseConfig, get_parse_config
from delimit.cursor import TextCursor
from delimit.nodes import BlockNode, Heading, Inline, Node, Paragraph
from delimit.parsing import InlineParsingMixin
from delimit.parsing.inline.tokens import Delimiter
from delimit.utils.logger import get_logger
from delimit.visitor import transform

logger = get_logger(__name__)


class InlineParser(InlineParsingMixin):
    """Parser for the inline content of one text run.

    Usage:
        >>> InlineParser("*foo*").parse()
        (Emphasis(children=(Text(content='foo'),)),)

        >>> # Step-by-step, for inspecting the stacks
        >>> parser = InlineParser("*a **b")
        >>> while parser.step():
        ...     assert parser.stack_depths[0] == parser.stack_depths[1]
        >>> parser.parse()
        (Text(content='*'), Text(content='a '), Text(content='**'), Text(content='b'))

    Calling parse() again returns the same result.

    """

    __slots__ = (
        "_config",
        "_cursor",
        "_delimiters",
        "_nodes",
        "_result",
        "_segments",
        "_star_run",
    )

    def __init__(self, text: str, *, config: ParseConfig | None = None) -> None:
        """Initialize parser with the text to parse.

        Args:
            text: Raw inline text of one paragraph or heading
            config: Parse configuration (defaults to the active context config)
        """
        self._cursor = TextCursor(text)
        self._config = config if config is not None else get_parse_config()
        self._nodes: list[Inline] = []
        self._delimiters: list[Delimiter] = []
        self._segments: list[list[Inline]] = []
        self._star_run = (0, 0)
        self._result: tuple[Inline, ...] | None = None

    def parse(self) -> tuple[Inline, ...]:
        """Parse the remaining text and return the inline nodes in order."""
        if self._result is None:
            while self.step():
                pass
            self._result = self._finish()
        return self._result


def parse_inline(text: str, *, config: ParseConfig | None = None) -> tuple[Inline, ...]:
    """Parse one text run into inline nodes.

    Args:
        text: Raw inline text
        config: Parse configuration (defaults to the active context config)

    Returns:
        Inline nodes in left-to-right order; empty for empty text.

    Example:
        >>> parse_inline("*foo **bar** baz*")
        (Emphasis(children=(Text(content='foo '), Strong(children=(Text(content='bar'),)), Text(content=' baz'))),)
    """
    if not text:
        return ()
    return InlineParser(text, config=config).parse()


def parse_inlines[N: BlockNode](root: N, *, config: ParseConfig | None = None) -> N:
    """Run the inline parser over every paragraph and heading in a block tree.

    A Paragraph or Heading whose children are exactly one raw string gets
    that string replaced by its inline nodes; its type, ``level``, ``closed``
    flag and other data are kept. Any other node (including a paragraph that
    was already parsed) keeps its data, with its children transformed
    recursively.

    Args:
        root: Root of the block tree (usually a Document)
        config: Parse configuration (defaults to the active context config)

    Returns:
        A new tree of the same root type; ``root`` is not modified.
    """
    active = config if config is not None else get_parse_config()

    def parse_leaf(node: Node) -> Node:
        match node:
            case Paragraph(children=(str() as raw,)) | Heading(children=(str() as raw,)):
                children = parse_inline(raw, config=active)
                logger.debug(
                    "%s: %d chars -> %d inline node(s)",
                    type(node).__name__,
                    len(raw),
                    len(children),
                )
                return dataclasses.replace(node, children=children)
            case _:
                return node

    return transform(root, parse_leaf)
