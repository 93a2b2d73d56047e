"""Typed tree nodes for delimit.

All nodes are frozen dataclasses with slots:
- Immutability: "modifying" a node returns a new node
- Pattern matching: match statements dispatch on the node class
- One class per node type, with only the data that type carries

Node Hierarchy:
Node (base)
├── BlockNode (children + closed flag)
│   ├── Document
│   ├── ThematicBreak
│   ├── Paragraph
│   ├── BlockQuote
│   ├── IndentedCode
│   ├── FencedCode
│   ├── List
│   ├── ListItem
│   └── Heading
└── Inline
    ├── Text
    ├── SoftBreak
    ├── Emphasis
    ├── Strong
    └── CodeSpan

Child ordering:
``children`` is always in final, left-to-right document order. Builders
append (``add_child``); nothing exposes a reversed accumulation.

Closed nodes:
A block builder closes a node once no more lines can belong to it. The
modifying helpers refuse closed nodes, so ``closed`` never reverts to False
through the node API. ``dataclasses.replace`` builds a new node from
explicit field values and is outside that guarantee: passing
``closed=False`` to it is a deliberate rebuild. The library's own rebuilds
(``transform``, ``parse_inlines``) never pass ``closed``, so they keep it.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Literal, Self

from delimit.errors import NodeClosedError

type HeadingLevel = Literal[1, 2, 3, 4, 5, 6]


# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all tree nodes."""


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Literal text run.

    Adjacent Text nodes are never merged: ``*foo`` with no closer yields
    ``Text("*")`` followed by ``Text("foo")``.

    """

    content: str


@dataclass(frozen=True, slots=True)
class SoftBreak(Node):
    """Line break inside a paragraph that does not force a hard break."""


@dataclass(frozen=True, slots=True)
class Emphasis(Node):
    """Emphasis formed by a single matched ``*`` on each side.

    Markdown: *text*

    """

    children: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class Strong(Node):
    """Strong emphasis formed by two or more matched ``*`` on each side.

    Markdown: **text** (and ***text***, which is not split further)

    """

    children: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class CodeSpan(Node):
    """Inline code, kept verbatim between equal-length backtick runs.

    Markdown: `code` or ``co`de``

    """

    code: str


type Inline = Text | SoftBreak | Emphasis | Strong | CodeSpan


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class BlockNode(Node):
    """Block-level node produced by the block builder.

    Children are block nodes, inline nodes, or raw strings. A paragraph or
    heading that has not been through the inline pass holds exactly one raw
    string; code blocks hold their lines as strings.

    """

    children: tuple[Child, ...] = ()
    closed: bool = field(default=False, kw_only=True)

    def with_data(self, **changes: Any) -> Self:
        """Return a copy with data fields replaced.

        Raises:
            NodeClosedError: If this node is closed.
            TypeError: If ``children`` is passed (use add_child).
        """
        if self.closed:
            raise NodeClosedError(type(self).__name__)
        if "children" in changes:
            msg = "children are not data; use add_child()"
            raise TypeError(msg)
        return dataclasses.replace(self, **changes)

    def add_child(self, child: Child) -> Self:
        """Return a copy with ``child`` appended after the existing children.

        Raises:
            NodeClosedError: If this node is closed.
        """
        if self.closed:
            raise NodeClosedError(type(self).__name__)
        return dataclasses.replace(self, children=(*self.children, child))

    def close(self) -> Self:
        """Return a closed copy. Closing a closed node returns it unchanged."""
        if self.closed:
            return self
        return dataclasses.replace(self, closed=True)


@dataclass(frozen=True, slots=True)
class Document(BlockNode):
    """Root of the block tree."""


@dataclass(frozen=True, slots=True)
class ThematicBreak(BlockNode):
    """Horizontal rule.

    Markdown: --- or *** or ___

    """


@dataclass(frozen=True, slots=True)
class Paragraph(BlockNode):
    """Paragraph block; its raw text is inline-parsed by parse_inlines()."""


@dataclass(frozen=True, slots=True)
class BlockQuote(BlockNode):
    """Block quote.

    Markdown: > quoted text

    """


@dataclass(frozen=True, slots=True)
class IndentedCode(BlockNode):
    """Indented code block; children are the raw code lines."""


@dataclass(frozen=True, slots=True)
class FencedCode(BlockNode):
    """Fenced code block; children are the raw code lines.

    Markdown: ```python ... ```

    """

    fence: Literal["`", "~"] = "`"
    info: str | None = None


@dataclass(frozen=True, slots=True)
class List(BlockNode):
    """Ordered or unordered list; children are ListItem nodes."""

    ordered: bool = False
    start: int = 1


@dataclass(frozen=True, slots=True)
class ListItem(BlockNode):
    """List item.

    ``padding`` is the column width of the marker plus following spaces,
    used by the block builder to decide which lines continue the item.

    """

    padding: int = 0


@dataclass(frozen=True, slots=True)
class Heading(BlockNode):
    """ATX or setext heading; ``level`` is left untouched by the inline pass."""

    level: HeadingLevel = 1

    def __post_init__(self) -> None:
        if self.level not in (1, 2, 3, 4, 5, 6):
            msg = f"heading level must be 1-6, got {self.level!r}"
            raise ValueError(msg)


type Block = (
    Document
    | ThematicBreak
    | Paragraph
    | BlockQuote
    | IndentedCode
    | FencedCode
    | List
    | ListItem
    | Heading
)

type Child = Block | Inline | str


def children_of(node: Node | str) -> tuple[Child, ...]:
    """Children of a container node; empty for leaves and raw strings."""
    match node:
        case BlockNode(children=children) | Emphasis(children=children) | Strong(
            children=children
        ):
            return children
        case _:
            return ()


__all__ = [
    "Block",
    "BlockNode",
    "BlockQuote",
    "Child",
    "CodeSpan",
    "children_of",
    "Document",
    "Emphasis",
    "FencedCode",
    "Heading",
    "HeadingLevel",
    "IndentedCode",
    "Inline",
    "List",
    "ListItem",
    "Node",
    "Paragraph",
    "SoftBreak",
    "Strong",
    "Text",
    "ThematicBreak",
]
