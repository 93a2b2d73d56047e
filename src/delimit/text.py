"""Extract plain text from delimit trees.

Example:
    >>> from delimit import parse_inline
    >>> from delimit.nodes import Paragraph
    >>> extract_text(Paragraph(parse_inline("Hello **World**")))
    'Hello World'
"""

from collections.abc import Iterator

from delimit.nodes import (
    BlockNode,
    BlockQuote,
    Child,
    CodeSpan,
    Document,
    Emphasis,
    FencedCode,
    IndentedCode,
    List,
    ListItem,
    Node,
    SoftBreak,
    Strong,
    Text,
    ThematicBreak,
    children_of,
)


def extract_text(node: Node | str) -> str:
    """Extract plain text from any node.

    Walks the tree with an explicit stack, so nesting depth is not limited
    by the recursion limit. SoftBreak contributes a space. Raw string
    children (paragraphs not yet inline parsed) are returned as-is. Code
    block lines are joined with newlines, container blocks join their
    children with a space.

    """
    # Each frame: node, its unvisited children, text of visited children
    stack: list[tuple[Node | str, Iterator[Child], list[str]]] = [
        (node, iter(children_of(node)), [])
    ]
    while True:
        current, pending, parts = stack[-1]
        child = next(pending, None)
        if child is not None:
            stack.append((child, iter(children_of(child)), []))
            continue
        stack.pop()
        text = _join(current, parts)
        if not stack:
            return text
        stack[-1][2].append(text)


def _join(node: Node | str, parts: list[str]) -> str:
    """Text of ``node`` given the text of each of its children."""
    match node:
        case str():
            return node
        case Text():
            return node.content
        case CodeSpan():
            return node.code
        case SoftBreak():
            return " "
        case Emphasis() | Strong():
            return "".join(parts)
        case ThematicBreak():
            return ""
        case IndentedCode() | FencedCode():
            return "\n".join(parts)
        case Document() | BlockQuote() | List() | ListItem():
            return " ".join(parts)
        case BlockNode():
            return "".join(parts)
        case _:
            return ""
