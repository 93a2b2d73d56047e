"""Tree visitor and transformer for delimit.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen trees.

Example — collect all headings:

    class HeadingCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.headings: list[Heading] = []

        def visit_heading(self, node: Heading) -> None:
            self.headings.append(node)

    collector = HeadingCollector()
    collector.visit(doc)

Example — drop thematic breaks:

    def no_rules(node: Node) -> Node | None:
        return None if isinstance(node, ThematicBreak) else node

    new_doc = transform(doc, no_rules)

Raw string children (unparsed paragraph text, code lines) are not nodes:
visitors skip them and transform passes them through unchanged.

Thread Safety:
    Visitors may accumulate mutable state; create one per thread. The
    transform function is pure.

"""

import dataclasses
from collections.abc import Callable, Iterator

from delimit.nodes import (
    BlockQuote,
    Child,
    CodeSpan,
    Document,
    Emphasis,
    FencedCode,
    Heading,
    IndentedCode,
    List,
    ListItem,
    Node,
    Paragraph,
    SoftBreak,
    Strong,
    Text,
    ThematicBreak,
    children_of,
)


class BaseVisitor[T]:
    """Base visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call.

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk children.

        Descendants are dispatched in document order from an explicit stack,
        so deep trees do not hit the recursion limit. Their return values are
        discarded.
        """
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method."""
        return None  # type: ignore[return-value]

    # -- Block visitors --------------------------------------------------------

    def visit_document(self, node: Document) -> T:
        return self.visit_default(node)

    def visit_thematic_break(self, node: ThematicBreak) -> T:
        return self.visit_default(node)

    def visit_paragraph(self, node: Paragraph) -> T:
        return self.visit_default(node)

    def visit_block_quote(self, node: BlockQuote) -> T:
        return self.visit_default(node)

    def visit_indented_code(self, node: IndentedCode) -> T:
        return self.visit_default(node)

    def visit_fenced_code(self, node: FencedCode) -> T:
        return self.visit_default(node)

    def visit_list(self, node: List) -> T:
        return self.visit_default(node)

    def visit_list_item(self, node: ListItem) -> T:
        return self.visit_default(node)

    def visit_heading(self, node: Heading) -> T:
        return self.visit_default(node)

    # -- Inline visitors -------------------------------------------------------

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_soft_break(self, node: SoftBreak) -> T:
        return self.visit_default(node)

    def visit_emphasis(self, node: Emphasis) -> T:
        return self.visit_default(node)

    def visit_strong(self, node: Strong) -> T:
        return self.visit_default(node)

    def visit_code_span(self, node: CodeSpan) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node) -> T:
        match node:
            case Document():
                return self.visit_document(node)
            case ThematicBreak():
                return self.visit_thematic_break(node)
            case Paragraph():
                return self.visit_paragraph(node)
            case BlockQuote():
                return self.visit_block_quote(node)
            case IndentedCode():
                return self.visit_indented_code(node)
            case FencedCode():
                return self.visit_fenced_code(node)
            case List():
                return self.visit_list(node)
            case ListItem():
                return self.visit_list_item(node)
            case Heading():
                return self.visit_heading(node)
            case Text():
                return self.visit_text(node)
            case SoftBreak():
                return self.visit_soft_break(node)
            case Emphasis():
                return self.visit_emphasis(node)
            case Strong():
                return self.visit_strong(node)
            case CodeSpan():
                return self.visit_code_span(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        pending = [c for c in reversed(children_of(node)) if isinstance(c, Node)]
        while pending:
            child = pending.pop()
            self._dispatch(child)
            pending.extend(c for c in reversed(children_of(child)) if isinstance(c, Node))


def transform[N: Node](root: N, fn: Callable[[Node], Node | None]) -> N:
    """Apply a function to every node in the tree, returning a new tree.

    The function ``fn`` is called bottom-up: children are transformed first,
    then the parent is transformed with its new children. The walk uses an
    explicit stack, so nesting depth is not limited by the recursion limit.

    Return ``None`` from ``fn`` to remove a node from the tree. The root
    cannot be removed, and must keep its type.

    Nodes are rebuilt with ``dataclasses.replace``, which does not go through
    ``BlockNode.add_child``: a transform produces a new tree, it does not
    edit open nodes, so closed nodes are rebuilt too (and stay closed).

    Raises:
        TypeError: If ``fn`` removes the root or changes its type.

    """
    result = _transform_tree(root, fn)
    if result is None or not isinstance(result, type(root)):
        msg = f"transform fn must return a {type(root).__name__} for the root"
        raise TypeError(msg)
    return result


def _transform_tree(root: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    """Post-order walk: each node reaches ``fn`` after all of its children."""
    # Each frame: node, its unvisited children, transformed children so far
    stack: list[tuple[Node, Iterator[Child], list[Child]]] = [
        (root, iter(children_of(root)), [])
    ]
    while True:
        node, pending, done = stack[-1]
        child = next(pending, None)
        if child is not None:
            if isinstance(child, str):
                done.append(child)
            else:
                stack.append((child, iter(children_of(child)), []))
            continue

        stack.pop()
        if not _same_children(done, children_of(node)):
            node = dataclasses.replace(node, children=tuple(done))
        result = fn(node)
        if not stack:
            return result
        if result is not None:
            stack[-1][2].append(result)


def _same_children(new: list[Child], old: tuple[Child, ...]) -> bool:
    # Identity, not equality: == on deep subtrees recurses
    return len(new) == len(old) and all(a is b for a, b in zip(new, old))
