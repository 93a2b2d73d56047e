"""Tests for the node tree: immutability, child order and the closed flag."""

import dataclasses

import pytest

from delimit.errors import NodeClosedError
from delimit.nodes import (
    BlockQuote,
    Document,
    Emphasis,
    FencedCode,
    Heading,
    List,
    ListItem,
    Paragraph,
    Text,
    ThematicBreak,
)


class TestImmutability:
    """Nodes are frozen dataclasses."""

    def test_inline_node_frozen(self) -> None:
        node = Text("foo")
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.content = "bar"  # type: ignore[misc]

    def test_block_node_frozen(self) -> None:
        node = Paragraph(("raw",))
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.closed = True  # type: ignore[misc]

    def test_nodes_are_slotted(self) -> None:
        assert hasattr(Paragraph, "__slots__")
        assert hasattr(Text, "__slots__")

    def test_structural_equality(self) -> None:
        assert Emphasis((Text("a"),)) == Emphasis((Text("a"),))
        assert Emphasis((Text("a"),)) != Emphasis((Text("b"),))


class TestAddChild:
    """add_child returns a new node with the child appended."""

    def test_appends_in_order(self) -> None:
        first = Paragraph(("one",))
        second = ThematicBreak()
        doc = Document().add_child(first).add_child(second)
        assert doc.children == (first, second)

    def test_original_untouched(self) -> None:
        quote = BlockQuote()
        grown = quote.add_child(Paragraph(("x",)))
        assert quote.children == ()
        assert len(grown.children) == 1

    def test_keeps_type_and_data(self) -> None:
        item = ListItem(padding=2).add_child(Paragraph(("x",)))
        assert isinstance(item, ListItem)
        assert item.padding == 2

    def test_code_lines_as_strings(self) -> None:
        code = FencedCode(fence="~", info="python").add_child("x = 1").add_child("y = 2")
        assert code.children == ("x = 1", "y = 2")
        assert code.info == "python"


class TestWithData:
    """with_data replaces data fields only."""

    def test_replaces_field(self) -> None:
        heading = Heading(("Title",), level=1)
        assert heading.with_data(level=3).level == 3
        assert heading.level == 1

    def test_list_data(self) -> None:
        ordered = List().with_data(ordered=True, start=4)
        assert (ordered.ordered, ordered.start) == (True, 4)

    def test_children_rejected(self) -> None:
        with pytest.raises(TypeError, match="add_child"):
            Paragraph().with_data(children=("x",))

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(TypeError):
            Paragraph().with_data(level=2)


class TestClosed:
    """Closed nodes cannot be modified and never reopen."""

    def test_close_sets_flag(self) -> None:
        para = Paragraph(("x",))
        closed = para.close()
        assert closed.closed is True
        assert para.closed is False

    def test_close_is_idempotent(self) -> None:
        closed = Paragraph(("x",)).close()
        assert closed.close() is closed

    def test_add_child_refused(self) -> None:
        closed = Document().close()
        with pytest.raises(NodeClosedError) as exc_info:
            closed.add_child(Paragraph(("x",)))
        assert exc_info.value.node_type == "Document"

    def test_with_data_refused(self) -> None:
        closed = ListItem(padding=2).close()
        with pytest.raises(NodeClosedError):
            closed.with_data(padding=4)

    def test_cannot_reopen(self) -> None:
        closed = Paragraph().close()
        with pytest.raises(NodeClosedError):
            closed.with_data(closed=False)

    def test_closed_is_keyword_only(self) -> None:
        with pytest.raises(TypeError):
            Paragraph((), True)  # type: ignore[misc]


class TestHeadingLevel:
    """Heading levels are validated at construction."""

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_valid_levels(self, level: int) -> None:
        assert Heading(("x",), level=level).level == level  # type: ignore[arg-type]

    @pytest.mark.parametrize("level", [0, 7, -1])
    def test_invalid_levels(self, level: int) -> None:
        with pytest.raises(ValueError, match="1-6"):
            Heading(("x",), level=level)  # type: ignore[arg-type]

    def test_with_data_validates(self) -> None:
        with pytest.raises(ValueError):
            Heading(("x",)).with_data(level=9)
