"""Tests for the exception hierarchy and the driver's progress guard."""

import pytest

from delimit import InlineParser
from delimit.errors import DelimitError, NodeClosedError, ParseStallError


class StuckParser(InlineParser):
    """Plain-text branch that never consumes anything."""

    def _parse_text(self) -> None:
        pass


class TestHierarchy:
    def test_subclasses(self) -> None:
        assert issubclass(NodeClosedError, DelimitError)
        assert issubclass(ParseStallError, DelimitError)

    def test_node_closed_message(self) -> None:
        err = NodeClosedError("Paragraph")
        assert err.node_type == "Paragraph"
        assert "Paragraph is closed" in str(err)

    def test_stall_message(self) -> None:
        err = ParseStallError(7, "x")
        assert err.position == 7
        assert "offset 7" in str(err)


class TestProgressGuard:
    """A branch that does not advance raises instead of looping forever."""

    def test_stall_detected(self) -> None:
        parser = StuckParser("abc")
        with pytest.raises(ParseStallError) as exc_info:
            parser.parse()
        assert exc_info.value.position == 0
        assert exc_info.value.char == "a"

    def test_step_at_end_is_noop(self) -> None:
        parser = InlineParser("")
        assert parser.step() is False
        assert parser.parse() == ()

    def test_parse_twice_returns_same_result(self) -> None:
        parser = InlineParser("*a*")
        first = parser.parse()
        assert parser.parse() is first
