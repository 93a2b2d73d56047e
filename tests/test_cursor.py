"""Tests for TextCursor."""

import dataclasses

import pytest

from delimit.cursor import TextCursor


class TestTextCursor:
    """Pure position arithmetic over an immutable string."""

    def test_starts_at_zero(self) -> None:
        cur = TextCursor("abc")
        assert cur.position == 0
        assert cur.char_at() == "a"

    def test_advance_returns_new_cursor(self) -> None:
        cur = TextCursor("abc")
        moved = cur.advance(2)
        assert moved.position == 2
        assert moved.char_at() == "c"
        assert cur.position == 0

    def test_advance_stops_at_end(self) -> None:
        cur = TextCursor("abc").advance(10)
        assert cur.position == 3
        assert cur.at_end()
        assert cur.char_at() == ""

    def test_move_to_absolute(self) -> None:
        cur = TextCursor("abcdef", 4)
        assert cur.move_to(1).position == 1
        assert cur.move_to(-5).position == 0

    def test_move_to_same_position_returns_self(self) -> None:
        cur = TextCursor("abc", 1)
        assert cur.move_to(1) is cur

    def test_substring(self) -> None:
        cur = TextCursor("hello world", 6)
        assert cur.substring(0, 5) == "hello"
        assert cur.remaining == "world"

    def test_code_points(self) -> None:
        """Positions count code points, not bytes."""
        cur = TextCursor("é*").advance(1)
        assert cur.char_at() == "*"

    def test_empty_text(self) -> None:
        cur = TextCursor("")
        assert cur.at_end()
        assert cur.char_at() == ""

    @pytest.mark.parametrize("position", [-1, 4])
    def test_invalid_position(self, position: int) -> None:
        with pytest.raises(ValueError):
            TextCursor("abc", position)

    def test_frozen(self) -> None:
        cur = TextCursor("abc")
        with pytest.raises(dataclasses.FrozenInstanceError):
            cur.position = 2  # type: ignore[misc]
