"""Tests for the text cursor shared by the decoders."""

import pytest

from chessnotation.core.notation.cursor import TextCursor


class TestTextCursor:
    def test_take_and_peek(self) -> None:
        cursor = TextCursor("ab")
        assert cursor.peek(1) == "b"
        assert cursor.take() == "a"
        assert cursor.take() == "b"
        assert cursor.at_end()

    def test_reading_past_end(self) -> None:
        cursor = TextCursor("a", 1)
        with pytest.raises(IndexError):
            cursor.peek()
        with pytest.raises(IndexError):
            cursor.take()
        with pytest.raises(IndexError):
            cursor.advance(1)

    def test_find_is_relative(self) -> None:
        cursor = TextCursor("x y z", 2)
        assert cursor.find(" ") == 1
        assert cursor.find("q") == -1

    def test_rest_and_remaining(self) -> None:
        cursor = TextCursor("1. e4", 3)
        assert cursor.rest() == "e4"
        assert cursor.remaining == 2
        assert cursor.startswith("e")
        cursor.advance(2)
        assert cursor.rest() == ""

    def test_ahead_is_bounded(self) -> None:
        cursor = TextCursor("1. e4 e5", 3)
        assert cursor.ahead(2) == "e4"
        assert cursor.ahead(50) == "e4 e5"
        assert cursor.pos == 3

    def test_rest_equals(self) -> None:
        cursor = TextCursor("e5 1-0", 3)
        assert cursor.rest_equals("1-0")
        assert not cursor.rest_equals("1-")
        assert not cursor.rest_equals("1-0 ")
