"""Tests for the regular / Chess960 game mode descriptors."""

import pytest

from chessnotation.core.game_mode import (
    REGULAR_CHESS,
    Chess960,
    RegularChess,
    castling_letters,
)


class TestRegularChess:
    def test_always_initialized(self) -> None:
        assert REGULAR_CHESS.is_initialized
        assert REGULAR_CHESS.queenside_rook == 0
        assert REGULAR_CHESS.kingside_rook == 7

    def test_letters(self) -> None:
        assert castling_letters(REGULAR_CHESS) == ("K", "Q", "k", "q")
        assert castling_letters(RegularChess()) == ("K", "Q", "k", "q")


class TestChess960:
    def test_create(self) -> None:
        mode = Chess960.create(0, 7)
        assert mode.is_initialized
        assert mode.queenside_rook == 0
        assert mode.kingside_rook == 7
        assert castling_letters(mode) == ("H", "A", "h", "a")

    def test_letters_follow_rook_files(self) -> None:
        mode = Chess960.create(3, 6)
        assert castling_letters(mode) == ("G", "D", "g", "d")

    def test_uninitialized(self) -> None:
        mode = Chess960.create_uninitialized()
        assert not mode.is_initialized
        with pytest.raises(ValueError, match="not initialized"):
            mode.queenside_rook
        with pytest.raises(ValueError, match="not initialized"):
            castling_letters(mode)

    def test_initialize_once(self) -> None:
        mode = Chess960.create_uninitialized()
        mode.initialize(1, 5)
        with pytest.raises(ValueError, match="already initialized"):
            mode.initialize(0, 7)
        assert (mode.queenside_rook, mode.kingside_rook) == (1, 5)

    @pytest.mark.parametrize("files", [(-1, 7), (0, 8), (5, 2), (4, 4)])
    def test_rejects_bad_files(self, files: tuple[int, int]) -> None:
        with pytest.raises(ValueError):
            Chess960.create(*files)

    def test_unsupported_mode(self) -> None:
        with pytest.raises(TypeError, match="Unsupported game mode"):
            castling_letters(object())  # type: ignore[arg-type]
