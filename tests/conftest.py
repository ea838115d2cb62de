"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessnotation.core.game_mode import Chess960
from chessnotation.core.notation import STARTING_FEN, position_from_fen
from chessnotation.core.position import Position


@pytest.fixture()
def starting_position() -> Position:
    """Freshly decoded standard starting position."""
    return position_from_fen(STARTING_FEN)


@pytest.fixture()
def uninitialized_960() -> Chess960:
    """Chess960 descriptor waiting for its initial position."""
    return Chess960.create_uninitialized()
