"""Notation package: FEN / SAN / PGN parsing and serialization."""

from chessnotation.core.notation.fen import (
    STARTING_FEN,
    board_from_placement,
    load_fen,
    placement_to_fen,
    position_from_fen,
    position_to_fen,
)
from chessnotation.core.notation.models import Nag, PgnGame, PgnMove
from chessnotation.core.notation.pgn import (
    build_pgn,
    parse_pgn,
    pgn_movetext,
    pgn_result_token,
    termination_from_token,
)
from chessnotation.core.notation.san import move_to_san, parse_san, parse_san_token

__all__ = [
    "STARTING_FEN",
    "Nag",
    "PgnGame",
    "PgnMove",
    "board_from_placement",
    "load_fen",
    "placement_to_fen",
    "position_from_fen",
    "position_to_fen",
    "move_to_san",
    "parse_san",
    "parse_san_token",
    "pgn_result_token",
    "termination_from_token",
    "pgn_movetext",
    "build_pgn",
    "parse_pgn",
]
