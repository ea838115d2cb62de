"""Core domain layer: chess notation codecs with zero external dependencies.

Quick start::

    from chessnotation.core import STARTING_FEN, parse_pgn, position_from_fen

    pos = position_from_fen(STARTING_FEN)
    print(pos.board)
"""

from chessnotation.core.board import Board
from chessnotation.core.config import DEFAULT_LIMITS, NotationLimits
from chessnotation.core.enums import CastlingAbility, Color, PgnTermination, PieceKind
from chessnotation.core.errors import (
    ErrorKind,
    FenError,
    NotationError,
    PgnError,
    SanError,
)
from chessnotation.core.game_mode import (
    REGULAR_CHESS,
    Chess960,
    GameMode,
    RegularChess,
    castling_letters,
)
from chessnotation.core.move import Move
from chessnotation.core.notation import (
    STARTING_FEN,
    Nag,
    PgnGame,
    PgnMove,
    board_from_placement,
    build_pgn,
    load_fen,
    move_to_san,
    parse_pgn,
    parse_san,
    parse_san_token,
    placement_to_fen,
    position_from_fen,
    position_to_fen,
)
from chessnotation.core.piece import TeamedPiece
from chessnotation.core.position import Position
from chessnotation.core.types import INVALID_SQUARE, Square

__all__ = [
    # Enums / flags
    "CastlingAbility",
    "Color",
    "PgnTermination",
    "PieceKind",
    # Types / helpers
    "INVALID_SQUARE",
    "Square",
    "TeamedPiece",
    # Domain objects
    "Board",
    "Move",
    "Position",
    # Game modes
    "REGULAR_CHESS",
    "Chess960",
    "GameMode",
    "RegularChess",
    "castling_letters",
    # Configuration / errors
    "DEFAULT_LIMITS",
    "NotationLimits",
    "ErrorKind",
    "NotationError",
    "FenError",
    "SanError",
    "PgnError",
    # Notation
    "STARTING_FEN",
    "Nag",
    "PgnGame",
    "PgnMove",
    "board_from_placement",
    "build_pgn",
    "load_fen",
    "move_to_san",
    "parse_pgn",
    "parse_san",
    "parse_san_token",
    "placement_to_fen",
    "position_from_fen",
    "position_to_fen",
]
