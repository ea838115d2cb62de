"""Core enumerations and flags for the chess position model."""

from __future__ import annotations

from enum import IntEnum, IntFlag


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Piece kinds ordered by conventional value.

    ``NONE`` is a sentinel and never names a real piece.
    """

    NONE = 0
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastlingAbility(IntFlag):
    """Castling availability for a single color."""

    NONE = 0
    QUEEN_SIDE = 1
    KING_SIDE = 2

    BOTH = QUEEN_SIDE | KING_SIDE


class PgnTermination(IntEnum):
    """Outcome recorded at the end of a PGN transcript."""

    UNKNOWN = 0
    DRAW = 1
    WHITE_WIN = 2
    BLACK_WIN = 3
