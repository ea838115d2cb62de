"""Move value object decoded from algebraic notation.

A move records only what its text said: which piece, any source hints, the
destination, and the capture/check/castle markers. Nothing here claims the
move is legal on any board.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessnotation.core.enums import PieceKind
from chessnotation.core.types import Square

PROMOTION_KINDS = frozenset(
    {PieceKind.KNIGHT, PieceKind.BISHOP, PieceKind.ROOK, PieceKind.QUEEN}
)


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable decoded SAN token.

    Exactly one of ``destination`` and a castle flag is set. ``is_checkmate``
    implies ``is_check``; the constructor sets the latter when needed.
    """

    piece: PieceKind = PieceKind.PAWN
    from_file: int | None = None
    from_rank: int | None = None
    destination: Square | None = None
    promotion: PieceKind = PieceKind.NONE
    is_capture: bool = False
    castle_queenside: bool = False
    castle_kingside: bool = False
    is_check: bool = False
    is_checkmate: bool = False

    def __post_init__(self) -> None:
        if self.piece == PieceKind.NONE:
            raise ValueError("Move needs a piece kind")
        if self.castle_queenside and self.castle_kingside:
            raise ValueError("Move cannot castle on both sides")
        if (self.destination is not None) == self.is_castle:
            raise ValueError("Move needs exactly one of a destination or a castle")
        if self.destination is not None and not self.destination.is_valid:
            raise ValueError(f"Invalid destination: {self.destination!r}")
        for name, hint in (("from_file", self.from_file), ("from_rank", self.from_rank)):
            if hint is not None and not 0 <= hint < 8:
                raise ValueError(f"Invalid {name} hint: {hint}")
        if self.promotion != PieceKind.NONE:
            if self.promotion not in PROMOTION_KINDS:
                raise ValueError(f"Invalid promotion piece: {self.promotion!r}")
            if self.piece != PieceKind.PAWN:
                raise ValueError("Only pawns promote")
        if self.is_castle and (self.piece != PieceKind.KING or self.is_capture):
            raise ValueError("Castling is a non-capturing king move")
        if self.is_checkmate and not self.is_check:
            object.__setattr__(self, "is_check", True)

    @property
    def is_castle(self) -> bool:
        return self.castle_queenside or self.castle_kingside

    @property
    def is_promotion(self) -> bool:
        return self.promotion != PieceKind.NONE
