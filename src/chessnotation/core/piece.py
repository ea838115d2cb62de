"""Teamed piece: a piece kind combined with a color, or an empty square."""

from __future__ import annotations

from enum import IntEnum

from chessnotation.core.enums import Color, PieceKind

_PIECE_LETTERS = "PNBRQK"
_UNICODE = "♙♘♗♖♕♔♟♞♝♜♛♚"


class TeamedPiece(IntEnum):
    """Board square content.

    All White values precede all Black values, so color follows from a
    range comparison against ``B_PAWN``.
    """

    NONE = 0
    W_PAWN = 1
    W_KNIGHT = 2
    W_BISHOP = 3
    W_ROOK = 4
    W_QUEEN = 5
    W_KING = 6
    B_PAWN = 7
    B_KNIGHT = 8
    B_BISHOP = 9
    B_ROOK = 10
    B_QUEEN = 11
    B_KING = 12

    @classmethod
    def of(cls, color: Color, kind: PieceKind) -> TeamedPiece:
        """Compose a teamed piece, e.g. (BLACK, ROOK) → B_ROOK."""
        if kind == PieceKind.NONE:
            raise ValueError("PieceKind.NONE has no teamed piece")
        offset = 0 if color == Color.WHITE else int(PieceKind.KING)
        return cls(int(kind) + offset)

    @classmethod
    def from_char(cls, char: str) -> TeamedPiece:
        """Create piece from FEN character, e.g. 'N' → W_KNIGHT."""
        piece = cls.try_from_char(char)
        if piece is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return piece

    @classmethod
    def try_from_char(cls, char: str) -> TeamedPiece | None:
        idx = _PIECE_LETTERS.find(char.upper()) if len(char) == 1 else -1
        if idx < 0:
            return None
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls.of(color, PieceKind(idx + 1))

    def _require_piece(self) -> None:
        if self == TeamedPiece.NONE:
            raise ValueError("TeamedPiece.NONE is an empty square, not a piece")

    @property
    def color(self) -> Color:
        self._require_piece()
        return Color.WHITE if self < TeamedPiece.B_PAWN else Color.BLACK

    @property
    def kind(self) -> PieceKind:
        self._require_piece()
        value = int(self)
        if self >= TeamedPiece.B_PAWN:
            value -= int(PieceKind.KING)
        return PieceKind(value)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        self._require_piece()
        return _UNICODE[int(self) - 1]

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        self._require_piece()
        letter = _PIECE_LETTERS[int(self.kind) - 1]
        return letter if self.color == Color.WHITE else letter.lower()
