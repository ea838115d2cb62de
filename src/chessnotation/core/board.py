"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Sequence

from chessnotation.core.enums import Color, PieceKind
from chessnotation.core.piece import TeamedPiece
from chessnotation.core.types import FILE_LETTERS, Square

_BACK_RANK = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """Mutable 64-square board stored as a flat ``rank * 8 + file`` array."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[TeamedPiece] = [TeamedPiece.NONE] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> TeamedPiece:
        return self._squares[sq.index]

    def __setitem__(self, sq: Square, piece: TeamedPiece) -> None:
        self._squares[sq.index] = TeamedPiece(piece)

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq.index] == TeamedPiece.NONE

    def squares(self) -> tuple[TeamedPiece, ...]:
        """All 64 squares in index order."""
        return tuple(self._squares)

    def set_squares(self, pieces: Sequence[TeamedPiece]) -> None:
        """Replace every square at once."""
        if len(pieces) != 64:
            raise ValueError(f"Board needs exactly 64 squares, got {len(pieces)}")
        self._squares = [TeamedPiece(p) for p in pieces]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [TeamedPiece.NONE] * 64

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f, kind in enumerate(_BACK_RANK):
            b[Square(f, 0)] = TeamedPiece.of(Color.WHITE, kind)
            b[Square(f, 1)] = TeamedPiece.W_PAWN
            b[Square(f, 6)] = TeamedPiece.B_PAWN
            b[Square(f, 7)] = TeamedPiece.of(Color.BLACK, kind)
        return b

    # -- Rendering ----------------------------------------------------------

    def render(self, white_perspective: bool = True) -> str:
        """ASCII diagram, rank 8 at the top unless seen from Black's side."""
        ranks = range(7, -1, -1) if white_perspective else range(8)
        files = range(8) if white_perspective else range(7, -1, -1)
        rows: list[str] = []
        for rank in ranks:
            row = []
            for file in files:
                p = self[Square(file, rank)]
                row.append(str(p) if p != TeamedPiece.NONE else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        letters = FILE_LETTERS if white_perspective else FILE_LETTERS[::-1]
        rows.append("  " + " ".join(letters))
        return "\n".join(rows)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        return self.render()
