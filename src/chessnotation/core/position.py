"""Position: complete game state (board + metadata)."""

from __future__ import annotations

from chessnotation.core.board import Board
from chessnotation.core.enums import CastlingAbility, Color
from chessnotation.core.types import Square


class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    A position is only ever changed wholesale, through :meth:`assign`; the
    notation codecs build a complete replacement first and commit it at the
    end, so a failed decode never leaves a half-written position behind.
    Any non-negative half-move clock is held here; the codecs bound it
    through :class:`~chessnotation.core.config.NotationLimits`.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "white_castling",
        "black_castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        white_castling: CastlingAbility = CastlingAbility.NONE,
        black_castling: CastlingAbility = CastlingAbility.NONE,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        if halfmove_clock < 0:
            raise ValueError(f"Negative halfmove clock: {halfmove_clock}")
        if fullmove_number < 1:
            raise ValueError(f"Fullmove number must be >= 1: {fullmove_number}")
        self.board = board if board is not None else Board()
        self.side_to_move = side_to_move
        self.white_castling = white_castling
        self.black_castling = black_castling
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position, White to move, all castling rights."""
        return cls(
            Board.initial(),
            Color.WHITE,
            CastlingAbility.BOTH,
            CastlingAbility.BOTH,
        )

    @property
    def white_to_move(self) -> bool:
        return self.side_to_move == Color.WHITE

    def castling(self, color: Color) -> CastlingAbility:
        """Castling rights held by *color*."""
        return self.white_castling if color == Color.WHITE else self.black_castling

    # ── Whole-state replacement ──────────────────────────────────────────

    def assign(self, other: Position) -> None:
        """Overwrite every field with a copy of *other*'s state."""
        self.board = other.board.copy()
        self.side_to_move = other.side_to_move
        self.white_castling = other.white_castling
        self.black_castling = other.black_castling
        self.en_passant = other.en_passant
        self.halfmove_clock = other.halfmove_clock
        self.fullmove_number = other.fullmove_number

    def copy(self) -> Position:
        return Position(
            self.board.copy(),
            self.side_to_move,
            self.white_castling,
            self.black_castling,
            self.en_passant,
            self.halfmove_clock,
            self.fullmove_number,
        )

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.white_castling == other.white_castling
            and self.black_castling == other.black_castling
            and self.en_passant == other.en_passant
            and self.halfmove_clock == other.halfmove_clock
            and self.fullmove_number == other.fullmove_number
        )

    def __repr__(self) -> str:
        return (
            f"Position(side_to_move={self.side_to_move}, "
            f"white_castling={self.white_castling!r}, "
            f"black_castling={self.black_castling!r}, "
            f"en_passant={self.en_passant}, "
            f"halfmove_clock={self.halfmove_clock}, "
            f"fullmove_number={self.fullmove_number})"
        )
