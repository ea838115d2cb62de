"""Game mode descriptors: regular chess and Chess960.

The mode decides which letters the FEN castling field uses. Regular chess
always uses ``KQkq``; Chess960 uses the files of the castling rooks, which
are only known once an initial placement has been scanned (or the
descriptor was created with explicit files).
"""

from __future__ import annotations

from typing import TypeAlias

from chessnotation.core.types import file_char


class RegularChess:
    """Standard chess: rooks start on the a- and h-files."""

    __slots__ = ()

    queenside_rook = 0
    kingside_rook = 7
    is_initialized = True

    def __repr__(self) -> str:
        return "RegularChess()"


REGULAR_CHESS = RegularChess()


class Chess960:
    """Fischer random chess; the castling rook files are data."""

    __slots__ = ("_queenside_rook", "_kingside_rook")

    def __init__(self) -> None:
        self._queenside_rook: int | None = None
        self._kingside_rook: int | None = None

    @classmethod
    def create(cls, queenside_rook: int, kingside_rook: int) -> Chess960:
        """Descriptor with known rook files (0–7)."""
        mode = cls()
        mode.initialize(queenside_rook, kingside_rook)
        return mode

    @classmethod
    def create_uninitialized(cls) -> Chess960:
        """Descriptor whose rook files come from the first FEN decoded with it."""
        return cls()

    @property
    def is_initialized(self) -> bool:
        return self._queenside_rook is not None

    @property
    def queenside_rook(self) -> int:
        if self._queenside_rook is None:
            raise ValueError("Chess960 is not initialized")
        return self._queenside_rook

    @property
    def kingside_rook(self) -> int:
        if self._kingside_rook is None:
            raise ValueError("Chess960 is not initialized")
        return self._kingside_rook

    def initialize(self, queenside_rook: int, kingside_rook: int) -> None:
        """Fix the rook files. Allowed exactly once."""
        if self.is_initialized:
            raise ValueError("Chess960 is already initialized")
        for name, file in (
            ("queenside_rook", queenside_rook),
            ("kingside_rook", kingside_rook),
        ):
            if not 0 <= file < 8:
                raise ValueError(f"Invalid {name} file: {file}")
        if queenside_rook >= kingside_rook:
            raise ValueError("Queen-side rook must be left of the king-side rook")
        self._queenside_rook = queenside_rook
        self._kingside_rook = kingside_rook

    def __repr__(self) -> str:
        if not self.is_initialized:
            return "Chess960(uninitialized)"
        return (
            f"Chess960(queenside_rook={file_char(self.queenside_rook)!r}, "
            f"kingside_rook={file_char(self.kingside_rook)!r})"
        )


GameMode: TypeAlias = RegularChess | Chess960


def castling_letters(game_mode: GameMode) -> tuple[str, str, str, str]:
    """Rights letters as (white kingside, white queenside, black kingside, black queenside)."""
    if isinstance(game_mode, RegularChess):
        return ("K", "Q", "k", "q")
    if isinstance(game_mode, Chess960):
        king = file_char(game_mode.kingside_rook)
        queen = file_char(game_mode.queenside_rook)
        return (king.upper(), queen.upper(), king, queen)
    raise TypeError(f"Unsupported game mode: {game_mode!r}")
