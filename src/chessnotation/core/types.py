"""Square value type and coordinate helpers.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

from dataclasses import dataclass

FILE_LETTERS = "abcdefgh"
RANK_DIGITS = "12345678"


def file_char(file: int, *, uppercase: bool = False) -> str:
    """Letter for file index 0–7, e.g. 6 → 'g'."""
    ch = FILE_LETTERS[file]
    return ch.upper() if uppercase else ch


def rank_char(rank: int) -> str:
    """Digit for rank index 0–7, e.g. 0 → '1'."""
    return RANK_DIGITS[rank]


def parse_file(ch: str) -> int | None:
    """File index for a lowercase file letter, ``None`` if *ch* is not one."""
    idx = FILE_LETTERS.find(ch) if len(ch) == 1 else -1
    return idx if idx >= 0 else None


def parse_rank(ch: str) -> int | None:
    """Rank index for a rank digit, ``None`` if *ch* is not one."""
    idx = RANK_DIGITS.find(ch) if len(ch) == 1 else -1
    return idx if idx >= 0 else None


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable (file, rank) pair, both 0–7 for a real square."""

    file: int
    rank: int

    @property
    def is_valid(self) -> bool:
        return 0 <= self.file < 8 and 0 <= self.rank < 8

    @property
    def index(self) -> int:
        """Linear index ``rank * 8 + file`` used for board storage."""
        if not self.is_valid:
            raise ValueError(f"Square has no index: {self!r}")
        return self.rank * 8 + self.file

    @property
    def name(self) -> str:
        """Human-readable name, e.g. 'e4'."""
        return file_char(self.file) + rank_char(self.rank)

    @classmethod
    def from_index(cls, index: int) -> Square:
        """Square for a linear index, e.g. 28 → e4."""
        if not 0 <= index < 64:
            raise ValueError(f"Invalid square index: {index}")
        return cls(index & 7, index >> 3)

    @classmethod
    def parse(cls, name: str) -> Square:
        """Parse square name, e.g. 'e4'."""
        if len(name) != 2:
            raise ValueError(f"Invalid square name: {name!r}")
        file = parse_file(name[0])
        rank = parse_rank(name[1])
        if file is None or rank is None:
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(file, rank)

    def __str__(self) -> str:
        return self.name if self.is_valid else "-"


# Both components out of range.
INVALID_SQUARE = Square(8, 8)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Square(f, 0) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(f, 1) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(f, 2) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(f, 3) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(f, 4) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(f, 5) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(f, 6) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Square(f, 7) for f in range(8))
