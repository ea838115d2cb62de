"""Shared notation-layer data models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType

from chessnotation.core.enums import PgnTermination
from chessnotation.core.move import Move


class Nag(IntEnum):
    """Standard Numeric Annotation Glyphs.

    Codes 140–255 are valid in PGN but have no standard meaning and are
    kept as plain integers.
    """

    NULL = 0

    # 1–9: move assessments
    GOOD_MOVE = 1  # !
    POOR_MOVE = 2  # ?
    VERY_GOOD_MOVE = 3  # !!
    VERY_POOR_MOVE = 4  # ??
    SPECULATIVE_MOVE = 5  # !?
    QUESTIONABLE_MOVE = 6  # ?!
    FORCED_MOVE = 7
    SINGULAR_MOVE = 8
    WORST_MOVE = 9

    # 10–135: positional assessments
    DRAWISH_POSITION = 10  # =
    EQUAL_QUIET_POSITION = 11
    EQUAL_ACTIVE_POSITION = 12
    UNCLEAR_POSITION = 13
    WHITE_SLIGHT_ADVANTAGE = 14
    BLACK_SLIGHT_ADVANTAGE = 15
    WHITE_MODERATE_ADVANTAGE = 16
    BLACK_MODERATE_ADVANTAGE = 17
    WHITE_DECISIVE_ADVANTAGE = 18
    BLACK_DECISIVE_ADVANTAGE = 19
    WHITE_CRUSHING_ADVANTAGE = 20
    BLACK_CRUSHING_ADVANTAGE = 21
    WHITE_ZUGZWANG = 22
    BLACK_ZUGZWANG = 23
    WHITE_SLIGHT_SPACE_ADVANTAGE = 24
    BLACK_SLIGHT_SPACE_ADVANTAGE = 25
    WHITE_MODERATE_SPACE_ADVANTAGE = 26
    BLACK_MODERATE_SPACE_ADVANTAGE = 27
    WHITE_DECISIVE_SPACE_ADVANTAGE = 28
    BLACK_DECISIVE_SPACE_ADVANTAGE = 29
    WHITE_SLIGHT_DEVELOPMENT_ADVANTAGE = 30
    BLACK_SLIGHT_DEVELOPMENT_ADVANTAGE = 31
    WHITE_MODERATE_DEVELOPMENT_ADVANTAGE = 32
    BLACK_MODERATE_DEVELOPMENT_ADVANTAGE = 33
    WHITE_DECISIVE_DEVELOPMENT_ADVANTAGE = 34
    BLACK_DECISIVE_DEVELOPMENT_ADVANTAGE = 35
    WHITE_INITIATIVE = 36
    BLACK_INITIATIVE = 37
    WHITE_LASTING_INITIATIVE = 38
    BLACK_LASTING_INITIATIVE = 39
    WHITE_ATTACK = 40
    BLACK_ATTACK = 41
    WHITE_INSUFFICIENT_COMPENSATION = 42
    BLACK_INSUFFICIENT_COMPENSATION = 43
    WHITE_SUFFICIENT_COMPENSATION = 44
    BLACK_SUFFICIENT_COMPENSATION = 45
    WHITE_MORE_THAN_ADEQUATE_COMPENSATION = 46
    BLACK_MORE_THAN_ADEQUATE_COMPENSATION = 47
    WHITE_SLIGHT_CENTER_ADVANTAGE = 48
    BLACK_SLIGHT_CENTER_ADVANTAGE = 49
    WHITE_MODERATE_CENTER_ADVANTAGE = 50
    BLACK_MODERATE_CENTER_ADVANTAGE = 51
    WHITE_DECISIVE_CENTER_ADVANTAGE = 52
    BLACK_DECISIVE_CENTER_ADVANTAGE = 53
    WHITE_SLIGHT_KINGSIDE_ADVANTAGE = 54
    BLACK_SLIGHT_KINGSIDE_ADVANTAGE = 55
    WHITE_MODERATE_KINGSIDE_ADVANTAGE = 56
    BLACK_MODERATE_KINGSIDE_ADVANTAGE = 57
    WHITE_DECISIVE_KINGSIDE_ADVANTAGE = 58
    BLACK_DECISIVE_KINGSIDE_ADVANTAGE = 59
    WHITE_SLIGHT_QUEENSIDE_ADVANTAGE = 60
    BLACK_SLIGHT_QUEENSIDE_ADVANTAGE = 61
    WHITE_MODERATE_QUEENSIDE_ADVANTAGE = 62
    BLACK_MODERATE_QUEENSIDE_ADVANTAGE = 63
    WHITE_DECISIVE_QUEENSIDE_ADVANTAGE = 64
    BLACK_DECISIVE_QUEENSIDE_ADVANTAGE = 65
    WHITE_VULNERABLE_FIRST_RANK = 66
    BLACK_VULNERABLE_FIRST_RANK = 67
    WHITE_WELL_PROTECTED_FIRST_RANK = 68
    BLACK_WELL_PROTECTED_FIRST_RANK = 69
    WHITE_POORLY_PROTECTED_KING = 70
    BLACK_POORLY_PROTECTED_KING = 71
    WHITE_WELL_PROTECTED_KING = 72
    BLACK_WELL_PROTECTED_KING = 73
    WHITE_POORLY_PLACED_KING = 74
    BLACK_POORLY_PLACED_KING = 75
    WHITE_WELL_PLACED_KING = 76
    BLACK_WELL_PLACED_KING = 77
    WHITE_VERY_WEAK_PAWN_STRUCTURE = 78
    BLACK_VERY_WEAK_PAWN_STRUCTURE = 79
    WHITE_MODERATELY_WEAK_PAWN_STRUCTURE = 80
    BLACK_MODERATELY_WEAK_PAWN_STRUCTURE = 81
    WHITE_MODERATELY_STRONG_PAWN_STRUCTURE = 82
    BLACK_MODERATELY_STRONG_PAWN_STRUCTURE = 83
    WHITE_VERY_STRONG_PAWN_STRUCTURE = 84
    BLACK_VERY_STRONG_PAWN_STRUCTURE = 85
    WHITE_POOR_KNIGHT_PLACEMENT = 86
    BLACK_POOR_KNIGHT_PLACEMENT = 87
    WHITE_GOOD_KNIGHT_PLACEMENT = 88
    BLACK_GOOD_KNIGHT_PLACEMENT = 89
    WHITE_POOR_BISHOP_PLACEMENT = 90
    BLACK_POOR_BISHOP_PLACEMENT = 91
    WHITE_GOOD_BISHOP_PLACEMENT = 92
    BLACK_GOOD_BISHOP_PLACEMENT = 93
    WHITE_POOR_ROOK_PLACEMENT = 94
    BLACK_POOR_ROOK_PLACEMENT = 95
    WHITE_GOOD_ROOK_PLACEMENT = 96
    BLACK_GOOD_ROOK_PLACEMENT = 97
    WHITE_POOR_QUEEN_PLACEMENT = 98
    BLACK_POOR_QUEEN_PLACEMENT = 99
    WHITE_GOOD_QUEEN_PLACEMENT = 100
    BLACK_GOOD_QUEEN_PLACEMENT = 101
    WHITE_POOR_PIECE_COORDINATION = 102
    BLACK_POOR_PIECE_COORDINATION = 103
    WHITE_GOOD_PIECE_COORDINATION = 104
    BLACK_GOOD_PIECE_COORDINATION = 105
    WHITE_VERY_POORLY_PLAYED_OPENING = 106
    BLACK_VERY_POORLY_PLAYED_OPENING = 107
    WHITE_POORLY_PLAYED_OPENING = 108
    BLACK_POORLY_PLAYED_OPENING = 109
    WHITE_WELL_PLAYED_OPENING = 110
    BLACK_WELL_PLAYED_OPENING = 111
    WHITE_VERY_WELL_PLAYED_OPENING = 112
    BLACK_VERY_WELL_PLAYED_OPENING = 113
    WHITE_VERY_POORLY_PLAYED_MIDDLEGAME = 114
    BLACK_VERY_POORLY_PLAYED_MIDDLEGAME = 115
    WHITE_POORLY_PLAYED_MIDDLEGAME = 116
    BLACK_POORLY_PLAYED_MIDDLEGAME = 117
    WHITE_WELL_PLAYED_MIDDLEGAME = 118
    BLACK_WELL_PLAYED_MIDDLEGAME = 119
    WHITE_VERY_WELL_PLAYED_MIDDLEGAME = 120
    BLACK_VERY_WELL_PLAYED_MIDDLEGAME = 121
    WHITE_VERY_POORLY_PLAYED_ENDING = 122
    BLACK_VERY_POORLY_PLAYED_ENDING = 123
    WHITE_POORLY_PLAYED_ENDING = 124
    BLACK_POORLY_PLAYED_ENDING = 125
    WHITE_WELL_PLAYED_ENDING = 126
    BLACK_WELL_PLAYED_ENDING = 127
    WHITE_VERY_WELL_PLAYED_ENDING = 128
    BLACK_VERY_WELL_PLAYED_ENDING = 129
    WHITE_SLIGHT_COUNTERPLAY = 130
    BLACK_SLIGHT_COUNTERPLAY = 131
    WHITE_MODERATE_COUNTERPLAY = 132
    BLACK_MODERATE_COUNTERPLAY = 133
    WHITE_DECISIVE_COUNTERPLAY = 134
    BLACK_DECISIVE_COUNTERPLAY = 135

    # 136–139: time pressure
    WHITE_MODERATE_TIME_PRESSURE = 136
    BLACK_MODERATE_TIME_PRESSURE = 137
    WHITE_SEVERE_TIME_PRESSURE = 138
    BLACK_SEVERE_TIME_PRESSURE = 139


_STANDARD_NAG_MAX = int(Nag.BLACK_SEVERE_TIME_PRESSURE)

RESULT_TOKENS: dict[PgnTermination, str] = {
    PgnTermination.WHITE_WIN: "1-0",
    PgnTermination.BLACK_WIN: "0-1",
    PgnTermination.DRAW: "1/2-1/2",
    PgnTermination.UNKNOWN: "*",
}


@dataclass(frozen=True, slots=True)
class PgnMove:
    """A single ply of PGN movetext with its annotations."""

    move: Move
    nag: int = 0
    # May span several lines; kept verbatim.
    comment: str | None = None

    def __post_init__(self) -> None:
        if not 0 <= self.nag <= 255:
            raise ValueError(f"NAG out of range: {self.nag}")

    @property
    def assessment(self) -> Nag | None:
        """The glyph as a :class:`Nag`, ``None`` when absent or non-standard."""
        if self.nag == 0 or self.nag > _STANDARD_NAG_MAX:
            return None
        return Nag(self.nag)


@dataclass(frozen=True, slots=True)
class PgnGame:
    """A parsed PGN transcript: tags, mainline plies, and the outcome."""

    tags: Mapping[str, str]
    moves: tuple[PgnMove, ...]
    termination: PgnTermination = PgnTermination.UNKNOWN

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", MappingProxyType(dict(self.tags)))
        object.__setattr__(self, "moves", tuple(self.moves))

    @property
    def result_token(self) -> str:
        """PGN result token for the termination, e.g. '1-0'."""
        return RESULT_TOKENS[self.termination]
