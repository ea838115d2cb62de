"""Tunable bounds applied by the notation parsers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class NotationLimits:
    """Parser bounds shared by the FEN and PGN decoders."""

    # Longest accepted FEN string; checked before any parsing.
    max_fen_length: int = 96
    # Inclusive; 100 half-moves is the fifty-move rule.
    max_halfmove_clock: int = 100
    max_nag: int = 255

    def __post_init__(self) -> None:
        for name in ("max_fen_length", "max_halfmove_clock", "max_nag"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be positive")


DEFAULT_LIMITS = NotationLimits()
