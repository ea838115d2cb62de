"""Exceptions raised by the notation codecs.

Every decode failure is a :class:`NotationError`, which subclasses
``ValueError`` so callers may catch either. Misuse of the API (bad arguments,
sentinel values used as pieces) raises plain ``ValueError``/``TypeError``.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Broad category of a decode failure."""

    STRUCTURAL = "structural"
    ALPHABET = "alphabet"
    CARDINALITY = "cardinality"
    RANGE = "range"
    TRUNCATION = "truncation"
    CHESS960 = "chess960"


class NotationError(ValueError):
    """Base class for FEN/SAN/PGN decode failures.

    Attributes:
        kind: Category of the failure.
    """

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.STRUCTURAL) -> None:
        super().__init__(message)
        self.kind = kind


class FenError(NotationError):
    """Raised when a FEN string or placement field cannot be decoded."""


class SanError(NotationError):
    """Raised when no algebraic-notation production matches the input."""


class PgnError(NotationError):
    """Raised when a PGN transcript cannot be decoded."""
