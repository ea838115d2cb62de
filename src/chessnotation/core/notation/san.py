"""SAN (Standard Algebraic Notation) token parsing and formatting.

Parsing is purely textual: ``"b8"``, ``"a3=Q"`` or ``"Kd1#"`` decode fine
even though no position is consulted.
"""

from __future__ import annotations

import re

from chessnotation.core.enums import PieceKind
from chessnotation.core.errors import ErrorKind, SanError
from chessnotation.core.move import Move
from chessnotation.core.types import Square, file_char, parse_file, parse_rank, rank_char

_SAN_PIECE: dict[PieceKind, str] = {
    PieceKind.KNIGHT: "N",
    PieceKind.BISHOP: "B",
    PieceKind.ROOK: "R",
    PieceKind.QUEEN: "Q",
    PieceKind.KING: "K",
}
_SAN_PIECE_REV: dict[str, PieceKind] = {v: k for k, v in _SAN_PIECE.items()}

_SUFFIX = r"(?P<suffix>[+#])?"

# Longer tokens first: several shorter productions match a prefix of a
# longer token ("O-O" of "O-O-O", "bxa8" of "bxa8=Q", "Nf3" of "Nf3d2").
_PRODUCTIONS = tuple(
    re.compile(pattern + _SUFFIX)
    for pattern in (
        # O-O-O
        r"(?P<castle_queenside>O-O-O)",
        # O-O
        r"(?P<castle_kingside>O-O)",
        # bxa8=Q
        r"(?P<from_file>[a-h])(?P<capture>x)(?P<to_file>[a-h])(?P<to_rank>[1-8])=(?P<promotion>[NBRQ])",
        # a8=Q
        r"(?P<to_file>[a-h])(?P<to_rank>[1-8])=(?P<promotion>[NBRQ])",
        # dxc6
        r"(?P<from_file>[a-h])(?P<capture>x)(?P<to_file>[a-h])(?P<to_rank>[1-8])",
        # a3
        r"(?P<to_file>[a-h])(?P<to_rank>[1-8])",
        # Nf3xd2
        r"(?P<piece>[NBRQK])(?P<from_file>[a-h])(?P<from_rank>[1-8])(?P<capture>x)(?P<to_file>[a-h])(?P<to_rank>[1-8])",
        # Nf3d2
        r"(?P<piece>[NBRQK])(?P<from_file>[a-h])(?P<from_rank>[1-8])(?P<to_file>[a-h])(?P<to_rank>[1-8])",
        # Nfxd2, N3xd2
        r"(?P<piece>[NBRQK])(?P<hint>[a-h1-8])(?P<capture>x)(?P<to_file>[a-h])(?P<to_rank>[1-8])",
        # Nfd2, N3d2
        r"(?P<piece>[NBRQK])(?P<hint>[a-h1-8])(?P<to_file>[a-h])(?P<to_rank>[1-8])",
        # Nxf3
        r"(?P<piece>[NBRQK])(?P<capture>x)(?P<to_file>[a-h])(?P<to_rank>[1-8])",
        # Nf3
        r"(?P<piece>[NBRQK])(?P<to_file>[a-h])(?P<to_rank>[1-8])",
    )
)


def parse_san_token(text: str, pos: int = 0) -> tuple[Move, int]:
    """Decode one SAN token starting at *pos*.

    Returns the move and the number of characters it occupied, including a
    trailing ``+``/``#``. Nothing after the token is inspected.
    """
    for production in _PRODUCTIONS:
        match = production.match(text, pos)
        if match is not None:
            return _build_move(match.groupdict()), match.end() - pos
    raise SanError("Unable to parse move from algebraic notation.", ErrorKind.ALPHABET)


def parse_san(san: str) -> Move:
    """Decode a standalone SAN token; trailing characters are an error."""
    move, consumed = parse_san_token(san)
    if consumed != len(san):
        raise SanError(
            f"Unexpected characters after move: {san[consumed:]!r}",
            ErrorKind.STRUCTURAL,
        )
    return move


def _build_move(groups: dict[str, str | None]) -> Move:
    suffix = groups.get("suffix")
    is_check = suffix is not None
    is_checkmate = suffix == "#"

    if groups.get("castle_queenside") or groups.get("castle_kingside"):
        return Move(
            PieceKind.KING,
            castle_queenside=bool(groups.get("castle_queenside")),
            castle_kingside=bool(groups.get("castle_kingside")),
            is_check=is_check,
            is_checkmate=is_checkmate,
        )

    piece_letter = groups.get("piece")
    piece = _SAN_PIECE_REV[piece_letter] if piece_letter else PieceKind.PAWN

    from_file_letter = groups.get("from_file")
    from_rank_digit = groups.get("from_rank")
    from_file = parse_file(from_file_letter) if from_file_letter else None
    from_rank = parse_rank(from_rank_digit) if from_rank_digit else None
    hint = groups.get("hint")
    if hint is not None:
        from_file = parse_file(hint)
        from_rank = parse_rank(hint)

    destination = Square.parse(f"{groups['to_file']}{groups['to_rank']}")

    promotion_letter = groups.get("promotion")
    promotion = _SAN_PIECE_REV[promotion_letter] if promotion_letter else PieceKind.NONE

    return Move(
        piece,
        from_file,
        from_rank,
        destination,
        promotion,
        is_capture=groups.get("capture") is not None,
        is_check=is_check,
        is_checkmate=is_checkmate,
    )


def move_to_san(move: Move) -> str:
    """Format *move* as its canonical SAN token.

    Pawn moves name a source file exactly when they capture and never a
    source rank; any other pawn move has no SAN token and raises
    ``ValueError``.
    """
    if move.piece == PieceKind.PAWN and (
        move.from_rank is not None or (move.from_file is not None) != move.is_capture
    ):
        raise ValueError(f"Pawn move has no SAN form: {move!r}")
    if move.castle_queenside:
        san = "O-O-O"
    elif move.castle_kingside:
        san = "O-O"
    else:
        assert move.destination is not None
        san = "" if move.piece == PieceKind.PAWN else _SAN_PIECE[move.piece]
        if move.from_file is not None:
            san += file_char(move.from_file)
        if move.from_rank is not None:
            san += rank_char(move.from_rank)
        if move.is_capture:
            san += "x"
        san += move.destination.name
        if move.is_promotion:
            san += "=" + _SAN_PIECE[move.promotion]

    # Check / checkmate suffix
    if move.is_checkmate:
        san += "#"
    elif move.is_check:
        san += "+"
    return san
