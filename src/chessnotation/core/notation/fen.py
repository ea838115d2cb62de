"""FEN parsing and serialization.

What is verified: character counts, the character alphabet of every field,
placement structure (eight ranks of exactly eight files), the castling
field's ordering and uniqueness, and the clock ranges. What is not: piece
counts, king safety, or whether castling rights and the en-passant target
agree with the placement.
"""

from __future__ import annotations

import logging

from chessnotation.core.board import Board
from chessnotation.core.config import DEFAULT_LIMITS, NotationLimits
from chessnotation.core.enums import CastlingAbility, Color
from chessnotation.core.errors import ErrorKind, FenError
from chessnotation.core.game_mode import (
    REGULAR_CHESS,
    Chess960,
    GameMode,
    RegularChess,
    castling_letters,
)
from chessnotation.core.notation.cursor import TextCursor
from chessnotation.core.piece import TeamedPiece
from chessnotation.core.position import Position
from chessnotation.core.types import Square, file_char, parse_file, parse_rank, rank_char

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_EMPTY_DIGITS = "12345678"


# ── Decoding ─────────────────────────────────────────────────────────────────


def position_from_fen(
    fen: str,
    game_mode: GameMode = REGULAR_CHESS,
    *,
    limits: NotationLimits = DEFAULT_LIMITS,
) -> Position:
    """Parse a FEN string into a new :class:`Position`.

    With an uninitialized :class:`Chess960` descriptor the string must be a
    Chess960 starting position (White to move, full castling rights, clocks
    ``0 1``); the rook files found on the back ranks then initialize the
    descriptor. The descriptor is only touched once the whole string has
    been accepted.
    """
    position, rook_files = _decode(fen, game_mode, limits)
    if rook_files is not None:
        assert isinstance(game_mode, Chess960)
        game_mode.initialize(*rook_files)
        _LOGGER.debug(
            "Chess960 rook files set from initial position: queen-side %s, king-side %s",
            file_char(rook_files[0]),
            file_char(rook_files[1]),
        )
    return position


def load_fen(
    position: Position,
    fen: str,
    game_mode: GameMode = REGULAR_CHESS,
    *,
    limits: NotationLimits = DEFAULT_LIMITS,
) -> None:
    """Decode *fen* into an existing *position*; it is left untouched on error."""
    position.assign(position_from_fen(fen, game_mode, limits=limits))


def board_from_placement(placement: str) -> Board:
    """Parse just the placement field (e.g. ``"8/8/8/8/8/8/8/8"``) into a Board."""
    cursor = TextCursor(placement)
    try:
        squares = _parse_placement(cursor)
    except IndexError:
        raise FenError(
            "Too few characters in placement string.", ErrorKind.TRUNCATION
        ) from None
    if not cursor.at_end():
        raise FenError("Too many characters in placement string.")
    board = Board()
    board.set_squares(squares)
    return board


def _decode(
    fen: str, game_mode: GameMode, limits: NotationLimits
) -> tuple[Position, tuple[int, int] | None]:
    if not isinstance(game_mode, (RegularChess, Chess960)):
        raise TypeError(f"Unsupported game mode: {game_mode!r}")
    if len(fen) > limits.max_fen_length:
        raise FenError("Too many characters in FEN string.")

    must_init = isinstance(game_mode, Chess960) and not game_mode.is_initialized
    rook_files: tuple[int, int] | None = None
    cursor = TextCursor(fen)

    try:
        # 1. Piece placement
        squares = _parse_placement(cursor)
        _expect_space(cursor)

        if must_init:
            rook_files = _scan_chess960_initial(squares)
            letters = castling_letters(Chess960.create(*rook_files))
        else:
            letters = castling_letters(game_mode)

        # 2. Side to move
        side = _parse_side_to_move(cursor, must_init)
        _expect_space(cursor)

        # 3. Castling (consumes its trailing space)
        white_castling, black_castling = _parse_castling(cursor, letters)
        if must_init and (
            white_castling != CastlingAbility.BOTH
            or black_castling != CastlingAbility.BOTH
        ):
            raise FenError(
                "Initial position must give both sides full castling rights.",
                ErrorKind.CHESS960,
            )

        # 4. En passant
        en_passant = _parse_en_passant(cursor)
        _expect_space(cursor)

        # 5–6. Clocks
        halfmove = _parse_halfmove_clock(cursor, must_init, limits)
        fullmove = _parse_fullmove_number(cursor, must_init)
    except IndexError:
        raise FenError(
            "Too few characters in FEN string.", ErrorKind.TRUNCATION
        ) from None

    board = Board()
    board.set_squares(squares)
    position = Position(
        board,
        side,
        white_castling,
        black_castling,
        en_passant,
        halfmove,
        fullmove,
    )
    return position, rook_files


def _parse_placement(cursor: TextCursor) -> list[TeamedPiece]:
    squares = [TeamedPiece.NONE] * 64

    for rank in range(7, -1, -1):
        file = 0
        prev_was_empty = False

        while True:
            ch = cursor.take()

            if ch in _EMPTY_DIGITS:
                if prev_was_empty:
                    raise FenError(
                        f"Multiple empty specifiers in rank {rank_char(rank)}",
                        ErrorKind.CARDINALITY,
                    )
                step = int(ch)
                if file + step > 8:
                    raise FenError(
                        f"Too many empty squares in rank {rank_char(rank)}: {ch!r}",
                        ErrorKind.CARDINALITY,
                    )
                file += step
                prev_was_empty = True
            else:
                piece = TeamedPiece.try_from_char(ch)
                if piece is None:
                    raise FenError(
                        f"Invalid piece in rank {rank_char(rank)}: {ch!r}",
                        ErrorKind.ALPHABET,
                    )
                squares[rank * 8 + file] = piece
                file += 1
                prev_was_empty = False

            if file == 8:
                if rank != 0:
                    ch = cursor.take()
                    if ch != "/":
                        raise FenError(f"Rank {rank_char(rank)} ending is invalid: {ch!r}")
                break

    return squares


def _expect_space(cursor: TextCursor) -> None:
    ch = cursor.take()
    if ch != " ":
        raise FenError(f"Invalid space: {ch!r}")


def _scan_chess960_initial(squares: list[TeamedPiece]) -> tuple[int, int]:
    """Rook files (queen-side, king-side) of a Chess960 starting placement."""
    white = _scan_back_rank(squares, 0, "White", TeamedPiece.W_ROOK, TeamedPiece.W_KING)
    black = _scan_back_rank(squares, 7, "Black", TeamedPiece.B_ROOK, TeamedPiece.B_KING)
    if white != black:
        raise FenError(
            "Invalid King/Rook mirroring in Chess960 initial position.",
            ErrorKind.CHESS960,
        )
    queenside_rook, _king, kingside_rook = white
    return queenside_rook, kingside_rook


def _scan_back_rank(
    squares: list[TeamedPiece],
    rank: int,
    team: str,
    rook: TeamedPiece,
    king: TeamedPiece,
) -> tuple[int, int, int]:
    # Only the king and rooks are checked; other pieces may be anything.
    queenside_rook: int | None = None
    king_file: int | None = None
    kingside_rook: int | None = None

    for file in range(8):
        piece = squares[rank * 8 + file]
        if piece == rook:
            if king_file is None:
                if queenside_rook is not None:
                    raise FenError(
                        f"Multiple {team} Queen-side Rooks in Chess960 initial position.",
                        ErrorKind.CARDINALITY,
                    )
                queenside_rook = file
            else:
                if kingside_rook is not None:
                    raise FenError(
                        f"Multiple {team} King-side Rooks in Chess960 initial position.",
                        ErrorKind.CARDINALITY,
                    )
                kingside_rook = file
        elif piece == king:
            if king_file is not None:
                raise FenError(
                    f"Multiple {team} Kings in Chess960 initial position.",
                    ErrorKind.CARDINALITY,
                )
            king_file = file

    if queenside_rook is None or king_file is None or kingside_rook is None:
        raise FenError(
            f"Missing {team} Kings and Rooks in Chess960 initial position.",
            ErrorKind.CHESS960,
        )
    return queenside_rook, king_file, kingside_rook


def _parse_side_to_move(cursor: TextCursor, must_init: bool) -> Color:
    ch = cursor.take()
    if ch == "w":
        side = Color.WHITE
    elif ch == "b":
        side = Color.BLACK
    else:
        raise FenError(f"Invalid side to move: {ch!r}", ErrorKind.ALPHABET)

    if must_init and side != Color.WHITE:
        raise FenError("Initial position must have white to move.", ErrorKind.CHESS960)
    return side


def _parse_castling(
    cursor: TextCursor, letters: tuple[str, str, str, str]
) -> tuple[CastlingAbility, CastlingAbility]:
    white = CastlingAbility.NONE
    black = CastlingAbility.NONE

    if cursor.peek() == "-":
        if cursor.peek(1) != " ":
            raise FenError("Missing space after castling rights")
        cursor.advance(2)
        return white, black

    white_king, white_queen, black_king, black_queen = letters
    began_black = False

    while True:
        ch = cursor.take()

        if ch in (white_king, white_queen):
            flag = CastlingAbility.KING_SIDE if ch == white_king else CastlingAbility.QUEEN_SIDE
            if began_black:
                raise FenError("Castling rights for white appeared after black.")
            if white & flag:
                raise FenError(
                    f"Duplicate white {_flank(flag)} castling rights.",
                    ErrorKind.CARDINALITY,
                )
            white |= flag
        elif ch in (black_king, black_queen):
            flag = CastlingAbility.KING_SIDE if ch == black_king else CastlingAbility.QUEEN_SIDE
            if black & flag:
                raise FenError(
                    f"Duplicate black {_flank(flag)} castling rights.",
                    ErrorKind.CARDINALITY,
                )
            black |= flag
            began_black = True
        elif ch == " ":
            if white == CastlingAbility.NONE and black == CastlingAbility.NONE:
                raise FenError("Missing castling rights")
            return white, black
        else:
            raise FenError(
                f"Invalid castling rights character: {ch!r}", ErrorKind.ALPHABET
            )


def _flank(flag: CastlingAbility) -> str:
    return "King" if flag == CastlingAbility.KING_SIDE else "Queen"


def _parse_en_passant(cursor: TextCursor) -> Square | None:
    if cursor.peek() == "-":
        cursor.advance(1)
        return None

    file = parse_file(cursor.peek())
    rank = parse_rank(cursor.peek(1))
    if file is None or rank is None:
        raise FenError(
            f"Invalid en passant square: {cursor.ahead(2)!r}",
            ErrorKind.ALPHABET,
        )
    cursor.advance(2)
    return Square(file, rank)


def _parse_counter(text: str, field: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise FenError(f"Invalid {field}: {text!r}", ErrorKind.ALPHABET)
    return int(text)


def _parse_halfmove_clock(
    cursor: TextCursor, must_init: bool, limits: NotationLimits
) -> int:
    end = cursor.find(" ")
    if end < 0:
        raise FenError("Missing space after half move counter")

    text = cursor.ahead(end)
    if not text:
        raise FenError("Missing half move counter")
    value = _parse_counter(text, "half move count")

    if must_init and value != 0:
        raise FenError("Initial position must have 0 half moves.", ErrorKind.CHESS960)
    if value > limits.max_halfmove_clock:
        raise FenError(f"Invalid half move count: '{value}'", ErrorKind.RANGE)

    cursor.advance(end + 1)
    return value


def _parse_fullmove_number(cursor: TextCursor, must_init: bool) -> int:
    if cursor.at_end():
        raise IndexError(cursor.pos)
    value = _parse_counter(cursor.rest(), "full move count")

    if must_init and value != 1:
        raise FenError("Initial position must have 1 full move.", ErrorKind.CHESS960)
    if value < 1:
        raise FenError(f"Invalid full move count: '{value}'", ErrorKind.RANGE)

    cursor.advance(cursor.remaining)
    return value


# ── Encoding ─────────────────────────────────────────────────────────────────


def placement_to_fen(board: Board) -> str:
    """Serialise just the placement field."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = board[Square(file, rank)]
            if piece == TeamedPiece.NONE:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def position_to_fen(
    pos: Position,
    game_mode: GameMode = REGULAR_CHESS,
    *,
    limits: NotationLimits = DEFAULT_LIMITS,
) -> str:
    """Serialise a :class:`Position` to FEN.

    Raises ``ValueError`` for a half-move clock the decoder would reject
    under the same *limits*.
    """
    if isinstance(game_mode, Chess960) and not game_mode.is_initialized:
        raise ValueError("Chess960 is not initialized")
    if pos.halfmove_clock > limits.max_halfmove_clock:
        raise ValueError(
            f"Half move clock {pos.halfmove_clock} exceeds {limits.max_halfmove_clock}"
        )
    letters = castling_letters(game_mode)

    # 1. Board
    board_str = placement_to_fen(pos.board)

    # 2. Side
    side_str = "w" if pos.side_to_move == Color.WHITE else "b"

    # 3. Castling
    white_king, white_queen, black_king, black_queen = letters
    castling_str = ""
    if pos.white_castling & CastlingAbility.KING_SIDE:
        castling_str += white_king
    if pos.white_castling & CastlingAbility.QUEEN_SIDE:
        castling_str += white_queen
    if pos.black_castling & CastlingAbility.KING_SIDE:
        castling_str += black_king
    if pos.black_castling & CastlingAbility.QUEEN_SIDE:
        castling_str += black_queen
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = pos.en_passant.name if pos.en_passant is not None else "-"

    return f"{board_str} {side_str} {castling_str} {ep_str} {pos.halfmove_clock} {pos.fullmove_number}"
