"""Tests for SAN token parsing and formatting."""

import pytest

from chessnotation.core.enums import PieceKind
from chessnotation.core.errors import ErrorKind, SanError
from chessnotation.core.move import Move
from chessnotation.core.notation import move_to_san, parse_san, parse_san_token
from chessnotation.core.types import INVALID_SQUARE, Square

_FILES = "abcdefgh"


def _file(letter: str | None) -> int | None:
    return None if letter is None else _FILES.index(letter)


def _rank(digit: str | None) -> int | None:
    return None if digit is None else int(digit) - 1


class TestPawnMoves:
    @pytest.mark.parametrize(
        ("san", "consumed", "from_file", "destination", "capture", "check", "mate"),
        [
            ("a3", 2, None, "a3", False, False, False),
            ("h6", 2, None, "h6", False, False, False),
            ("d4", 2, None, "d4", False, False, False),
            ("a3+", 3, None, "a3", False, True, False),
            ("a3#", 3, None, "a3", False, True, True),
            ("exd4", 4, "e", "d4", True, False, False),
            ("bxa3+", 5, "b", "a3", True, True, False),
            ("bxa3#", 5, "b", "a3", True, True, True),
        ],
    )
    def test_simple_pawn_move(
        self,
        san: str,
        consumed: int,
        from_file: str | None,
        destination: str,
        capture: bool,
        check: bool,
        mate: bool,
    ) -> None:
        move, n = parse_san_token(san)
        assert n == consumed
        assert move.piece == PieceKind.PAWN
        assert move.from_file == _file(from_file)
        assert move.from_rank is None
        assert move.destination == Square.parse(destination)
        assert move.promotion == PieceKind.NONE
        assert move.is_capture is capture
        assert not move.is_castle
        assert move.is_check is check
        assert move.is_checkmate is mate

    @pytest.mark.parametrize(
        ("san", "consumed", "from_file", "destination", "promotion", "capture", "check", "mate"),
        [
            ("a8=Q", 4, None, "a8", PieceKind.QUEEN, False, False, False),
            ("h8=R+", 5, None, "h8", PieceKind.ROOK, False, True, False),
            ("b1=N#", 5, None, "b1", PieceKind.KNIGHT, False, True, True),
            ("c1=B", 4, None, "c1", PieceKind.BISHOP, False, False, False),
            ("bxa8=Q", 6, "b", "a8", PieceKind.QUEEN, True, False, False),
            ("gxh8=R+", 7, "g", "h8", PieceKind.ROOK, True, True, False),
            ("cxb1=N#", 7, "c", "b1", PieceKind.KNIGHT, True, True, True),
        ],
    )
    def test_promotion(
        self,
        san: str,
        consumed: int,
        from_file: str | None,
        destination: str,
        promotion: PieceKind,
        capture: bool,
        check: bool,
        mate: bool,
    ) -> None:
        move, n = parse_san_token(san)
        assert n == consumed
        assert move.piece == PieceKind.PAWN
        assert move.from_file == _file(from_file)
        assert move.destination == Square.parse(destination)
        assert move.promotion == promotion
        assert move.is_promotion
        assert move.is_capture is capture
        assert move.is_check is check
        assert move.is_checkmate is mate

    def test_not_validated_against_a_board(self) -> None:
        # A pawn "promoting" on the first rank is still well-formed text.
        assert parse_san("a1=Q").promotion == PieceKind.QUEEN


class TestPieceMoves:
    @pytest.mark.parametrize(
        ("san", "consumed", "from_file", "from_rank", "destination", "piece", "capture", "check", "mate"),
        [
            ("Nf3", 3, None, None, "f3", PieceKind.KNIGHT, False, False, False),
            ("Rg4", 3, None, None, "g4", PieceKind.ROOK, False, False, False),
            ("Bc8+", 4, None, None, "c8", PieceKind.BISHOP, False, True, False),
            ("Qa7#", 4, None, None, "a7", PieceKind.QUEEN, False, True, True),
            ("Kd1", 3, None, None, "d1", PieceKind.KING, False, False, False),
            ("Bxc8+", 5, None, None, "c8", PieceKind.BISHOP, True, True, False),
            ("Qxa7#", 5, None, None, "a7", PieceKind.QUEEN, True, True, True),
            ("Kxd1", 4, None, None, "d1", PieceKind.KING, True, False, False),
            ("Nfd2", 4, "f", None, "d2", PieceKind.KNIGHT, False, False, False),
            ("Nfd2+", 5, "f", None, "d2", PieceKind.KNIGHT, False, True, False),
            ("Nfd2#", 5, "f", None, "d2", PieceKind.KNIGHT, False, True, True),
            ("Nfxd2", 5, "f", None, "d2", PieceKind.KNIGHT, True, False, False),
            ("Nfxd2+", 6, "f", None, "d2", PieceKind.KNIGHT, True, True, False),
            ("Nfxd2#", 6, "f", None, "d2", PieceKind.KNIGHT, True, True, True),
            ("N3d2", 4, None, "3", "d2", PieceKind.KNIGHT, False, False, False),
            ("N3d2+", 5, None, "3", "d2", PieceKind.KNIGHT, False, True, False),
            ("N3d2#", 5, None, "3", "d2", PieceKind.KNIGHT, False, True, True),
            ("N3xd2", 5, None, "3", "d2", PieceKind.KNIGHT, True, False, False),
            ("N3xd2+", 6, None, "3", "d2", PieceKind.KNIGHT, True, True, False),
            ("N3xd2#", 6, None, "3", "d2", PieceKind.KNIGHT, True, True, True),
            ("Nf3d2", 5, "f", "3", "d2", PieceKind.KNIGHT, False, False, False),
            ("Nf3d2+", 6, "f", "3", "d2", PieceKind.KNIGHT, False, True, False),
            ("Nf3d2#", 6, "f", "3", "d2", PieceKind.KNIGHT, False, True, True),
            ("Nf3xd2", 6, "f", "3", "d2", PieceKind.KNIGHT, True, False, False),
            ("Nf3xd2+", 7, "f", "3", "d2", PieceKind.KNIGHT, True, True, False),
            ("Nf3xd2#", 7, "f", "3", "d2", PieceKind.KNIGHT, True, True, True),
        ],
    )
    def test_piece_move(
        self,
        san: str,
        consumed: int,
        from_file: str | None,
        from_rank: str | None,
        destination: str,
        piece: PieceKind,
        capture: bool,
        check: bool,
        mate: bool,
    ) -> None:
        move, n = parse_san_token(san)
        assert n == consumed
        assert move.piece == piece
        assert move.from_file == _file(from_file)
        assert move.from_rank == _rank(from_rank)
        assert move.destination == Square.parse(destination)
        assert move.promotion == PieceKind.NONE
        assert move.is_capture is capture
        assert not move.is_castle
        assert move.is_check is check
        assert move.is_checkmate is mate


class TestCastling:
    @pytest.mark.parametrize(
        ("san", "consumed", "kingside", "check", "mate"),
        [
            ("O-O", 3, True, False, False),
            ("O-O+", 4, True, True, False),
            ("O-O#", 4, True, True, True),
            ("O-O-O", 5, False, False, False),
            ("O-O-O+", 6, False, True, False),
            ("O-O-O#", 6, False, True, True),
        ],
    )
    def test_castle(
        self, san: str, consumed: int, kingside: bool, check: bool, mate: bool
    ) -> None:
        move, n = parse_san_token(san)
        assert n == consumed
        assert move.piece == PieceKind.KING
        assert move.from_file is None
        assert move.from_rank is None
        assert move.destination is None
        assert move.promotion == PieceKind.NONE
        assert not move.is_capture
        assert move.castle_kingside is kingside
        assert move.castle_queenside is not kingside
        assert move.is_check is check
        assert move.is_checkmate is mate


class TestTokenBoundaries:
    def test_stops_after_token(self) -> None:
        move, n = parse_san_token("e4 e5")
        assert n == 2
        assert move.destination == Square.parse("e4")

    def test_offset_into_text(self) -> None:
        move, n = parse_san_token("1. Nf3 d5", 3)
        assert n == 3
        assert move.piece == PieceKind.KNIGHT

    def test_longest_production_wins(self) -> None:
        assert parse_san_token("O-O-O")[1] == 5
        assert parse_san_token("bxa8=Q")[1] == 6
        assert parse_san_token("Nf3d2")[1] == 5

    def test_promotion_without_piece_is_plain_move(self) -> None:
        # "a8=" has no promotion letter, so only "a8" is a move.
        move, n = parse_san_token("a8=")
        assert n == 2
        assert move.promotion == PieceKind.NONE

    def test_trailing_characters_rejected(self) -> None:
        with pytest.raises(SanError, match="Unexpected characters after move"):
            parse_san("e4 ")

    def test_parse_san_full_token(self) -> None:
        assert parse_san("Qxa7#").is_checkmate


class TestInvalidTokens:
    @pytest.mark.parametrize(
        "san",
        ["", "e", "i4", "e9", "Pe4", "nf3", "Zf3", "0-0", "o-o", "x", "=Q", "Nx", "N", " e4"],
    )
    def test_unparseable(self, san: str) -> None:
        with pytest.raises(SanError, match="Unable to parse move") as exc:
            parse_san_token(san)
        assert exc.value.kind == ErrorKind.ALPHABET

    def test_san_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_san("Ke")

    def test_offset_past_end(self) -> None:
        with pytest.raises(SanError):
            parse_san_token("e4", 2)


class TestMoveToSan:
    @pytest.mark.parametrize(
        "san",
        [
            "e4",
            "exd5",
            "a8=Q",
            "gxh8=R+",
            "Nf3",
            "Nfd2",
            "N3xd2#",
            "Nf3xd2",
            "Kd1",
            "O-O",
            "O-O-O+",
        ],
    )
    def test_canonical_token(self, san: str) -> None:
        assert move_to_san(parse_san(san)) == san

    def test_checkmate_implies_check(self) -> None:
        move = Move(PieceKind.QUEEN, destination=Square.parse("h7"), is_checkmate=True)
        assert move.is_check
        assert move_to_san(move) == "Qh7#"

    @pytest.mark.parametrize(
        "move",
        [
            Move(from_rank=6, destination=Square(0, 7)),
            Move(from_file=1, destination=Square(0, 7)),
            Move(destination=Square(0, 7), is_capture=True),
            Move(from_file=1, from_rank=6, destination=Square(0, 7), is_capture=True),
        ],
    )
    def test_pawn_move_without_san_form(self, move: Move) -> None:
        with pytest.raises(ValueError, match="no SAN form"):
            move_to_san(move)

    def test_piece_with_both_hints(self) -> None:
        move = Move(PieceKind.QUEEN, from_file=7, from_rank=3, destination=Square(4, 0))
        assert move_to_san(move) == "Qh4e1"
        assert parse_san("Qh4e1") == move


class TestMoveInvariants:
    def test_needs_destination_or_castle(self) -> None:
        with pytest.raises(ValueError, match="exactly one"):
            Move(PieceKind.KNIGHT)

    def test_castle_has_no_destination(self) -> None:
        with pytest.raises(ValueError, match="exactly one"):
            Move(PieceKind.KING, destination=Square(6, 0), castle_kingside=True)

    def test_both_castles(self) -> None:
        with pytest.raises(ValueError, match="both sides"):
            Move(PieceKind.KING, castle_kingside=True, castle_queenside=True)

    def test_castle_must_be_king(self) -> None:
        with pytest.raises(ValueError, match="king move"):
            Move(PieceKind.ROOK, castle_kingside=True)

    def test_only_pawns_promote(self) -> None:
        with pytest.raises(ValueError, match="Only pawns"):
            Move(PieceKind.KNIGHT, destination=Square(0, 7), promotion=PieceKind.QUEEN)

    def test_no_king_promotion(self) -> None:
        with pytest.raises(ValueError, match="promotion"):
            Move(destination=Square(0, 7), promotion=PieceKind.KING)

    def test_invalid_destination(self) -> None:
        with pytest.raises(ValueError, match="destination"):
            Move(destination=INVALID_SQUARE)

    def test_hint_range(self) -> None:
        with pytest.raises(ValueError, match="from_rank"):
            Move(PieceKind.ROOK, from_rank=8, destination=Square(0, 0))

    def test_no_piece(self) -> None:
        with pytest.raises(ValueError, match="piece kind"):
            Move(PieceKind.NONE, destination=Square(0, 0))

    def test_frozen(self) -> None:
        move = parse_san("e4")
        with pytest.raises(AttributeError):
            move.is_capture = True  # type: ignore[misc]
