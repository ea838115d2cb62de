"""PGN parsing and serialization.

The parser reads a single game: a block of ``[Key "Value"]`` tag lines, a
blank line, then movetext. Movetext is strict: every White ply carries its
``N.`` turn number, Black plies may carry ``N...``, and each move may be
followed by one NAG (``$N``) and one brace comment, in that order.
Semicolon comments, variations and escape lines are not supported. The
"Seven Tag Roster" is not enforced.
"""

from __future__ import annotations

import logging
import re

from chessnotation.core.config import DEFAULT_LIMITS, NotationLimits
from chessnotation.core.enums import PgnTermination
from chessnotation.core.errors import ErrorKind, PgnError, SanError
from chessnotation.core.notation.cursor import TextCursor
from chessnotation.core.notation.models import RESULT_TOKENS, PgnGame, PgnMove
from chessnotation.core.notation.san import move_to_san, parse_san_token

_LOGGER = logging.getLogger(__name__)

_TOO_FEW_CHARS = "Too few characters in PGN string."
_TAG_ESCAPE_RE = re.compile(r'\\(["\\])')
_TAG_NAME_RE = re.compile(r'[^\s"\]]+')
_TERMINATIONS: dict[str, PgnTermination] = {
    token: termination for termination, token in RESULT_TOKENS.items()
}


def pgn_result_token(termination: PgnTermination) -> str:
    """Convert :class:`PgnTermination` to a PGN result token."""
    return RESULT_TOKENS[termination]


def termination_from_token(token: str) -> PgnTermination:
    """Convert a PGN result token to :class:`PgnTermination`."""
    return _TERMINATIONS.get(token, PgnTermination.UNKNOWN)


# ── Parsing ──────────────────────────────────────────────────────────────────


def parse_pgn(pgn_text: str, *, limits: NotationLimits = DEFAULT_LIMITS) -> PgnGame:
    """Parse a single PGN game.

    *pgn_text* should not end in whitespace after a result token; strip it
    first.
    """
    cursor = TextCursor(pgn_text)
    try:
        tags = _parse_tags(cursor)
        if not tags:
            raise PgnError("Missing PGN tags.", ErrorKind.CARDINALITY)
        if cursor.at_end():
            raise PgnError("Missing PGN moves.", ErrorKind.CARDINALITY)

        moves: list[PgnMove] = []
        termination = PgnTermination.UNKNOWN
        turn = 1
        white_to_move = True

        while True:
            ending = _match_termination(cursor)
            if ending is not None:
                termination = ending
                break

            moves.append(_parse_ply(cursor, turn, white_to_move, limits))
            if cursor.at_end():
                break

            if not white_to_move:
                turn += 1
            white_to_move = not white_to_move
    except IndexError:
        raise PgnError(_TOO_FEW_CHARS, ErrorKind.TRUNCATION) from None

    if not moves:
        raise PgnError("Missing PGN moves.", ErrorKind.CARDINALITY)

    _LOGGER.debug(
        "Parsed PGN game: %d tags, %d plies, termination %s",
        len(tags),
        len(moves),
        termination.name,
    )
    return PgnGame(tags=tags, moves=tuple(moves), termination=termination)


def _match_termination(cursor: TextCursor) -> PgnTermination | None:
    for token, termination in _TERMINATIONS.items():
        if cursor.rest_equals(token):
            return termination
    return None


def _parse_tags(cursor: TextCursor) -> dict[str, str]:
    tags: dict[str, str] = {}

    while True:
        line_end = cursor.find("\n")
        if line_end < 0:
            raise PgnError("Missing newline while reading tags.")

        line = cursor.ahead(line_end)
        cursor.advance(line_end + 1)
        # Each line may end in "\n" or "\r\n" independently.
        if line.endswith("\r"):
            line = line[:-1]
        if not line:
            return tags

        key, value = _parse_tag_line(line)
        if key in tags:
            raise PgnError(f"Duplicate PGN tag: {key!r}", ErrorKind.CARDINALITY)
        tags[key] = value


def _parse_tag_line(line: str) -> tuple[str, str]:
    if line[0] != "[":
        raise PgnError(f"PGN tag invalid start: {line[0]!r}", ErrorKind.ALPHABET)

    space_idx = line.find(' "')
    if space_idx < 0:
        raise PgnError("Missing space with quotation mark in PGN tag.")
    key = line[1:space_idx]
    if not key:
        raise PgnError("Missing PGN tag name.")

    value_part = line[space_idx + 2 :]
    if not value_part.endswith('"]'):
        raise PgnError("PGN tag invalid end")
    escaped = value_part[:-2]
    # An odd run of backslashes escapes the closing quote.
    if (len(escaped) - len(escaped.rstrip("\\"))) % 2:
        raise PgnError("PGN tag invalid end")
    value = _TAG_ESCAPE_RE.sub(r"\1", escaped)
    return key, value


def _parse_ply(
    cursor: TextCursor, turn: int, white_to_move: bool, limits: NotationLimits
) -> PgnMove:
    _absorb_turn_number(cursor, str(turn), white_to_move)

    if cursor.at_end():
        raise PgnError(_TOO_FEW_CHARS, ErrorKind.TRUNCATION)
    try:
        move, consumed = parse_san_token(cursor.text, cursor.pos)
    except SanError as exc:
        side = "white" if white_to_move else "black"
        raise PgnError(
            f"Invalid move for {side} on turn {turn}: {cursor.ahead(10)!r}",
            exc.kind,
        ) from exc
    cursor.advance(consumed)
    _absorb_whitespace(cursor, required=True)

    nag = _parse_nag(cursor, limits)
    comment = _parse_comment(cursor)
    return PgnMove(move=move, nag=nag, comment=comment)


def _absorb_whitespace(cursor: TextCursor, required: bool) -> None:
    """Skip spaces and newlines; "\\r\\n" counts as one newline."""
    start = cursor.pos
    while not cursor.at_end():
        ch = cursor.peek()
        if ch in (" ", "\n"):
            cursor.advance(1)
        elif ch == "\r" and cursor.remaining >= 2 and cursor.peek(1) == "\n":
            cursor.advance(2)
        else:
            break

    # End of input counts as a separator.
    if required and cursor.pos == start and not cursor.at_end():
        raise PgnError(f"Invalid whitespace: {cursor.peek()!r}")


def _absorb_turn_number(cursor: TextCursor, turn_text: str, white_to_move: bool) -> None:
    starts_with_turn = cursor.startswith(turn_text)

    if white_to_move:
        # Mandatory for white.
        if not starts_with_turn or cursor.peek(len(turn_text)) != ".":
            raise PgnError(f"Invalid turn count for white, expected '{turn_text}.'")
        cursor.advance(len(turn_text) + 1)
        _absorb_whitespace(cursor, required=False)
    elif starts_with_turn:
        # Optional for black, but must be the ellipsis form.
        ellipsis = "".join(cursor.peek(len(turn_text) + i) for i in range(3))
        if ellipsis != "...":
            raise PgnError(f"Invalid turn count for black, expected '{turn_text}...'")
        cursor.advance(len(turn_text) + 3)
        _absorb_whitespace(cursor, required=False)


def _parse_nag(cursor: TextCursor, limits: NotationLimits) -> int:
    if cursor.at_end() or cursor.peek() != "$":
        return 0

    digits = ""
    while len(digits) < 3 and len(digits) + 1 < cursor.remaining:
        ch = cursor.peek(len(digits) + 1)
        if not "0" <= ch <= "9":
            break
        digits += ch

    if not digits:
        raise PgnError("Missing NAG value.")
    if digits == "0":
        raise PgnError("Null NAG is not allowed.", ErrorKind.RANGE)
    if digits[0] == "0":
        raise PgnError("Leading zeroes in NAG value.", ErrorKind.ALPHABET)

    value = int(digits)
    if value > limits.max_nag:
        raise PgnError(f"NAG value out of range: {value}", ErrorKind.RANGE)

    cursor.advance(len(digits) + 1)
    _absorb_whitespace(cursor, required=True)
    return value


def _parse_comment(cursor: TextCursor) -> str | None:
    if cursor.at_end() or cursor.peek() != "{":
        return None

    end = cursor.find("}")
    if end < 0:
        raise PgnError("PGN move comment was incomplete.")

    comment = cursor.ahead(end)[1:]
    cursor.advance(end + 1)
    _absorb_whitespace(cursor, required=True)
    return comment


# ── Serialization ────────────────────────────────────────────────────────────


def pgn_movetext(game: PgnGame) -> str:
    """Build PGN movetext, ending with the game's result token."""
    parts: list[str] = []
    for ply, pgn_move in enumerate(game.moves):
        if ply % 2 == 0:
            parts.append(f"{(ply // 2) + 1}.")
        parts.append(move_to_san(pgn_move.move))
        if pgn_move.nag:
            parts.append(f"${pgn_move.nag}")
        if pgn_move.comment is not None:
            # PGN comments cannot contain a closing brace.
            safe_comment = pgn_move.comment.replace("}", "]")
            parts.append(f"{{{safe_comment}}}")
    parts.append(game.result_token)
    return " ".join(parts)


def build_pgn(game: PgnGame) -> str:
    """Build a single-game PGN document that :func:`parse_pgn` reads back."""
    if not game.tags:
        raise ValueError("PGN needs at least one tag")
    if not game.moves:
        raise ValueError("PGN needs at least one move")

    lines: list[str] = []
    for key, value in game.tags.items():
        if not _TAG_NAME_RE.fullmatch(key):
            raise ValueError(f"Invalid PGN tag name: {key!r}")
        if "\n" in value or "\r" in value:
            raise ValueError(f"PGN tag value for {key!r} spans lines")
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        lines.append(f'[{key} "{escaped}"]')
    lines.append("")
    lines.append(pgn_movetext(game))
    return "\n".join(lines)
