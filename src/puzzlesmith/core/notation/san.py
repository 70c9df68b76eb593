"""SAN (Standard Algebraic Notation) resolution, building and matching."""

from __future__ import annotations

import re

from puzzlesmith.core.enums import Color, PieceType
from puzzlesmith.core.errors import ResolutionError
from puzzlesmith.core.move import Move
from puzzlesmith.core.move_generator import MoveGenerator
from puzzlesmith.core.piece import Piece, piece_letter, piece_type_from_letter
from puzzlesmith.core.position import Position
from puzzlesmith.core.types import ALL_SQUARES, FILES, Square, parse_square

_ANNOTATION_RE = re.compile(r"[+#!?]")
_PROMOTION_TYPES: dict[str, PieceType] = {
    "Q": PieceType.QUEEN,
    "R": PieceType.ROOK,
    "B": PieceType.BISHOP,
    "N": PieceType.KNIGHT,
}
_KINGSIDE_TOKENS = frozenset({"O-O", "0-0"})
_QUEENSIDE_TOKENS = frozenset({"O-O-O", "0-0-0"})
_KING_HOME_ROW: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}


def clean_san(token: str) -> str:
    """Drop check/mate/annotation punctuation and whitespace."""
    return "".join(_ANNOTATION_RE.sub("", token).split())


def is_check_token(token: str) -> bool:
    return "+" in token or "#" in token


def is_capture_token(token: str) -> bool:
    return "x" in token


def is_promotion_token(token: str) -> bool:
    return "=" in token


# ── Resolution ───────────────────────────────────────────────────────────────


def resolve_san(position: Position, san: str, *, legal: bool = False) -> Move:
    """Map a notated move to a concrete :class:`Move` in *position*.

    Candidates are scanned rank 8 to rank 1, file a to h, and the first
    piece of the right type (honouring any file/rank hint) whose
    destinations contain the target square wins.  With ``legal=True``
    destinations that expose the mover's king are ignored.

    Raises :class:`ResolutionError` when nothing qualifies.
    """
    clean = clean_san(san)
    side = position.side_to_move

    # Castling
    if clean in _KINGSIDE_TOKENS or clean in _QUEENSIDE_TOKENS:
        row = _KING_HOME_ROW[side]
        to_col = 6 if clean in _KINGSIDE_TOKENS else 2
        return Move(Square(row, 4), Square(row, to_col))

    # Promotion
    promotion: PieceType | None = None
    if "=" in clean:
        clean, _, promo_text = clean.partition("=")
        promotion = _PROMOTION_TYPES.get(promo_text)
        if promotion is None:
            raise ResolutionError(san, f"invalid promotion piece {promo_text!r}")

    # Piece type
    piece_type = PieceType.PAWN
    if clean and clean[0].isupper():
        try:
            piece_type = piece_type_from_letter(clean[0])
        except ValueError:
            raise ResolutionError(san, f"unknown piece letter {clean[0]!r}") from None
        clean = clean[1:]

    # Capture marker
    clean = clean.replace("x", "")

    # Destination (last two chars)
    if len(clean) < 2:
        raise ResolutionError(san, "missing destination square")
    try:
        to_sq = parse_square(clean[-2:])
    except ValueError:
        raise ResolutionError(san, f"invalid destination {clean[-2:]!r}") from None

    # Disambiguation
    from_col: int | None = None
    from_row: int | None = None
    for ch in clean[:-2]:
        if ch in FILES:
            from_col = FILES.index(ch)
        elif ch in "12345678":
            from_row = 8 - int(ch)

    gen = MoveGenerator(position)
    wanted = Piece(side, piece_type)
    board = position.board
    for sq in ALL_SQUARES:
        if board[sq] != wanted:
            continue
        if from_col is not None and sq.col != from_col:
            continue
        if from_row is not None and sq.row != from_row:
            continue
        targets = gen.legal_destinations(sq) if legal else gen.destinations(sq)
        if to_sq in targets:
            return Move(sq, to_sq, promotion)

    raise ResolutionError(san)


# ── Building ─────────────────────────────────────────────────────────────────


def build_san(position: Position, move: Move) -> str:
    """Minimal notation for *move* played from *position*.

    Non-pawn moves carry no disambiguation; :func:`moves_match` compares
    squares when the text differs.
    """
    piece = position.board[move.from_sq]
    if piece is None:
        raise ValueError(f"No piece on {move.from_sq}")

    from_sq, to_sq = move.from_sq, move.to_sq
    if piece.piece_type == PieceType.KING and abs(to_sq.col - from_sq.col) == 2:
        return "O-O" if to_sq.col == 6 else "O-O-O"

    is_pawn = piece.piece_type == PieceType.PAWN
    is_capture = position.board[to_sq] is not None or (
        is_pawn and from_sq.col != to_sq.col
    )

    san = ""
    if not is_pawn:
        san += piece_letter(piece.piece_type)
    elif is_capture:
        san += FILES[from_sq.col]
    if is_capture:
        san += "x"
    san += to_sq.name
    if move.promotion is not None:
        san += "=" + piece_letter(move.promotion)
    return san


# ── Matching ─────────────────────────────────────────────────────────────────


def moves_match(
    played_san: str,
    expected_san: str,
    position: Position,
    move: Move,
    *,
    legal: bool = False,
) -> bool:
    """Whether a played move satisfies the expected solution token.

    Equal text (ignoring check marks and whitespace) matches outright;
    otherwise *expected_san* is resolved in *position* and compared by
    source and destination square.
    """
    if not expected_san:
        return False
    if clean_san(played_san) == clean_san(expected_san):
        return True
    try:
        expected = resolve_san(position, expected_san, legal=legal)
    except ResolutionError:
        return False
    return expected.same_squares(move)
