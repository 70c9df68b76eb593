"""FEN parsing and serialization."""

from __future__ import annotations

from puzzlesmith.core.board import Board
from puzzlesmith.core.enums import CastlingRights, Color
from puzzlesmith.core.errors import FormatError
from puzzlesmith.core.piece import Piece
from puzzlesmith.core.position import Position
from puzzlesmith.core.types import Square, parse_square, rank_of, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_LETTERS: tuple[tuple[str, CastlingRights], ...] = (
    ("K", CastlingRights.WHITE_KINGSIDE),
    ("Q", CastlingRights.WHITE_QUEENSIDE),
    ("k", CastlingRights.BLACK_KINGSIDE),
    ("q", CastlingRights.BLACK_QUEENSIDE),
)


def position_from_fen(fen: str) -> Position:
    """Parse a six-field FEN string into a :class:`Position`.

    Raises :class:`FormatError` for anything outside the canonical grammar.
    """
    parts = fen.split(" ")
    if len(parts) != 6:
        raise FormatError(f"Invalid FEN (need 6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part, half_part, full_part = parts

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise FormatError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise FormatError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= 8:
                    raise FormatError(f"Invalid FEN rank width: {fen!r}")
                try:
                    board[Square(row, col)] = Piece.from_char(ch)
                except ValueError as exc:
                    raise FormatError(f"{exc}: {fen!r}") from None
                col += 1
            if col > 8:
                raise FormatError(f"Invalid FEN rank width: {fen!r}")
        if col != 8:
            raise FormatError(f"Invalid FEN rank width: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise FormatError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    castling = CastlingRights.NONE
    if castling_part != "-":
        rights = dict(_CASTLING_LETTERS)
        seen: set[str] = set()
        for ch in castling_part:
            right = rights.get(ch)
            if right is None or ch in seen:
                raise FormatError(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
            castling |= right

    # 4. En passant
    ep: Square | None = None
    if ep_part != "-":
        try:
            ep = parse_square(ep_part)
        except ValueError:
            raise FormatError(f"Invalid FEN en-passant square: {ep_part!r}") from None
        expected_ep_rank = 5 if side == Color.WHITE else 2
        if rank_of(ep) != expected_ep_rank:
            raise FormatError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )

    # 5–6. Clocks
    if not half_part.isdigit():
        raise FormatError(f"Invalid FEN halfmove clock: {half_part!r}")
    if not full_part.isdigit() or int(full_part) < 1:
        raise FormatError(f"Invalid FEN fullmove number: {full_part!r}")

    return Position(board, side, castling, ep, int(half_part), int(full_part))


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    # 1. Board
    rows: list[str] = []
    for row_idx in range(8):
        empty = 0
        row = ""
        for col in range(8):
            piece = pos.board[Square(row_idx, col)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = pos.side_to_move.fen_char

    # 3. Castling
    castling_str = "".join(
        ch for ch, right in _CASTLING_LETTERS if pos.castling & right
    )
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = square_name(pos.en_passant) if pos.en_passant is not None else "-"

    return f"{board_str} {side_str} {castling_str} {ep_str} {pos.halfmove_clock} {pos.fullmove_number}"
