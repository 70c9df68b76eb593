"""Position: board plus side to move, castling, en passant and clocks."""

from __future__ import annotations

from puzzlesmith.core.board import Board
from puzzlesmith.core.enums import CastlingRights, Color, PieceType
from puzzlesmith.core.move import Move
from puzzlesmith.core.piece import Piece
from puzzlesmith.core.types import A1, A8, H1, H8, Square


class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    Positions are treated as values: :func:`apply_move` copies before
    mutating, so successive positions of a replay never share a board.
    :meth:`make_move` is the in-place primitive and is only called on
    fresh copies.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number

    # ── Core move operation ──────────────────────────────────────────────

    def make_move(self, move: Move) -> None:
        """Apply *move* in place.

        No legality check is made; *move* must come from notation resolution
        or from the generated destinations of the moving piece.
        """
        board = self.board
        from_sq, to_sq = move.from_sq, move.to_sq
        piece = board[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {from_sq}")

        captured = board[to_sq]
        is_pawn = piece.piece_type == PieceType.PAWN

        # En passant: a diagonal pawn step onto an empty square takes the
        # pawn standing beside the origin.
        if is_pawn and to_sq.col != from_sq.col and captured is None:
            board[Square(from_sq.row, to_sq.col)] = None

        # En passant target for the opponent
        next_en_passant: Square | None = None
        if is_pawn and abs(to_sq.row - from_sq.row) == 2:
            next_en_passant = Square((from_sq.row + to_sq.row) // 2, from_sq.col)

        # Place piece (handle promotion)
        placed = piece
        if is_pawn and to_sq.row == _last_row(piece.color):
            placed = Piece(piece.color, move.promotion or PieceType.QUEEN)
        board[from_sq] = None
        board[to_sq] = placed

        # Slide the rook for castling
        if piece.piece_type == PieceType.KING and abs(to_sq.col - from_sq.col) == 2:
            row = from_sq.row
            if to_sq.col == 6:
                rook_from, rook_to = Square(row, 7), Square(row, 5)
            else:
                rook_from, rook_to = Square(row, 0), Square(row, 3)
            board[rook_to] = board[rook_from]
            board[rook_from] = None

        self.en_passant = next_en_passant
        self._update_castling(move, piece)

        # Clocks
        if is_pawn or captured is not None:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        if self.side_to_move == Color.BLACK:
            self.fullmove_number += 1

        self.side_to_move = self.side_to_move.opposite

    # ── Castling bookkeeping ─────────────────────────────────────────────

    _ROOK_CORNERS: dict[Square, CastlingRights] = {
        A1: CastlingRights.WHITE_QUEENSIDE,
        H1: CastlingRights.WHITE_KINGSIDE,
        A8: CastlingRights.BLACK_QUEENSIDE,
        H8: CastlingRights.BLACK_KINGSIDE,
    }

    def _update_castling(self, move: Move, piece: Piece) -> None:
        next_castling = self.castling
        if piece.piece_type == PieceType.KING:
            next_castling &= ~CastlingRights.both(piece.color)

        for sq in (move.from_sq, move.to_sq):
            if sq in self._ROOK_CORNERS:
                next_castling &= ~self._ROOK_CORNERS[sq]

        self.castling = next_castling

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Deep copy; the board is duplicated."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )

    def with_side_to_move(self, color: Color) -> Position:
        """Copy of this position with *color* to move, used for probing."""
        probe = self.copy()
        probe.side_to_move = color
        return probe

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.castling == other.castling
            and self.en_passant == other.en_passant
            and self.halfmove_clock == other.halfmove_clock
            and self.fullmove_number == other.fullmove_number
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        from puzzlesmith.core.notation.fen import position_to_fen

        return f"Position({position_to_fen(self)!r})"


def _last_row(color: Color) -> int:
    return 0 if color == Color.WHITE else 7


def apply_move(position: Position, move: Move) -> Position:
    """Return the position reached by playing *move*; *position* is untouched."""
    result = position.copy()
    result.make_move(move)
    return result
