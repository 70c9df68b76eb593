"""Pseudo-legal and legal move generation + attack detection.

Ownership is judged against the position's side to move, not against the
colour of the piece being inspected: probing a position whose side to move
has been flipped is how check and fork detection ask what the other side
could do next.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from puzzlesmith.core.enums import CastlingRights, Color, PieceType
from puzzlesmith.core.move import Move
from puzzlesmith.core.piece import Piece
from puzzlesmith.core.types import Square

if TYPE_CHECKING:
    from puzzlesmith.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_SLIDER_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}

# Row deltas: white pawns travel towards row 0 (rank 8).
_PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
_PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
_HOME_ROW: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}
_KING_HOME_COL = 4


class MoveGenerator:
    """Generates destinations for pieces of a given :class:`Position`.

    The generator never mutates the position.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def destinations(self, sq: Square) -> list[Square]:
        """Pseudo-legal destinations of the piece on *sq* (empty if none)."""
        piece = self._board[sq]
        if piece is None:
            return []

        moves: list[Square] = []
        if piece.piece_type == PieceType.PAWN:
            self._gen_pawn(sq, piece, moves)
        elif piece.piece_type == PieceType.KNIGHT:
            self._gen_steps(sq, KNIGHT_OFFSETS, moves)
        elif piece.piece_type == PieceType.KING:
            self._gen_steps(sq, KING_OFFSETS, moves)
            self._gen_castling(sq, piece, moves)
        else:
            self._gen_sliding(sq, _SLIDER_DIRS[piece.piece_type], moves)
        return moves

    def legal_destinations(self, sq: Square) -> list[Square]:
        """Destinations that do not leave the mover's own king in check.

        Castling is additionally refused when the king starts in, passes
        through, or lands on an attacked square.
        """
        from puzzlesmith.core.position import apply_move

        piece = self._board[sq]
        if piece is None:
            return []

        mover = self._pos.side_to_move
        opponent = mover.opposite
        legal: list[Square] = []
        for to_sq in self.destinations(sq):
            if piece.piece_type == PieceType.KING and abs(to_sq.col - sq.col) == 2:
                step = 1 if to_sq.col > sq.col else -1
                path = (sq, Square(sq.row, sq.col + step), to_sq)
                if any(self.is_square_attacked(p, opponent) for p in path):
                    continue
            after = apply_move(self._pos, Move(sq, to_sq))
            king_sq = after.board.king_square(mover)
            if king_sq is not None and MoveGenerator(after).is_square_attacked(
                king_sq, opponent
            ):
                continue
            legal.append(to_sq)
        return legal

    # -- Attack detection (public) -----------------------------------------

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?

        Unlike :meth:`destinations`, pawns only attack diagonally and
        castling never counts, so empty squares are judged correctly.
        """
        board = self._board

        for d_col in (-1, 1):
            origin = sq.offset(-_PAWN_DIRECTION[by_color], d_col)
            if origin is not None and board[origin] == Piece(by_color, PieceType.PAWN):
                return True

        for offsets, ptype in (
            (KNIGHT_OFFSETS, PieceType.KNIGHT),
            (KING_OFFSETS, PieceType.KING),
        ):
            for d_row, d_col in offsets:
                origin = sq.offset(d_row, d_col)
                if origin is not None and board[origin] == Piece(by_color, ptype):
                    return True

        for dirs, ptypes in (
            (BISHOP_DIRS, (PieceType.BISHOP, PieceType.QUEEN)),
            (ROOK_DIRS, (PieceType.ROOK, PieceType.QUEEN)),
        ):
            for d_row, d_col in dirs:
                cur = sq.offset(d_row, d_col)
                while cur is not None:
                    piece = board[cur]
                    if piece is not None:
                        if piece.color == by_color and piece.piece_type in ptypes:
                            return True
                        break
                    cur = cur.offset(d_row, d_col)

        return False

    # -- Piece-specific generators (private) -------------------------------

    def _is_own(self, piece: Piece | None) -> bool:
        return piece is not None and piece.color == self._pos.side_to_move

    def _is_enemy(self, piece: Piece | None) -> bool:
        return piece is not None and piece.color != self._pos.side_to_move

    def _gen_pawn(self, sq: Square, piece: Piece, moves: list[Square]) -> None:
        board = self._board
        direction = _PAWN_DIRECTION[piece.color]

        one_step = sq.offset(direction, 0)
        if one_step is not None and board.is_empty(one_step):
            moves.append(one_step)
            if sq.row == _PAWN_START_ROW[piece.color]:
                two_step = sq.offset(2 * direction, 0)
                if two_step is not None and board.is_empty(two_step):
                    moves.append(two_step)

        for d_col in (-1, 1):
            cap_sq = sq.offset(direction, d_col)
            if cap_sq is None:
                continue
            if self._is_enemy(board[cap_sq]) or cap_sq == self._pos.en_passant:
                moves.append(cap_sq)

    def _gen_steps(
        self,
        sq: Square,
        offsets: tuple[tuple[int, int], ...],
        moves: list[Square],
    ) -> None:
        board = self._board
        for d_row, d_col in offsets:
            to_sq = sq.offset(d_row, d_col)
            if to_sq is not None and not self._is_own(board[to_sq]):
                moves.append(to_sq)

    def _gen_sliding(
        self,
        sq: Square,
        dirs: tuple[tuple[int, int], ...],
        moves: list[Square],
    ) -> None:
        board = self._board
        for d_row, d_col in dirs:
            to_sq = sq.offset(d_row, d_col)
            while to_sq is not None:
                target = board[to_sq]
                if target is None:
                    moves.append(to_sq)
                    to_sq = to_sq.offset(d_row, d_col)
                    continue
                if not self._is_own(target):
                    moves.append(to_sq)
                break

    def _gen_castling(self, king_sq: Square, king: Piece, moves: list[Square]) -> None:
        # Attacked squares are not considered here; see legal_destinations.
        row = _HOME_ROW[king.color]
        if king_sq != Square(row, _KING_HOME_COL):
            return

        board = self._board
        rook = Piece(king.color, PieceType.ROOK)
        castling = self._pos.castling

        if (
            castling & CastlingRights.kingside(king.color)
            and board.is_empty(Square(row, 5))
            and board.is_empty(Square(row, 6))
            and board[Square(row, 7)] == rook
        ):
            moves.append(Square(row, 6))

        if (
            castling & CastlingRights.queenside(king.color)
            and board.is_empty(Square(row, 3))
            and board.is_empty(Square(row, 2))
            and board.is_empty(Square(row, 1))
            and board[Square(row, 0)] == rook
        ):
            moves.append(Square(row, 2))


def pseudo_legal_moves(position: Position, sq: Square) -> list[Square]:
    """Pseudo-legal destinations of the piece on *sq*."""
    return MoveGenerator(position).destinations(sq)


def legal_moves(position: Position, sq: Square) -> list[Square]:
    """Destinations of the piece on *sq* that keep the mover's king safe."""
    return MoveGenerator(position).legal_destinations(sq)
