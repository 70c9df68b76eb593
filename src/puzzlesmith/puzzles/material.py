"""Material counting from White's point of view."""

from __future__ import annotations

from typing import TYPE_CHECKING

from puzzlesmith.core.enums import Color, PieceType

if TYPE_CHECKING:
    from puzzlesmith.core.position import Position

PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: 0,
}


def material_score(position: Position) -> int:
    """White material minus Black material, in pawn units."""
    score = 0
    for _sq, piece in position.board.occupied():
        value = PIECE_VALUES[piece.piece_type]
        score += value if piece.color == Color.WHITE else -value
    return score
