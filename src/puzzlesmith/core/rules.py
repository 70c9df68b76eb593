"""High-level rule queries: check detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from puzzlesmith.core.enums import Color
from puzzlesmith.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from puzzlesmith.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def is_in_check(position: Position, color: Color | None = None) -> bool:
        """Whether *color*'s king (default: side to move) is attacked.

        The opponent's reach is measured with pseudo-legal generation on a
        probe copy where the opponent is to move.  A missing king is never
        in check.
        """
        if color is None:
            color = position.side_to_move
        king_sq = position.board.king_square(color)
        if king_sq is None:
            return False

        opponent = color.opposite
        gen = MoveGenerator(position.with_side_to_move(opponent))
        return any(
            king_sq in gen.destinations(sq)
            for sq in position.board.all_pieces(opponent)
        )


def is_in_check(position: Position, color: Color) -> bool:
    """Functional alias for :meth:`Rules.is_in_check`."""
    return Rules.is_in_check(position, color)
