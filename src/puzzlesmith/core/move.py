"""Move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

from puzzlesmith.core.enums import PieceType
from puzzlesmith.core.types import Square, square_name

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """A concrete board transition: source, destination, optional promotion.

    Produced by resolving notation or by picking one of the generated
    destinations; special-move effects (castling, en passant, double push)
    are inferred when the move is applied.
    """

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    def same_squares(self, other: Move) -> bool:
        """Whether both moves share source and destination."""
        return self.from_sq == other.from_sq and self.to_sq == other.to_sq
