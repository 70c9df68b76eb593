"""Coarse tactic tagging for a puzzle's first solution move."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from puzzlesmith.core.enums import PieceType
from puzzlesmith.core.errors import ResolutionError
from puzzlesmith.core.move_generator import MoveGenerator
from puzzlesmith.core.notation.san import (
    is_capture_token,
    is_promotion_token,
    resolve_san,
)
from puzzlesmith.core.rules import Rules
from puzzlesmith.puzzles.models import TacticTag

if TYPE_CHECKING:
    from puzzlesmith.core.position import Position

FORK_TARGET_TYPES = frozenset({PieceType.QUEEN, PieceType.ROOK, PieceType.KING})
FORK_MIN_TARGETS = 2
COMBINATION_MIN_MOVES = 2


def count_fork_targets(
    pre: Position, post: Position, san: str, *, legal: bool = False
) -> int:
    """How many enemy queens, rooks and kings the moved piece now hits.

    The piece is located by re-resolving *san* in *pre*; its reach is
    measured in *post* with the mover put back on move.
    """
    try:
        move = resolve_san(pre, san, legal=legal)
    except ResolutionError:
        return 0

    mover = pre.side_to_move
    probe = post.with_side_to_move(mover)
    targets = 0
    for sq in MoveGenerator(probe).destinations(move.to_sq):
        target = post.board[sq]
        if (
            target is not None
            and target.color != mover
            and target.piece_type in FORK_TARGET_TYPES
        ):
            targets += 1
    return targets


def classify_tactics(
    pre: Position,
    post: Position,
    san: str,
    solution: Sequence[str],
    *,
    legal: bool = False,
) -> tuple[TacticTag, ...]:
    """Tags for the move *san* played from *pre* to *post*.

    Falls back to :attr:`TacticTag.TACTIC` when nothing specific applies.
    """
    tags: list[TacticTag] = []
    if Rules.is_in_check(post, post.side_to_move):
        tags.append(TacticTag.CHECK)
    if is_capture_token(san):
        tags.append(TacticTag.CAPTURE)
    if is_promotion_token(san):
        tags.append(TacticTag.PROMOTION)
    if count_fork_targets(pre, post, san, legal=legal) >= FORK_MIN_TARGETS:
        tags.append(TacticTag.FORK)
    if len(solution) >= COMBINATION_MIN_MOVES:
        tags.append(TacticTag.COMBINATION)

    if not tags:
        tags.append(TacticTag.TACTIC)
    return tuple(dict.fromkeys(tags))
