"""Replay a SAN move list into the sequence of positions it visits."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from puzzlesmith.core.errors import ResolutionError
from puzzlesmith.core.move import Move
from puzzlesmith.core.notation.fen import STARTING_FEN, position_from_fen
from puzzlesmith.core.notation.san import resolve_san
from puzzlesmith.core.position import Position, apply_move

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ReplayStep:
    """A position together with the token and move that produced it."""

    position: Position
    san: str | None = None
    move: Move | None = None


def replay_moves(
    tokens: Iterable[str],
    *,
    start: Position | None = None,
    legal: bool = False,
) -> list[ReplayStep]:
    """Walk *tokens* from *start* (default: the initial position).

    The first element has no originating token.  Replay stops silently at
    the first token that cannot be resolved, so the result never holds
    more than ``len(tokens) + 1`` steps.
    """
    position = start.copy() if start is not None else position_from_fen(STARTING_FEN)
    steps = [ReplayStep(position)]
    for ply, token in enumerate(tokens):
        try:
            move = resolve_san(position, token, legal=legal)
        except ResolutionError as exc:
            _LOGGER.debug("Replay stopped at ply %d: %s", ply, exc)
            break
        position = apply_move(position, move)
        steps.append(ReplayStep(position, token, move))
    return steps


def replay_positions(tokens: Iterable[str], *, legal: bool = False) -> list[Position]:
    """Positions only, as consumed by the puzzle miner."""
    return [step.position for step in replay_moves(tokens, legal=legal)]
