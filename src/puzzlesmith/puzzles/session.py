"""Solving state for a single puzzle.

A board front-end drives the session with square picks; the session checks
each move against the puzzle solution and plays the defender replies when
asked.  Delays between a correct move and the reply belong to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum, auto

from puzzlesmith.core.enums import Color, PieceType
from puzzlesmith.core.errors import ResolutionError
from puzzlesmith.core.move import Move
from puzzlesmith.core.move_generator import MoveGenerator
from puzzlesmith.core.notation.san import build_san, moves_match, resolve_san
from puzzlesmith.core.position import Position, apply_move
from puzzlesmith.core.types import Square
from puzzlesmith.puzzles.models import Puzzle

_LOGGER = logging.getLogger(__name__)


# ── Stateless helpers for board front-ends ───────────────────────────────────


def reachable_squares(
    position: Position, square: Square, *, legal: bool = False
) -> list[Square]:
    """Destinations a player may pick for the piece on *square*.

    Only pieces of the side to move are selectable.
    """
    piece = position.board[square]
    if piece is None or piece.color != position.side_to_move:
        return []
    gen = MoveGenerator(position)
    return gen.legal_destinations(square) if legal else gen.destinations(square)


def play_move(
    position: Position,
    from_sq: Square,
    to_sq: Square,
    promotion: PieceType | None = None,
) -> tuple[Position, str]:
    """Apply a picked move, returning the new position and its notation.

    A pawn reaching the last rank without an explicit choice becomes a queen.
    """
    move = _with_auto_promotion(position, Move(from_sq, to_sq, promotion))
    return apply_move(position, move), build_san(position, move)


def _with_auto_promotion(position: Position, move: Move) -> Move:
    piece = position.board[move.from_sq]
    if (
        move.promotion is None
        and piece is not None
        and piece.piece_type == PieceType.PAWN
        and move.to_sq.row in (0, 7)
    ):
        return Move(move.from_sq, move.to_sq, PieceType.QUEEN)
    return move


# ── Session state ────────────────────────────────────────────────────────────


class SessionStatus(IntEnum):
    """Finite-state-machine states of a solving attempt."""

    PLAYING = auto()
    WRONG = auto()
    COMPLETE = auto()


@dataclass(slots=True)
class SessionScore:
    """Running tally across the puzzles of one sitting."""

    correct: int = 0
    wrong: int = 0


MoveCallback = Callable[[Move, str, Position], None]  # move, san, position after
StatusCallback = Callable[[SessionStatus], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_status_changed: list[StatusCallback] = field(default_factory=list)


class PuzzleSession:
    """Tracks progress through one puzzle's solution.

    Solution tokens alternate between the solver (even indexes) and the
    defender (odd indexes).  After a correct solver move that does not end
    the puzzle, :attr:`reply_pending` is set until :meth:`play_reply` runs.
    """

    __slots__ = (
        "_puzzle",
        "_position",
        "_step",
        "_status",
        "_reply_pending",
        "_last_move",
        "_legal",
        "score",
        "events",
    )

    def __init__(self, puzzle: Puzzle, *, legal: bool = False) -> None:
        self.score = SessionScore()
        self.events = SessionEvents()
        self._legal = legal
        self._puzzle = puzzle
        self._position = puzzle.position.copy()
        self._step = 0
        self._status = SessionStatus.PLAYING
        self._reply_pending = False
        self._last_move: Move | None = None

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def puzzle(self) -> Puzzle:
        return self._puzzle

    @property
    def position(self) -> Position:
        return self._position

    @property
    def step(self) -> int:
        return self._step

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def reply_pending(self) -> bool:
        return self._reply_pending

    @property
    def last_move(self) -> Move | None:
        return self._last_move

    @property
    def solver_color(self) -> Color:
        return self._puzzle.side_to_move

    @property
    def expected_san(self) -> str | None:
        solution = self._puzzle.solution
        return solution[self._step] if self._step < len(solution) else None

    # ── Actions ──────────────────────────────────────────────────────────

    def reachable_squares(self, square: Square) -> list[Square]:
        if self._status == SessionStatus.COMPLETE or self._reply_pending:
            return []
        return reachable_squares(self._position, square, legal=self._legal)

    def play_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
    ) -> bool:
        """Submit the solver's move; return whether it matched the solution."""
        if self._status == SessionStatus.COMPLETE or self._reply_pending:
            return False
        expected = self.expected_san
        if expected is None:
            return False
        # Picks the piece cannot make are ignored, not scored.
        if to_sq not in reachable_squares(self._position, from_sq, legal=self._legal):
            return False

        move = _with_auto_promotion(self._position, Move(from_sq, to_sq, promotion))
        san = build_san(self._position, move)
        if not moves_match(san, expected, self._position, move, legal=self._legal):
            self.score.wrong += 1
            self._set_status(SessionStatus.WRONG)
            return False

        self._advance(move, san)
        if self._step >= len(self._puzzle.solution):
            self._complete()
        else:
            self._reply_pending = True
            self._set_status(SessionStatus.PLAYING)
        return True

    def play_reply(self) -> Move | None:
        """Play the defender's scripted reply, if one is pending."""
        if not self._reply_pending:
            return None
        expected = self.expected_san
        assert expected is not None
        try:
            move = resolve_san(self._position, expected, legal=self._legal)
        except ResolutionError:
            _LOGGER.warning(
                "Puzzle %d: cannot play reply %r", self._puzzle.id, expected
            )
            return None

        self._reply_pending = False
        self._advance(move, expected)
        if self._step >= len(self._puzzle.solution):
            self._complete()
        return move

    def retry(self) -> None:
        """Restart the current puzzle; the score is kept."""
        self.reset(self._puzzle)

    def reset(self, puzzle: Puzzle) -> None:
        """Switch to *puzzle* (or restart it) from its first move."""
        self._puzzle = puzzle
        self._position = puzzle.position.copy()
        self._step = 0
        self._reply_pending = False
        self._last_move = None
        self._set_status(SessionStatus.PLAYING)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _advance(self, move: Move, san: str) -> None:
        self._position = apply_move(self._position, move)
        self._last_move = move
        self._step += 1
        for cb in self.events.on_move:
            cb(move, san, self._position)

    def _complete(self) -> None:
        self.score.correct += 1
        self._set_status(SessionStatus.COMPLETE)

    def _set_status(self, status: SessionStatus) -> None:
        self._status = status
        for cb in self.events.on_status_changed:
            cb(status)
