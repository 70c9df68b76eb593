"""Data models produced by puzzle mining."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from puzzlesmith.core.enums import Color
from puzzlesmith.core.position import Position


class TacticTag(StrEnum):
    """Descriptive labels attached to a puzzle's first solution move."""

    CHECK = "check"
    CAPTURE = "capture"
    PROMOTION = "promotion"
    FORK = "fork"
    COMBINATION = "combination"
    TACTIC = "tactic"


class Difficulty(StrEnum):
    """Rating buckets offered when browsing puzzles."""

    ALL = "all"
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    def contains(self, rating: int) -> bool:
        low, high = _DIFFICULTY_RANGES[self]
        return low <= rating < high


_DIFFICULTY_RANGES: dict[Difficulty, tuple[float, float]] = {
    Difficulty.ALL: (float("-inf"), float("inf")),
    Difficulty.EASY: (float("-inf"), 1100),
    Difficulty.MEDIUM: (1100, 1400),
    Difficulty.HARD: (1400, float("inf")),
}


@dataclass(slots=True, frozen=True)
class Puzzle:
    """A training position with its expected continuation."""

    id: int
    fen: str
    side_to_move: Color
    solution: tuple[str, ...]
    white: str
    black: str
    date: str
    event: str
    move_number: int
    rating: int
    tags: tuple[TacticTag, ...]
    position: Position = field(compare=False, repr=False)

    @property
    def difficulty(self) -> Difficulty:
        for bucket in (Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD):
            if bucket.contains(self.rating):
                return bucket
        return Difficulty.ALL

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready view (everything except the live position object)."""
        return {
            "id": self.id,
            "fen": self.fen,
            "turn": self.side_to_move.fen_char,
            "solution": list(self.solution),
            "white": self.white,
            "black": self.black,
            "date": self.date,
            "event": self.event,
            "move_number": self.move_number,
            "rating": self.rating,
            "difficulty": str(self.difficulty),
            "tags": [str(tag) for tag in self.tags],
        }


def filter_puzzles(
    puzzles: Iterable[Puzzle],
    difficulty: Difficulty = Difficulty.ALL,
    tag: TacticTag | None = None,
) -> list[Puzzle]:
    """Puzzles within *difficulty* (and carrying *tag*), order preserved."""
    return [
        p
        for p in puzzles
        if difficulty.contains(p.rating) and (tag is None or tag in p.tags)
    ]
