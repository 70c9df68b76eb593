"""Puzzle miner: turn replayed games into rated, tagged training puzzles."""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from puzzlesmith.core.notation.fen import position_to_fen
from puzzlesmith.core.notation.models import Game
from puzzlesmith.core.notation.pgn import parse_games
from puzzlesmith.core.notation.san import (
    is_capture_token,
    is_check_token,
    is_promotion_token,
)
from puzzlesmith.core.position import Position
from puzzlesmith.puzzles.material import material_score
from puzzlesmith.puzzles.models import Puzzle
from puzzlesmith.puzzles.replay import replay_positions
from puzzlesmith.puzzles.tactics import classify_tactics

_LOGGER = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


@dataclass(slots=True, frozen=True)
class MinerConfig:
    """Thresholds and rating constants used while mining."""

    min_positions: int = 12
    scan_start: int = 8
    tail_margin: int = 3
    material_swing: int = 2
    solution_length: int = 3
    skip_after: int = 5

    base_rating: int = 800
    per_material_point: int = 80
    check_bonus: int = 100
    combination_bonus: int = 200
    rating_step: int = 50
    min_rating: int = 600
    max_rating: int = 2000

    shuffle: bool = True
    seed: int | None = None
    strict_legality: bool = False


def compute_rating(
    material_delta: int,
    has_check: bool,
    solution_length: int,
    config: MinerConfig | None = None,
) -> int:
    """Difficulty estimate rounded to the rating step and clamped."""
    cfg = config or MinerConfig()
    raw = (
        cfg.base_rating
        + cfg.per_material_point * abs(material_delta)
        + (cfg.check_bonus if has_check else 0)
        + (cfg.combination_bonus if solution_length > 1 else 0)
    )
    # Half-up rounding to the nearest step.
    stepped = math.floor(raw / cfg.rating_step + 0.5) * cfg.rating_step
    return min(cfg.max_rating, max(cfg.min_rating, stepped))


class PuzzleMiner:
    """Scans games for material swings, checks, captures and promotions."""

    __slots__ = ("_config", "_rng")

    def __init__(self, config: MinerConfig | None = None) -> None:
        self._config = config or MinerConfig()
        self._rng = random.Random(self._config.seed)

    @property
    def config(self) -> MinerConfig:
        return self._config

    def mine(
        self,
        games: Iterable[Game],
        *,
        on_progress: ProgressCallback | None = None,
    ) -> list[Puzzle]:
        """Mine every game; a failing game never aborts the batch.

        Puzzles are numbered in discovery order and then shuffled unless
        the config disables it.
        """
        game_list = list(games)
        total = len(game_list)
        puzzles: list[Puzzle] = []

        for index, game in enumerate(game_list):
            try:
                positions = replay_positions(
                    game.moves, legal=self._config.strict_legality
                )
                self.mine_game(game, positions, puzzles)
            except Exception:
                _LOGGER.warning(
                    "Skipping rest of game %r (%s vs %s)",
                    game.header("Event"),
                    game.header("White"),
                    game.header("Black"),
                    exc_info=True,
                )
            if on_progress is not None:
                on_progress(index + 1, total)

        if self._config.shuffle:
            self._rng.shuffle(puzzles)

        _LOGGER.info("Mined %d puzzles from %d games", len(puzzles), total)
        return puzzles

    def mine_game(
        self,
        game: Game,
        positions: Sequence[Position],
        puzzles: list[Puzzle],
    ) -> None:
        """Append the puzzles found in one replayed game to *puzzles*."""
        cfg = self._config
        if len(positions) < cfg.min_positions:
            return

        moves = game.moves
        ply = cfg.scan_start
        while ply < len(positions) - cfg.tail_margin:
            san = moves[ply] if ply < len(moves) else ""
            if not san:
                ply += 1
                continue

            before = material_score(positions[ply])
            delta = abs(material_score(positions[ply + 2]) - before)
            has_check = is_check_token(san)
            if (
                delta >= cfg.material_swing
                or has_check
                or is_capture_token(san)
                or is_promotion_token(san)
            ):
                solution = tuple(moves[ply : ply + cfg.solution_length])
                if solution:
                    puzzles.append(
                        self._build_puzzle(
                            len(puzzles),
                            game,
                            positions,
                            ply,
                            solution,
                            delta,
                            has_check,
                        )
                    )
                    ply += cfg.skip_after
            ply += 1

    def _build_puzzle(
        self,
        puzzle_id: int,
        game: Game,
        positions: Sequence[Position],
        ply: int,
        solution: tuple[str, ...],
        delta: int,
        has_check: bool,
    ) -> Puzzle:
        position = positions[ply]
        tags = classify_tactics(
            position,
            positions[ply + 1],
            solution[0],
            solution,
            legal=self._config.strict_legality,
        )
        return Puzzle(
            id=puzzle_id,
            fen=position_to_fen(position),
            side_to_move=position.side_to_move,
            solution=solution,
            white=game.header("White"),
            black=game.header("Black"),
            date=game.header("Date"),
            event=game.header("Event"),
            move_number=ply // 2 + 1,
            rating=compute_rating(delta, has_check, len(solution), self._config),
            tags=tags,
            position=position,
        )


def mine_puzzles(
    games: Iterable[Game], config: MinerConfig | None = None
) -> list[Puzzle]:
    """Convenience wrapper around :meth:`PuzzleMiner.mine`."""
    return PuzzleMiner(config).mine(games)


def puzzles_from_pgn(
    pgn_text: str, config: MinerConfig | None = None
) -> list[Puzzle]:
    """Parse a PGN batch and mine it in one call."""
    return mine_puzzles(parse_games(pgn_text), config)
