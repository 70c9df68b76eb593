"""Puzzle mining and solving APIs."""

from puzzlesmith.puzzles.material import PIECE_VALUES, material_score
from puzzlesmith.puzzles.miner import (
    MinerConfig,
    PuzzleMiner,
    compute_rating,
    mine_puzzles,
    puzzles_from_pgn,
)
from puzzlesmith.puzzles.models import Difficulty, Puzzle, TacticTag, filter_puzzles
from puzzlesmith.puzzles.replay import ReplayStep, replay_moves, replay_positions
from puzzlesmith.puzzles.session import (
    PuzzleSession,
    SessionEvents,
    SessionScore,
    SessionStatus,
    play_move,
    reachable_squares,
)
from puzzlesmith.puzzles.tactics import classify_tactics, count_fork_targets

__all__ = [
    "Difficulty",
    "MinerConfig",
    "PIECE_VALUES",
    "Puzzle",
    "PuzzleMiner",
    "PuzzleSession",
    "ReplayStep",
    "SessionEvents",
    "SessionScore",
    "SessionStatus",
    "TacticTag",
    "classify_tactics",
    "compute_rating",
    "count_fork_targets",
    "filter_puzzles",
    "material_score",
    "mine_puzzles",
    "play_move",
    "puzzles_from_pgn",
    "reachable_squares",
    "replay_moves",
    "replay_positions",
]
