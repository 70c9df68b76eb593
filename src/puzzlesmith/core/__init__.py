"""Board model, move rules and notation used by the puzzle miner.

Quick start::

    from puzzlesmith.core import STARTING_FEN, position_from_fen, resolve_san, apply_move

    pos = position_from_fen(STARTING_FEN)
    move = resolve_san(pos, "e4")
    pos = apply_move(pos, move)
"""

from puzzlesmith.core.board import Board
from puzzlesmith.core.enums import CastlingRights, Color, PieceType
from puzzlesmith.core.errors import FormatError, ResolutionError
from puzzlesmith.core.move import Move
from puzzlesmith.core.move_generator import (
    MoveGenerator,
    legal_moves,
    pseudo_legal_moves,
)
from puzzlesmith.core.notation import (
    STARTING_FEN,
    Game,
    build_san,
    moves_match,
    parse_games,
    position_from_fen,
    position_to_fen,
    resolve_san,
)
from puzzlesmith.core.piece import Piece
from puzzlesmith.core.position import Position, apply_move
from puzzlesmith.core.rules import Rules, is_in_check
from puzzlesmith.core.types import (
    ALL_SQUARES,
    Square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "PieceType",
    # Errors
    "FormatError",
    "ResolutionError",
    # Types / helpers
    "ALL_SQUARES",
    "Square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "Game",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    # Operations
    "apply_move",
    "is_in_check",
    "legal_moves",
    "pseudo_legal_moves",
    # Notation
    "STARTING_FEN",
    "build_san",
    "moves_match",
    "parse_games",
    "position_from_fen",
    "position_to_fen",
    "resolve_san",
]
