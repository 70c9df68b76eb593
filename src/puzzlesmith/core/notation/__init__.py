"""Notation package: FEN / SAN / PGN parsing and serialization."""

from puzzlesmith.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from puzzlesmith.core.notation.models import Game
from puzzlesmith.core.notation.pgn import (
    MIN_GAME_MOVES,
    is_san_token,
    parse_games,
    parse_headers,
    parse_movetext,
    parse_pgn_game,
)
from puzzlesmith.core.notation.san import (
    build_san,
    clean_san,
    is_capture_token,
    is_check_token,
    is_promotion_token,
    moves_match,
    resolve_san,
)

__all__ = [
    "STARTING_FEN",
    "MIN_GAME_MOVES",
    "Game",
    "position_from_fen",
    "position_to_fen",
    "build_san",
    "clean_san",
    "is_capture_token",
    "is_check_token",
    "is_promotion_token",
    "moves_match",
    "resolve_san",
    "is_san_token",
    "parse_games",
    "parse_headers",
    "parse_movetext",
    "parse_pgn_game",
]
