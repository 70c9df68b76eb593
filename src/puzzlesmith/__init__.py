"""Tactical puzzle generation from recorded chess games.

Quick start::

    from puzzlesmith import puzzles_from_pgn

    for puzzle in puzzles_from_pgn(pgn_text):
        print(puzzle.fen, puzzle.solution, puzzle.rating, puzzle.tags)
"""

from puzzlesmith.puzzles import puzzles_from_pgn

__version__ = "0.1.0"

__all__ = ["__version__", "puzzles_from_pgn"]
