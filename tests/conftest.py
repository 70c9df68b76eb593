"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from puzzlesmith.core.notation.models import Game
from puzzlesmith.core.notation.pgn import parse_games
from puzzlesmith.runtime_assets import load_sample_pgn

SHORT_PGN = """[Event "Blitz"]
[White "Alpha"]
[Black "Beta"]
[Result "1-0"]

1. e4 e5 2. Nf3 Nc6 3. Bb5 1-0
"""

RUY_LOPEZ_PGN = """[Event "Test Open"]
[Site "Somewhere"]
[Date "2024.05.01"]
[White "Alpha"]
[Black "Beta"]
[Result "1-0"]

1. e4 {best by test} e5 2. Nf3 (2. f4 exf4 (2... d5)) Nc6 3. Bb5 $1 a6
4. Ba4 Nf6 5. O-O Be7 6. Re1 b5 7. Bb3 d6 8. c3 O-O 9. h3 1-0
"""


@pytest.fixture
def short_pgn() -> str:
    """A five-move game, too short to keep in a batch."""
    return SHORT_PGN


@pytest.fixture
def ruy_lopez_pgn() -> str:
    return RUY_LOPEZ_PGN


@pytest.fixture(scope="session")
def sample_pgn() -> str:
    """The bundled sample game collection."""
    return load_sample_pgn()


@pytest.fixture(scope="session")
def sample_games(sample_pgn: str) -> list[Game]:
    return parse_games(sample_pgn)


@pytest.fixture(scope="session")
def first_sample_game(sample_games: list[Game]) -> Game:
    """Rausis vs Kanovsky, 1-0, 41 moves."""
    return sample_games[0]
