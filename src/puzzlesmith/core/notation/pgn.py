"""PGN batch parsing: split a text blob into games of SAN tokens."""

from __future__ import annotations

import logging
import re

from puzzlesmith.core.notation.models import Game

_LOGGER = logging.getLogger(__name__)

MIN_GAME_MOVES = 10

_GAME_SPLIT_RE = re.compile(r"\n(?=\[Event )")
_PGN_HEADER_RE = re.compile(r'\[(\w+)\s+"((?:[^"\\]|\\.)*)"\]')
_HEADER_LINE_RE = re.compile(r"\[.*?\]\s*")
_COMMENT_RE = re.compile(r"\{[^}]*\}")
_LINE_COMMENT_RE = re.compile(r";[^\n]*")
_VARIATION_RE = re.compile(r"\([^()]*\)")
_NAG_RE = re.compile(r"\$\d+")
_MOVE_NUMBER_RE = re.compile(r"\d+\.+")
_PURE_NUMBER_RE = re.compile(r"^[\d.]+$")
_SAN_TOKEN_RE = re.compile(
    r"^(?:[KQRBNP]?[a-h]?[1-8]?x?[a-h][1-8](?:=[QRBN])?|O-O(?:-O)?)[+#]?$"
)
_PGN_RESULT_TOKENS = frozenset({"1-0", "0-1", "1/2-1/2", "*"})


def is_san_token(token: str) -> bool:
    """Whether *token* has the shape of a notated move."""
    return _SAN_TOKEN_RE.match(token) is not None


def _strip_variations(text: str) -> str:
    # Innermost first so nested variations disappear completely.
    while True:
        stripped = _VARIATION_RE.sub(" ", text)
        if stripped == text:
            return text
        text = stripped


def parse_headers(chunk: str) -> dict[str, str]:
    """Collect ``[Key "Value"]`` pairs from a game chunk."""
    headers: dict[str, str] = {}
    for key, raw_value in _PGN_HEADER_RE.findall(chunk):
        headers[key] = raw_value.replace('\\"', '"').replace("\\\\", "\\")
    return headers


def parse_movetext(chunk: str) -> list[str]:
    """Return the mainline SAN tokens of a game chunk.

    Comments, variations, NAGs, move numbers and the result marker are
    discarded rather than interpreted.
    """
    text = _HEADER_LINE_RE.sub("", chunk)
    text = _COMMENT_RE.sub(" ", text)
    text = _LINE_COMMENT_RE.sub(" ", text)
    text = _strip_variations(text)
    text = _NAG_RE.sub(" ", text)
    text = _MOVE_NUMBER_RE.sub(" ", text)

    moves: list[str] = []
    for token in text.split():
        if token in _PGN_RESULT_TOKENS or _PURE_NUMBER_RE.match(token):
            continue
        if is_san_token(token):
            moves.append(token)
    return moves


def parse_pgn_game(chunk: str) -> Game:
    """Parse a single game chunk regardless of its length."""
    headers = parse_headers(chunk)
    return Game(headers=headers, moves=tuple(parse_movetext(chunk)))


def parse_games(pgn_text: str, *, min_moves: int = MIN_GAME_MOVES) -> list[Game]:
    """Split a PGN batch into games, dropping chunks shorter than *min_moves*."""
    games: list[Game] = []
    for chunk in _GAME_SPLIT_RE.split(pgn_text):
        if not chunk.strip():
            continue
        game = parse_pgn_game(chunk)
        if len(game.moves) < min_moves:
            _LOGGER.debug(
                "Skipping PGN chunk with %d moves (event %r)",
                len(game.moves),
                game.header("Event"),
            )
            continue
        games.append(game)
    return games
