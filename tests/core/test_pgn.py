"""Tests for PGN batch parsing."""

import pytest

from puzzlesmith.core.notation import (
    MIN_GAME_MOVES,
    Game,
    is_san_token,
    parse_games,
    parse_headers,
    parse_movetext,
    parse_pgn_game,
)

RUY_LOPEZ_MOVES = [
    "e4", "e5", "Nf3", "Nc6", "Bb5", "a6", "Ba4", "Nf6", "O-O",
    "Be7", "Re1", "b5", "Bb3", "d6", "c3", "O-O", "h3",
]


class TestParseHeaders:
    def test_basic(self, ruy_lopez_pgn: str) -> None:
        headers = parse_headers(ruy_lopez_pgn)
        assert headers["White"] == "Alpha"
        assert headers["Black"] == "Beta"
        assert headers["Date"] == "2024.05.01"

    def test_escaped_quotes(self) -> None:
        headers = parse_headers('[Event "The \\"Big\\" Open"]')
        assert headers["Event"] == 'The "Big" Open'


class TestParseMovetext:
    def test_mainline_only(self, ruy_lopez_pgn: str) -> None:
        assert parse_movetext(ruy_lopez_pgn) == RUY_LOPEZ_MOVES

    def test_black_move_numbers(self) -> None:
        moves = parse_movetext("12. Nf3 Nc6 12... Bb4 13.Bd2")
        assert moves == ["Nf3", "Nc6", "Bb4", "Bd2"]

    def test_line_comments_and_nags(self) -> None:
        moves = parse_movetext("1. e4 $2 e5 ; a comment Nf6\n2. Nf3 *")
        assert moves == ["e4", "e5", "Nf3"]

    def test_annotations_kept_on_tokens(self) -> None:
        moves = parse_movetext("1. e4 e5 2. Qh5 Nc6 3. Bc4 Nf6 4. Qxf7# 1-0")
        assert moves[-1] == "Qxf7#"

    def test_drops_malformed_tokens(self) -> None:
        moves = parse_movetext("1. e4 e5 2. Nf3 foo 3. Zz9 1/2-1/2")
        assert moves == ["e4", "e5", "Nf3"]


class TestIsSanToken:
    @pytest.mark.parametrize(
        "token", ["e4", "exd5", "Nbd2", "R1a3", "Qh4xe1", "e8=Q+", "O-O", "O-O-O#"]
    )
    def test_accepted(self, token: str) -> None:
        assert is_san_token(token)

    @pytest.mark.parametrize("token", ["", "1-0", "e9", "Zf3", "O-O-O-O", "e8=K"])
    def test_rejected(self, token: str) -> None:
        assert not is_san_token(token)


class TestParsePgnGame:
    def test_short_game_kept(self, short_pgn: str) -> None:
        game = parse_pgn_game(short_pgn)
        assert game.moves == ("e4", "e5", "Nf3", "Nc6", "Bb5")

    def test_missing_header_default(self) -> None:
        game = parse_pgn_game("1. e4 e5")
        assert game.header("White") == "?"
        assert game.header("White", "Unknown") == "Unknown"

    def test_headers_read_only(self, ruy_lopez_pgn: str) -> None:
        game = parse_pgn_game(ruy_lopez_pgn)
        with pytest.raises(TypeError):
            game.headers["White"] = "Gamma"  # type: ignore[index]


class TestParseGames:
    def test_short_game_discarded(self, short_pgn: str) -> None:
        assert parse_games(short_pgn) == []

    def test_min_moves_override(self, short_pgn: str) -> None:
        games = parse_games(short_pgn, min_moves=5)
        assert len(games) == 1

    def test_batch_split_on_event(self, ruy_lopez_pgn: str, short_pgn: str) -> None:
        games = parse_games("\n".join([ruy_lopez_pgn, short_pgn, ruy_lopez_pgn]))
        assert len(games) == 2
        assert all(isinstance(g, Game) for g in games)
        assert list(games[0].moves) == RUY_LOPEZ_MOVES

    def test_empty_input(self) -> None:
        assert parse_games("") == []
        assert parse_games("\n\n") == []

    def test_sample_collection(self, sample_games: list[Game]) -> None:
        assert len(sample_games) == 8
        assert all(len(g.moves) >= MIN_GAME_MOVES for g in sample_games)
        assert sample_games[0].moves[:3] == ("Nf3", "c5", "c4")
