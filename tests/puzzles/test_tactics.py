"""Tests for tactic tagging."""

from puzzlesmith.core.notation import position_from_fen, resolve_san
from puzzlesmith.core.position import apply_move
from puzzlesmith.puzzles.models import TacticTag
from puzzlesmith.puzzles.tactics import classify_tactics, count_fork_targets

KNIGHT_FORK_FEN = "r3k3/8/8/1N6/8/8/8/4K3 w - - 0 1"


def _play(fen: str, san: str):
    pre = position_from_fen(fen)
    return pre, apply_move(pre, resolve_san(pre, san))


class TestForkTargets:
    def test_knight_forks_king_and_rook(self) -> None:
        pre, post = _play(KNIGHT_FORK_FEN, "Nc7+")
        assert count_fork_targets(pre, post, "Nc7+") == 2

    def test_quiet_move_hits_nothing(self) -> None:
        pre, post = _play(KNIGHT_FORK_FEN, "Nd4")
        assert count_fork_targets(pre, post, "Nd4") == 0

    def test_unresolvable_token_counts_zero(self) -> None:
        pre, post = _play(KNIGHT_FORK_FEN, "Nd4")
        assert count_fork_targets(pre, post, "Qh5") == 0


class TestClassifyTactics:
    def test_fork_with_check(self) -> None:
        pre, post = _play(KNIGHT_FORK_FEN, "Nc7+")
        tags = classify_tactics(pre, post, "Nc7+", ["Nc7+"])
        assert tags == (TacticTag.CHECK, TacticTag.FORK)

    def test_combination_tag(self) -> None:
        pre, post = _play(KNIGHT_FORK_FEN, "Nc7+")
        tags = classify_tactics(pre, post, "Nc7+", ["Nc7+", "Kd7", "Nxa8"])
        assert tags == (TacticTag.CHECK, TacticTag.FORK, TacticTag.COMBINATION)

    def test_check_comes_from_position_not_token(self) -> None:
        pre, post = _play(KNIGHT_FORK_FEN, "Nc7")
        assert TacticTag.CHECK in classify_tactics(pre, post, "Nc7", ["Nc7"])

    def test_capture(self) -> None:
        fen = "4k3/8/8/3p4/4P3/8/8/4K3 w - - 0 1"
        pre, post = _play(fen, "exd5")
        assert classify_tactics(pre, post, "exd5", ["exd5"]) == (TacticTag.CAPTURE,)

    def test_promotion(self) -> None:
        fen = "8/4P3/8/8/8/8/k7/4K3 w - - 0 1"
        pre, post = _play(fen, "e8=Q")
        tags = classify_tactics(pre, post, "e8=Q", ["e8=Q"])
        assert TacticTag.PROMOTION in tags

    def test_quiet_single_move_falls_back(self) -> None:
        pre, post = _play(KNIGHT_FORK_FEN, "Nd4")
        assert classify_tactics(pre, post, "Nd4", ["Nd4"]) == (TacticTag.TACTIC,)

    def test_never_empty_and_unique(self) -> None:
        pre, post = _play(KNIGHT_FORK_FEN, "Nc7+")
        tags = classify_tactics(pre, post, "Nc7+", ["Nc7+", "Kd8"])
        assert tags
        assert len(tags) == len(set(tags))
