"""Tests for piece destinations and attack detection."""

import pytest

from puzzlesmith.core.enums import Color
from puzzlesmith.core.move_generator import MoveGenerator, legal_moves, pseudo_legal_moves
from puzzlesmith.core.notation import STARTING_FEN, position_from_fen
from puzzlesmith.core.types import (
    ALL_SQUARES,
    B1, C1, D1, D5, D6, D7, E1, E2, E3, E4, E5, E6, F1, F2, F3, G1, H3,
    parse_square,
)

OPEN_ROOKS_FEN = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"
EN_PASSANT_FEN = "rnbqkbnr/ppp1p1pp/8/3pPp2/8/8/PPPP1PPP/RNBQKBNR w KQkq d6 0 3"


def squares(*names: str) -> list:
    return [parse_square(n) for n in names]


class TestPawn:
    def test_double_push_from_start(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pseudo_legal_moves(pos, E2) == [E3, E4]

    def test_blocked_pawn(self) -> None:
        pos = position_from_fen("4k3/8/8/8/4p3/4P3/8/4K3 w - - 0 1")
        assert pseudo_legal_moves(pos, E3) == []

    def test_double_push_needs_both_squares(self) -> None:
        pos = position_from_fen("4k3/8/8/8/4p3/8/4P3/4K3 w - - 0 1")
        assert pseudo_legal_moves(pos, E2) == [E3]

    def test_diagonal_capture(self) -> None:
        pos = position_from_fen("4k3/8/8/3p4/4P3/8/8/4K3 w - - 0 1")
        assert pseudo_legal_moves(pos, E4) == [E5, D5]

    def test_en_passant_target(self) -> None:
        pos = position_from_fen(EN_PASSANT_FEN)
        assert pseudo_legal_moves(pos, E5) == [E6, D6]

    def test_black_pawn_moves_down(self) -> None:
        pos = position_from_fen(STARTING_FEN.replace(" w ", " b "))
        assert pseudo_legal_moves(pos, D7) == squares("d6", "d5")


class TestPieces:
    def test_empty_square(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pseudo_legal_moves(pos, E4) == []

    def test_knight_from_start(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pseudo_legal_moves(pos, G1) == [F3, H3]

    def test_rook_ray_stops_at_enemy(self) -> None:
        pos = position_from_fen("8/8/8/3p4/8/8/3R4/8 w - - 0 1")
        dests = pseudo_legal_moves(pos, parse_square("d2"))
        assert D5 in dests
        assert parse_square("d6") not in dests
        assert len(dests) == 11

    def test_bishop_blocked_by_own_piece(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pseudo_legal_moves(pos, F1) == []

    def test_queen_combines_rays(self) -> None:
        pos = position_from_fen("8/8/8/8/3Q4/8/8/8 w - - 0 1")
        assert len(pseudo_legal_moves(pos, parse_square("d4"))) == 27

    def test_king_steps(self) -> None:
        pos = position_from_fen("8/8/8/8/8/8/8/K7 w - - 0 1")
        assert sorted(pseudo_legal_moves(pos, parse_square("a1"))) == sorted(
            squares("a2", "b2", "b1")
        )

    def test_deterministic(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pseudo_legal_moves(pos, B1) == pseudo_legal_moves(pos, B1)

    def test_twenty_destinations_from_start(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        total = sum(len(pseudo_legal_moves(pos, sq)) for sq in ALL_SQUARES)
        assert total == 20


class TestCastling:
    def test_both_sides_offered(self) -> None:
        pos = position_from_fen(OPEN_ROOKS_FEN)
        dests = pseudo_legal_moves(pos, E1)
        assert G1 in dests
        assert C1 in dests

    def test_requires_right(self) -> None:
        pos = position_from_fen(OPEN_ROOKS_FEN.replace("KQkq", "Qkq"))
        dests = pseudo_legal_moves(pos, E1)
        assert G1 not in dests
        assert C1 in dests

    def test_requires_empty_path(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/RN2K2R w KQkq - 0 1")
        assert C1 not in pseudo_legal_moves(pos, E1)

    def test_requires_rook_on_corner(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2B w KQkq - 0 1")
        assert G1 not in pseudo_legal_moves(pos, E1)

    def test_requires_king_on_home_square(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R2K3R w KQkq - 0 1")
        dests = pseudo_legal_moves(pos, D1)
        assert parse_square("b1") not in dests
        assert parse_square("f1") not in dests

    def test_pseudo_legal_ignores_attacks(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/5r2/R3K2R w KQkq - 0 1")
        assert G1 in pseudo_legal_moves(pos, E1)

    def test_legal_refuses_attacked_transit(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/5r2/R3K2R w KQkq - 0 1")
        dests = legal_moves(pos, E1)
        assert G1 not in dests
        assert C1 in dests
        assert F2 in dests


class TestLegality:
    PINNED_FEN = "4r3/8/8/8/8/8/4N3/4K3 w - - 0 1"

    def test_pinned_piece_pseudo_legal(self) -> None:
        pos = position_from_fen(self.PINNED_FEN)
        assert pseudo_legal_moves(pos, E2)

    def test_pinned_piece_has_no_legal_moves(self) -> None:
        pos = position_from_fen(self.PINNED_FEN)
        assert legal_moves(pos, E2) == []

    def test_king_cannot_step_into_attack(self) -> None:
        pos = position_from_fen(self.PINNED_FEN)
        dests = legal_moves(pos, E1)
        assert D1 in dests
        assert parse_square("e2") not in dests


class TestOwnership:
    def test_side_to_move_decides_friendliness(self) -> None:
        # With black to move, the white rook sees the white pawn as capturable.
        pos = position_from_fen("4k3/8/8/8/8/8/4P3/4R2K b - - 0 1")
        assert E2 in pseudo_legal_moves(pos, E1)


class TestAttacks:
    @pytest.mark.parametrize(
        ("fen", "square", "by_color", "expected"),
        [
            (STARTING_FEN, "e3", Color.WHITE, True),
            (STARTING_FEN, "e4", Color.WHITE, False),
            (STARTING_FEN, "f6", Color.BLACK, True),
            ("8/8/8/8/8/8/5r2/4K3 w - - 0 1", "f1", Color.BLACK, True),
            ("8/8/8/8/8/8/5r2/4K3 w - - 0 1", "e1", Color.BLACK, False),
        ],
    )
    def test_is_square_attacked(
        self, fen: str, square: str, by_color: Color, expected: bool
    ) -> None:
        gen = MoveGenerator(position_from_fen(fen))
        assert gen.is_square_attacked(parse_square(square), by_color) is expected
