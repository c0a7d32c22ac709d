"""Perft counts and move tagging for the legal move generator.

Reference values: https://www.chessprogramming.org/Perft_Results
"""

import pytest

from positions import EN_PASSANT, KIWIPETE, POS3, POS4, POS5

from chesscodec.core.enums import Color, MoveTag, PieceType
from chesscodec.core.move import Move
from chesscodec.core.move_generator import MoveGenerator, is_square_attacked
from chesscodec.core.position import Position
from chesscodec.core.types import C1, E1, E8, G1, parse_square
from chesscodec.notation import STARTING_FEN, position_from_fen


def perft(position: Position, depth: int) -> int:
    """Count leaf nodes at *depth* by walking successor positions."""
    moves = position.legal_moves()
    if depth == 1:
        return len(moves)
    return sum(perft(position.update(move), depth - 1) for move in moves)


@pytest.mark.parametrize(
    ("fen", "depth", "nodes"),
    [
        (STARTING_FEN, 1, 20),
        (STARTING_FEN, 2, 400),
        (KIWIPETE, 1, 48),
        (KIWIPETE, 2, 2_039),
        (POS3, 1, 14),
        (POS3, 2, 191),
        (POS3, 3, 2_812),
        (POS4, 1, 6),
        (POS4, 2, 264),
        (POS5, 1, 44),
        (POS5, 2, 1_486),
    ],
)
def test_perft(fen: str, depth: int, nodes: int) -> None:
    assert perft(position_from_fen(fen), depth) == nodes


@pytest.mark.slow
@pytest.mark.parametrize(
    ("fen", "depth", "nodes"),
    [
        (STARTING_FEN, 3, 8_902),
        (KIWIPETE, 3, 97_862),
        (POS4, 3, 9_467),
        (POS5, 3, 62_379),
    ],
)
def test_perft_deep(fen: str, depth: int, nodes: int) -> None:
    assert perft(position_from_fen(fen), depth) == nodes


def _find(position: Position, uci: str) -> Move:
    for move in position.legal_moves():
        if str(move) == uci:
            return move
    raise AssertionError(f"{uci} is not legal in {position}")


class TestTags:
    def test_opening_moves_are_untagged(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert all(move.tags == MoveTag.NONE for move in pos.legal_moves())

    def test_capture_tag(self) -> None:
        pos = position_from_fen(KIWIPETE)
        move = _find(pos, "e5f7")
        assert move.has_tag(MoveTag.CAPTURE)
        assert not move.has_tag(MoveTag.EN_PASSANT)

    def test_en_passant_tags(self) -> None:
        pos = position_from_fen(EN_PASSANT)
        move = _find(pos, "e5f6")
        assert move.tags == MoveTag.EN_PASSANT | MoveTag.CAPTURE

    def test_castle_tags(self) -> None:
        pos = position_from_fen(KIWIPETE)
        assert _find(pos, "e1g1").tags == MoveTag.KING_SIDE_CASTLE
        assert _find(pos, "e1c1").tags == MoveTag.QUEEN_SIDE_CASTLE

    def test_check_tag(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/R3K3 w - - 0 1")
        assert _find(pos, "a1a8").has_tag(MoveTag.CHECK)
        assert not _find(pos, "a1a7").has_tag(MoveTag.CHECK)

    def test_promotions_generated_for_each_piece(self) -> None:
        pos = position_from_fen("k7/6P1/8/8/8/8/8/4K3 w - - 0 1")
        promos = {
            move.promotion
            for move in pos.legal_moves()
            if move.from_sq == parse_square("g7")
        }
        assert promos == {
            PieceType.QUEEN,
            PieceType.ROOK,
            PieceType.BISHOP,
            PieceType.KNIGHT,
        }
        assert _find(pos, "g7g8q").has_tag(MoveTag.CHECK)
        assert not _find(pos, "g7g8n").has_tag(MoveTag.CHECK)


class TestLegality:
    def test_pinned_piece_cannot_move(self) -> None:
        pos = position_from_fen("4k3/4r3/8/8/8/8/4B3/4K3 w - - 0 1")
        assert all(move.from_sq != parse_square("e2") for move in pos.legal_moves())

    def test_cannot_castle_through_attack(self) -> None:
        # Black rook on f8 covers f1.
        pos = position_from_fen("4kr2/8/8/8/8/8/8/4K2R w K - 0 1")
        assert all(move.to_sq != G1 for move in pos.legal_moves() if move.from_sq == E1)

    def test_cannot_castle_out_of_check(self) -> None:
        pos = position_from_fen("4r1k1/8/8/8/8/8/8/R3K2R w KQ - 0 1")
        castles = [move for move in pos.legal_moves() if move.is_castle]
        assert castles == []

    def test_queen_side_castle_allowed_with_b1_attacked(self) -> None:
        pos = position_from_fen("1r2k3/8/8/8/8/8/8/R3K3 w Q - 0 1")
        assert any(move.to_sq == C1 and move.is_castle for move in pos.legal_moves())

    @pytest.mark.parametrize(
        "fen",
        [
            "4k3/8/8/8/8/8/8/4K3 w KQ - 0 1",
            "4k3/8/8/8/8/8/8/4K2N w K - 0 1",
            "4k3/8/8/8/8/8/8/b3K3 w Q - 0 1",
        ],
    )
    def test_no_castle_without_own_rook(self, fen: str) -> None:
        pos = position_from_fen(fen)
        assert not any(move.is_castle for move in pos.legal_moves())

    def test_black_castles_with_rooks_present(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/4K3 b kq - 0 1")
        castles = {str(move) for move in pos.legal_moves() if move.is_castle}
        assert castles == {"e8g8", "e8c8"}

    def test_generator_leaves_position_untouched(self) -> None:
        pos = position_from_fen(KIWIPETE)
        before = str(pos)
        MoveGenerator(pos).generate_legal_moves()
        assert str(pos) == before


class TestAttacks:
    def test_pawn_attacks(self) -> None:
        pos = position_from_fen("4k3/8/8/4p3/8/8/8/4K3 w - - 0 1")
        assert is_square_attacked(pos.board, parse_square("d4"), Color.BLACK)
        assert is_square_attacked(pos.board, parse_square("f4"), Color.BLACK)
        assert not is_square_attacked(pos.board, parse_square("e4"), Color.BLACK)

    def test_slider_blocked_by_own_piece(self) -> None:
        pos = position_from_fen("4k3/8/8/8/7N/8/8/4K2R w - - 0 1")
        assert is_square_attacked(pos.board, parse_square("h3"), Color.WHITE)
        assert not is_square_attacked(pos.board, parse_square("h8"), Color.WHITE)
        assert not is_square_attacked(pos.board, E8, Color.WHITE)
