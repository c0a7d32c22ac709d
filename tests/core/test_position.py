"""Tests for Position successor semantics."""

import pytest

from positions import EN_PASSANT, KIWIPETE

from chesscodec.core.enums import CastlingRights, Color, PieceType
from chesscodec.core.move import Move
from chesscodec.core.piece import Piece
from chesscodec.core.position import Position
from chesscodec.core.types import (
    A1, C1, D1, E1, E2, E3, E4, E5, F5, F6, G1, H1, H8,
    parse_square,
)
from chesscodec.notation import STARTING_FEN, position_from_fen, position_to_fen


class TestUpdate:
    def test_side_switches(self, start: Position) -> None:
        after = start.update(Move(E2, E4))
        assert after.side_to_move == Color.BLACK

    def test_receiver_untouched(self, start: Position) -> None:
        start.update(Move(E2, E4))
        assert position_to_fen(start) == STARTING_FEN

    def test_every_legal_move_leaves_receiver_untouched(self) -> None:
        pos = position_from_fen(KIWIPETE)
        for move in pos.legal_moves():
            pos.update(move)
        assert position_to_fen(pos) == KIWIPETE

    def test_double_push_sets_en_passant_target(self, start: Position) -> None:
        after = start.update(Move(E2, E4))
        assert after.en_passant_target == E3
        assert after.update(Move(parse_square("g8"), parse_square("f6"))).en_passant_target is None

    def test_piece_moves(self, start: Position) -> None:
        after = start.update(Move(E2, E4))
        assert after.piece_at(E2) is None
        assert after.piece_at(E4) == Piece(Color.WHITE, PieceType.PAWN)

    def test_empty_origin_raises(self, start: Position) -> None:
        with pytest.raises(ValueError, match="No piece"):
            start.update(Move(E4, parse_square("e5")))

    def test_legal_moves_cached(self, start: Position) -> None:
        assert start.legal_moves() is start.legal_moves()


class TestSpecialMoves:
    def test_en_passant_removes_captured_pawn(self) -> None:
        pos = position_from_fen(EN_PASSANT)
        after = pos.update(Move(E5, F6))
        assert after.piece_at(F6) == Piece(Color.WHITE, PieceType.PAWN)
        assert after.piece_at(F5) is None
        assert after.piece_at(E5) is None
        assert after.halfmove_clock == 0

    def test_king_side_castle_moves_rook(self) -> None:
        pos = position_from_fen(KIWIPETE)
        after = pos.update(Move(E1, G1))
        assert after.piece_at(G1) == Piece(Color.WHITE, PieceType.KING)
        assert after.piece_at(parse_square("f1")) == Piece(Color.WHITE, PieceType.ROOK)
        assert after.piece_at(H1) is None
        assert not after.castling & CastlingRights.WHITE_BOTH
        assert after.castling & CastlingRights.BLACK_BOTH == CastlingRights.BLACK_BOTH

    def test_queen_side_castle_moves_rook(self) -> None:
        pos = position_from_fen(KIWIPETE)
        after = pos.update(Move(E1, C1))
        assert after.piece_at(C1) == Piece(Color.WHITE, PieceType.KING)
        assert after.piece_at(D1) == Piece(Color.WHITE, PieceType.ROOK)
        assert after.piece_at(A1) is None

    def test_promotion_places_new_piece(self) -> None:
        pos = position_from_fen("k7/6P1/8/8/8/8/8/4K3 w - - 0 1")
        g7, g8 = parse_square("g7"), parse_square("g8")
        after = pos.update(Move(g7, g8, PieceType.KNIGHT))
        assert after.piece_at(g8) == Piece(Color.WHITE, PieceType.KNIGHT)
        assert after.piece_at(g7) is None


class TestCastlingRights:
    def test_rook_move_drops_one_side(self) -> None:
        pos = position_from_fen(KIWIPETE)
        after = pos.update(Move(H1, parse_square("g1")))
        assert not after.castling & CastlingRights.WHITE_KINGSIDE
        assert after.castling & CastlingRights.WHITE_QUEENSIDE

    def test_capturing_rook_drops_opponent_right(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        after = pos.update(Move(H1, H8))
        assert not after.castling & CastlingRights.BLACK_KINGSIDE
        assert not after.castling & CastlingRights.WHITE_KINGSIDE
        assert after.castling & CastlingRights.BLACK_QUEENSIDE


class TestClocks:
    def test_quiet_piece_move_increments_halfmove(self, start: Position) -> None:
        after = start.update(Move(parse_square("g1"), parse_square("f3")))
        assert after.halfmove_clock == 1
        assert after.fullmove_number == 1

    def test_black_move_increments_fullmove(self, start: Position) -> None:
        after = start.update(Move(E2, E4)).update(
            Move(parse_square("e7"), parse_square("e5"))
        )
        assert after.fullmove_number == 2
        assert after.halfmove_clock == 0


class TestDisplay:
    def test_str_is_fen(self, start: Position) -> None:
        assert str(start) == STARTING_FEN

    def test_repr(self, start: Position) -> None:
        assert repr(start) == f"Position({STARTING_FEN!r})"
