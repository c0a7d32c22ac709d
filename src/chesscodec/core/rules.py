"""High-level chess rules: check, checkmate, stalemate and automatic draws."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesscodec.core.enums import Color, GameStatus, PieceType
from chesscodec.core.move_generator import is_in_check
from chesscodec.core.types import file_of, rank_of

if TYPE_CHECKING:
    from chesscodec.core.position import Position

_SEVENTY_FIVE_MOVE_PLIES = 150


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return is_in_check(position.board, position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        return Rules.is_in_check(position) and not position.legal_moves()

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        return not Rules.is_in_check(position) and not position.legal_moves()

    @staticmethod
    def is_insufficient_material(position: Position) -> bool:
        """K vs K, K+B vs K, K+N vs K, K+B vs K+B (same-color bishops)."""
        board = position.board
        white_occ = board.occupancy(Color.WHITE)
        black_occ = board.occupancy(Color.BLACK)
        total = (white_occ | black_occ).bit_count()

        if total == 2:
            return True

        minors = (PieceType.KNIGHT, PieceType.BISHOP)
        if total == 3:
            return any(
                board.pieces_bitboard(color, pt)
                for color in Color
                for pt in minors
            )

        if total == 4:
            wb = board.pieces(Color.WHITE, PieceType.BISHOP)
            bb = board.pieces(Color.BLACK, PieceType.BISHOP)
            if len(wb) == 1 and len(bb) == 1:
                w_shade = (file_of(wb[0]) + rank_of(wb[0])) % 2
                b_shade = (file_of(bb[0]) + rank_of(bb[0])) % 2
                return w_shade == b_shade

        return False

    @staticmethod
    def is_seventy_five_move_rule(position: Position) -> bool:
        return position.halfmove_clock >= _SEVENTY_FIVE_MOVE_PLIES

    @staticmethod
    def status(position: Position) -> GameStatus:
        """Classify the position for the side to move."""
        in_check = Rules.is_in_check(position)
        if not position.legal_moves():
            return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE
        if Rules.is_insufficient_material(position):
            return GameStatus.INSUFFICIENT_MATERIAL
        if Rules.is_seventy_five_move_rule(position):
            return GameStatus.SEVENTY_FIVE_MOVE_RULE
        return GameStatus.CHECK if in_check else GameStatus.NORMAL
