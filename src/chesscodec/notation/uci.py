"""UCI coordinate notation: ``e2e4``, ``e1g1``, ``e7e8q``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chesscodec.core.enums import MoveTag, PieceType
from chesscodec.core.move import Move
from chesscodec.core.types import C1, C8, E1, E8, G1, G8, lookup_square
from chesscodec.notation.errors import DecodeError
from chesscodec.notation.symbols import promotion_from_letter

if TYPE_CHECKING:
    from chesscodec.notation.base import PositionView

_LOGGER = logging.getLogger(__name__)

_KING_SIDE_CASTLES = {(E1, G1), (E8, G8)}
_QUEEN_SIDE_CASTLES = {(E1, C1), (E8, C8)}


class UCINotation:
    """Fixed-width coordinate notation used by the Universal Chess Interface.

    Decoding is purely syntactic: the result may be illegal, and callers
    must validate it against the position's legal moves. Passing
    ``position=None`` skips tag inference and returns the bare move.
    """

    __slots__ = ()

    def __str__(self) -> str:
        return "UCI Notation"

    def encode(self, position: PositionView | None, move: Move) -> str:
        return str(move)

    def decode(self, position: PositionView | None, text: str) -> Move:
        if len(text) not in (4, 5):
            raise self._error(text, position, "expected 4 or 5 characters")
        from_sq = lookup_square(text[0:2])
        to_sq = lookup_square(text[2:4])
        if from_sq is None or to_sq is None:
            raise self._error(text, position, "unknown square")

        promotion: PieceType | None = None
        if len(text) == 5:
            promotion = promotion_from_letter(text[4])
            if promotion is None:
                raise self._error(text, position, "unknown promotion letter")

        move = Move(from_sq, to_sq, promotion)
        if position is None:
            return move
        return move.with_tags(self._infer_tags(position, move))

    @staticmethod
    def _infer_tags(position: PositionView, move: Move) -> MoveTag:
        tags = MoveTag.NONE
        mover = position.piece_at(move.from_sq)
        if mover is None:
            return tags

        squares = (move.from_sq, move.to_sq)
        if mover.piece_type == PieceType.KING:
            if squares in _KING_SIDE_CASTLES:
                tags |= MoveTag.KING_SIDE_CASTLE
            elif squares in _QUEEN_SIDE_CASTLES:
                tags |= MoveTag.QUEEN_SIDE_CASTLE
        elif (
            mover.piece_type == PieceType.PAWN
            and move.to_sq == position.en_passant_target
        ):
            tags |= MoveTag.EN_PASSANT | MoveTag.CAPTURE

        target = position.piece_at(move.to_sq)
        if target is not None and target.color != mover.color:
            tags |= MoveTag.CAPTURE
        return tags

    def _error(
        self, text: str, position: PositionView | None, reason: str
    ) -> DecodeError:
        _LOGGER.debug("UCI decode of %r failed: %s", text, reason)
        return DecodeError(text, str(self), None if position is None else str(position))
