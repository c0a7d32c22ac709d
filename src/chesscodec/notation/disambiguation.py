"""Origin-square qualifiers for algebraic notations.

Both strategies share the :data:`Disambiguator` signature so the algebraic
renderer can be parameterised by either one.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chesscodec.core.enums import PieceType
from chesscodec.core.types import file_name, file_of, rank_name, rank_of, square_name

if TYPE_CHECKING:
    from chesscodec.core.move import Move
    from chesscodec.notation.base import PositionView

Disambiguator = Callable[["PositionView", "Move"], str]


def minimal_qualifier(position: PositionView, move: Move) -> str:
    """Shortest origin qualifier that singles *move* out among its rivals.

    Rivals are legal moves of an identical piece (same type and color) that
    reach the same destination from a different origin. Pawns never get a
    qualifier here: pawn captures name their origin file by themselves.

    Returns ``""`` without rivals, the origin file when it suffices, the
    origin rank when only the file is shared, and the full square otherwise.
    """
    piece = position.piece_at(move.from_sq)
    if piece is None or piece.piece_type == PieceType.PAWN:
        return ""

    contested = False
    file_req = False
    rank_req = False
    for other in position.legal_moves():
        if other.to_sq != move.to_sq or other.from_sq == move.from_sq:
            continue
        if position.piece_at(other.from_sq) != piece:
            continue
        contested = True
        if file_of(other.from_sq) == file_of(move.from_sq):
            rank_req = True
        if rank_of(other.from_sq) == rank_of(move.from_sq):
            file_req = True

    qualifier = ""
    if file_req or (contested and not rank_req):
        qualifier = file_name(move.from_sq)
    if rank_req:
        qualifier += rank_name(move.from_sq)
    return qualifier


def full_origin(position: PositionView, move: Move) -> str:
    """Always the full origin square (long algebraic)."""
    return square_name(move.from_sq)
