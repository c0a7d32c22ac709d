"""Standard and long algebraic notation.

Both notations share one renderer and differ only in how the origin square
is qualified:

* SAN uses the minimal qualifier: ``e4``, ``Nbd2``, ``R1e2``, ``exd5``.
* Long algebraic always spells the origin: ``e2e4``, ``Nb1d2``, ``e4xd5``.

Decoding is generate-and-compare: every legal move is rendered with the
same codec and the first one matching the input (ignoring decorations)
wins, so decode can never disagree with encode.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chesscodec.core.enums import MoveTag, PieceType
from chesscodec.core.types import file_name, square_name
from chesscodec.notation.disambiguation import (
    Disambiguator,
    full_origin,
    minimal_qualifier,
)
from chesscodec.notation.errors import DecodeError
from chesscodec.notation.suffix import check_suffix
from chesscodec.notation.symbols import piece_letter, promotion_suffix
from chesscodec.notation.text import strip_decorations

if TYPE_CHECKING:
    from chesscodec.core.move import Move
    from chesscodec.notation.base import PositionView

_LOGGER = logging.getLogger(__name__)

KING_SIDE_CASTLE_TEXT = "O-O"
QUEEN_SIDE_CASTLE_TEXT = "O-O-O"


def render_algebraic(
    position: PositionView, move: Move, disambiguate: Disambiguator
) -> str:
    """Render *move* in algebraic form using *disambiguate* for the origin."""
    suffix = check_suffix(position, move)
    if move.has_tag(MoveTag.KING_SIDE_CASTLE):
        return KING_SIDE_CASTLE_TEXT + suffix
    if move.has_tag(MoveTag.QUEEN_SIDE_CASTLE):
        return QUEEN_SIDE_CASTLE_TEXT + suffix

    piece = position.piece_at(move.from_sq)
    piece_type = piece.piece_type if piece is not None else None
    origin = disambiguate(position, move)

    capture = ""
    if move.is_capture:
        capture = "x"
        if piece_type == PieceType.PAWN and not origin:
            capture = file_name(move.from_sq) + "x"

    return (
        piece_letter(piece_type)
        + origin
        + capture
        + square_name(move.to_sq)
        + promotion_suffix(move.promotion)
        + suffix
    )


class _AlgebraicCodec:
    """Encode/decode pair around :func:`render_algebraic`."""

    __slots__ = ()

    name = ""
    disambiguate: Disambiguator

    def __str__(self) -> str:
        return self.name

    def encode(self, position: PositionView, move: Move) -> str:
        return render_algebraic(position, move, self.disambiguate)

    def decode(self, position: PositionView, text: str) -> Move:
        wanted = strip_decorations(text)
        for move in position.legal_moves():
            if strip_decorations(self.encode(position, move)) == wanted:
                return move
        _LOGGER.debug("%s: no legal move renders as %r", self.name, text)
        raise DecodeError(text, self.name, str(position))


class AlgebraicNotation(_AlgebraicCodec):
    """Standard Algebraic Notation, FIDE's official move notation.

    Examples: ``e4``, ``Nf3``, ``O-O``, ``exd8=Q+``.
    """

    __slots__ = ()

    name = "Algebraic Notation"
    disambiguate = staticmethod(minimal_qualifier)


class LongAlgebraicNotation(_AlgebraicCodec):
    """Algebraic notation with the full origin square always written.

    Examples: ``e2e4``, ``Rd3xd7``, ``O-O``, ``e7e8=Q``.
    """

    __slots__ = ()

    name = "Long Algebraic Notation"
    disambiguate = staticmethod(full_origin)
