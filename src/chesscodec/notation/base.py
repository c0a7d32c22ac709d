"""Notation protocol and the read-only position contract it consumes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from chesscodec.core.enums import GameStatus
    from chesscodec.core.move import Move
    from chesscodec.core.piece import Piece
    from chesscodec.core.types import Square


class PositionView(Protocol):
    """What a notation needs from a position.

    :class:`chesscodec.core.Position` satisfies this; codecs never mutate it.
    """

    @property
    def en_passant_target(self) -> Square | None: ...

    def piece_at(self, sq: Square) -> Piece | None: ...

    def legal_moves(self) -> Sequence[Move]: ...

    def update(self, move: Move) -> PositionView: ...

    def status(self) -> GameStatus: ...


class Notation(Protocol):
    """A textual move notation: encodes moves and decodes move text."""

    def encode(self, position: PositionView, move: Move) -> str:
        """Render *move*, played from *position*, as text.

        Encoding does not validate the move.
        """
        ...

    def decode(self, position: PositionView, text: str) -> Move:
        """Parse *text* into a move for *position*.

        Raises:
            DecodeError: If *text* cannot be decoded.
        """
        ...
