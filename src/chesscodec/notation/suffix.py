"""Check / checkmate suffix shared by the algebraic notations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesscodec.core.enums import GameStatus, MoveTag

if TYPE_CHECKING:
    from chesscodec.core.move import Move
    from chesscodec.notation.base import PositionView


def check_suffix(position: PositionView, move: Move) -> str:
    """``"#"`` if *move* mates, ``"+"`` if it only checks, else ``""``.

    Only moves tagged ``CHECK`` are examined; for those the successor
    position is asked for its status.
    """
    if not move.has_tag(MoveTag.CHECK):
        return ""
    if position.update(move).status() == GameStatus.CHECKMATE:
        return "#"
    return "+"
