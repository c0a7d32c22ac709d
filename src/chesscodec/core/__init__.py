"""Position model consumed by the notation codecs.

Quick start::

    from chesscodec.core import Position

    pos = Position.initial()
    for move in pos.legal_moves():
        print(move, move.tags)
"""

from chesscodec.core.board import Board
from chesscodec.core.enums import CastlingRights, Color, GameStatus, MoveTag, PieceType
from chesscodec.core.move import Move
from chesscodec.core.move_generator import MoveGenerator, is_in_check, is_square_attacked
from chesscodec.core.piece import Piece
from chesscodec.core.position import Position
from chesscodec.core.rules import Rules
from chesscodec.core.types import (
    Square,
    file_name,
    file_of,
    lookup_square,
    make_square,
    parse_square,
    rank_name,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameStatus",
    "MoveTag",
    "PieceType",
    # Types / helpers
    "Square",
    "file_name",
    "file_of",
    "lookup_square",
    "make_square",
    "parse_square",
    "rank_name",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    "is_in_check",
    "is_square_attacked",
]
