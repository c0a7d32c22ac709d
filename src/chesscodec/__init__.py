"""Chess move notation codec: UCI, Standard Algebraic and Long Algebraic.

Quick start::

    from chesscodec import AlgebraicNotation, UCINotation, position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    move = AlgebraicNotation().decode(pos, "Nf3")
    UCINotation().encode(pos, move)  # "g1f3"
"""

from chesscodec.core import Color, GameStatus, Move, MoveTag, PieceType, Position
from chesscodec.notation import (
    NOTATIONS,
    STARTING_FEN,
    AlgebraicNotation,
    DecodeError,
    LongAlgebraicNotation,
    Notation,
    UCINotation,
    notation_by_name,
    position_from_fen,
    position_to_fen,
)

__version__ = "0.1.0"

__all__ = [
    "AlgebraicNotation",
    "Color",
    "DecodeError",
    "GameStatus",
    "LongAlgebraicNotation",
    "Move",
    "MoveTag",
    "NOTATIONS",
    "Notation",
    "PieceType",
    "Position",
    "STARTING_FEN",
    "UCINotation",
    "notation_by_name",
    "position_from_fen",
    "position_to_fen",
]
