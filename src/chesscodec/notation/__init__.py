"""Notation package: UCI / SAN / long algebraic codecs plus FEN."""

from chesscodec.notation.algebraic import (
    AlgebraicNotation,
    LongAlgebraicNotation,
    render_algebraic,
)
from chesscodec.notation.base import Notation, PositionView
from chesscodec.notation.disambiguation import full_origin, minimal_qualifier
from chesscodec.notation.errors import DecodeError
from chesscodec.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from chesscodec.notation.registry import NOTATIONS, notation_by_name
from chesscodec.notation.suffix import check_suffix
from chesscodec.notation.text import strip_decorations
from chesscodec.notation.uci import UCINotation

__all__ = [
    # Codecs
    "AlgebraicNotation",
    "LongAlgebraicNotation",
    "UCINotation",
    "Notation",
    "PositionView",
    "NOTATIONS",
    "notation_by_name",
    "DecodeError",
    # Building blocks
    "check_suffix",
    "full_origin",
    "minimal_qualifier",
    "render_algebraic",
    "strip_decorations",
    # FEN
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
