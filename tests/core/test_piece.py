"""Tests for Piece FEN letters."""

import pytest

from chesscodec.core.enums import Color, PieceType
from chesscodec.core.piece import Piece


@pytest.mark.parametrize(
    ("char", "color", "piece_type"),
    [
        ("P", Color.WHITE, PieceType.PAWN),
        ("N", Color.WHITE, PieceType.KNIGHT),
        ("k", Color.BLACK, PieceType.KING),
        ("q", Color.BLACK, PieceType.QUEEN),
    ],
)
def test_fen_letters(char: str, color: Color, piece_type: PieceType) -> None:
    piece = Piece.from_char(char)
    assert piece == Piece(color, piece_type)
    assert str(piece) == char


@pytest.mark.parametrize("char", ["x", "", "NN", "1"])
def test_invalid_letter(char: str) -> None:
    with pytest.raises(ValueError, match="Invalid piece character"):
        Piece.from_char(char)
