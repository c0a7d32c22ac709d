"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chesscodec.core.enums import Color, PieceType

# FEN letters of the black pieces, indexed by ``PieceType - 1``.
_FEN_LETTERS = "pnbrqk"


@dataclass(frozen=True, slots=True)
class Piece:
    """A piece type owned by one side."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN letter: uppercase for white, lowercase for black."""
        letter = _FEN_LETTERS[self.piece_type - 1]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Piece for a FEN letter, e.g. ``'N'`` gives the white knight."""
        index = _FEN_LETTERS.find(char.lower()) if len(char) == 1 else -1
        if index < 0:
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, PieceType(index + 1))
