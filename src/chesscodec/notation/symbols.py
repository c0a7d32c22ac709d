"""Piece-letter symbol tables shared by all notations."""

from __future__ import annotations

from typing import Final

from chesscodec.core.enums import PieceType
from chesscodec.core.move import PROMOTION_LETTERS

# Uppercase letters used by SAN / long algebraic; pawns have no letter.
PIECE_LETTERS: Final[dict[PieceType, str]] = {
    PieceType.KING: "K",
    PieceType.QUEEN: "Q",
    PieceType.ROOK: "R",
    PieceType.BISHOP: "B",
    PieceType.KNIGHT: "N",
}

PROMOTION_TYPES_BY_LETTER: Final[dict[str, PieceType]] = {
    v: k for k, v in PROMOTION_LETTERS.items()
}


def piece_letter(piece_type: PieceType | None) -> str:
    """SAN letter for *piece_type*; empty for pawns and ``None``."""
    if piece_type is None:
        return ""
    return PIECE_LETTERS.get(piece_type, "")


def promotion_letter(piece_type: PieceType | None) -> str:
    """UCI promotion letter for *piece_type*; empty if it cannot be promoted to."""
    if piece_type is None:
        return ""
    return PROMOTION_LETTERS.get(piece_type, "")


def promotion_from_letter(letter: str) -> PieceType | None:
    """Inverse of :func:`promotion_letter`; ``None`` for unknown letters."""
    return PROMOTION_TYPES_BY_LETTER.get(letter)


def promotion_suffix(piece_type: PieceType | None) -> str:
    """Algebraic promotion text, e.g. ``"=Q"``; empty when not promoting."""
    letter = piece_letter(piece_type)
    return f"={letter}" if letter else ""
