"""Core enumerations and flags for the position model."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value.

    "No piece type" (e.g. no promotion) is expressed as ``None``.
    """

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveTag(IntFlag):
    """Semantic annotations carried by a move.

    Tags are additive: an en-passant capture is ``EN_PASSANT | CAPTURE``,
    a checking capture is ``CAPTURE | CHECK``.
    """

    NONE = 0
    CAPTURE = auto()
    EN_PASSANT = auto()
    KING_SIDE_CASTLE = auto()
    QUEEN_SIDE_CASTLE = auto()
    CHECK = auto()

    CASTLE = KING_SIDE_CASTLE | QUEEN_SIDE_CASTLE


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH


class GameStatus(IntEnum):
    """State of the side to move in a position."""

    NORMAL = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3
    INSUFFICIENT_MATERIAL = 4
    SEVENTY_FIVE_MOVE_RULE = 5

    @property
    def is_terminal(self) -> bool:
        return self not in (GameStatus.NORMAL, GameStatus.CHECK)
