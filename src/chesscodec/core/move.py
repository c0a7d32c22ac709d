"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from chesscodec.core.enums import MoveTag, PieceType
from chesscodec.core.types import Square, square_name

# Lowercase promotion letters used in coordinate (UCI) text.
PROMOTION_LETTERS: dict[PieceType, str] = {
    PieceType.QUEEN: "q",
    PieceType.ROOK: "r",
    PieceType.BISHOP: "b",
    PieceType.KNIGHT: "n",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    A move is identified by its squares and promotion piece. The *tags* are
    annotations derived from the position the move is played in, so they take
    no part in equality or hashing: a bare coordinate move equals the fully
    tagged legal move it names.
    """

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None
    tags: MoveTag = field(default=MoveTag.NONE, compare=False)

    def has_tag(self, tag: MoveTag) -> bool:
        """Whether any bit of *tag* is set on this move."""
        return bool(self.tags & tag)

    def with_tags(self, tags: MoveTag) -> Move:
        """Copy of this move with *tags* added."""
        return replace(self, tags=self.tags | tags)

    @property
    def is_castle(self) -> bool:
        return bool(self.tags & MoveTag.CASTLE)

    @property
    def is_capture(self) -> bool:
        return bool(self.tags & (MoveTag.CAPTURE | MoveTag.EN_PASSANT))

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += PROMOTION_LETTERS.get(self.promotion, "")
        return base
