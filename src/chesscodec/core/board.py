"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from chesscodec.core.enums import Color, PieceType
from chesscodec.core.piece import Piece
from chesscodec.core.types import Square, make_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _slot(color: Color, piece_type: PieceType) -> int:
    return int(color) * 6 + int(piece_type) - 1


def squares_of(bitboard: int) -> Iterator[Square]:
    """Yield the set squares of *bitboard* from a1 upwards."""
    while bitboard:
        lsb = bitboard & -bitboard
        yield lsb.bit_length() - 1
        bitboard ^= lsb


class Board:
    """Mutable 64-square board with one occupancy bitboard per piece kind."""

    __slots__ = ("_squares", "_bitboards")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        # [color * 6 + piece_type - 1] -> bitboard of occupied squares.
        self._bitboards: list[int] = [0] * 12

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        old_piece = self._squares[sq]
        if old_piece == piece:
            return
        mask = 1 << sq
        if old_piece is not None:
            self._bitboards[_slot(old_piece.color, old_piece.piece_type)] &= ~mask
        self._squares[sq] = piece
        if piece is not None:
            self._bitboards[_slot(piece.color, piece.piece_type)] |= mask

    def __iter__(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares with their pieces, a1 to h8."""
        for sq, piece in enumerate(self._squares):
            if piece is not None:
                yield sq, piece

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    # -- Query helpers ------------------------------------------------------

    def pieces_bitboard(self, color: Color, piece_type: PieceType) -> int:
        """Bitboard of squares occupied by *color*'s *piece_type*."""
        return self._bitboards[_slot(color, piece_type)]

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return list(squares_of(self.pieces_bitboard(color, piece_type)))

    def occupancy(self, color: Color) -> int:
        """Bitboard of all squares occupied by *color*."""
        start = int(color) * 6
        bitboard = 0
        for part in self._bitboards[start : start + 6]:
            bitboard |= part
        return bitboard

    def king_square(self, color: Color) -> Square:
        """Return the king square for *color*."""
        kings = self.pieces_bitboard(color, PieceType.KING)
        if not kings:
            raise ValueError(f"No {color.name} king on board")
        return (kings & -kings).bit_length() - 1

    # -- Copying / factory --------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._bitboards = self._bitboards.copy()
        return b

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f, pt in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece(Color.WHITE, pt)
            b[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)
            b[make_square(f, 7)] = Piece(Color.BLACK, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
