"""Legal move generation, move tagging and attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesscodec.core.board import Board, squares_of
from chesscodec.core.enums import CastlingRights, Color, MoveTag, PieceType
from chesscodec.core.move import Move
from chesscodec.core.piece import Piece
from chesscodec.core.types import Square, make_square

if TYPE_CHECKING:
    from chesscodec.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

# Per color: (forward step, start rank, last rank before promotion)
_PAWN_GEOMETRY: dict[Color, tuple[int, int, int]] = {
    Color.WHITE: (8, 1, 6),
    Color.BLACK: (-8, 6, 1),
}

# Per color: (king-side right, queen-side right, back-rank offset)
_CASTLING_GEOMETRY: dict[Color, tuple[CastlingRights, CastlingRights, int]] = {
    Color.WHITE: (CastlingRights.WHITE_KINGSIDE, CastlingRights.WHITE_QUEENSIDE, 0),
    Color.BLACK: (CastlingRights.BLACK_KINGSIDE, CastlingRights.BLACK_QUEENSIDE, 56),
}


# -- Precomputed lookup tables ---------------------------------------------


def _on_board(file_idx: int, rank_idx: int) -> bool:
    return 0 <= file_idx < 8 and 0 <= rank_idx < 8


def _build_leaper_masks(offsets: tuple[tuple[int, int], ...]) -> tuple[int, ...]:
    masks: list[int] = []
    for sq in range(64):
        mask = 0
        for df, dr in offsets:
            af, ar = (sq & 7) + df, (sq >> 3) + dr
            if _on_board(af, ar):
                mask |= 1 << make_square(af, ar)
        masks.append(mask)
    return tuple(masks)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            af, ar = (sq & 7) + df, (sq >> 3) + dr
            ray: list[Square] = []
            while _on_board(af, ar):
                ray.append(make_square(af, ar))
                af += df
                ar += dr
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


def _build_pawn_attack_masks(forward: int) -> tuple[int, ...]:
    """Squares a pawn moving in *forward* rank direction attacks from each square."""
    return _build_leaper_masks(((-1, forward), (1, forward)))


_KNIGHT_MASKS = _build_leaper_masks(KNIGHT_OFFSETS)
_KING_MASKS = _build_leaper_masks(KING_OFFSETS)
# Indexed by the color of the *attacking* pawn; a pawn of that color attacks
# sq exactly when sq lies in the mask of the opposite-direction pawn.
_PAWN_ATTACKER_MASKS: dict[Color, tuple[int, ...]] = {
    Color.WHITE: _build_pawn_attack_masks(-1),
    Color.BLACK: _build_pawn_attack_masks(1),
}

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = tuple(b + r for b, r in zip(_BISHOP_RAYS, _ROOK_RAYS))


# -- Attack detection ------------------------------------------------------


def _ray_hits(
    board: Board,
    rays: tuple[tuple[Square, ...], ...],
    by_color: Color,
    sliders: tuple[PieceType, PieceType],
) -> bool:
    for ray in rays:
        for to_sq in ray:
            piece = board[to_sq]
            if piece is None:
                continue
            if piece.color == by_color and piece.piece_type in sliders:
                return True
            break
    return False


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?"""
    pawns = board.pieces_bitboard(by_color, PieceType.PAWN)
    if pawns & _PAWN_ATTACKER_MASKS[by_color][sq]:
        return True
    if board.pieces_bitboard(by_color, PieceType.KNIGHT) & _KNIGHT_MASKS[sq]:
        return True
    if board.pieces_bitboard(by_color, PieceType.KING) & _KING_MASKS[sq]:
        return True
    if _ray_hits(board, _BISHOP_RAYS[sq], by_color, (PieceType.BISHOP, PieceType.QUEEN)):
        return True
    return _ray_hits(board, _ROOK_RAYS[sq], by_color, (PieceType.ROOK, PieceType.QUEEN))


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?"""
    return is_square_attacked(board, board.king_square(color), color.opposite)


# -- Generator -------------------------------------------------------------


class MoveGenerator:
    """Generates tagged legal moves for a given :class:`Position`.

    Every generated move carries the tags a notation needs: ``CAPTURE``,
    ``EN_PASSANT``, the castle side and ``CHECK``. The position is never
    mutated; legality is tested on successor positions.
    """

    __slots__ = ("_pos", "_board", "_color")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board
        self._color = position.side_to_move

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self) -> list[Move]:
        """All strictly legal moves for the side to move, tagged with CHECK."""
        legal: list[Move] = []
        mover = self._color
        for move in self.generate_pseudo_legal_moves():
            successor = self._pos.update(move)
            if is_in_check(successor.board, mover):
                continue
            if is_in_check(successor.board, mover.opposite):
                move = move.with_tags(MoveTag.CHECK)
            legal.append(move)
        return legal

    def generate_pseudo_legal_moves(self) -> list[Move]:
        """All pseudo-legal moves (may leave own king in check)."""
        moves: list[Move] = []
        board = self._board
        color = self._color

        for sq in squares_of(board.pieces_bitboard(color, PieceType.PAWN)):
            self._gen_pawn(sq, moves)
        for sq in squares_of(board.pieces_bitboard(color, PieceType.KNIGHT)):
            self._gen_leaper(sq, _KNIGHT_MASKS[sq], moves)
        for sq in squares_of(board.pieces_bitboard(color, PieceType.BISHOP)):
            self._gen_sliding(sq, _BISHOP_RAYS[sq], moves)
        for sq in squares_of(board.pieces_bitboard(color, PieceType.ROOK)):
            self._gen_sliding(sq, _ROOK_RAYS[sq], moves)
        for sq in squares_of(board.pieces_bitboard(color, PieceType.QUEEN)):
            self._gen_sliding(sq, _QUEEN_RAYS[sq], moves)
        for sq in squares_of(board.pieces_bitboard(color, PieceType.KING)):
            self._gen_leaper(sq, _KING_MASKS[sq], moves)
            self._gen_castling(sq, moves)
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _target_tags(self, to_sq: Square) -> MoveTag | None:
        """Tags for landing on *to_sq*, or ``None`` if own piece blocks it."""
        target = self._board[to_sq]
        if target is None:
            return MoveTag.NONE
        if target.color == self._color:
            return None
        return MoveTag.CAPTURE

    def _gen_pawn(self, sq: Square, moves: list[Move]) -> None:
        board = self._board
        forward, start_rank, promo_rank = _PAWN_GEOMETRY[self._color]
        rank_idx = sq >> 3
        promoting = rank_idx == promo_rank

        def add(to_sq: Square, tags: MoveTag) -> None:
            if promoting:
                for pt in PROMOTION_TYPES:
                    moves.append(Move(sq, to_sq, pt, tags))
            else:
                moves.append(Move(sq, to_sq, None, tags))

        one_step = sq + forward
        if not 0 <= one_step < 64:
            return
        if board.is_empty(one_step):
            add(one_step, MoveTag.NONE)
            two_step = one_step + forward
            if rank_idx == start_rank and board.is_empty(two_step):
                moves.append(Move(sq, two_step))

        for df in (-1, 1):
            af = (sq & 7) + df
            if not 0 <= af < 8:
                continue
            cap_sq = one_step + df
            target = board[cap_sq]
            if target is not None and target.color != self._color:
                add(cap_sq, MoveTag.CAPTURE)
            elif target is None and cap_sq == self._pos.en_passant:
                moves.append(
                    Move(sq, cap_sq, None, MoveTag.CAPTURE | MoveTag.EN_PASSANT)
                )

    def _gen_leaper(self, sq: Square, mask: int, moves: list[Move]) -> None:
        for to_sq in squares_of(mask):
            tags = self._target_tags(to_sq)
            if tags is not None:
                moves.append(Move(sq, to_sq, None, tags))

    def _gen_sliding(
        self,
        sq: Square,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        for ray in rays:
            for to_sq in ray:
                tags = self._target_tags(to_sq)
                if tags is not None:
                    moves.append(Move(sq, to_sq, None, tags))
                if tags != MoveTag.NONE:
                    break

    def _gen_castling(self, king_sq: Square, moves: list[Move]) -> None:
        board = self._board
        color = self._color
        king_side, queen_side, offset = _CASTLING_GEOMETRY[color]
        if king_sq != offset + 4 or not self._pos.castling & (king_side | queen_side):
            return
        opponent = color.opposite
        if is_square_attacked(board, king_sq, opponent):
            return
        rook = Piece(color, PieceType.ROOK)

        if self._pos.castling & king_side and board[offset + 7] == rook:
            f_sq, g_sq = offset + 5, offset + 6
            if (
                board.is_empty(f_sq)
                and board.is_empty(g_sq)
                and not is_square_attacked(board, f_sq, opponent)
                and not is_square_attacked(board, g_sq, opponent)
            ):
                moves.append(Move(king_sq, g_sq, None, MoveTag.KING_SIDE_CASTLE))

        if self._pos.castling & queen_side and board[offset] == rook:
            b_sq, c_sq, d_sq = offset + 1, offset + 2, offset + 3
            if (
                board.is_empty(b_sq)
                and board.is_empty(c_sq)
                and board.is_empty(d_sq)
                and not is_square_attacked(board, c_sq, opponent)
                and not is_square_attacked(board, d_sq, opponent)
            ):
                moves.append(Move(king_sq, c_sq, None, MoveTag.QUEEN_SIDE_CASTLE))
