"""Position: complete game state with successor-based move application."""

from __future__ import annotations

from chesscodec.core.board import Board
from chesscodec.core.enums import CastlingRights, Color, GameStatus, PieceType
from chesscodec.core.move import Move
from chesscodec.core.piece import Piece
from chesscodec.core.types import Square, file_of, make_square, rank_of

# Rook corner -> castling right lost when that corner is vacated or captured
_ROOK_CORNERS: dict[Square, CastlingRights] = {
    make_square(0, 0): CastlingRights.WHITE_QUEENSIDE,
    make_square(7, 0): CastlingRights.WHITE_KINGSIDE,
    make_square(0, 7): CastlingRights.BLACK_QUEENSIDE,
    make_square(7, 7): CastlingRights.BLACK_KINGSIDE,
}

_KING_RIGHTS: dict[Color, CastlingRights] = {
    Color.WHITE: CastlingRights.WHITE_BOTH,
    Color.BLACK: CastlingRights.BLACK_BOTH,
}


class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    A position is treated as a value: :meth:`update` returns the successor
    position and leaves ``self`` untouched. The legal-move list is computed
    on first use and cached.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
        "_legal_moves",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number
        self._legal_moves: tuple[Move, ...] | None = None

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position."""
        return cls()

    # ── Read-only queries ────────────────────────────────────────────────

    def piece_at(self, sq: Square) -> Piece | None:
        return self.board[sq]

    @property
    def en_passant_target(self) -> Square | None:
        """Square a pawn may capture onto en passant, if any."""
        return self.en_passant

    def legal_moves(self) -> tuple[Move, ...]:
        """Legal moves for the side to move, in generation order."""
        if self._legal_moves is None:
            from chesscodec.core.move_generator import MoveGenerator

            self._legal_moves = tuple(MoveGenerator(self).generate_legal_moves())
        return self._legal_moves

    def status(self) -> GameStatus:
        from chesscodec.core.rules import Rules

        return Rules.status(self)

    # ── Succession ───────────────────────────────────────────────────────

    def update(self, move: Move) -> Position:
        """Return the position reached by playing *move*.

        Special moves are recognised from the board, so untagged moves
        (e.g. parsed from bare coordinates) are applied correctly too.
        """
        successor = self.copy()
        successor._apply(move)
        return successor

    def _apply(self, move: Move) -> None:
        board = self.board
        piece = board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        captured = board[move.to_sq]
        is_pawn = piece.piece_type == PieceType.PAWN
        file_delta = file_of(move.to_sq) - file_of(move.from_sq)

        # En passant: the captured pawn sits beside the origin square
        if (
            is_pawn
            and captured is None
            and file_delta != 0
            and move.to_sq == self.en_passant
        ):
            ep_capture_sq = make_square(file_of(move.to_sq), rank_of(move.from_sq))
            captured = board[ep_capture_sq]
            board[ep_capture_sq] = None

        board[move.from_sq] = None
        placed = piece
        if is_pawn and move.promotion is not None:
            placed = Piece(piece.color, move.promotion)
        board[move.to_sq] = placed

        # Castling: the king travels two files, the rook jumps over it
        if piece.piece_type == PieceType.KING and abs(file_delta) == 2:
            r = rank_of(move.from_sq)
            rook_from, rook_to = (
                (make_square(7, r), make_square(5, r))
                if file_delta > 0
                else (make_square(0, r), make_square(3, r))
            )
            rook = board[rook_from]
            if rook is not None:
                board[rook_from] = None
                board[rook_to] = rook

        # En passant target for the opponent
        self.en_passant = None
        if is_pawn and abs(rank_of(move.to_sq) - rank_of(move.from_sq)) == 2:
            self.en_passant = make_square(
                file_of(move.from_sq),
                (rank_of(move.from_sq) + rank_of(move.to_sq)) // 2,
            )

        # Castling rights
        if piece.piece_type == PieceType.KING:
            self.castling &= ~_KING_RIGHTS[piece.color]
        for sq in (move.from_sq, move.to_sq):
            if sq in _ROOK_CORNERS:
                self.castling &= ~_ROOK_CORNERS[sq]

        # Clocks
        if is_pawn or captured is not None:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1
        if self.side_to_move == Color.BLACK:
            self.fullmove_number += 1

        self.side_to_move = self.side_to_move.opposite
        self._legal_moves = None

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Independent copy (the legal-move cache is not carried over)."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )

    def __str__(self) -> str:
        from chesscodec.notation.fen import position_to_fen

        return position_to_fen(self)

    def __repr__(self) -> str:
        return f"Position({str(self)!r})"
