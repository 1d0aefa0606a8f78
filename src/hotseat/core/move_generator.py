"""Legal move classification and generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hotseat.core.attacks import is_in_check, is_square_attacked
from hotseat.core.enums import Color, MoveFlag, PieceType
from hotseat.core.move import Move
from hotseat.core.movement import is_pseudo_legal
from hotseat.core.special import castling_flag, is_en_passant, is_promotion
from hotseat.core.types import ALL_SQUARES, Square, is_on_board

if TYPE_CHECKING:
    from hotseat.core.piece import Piece
    from hotseat.core.position import Position


class MoveGenerator:
    """Answers legality queries for a given :class:`Position`.

    King safety is tested by playing the move on a scratch copy of the
    position, so the position handed in is never mutated.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Classification -----------------------------------------------------

    def classify(self, from_sq: Square, to_sq: Square) -> Move | None:
        """Build the move *from_sq* → *to_sq* if its pattern allows it.

        Returns ``None`` when no piece stands on *from_sq*, when *to_sq* holds
        a King, or when neither the piece's pattern nor a special move
        reaches *to_sq*.  King safety is not considered here.
        """
        if self._pos.pending_promotion is not None:
            return None
        if not is_on_board(*to_sq):
            return None
        piece = self._board[from_sq]
        if piece is None:
            return None
        target = self._board[to_sq]
        if target is not None and target.kind == PieceType.KING:
            return None

        if piece.kind == PieceType.KING:
            flag = castling_flag(piece, to_sq, self._pos)
            if flag is not None:
                return Move(from_sq, to_sq, flag)
        elif piece.kind == PieceType.PAWN and is_en_passant(piece, to_sq, self._pos):
            return Move(from_sq, to_sq, MoveFlag.EN_PASSANT)

        if not is_pseudo_legal(piece, to_sq, self._board):
            return None

        if piece.kind == PieceType.PAWN:
            if is_promotion(piece, to_sq):
                return Move(from_sq, to_sq, MoveFlag.PROMOTION)
            if abs(to_sq[0] - from_sq[0]) == 2:
                return Move(from_sq, to_sq, MoveFlag.DOUBLE_PAWN)
        return Move(from_sq, to_sq)

    # -- Legality -----------------------------------------------------------

    def is_safe(self, move: Move) -> bool:
        """Does *move* leave the mover's king out of check?"""
        piece = self._board[move.from_sq]
        assert piece is not None
        scratch = self._pos.copy()
        scratch.make_move(move)
        return not is_in_check(piece.color, scratch.board)

    def legal_move(self, from_sq: Square, to_sq: Square) -> Move | None:
        """The classified move if it is fully legal, else ``None``."""
        move = self.classify(from_sq, to_sq)
        if move is None or not self.is_safe(move):
            return None
        return move

    def is_legal_move(self, piece: Piece, dest: Square) -> bool:
        return self.legal_move(piece.square, dest) is not None

    def legal_destinations(self, sq: Square) -> set[Square]:
        """All squares the piece on *sq* may legally move to."""
        if self._board[sq] is None:
            return set()
        return {dest for dest in ALL_SQUARES if self.legal_move(sq, dest) is not None}

    def has_any_legal_move(self, color: Color) -> bool:
        for piece in self._board.all_pieces(color):
            for dest in ALL_SQUARES:
                if self.legal_move(piece.square, dest) is not None:
                    return True
        return False

    def generate_legal_moves(self, color: Color | None = None) -> list[Move]:
        """All strictly legal moves for *color* (default: side to move).

        Promotions are listed once, without a chosen piece.
        """
        if color is None:
            color = self._pos.side_to_move
        moves: list[Move] = []
        for piece in self._board.all_pieces(color):
            for dest in ALL_SQUARES:
                move = self.legal_move(piece.square, dest)
                if move is not None:
                    moves.append(move)
        return moves

    # -- Attack detection ---------------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return is_in_check(color, self._board)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        return is_square_attacked(sq, by_color, self._board)
