"""Attack and check detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hotseat.core.enums import Color, PieceType
from hotseat.core.movement import pawn_attack_squares, reaches
from hotseat.core.types import Square

if TYPE_CHECKING:
    from hotseat.core.board import Board


def is_square_attacked(sq: Square, by_color: Color, board: Board) -> bool:
    """Is *sq* attacked by any piece of *by_color*?

    Answers "could a piece be captured on *sq*", so pawns count through
    their diagonal footprint and whatever occupies *sq* is irrelevant.
    """
    for piece in board.all_pieces(by_color):
        if piece.kind == PieceType.PAWN:
            if sq in pawn_attack_squares(piece):
                return True
        elif reaches(piece, sq, board):
            return True
    return False


def is_in_check(color: Color, board: Board) -> bool:
    """Is *color*'s king attacked by the opponent?"""
    return is_square_attacked(board.king_square(color), color.opposite, board)
