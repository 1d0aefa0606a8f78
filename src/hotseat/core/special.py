"""Castling, en passant and promotion eligibility."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hotseat.core.attacks import is_square_attacked
from hotseat.core.enums import MoveFlag, PieceType
from hotseat.core.movement import path_is_clear
from hotseat.core.types import Square

if TYPE_CHECKING:
    from hotseat.core.piece import Piece
    from hotseat.core.position import Position

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

_ROOK_COLS: dict[MoveFlag, int] = {
    MoveFlag.CASTLE_KINGSIDE: 7,
    MoveFlag.CASTLE_QUEENSIDE: 0,
}


# -- Castling -----------------------------------------------------------------


def castle_rook_squares(king_sq: Square, flag: MoveFlag) -> tuple[Square, Square]:
    """Rook origin and destination for a castle by the king on *king_sq*."""
    row, col = king_sq
    rook_col = _ROOK_COLS[flag]
    step = 1 if rook_col > col else -1
    return (row, rook_col), (row, col + step)


def castling_flag(king: Piece, dest: Square, position: Position) -> MoveFlag | None:
    """Castle flag when *king* → *dest* is a valid castle, else ``None``."""
    if king.kind != PieceType.KING or king.has_moved:
        return None
    row, col = king.square
    if dest[0] != row or abs(dest[1] - col) != 2:
        return None

    flag = MoveFlag.CASTLE_KINGSIDE if dest[1] > col else MoveFlag.CASTLE_QUEENSIDE
    board = position.board
    rook_sq, _ = castle_rook_squares(king.square, flag)
    rook = board[rook_sq]
    if (
        rook is None
        or rook.kind != PieceType.ROOK
        or rook.color != king.color
        or rook.has_moved
    ):
        return None
    if not path_is_clear(king.square, rook_sq, board):
        return None

    enemy = king.color.opposite
    transit = (row, (col + dest[1]) // 2)
    for sq in (king.square, transit, dest):
        if is_square_attacked(sq, enemy, board):
            return None
    return flag


# -- En passant ---------------------------------------------------------------


def en_passant_victim(pawn_sq: Square, dest: Square) -> Square:
    """Square of the pawn captured en passant: mover's row, target's column."""
    return (pawn_sq[0], dest[1])


def is_en_passant(pawn: Piece, dest: Square, position: Position) -> bool:
    if pawn.kind != PieceType.PAWN:
        return False
    board = position.board
    dr = dest[0] - pawn.square[0]
    dc = dest[1] - pawn.square[1]
    if dr != pawn.color.forward or abs(dc) != 1 or not board.is_empty(dest):
        return False

    victim_sq = en_passant_victim(pawn.square, dest)
    if victim_sq != position.en_passant_target:
        return False
    victim = board[victim_sq]
    return (
        victim is not None
        and victim.kind == PieceType.PAWN
        and victim.color != pawn.color
        and victim.last_double_step == position.move_count - 1
    )


# -- Promotion ----------------------------------------------------------------


def is_promotion(piece: Piece, dest: Square) -> bool:
    return piece.kind == PieceType.PAWN and dest[0] == piece.color.promotion_row


def check_promotion_kind(kind: PieceType) -> PieceType:
    """Validate a promotion choice."""
    if kind not in PROMOTION_TYPES:
        raise ValueError(f"Cannot promote to {kind.name}")
    return kind
