"""Pseudo-legal movement patterns, one predicate per piece kind.

The predicates answer "does this piece's pattern reach that square on this
board" and nothing more: check, castling and en passant are layered on top
by :mod:`hotseat.core.special` and :mod:`hotseat.core.move_generator`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from hotseat.core.enums import PieceType
from hotseat.core.types import Square, is_on_board

if TYPE_CHECKING:
    from hotseat.core.board import Board
    from hotseat.core.piece import Piece

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

Predicate = Callable[["Piece", Square, "Board"], bool]


def _delta(piece: Piece, dest: Square) -> tuple[int, int]:
    return dest[0] - piece.square[0], dest[1] - piece.square[1]


def path_is_clear(origin: Square, dest: Square, board: Board) -> bool:
    """Every square strictly between *origin* and *dest* is empty.

    Only meaningful for squares sharing a row, column or diagonal.
    """
    dr = (dest[0] > origin[0]) - (dest[0] < origin[0])
    dc = (dest[1] > origin[1]) - (dest[1] < origin[1])
    row, col = origin[0] + dr, origin[1] + dc
    while (row, col) != dest:
        if not board.is_empty((row, col)):
            return False
        row += dr
        col += dc
    return True


def pawn_attack_squares(piece: Piece) -> list[Square]:
    """The two forward diagonals, whether or not anything stands there."""
    row = piece.square[0] + piece.color.forward
    return [
        (row, col)
        for col in (piece.square[1] - 1, piece.square[1] + 1)
        if is_on_board(row, col)
    ]


# -- Per-kind patterns --------------------------------------------------------


def _pawn(piece: Piece, dest: Square, board: Board) -> bool:
    dr, dc = _delta(piece, dest)
    step = piece.color.forward

    if dc == 0:
        if dr == step:
            return board.is_empty(dest)
        if dr == 2 * step:
            return (
                not piece.has_moved
                and piece.square[0] == piece.color.pawn_row
                and board.is_empty((piece.square[0] + step, dest[1]))
                and board.is_empty(dest)
            )
        return False

    if abs(dc) == 1 and dr == step:
        target = board[dest]
        return (
            target is not None
            and target.color != piece.color
            and target.kind != PieceType.KING
        )
    return False


def _knight(piece: Piece, dest: Square, board: Board) -> bool:
    return _delta(piece, dest) in KNIGHT_OFFSETS


def _king(piece: Piece, dest: Square, board: Board) -> bool:
    return _delta(piece, dest) in KING_OFFSETS


def _bishop(piece: Piece, dest: Square, board: Board) -> bool:
    dr, dc = _delta(piece, dest)
    return abs(dr) == abs(dc) and path_is_clear(piece.square, dest, board)


def _rook(piece: Piece, dest: Square, board: Board) -> bool:
    dr, dc = _delta(piece, dest)
    return (dr == 0 or dc == 0) and path_is_clear(piece.square, dest, board)


def _queen(piece: Piece, dest: Square, board: Board) -> bool:
    return _rook(piece, dest, board) or _bishop(piece, dest, board)


PATTERNS: dict[PieceType, Predicate] = {
    PieceType.PAWN: _pawn,
    PieceType.KNIGHT: _knight,
    PieceType.BISHOP: _bishop,
    PieceType.ROOK: _rook,
    PieceType.QUEEN: _queen,
    PieceType.KING: _king,
}


def reaches(piece: Piece, dest: Square, board: Board) -> bool:
    """Pattern and path test only, ignoring what stands on *dest*."""
    if dest == piece.square or not is_on_board(*dest):
        return False
    return PATTERNS[piece.kind](piece, dest, board)


def is_pseudo_legal(piece: Piece, dest: Square, board: Board) -> bool:
    """Whether *piece* may move to *dest* by its pattern alone."""
    if dest == piece.square or not is_on_board(*dest):
        return False
    target = board[dest]
    if target is not None and target.color == piece.color:
        return False
    return PATTERNS[piece.kind](piece, dest, board)
