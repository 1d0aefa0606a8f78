"""FEN parsing for setting up custom start positions."""

from __future__ import annotations

from hotseat.core.board import Board
from hotseat.core.enums import Color, PieceType
from hotseat.core.piece import Piece
from hotseat.core.position import Position
from hotseat.core.types import Square, parse_square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# castling letter -> (color, rook column)
_CASTLING_FIELDS: dict[str, tuple[Color, int]] = {
    "K": (Color.WHITE, 7),
    "Q": (Color.WHITE, 0),
    "k": (Color.BLACK, 7),
    "q": (Color.BLACK, 0),
}


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    FEN carries no per-piece history, so ``has_moved`` is derived: kings
    and rooks count as unmoved only when a castling right names them, pawns
    when they stand on their starting row.
    """
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement; the first FEN rank is row 0.
    rows = placement.split("/")
    if len(rows) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for row, row_text in enumerate(rows):
        col = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board.place(Piece.from_char(ch, (row, col)))
                col += 1
            if col > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling → has_moved flags
    unmoved: set[Square] = set()
    if castling_part != "-":
        seen: set[str] = set()
        for ch in castling_part:
            if ch not in _CASTLING_FIELDS or ch in seen:
                raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
            color, rook_col = _CASTLING_FIELDS[ch]
            unmoved.add((color.home_row, 4))
            unmoved.add((color.home_row, rook_col))

    for piece in board:
        if piece.kind == PieceType.PAWN:
            piece.has_moved = piece.square[0] != piece.color.pawn_row
        elif piece.kind in (PieceType.KING, PieceType.ROOK):
            piece.has_moved = piece.square not in unmoved

    for color in Color:
        kings = len(board.pieces(color, PieceType.KING))
        if kings != 1:
            raise ValueError(
                f"Invalid FEN (need exactly one {color.name} king, found {kings}): {fen!r}"
            )

    # 5–6. Clocks (optional)
    if len(parts) > 4:
        halfmove = int(parts[4])
        if halfmove < 0:
            raise ValueError(f"Invalid FEN halfmove clock: {parts[4]!r}")
    else:
        halfmove = 0

    if len(parts) > 5:
        fullmove = int(parts[5])
        if fullmove < 1:
            raise ValueError(f"Invalid FEN fullmove number: {parts[5]!r}")
    else:
        fullmove = 1

    move_count = (fullmove - 1) * 2 + (1 if side == Color.BLACK else 0)

    # 4. En passant: FEN names the skipped square, we track the pawn itself.
    target: Square | None = None
    if ep_part != "-":
        skipped = parse_square(ep_part)
        mover = side.opposite
        expected_row = mover.pawn_row + mover.forward
        if skipped[0] != expected_row:
            raise ValueError(f"Invalid FEN en-passant square: {ep_part!r}")
        target = (skipped[0] + mover.forward, skipped[1])
        pawn = board[target]
        if pawn is None or pawn.kind != PieceType.PAWN or pawn.color != mover:
            raise ValueError(f"No pawn to capture en passant: {ep_part!r}")
        if move_count < 1:
            raise ValueError(f"Invalid FEN en-passant square: {ep_part!r}")
        pawn.last_double_step = move_count - 1

    return Position(board, side, move_count, halfmove, target)
