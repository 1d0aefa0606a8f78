"""Position — complete game state (board + metadata) and the move executor."""

from __future__ import annotations

from hotseat.core.board import Board
from hotseat.core.enums import Color, MoveFlag, PieceType
from hotseat.core.move import Move
from hotseat.core.piece import Piece
from hotseat.core.special import (
    castle_rook_squares,
    check_promotion_kind,
    en_passant_victim,
)
from hotseat.core.types import Square


class Position:
    """Full chess position: board + side to move + counters + en passant.

    ``move_count`` counts completed half-moves.  ``halfmove_clock`` counts
    half-moves since the last pawn move or capture.  ``en_passant_target``
    is the square of the single pawn that may currently be taken en passant.

    A pawn that reaches the last rank without a chosen piece leaves the
    position in a pending-promotion state: the turn does not pass until
    :meth:`finish_promotion` is called.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "move_count",
        "halfmove_clock",
        "en_passant_target",
        "pending_promotion",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        move_count: int = 0,
        halfmove_clock: int = 0,
        en_passant_target: Square | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.move_count = move_count
        self.halfmove_clock = halfmove_clock
        self.en_passant_target = en_passant_target
        self.pending_promotion: Square | None = None

    # ── Core move operations ─────────────────────────────────────────────

    def make_move(self, move: Move) -> Piece | None:
        """Apply an already classified *move* and return the captured piece.

        Caller is responsible for legality check.
        """
        if self.pending_promotion is not None:
            raise ValueError("A promotion choice is still pending")

        board = self.board
        piece = board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        capture_sq = move.to_sq
        if move.flag == MoveFlag.EN_PASSANT:
            capture_sq = en_passant_victim(move.from_sq, move.to_sq)
        captured = board[capture_sq]
        if captured is not None:
            if captured.color == piece.color or captured.kind == PieceType.KING:
                raise ValueError(f"Illegal capture on {capture_sq}")
            board.remove(capture_sq)

        # Only the move that created the target may consume it.
        self.en_passant_target = None

        board.relocate(move.from_sq, move.to_sq)
        piece.has_moved = True

        if move.is_castle:
            rook_from, rook_to = castle_rook_squares(move.from_sq, move.flag)
            rook = board.relocate(rook_from, rook_to)
            rook.has_moved = True

        if move.flag == MoveFlag.DOUBLE_PAWN:
            piece.last_double_step = self.move_count
            self.en_passant_target = move.to_sq

        if piece.kind == PieceType.PAWN or captured is not None:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        if move.flag == MoveFlag.PROMOTION:
            self.pending_promotion = move.to_sq
            if move.promotion is not None:
                self.finish_promotion(move.promotion)
            return captured

        self._end_turn()
        return captured

    def finish_promotion(self, kind: PieceType) -> Piece:
        """Swap the pending pawn for a new *kind* piece and pass the turn."""
        sq = self.pending_promotion
        if sq is None:
            raise ValueError("No promotion is pending")
        check_promotion_kind(kind)

        pawn = self.board.remove(sq)
        promoted = Piece(kind, pawn.color, sq)
        self.board.place(promoted)
        self.pending_promotion = None
        self._end_turn()
        return promoted

    def _end_turn(self) -> None:
        self.move_count += 1
        self.side_to_move = self.side_to_move.opposite

    # ── Utilities ────────────────────────────────────────────────────────

    @property
    def fullmove_number(self) -> int:
        """Full-move number for display, starting at 1."""
        return self.move_count // 2 + 1

    def copy(self) -> Position:
        """Independent scratch copy for simulation."""
        pos = Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            move_count=self.move_count,
            halfmove_clock=self.halfmove_clock,
            en_passant_target=self.en_passant_target,
        )
        pos.pending_promotion = self.pending_promotion
        return pos

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.move_count == other.move_count
            and self.halfmove_clock == other.halfmove_clock
            and self.en_passant_target == other.en_passant_target
            and self.pending_promotion == other.pending_promotion
        )

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.side_to_move} to move, half-move {self.move_count}"
