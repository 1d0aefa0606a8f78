"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a pawn step (White moves up the board)."""
        return -1 if self == Color.WHITE else 1

    @property
    def home_row(self) -> int:
        """Back-rank row for this side."""
        return 7 if self == Color.WHITE else 0

    @property
    def pawn_row(self) -> int:
        return 6 if self == Color.WHITE else 1

    @property
    def promotion_row(self) -> int:
        return 0 if self == Color.WHITE else 7

    def __str__(self) -> str:
        return self.name.capitalize()


class PieceType(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.capitalize()


class MoveFlag(IntEnum):
    """Special move classification."""

    NORMAL = 0
    DOUBLE_PAWN = 1
    EN_PASSANT = 2
    CASTLE_KINGSIDE = 3
    CASTLE_QUEENSIDE = 4
    PROMOTION = 5


class OutcomeKind(IntEnum):
    """Result of a move attempt as reported to the UI."""

    REJECTED = 0
    MOVED = 1
    MOVED_WITH_CAPTURE = 2
    CASTLED = 3
    EN_PASSANT = 4
    PROMOTION_PENDING = 5


class TerminationKind(IntEnum):
    """Why (and whether) a game has ended."""

    NONE = 0
    CHECKMATE = 1
    STALEMATE = 2
    INSUFFICIENT_MATERIAL = 3
    FIFTY_MOVE_DRAW = 4
