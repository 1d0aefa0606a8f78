"""High-level chess rules: checkmate, stalemate, draw detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from hotseat.core.enums import Color, PieceType, TerminationKind
from hotseat.core.move_generator import MoveGenerator
from hotseat.core.types import square_shade

if TYPE_CHECKING:
    from hotseat.core.position import Position

FIFTY_MOVE_HALFMOVES = 100


@dataclass(frozen=True, slots=True)
class TerminationStatus:
    """How the game stands; ``mated`` is only set for checkmate."""

    kind: TerminationKind = TerminationKind.NONE
    mated: Color | None = None

    @property
    def is_over(self) -> bool:
        return self.kind != TerminationKind.NONE

    @property
    def is_draw(self) -> bool:
        return self.is_over and self.kind != TerminationKind.CHECKMATE

    @property
    def winner(self) -> Color | None:
        return self.mated.opposite if self.mated is not None else None

    def __str__(self) -> str:
        if self.kind == TerminationKind.CHECKMATE:
            return f"Checkmate({self.mated})"
        return self.kind.name.replace("_", " ").title().replace(" ", "")


IN_PROGRESS = TerminationStatus()


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def is_in_check(position: Position, color: Color | None = None) -> bool:
        gen = MoveGenerator(position)
        return gen.is_in_check(position.side_to_move if color is None else color)

    @staticmethod
    def is_checkmate(position: Position, color: Color | None = None) -> bool:
        color = position.side_to_move if color is None else color
        gen = MoveGenerator(position)
        return gen.is_in_check(color) and not gen.has_any_legal_move(color)

    @staticmethod
    def is_stalemate(position: Position, color: Color | None = None) -> bool:
        color = position.side_to_move if color is None else color
        gen = MoveGenerator(position)
        return not gen.is_in_check(color) and not gen.has_any_legal_move(color)

    @staticmethod
    def is_insufficient_material(position: Position) -> bool:
        """K vs K, a single minor, two knights, or two same-shade bishops."""
        pieces = list(position.board)
        if any(
            p.kind in (PieceType.PAWN, PieceType.ROOK, PieceType.QUEEN)
            for p in pieces
        ):
            return False

        knights = [p for p in pieces if p.kind == PieceType.KNIGHT]
        bishops = [p for p in pieces if p.kind == PieceType.BISHOP]
        minors = len(knights) + len(bishops)

        if minors <= 1:
            return True
        if len(knights) == 2 and not bishops:
            return True
        if len(bishops) == 2 and not knights:
            return square_shade(bishops[0].square) == square_shade(bishops[1].square)
        return False

    @staticmethod
    def is_fifty_move_rule(
        position: Position, limit: int = FIFTY_MOVE_HALFMOVES
    ) -> bool:
        return position.halfmove_clock >= limit  # 100 half-moves = 50 full moves

    @staticmethod
    def termination(
        position: Position, fifty_move_limit: int = FIFTY_MOVE_HALFMOVES
    ) -> TerminationStatus:
        """Evaluate game end for the side to move, first match wins."""
        color = position.side_to_move
        gen = MoveGenerator(position)
        in_check = gen.is_in_check(color)
        if not gen.has_any_legal_move(color):
            if in_check:
                return TerminationStatus(TerminationKind.CHECKMATE, color)
            return TerminationStatus(TerminationKind.STALEMATE)

        if Rules.is_insufficient_material(position):
            return TerminationStatus(TerminationKind.INSUFFICIENT_MATERIAL)

        if Rules.is_fifty_move_rule(position, fifty_move_limit):
            return TerminationStatus(TerminationKind.FIFTY_MOVE_DRAW)

        return IN_PROGRESS
