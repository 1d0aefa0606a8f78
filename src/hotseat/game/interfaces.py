"""Value types and abstract interfaces for the game layer.

The UI collaborator depends on :class:`IGameController` and the value
objects here, never on the core position internals.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from hotseat.core.enums import Color, OutcomeKind, PieceType
from hotseat.core.fen import STARTING_FEN
from hotseat.core.special import PROMOTION_TYPES

if TYPE_CHECKING:
    from hotseat.core.move import Move
    from hotseat.core.rules import TerminationStatus
    from hotseat.core.types import Square


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    AWAITING_PROMOTION = auto()
    GAME_OVER = auto()


# ── Options ──────────────────────────────────────────────────────────────────


@dataclass(slots=True, frozen=True)
class GameOptions:
    """Per-game settings.

    Args:
        auto_promotion: Resolve every promotion to this kind immediately
            instead of waiting for a choice.
        fifty_move_limit: Half-moves without pawn move or capture that end
            the game in a draw.
        start_fen: Layout used by ``new_game`` when no FEN is passed.
    """

    auto_promotion: PieceType | None = None
    fifty_move_limit: int = 100
    start_fen: str = STARTING_FEN

    def __post_init__(self) -> None:
        if self.auto_promotion is not None and self.auto_promotion not in PROMOTION_TYPES:
            raise ValueError(f"Cannot promote to {self.auto_promotion.name}")
        if self.fifty_move_limit < 1:
            raise ValueError(f"Invalid fifty-move limit: {self.fifty_move_limit}")


# ── Boundary values ──────────────────────────────────────────────────────────


@dataclass(slots=True, frozen=True)
class MoveOutcome:
    """What happened to a move attempt.

    ``promotion_square`` is set while a pawn on that square waits for its
    promotion choice.
    """

    kind: OutcomeKind
    move: Move | None = None
    promotion_square: Square | None = None

    @property
    def accepted(self) -> bool:
        return self.kind != OutcomeKind.REJECTED


REJECTED = MoveOutcome(OutcomeKind.REJECTED)


@dataclass(slots=True, frozen=True)
class PieceSnapshot:
    """Read-only view of one piece for rendering."""

    kind: PieceType
    color: Color
    square: Square
    has_moved: bool


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, fen: str | None = None) -> None:
        """Set up a new game, discarding the current one."""

    @abstractmethod
    def attempt_move(self, from_sq: Square, to_sq: Square) -> MoveOutcome:
        """Try to move the piece on *from_sq* to *to_sq*."""

    @abstractmethod
    def resolve_promotion(self, kind: PieceType) -> MoveOutcome:
        """Supply the piece for a pending promotion."""

    @abstractmethod
    def current_board(self) -> tuple[PieceSnapshot, ...]:
        """Snapshot of every piece on the board."""

    @abstractmethod
    def legal_destinations(self, sq: Square) -> set[Square]:
        """Move hints for the piece on *sq*."""

    @abstractmethod
    def termination_status(self) -> TerminationStatus:
        """Current game-end status."""
