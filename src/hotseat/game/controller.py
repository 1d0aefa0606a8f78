"""GameController — the boundary between the rules engine and the UI.

Coordinates: GameState, MoveGenerator, Rules.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from hotseat.core.enums import Color, OutcomeKind, PieceType, TerminationKind
from hotseat.core.move_generator import MoveGenerator
from hotseat.core.rules import Rules, TerminationStatus
from hotseat.core.special import check_promotion_kind
from hotseat.core.types import Square, square_name
from hotseat.game.interfaces import (
    REJECTED,
    GameOptions,
    GamePhase,
    IGameController,
    MoveOutcome,
    PieceSnapshot,
)
from hotseat.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

_DRAW_REASONS: dict[TerminationKind, str] = {
    TerminationKind.STALEMATE: "stalemate",
    TerminationKind.INSUFFICIENT_MATERIAL: "insufficient material",
    TerminationKind.FIFTY_MOVE_DRAW: "the fifty-move rule",
}

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
PromotionCallback = Callable[[Square], None]
GameOverCallback = Callable[[TerminationStatus], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_promotion_pending: list[PromotionCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Runs a same-screen game between two humans: validates moves,
    switches turns, pauses for promotion choices, notifies listeners.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).
    """

    __slots__ = ("_options", "_state", "events")

    def __init__(self, options: GameOptions | None = None) -> None:
        self._options = options or GameOptions()
        self._state = GameState(self._options)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def options(self) -> GameOptions:
        return self._options

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def side_to_move(self) -> Color:
        return self._state.side_to_move

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, fen: str | None = None) -> None:
        self._state = GameState(self._options)
        self._state.setup(fen)
        _LOGGER.info("New game started from %s", self._state.start_fen)

        self._emit_phase(self._state.phase)
        if self._state.is_game_over:
            self._emit_game_over(self._state.termination)

    def attempt_move(self, from_sq: Square, to_sq: Square) -> MoveOutcome:
        if self._state.phase != GamePhase.AWAITING_MOVE:
            _LOGGER.debug("Move ignored in phase %s", self._state.phase.name)
            return REJECTED

        position = self._state.position
        piece = position.board[from_sq]
        if piece is None or piece.color != position.side_to_move:
            _LOGGER.debug(
                "No %s piece on %s", position.side_to_move, square_name(from_sq)
            )
            return REJECTED

        move = MoveGenerator(position).legal_move(from_sq, to_sq)
        if move is None:
            _LOGGER.debug(
                "Rejected %s %s → %s",
                piece.kind,
                square_name(from_sq),
                square_name(to_sq),
            )
            return REJECTED

        record = self._state.apply_move(move)
        self._emit_move(record)

        if record.outcome == OutcomeKind.PROMOTION_PENDING:
            _LOGGER.debug("Awaiting promotion choice on %s", square_name(to_sq))
            self._emit_phase(GamePhase.AWAITING_PROMOTION)
            for cb in self.events.on_promotion_pending:
                cb(to_sq)
            return MoveOutcome(record.outcome, record.move, to_sq)

        self._after_turn()
        return MoveOutcome(record.outcome, record.move)

    def resolve_promotion(self, kind: PieceType) -> MoveOutcome:
        check_promotion_kind(kind)
        if self._state.phase != GamePhase.AWAITING_PROMOTION:
            _LOGGER.debug("No promotion pending; %s ignored", kind)
            return REJECTED

        record = self._state.complete_promotion(kind)
        _LOGGER.debug("Promoted to %s on %s", kind, square_name(record.move.to_sq))
        self._emit_move(record)
        self._after_turn()
        return MoveOutcome(record.outcome, record.move)

    def current_board(self) -> tuple[PieceSnapshot, ...]:
        return tuple(
            PieceSnapshot(p.kind, p.color, p.square, p.has_moved)
            for p in self._state.position.board
        )

    def legal_destinations(self, sq: Square) -> set[Square]:
        if self._state.phase != GamePhase.AWAITING_MOVE:
            return set()
        piece = self._state.position.board[sq]
        if piece is None or piece.color != self._state.side_to_move:
            return set()
        return MoveGenerator(self._state.position).legal_destinations(sq)

    def termination_status(self) -> TerminationStatus:
        return self._state.termination

    # ── Queries ──────────────────────────────────────────────────────────

    def is_in_check(self, color: Color) -> bool:
        return Rules.is_in_check(self._state.position, color)

    def status_text(self) -> str:
        """One-line status for the on-screen overlay."""
        state = self._state
        status = state.termination
        if status.is_over:
            if status.winner is not None:
                return f"Checkmate! {status.winner} wins"
            return f"Draw by {_DRAW_REASONS[status.kind]}"

        text = f"{state.side_to_move}'s Turn"
        if state.phase == GamePhase.AWAITING_PROMOTION:
            text += " (choose promotion)"
        elif self.is_in_check(state.side_to_move):
            text += " (check)"
        return f"{text} | Move: {state.position.move_count}"

    # ── Internal helpers ─────────────────────────────────────────────────

    def _after_turn(self) -> None:
        if self._state.is_game_over:
            self._emit_game_over(self._state.termination)
            return
        self._emit_phase(GamePhase.AWAITING_MOVE)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self, status: TerminationStatus) -> None:
        _LOGGER.info("Game over: %s", status)
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(status)

    def _emit_phase(self, phase: GamePhase) -> None:
        _LOGGER.debug("Phase → %s", phase.name)
        for cb in self.events.on_phase_changed:
            cb(phase)
