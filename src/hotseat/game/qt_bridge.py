"""Qt bridge exposing the game controller through signals and slots."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from hotseat.core.enums import PieceType
from hotseat.core.rules import TerminationStatus
from hotseat.game.controller import GameController
from hotseat.game.interfaces import GameOptions, GamePhase
from hotseat.game.state import GameState, MoveRecord


class GameBridge(QObject):
    """GUI-thread adapter around a :class:`GameController`.

    A board widget calls the slots with plain ints and repaints from the
    signals; it never touches the rules engine directly.
    """

    move_applied = pyqtSignal(object)  # MoveOutcome
    move_rejected = pyqtSignal(int, int, int, int)
    promotion_requested = pyqtSignal(int, int)
    promotion_rejected = pyqtSignal(str)
    game_over = pyqtSignal(object)  # TerminationStatus
    phase_changed = pyqtSignal(int)
    status_changed = pyqtSignal(str)

    def __init__(
        self,
        controller: GameController | None = None,
        options: GameOptions | None = None,
    ) -> None:
        super().__init__()
        self._controller = controller or GameController(options)
        events = self._controller.events
        events.on_move.append(self._on_move)
        events.on_promotion_pending.append(self._on_promotion_pending)
        events.on_game_over.append(self._on_game_over)
        events.on_phase_changed.append(self._on_phase_changed)

    @property
    def controller(self) -> GameController:
        return self._controller

    # ── Slots ────────────────────────────────────────────────────────────

    @pyqtSlot(str)
    def new_game(self, fen: str = "") -> None:
        self._controller.new_game(fen or None)
        self.status_changed.emit(self._controller.status_text())

    @pyqtSlot(int, int, int, int)
    def attempt_move(
        self, from_row: int, from_col: int, to_row: int, to_col: int
    ) -> None:
        outcome = self._controller.attempt_move(
            (from_row, from_col), (to_row, to_col)
        )
        if outcome.accepted:
            self.move_applied.emit(outcome)
        else:
            self.move_rejected.emit(from_row, from_col, to_row, to_col)

    @pyqtSlot(int)
    def resolve_promotion(self, kind: int) -> None:
        try:
            outcome = self._controller.resolve_promotion(PieceType(kind))
        except ValueError as exc:
            self.promotion_rejected.emit(str(exc))
            return
        if outcome.accepted:
            self.move_applied.emit(outcome)

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_move(self, _record: MoveRecord, _state: GameState) -> None:
        self.status_changed.emit(self._controller.status_text())

    def _on_promotion_pending(self, sq: tuple[int, int]) -> None:
        self.promotion_requested.emit(sq[0], sq[1])

    def _on_game_over(self, status: TerminationStatus) -> None:
        self.game_over.emit(status)

    def _on_phase_changed(self, phase: GamePhase) -> None:
        self.phase_changed.emit(int(phase))

