"""Click-driven piece selection on top of the controller."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hotseat.game.interfaces import GamePhase, MoveOutcome

if TYPE_CHECKING:
    from hotseat.core.types import Square
    from hotseat.game.controller import GameController


class SquareSelector:
    """Turns a stream of square clicks into move attempts.

    The first click picks up a piece of the side to move; a second click on
    another own piece switches the selection, on the same square drops it,
    and anywhere else attempts the move.  The selection is cleared after
    every attempt, accepted or not.
    """

    __slots__ = ("_controller", "_selected", "_hints")

    def __init__(self, controller: GameController) -> None:
        self._controller = controller
        self._selected: Square | None = None
        self._hints: set[Square] = set()

    @property
    def selected(self) -> Square | None:
        return self._selected

    @property
    def hints(self) -> set[Square]:
        """Legal destinations of the selected piece."""
        return set(self._hints)

    def clear(self) -> None:
        self._selected = None
        self._hints = set()

    def click(self, sq: Square) -> MoveOutcome | None:
        """Handle a click on *sq*; returns the outcome when a move was tried."""
        if self._controller.phase != GamePhase.AWAITING_MOVE:
            self.clear()
            return None

        if sq == self._selected:
            self.clear()
            return None

        piece = self._controller.state.position.board[sq]
        if piece is not None and piece.color == self._controller.side_to_move:
            self._selected = sq
            self._hints = self._controller.legal_destinations(sq)
            return None

        if self._selected is None:
            return None

        origin = self._selected
        self.clear()
        return self._controller.attempt_move(origin, sq)
