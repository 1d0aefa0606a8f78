"""Game management layer — controller, state machine, click selection.

Quick start::

    from hotseat.game import GameController
    from hotseat.core import parse_square

    ctrl = GameController()
    ctrl.new_game()
    ctrl.attempt_move(parse_square("e2"), parse_square("e4"))

The Qt adapter lives in :mod:`hotseat.game.qt_bridge` and is imported
separately so the rest of the layer stays GUI-free.
"""

from hotseat.game.controller import GameController, GameEvents
from hotseat.game.interfaces import (
    GameOptions,
    GamePhase,
    IGameController,
    MoveOutcome,
    PieceSnapshot,
)
from hotseat.game.selection import SquareSelector
from hotseat.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GameOptions",
    "GamePhase",
    "IGameController",
    "MoveOutcome",
    "PieceSnapshot",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
    "SquareSelector",
]
