"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from hotseat.core import MoveGenerator, Position, parse_square

    pos = Position()
    gen = MoveGenerator(pos)
    print(gen.legal_destinations(parse_square("g1")))
"""

from hotseat.core.attacks import is_in_check, is_square_attacked
from hotseat.core.board import Board
from hotseat.core.enums import (
    Color,
    MoveFlag,
    OutcomeKind,
    PieceType,
    TerminationKind,
)
from hotseat.core.fen import STARTING_FEN, position_from_fen
from hotseat.core.move import Move
from hotseat.core.move_generator import MoveGenerator
from hotseat.core.movement import is_pseudo_legal
from hotseat.core.piece import Piece
from hotseat.core.position import Position
from hotseat.core.rules import Rules, TerminationStatus
from hotseat.core.special import PROMOTION_TYPES
from hotseat.core.types import (
    Square,
    make_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "MoveFlag",
    "OutcomeKind",
    "PieceType",
    "TerminationKind",
    # Types / helpers
    "Square",
    "make_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    "TerminationStatus",
    # Rule functions
    "PROMOTION_TYPES",
    "is_in_check",
    "is_pseudo_legal",
    "is_square_attacked",
    # Setup
    "STARTING_FEN",
    "position_from_fen",
]
