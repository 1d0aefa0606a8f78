"""Game state machine — tracks phase transitions and move history."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from hotseat.core.enums import Color, MoveFlag, OutcomeKind, PieceType
from hotseat.core.fen import position_from_fen
from hotseat.core.move import Move
from hotseat.core.move_generator import MoveGenerator
from hotseat.core.position import Position
from hotseat.core.rules import IN_PROGRESS, Rules, TerminationStatus
from hotseat.game.interfaces import GameOptions, GamePhase

_FLAG_OUTCOMES: dict[MoveFlag, OutcomeKind] = {
    MoveFlag.CASTLE_KINGSIDE: OutcomeKind.CASTLED,
    MoveFlag.CASTLE_QUEENSIDE: OutcomeKind.CASTLED,
    MoveFlag.EN_PASSANT: OutcomeKind.EN_PASSANT,
}


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    mover: Color
    outcome: OutcomeKind
    captured: PieceType | None = None
    was_check: bool = False


@dataclass
class GameState:
    """Manages game lifecycle: phase, termination, move history.

    Pure data and logic; no threading or UI.
    """

    options: GameOptions = field(default_factory=GameOptions)
    position: Position = field(default_factory=Position, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    termination: TerminationStatus = field(default=IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    start_fen: str = field(default="", init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game."""
        self.start_fen = fen or self.options.start_fen
        self.position = position_from_fen(self.start_fen)
        self.phase = GamePhase.AWAITING_MOVE
        self.termination = IN_PROGRESS
        self.move_history.clear()
        # A custom layout may already be decided.
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply a validated move and return the history record.

        Caller is responsible for legality check.
        """
        if move.flag == MoveFlag.PROMOTION and self.options.auto_promotion is not None:
            move = replace(move, promotion=self.options.auto_promotion)

        mover = self.position.side_to_move
        captured = self.position.make_move(move)

        if self.position.pending_promotion is not None:
            outcome = OutcomeKind.PROMOTION_PENDING
        elif move.flag in _FLAG_OUTCOMES:
            outcome = _FLAG_OUTCOMES[move.flag]
        elif captured is not None:
            outcome = OutcomeKind.MOVED_WITH_CAPTURE
        else:
            outcome = OutcomeKind.MOVED

        record = MoveRecord(
            move=move,
            mover=mover,
            outcome=outcome,
            captured=captured.kind if captured is not None else None,
        )
        self.move_history.append(record)

        if outcome == OutcomeKind.PROMOTION_PENDING:
            self.phase = GamePhase.AWAITING_PROMOTION
            return record

        self._finish_turn(record)
        return record

    def complete_promotion(self, kind: PieceType) -> MoveRecord:
        """Resolve the pending promotion recorded as the last move."""
        if self.phase != GamePhase.AWAITING_PROMOTION:
            raise ValueError("No promotion is pending")
        self.position.finish_promotion(kind)

        record = self.move_history[-1]
        record.move = replace(record.move, promotion=kind)
        record.outcome = (
            OutcomeKind.MOVED_WITH_CAPTURE
            if record.captured is not None
            else OutcomeKind.MOVED
        )
        self.phase = GamePhase.AWAITING_MOVE
        self._finish_turn(record)
        return record

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of completed half-moves in this game."""
        return sum(
            1 for r in self.move_history if r.outcome != OutcomeKind.PROMOTION_PENDING
        )

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        gen = MoveGenerator(self.position)
        return gen.generate_legal_moves()

    # ── Internal ─────────────────────────────────────────────────────────

    def _finish_turn(self, record: MoveRecord) -> None:
        record.was_check = Rules.is_in_check(self.position)
        self._check_game_over()

    def _check_game_over(self) -> None:
        status = Rules.termination(self.position, self.options.fifty_move_limit)
        if status.is_over:
            self.termination = status
            self.phase = GamePhase.GAME_OVER
