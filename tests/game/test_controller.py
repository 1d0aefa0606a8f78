"""Tests for GameController — the boundary the UI talks to."""

import logging

import pytest

from hotseat.core.enums import Color, OutcomeKind, PieceType, TerminationKind
from hotseat.core.rules import TerminationStatus
from hotseat.core.types import E1, E2, E4, E8, F1, G1, H1, parse_square
from hotseat.game.controller import GameController
from hotseat.game.interfaces import GameOptions, GamePhase

PROMOTION_FEN = "8/4P3/8/8/8/8/k7/4K3 w - - 0 1"
CASTLING_FEN = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"


def _sq(name: str) -> tuple[int, int]:
    return parse_square(name)


def _play(ctrl: GameController, *moves: str) -> None:
    for text in moves:
        outcome = ctrl.attempt_move(_sq(text[:2]), _sq(text[2:]))
        assert outcome.accepted, f"{text} was rejected"


class TestNewGame:
    def test_phase_awaiting(self, ctrl: GameController) -> None:
        assert ctrl.phase == GamePhase.AWAITING_MOVE
        assert ctrl.side_to_move == Color.WHITE

    def test_before_start_everything_is_rejected(self) -> None:
        ctrl = GameController()
        assert ctrl.phase == GamePhase.NOT_STARTED
        assert not ctrl.attempt_move(E2, E4).accepted

    def test_custom_fen(self) -> None:
        ctrl = GameController()
        ctrl.new_game("rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1")
        assert ctrl.side_to_move == Color.BLACK

    def test_bad_fen_raises(self) -> None:
        with pytest.raises(ValueError):
            GameController().new_game("not a fen")

    def test_new_game_discards_history(self, ctrl: GameController) -> None:
        _play(ctrl, "e2e4")
        ctrl.new_game()
        assert ctrl.state.move_history == []
        assert ctrl.side_to_move == Color.WHITE

    def test_logs_start(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="hotseat.game.controller"):
            GameController().new_game()
        assert "New game started" in caplog.text


class TestAttemptMove:
    def test_e2_e4(self, ctrl: GameController) -> None:
        outcome = ctrl.attempt_move(E2, E4)
        assert outcome.kind == OutcomeKind.MOVED
        assert ctrl.state.position.halfmove_clock == 0
        assert ctrl.side_to_move == Color.BLACK
        assert ctrl.phase == GamePhase.AWAITING_MOVE

    def test_illegal_move_rejected(self, ctrl: GameController) -> None:
        before = ctrl.state.position.copy()
        outcome = ctrl.attempt_move(E2, _sq("e5"))
        assert outcome.kind == OutcomeKind.REJECTED
        assert ctrl.state.position == before

    def test_empty_origin_rejected(self, ctrl: GameController) -> None:
        assert not ctrl.attempt_move(E4, _sq("e5")).accepted

    def test_wrong_side_rejected(self, ctrl: GameController) -> None:
        assert not ctrl.attempt_move(_sq("e7"), _sq("e5")).accepted
        assert ctrl.side_to_move == Color.WHITE

    def test_capture_outcome(self, ctrl: GameController) -> None:
        _play(ctrl, "e2e4", "d7d5")
        outcome = ctrl.attempt_move(E4, _sq("d5"))
        assert outcome.kind == OutcomeKind.MOVED_WITH_CAPTURE

    def test_castling(self) -> None:
        ctrl = GameController()
        ctrl.new_game(CASTLING_FEN)
        outcome = ctrl.attempt_move(E1, G1)
        assert outcome.kind == OutcomeKind.CASTLED
        board = ctrl.state.position.board
        assert board[F1].kind == PieceType.ROOK  # type: ignore[union-attr]
        assert board[H1] is None

    def test_en_passant(self, ctrl: GameController) -> None:
        _play(ctrl, "e2e4", "a7a6", "e4e5", "d7d5")
        outcome = ctrl.attempt_move(_sq("e5"), _sq("d6"))
        assert outcome.kind == OutcomeKind.EN_PASSANT
        assert ctrl.state.position.board[_sq("d5")] is None


class TestPromotion:
    def test_pending_flow(self) -> None:
        ctrl = GameController()
        ctrl.new_game("8/4P2p/8/8/8/8/k7/4K3 w - - 0 1")
        outcome = ctrl.attempt_move(_sq("e7"), E8)
        assert outcome.kind == OutcomeKind.PROMOTION_PENDING
        assert outcome.promotion_square == E8
        assert ctrl.phase == GamePhase.AWAITING_PROMOTION

        # Nothing else may move until the choice is made.
        assert not ctrl.attempt_move(E1, _sq("d1")).accepted
        assert ctrl.legal_destinations(E1) == set()

        outcome = ctrl.resolve_promotion(PieceType.KNIGHT)
        assert outcome.kind == OutcomeKind.MOVED
        assert outcome.move is not None and outcome.move.promotion == PieceType.KNIGHT
        assert ctrl.state.position.board[E8].kind == PieceType.KNIGHT  # type: ignore[union-attr]
        assert ctrl.side_to_move == Color.BLACK
        assert ctrl.phase == GamePhase.AWAITING_MOVE

    def test_capture_promotion(self) -> None:
        ctrl = GameController()
        ctrl.new_game("3r4/4P3/8/8/8/8/k7/4K3 w - - 5 1")
        outcome = ctrl.attempt_move(_sq("e7"), _sq("d8"))
        assert outcome.kind == OutcomeKind.PROMOTION_PENDING
        assert ctrl.state.position.halfmove_clock == 0

        outcome = ctrl.resolve_promotion(PieceType.QUEEN)
        assert outcome.kind == OutcomeKind.MOVED_WITH_CAPTURE
        record = ctrl.state.move_history[-1]
        assert record.captured == PieceType.ROOK
        assert record.outcome == OutcomeKind.MOVED_WITH_CAPTURE
        assert ctrl.phase == GamePhase.AWAITING_MOVE

    def test_knight_promotion_can_end_the_game(self) -> None:
        ctrl = GameController()
        ctrl.new_game(PROMOTION_FEN)
        ctrl.attempt_move(_sq("e7"), E8)
        ctrl.resolve_promotion(PieceType.KNIGHT)
        assert ctrl.phase == GamePhase.GAME_OVER
        assert ctrl.termination_status().kind == TerminationKind.INSUFFICIENT_MATERIAL

    def test_invalid_kind_raises(self) -> None:
        ctrl = GameController()
        ctrl.new_game(PROMOTION_FEN)
        ctrl.attempt_move(_sq("e7"), E8)
        with pytest.raises(ValueError, match="Cannot promote"):
            ctrl.resolve_promotion(PieceType.KING)
        assert ctrl.phase == GamePhase.AWAITING_PROMOTION

    def test_resolve_without_pending_is_rejected(self, ctrl: GameController) -> None:
        assert ctrl.resolve_promotion(PieceType.QUEEN).kind == OutcomeKind.REJECTED

    def test_auto_promotion(self) -> None:
        ctrl = GameController(GameOptions(auto_promotion=PieceType.QUEEN))
        ctrl.new_game(PROMOTION_FEN)
        outcome = ctrl.attempt_move(_sq("e7"), E8)
        assert outcome.kind == OutcomeKind.MOVED
        assert ctrl.state.position.board[E8].kind == PieceType.QUEEN  # type: ignore[union-attr]


class TestGameOver:
    def test_fools_mate(self, ctrl: GameController) -> None:
        _play(ctrl, "f2f3", "e7e5", "g2g4", "d8h4")
        assert ctrl.phase == GamePhase.GAME_OVER
        status = ctrl.termination_status()
        assert status.kind == TerminationKind.CHECKMATE
        assert status.winner == Color.BLACK

    def test_moves_rejected_after_game_over(self, ctrl: GameController) -> None:
        _play(ctrl, "f2f3", "e7e5", "g2g4", "d8h4")
        assert not ctrl.attempt_move(_sq("a2"), _sq("a3")).accepted
        assert ctrl.legal_destinations(_sq("a2")) == set()

    def test_capture_into_insufficient_material(self) -> None:
        ctrl = GameController()
        ctrl.new_game("4k3/8/8/8/8/8/3r4/4K3 w - - 0 1")
        _play(ctrl, "e1d2")
        assert ctrl.termination_status().kind == TerminationKind.INSUFFICIENT_MATERIAL


class TestQueries:
    def test_current_board_snapshot(self, ctrl: GameController) -> None:
        board = ctrl.current_board()
        assert len(board) == 32
        kings = [p for p in board if p.kind == PieceType.KING]
        assert {k.square for k in kings} == {E1, E8}

    def test_legal_destinations_for_side_to_move(self, ctrl: GameController) -> None:
        assert ctrl.legal_destinations(E2) == {_sq("e3"), E4}
        assert ctrl.legal_destinations(_sq("e7")) == set()
        assert ctrl.legal_destinations(E4) == set()

    def test_is_in_check(self, ctrl: GameController) -> None:
        _play(ctrl, "e2e4", "f7f6", "d1h5")
        assert ctrl.is_in_check(Color.BLACK)
        assert not ctrl.is_in_check(Color.WHITE)


class TestStatusText:
    def test_turn_and_move(self, ctrl: GameController) -> None:
        assert ctrl.status_text() == "White's Turn | Move: 0"
        _play(ctrl, "e2e4")
        assert ctrl.status_text() == "Black's Turn | Move: 1"

    def test_check(self, ctrl: GameController) -> None:
        _play(ctrl, "e2e4", "f7f6", "d1h5")
        assert ctrl.status_text() == "Black's Turn (check) | Move: 3"

    def test_promotion(self) -> None:
        ctrl = GameController()
        ctrl.new_game(PROMOTION_FEN)
        ctrl.attempt_move(_sq("e7"), E8)
        assert "(choose promotion)" in ctrl.status_text()

    def test_checkmate(self, ctrl: GameController) -> None:
        _play(ctrl, "f2f3", "e7e5", "g2g4", "d8h4")
        assert ctrl.status_text() == "Checkmate! Black wins"

    def test_draw(self) -> None:
        ctrl = GameController()
        ctrl.new_game("7k/5Q2/6K1/8/8/8/8/8 b - - 0 1")
        assert ctrl.status_text() == "Draw by stalemate"


class TestEvents:
    def test_move_event(self, ctrl: GameController) -> None:
        seen: list[OutcomeKind] = []
        ctrl.events.on_move.append(lambda rec, _st: seen.append(rec.outcome))
        ctrl.attempt_move(E2, E4)
        assert seen == [OutcomeKind.MOVED]

    def test_rejected_move_is_silent(self, ctrl: GameController) -> None:
        seen: list[object] = []
        ctrl.events.on_move.append(lambda rec, _st: seen.append(rec))
        ctrl.attempt_move(E2, _sq("e5"))
        assert seen == []

    def test_promotion_events(self) -> None:
        ctrl = GameController()
        ctrl.new_game(PROMOTION_FEN)
        squares: list[tuple[int, int]] = []
        phases: list[GamePhase] = []
        ctrl.events.on_promotion_pending.append(squares.append)
        ctrl.events.on_phase_changed.append(phases.append)

        ctrl.attempt_move(_sq("e7"), E8)
        ctrl.resolve_promotion(PieceType.QUEEN)
        assert squares == [E8]
        assert phases == [GamePhase.AWAITING_PROMOTION, GamePhase.AWAITING_MOVE]

    def test_game_over_event(self, ctrl: GameController) -> None:
        results: list[TerminationStatus] = []
        phases: list[GamePhase] = []
        ctrl.events.on_game_over.append(results.append)
        ctrl.events.on_phase_changed.append(phases.append)
        _play(ctrl, "f2f3", "e7e5", "g2g4", "d8h4")
        assert [r.kind for r in results] == [TerminationKind.CHECKMATE]
        assert phases[-1] == GamePhase.GAME_OVER
