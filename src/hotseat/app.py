"""Console entry point: play a hot-seat game in the terminal."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Iterable

from hotseat.core.enums import PieceType
from hotseat.core.types import parse_square, square_name
from hotseat.game.controller import GameController
from hotseat.game.interfaces import GameOptions, GamePhase

_PROMOTION_LETTERS: dict[str, PieceType] = {
    "q": PieceType.QUEEN,
    "r": PieceType.ROOK,
    "b": PieceType.BISHOP,
    "n": PieceType.KNIGHT,
}

_HELP = (
    "Commands: '<from> <to>' (e.g. e2 e4), 'hint <square>', "
    "q/r/b/n to promote, 'new', 'quit'"
)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="hotseat", description=__doc__)
    parser.add_argument(
        "--fen", help="start from this FEN instead of the initial layout"
    )
    parser.add_argument(
        "--auto-queen",
        action="store_true",
        help="promote to a queen without asking",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def _render(ctrl: GameController) -> str:
    cells = {p.square: p for p in ctrl.state.position.board}
    lines = []
    for row in range(8):
        marks = [
            cells[(row, col)].symbol if (row, col) in cells else "·"
            for col in range(8)
        ]
        lines.append(f"{8 - row} {' '.join(marks)}")
    lines.append("  a b c d e f g h")
    lines.append(ctrl.status_text())
    return "\n".join(lines)


def _handle(ctrl: GameController, words: list[str]) -> str | None:
    """Run one command; returns a message for the player, if any."""
    if ctrl.phase == GamePhase.AWAITING_PROMOTION:
        kind = _PROMOTION_LETTERS.get(words[0].lower())
        if kind is None:
            return "Choose q, r, b or n"
        ctrl.resolve_promotion(kind)
        return None

    if words[0] == "hint":
        if len(words) != 2:
            return _HELP
        hints = sorted(ctrl.legal_destinations(parse_square(words[1])))
        return " ".join(square_name(sq) for sq in hints) or "No moves"

    if len(words) == 1 and len(words[0]) == 4:
        words = [words[0][:2], words[0][2:]]
    if len(words) != 2:
        return _HELP

    outcome = ctrl.attempt_move(parse_square(words[0]), parse_square(words[1]))
    if not outcome.accepted:
        return "Illegal move"
    return None


def play(
    ctrl: GameController,
    lines: Iterable[str],
    out: Callable[[str], None] = print,
) -> None:
    """Drive *ctrl* from text commands until input ends or 'quit'."""
    out(_render(ctrl))
    for line in lines:
        words = line.split()
        if not words:
            continue
        if words[0] == "quit":
            break
        if words[0] == "new":
            ctrl.new_game()
            out(_render(ctrl))
            continue
        try:
            message = _handle(ctrl, words)
        except ValueError as exc:
            message = str(exc)
        if message:
            out(message)
        else:
            out(_render(ctrl))


def main(argv: list[str] | None = None) -> None:
    """Launch the Hotseat console game."""
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level)

    auto = PieceType.QUEEN if args.auto_queen else None
    options = GameOptions(auto_promotion=auto)
    ctrl = GameController(options)
    ctrl.new_game(args.fen)
    play(ctrl, sys.stdin)


if __name__ == "__main__":
    main()
