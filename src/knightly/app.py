"""Headless console entry point.

Reads moves as ``E2 E4`` (or ``E2E4``) one per line and prints the board
after each accepted move. ``new`` restarts, ``undo`` takes a move back,
``moves E2`` lists legal destinations, ``quit`` ends the session.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from knightly.config import GLYPH_STYLES, EngineSettings
from knightly.game.controller import GameController
from knightly.game.interfaces import Outcome

_LOGGER = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> EngineSettings:
    parser = argparse.ArgumentParser(
        prog="knightly", description="Play chess on the console."
    )
    parser.add_argument(
        "--glyphs", choices=GLYPH_STYLES, default="unicode", help="piece rendering"
    )
    parser.add_argument("--log-level", default="WARNING", help="logging level")
    parser.add_argument(
        "--free-turns",
        action="store_true",
        help="let either side move at any time",
    )
    args = parser.parse_args(argv)
    return EngineSettings(
        glyphs=args.glyphs,
        log_level=args.log_level,
        enforce_turn=not args.free_turns,
    )


def _split_move(line: str) -> tuple[str, str] | None:
    text = line.replace("-", " ").upper().split()
    if len(text) == 2:
        return text[0], text[1]
    if len(text) == 1 and len(text[0]) == 4:
        return text[0][:2], text[0][2:]
    return None


def run_session(
    ctrl: GameController, lines: Iterable[str], out: TextIO | None = None
) -> Outcome:
    """Drive *ctrl* from *lines* until input ends, ``quit`` or game over."""
    out = out or sys.stdout

    def show() -> None:
        print(ctrl.dump(), file=out)
        print(f"{ctrl.current_turn()} to move ({ctrl.outcome})", file=out)

    def announce(outcome: Outcome) -> None:
        print(f"Game over: {outcome}", file=out)

    ctrl.events.on_game_over.append(announce)
    try:
        show()
        for raw in lines:
            line = raw.strip()
            if not line:
                continue
            command = line.lower()
            if command in ("quit", "exit"):
                break
            if command == "new":
                ctrl.reset_game()
                show()
                continue
            if command == "undo":
                if not ctrl.undo_move():
                    print("Nothing to undo", file=out)
                show()
                continue
            if command.startswith("moves "):
                square = line.split()[1].upper()
                print(" ".join(ctrl.possible_moves(square)) or "(none)", file=out)
                continue

            move = _split_move(line)
            if move is None or not ctrl.move_piece(*move):
                print(f"Illegal move: {line}", file=out)
                continue
            show()
            if ctrl.outcome.is_terminal:
                break
    finally:
        ctrl.events.on_game_over.remove(announce)
    return ctrl.outcome


def main(argv: list[str] | None = None) -> int:
    """Launch a console game."""
    settings = _parse_args(argv)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctrl = GameController(settings)
    ctrl.new_game()
    _LOGGER.debug("Console session started with %s", settings)
    run_session(ctrl, sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())
