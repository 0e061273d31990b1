"""GameController — the engine surface consumed by front ends.

Wraps a :class:`GameState`, accepts colors as :class:`Color` or names,
serialises every move-and-validate sequence behind a lock and notifies
subscribers through simple callbacks.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from knightly.config import EngineSettings
from knightly.core.enums import Color
from knightly.core.piece import PieceView
from knightly.game.interfaces import IGameController, Outcome
from knightly.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
RejectedCallback = Callable[[str, str], None]  # from, to
OutcomeCallback = Callable[[Outcome], None]
ResetCallback = Callable[[GameState], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_move_rejected: list[RejectedCallback] = field(default_factory=list)
    on_outcome_changed: list[OutcomeCallback] = field(default_factory=list)
    on_game_over: list[OutcomeCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


def _coerce_color(color: Color | str) -> Color:
    return color if isinstance(color, Color) else Color.from_name(color)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Owns one game: validates moves, flips turns, reports outcomes.

    Thread-safety: every public method runs under one re-entrant lock, so the
    trial moves made during legality and checkmate search are never visible
    to another caller.
    """

    __slots__ = ("_state", "_settings", "_lock", "events")

    def __init__(self, settings: EngineSettings | None = None) -> None:
        self._settings = settings or EngineSettings()
        self._state = GameState(enforce_turn=self._settings.enforce_turn)
        self._lock = threading.RLock()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    @property
    def outcome(self) -> Outcome:
        with self._lock:
            return self._state.outcome

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self) -> GameState:
        with self._lock:
            self._state = GameState.new_game(enforce_turn=self._settings.enforce_turn)
            _LOGGER.info("New game started")
            self._emit_reset()
            return self._state

    def reset_game(self) -> GameState:
        with self._lock:
            self._state.setup()
            _LOGGER.info("Game reset")
            self._emit_reset()
            return self._state

    def load(self, state: GameState) -> None:
        """Adopt an externally built state (e.g. :meth:`GameState.from_board`)."""
        with self._lock:
            self._state = state
            self._emit_reset()

    def move_piece(self, from_sq: str, to_sq: str) -> bool:
        with self._lock:
            before = self._state.outcome
            record = self._state.move_piece(from_sq, to_sq)
            if record is None:
                _LOGGER.debug("Rejected move %s-%s", from_sq, to_sq)
                self._emit_rejected(from_sq, to_sq)
                return False

            _LOGGER.debug("Accepted move %s", record)
            self._emit_move(record)
            if record.outcome_after != before:
                self._emit_outcome_changed(record.outcome_after)
            if record.outcome_after.is_terminal:
                self._emit_game_over(record.outcome_after)
            return True

    def undo_move(self) -> bool:
        with self._lock:
            record = self._state.undo_last_move()
            if record is None:
                return False
            _LOGGER.debug("Undid move %s", record)
            self._emit_outcome_changed(self._state.outcome)
            return True

    def piece_at(self, row: int, col: int) -> PieceView | None:
        with self._lock:
            piece = self._state.board.piece_at(row, col)
            return piece.view if piece is not None else None

    def current_turn(self) -> Color:
        with self._lock:
            return self._state.turn

    def is_king_in_check(self, color: Color | str) -> bool:
        with self._lock:
            return self._state.is_king_in_check(_coerce_color(color))

    def is_checkmate(self, color: Color | str) -> bool:
        with self._lock:
            return self._state.is_checkmate(_coerce_color(color))

    def is_stalemate(self, color: Color | str) -> bool:
        with self._lock:
            return self._state.is_stalemate(_coerce_color(color))

    def possible_moves(self, from_sq: str) -> list[str]:
        """Legal destinations from *from_sq* in notation, sorted."""
        with self._lock:
            return self._state.legal_moves(from_sq)

    def dump(self) -> str:
        """Text board for headless inspection."""
        with self._lock:
            return self._state.board.dump(self._settings.glyphs)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_rejected(self, from_sq: str, to_sq: str) -> None:
        for cb in self.events.on_move_rejected:
            cb(from_sq, to_sq)

    def _emit_outcome_changed(self, outcome: Outcome) -> None:
        _LOGGER.info("Outcome: %s", outcome)
        for cb in self.events.on_outcome_changed:
            cb(outcome)

    def _emit_game_over(self, outcome: Outcome) -> None:
        _LOGGER.info("Game over: %s", outcome)
        for cb in self.events.on_game_over:
            cb(outcome)

    def _emit_reset(self) -> None:
        for cb in self.events.on_reset:
            cb(self._state)
