"""Abstract interfaces and value types for the game layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from knightly.core.enums import Color, OutcomeKind

if TYPE_CHECKING:
    from knightly.core.piece import PieceView
    from knightly.game.state import GameState


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


@dataclass(frozen=True, slots=True)
class Outcome:
    """Game status after the last accepted move.

    ``color`` is the side in check for CHECK, the winner for CHECKMATE and
    ``None`` otherwise.
    """

    kind: OutcomeKind = OutcomeKind.IN_PROGRESS
    color: Color | None = None

    @property
    def is_terminal(self) -> bool:
        return self.kind.is_terminal

    def __str__(self) -> str:
        if self.kind == OutcomeKind.CHECK:
            return f"check ({self.color})"
        if self.kind == OutcomeKind.CHECKMATE:
            return f"checkmate, {self.color} wins"
        if self.kind == OutcomeKind.STALEMATE:
            return "stalemate"
        return "in progress"


IN_PROGRESS = Outcome()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface consumed by front ends (GUI, console, tests)."""

    @abstractmethod
    def new_game(self) -> GameState:
        """Start from the standard position, white to move; returns the state."""

    @abstractmethod
    def reset_game(self) -> GameState:
        """Throw away the current game and start over; returns the reset state."""

    @abstractmethod
    def move_piece(self, from_sq: str, to_sq: str) -> bool:
        """Attempt a move given in notation. Returns True if applied."""

    @abstractmethod
    def piece_at(self, row: int, col: int) -> PieceView | None:
        """Read-only view of the piece on (row, col), if any."""

    @abstractmethod
    def current_turn(self) -> Color:
        """Color whose move it is."""

    @abstractmethod
    def is_king_in_check(self, color: Color | str) -> bool: ...

    @abstractmethod
    def is_checkmate(self, color: Color | str) -> bool: ...

    @abstractmethod
    def is_stalemate(self, color: Color | str) -> bool: ...
