"""Game state machine — turn order, outcome transitions and move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from knightly.core.board import Board
from knightly.core.enums import Color, OutcomeKind
from knightly.core.move_generator import attackers_of
from knightly.core.piece import Piece, PieceView
from knightly.core.rules import Rules
from knightly.core.types import ParseError, Square, from_notation, square_name
from knightly.game.interfaces import IN_PROGRESS, GamePhase, Outcome


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    from_sq: str
    to_sq: str
    piece: PieceView
    captured: Piece | None = None
    outcome_after: Outcome = IN_PROGRESS
    outcome_before: Outcome = IN_PROGRESS
    checkers: tuple[str, ...] = ()

    @property
    def was_capture(self) -> bool:
        return self.captured is not None

    @property
    def was_check(self) -> bool:
        return self.outcome_after.kind in (OutcomeKind.CHECK, OutcomeKind.CHECKMATE)

    def __str__(self) -> str:
        sep = "x" if self.was_capture else "-"
        return f"{self.piece}{self.from_sq}{sep}{self.to_sq}"


@dataclass
class GameState:
    """Board + side to move + outcome, mutated only through :meth:`move_piece`.

    This is a pure data/logic class — no threading, no UI.
    """

    board: Board = field(default_factory=Board.initial)
    turn: Color = Color.WHITE
    outcome: Outcome = IN_PROGRESS
    phase: GamePhase = GamePhase.NOT_STARTED
    move_history: list[MoveRecord] = field(default_factory=list)
    enforce_turn: bool = True

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self) -> None:
        """Initialise (or reset) to the standard starting position."""
        self.board = Board.initial()
        self.turn = Color.WHITE
        self.outcome = IN_PROGRESS
        self.phase = GamePhase.AWAITING_MOVE
        self.move_history.clear()

    @classmethod
    def new_game(cls, *, enforce_turn: bool = True) -> GameState:
        state = cls(enforce_turn=enforce_turn)
        state.setup()
        return state

    @classmethod
    def from_board(
        cls, board: Board, turn: Color = Color.WHITE, *, enforce_turn: bool = True
    ) -> GameState:
        """Start from an arbitrary position; the outcome is evaluated at once."""
        state = cls(board=board, turn=turn, enforce_turn=enforce_turn)
        state.outcome = state._evaluate(turn)
        terminal = state.outcome.is_terminal
        state.phase = GamePhase.GAME_OVER if terminal else GamePhase.AWAITING_MOVE
        return state

    # ── Move application ─────────────────────────────────────────────────

    def move_piece(self, from_sq: str, to_sq: str) -> MoveRecord | None:
        """Try to play *from_sq* → *to_sq* (notation).

        Returns the history record, or ``None`` when the move is rejected:
        malformed notation, no piece, wrong side, game already over, illegal
        destination or self-check. A rejected move changes nothing.
        """
        if self.is_game_over:
            return None
        try:
            src = from_notation(from_sq)
            dst = from_notation(to_sq)
        except ParseError:
            return None

        piece = self.board[src]
        if piece is None:
            return None
        if self.enforce_turn and piece.color != self.turn:
            return None
        if not self.board.is_legal_move(src, dst):
            return None

        mover = piece.color
        captured = self.board.make_move(src, dst)
        before = self.outcome
        self.turn = mover.opposite
        self.outcome = self._evaluate(self.turn)
        if self.outcome.is_terminal:
            self.phase = GamePhase.GAME_OVER

        record = MoveRecord(
            from_sq=from_sq,
            to_sq=to_sq,
            piece=piece.view,
            captured=captured,
            outcome_after=self.outcome,
            outcome_before=before,
            checkers=self._checkers(self.turn),
        )
        self.move_history.append(record)
        return record

    def undo_last_move(self) -> MoveRecord | None:
        """Undo the last move. Returns the undone record, or None if empty."""
        if not self.move_history:
            return None

        record = self.move_history.pop()
        self.board.unmake_move(
            from_notation(record.from_sq), from_notation(record.to_sq), record.captured
        )
        self.turn = record.piece.color
        self.outcome = record.outcome_before
        self.phase = GamePhase.AWAITING_MOVE
        return record

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    def is_king_in_check(self, color: Color) -> bool:
        return Rules.is_in_check(self.board, color)

    def is_checkmate(self, color: Color) -> bool:
        return Rules.is_checkmate(self.board, color)

    def is_stalemate(self, color: Color) -> bool:
        return Rules.is_stalemate(self.board, color)

    def legal_moves(self, from_sq: str) -> list[str]:
        """Sorted notation of legal destinations from *from_sq*."""
        try:
            src = from_notation(from_sq)
        except ParseError:
            return []
        return sorted(square_name(sq) for sq in self.board.legal_moves(src))

    # ── Internal ─────────────────────────────────────────────────────────

    def _evaluate(self, color: Color) -> Outcome:
        kind = Rules.outcome(self.board, color)
        if kind == OutcomeKind.CHECK:
            return Outcome(kind, color)
        if kind == OutcomeKind.CHECKMATE:
            return Outcome(kind, color.opposite)
        return Outcome(kind)

    def _checkers(self, color: Color) -> tuple[str, ...]:
        king_sq: Square | None = self.board.king_square(color)
        if king_sq is None:
            return ()
        return tuple(
            square_name(sq) for sq in attackers_of(self.board, king_sq, color.opposite)
        )
