"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from knightly.core.enums import Color, OutcomeKind
from knightly.core.move_generator import is_king_in_check

if TYPE_CHECKING:
    from knightly.core.board import Board


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Checkmate and stalemate try every pseudo-legal move of *color* on the
    board and restore it afterwards; the board compares equal before and
    after each call.
    """

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return is_king_in_check(board, color)

    @staticmethod
    def has_legal_move(board: Board, color: Color) -> bool:
        return board.has_legal_move(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        if not is_king_in_check(board, color):
            return False
        return not board.has_legal_move(color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        if is_king_in_check(board, color):
            return False
        return not board.has_legal_move(color)

    @staticmethod
    def outcome(board: Board, color: Color) -> OutcomeKind:
        """Classify the position for *color*, the side about to move."""
        in_check = is_king_in_check(board, color)
        can_move = board.has_legal_move(color)
        if in_check:
            return OutcomeKind.CHECK if can_move else OutcomeKind.CHECKMATE
        return OutcomeKind.IN_PROGRESS if can_move else OutcomeKind.STALEMATE
