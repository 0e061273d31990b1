"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from knightly.core import Board, Rules, Color, from_notation

    board = Board.initial()
    board.move_piece(from_notation("E2"), from_notation("E4"))
    print(board.dump())
    Rules.is_checkmate(board, Color.BLACK)
"""

from knightly.core.board import Board
from knightly.core.enums import Color, OutcomeKind, PieceType
from knightly.core.fen import STARTING_PLACEMENT, board_from_fen, board_to_fen
from knightly.core.move_generator import (
    GENERATORS,
    attackers_of,
    is_king_in_check,
    pseudo_legal_moves,
)
from knightly.core.piece import Piece, PieceView
from knightly.core.rules import Rules
from knightly.core.types import (
    ParseError,
    Square,
    from_notation,
    in_bounds,
    square_name,
    to_notation,
)

__all__ = [
    # Enums
    "Color",
    "OutcomeKind",
    "PieceType",
    # Types / helpers
    "ParseError",
    "Square",
    "from_notation",
    "in_bounds",
    "square_name",
    "to_notation",
    # Domain objects
    "Board",
    "Piece",
    "PieceView",
    "Rules",
    # Move generation / check detection
    "GENERATORS",
    "attackers_of",
    "is_king_in_check",
    "pseudo_legal_moves",
    # FEN placement
    "STARTING_PLACEMENT",
    "board_from_fen",
    "board_to_fen",
]
