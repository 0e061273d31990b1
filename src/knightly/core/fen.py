"""FEN piece-placement parsing and serialization.

Only the placement field is meaningful for this engine (no castling, en
passant or move clocks), so a full FEN string is accepted and everything
after the first field is ignored.
"""

from __future__ import annotations

from knightly.core.board import Board
from knightly.core.piece import Piece
from knightly.core.types import BOARD_SIZE

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_fen(fen: str) -> Board:
    """Parse the placement field of *fen* into a :class:`Board`."""
    parts = fen.split()
    if not parts:
        raise ValueError(f"Invalid FEN (empty): {fen!r}")

    ranks = parts[0].split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    board = Board()
    # FEN lists rank 8 first, which is grid row 0.
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board[(row, col)] = Piece.from_char(ch, (row, col))
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")
    return board


def board_to_fen(board: Board) -> str:
    """Serialize piece placement, e.g. the start position → STARTING_PLACEMENT."""
    ranks: list[str] = []
    for row in range(BOARD_SIZE):
        text = ""
        empty = 0
        for col in range(BOARD_SIZE):
            piece = board[(row, col)]
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        ranks.append(text)
    return "/".join(ranks)
