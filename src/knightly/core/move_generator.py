"""Pseudo-legal move generation per piece kind + check detection.

Every generator has the same shape ``(square, color, board) -> set[Square]``
and ignores whose turn it is and whether the mover's own king ends up in
check; that filtering belongs to :class:`~knightly.core.board.Board`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from knightly.core.enums import Color, PieceType
from knightly.core.types import BOARD_SIZE, Square, in_bounds

if TYPE_CHECKING:
    from knightly.core.board import Board

Generator = Callable[[Square, Color, "Board"], set[Square]]

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# Pawns advance toward row 0 for white, row 7 for black.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


# -- Precomputed lookup tables ---------------------------------------------


def _all_squares() -> list[Square]:
    return [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for row, col in _all_squares():
        targets[(row, col)] = tuple(
            (row + dr, col + dc) for dr, dc in offsets if in_bounds(row + dr, col + dc)
        )
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for row, col in _all_squares():
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            r, c = row + dr, col + dc
            ray: list[Square] = []
            while in_bounds(r, c):
                ray.append((r, c))
                r += dr
                c += dc
            square_rays.append(tuple(ray))
        rays_per_square[(row, col)] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


# -- Piece-specific generators ---------------------------------------------


def _slide(
    color: Color,
    board: Board,
    rays: tuple[tuple[Square, ...], ...],
) -> set[Square]:
    moves: set[Square] = set()
    for ray in rays:
        for to_sq in ray:
            target = board[to_sq]
            if target is None:
                moves.add(to_sq)
                continue
            if target.color != color:
                moves.add(to_sq)
            break
    return moves


def _step(
    color: Color,
    board: Board,
    targets: tuple[Square, ...],
) -> set[Square]:
    moves: set[Square] = set()
    for to_sq in targets:
        target = board[to_sq]
        if target is None or target.color != color:
            moves.add(to_sq)
    return moves


def rook_moves(sq: Square, color: Color, board: Board) -> set[Square]:
    return _slide(color, board, _ROOK_RAYS[sq])


def bishop_moves(sq: Square, color: Color, board: Board) -> set[Square]:
    return _slide(color, board, _BISHOP_RAYS[sq])


def queen_moves(sq: Square, color: Color, board: Board) -> set[Square]:
    return _slide(color, board, _QUEEN_RAYS[sq])


def knight_moves(sq: Square, color: Color, board: Board) -> set[Square]:
    return _step(color, board, _KNIGHT_TARGETS[sq])


def king_moves(sq: Square, color: Color, board: Board) -> set[Square]:
    """One step in any direction; self-check is filtered by the board."""
    return _step(color, board, _KING_TARGETS[sq])


def pawn_moves(sq: Square, color: Color, board: Board) -> set[Square]:
    """Single/double advance onto empty squares, diagonal captures only.

    No en passant and no promotion.
    """
    moves: set[Square] = set()
    row, col = sq
    direction = PAWN_DIRECTION[color]

    one_step = (row + direction, col)
    if in_bounds(*one_step) and board[one_step] is None:
        moves.add(one_step)
        if row == PAWN_HOME_ROW[color]:
            two_step = (row + 2 * direction, col)
            if board[two_step] is None:
                moves.add(two_step)

    for dc in (-1, 1):
        cap_sq = (row + direction, col + dc)
        if not in_bounds(*cap_sq):
            continue
        target = board[cap_sq]
        if target is not None and target.color != color:
            moves.add(cap_sq)

    return moves


GENERATORS: dict[PieceType, Generator] = {
    PieceType.PAWN: pawn_moves,
    PieceType.KNIGHT: knight_moves,
    PieceType.BISHOP: bishop_moves,
    PieceType.ROOK: rook_moves,
    PieceType.QUEEN: queen_moves,
    PieceType.KING: king_moves,
}


def pseudo_legal_moves(board: Board, sq: Square) -> set[Square]:
    """Pseudo-legal destinations of the piece on *sq* (empty if none)."""
    piece = board[sq]
    if piece is None:
        return set()
    return GENERATORS[piece.piece_type](sq, piece.color, board)


# -- Check detection -------------------------------------------------------


def attackers_of(board: Board, target: Square, by_color: Color) -> list[Square]:
    """Squares of *by_color* pieces whose pseudo-legal moves reach *target*.

    Only meaningful for an occupied *target*: pawn advances onto an empty
    square are not attacks.
    """
    return [
        sq
        for sq, piece in board.pieces(by_color)
        if target in GENERATORS[piece.piece_type](sq, by_color, board)
    ]


def is_king_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?

    A board without a *color* king is never in check.
    """
    king_sq = board.king_square(color)
    if king_sq is None:
        return False
    opponent = color.opposite
    for sq, piece in board.pieces(opponent):
        if king_sq in GENERATORS[piece.piece_type](sq, opponent, board):
            return True
    return False
