"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import random

import pytest

from knightly.core.board import Board
from knightly.core.enums import Color, PieceType

_NON_KING_TYPES = (
    PieceType.PAWN,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.ROOK,
    PieceType.QUEEN,
)


def random_board(rng: random.Random, extra_pieces: int = 10) -> Board:
    """Both kings plus *extra_pieces* random non-king pieces on distinct squares."""
    squares = [(r, c) for r in range(8) for c in range(8)]
    rng.shuffle(squares)
    board = Board()
    board.place(squares[0], Color.WHITE, PieceType.KING)
    board.place(squares[1], Color.BLACK, PieceType.KING)
    for sq in squares[2 : 2 + extra_pieces]:
        board.place(sq, rng.choice(list(Color)), rng.choice(_NON_KING_TYPES))
    return board


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


@pytest.fixture(params=range(12))
def random_position(request: pytest.FixtureRequest) -> Board:
    """A reproducible pseudo-random position (seeded by the param)."""
    return random_board(random.Random(1000 + request.param))
