"""Square type alias and coordinate / notation helpers.

Grid layout (row, col), row 0 is the far (black) side:
    A8=(0, 0), B8=(0, 1), ..., H8=(0, 7)
    ...
    A1=(7, 0), B1=(7, 1), ..., H1=(7, 7)

Notation is file letter + rank digit, e.g. ``"E2"``: file = ``'A' + col``,
rank = ``8 - row``.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]  # (row, col), both 0–7

BOARD_SIZE = 8
FILES = "ABCDEFGH"
RANKS = "12345678"


class ParseError(ValueError):
    """Raised for a notation string that does not name a square."""


def in_bounds(row: int, col: int) -> bool:
    """Whether (row, col) lies on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def to_notation(row: int, col: int) -> str:
    """Square name, e.g. (6, 4) → 'E2'."""
    if not in_bounds(row, col):
        raise ValueError(f"Square out of range: {(row, col)!r}")
    return FILES[col] + str(BOARD_SIZE - row)


def from_notation(name: str) -> Square:
    """Parse a square name, e.g. 'E2' → (6, 4)."""
    if (
        not isinstance(name, str)
        or len(name) != 2
        or name[0] not in FILES
        or name[1] not in RANKS
    ):
        raise ParseError(f"Invalid square name: {name!r}")
    return BOARD_SIZE - int(name[1]), FILES.index(name[0])


def square_name(sq: Square) -> str:
    """Notation for a :data:`Square` tuple."""
    return to_notation(*sq)


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ((0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = ((1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = ((2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = ((3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = ((4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = ((5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = ((6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = ((7, c) for c in range(8))
