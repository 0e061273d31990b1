"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @classmethod
    def from_name(cls, name: str) -> Color:
        """Parse ``"white"`` / ``"black"`` (any case)."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid color name: {name!r}") from None

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class OutcomeKind(IntEnum):
    """Status of the game as seen by the side about to move."""

    IN_PROGRESS = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3

    @property
    def is_terminal(self) -> bool:
        return self in (OutcomeKind.CHECKMATE, OutcomeKind.STALEMATE)
