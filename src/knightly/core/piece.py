"""Piece objects: the live board piece and its read-only view."""

from __future__ import annotations

from dataclasses import dataclass

from knightly.core.enums import Color, PieceType
from knightly.core.types import Square, square_name

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_LETTERS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class PieceView:
    """Immutable {kind, color} snapshot handed out across the engine boundary."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        return _LETTERS[(self.color, self.piece_type)]

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]


class Piece:
    """A piece living on a :class:`~knightly.core.board.Board`.

    Color and kind are fixed at creation; ``square`` follows the piece around
    and is kept in sync by the board on every placement.
    """

    __slots__ = ("_color", "_piece_type", "square")

    def __init__(self, color: Color, piece_type: PieceType, square: Square) -> None:
        self._color = color
        self._piece_type = piece_type
        self.square = square

    @property
    def color(self) -> Color:
        return self._color

    @property
    def piece_type(self) -> PieceType:
        return self._piece_type

    @property
    def view(self) -> PieceView:
        return PieceView(self._color, self._piece_type)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _LETTERS[(self._color, self._piece_type)]

    @classmethod
    def from_char(cls, char: str, square: Square) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype, square)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self._color, self._piece_type)]

    @property
    def notation(self) -> str:
        """Current square in file-rank notation."""
        return square_name(self.square)

    # ── Copying / comparison ─────────────────────────────────────────────

    def copy(self) -> Piece:
        return Piece(self._color, self._piece_type, self.square)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return (
            self._color == other._color
            and self._piece_type == other._piece_type
            and self.square == other.square
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Piece({self._color.name}, {self._piece_type.name}, "
            f"{square_name(self.square)})"
        )
