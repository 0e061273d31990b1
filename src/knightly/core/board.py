"""Board - piece placement on an 8x8 grid plus move execution."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from knightly.core.enums import Color, PieceType
from knightly.core.move_generator import is_king_in_check, pseudo_legal_moves
from knightly.core.piece import Piece
from knightly.core.types import BOARD_SIZE, FILES, Square, in_bounds

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of optional pieces.

    The board exclusively owns the pieces it holds. Every placement through
    ``board[sq] = piece`` re-synchronises ``piece.square`` with the cell.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        row, col = sq
        return self._grid[row][col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        row, col = sq
        if piece is not None:
            piece.square = sq
        self._grid[row][col] = piece

    def piece_at(self, row: int, col: int) -> Piece | None:
        """Bounds-checked lookup; ``None`` outside the board."""
        if not in_bounds(row, col):
            return None
        return self._grid[row][col]

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    def place(self, sq: Square, color: Color, piece_type: PieceType) -> Piece:
        """Put a new piece on *sq*, replacing whatever was there."""
        piece = Piece(color, piece_type, sq)
        self[sq] = piece
        return piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[tuple[Square, Piece]]:
        """(square, piece) pairs for every *color* piece, row-major order."""
        return [
            ((row, col), piece)
            for row, cells in enumerate(self._grid)
            for col, piece in enumerate(cells)
            if piece is not None and piece.color == color
        ]

    def king_square(self, color: Color) -> Square | None:
        """First *color* king found in row-major order, or ``None``."""
        for sq, piece in self.pieces(color):
            if piece.piece_type == PieceType.KING:
                return sq
        return None

    # -- Legality -----------------------------------------------------------

    def legal_moves(self, sq: Square) -> set[Square]:
        """Destinations of the piece on *sq* that keep its own king safe."""
        if not in_bounds(*sq):
            return set()
        piece = self[sq]
        if piece is None:
            return set()
        legal: set[Square] = set()
        for to_sq in pseudo_legal_moves(self, sq):
            with self._trial(sq, to_sq):
                if not is_king_in_check(self, piece.color):
                    legal.add(to_sq)
        return legal

    def is_legal_move(self, from_sq: Square, to_sq: Square) -> bool:
        if not (in_bounds(*from_sq) and in_bounds(*to_sq)):
            return False
        piece = self[from_sq]
        if piece is None or to_sq not in pseudo_legal_moves(self, from_sq):
            return False
        with self._trial(from_sq, to_sq):
            return not is_king_in_check(self, piece.color)

    def has_legal_move(self, color: Color) -> bool:
        """Whether any *color* piece has a move that keeps its king safe."""
        return any(self.legal_moves(sq) for sq, _ in self.pieces(color))

    # -- Move execution -----------------------------------------------------

    def move_piece(self, from_sq: Square, to_sq: Square) -> bool:
        """Move the piece on *from_sq* to *to_sq* if legal.

        Returns ``False`` and leaves the board untouched when there is no
        piece on *from_sq*, *to_sq* is not a pseudo-legal destination, or
        the move would leave the mover's king in check.
        """
        if not self.is_legal_move(from_sq, to_sq):
            return False
        self.make_move(from_sq, to_sq)
        return True

    def make_move(self, from_sq: Square, to_sq: Square) -> Piece | None:
        """Relocate a piece unconditionally; returns the captured piece."""
        piece = self[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {from_sq}")
        captured = self[to_sq]
        self[from_sq] = None
        self[to_sq] = piece
        return captured

    def unmake_move(
        self, from_sq: Square, to_sq: Square, captured: Piece | None
    ) -> None:
        """Undo :meth:`make_move`, restoring *captured* on *to_sq*."""
        piece = self[to_sq]
        if piece is None:
            raise ValueError(f"No piece on {to_sq}")
        self[from_sq] = piece
        self[to_sq] = captured

    @contextmanager
    def _trial(self, from_sq: Square, to_sq: Square) -> Iterator[None]:
        """Apply a move for the duration of the block, then restore it."""
        captured = self.make_move(from_sq, to_sq)
        try:
            yield
        finally:
            self.unmake_move(from_sq, to_sq, captured)

    # -- Copying / factory --------------------------------------------------

    def copy(self) -> Board:
        """Deep copy: every occupied cell gets its own :class:`Piece`."""
        b = Board()
        b._grid = [
            [piece.copy() if piece is not None else None for piece in row]
            for row in self._grid
        ]
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, white on rows 6–7."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b.place((0, col), Color.BLACK, pt)
            b.place((1, col), Color.BLACK, PieceType.PAWN)
            b.place((6, col), Color.WHITE, PieceType.PAWN)
            b.place((7, col), Color.WHITE, pt)
        return b

    # -- Text rendering -----------------------------------------------------

    def dump(self, glyphs: str = "unicode") -> str:
        """Rows 8→1, files A→H, ``-`` for empty squares.

        *glyphs* is ``"unicode"`` (♔ …) or ``"letters"`` (K/k …).
        """
        if glyphs not in ("unicode", "letters"):
            raise ValueError(f"Unknown glyph style: {glyphs!r}")
        rows: list[str] = []
        for row, cells in enumerate(self._grid):
            marks = [
                "-" if p is None else (p.symbol if glyphs == "unicode" else str(p))
                for p in cells
            ]
            rows.append(f"{BOARD_SIZE - row} {' '.join(marks)}")
        rows.append(f"  {' '.join(FILES)}")
        return "\n".join(rows)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return self.dump("letters")
