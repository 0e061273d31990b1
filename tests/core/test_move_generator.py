"""Tests for per-piece pseudo-legal move generation and check detection."""

import pytest

from knightly.core.board import Board
from knightly.core.enums import Color, PieceType
from knightly.core.fen import board_from_fen
from knightly.core.move_generator import (
    BISHOP_DIRS,
    GENERATORS,
    QUEEN_DIRS,
    ROOK_DIRS,
    attackers_of,
    bishop_moves,
    is_king_in_check,
    king_moves,
    knight_moves,
    pawn_moves,
    pseudo_legal_moves,
    queen_moves,
    rook_moves,
)
from knightly.core.types import (
    A1,
    A8,
    B1,
    B2,
    C3,
    D1,
    D2,
    D4,
    E1,
    E2,
    E3,
    E4,
    E5,
    E7,
    E8,
    F1,
    F2,
    G1,
    H1,
    H5,
    H8,
    Square,
    from_notation,
    in_bounds,
)


def squares(*names: str) -> set[Square]:
    return {from_notation(n) for n in names}


class TestDispatch:
    def test_every_kind_has_a_generator(self) -> None:
        assert set(GENERATORS) == set(PieceType)

    def test_empty_square_has_no_moves(self, empty_board: Board) -> None:
        assert pseudo_legal_moves(empty_board, E4) == set()


class TestSliding:
    def test_rook_open_board(self, empty_board: Board) -> None:
        empty_board.place(D4, Color.WHITE, PieceType.ROOK)
        assert len(rook_moves(D4, Color.WHITE, empty_board)) == 14

    def test_bishop_open_board(self, empty_board: Board) -> None:
        empty_board.place(D4, Color.WHITE, PieceType.BISHOP)
        assert len(bishop_moves(D4, Color.WHITE, empty_board)) == 13

    def test_queen_is_rook_plus_bishop(self, empty_board: Board) -> None:
        empty_board.place(D4, Color.WHITE, PieceType.QUEEN)
        empty_board.place(from_notation("D6"), Color.BLACK, PieceType.PAWN)
        empty_board.place(from_notation("F6"), Color.WHITE, PieceType.PAWN)
        assert queen_moves(D4, Color.WHITE, empty_board) == rook_moves(
            D4, Color.WHITE, empty_board
        ) | bishop_moves(D4, Color.WHITE, empty_board)

    def test_rook_stops_at_own_piece(self, empty_board: Board) -> None:
        empty_board.place(A1, Color.WHITE, PieceType.ROOK)
        empty_board.place(from_notation("A4"), Color.WHITE, PieceType.PAWN)
        moves = rook_moves(A1, Color.WHITE, empty_board)
        assert squares("A2", "A3") <= moves
        assert not squares("A4", "A5", "A8") & moves

    def test_rook_captures_then_stops(self, empty_board: Board) -> None:
        empty_board.place(A1, Color.WHITE, PieceType.ROOK)
        empty_board.place(from_notation("A4"), Color.BLACK, PieceType.PAWN)
        moves = rook_moves(A1, Color.WHITE, empty_board)
        assert from_notation("A4") in moves
        assert not squares("A5", "A6", "A7", "A8") & moves

    def test_rays_do_not_wrap(self, empty_board: Board) -> None:
        empty_board.place(H1, Color.WHITE, PieceType.BISHOP)
        moves = bishop_moves(H1, Color.WHITE, empty_board)
        assert moves == squares("G2", "F3", "E4", "D5", "C6", "B7", "A8")

    def test_blocked_rays_never_skip_in_random_positions(
        self, random_position: Board
    ) -> None:
        directions = {
            PieceType.ROOK: ROOK_DIRS,
            PieceType.BISHOP: BISHOP_DIRS,
            PieceType.QUEEN: QUEEN_DIRS,
        }
        for color in Color:
            for sq, piece in random_position.pieces(color):
                dirs = directions.get(piece.piece_type)
                if dirs is None:
                    continue
                moves = pseudo_legal_moves(random_position, sq)
                for dr, dc in dirs:
                    r, c = sq[0] + dr, sq[1] + dc
                    blocked = False
                    while in_bounds(r, c):
                        target = random_position[(r, c)]
                        if blocked:
                            assert (r, c) not in moves
                        elif target is None:
                            assert (r, c) in moves
                        else:
                            assert ((r, c) in moves) == (target.color != color)
                            blocked = True
                        r += dr
                        c += dc


class TestKnight:
    def test_center(self, empty_board: Board) -> None:
        empty_board.place(D4, Color.WHITE, PieceType.KNIGHT)
        assert len(knight_moves(D4, Color.WHITE, empty_board)) == 8

    def test_corner(self, empty_board: Board) -> None:
        empty_board.place(A1, Color.WHITE, PieceType.KNIGHT)
        assert knight_moves(A1, Color.WHITE, empty_board) == squares("B3", "C2")

    def test_jumps_but_not_onto_own_piece(self, initial_board: Board) -> None:
        assert knight_moves(B1, Color.WHITE, initial_board) == squares("A3", "C3")

    def test_captures_enemy(self, empty_board: Board) -> None:
        empty_board.place(A1, Color.WHITE, PieceType.KNIGHT)
        empty_board.place(from_notation("B3"), Color.BLACK, PieceType.ROOK)
        empty_board.place(from_notation("C2"), Color.WHITE, PieceType.ROOK)
        assert knight_moves(A1, Color.WHITE, empty_board) == squares("B3")


class TestPawn:
    def test_e2_double_step(self, initial_board: Board) -> None:
        assert pawn_moves(E2, Color.WHITE, initial_board) == {E3, E4}

    def test_e2_blocked_on_e3(self, initial_board: Board) -> None:
        initial_board.place(E3, Color.BLACK, PieceType.KNIGHT)
        moves = pawn_moves(E2, Color.WHITE, initial_board)
        assert E3 not in moves and E4 not in moves

    def test_e2_blocked_on_e4_only(self, initial_board: Board) -> None:
        initial_board.place(E4, Color.BLACK, PieceType.KNIGHT)
        assert pawn_moves(E2, Color.WHITE, initial_board) == {E3}

    def test_black_moves_down(self, initial_board: Board) -> None:
        assert pawn_moves(E7, Color.BLACK, initial_board) == squares("E6", "E5")

    def test_no_double_step_off_home_rank(self, empty_board: Board) -> None:
        empty_board.place(E3, Color.WHITE, PieceType.PAWN)
        assert pawn_moves(E3, Color.WHITE, empty_board) == {E4}

    def test_captures_diagonally_only_enemies(self, empty_board: Board) -> None:
        empty_board.place(E4, Color.WHITE, PieceType.PAWN)
        empty_board.place(from_notation("D5"), Color.BLACK, PieceType.PAWN)
        empty_board.place(from_notation("F5"), Color.WHITE, PieceType.PAWN)
        assert pawn_moves(E4, Color.WHITE, empty_board) == squares("E5", "D5")

    def test_cannot_capture_forward(self, empty_board: Board) -> None:
        empty_board.place(E4, Color.WHITE, PieceType.PAWN)
        empty_board.place(E5, Color.BLACK, PieceType.PAWN)
        assert pawn_moves(E4, Color.WHITE, empty_board) == set()

    def test_last_rank_has_no_moves(self, empty_board: Board) -> None:
        empty_board.place(E8, Color.WHITE, PieceType.PAWN)
        assert pawn_moves(E8, Color.WHITE, empty_board) == set()

    def test_edge_file_capture_stays_on_board(self, empty_board: Board) -> None:
        empty_board.place(from_notation("A2"), Color.WHITE, PieceType.PAWN)
        empty_board.place(from_notation("B3"), Color.BLACK, PieceType.PAWN)
        assert pawn_moves(from_notation("A2"), Color.WHITE, empty_board) == squares(
            "A3", "A4", "B3"
        )

    def test_double_step_iff_home_rank_and_path_clear(
        self, random_position: Board
    ) -> None:
        for color, home, step in ((Color.WHITE, 6, -1), (Color.BLACK, 1, 1)):
            for sq, piece in random_position.pieces(color):
                if piece.piece_type != PieceType.PAWN:
                    continue
                row, col = sq
                two = (row + 2 * step, col)
                expected = (
                    row == home
                    and random_position[(row + step, col)] is None
                    and random_position[two] is None
                )
                moves = pawn_moves(sq, color, random_position)
                assert (in_bounds(*two) and two in moves) == expected


class TestKingGenerator:
    def test_center(self, empty_board: Board) -> None:
        empty_board.place(D4, Color.WHITE, PieceType.KING)
        assert len(king_moves(D4, Color.WHITE, empty_board)) == 8

    def test_corner(self, empty_board: Board) -> None:
        empty_board.place(H8, Color.BLACK, PieceType.KING)
        assert king_moves(H8, Color.BLACK, empty_board) == squares("G8", "G7", "H7")

    def test_is_pseudo_legal(self, empty_board: Board) -> None:
        # Squares covered by the queen are still generated; the board filters.
        empty_board.place(E1, Color.WHITE, PieceType.KING)
        empty_board.place(H5, Color.BLACK, PieceType.QUEEN)
        assert king_moves(E1, Color.WHITE, empty_board) == {D1, D2, E2, F1, F2}


class TestCheckDetection:
    def test_start_position(self, initial_board: Board) -> None:
        assert not is_king_in_check(initial_board, Color.WHITE)
        assert not is_king_in_check(initial_board, Color.BLACK)

    def test_rook_check(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/r3K3")
        assert is_king_in_check(board, Color.WHITE)
        assert not is_king_in_check(board, Color.BLACK)

    def test_blocked_rook_is_no_check(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/r1N1K3")
        assert not is_king_in_check(board, Color.WHITE)

    def test_pawn_checks_diagonally_only(self) -> None:
        assert is_king_in_check(board_from_fen("8/8/8/3p4/4K3/8/8/k7"), Color.WHITE)
        assert not is_king_in_check(
            board_from_fen("8/8/8/4p3/4K3/8/8/k7"), Color.WHITE
        )

    def test_knight_check(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/3n4/8/4K3")
        assert is_king_in_check(board, Color.WHITE)

    def test_missing_king_is_never_in_check(self, empty_board: Board) -> None:
        empty_board.place(C3, Color.BLACK, PieceType.QUEEN)
        assert not is_king_in_check(empty_board, Color.WHITE)

    def test_attackers_of(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/3n4/8/r3K3")
        assert set(attackers_of(board, E1, Color.BLACK)) == squares("D3", "A1")

    def test_generators_do_not_mutate(self, initial_board: Board) -> None:
        snapshot = initial_board.copy()
        for color in Color:
            for sq, _ in initial_board.pieces(color):
                pseudo_legal_moves(initial_board, sq)
        is_king_in_check(initial_board, Color.WHITE)
        assert initial_board == snapshot
        assert B2 in dict(initial_board.pieces(Color.WHITE))
        assert G1 in dict(initial_board.pieces(Color.WHITE))
        assert A8 in dict(initial_board.pieces(Color.BLACK))
