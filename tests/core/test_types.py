"""Tests for square coordinates and notation."""

import pytest

from knightly.core.types import (
    A1,
    A8,
    E2,
    H1,
    H8,
    ParseError,
    from_notation,
    in_bounds,
    square_name,
    to_notation,
)


class TestToNotation:
    def test_corners(self) -> None:
        assert to_notation(0, 0) == "A8"
        assert to_notation(0, 7) == "H8"
        assert to_notation(7, 0) == "A1"
        assert to_notation(7, 7) == "H1"

    def test_e2(self) -> None:
        assert to_notation(6, 4) == "E2"

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, 8), (8, 3), (3, -2)])
    def test_out_of_range_raises(self, row: int, col: int) -> None:
        with pytest.raises(ValueError, match="out of range"):
            to_notation(row, col)

    def test_every_square_round_trips(self) -> None:
        for row in range(8):
            for col in range(8):
                assert from_notation(to_notation(row, col)) == (row, col)


class TestFromNotation:
    def test_e2(self) -> None:
        assert from_notation("E2") == E2 == (6, 4)

    def test_named_constants(self) -> None:
        assert from_notation("A1") == A1
        assert from_notation("H1") == H1
        assert from_notation("A8") == A8
        assert from_notation("H8") == H8

    @pytest.mark.parametrize(
        "text", ["", "E", "E22", "I1", "A0", "A9", "e2", "2E", " E2", None]
    )
    def test_malformed_raises_parse_error(self, text: object) -> None:
        with pytest.raises(ParseError, match="Invalid square name"):
            from_notation(text)  # type: ignore[arg-type]

    def test_parse_error_is_value_error(self) -> None:
        assert issubclass(ParseError, ValueError)

    def test_square_name(self) -> None:
        assert square_name((4, 4)) == "E4"


class TestInBounds:
    def test_inside(self) -> None:
        assert in_bounds(0, 0)
        assert in_bounds(7, 7)

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (8, 0), (0, 8)])
    def test_outside(self, row: int, col: int) -> None:
        assert not in_bounds(row, col)
