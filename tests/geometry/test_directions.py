"""Tests for the compass direction table."""

import pytest

from chessgrid.core.enums import Color, PieceKind
from chessgrid.core.notation import STARTING_FEN, decode
from chessgrid.geometry.directions import (
    ALL_DIRECTIONS,
    DIAGONAL,
    DIRECTIONS_BY_NAME,
    EAST,
    NORTH,
    NORTHEAST,
    NORTHWEST,
    ORTHOGONAL,
    SOUTH,
    SOUTHEAST,
    SOUTHWEST,
    WEST,
    step,
)
from chessgrid.geometry.ops import translate_point
from chessgrid.geometry.primitives import ORIGIN, Point, Vector


class TestDirectionTable:
    @pytest.mark.parametrize(
        ("direction", "expected"),
        [
            (NORTH, Point(0, -8)),
            (SOUTH, Point(0, 8)),
            (EAST, Point(8, 0)),
            (WEST, Point(-8, 0)),
            (NORTHEAST, Point(8, -8)),
            (NORTHWEST, Point(-8, -8)),
            (SOUTHEAST, Point(8, 8)),
            (SOUTHWEST, Point(-8, 8)),
        ],
    )
    def test_translate_origin(self, direction: Vector, expected: Point) -> None:
        assert translate_point(ORIGIN, direction) == expected

    def test_all_anchored_at_origin(self) -> None:
        assert all(d.start == ORIGIN for d in ALL_DIRECTIONS)

    def test_eight_distinct(self) -> None:
        assert len(ALL_DIRECTIONS) == 8
        assert len({d.end for d in ALL_DIRECTIONS}) == 8

    def test_orthogonal_have_one_axis(self) -> None:
        for d in ORTHOGONAL:
            assert (d.end.x == 0) != (d.end.y == 0)

    def test_diagonal_have_equal_spans(self) -> None:
        for d in DIAGONAL:
            assert abs(d.end.x) == abs(d.end.y) == 8

    def test_by_name(self) -> None:
        assert DIRECTIONS_BY_NAME["southwest"] is SOUTHWEST
        assert set(DIRECTIONS_BY_NAME.values()) == set(ALL_DIRECTIONS)

    def test_by_name_read_only(self) -> None:
        with pytest.raises(TypeError):
            DIRECTIONS_BY_NAME["up"] = NORTH  # type: ignore[index]


class TestStep:
    @pytest.mark.parametrize(
        ("there", "back"),
        [(NORTH, SOUTH), (EAST, WEST), (NORTHEAST, SOUTHWEST), (NORTHWEST, SOUTHEAST)],
    )
    def test_opposite_steps_cancel(self, there: Vector, back: Vector) -> None:
        start = Point(24, 40)
        assert step(step(start, there), back) == start

    def test_step_from_decoded_piece(self) -> None:
        pos = decode(STARTING_FEN)
        (king,) = pos.pieces_by_kind(Color.WHITE, PieceKind.KING)
        row, column = king.position
        ahead = step(Point(column * 8, row * 8), NORTH)
        square = (int(ahead.y) // 8, int(ahead.x) // 8)
        blocker = pos.piece_at(square)
        assert blocker is not None
        assert blocker.kind == PieceKind.PAWN
        assert blocker.color == Color.WHITE
