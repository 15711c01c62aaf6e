"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessgrid.core import STARTING_FEN, Position, decode
from chessgrid.geometry import Point, Vector

EMPTY_FEN = "8/8/8/8/8/8/8/8 b - - 5 10"


@pytest.fixture
def starting_position() -> Position:
    return decode(STARTING_FEN)


@pytest.fixture
def empty_position() -> Position:
    return decode(EMPTY_FEN)


@pytest.fixture
def horizontal_segment() -> Vector:
    """Segment (0, 0) → (10, 0)."""
    return Vector(Point(0.0, 0.0), Point(10.0, 0.0))
