"""The eight compass step directions as origin-anchored vectors.

North is negative ``y``: rows grow downward, as in board notation. A step is
``translate_point(position, direction)``.
"""

from __future__ import annotations

from types import MappingProxyType

from chessgrid.geometry.ops import translate_point
from chessgrid.geometry.primitives import ORIGIN, Point, Vector

IN_SITU = ORIGIN

NORTH = Vector(IN_SITU, Point(0.0, -8.0))
SOUTH = Vector(IN_SITU, Point(0.0, 8.0))
EAST = Vector(IN_SITU, Point(8.0, 0.0))
WEST = Vector(IN_SITU, Point(-8.0, 0.0))
NORTHEAST = Vector(IN_SITU, Point(8.0, -8.0))
NORTHWEST = Vector(IN_SITU, Point(-8.0, -8.0))
SOUTHEAST = Vector(IN_SITU, Point(8.0, 8.0))
SOUTHWEST = Vector(IN_SITU, Point(-8.0, 8.0))

ORTHOGONAL: tuple[Vector, ...] = (NORTH, SOUTH, EAST, WEST)
DIAGONAL: tuple[Vector, ...] = (NORTHEAST, NORTHWEST, SOUTHEAST, SOUTHWEST)
ALL_DIRECTIONS: tuple[Vector, ...] = ORTHOGONAL + DIAGONAL

DIRECTIONS_BY_NAME = MappingProxyType(
    {
        "north": NORTH,
        "south": SOUTH,
        "east": EAST,
        "west": WEST,
        "northeast": NORTHEAST,
        "northwest": NORTHWEST,
        "southeast": SOUTHEAST,
        "southwest": SOUTHWEST,
    }
)


def step(point: Point, direction: Vector) -> Point:
    return translate_point(point, direction)
