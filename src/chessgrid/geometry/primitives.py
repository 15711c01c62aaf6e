"""Geometry value objects: points, directed segments and circles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """Immutable point (or free vector from the origin) in the plane."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def scale(self, k: float) -> Point:
        return Point(self.x * k, self.y * k)


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True, slots=True)
class Vector:
    """Directed segment from *start* to *end*."""

    start: Point
    end: Point

    @property
    def displacement(self) -> Point:
        """``end - start``, the vector with its anchor dropped."""
        return self.end - self.start

    @property
    def is_degenerate(self) -> bool:
        return self.start == self.end


@dataclass(frozen=True, slots=True)
class Circle:
    center: Point
    radius: float
