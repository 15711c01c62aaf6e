"""Pure geometry operations on :class:`Point` and :class:`Vector`.

Segment helpers name the endpoints ``A`` (start) and ``B`` (end) and the
query point ``C``.
"""

from __future__ import annotations

import math

from chessgrid.geometry.primitives import Circle, Point, Vector


class DegenerateGeometryError(ValueError):
    """A direction vector or segment has zero length where one is needed."""


def add(p1: Point, p2: Point) -> Point:
    return Point(p1.x + p2.x, p1.y + p2.y)


def subtract(p1: Point, p2: Point) -> Point:
    return Point(p1.x - p2.x, p1.y - p2.y)


def dot(p1: Point, p2: Point) -> float:
    """Dot product of two points taken as vectors from the origin."""
    return p1.x * p2.x + p1.y * p2.y


def squared_distance(p1: Point, p2: Point) -> float:
    """Squared Euclidean distance; enough for comparisons."""
    delta = subtract(p1, p2)
    return dot(delta, delta)


def distance(p1: Point, p2: Point) -> float:
    return math.sqrt(squared_distance(p1, p2))


def project(v1: Point, v2: Point) -> Point:
    """Project *v1* onto *v2*.

    Raises:
        DegenerateGeometryError: *v2* is the zero vector.
    """
    denominator = dot(v2, v2)
    if denominator == 0:
        raise DegenerateGeometryError(f"Cannot project onto zero vector {v2!r}")
    return v2.scale(dot(v1, v2) / denominator)


def translate_point(point: Point, vector: Vector) -> Point:
    """Move *point* by the displacement of *vector*; its start is ignored."""
    return add(point, vector.displacement)


def relative_vector(origin: Point, offset: Point) -> Vector:
    """Segment from *origin* to ``origin + offset``."""
    return Vector(origin, add(origin, offset))


def absolute_vector(origin: Point, destination: Point) -> Vector:
    return Vector(origin, destination)


def closest_point_on_segment(segment: Vector, point: Point) -> Point:
    """Point of the finite segment nearest to *point*.

    A zero-length segment yields its start.
    """
    a, b = segment.start, segment.end
    ab = subtract(b, a)
    length2 = dot(ab, ab)
    if length2 == 0:
        return a

    k = dot(subtract(point, a), ab) / length2
    if k < 0:
        return a
    if k > 1:
        return b
    return add(a, ab.scale(k))


def _has_zero_length(segment: Vector) -> bool:
    """True when the squared length is 0, including underflow of tiny segments."""
    return squared_distance(segment.end, segment.start) == 0


def _position_along(segment: Vector, point: Point) -> tuple[float, Point]:
    """Scalar ``k`` of the foot ``D`` of *point* along *segment*, and ``D``.

    ``k`` solves ``AD = k * AB`` on whichever axis has the larger span.
    """
    a, b = segment.start, segment.end
    ab = subtract(b, a)
    d = add(project(subtract(point, a), ab), a)
    ad = subtract(d, a)
    k = ad.x / ab.x if abs(ab.x) > abs(ab.y) else ad.y / ab.y
    return k, d


def distance_point_to_segment(segment: Vector, point: Point) -> float:
    """Endpoint distance gated by which side of the segment *point* projects to.

    Returns the distance to ``A`` when the foot of the perpendicular lies
    before ``A`` and the distance to ``B`` otherwise, interior included.
    Board hit-testing relies on this endpoint behaviour; use
    :func:`perpendicular_distance_point_to_segment` for the exact distance.
    A segment of zero squared length yields the distance to its start.
    """
    if _has_zero_length(segment):
        return distance(point, segment.start)
    k, _ = _position_along(segment, point)
    if k < 0:
        return distance(point, segment.start)
    return distance(point, segment.end)


def perpendicular_distance_point_to_segment(segment: Vector, point: Point) -> float:
    """Exact Euclidean distance from *point* to the finite segment."""
    if _has_zero_length(segment):
        return distance(point, segment.start)
    k, d = _position_along(segment, point)
    if k <= 0:
        return distance(point, segment.start)
    if k >= 1:
        return distance(point, segment.end)
    return distance(point, d)


def closest_point_on_circle(circle: Circle, point: Point) -> Point:
    """Point on the circumference in the direction of *point* from the center.

    When *point* is the center, ``atan2(0, 0) == 0`` picks ``center + (r, 0)``.
    """
    center = circle.center
    angle = math.atan2(point.y - center.y, point.x - center.x)
    return Point(
        center.x + math.cos(angle) * circle.radius,
        center.y + math.sin(angle) * circle.radius,
    )
