"""Geometry layer: points, segments and the compass direction table."""

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
from chessgrid.geometry.ops import (
    DegenerateGeometryError,
    absolute_vector,
    add,
    closest_point_on_circle,
    closest_point_on_segment,
    distance,
    distance_point_to_segment,
    dot,
    perpendicular_distance_point_to_segment,
    project,
    relative_vector,
    squared_distance,
    subtract,
    translate_point,
)
from chessgrid.geometry.primitives import ORIGIN, Circle, Point, Vector

__all__ = [
    # Primitives
    "ORIGIN",
    "Circle",
    "Point",
    "Vector",
    # Operations
    "DegenerateGeometryError",
    "absolute_vector",
    "add",
    "closest_point_on_circle",
    "closest_point_on_segment",
    "distance",
    "distance_point_to_segment",
    "dot",
    "perpendicular_distance_point_to_segment",
    "project",
    "relative_vector",
    "squared_distance",
    "subtract",
    "translate_point",
    # Directions
    "ALL_DIRECTIONS",
    "DIAGONAL",
    "DIRECTIONS_BY_NAME",
    "EAST",
    "NORTH",
    "NORTHEAST",
    "NORTHWEST",
    "ORTHOGONAL",
    "SOUTH",
    "SOUTHEAST",
    "SOUTHWEST",
    "WEST",
    "step",
]
