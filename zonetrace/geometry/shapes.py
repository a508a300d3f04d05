"""
Geometric Shapes Module
========================

Pure geometric value types - NO state, NO side effects.

Design:
- Immutable shapes (frozen dataclass pattern)
- Fail-fast validation in __post_init__
- Plain (x, y) tuples accepted at the API edge and coerced here
- Thread-safe by design (immutability)
"""

import math
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Sequence, Tuple, Union

import numpy as np


EPSILON = 0.01
"""Absolute tolerance (input units) for point-on-line decisions."""

RAY_FAR_X = sys.float_info.max * 0.9
"""Far end of the horizontal ray cast by the containment test."""


class InvalidPolygonError(ValueError):
    """Raised when a polygon cannot be built from the given vertices."""
    pass


class Orientation(Enum):
    """Turn direction of an ordered point triple."""

    COLINEAR = 0
    CLOCKWISE = 1
    COUNTER_CLOCKWISE = 2


class AngleKind(Enum):
    """
    Classification of the wedge (prev, vertex, next) of a clockwise polygon.

    INTERIOR: the wedge turns counter-clockwise, against the winding.
    EXTERIOR: any other turn (including colinear).
    """

    INTERIOR = "interior"
    EXTERIOR = "exterior"


@dataclass(frozen=True)
class Point:
    """
    Immutable 2D point.

    Equality is exact; tolerant comparisons live in primitives.

    Attributes:
        x: x-coordinate
        y: y-coordinate
    """

    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, value: Sequence[float]) -> "Point":
        """
        Build a point from an (x, y) pair.

        Raises:
            ValueError: If value is not a pair of numbers
        """
        try:
            x, y = value
            return cls(x=float(x), y=float(y))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid point {value!r}: {e}")


PointLike = Union[Point, Sequence[float]]


@dataclass(frozen=True)
class Segment:
    """
    Immutable ordered segment.

    Direction matters to the crossing classifier (p1 is the query origin,
    p2 the far endpoint) but not to plain intersection tests.
    """

    p1: Point
    p2: Point

    def reversed(self) -> "Segment":
        return Segment(self.p2, self.p1)

    @property
    def length(self) -> float:
        return math.hypot(self.p2.x - self.p1.x, self.p2.y - self.p1.y)


@dataclass(frozen=True)
class Polygon:
    """
    Immutable simple polygon, implicitly closed (last vertex joins the first).

    Winding is not guaranteed; boundary analysis canonicalizes it.
    Simplicity (no self-intersection) is the caller's responsibility.

    Attributes:
        vertices: Tuple of at least three points
    """

    vertices: Tuple[Point, ...]

    def __post_init__(self):
        """Validate and freeze vertices."""
        vertices = tuple(as_point(v) for v in self.vertices)
        if len(vertices) < 3:
            raise InvalidPolygonError(
                f"Polygon must have at least 3 vertices, got {len(vertices)}"
            )
        object.__setattr__(self, "vertices", vertices)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Polygon":
        """
        Build a polygon from an Nx2 array of (x, y) vertices.

        Raises:
            InvalidPolygonError: If the array is not Nx2 or has N < 3
        """
        array = np.asarray(array, dtype=float)
        if array.ndim != 2 or array.shape[1] != 2:
            raise InvalidPolygonError(
                f"vertices must be Nx2 array, got shape {array.shape}"
            )
        return cls(tuple(Point(float(x), float(y)) for x, y in array))

    def to_array(self) -> np.ndarray:
        """Return vertices as a read-only Nx2 float array."""
        array = np.array([v.as_tuple() for v in self.vertices], dtype=float)
        array.flags.writeable = False
        return array

    def edges(self) -> Iterator[Segment]:
        """Iterate edges in vertex order, closing edge last."""
        n = len(self.vertices)
        for i in range(n):
            yield Segment(self.vertices[i], self.vertices[(i + 1) % n])

    def reversed(self) -> "Polygon":
        return Polygon(tuple(reversed(self.vertices)))

    def __iter__(self) -> Iterator[Point]:
        return iter(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)


SegmentLike = Union[Segment, Sequence[PointLike]]
PolygonLike = Union[Polygon, np.ndarray, Sequence[PointLike]]


def as_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    return Point.from_tuple(value)


def as_segment(value: SegmentLike) -> Segment:
    if isinstance(value, Segment):
        return value
    p1, p2 = value
    return Segment(as_point(p1), as_point(p2))


def as_polygon(value: PolygonLike) -> Polygon:
    if isinstance(value, Polygon):
        return value
    if isinstance(value, np.ndarray):
        return Polygon.from_array(value)
    return Polygon(tuple(value))


def as_points(values: Iterable[PointLike]) -> Tuple[Point, ...]:
    return tuple(as_point(v) for v in values)
