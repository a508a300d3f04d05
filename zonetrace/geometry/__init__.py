"""
Geometry Layer
==============

Bounded Context: Pure geometric predicates over simple polygons.

Responsibilities:
- Value types (Point, Segment, Polygon)
- Orientation and segment primitives
- Polygon canonicalization (clockwise, no redundant vertices)
- Boundary crossing, containment and self-intersection predicates
- NO state, NO logging, NO I/O

Design Philosophy:
- Pure functions over immutable values
- One tolerance constant (EPSILON) for every approximate comparison
- Fail-fast validation
"""

from zonetrace.geometry.shapes import (
    EPSILON,
    RAY_FAR_X,
    AngleKind,
    InvalidPolygonError,
    Orientation,
    Point,
    Polygon,
    Segment,
)
from zonetrace.geometry.primitives import (
    distance,
    is_point_inside_triangle,
    is_point_on_segment,
    orientation,
    points_equal,
    segments_intersect,
)
from zonetrace.geometry.canonical import canonicalize, remove_redundant_vertices, to_clockwise
from zonetrace.geometry.classifier import angle_kind, count_crossings, crosses_edge
from zonetrace.geometry.predicates import (
    is_line_intersects_polygon,
    is_point_inside_polygon,
    is_point_on_polygon,
    is_polyline_self_intersected,
)
from zonetrace.geometry.detector import ZoneDetector

__all__ = [
    # Shapes
    "EPSILON",
    "RAY_FAR_X",
    "AngleKind",
    "InvalidPolygonError",
    "Orientation",
    "Point",
    "Polygon",
    "Segment",
    # Primitives
    "distance",
    "is_point_inside_triangle",
    "is_point_on_segment",
    "orientation",
    "points_equal",
    "segments_intersect",
    # Canonicalization
    "canonicalize",
    "remove_redundant_vertices",
    "to_clockwise",
    # Classifier
    "angle_kind",
    "count_crossings",
    "crosses_edge",
    # Predicates
    "is_line_intersects_polygon",
    "is_point_inside_polygon",
    "is_point_on_polygon",
    "is_polyline_self_intersected",
    # Detector
    "ZoneDetector",
]
