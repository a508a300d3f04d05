"""
Zone Predicates
===============

Public boolean API consumed by the drawing surface:

- is_point_inside_polygon: click hit test (boundary counts as outside)
- is_line_intersects_polygon: does a segment cross a zone boundary
- is_polyline_self_intersected: may this vertex extend the traced polyline

Inputs may be value types or plain (x, y) tuples.
"""

from typing import Sequence

from zonetrace.geometry.canonical import to_clockwise
from zonetrace.geometry.classifier import count_crossings
from zonetrace.geometry.primitives import (
    is_point_on_segment,
    points_equal,
    segments_intersect,
)
from zonetrace.geometry.shapes import (
    RAY_FAR_X,
    Point,
    PointLike,
    PolygonLike,
    Segment,
    SegmentLike,
    as_point,
    as_points,
    as_polygon,
    as_segment,
)


def is_point_on_polygon(point: PointLike, polygon: PolygonLike) -> bool:
    """Check whether point lies on any edge of polygon (within EPSILON)."""
    point = as_point(point)
    polygon = as_polygon(polygon)

    return any(is_point_on_segment(edge, point) for edge in polygon.edges())


def is_point_inside_polygon(point: PointLike, polygon: PolygonLike) -> bool:
    """
    Check whether point lies strictly inside polygon.

    Boundary points (checked against the caller's vertices) are outside.
    Otherwise a horizontal ray from the point to RAY_FAR_X is counted
    against the canonical polygon; an odd count means inside.

    Raises:
        InvalidPolygonError: If polygon has fewer than 3 vertices
    """
    point = as_point(point)
    polygon = as_polygon(polygon)

    if is_point_on_polygon(point, polygon):
        return False

    ray = Segment(Point(RAY_FAR_X, point.y), point)
    crossings = count_crossings(ray, to_clockwise(polygon))

    return crossings % 2 == 1


def is_line_intersects_polygon(segment: SegmentLike, polygon: PolygonLike) -> bool:
    """
    Check whether segment crosses the polygon boundary.

    Reports boundary crossing only; a segment wholly inside does not cross.

    Raises:
        InvalidPolygonError: If polygon has fewer than 3 vertices
    """
    segment = as_segment(segment)
    polygon = as_polygon(polygon)

    return count_crossings(segment, to_clockwise(polygon), max_crossings=1) > 0


def is_polyline_self_intersected(
    polyline: Sequence[PointLike],
    new_point: PointLike,
) -> bool:
    """
    Check whether appending new_point makes the polyline self-intersect.

    The new segment runs from the last vertex to new_point. It is tested
    against every earlier segment except the immediately preceding one,
    which shares an endpoint; that one is checked only for doubling back.
    Closing onto the first vertex does not count as touching the first
    segment.

    Args:
        polyline: Vertices traced so far (fewer than 2 returns False)
        new_point: Candidate vertex

    Returns:
        True if the candidate segment intersects the polyline
    """
    points = as_points(polyline)
    new_point = as_point(new_point)

    if len(points) < 2:
        return False

    new_segment = Segment(points[-1], new_point)
    closing = len(points) > 2 and points_equal(new_point, points[0])

    for i in range(len(points) - 2):
        segment = Segment(points[i], points[i + 1])

        if i == 0 and closing:
            # Shares the start vertex; only overlap counts
            if is_point_on_segment(new_segment, segment.p2) or is_point_on_segment(
                segment, new_segment.p1
            ):
                return True
            continue

        if segments_intersect(new_segment, segment):
            return True

    last_segment = Segment(points[-2], points[-1])
    return is_point_on_segment(last_segment, new_point) or is_point_on_segment(
        new_segment, last_segment.p1
    )
