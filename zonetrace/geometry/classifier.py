"""
Edge/Vertex Crossing Classifier
===============================

Decides, for one polygon edge (p1, p2) and the vertex following p2, whether
a query segment crosses the polygon boundary exactly once at that locus.

Summing the classifier over every edge of a canonical (clockwise) polygon
gives the crossing count used by both the line-vs-polygon test and the
containment ray cast.

Attribution rule:
    A touch exactly at a vertex belongs to the edge where that vertex is p2.
    If the query touches p1 but not p2 the edge reports nothing; the previous
    edge accounts for it.

Sub-cases, in priority order:
    from-rib  the query origin lies on the edge
    vertex    p2 lies on the query
    plain     ordinary segment intersection
"""

from typing import Optional

from zonetrace.geometry.primitives import (
    is_point_inside_triangle,
    is_point_on_segment,
    orientation,
    points_equal,
    segments_intersect,
)
from zonetrace.geometry.shapes import AngleKind, Orientation, Point, Polygon, Segment


def angle_kind(edge: Segment, next_vertex: Point) -> AngleKind:
    """Classify the wedge (edge.p1, edge.p2, next_vertex)."""
    turn = orientation(edge.p1, edge.p2, next_vertex)

    # Clockwise polygon: the interior wedge turns the opposite way
    if turn == Orientation.COUNTER_CLOCKWISE:
        return AngleKind.INTERIOR
    return AngleKind.EXTERIOR


def crosses_edge(line: Segment, edge: Segment, next_vertex: Point) -> bool:
    """
    Check whether line crosses the boundary once at this edge's locus.

    Args:
        line: Query segment; p1 is its origin, p2 its far endpoint
        edge: Polygon edge (p1, p2) in canonical winding
        next_vertex: Vertex following edge.p2

    Returns:
        True if a crossing is attributed to this edge
    """
    vertex1_on_line = is_point_on_segment(line, edge.p1)
    vertex2_on_line = is_point_on_segment(line, edge.p2)

    if vertex1_on_line and not vertex2_on_line:
        return False

    if is_point_on_segment(edge, line.p1):
        return _crosses_from_rib(line, edge, next_vertex)

    if vertex2_on_line:
        return _crosses_vertex(line, edge, next_vertex)

    # Origin on the edge was handled above; a far endpoint resting on the
    # boundary is not a crossing by itself
    return (
        not is_point_on_segment(edge, line.p2)
        and segments_intersect(line, edge)
    )


def _crosses_vertex(line: Segment, edge: Segment, next_vertex: Point) -> bool:
    """The query passes through edge.p2."""
    kind = angle_kind(edge, next_vertex)

    if kind is AngleKind.INTERIOR:
        # Only a query stopping exactly on the vertex misses
        return not points_equal(line.p2, edge.p2)

    if points_equal(line.p2, edge.p2):
        return False

    # Sliding along the incoming or outgoing edge
    if is_point_on_segment(line, edge.p1) or is_point_on_segment(line, next_vertex):
        return False

    chord = Segment(edge.p1, next_vertex)
    if segments_intersect(line, chord):
        return True
    if is_point_inside_triangle(line.p2, edge.p1, edge.p2, next_vertex):
        return True

    # Tangential graze
    return False


def _crosses_from_rib(line: Segment, edge: Segment, next_vertex: Point) -> bool:
    """The query originates on the edge."""
    kind = angle_kind(edge, next_vertex)
    chord = Segment(edge.p1, next_vertex)
    next_rib = Segment(edge.p2, next_vertex)

    if kind is AngleKind.INTERIOR:
        if segments_intersect(line, chord):
            return False

        # Far endpoint stays in the wedge or lands back on one of its ribs
        if (
            is_point_inside_triangle(line.p2, edge.p1, edge.p2, next_vertex)
            or is_point_on_segment(next_rib, line.p2)
            or is_point_on_segment(edge, line.p2)
        ):
            return False

        return True

    if (
        not is_point_on_segment(line, edge.p1)
        and not is_point_on_segment(line, next_vertex)
        and segments_intersect(line, chord)
    ):
        return True

    p1_on_rib = is_point_on_segment(edge, line.p1)
    p1_on_next_rib = is_point_on_segment(next_rib, line.p1)
    p2_on_rib = is_point_on_segment(edge, line.p2)
    p2_on_next_rib = is_point_on_segment(next_rib, line.p2)

    on_same_rib = (p1_on_rib and p2_on_rib) or (p1_on_next_rib and p2_on_next_rib)
    on_different_ribs = not on_same_rib and (
        (p1_on_rib and p2_on_next_rib) or (p2_on_rib and p1_on_next_rib)
    )

    if on_different_ribs or is_point_inside_triangle(
        line.p2, edge.p1, edge.p2, next_vertex
    ):
        return True

    return False


def count_crossings(
    line: Segment,
    polygon: Polygon,
    max_crossings: Optional[int] = None,
) -> int:
    """
    Count boundary crossings of line against every (edge, next vertex) triple.

    Args:
        line: Query segment
        polygon: Polygon in the winding the classifier expects
        max_crossings: Stop once this many crossings are found (None = all)

    Returns:
        Number of crossings found (capped by max_crossings)
    """
    vertices = polygon.vertices
    n = len(vertices)
    crossings = 0

    for i in range(n):
        edge = Segment(vertices[i], vertices[(i + 1) % n])
        next_vertex = vertices[(i + 2) % n]

        if crosses_edge(line, edge, next_vertex):
            crossings += 1

        if max_crossings is not None and crossings >= max_crossings:
            break

    return crossings
