"""
Polygon Canonicalization
========================

The crossing classifier hard-codes a clockwise winding, so every boundary
analysis runs on a canonical polygon:

1. Redundant-vertex removal: colinear runs collapse to their endpoints.
2. Winding normalization: counter-clockwise input is reversed.

The canonical form starts at the minimum (x, y) vertex. That vertex is an
extreme point of the ring, hence always convex, so the turn at it gives the
winding of the whole polygon whatever vertex the caller started from.
"""

from typing import List

from zonetrace.geometry.primitives import is_point_on_segment, orientation
from zonetrace.geometry.shapes import Orientation, Point, Polygon, Segment


def _start_index(vertices) -> int:
    """Index of the minimum-x vertex, ties broken toward minimum y."""
    return min(range(len(vertices)), key=lambda i: (vertices[i].x, vertices[i].y))


def remove_redundant_vertices(polygon: Polygon) -> Polygon:
    """
    Drop vertices lying on the segment between their kept neighbours.

    Walks from the minimum (x, y) vertex; each vertex is tested against the
    segment from the last kept vertex to the vertex that follows it.

    A ring that would collapse below 3 vertices (a sliver within EPSILON of
    a line) is returned rotated to the start vertex, with nothing dropped.
    """
    vertices = polygon.vertices
    n = len(vertices)
    start = _start_index(vertices)
    ring = [vertices[(start + step) % n] for step in range(n)]

    kept: List[Point] = [ring[0]]
    for step in range(1, n):
        vertex = ring[step]
        following = ring[(step + 1) % n]

        if is_point_on_segment(Segment(kept[-1], following), vertex):
            continue

        kept.append(vertex)

    if len(kept) < 3:
        return Polygon(tuple(ring))

    return Polygon(tuple(kept))


def is_counter_clockwise(polygon: Polygon) -> bool:
    """
    Winding check on (v0, v1, v_last).

    Only meaningful when v0 is a convex vertex, as it is for the output of
    remove_redundant_vertices.
    """
    vertices = polygon.vertices
    turn = orientation(vertices[0], vertices[1], vertices[-1])
    return turn == Orientation.COUNTER_CLOCKWISE


def to_clockwise(polygon: Polygon) -> Polygon:
    """
    Canonicalize a polygon: remove redundant vertices, force clockwise winding.

    Rotations and reversals of the same ring share one canonical form.
    Reversal keeps the start vertex first.

    Args:
        polygon: Polygon in any winding, starting at any vertex

    Returns:
        Canonical clockwise polygon
    """
    deduped = remove_redundant_vertices(polygon)

    if is_counter_clockwise(deduped):
        head, *tail = deduped.vertices
        return Polygon((head, *reversed(tail)))

    return deduped


canonicalize = to_clockwise
