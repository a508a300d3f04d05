"""
Orientation & Segment Primitives
================================

Leaf predicates every other geometry module is built on.

Design:
- Pure functions over immutable Point / Segment values
- Tolerant comparisons go through EPSILON only
- Orientation sign convention is load-bearing: a polygon is canonical when
  its vertex order yields Orientation.CLOCKWISE
"""

import math

from zonetrace.geometry.shapes import EPSILON, Orientation, Point, Segment


def orientation(p: Point, q: Point, r: Point) -> Orientation:
    """
    Orientation of the ordered triple (p, q, r).

    Uses (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y):
    zero is colinear, negative clockwise, anything else counter-clockwise.
    """
    val = (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y)

    if val == 0:
        return Orientation.COLINEAR

    return Orientation.CLOCKWISE if val < 0 else Orientation.COUNTER_CLOCKWISE


def is_point_on_segment(segment: Segment, p: Point) -> bool:
    """
    Check whether p lies on the segment within EPSILON.

    The deviation is measured vertically against the segment's line, so
    points within tolerance of the line count as exactly on it.
    """
    if segment.p1.x <= segment.p2.x:
        left, right = segment.p1, segment.p2
    else:
        left, right = segment.p2, segment.p1

    if p.x < left.x or p.x > right.x:
        return False

    # Vertical segment
    if left.x == right.x:
        return min(left.y, right.y) <= p.y <= max(left.y, right.y)

    slope = (right.y - left.y) / (right.x - left.x)
    intercept = left.y - slope * left.x

    return abs(slope * p.x + intercept - p.y) < EPSILON


def on_colinear_segment(segment: Segment, q: Point) -> bool:
    """Check whether q, known colinear with the segment, lies within its bounds."""
    return (
        min(segment.p1.x, segment.p2.x) <= q.x <= max(segment.p1.x, segment.p2.x)
        and min(segment.p1.y, segment.p2.y) <= q.y <= max(segment.p1.y, segment.p2.y)
    )


def segments_intersect(a: Segment, b: Segment) -> bool:
    """
    Check whether two segments intersect.

    Colinear overlap and endpoint touches count as intersecting.
    """
    o1 = orientation(a.p1, a.p2, b.p1)
    o2 = orientation(a.p1, a.p2, b.p2)
    o3 = orientation(b.p1, b.p2, a.p1)
    o4 = orientation(b.p1, b.p2, a.p2)

    # General case
    if o1 != o2 and o3 != o4:
        return True

    # Colinear special cases: an endpoint of one lies on the other
    if o1 == Orientation.COLINEAR and on_colinear_segment(a, b.p1):
        return True
    if o2 == Orientation.COLINEAR and on_colinear_segment(a, b.p2):
        return True
    if o3 == Orientation.COLINEAR and on_colinear_segment(b, a.p1):
        return True
    if o4 == Orientation.COLINEAR and on_colinear_segment(b, a.p2):
        return True

    return False


def is_point_inside_triangle(s: Point, a: Point, b: Point, c: Point) -> bool:
    """
    Same-side test for s strictly inside triangle (a, b, c).

    Boundary points may go either way; callers pair this with explicit
    on-segment checks.
    """
    as_x = s.x - a.x
    as_y = s.y - a.y

    s_ab = (b.x - a.x) * as_y - (b.y - a.y) * as_x > 0
    if ((c.x - a.x) * as_y - (c.y - a.y) * as_x > 0) == s_ab:
        return False
    if ((c.x - b.x) * (s.y - b.y) - (c.y - b.y) * (s.x - b.x) > 0) != s_ab:
        return False

    return True


def points_equal(a: Point, b: Point) -> bool:
    """Exact coordinate equality."""
    return a.x == b.x and a.y == b.y


def distance(a: Point, b: Point) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)
