"""
Geometry Primitives & Canonicalization Tests
============================================

Usage:
    pytest test_geometry.py
"""

import numpy as np
import pytest

from zonetrace.geometry import (
    EPSILON,
    AngleKind,
    InvalidPolygonError,
    Orientation,
    Point,
    Polygon,
    Segment,
    angle_kind,
    canonicalize,
    count_crossings,
    crosses_edge,
    distance,
    is_point_inside_polygon,
    is_point_inside_triangle,
    is_point_on_segment,
    orientation,
    points_equal,
    remove_redundant_vertices,
    segments_intersect,
    to_clockwise,
)

SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10)]
L_SHAPE = [(0, 0), (20, 0), (20, 10), (10, 10), (10, 20), (0, 20)]


def seg(a, b) -> Segment:
    return Segment(Point(*a), Point(*b))


def coords(polygon: Polygon):
    return [v.as_tuple() for v in polygon]


# ========== Orientation ==========

def test_orientation_sign_convention():
    """Negative cross term is clockwise, positive counter-clockwise."""
    assert orientation(Point(0, 0), Point(10, 0), Point(10, 10)) == Orientation.CLOCKWISE
    assert orientation(Point(0, 0), Point(10, 10), Point(10, 0)) == Orientation.COUNTER_CLOCKWISE
    assert orientation(Point(0, 0), Point(5, 5), Point(10, 10)) == Orientation.COLINEAR


def test_angle_kind():
    # Right turn of a clockwise polygon corner
    assert angle_kind(seg((0, 0), (20, 0)), Point(20, 10)) is AngleKind.EXTERIOR
    # Notch corner of the L shape
    assert angle_kind(seg((20, 10), (10, 10)), Point(10, 20)) is AngleKind.INTERIOR
    # Straight continuation
    assert angle_kind(seg((0, 0), (5, 0)), Point(10, 0)) is AngleKind.EXTERIOR


# ========== Point on segment ==========

def test_point_on_segment_tolerance():
    edge = seg((0, 0), (10, 0))

    assert EPSILON == 0.01
    assert is_point_on_segment(edge, Point(5, 0))
    assert is_point_on_segment(edge, Point(5, 0.009))
    assert not is_point_on_segment(edge, Point(5, 0.011))
    assert not is_point_on_segment(edge, Point(11, 0))
    assert not is_point_on_segment(edge, Point(-0.001, 0))


def test_point_on_segment_direction_independent():
    assert is_point_on_segment(seg((10, 10), (0, 0)), Point(3, 3))
    assert is_point_on_segment(seg((0, 0), (10, 10)), Point(3, 3))


def test_point_on_vertical_segment():
    edge = seg((0, 0), (0, 10))

    assert is_point_on_segment(edge, Point(0, 5))
    assert is_point_on_segment(edge, Point(0, 10))
    assert not is_point_on_segment(edge, Point(0, 11))
    assert not is_point_on_segment(edge, Point(0.001, 5))


# ========== Segment intersection ==========

def test_segments_intersect_general_case():
    assert segments_intersect(seg((0, 0), (10, 10)), seg((0, 10), (10, 0)))
    assert not segments_intersect(seg((0, 0), (10, 0)), seg((0, 1), (10, 1)))


def test_segments_intersect_colinear_cases():
    # Overlap
    assert segments_intersect(seg((0, 0), (10, 0)), seg((5, 0), (15, 0)))
    # Disjoint on the same line
    assert not segments_intersect(seg((0, 0), (4, 0)), seg((5, 0), (9, 0)))
    # T-touch
    assert segments_intersect(seg((0, 0), (10, 0)), seg((5, 0), (5, 5)))


# ========== Triangle ==========

def test_point_inside_triangle():
    a, b, c = Point(0, 0), Point(10, 0), Point(0, 10)

    assert is_point_inside_triangle(Point(2, 1), a, b, c)
    assert not is_point_inside_triangle(Point(8, 8), a, b, c)
    # Vertex order does not matter
    assert is_point_inside_triangle(Point(2, 1), a, c, b)


# ========== Misc primitives ==========

def test_points_equal_and_distance():
    assert points_equal(Point(1, 2), Point(1.0, 2.0))
    assert not points_equal(Point(1, 2), Point(1, 2.001))
    assert distance(Point(0, 0), Point(3, 4)) == 5
    assert seg((0, 0), (3, 4)).length == 5


# ========== Shapes ==========

def test_polygon_requires_three_vertices():
    with pytest.raises(InvalidPolygonError):
        Polygon(((0, 0), (1, 1)))

    # InvalidPolygonError is a ValueError
    with pytest.raises(ValueError):
        is_point_inside_polygon((0, 0), [(0, 0), (1, 1)])


def test_polygon_from_array():
    polygon = Polygon.from_array(np.array(SQUARE))

    assert coords(polygon) == [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]
    assert polygon.to_array().shape == (4, 2)
    assert not polygon.to_array().flags.writeable

    with pytest.raises(InvalidPolygonError):
        Polygon.from_array(np.zeros((4, 3)))


def test_polygon_edges_close_the_ring():
    edges = list(Polygon(tuple(SQUARE)).edges())

    assert len(edges) == 4
    assert edges[-1] == seg((0, 10), (0, 0))


# ========== Canonicalization ==========

def test_remove_redundant_vertices():
    polygon = Polygon(((0, 0), (5, 0), (10, 0), (10, 10), (0, 10)))

    assert coords(remove_redundant_vertices(polygon)) == SQUARE


def test_canonical_starts_at_min_vertex():
    polygon = Polygon(((10, 10), (0, 10), (0, 0), (10, 0)))

    assert coords(to_clockwise(polygon)) == SQUARE


def test_counter_clockwise_input_is_reversed():
    polygon = Polygon(((0, 0), (0, 10), (10, 10), (10, 0)))

    assert coords(to_clockwise(polygon)) == SQUARE


def test_reversed_l_shape_has_same_canonical_form():
    polygon = Polygon(tuple(L_SHAPE))

    assert coords(to_clockwise(polygon.reversed())) == L_SHAPE
    assert coords(to_clockwise(polygon)) == L_SHAPE


@pytest.mark.parametrize("vertices", [
    SQUARE,
    list(reversed(SQUARE)),
    L_SHAPE,
    list(reversed(L_SHAPE)),
    [(0, 0), (15, 0), (20, 0), (20, 10), (10, 10), (10, 20), (0, 20)],
])
def test_canonicalization_is_idempotent(vertices):
    once = canonicalize(Polygon(tuple(vertices)))
    twice = canonicalize(once)

    assert coords(twice) == coords(once)


@pytest.mark.parametrize("shift", range(len(L_SHAPE)))
@pytest.mark.parametrize("flip", [False, True])
def test_canonical_form_ignores_start_vertex(shift, flip):
    """Starting at the reflex corner (10, 10) must not flip the winding."""
    vertices = L_SHAPE[shift:] + L_SHAPE[:shift]
    if flip:
        vertices = vertices[::-1]

    assert coords(to_clockwise(Polygon(tuple(vertices)))) == L_SHAPE


def test_sliver_triangle_keeps_its_vertices():
    # Middle vertex within EPSILON of the chord
    polygon = Polygon(((100, 0.005), (200, 0), (0, 0)))

    assert coords(remove_redundant_vertices(polygon)) == [(0, 0), (100, 0.005), (200, 0)]
    assert coords(to_clockwise(polygon)) == [(0, 0), (200, 0), (100, 0.005)]


# ========== Crossing classifier ==========
#
# Square corner (10, 0) is convex: the wedge (0,0)-(10,0)-(10,10) lies
# inside the clockwise square. Notch corner (10, 10) of the L shape is
# reflex: the wedge (20,10)-(10,10)-(10,20) lies outside.

CONVEX_EDGE = seg((0, 0), (10, 0))
CONVEX_NEXT = Point(10, 10)
REFLEX_EDGE = seg((20, 10), (10, 10))
REFLEX_NEXT = Point(10, 20)


def test_plain_crossing():
    assert crosses_edge(seg((5, -5), (5, 5)), CONVEX_EDGE, CONVEX_NEXT)
    assert not crosses_edge(seg((5, -5), (5, -1)), CONVEX_EDGE, CONVEX_NEXT)


def test_far_endpoint_on_edge_is_not_a_crossing():
    assert not crosses_edge(seg((5, -5), (5, 0)), CONVEX_EDGE, CONVEX_NEXT)


def test_touch_at_p1_belongs_to_previous_edge():
    line = seg((-5, -5), (5, 5))

    assert not crosses_edge(line, CONVEX_EDGE, CONVEX_NEXT)
    assert crosses_edge(line, seg((0, 10), (0, 0)), Point(10, 0))
    assert count_crossings(line, Polygon(tuple(SQUARE))) == 1


def test_through_reflex_vertex():
    assert crosses_edge(seg((15, 15), (5, 5)), REFLEX_EDGE, REFLEX_NEXT)


def test_stopping_on_reflex_vertex():
    assert not crosses_edge(seg((15, 15), (10, 10)), REFLEX_EDGE, REFLEX_NEXT)


def test_through_convex_vertex():
    assert crosses_edge(seg((15, -5), (5, 5)), CONVEX_EDGE, CONVEX_NEXT)


def test_stopping_on_convex_vertex():
    assert not crosses_edge(seg((15, -5), (10, 0)), CONVEX_EDGE, CONVEX_NEXT)


def test_grazing_convex_vertex():
    assert not crosses_edge(seg((15, 5), (5, -5)), CONVEX_EDGE, CONVEX_NEXT)


def test_sliding_along_incoming_edge():
    assert not crosses_edge(seg((15, 0), (-5, 0)), CONVEX_EDGE, CONVEX_NEXT)


def test_sliding_along_outgoing_edge():
    assert not crosses_edge(seg((10, -5), (10, 15)), CONVEX_EDGE, CONVEX_NEXT)


def test_from_rib_at_reflex_corner():
    # Origin mid-edge on the notch floor
    assert crosses_edge(seg((15, 10), (15, 5)), REFLEX_EDGE, REFLEX_NEXT)
    # Into the notch wedge
    assert not crosses_edge(seg((15, 10), (15, 12)), REFLEX_EDGE, REFLEX_NEXT)
    # Back onto the next rib
    assert not crosses_edge(seg((15, 10), (10, 15)), REFLEX_EDGE, REFLEX_NEXT)


def test_from_rib_at_convex_corner():
    # Into the wedge
    assert crosses_edge(seg((5, 0), (5, 3)), CONVEX_EDGE, CONVEX_NEXT)
    # Away from the wedge
    assert not crosses_edge(seg((5, 0), (5, -5)), CONVEX_EDGE, CONVEX_NEXT)
    # Along the same rib
    assert not crosses_edge(seg((5, 0), (8, 0)), CONVEX_EDGE, CONVEX_NEXT)
    # From one rib to the other
    assert crosses_edge(seg((5, 0), (10, 5)), CONVEX_EDGE, CONVEX_NEXT)


def test_count_crossings_stops_at_max():
    line = seg((-5, 5), (30, 5))
    polygon = Polygon(tuple(L_SHAPE))

    assert count_crossings(line, polygon) == 2
    assert count_crossings(line, polygon, max_crossings=1) == 1
