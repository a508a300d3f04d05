"""
Tracing Session & Detector Tests
================================

Usage:
    pytest test_tracing.py
"""

import json
import logging

import numpy as np
import pytest

from zonetrace import (
    Point,
    Polygon,
    TracingError,
    VertexDecision,
    ZoneDetector,
    ZoneTracer,
)
from zonetrace.logging import LogEvent, StructuredLogger

LOBBY = Polygon(((0, 0), (10, 0), (10, 10), (0, 10)))
DOCK = Polygon(((20, 0), (30, 0), (30, 10), (20, 10)))


@pytest.fixture
def zones():
    return {"lobby": LOBBY, "dock": DOCK}


# ========== ZoneDetector ==========

def test_find_zone(zones):
    assert ZoneDetector.find_zone((5, 5), zones) == "lobby"
    assert ZoneDetector.find_zone((25, 5), zones) == "dock"
    assert ZoneDetector.find_zone((15, 5), zones) is None
    # Boundary is outside
    assert ZoneDetector.find_zone((10, 5), zones) is None


def test_crossed_zones(zones):
    assert ZoneDetector.crossed_zones(((5, 5), (25, 5)), zones) == ["lobby", "dock"]
    assert ZoneDetector.crossed_zones(((15, 0), (15, 10)), zones) == []


def test_contains_points_mask():
    points = np.array([[5, 5], [15, 5], [0, 5], [9, 1]])

    mask = ZoneDetector.contains_points(points, LOBBY)

    assert mask.dtype == bool
    assert mask.tolist() == [True, False, False, True]
    assert ZoneDetector.contains_points(np.empty((0, 2)), LOBBY).size == 0

    with pytest.raises(ValueError):
        ZoneDetector.contains_points(np.zeros((3, 3)), LOBBY)


# ========== ZoneTracer ==========

def test_trace_and_close_square():
    tracer = ZoneTracer("parking")

    for vertex in [(0, 0), (10, 0), (10, 10), (0, 10)]:
        assert tracer.add_vertex(vertex) is VertexDecision.ACCEPTED

    assert len(tracer) == 4
    assert tracer.can_close()

    zone = tracer.close()

    assert zone.zone_id == "parking"
    assert [v.as_tuple() for v in zone.polygon] == [(0, 0), (10, 0), (10, 10), (0, 10)]
    assert len(tracer) == 0


def test_duplicate_vertex_rejected():
    tracer = ZoneTracer("parking")
    tracer.add_vertex((0, 0))
    tracer.add_vertex((10, 0))

    assert tracer.add_vertex((10, 0)) is VertexDecision.REJECTED_DUPLICATE
    assert tracer.add_vertex(Point(0, 0)) is VertexDecision.REJECTED_DUPLICATE
    assert len(tracer) == 2


def test_self_intersecting_vertex_rejected():
    tracer = ZoneTracer("parking")
    for vertex in [(0, 0), (10, 10), (10, 0)]:
        tracer.add_vertex(vertex)

    decision = tracer.add_vertex((0, 10))

    assert decision is VertexDecision.REJECTED_SELF_INTERSECTION
    assert not decision.accepted
    assert tracer.vertices == (Point(0, 0), Point(10, 10), Point(10, 0))


def test_vertex_inside_existing_zone_rejected(zones):
    tracer = ZoneTracer("parking", existing_zones=zones)

    assert tracer.add_vertex((5, 5)) is VertexDecision.REJECTED_INSIDE_ZONE
    assert len(tracer) == 0


def test_segment_crossing_existing_zone_rejected(zones):
    tracer = ZoneTracer("parking", existing_zones=zones)
    tracer.add_vertex((15, 5))

    assert tracer.add_vertex((-5, 5)) is VertexDecision.REJECTED_ZONE_OVERLAP
    assert len(tracer) == 1


def test_allow_overlap_skips_zone_checks(zones):
    tracer = ZoneTracer("parking", existing_zones=zones, allow_overlap=True)
    tracer.add_vertex((15, 5))

    assert tracer.add_vertex((-5, 5)) is VertexDecision.ACCEPTED
    assert tracer.add_vertex((5, 8)) is VertexDecision.ACCEPTED


def test_close_requires_three_vertices():
    tracer = ZoneTracer("parking")
    tracer.add_vertex((0, 0))
    tracer.add_vertex((10, 0))

    assert not tracer.can_close()
    with pytest.raises(TracingError):
        tracer.close()
    assert len(tracer) == 2


def test_closing_edge_crossing_zone_rejected():
    tracer = ZoneTracer("parking", existing_zones={"lobby": LOBBY})
    for vertex in [(-5, 5), (-5, 20), (20, 20)]:
        assert tracer.add_vertex(vertex) is VertexDecision.ACCEPTED

    with pytest.raises(TracingError, match="lobby"):
        tracer.close()


def test_undo_and_reset():
    tracer = ZoneTracer("parking")
    tracer.add_vertex((0, 0))
    tracer.add_vertex((10, 0))

    assert tracer.undo() == Point(10, 0)
    assert len(tracer) == 1

    tracer.reset()
    assert len(tracer) == 0
    assert tracer.undo() is None
    assert repr(tracer) == "ZoneTracer(zone_id='parking', vertices=0)"


def test_rejection_is_logged(caplog):
    logger = StructuredLogger(component="tracer_test", level=logging.DEBUG)
    tracer = ZoneTracer("parking", logger=logger)
    tracer.add_vertex((0, 0))

    with caplog.at_level(logging.DEBUG, logger="zonetrace.tracer_test"):
        tracer.add_vertex((0, 0))

    entry = json.loads(caplog.records[-1].getMessage())
    assert entry["event"] == LogEvent.TRACE_VERTEX_REJECTED.value
    assert entry["component"] == "tracer_test"
    assert entry["metadata"]["decision"] == "rejected_duplicate"
