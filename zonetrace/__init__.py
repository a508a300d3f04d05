"""
zonetrace
=========

Bounded Context: Validation of interactively drawn zones.

Design Philosophy:
- Separation of Concerns: Geometry, Tracing, Logging separated
- Geometry is pure (immutable values, no state, no I/O)
- One tolerance constant for every approximate comparison

Architecture:

    zonetrace/
    ├── geometry/          # Pure geometry (immutable, stateless)
    │   ├── shapes.py      # Point, Segment, Polygon, EPSILON
    │   ├── primitives.py  # orientation, segment tests
    │   ├── canonical.py   # clockwise canonical polygons
    │   ├── classifier.py  # edge/vertex crossing classifier
    │   ├── predicates.py  # public predicates
    │   └── detector.py    # ZoneDetector (multi-zone hit tests)
    │
    ├── tracing/           # Drawing session (stateful)
    │   └── session.py     # ZoneTracer, TracedZone
    │
    ├── logging/           # Structured JSON logging
    └── config.py          # YAML configuration

Usage:

    # 1. Predicates (stateless)
    from zonetrace import is_point_inside_polygon, is_line_intersects_polygon

    square = [(0, 0), (10, 0), (10, 10), (0, 10)]
    is_point_inside_polygon((5, 5), square)               # True
    is_line_intersects_polygon(((5, 5), (15, 15)), square)  # True

    # 2. Self-intersection of a traced polyline
    from zonetrace import is_polyline_self_intersected

    is_polyline_self_intersected([(0, 0), (10, 10), (10, 0)], (0, 10))  # True

    # 3. Tracing session (stateful)
    from zonetrace import ZoneTracer

    tracer = ZoneTracer("entrance", existing_zones={"lobby": Polygon(...)})
    tracer.add_vertex((0, 0))
    ...
    zone = tracer.close()
"""

# Geometry Layer (immutable, stateless)
from zonetrace.geometry import (
    EPSILON,
    InvalidPolygonError,
    Point,
    Polygon,
    Segment,
    ZoneDetector,
    is_line_intersects_polygon,
    is_point_inside_polygon,
    is_point_on_polygon,
    is_polyline_self_intersected,
)

# Tracing Layer (stateful)
from zonetrace.tracing import TracedZone, TracingError, VertexDecision, ZoneTracer

# Configuration
from zonetrace.config import TraceConfig, ZoneConfig

__all__ = [
    # Geometry
    "EPSILON",
    "InvalidPolygonError",
    "Point",
    "Polygon",
    "Segment",
    "ZoneDetector",
    "is_line_intersects_polygon",
    "is_point_inside_polygon",
    "is_point_on_polygon",
    "is_polyline_self_intersected",
    # Tracing
    "TracedZone",
    "TracingError",
    "VertexDecision",
    "ZoneTracer",
    # Config
    "TraceConfig",
    "ZoneConfig",
]

__version__ = "1.0.0"
