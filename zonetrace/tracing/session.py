"""
Tracing Session Module
======================

Stateful validation of a zone while the user draws it vertex by vertex.

Design:
- Mutable polyline (private state)
- Immutable snapshots (TracedZone)
- Geometry delegated to zonetrace.geometry predicates
- Thread-safety via encapsulation (caller must synchronize if multi-threaded)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Mapping, Optional, Tuple

from zonetrace.geometry import (
    Point,
    Polygon,
    Segment,
    ZoneDetector,
    is_polyline_self_intersected,
    points_equal,
)
from zonetrace.geometry.shapes import PointLike, as_point
from zonetrace.logging import LogEvent, StructuredLogger, create_logger


class TracingError(RuntimeError):
    """Raised when a tracing session cannot be closed into a zone."""
    pass


class VertexDecision(str, Enum):
    """Outcome of offering a vertex to the tracer."""

    ACCEPTED = "accepted"
    REJECTED_DUPLICATE = "rejected_duplicate"
    REJECTED_SELF_INTERSECTION = "rejected_self_intersection"
    REJECTED_ZONE_OVERLAP = "rejected_zone_overlap"
    REJECTED_INSIDE_ZONE = "rejected_inside_zone"

    @property
    def accepted(self) -> bool:
        return self is VertexDecision.ACCEPTED


@dataclass(frozen=True)
class TracedZone:
    """
    Immutable result of a closed tracing session.

    Attributes:
        zone_id: Identifier given to the tracer
        polygon: Closed zone geometry, vertices in drawing order
    """

    zone_id: str
    polygon: Polygon

    def __str__(self) -> str:
        return f"{self.zone_id}: {len(self.polygon)} vertices"


class ZoneTracer:
    """
    Accepts or rejects vertices of a zone being drawn.

    A vertex is rejected when it repeats an accepted vertex, when its segment
    makes the polyline self-intersect, when it falls inside another zone, or
    (unless allow_overlap) when its segment crosses another zone's boundary.
    Rejected vertices leave the session unchanged.

    Usage:
        tracer = ZoneTracer("entrance", existing_zones={"lobby": lobby})

        # Each click
        decision = tracer.add_vertex((x, y))
        if not decision.accepted:
            show_warning(decision)

        # Double click
        if tracer.can_close():
            zone = tracer.close()
    """

    def __init__(
        self,
        zone_id: str,
        existing_zones: Optional[Mapping[str, Polygon]] = None,
        allow_overlap: bool = False,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Args:
            zone_id: Identifier of the zone being traced
            existing_zones: Zones the new one must not enter ({zone_id: Polygon})
            allow_overlap: Skip the boundary-crossing checks against existing zones
            logger: Structured logger (default: create_logger("tracer"))
        """
        self.zone_id = zone_id
        self.allow_overlap = allow_overlap
        self._existing_zones: Dict[str, Polygon] = dict(existing_zones or {})
        self._vertices: List[Point] = []
        self.logger = logger or create_logger("tracer")

    @property
    def vertices(self) -> Tuple[Point, ...]:
        """Snapshot of the accepted vertices."""
        return tuple(self._vertices)

    def evaluate(self, point: PointLike) -> VertexDecision:
        """Decide on a candidate vertex without changing state."""
        point = as_point(point)

        if any(points_equal(vertex, point) for vertex in self._vertices):
            return VertexDecision.REJECTED_DUPLICATE

        if is_polyline_self_intersected(self._vertices, point):
            return VertexDecision.REJECTED_SELF_INTERSECTION

        if self.allow_overlap:
            return VertexDecision.ACCEPTED

        if ZoneDetector.find_zone(point, self._existing_zones) is not None:
            return VertexDecision.REJECTED_INSIDE_ZONE

        if self._vertices:
            segment = Segment(self._vertices[-1], point)
            if ZoneDetector.crossed_zones(segment, self._existing_zones):
                return VertexDecision.REJECTED_ZONE_OVERLAP

        return VertexDecision.ACCEPTED

    def add_vertex(self, point: PointLike) -> VertexDecision:
        """
        Offer a vertex; append it if accepted.

        Args:
            point: Candidate vertex

        Returns:
            Decision taken for the vertex
        """
        point = as_point(point)
        decision = self.evaluate(point)
        metadata = {
            'zone_id': self.zone_id,
            'vertex': point.as_tuple(),
            'vertex_count': len(self._vertices),
        }

        if not decision.accepted:
            self.logger.debug(
                event=LogEvent.TRACE_VERTEX_REJECTED,
                message=f"Vertex rejected: {decision.value}",
                metadata={**metadata, 'decision': decision.value},
            )
            return decision

        self._vertices.append(point)
        self.logger.debug(
            event=LogEvent.TRACE_VERTEX_ACCEPTED,
            message="Vertex accepted",
            metadata=metadata,
        )
        return decision

    def _closing_problem(self) -> Optional[str]:
        """Reason the polyline cannot be closed, or None."""
        if len(self._vertices) < 3:
            return f"need at least 3 vertices, have {len(self._vertices)}"

        if is_polyline_self_intersected(self._vertices, self._vertices[0]):
            return "closing edge intersects the traced polyline"

        if not self.allow_overlap:
            closing = Segment(self._vertices[-1], self._vertices[0])
            crossed = ZoneDetector.crossed_zones(closing, self._existing_zones)
            if crossed:
                return f"closing edge crosses zone(s) {', '.join(crossed)}"

        return None

    def can_close(self) -> bool:
        return self._closing_problem() is None

    def close(self) -> TracedZone:
        """
        Close the traced polyline into a zone and reset the session.

        Returns:
            Immutable snapshot of the new zone

        Raises:
            TracingError: If the polyline cannot form a valid zone
        """
        problem = self._closing_problem()
        if problem is not None:
            error = TracingError(f"Cannot close zone '{self.zone_id}': {problem}")
            self.logger.error(
                event=LogEvent.TRACE_ERROR,
                message=str(error),
                metadata={'zone_id': self.zone_id, 'vertex_count': len(self._vertices)},
            )
            raise error

        zone = TracedZone(zone_id=self.zone_id, polygon=Polygon(tuple(self._vertices)))
        self._vertices.clear()

        self.logger.info(
            event=LogEvent.TRACE_CLOSED,
            message=f"Zone closed: {zone}",
            metadata={'zone_id': zone.zone_id, 'vertex_count': len(zone.polygon)},
        )
        return zone

    def undo(self) -> Optional[Point]:
        """Remove and return the last vertex (None when empty)."""
        if not self._vertices:
            return None

        vertex = self._vertices.pop()
        self.logger.debug(
            event=LogEvent.TRACE_VERTEX_UNDONE,
            message="Vertex undone",
            metadata={'zone_id': self.zone_id, 'vertex': vertex.as_tuple()},
        )
        return vertex

    def reset(self) -> None:
        """Discard all traced vertices."""
        self._vertices.clear()
        self.logger.debug(
            event=LogEvent.TRACE_RESET,
            message="Tracing session reset",
            metadata={'zone_id': self.zone_id},
        )

    def __len__(self) -> int:
        """Return number of accepted vertices."""
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"ZoneTracer(zone_id={self.zone_id!r}, vertices={len(self._vertices)})"
