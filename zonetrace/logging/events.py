"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Event Naming Convention:
    <component>.<category>.<action>

    component: trace, zone, config, cli, error
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - trace.*: Interactive tracing session
    - zone.*: Hit tests against configured zones
    - config.*: Configuration loading
    - error.*: Error conditions
    """

    # ========== Trace Events ==========
    TRACE_VERTEX_ACCEPTED = "trace.vertex.accepted"
    """Vertex appended to the traced polyline."""

    TRACE_VERTEX_REJECTED = "trace.vertex.rejected"
    """Vertex refused (self-intersection, overlap, duplicate)."""

    TRACE_VERTEX_UNDONE = "trace.vertex.undone"
    """Last vertex removed."""

    TRACE_CLOSED = "trace.closed"
    """Polyline closed into a zone polygon."""

    TRACE_RESET = "trace.reset"
    """Tracing session cleared."""

    # ========== Zone Events ==========
    ZONE_HIT = "zone.hit"
    """Point found inside a zone."""

    ZONE_MISS = "zone.miss"
    """Point outside every zone."""

    ZONE_CROSSED = "zone.crossed"
    """Segment crosses one or more zone boundaries."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Zone configuration loaded from YAML."""

    # ========== Error Events ==========
    CONFIG_ERROR = "error.config"
    """Configuration file missing or invalid."""

    TRACE_ERROR = "error.trace"
    """Tracing operation refused."""

    CLI_ERROR = "error.cli"
    """Command failed."""


TRACE_EVENTS = {
    LogEvent.TRACE_VERTEX_ACCEPTED,
    LogEvent.TRACE_VERTEX_REJECTED,
    LogEvent.TRACE_VERTEX_UNDONE,
    LogEvent.TRACE_CLOSED,
    LogEvent.TRACE_RESET,
}

ZONE_EVENTS = {
    LogEvent.ZONE_HIT,
    LogEvent.ZONE_MISS,
    LogEvent.ZONE_CROSSED,
}

ERROR_EVENTS = {
    LogEvent.CONFIG_ERROR,
    LogEvent.TRACE_ERROR,
    LogEvent.CLI_ERROR,
}
