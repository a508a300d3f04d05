"""
Tracing Layer
=============

Bounded Context: Interactive zone drawing (stateful).

Responsibilities:
- Accept/reject vertices while a zone is traced
- Close a valid polyline into an immutable zone
"""

from zonetrace.tracing.session import TracedZone, TracingError, VertexDecision, ZoneTracer

__all__ = [
    "TracedZone",
    "TracingError",
    "VertexDecision",
    "ZoneTracer",
]
