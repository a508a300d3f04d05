"""
Structured Logging for zonetrace
================================

Bounded Context: Observability

JSON-structured logging with typed events.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from zonetrace.logging import create_logger, LogEvent
    >>> logger = create_logger("tracer")
    >>> logger.info(
    ...     event=LogEvent.TRACE_VERTEX_REJECTED,
    ...     message="Vertex rejected",
    ...     metadata={'zone_id': 'entrance', 'reason': 'self_intersection'}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
