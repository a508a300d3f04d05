"""
Zone Tracing Demo
=================

Replays a scripted drawing session against the zones in config/zones.yaml.

Flow:
- config: TraceConfig.from_yaml (known zones)
- tracing: ZoneTracer accepts/rejects each click
- geometry: ZoneDetector hit-tests clicks against the finished zones
"""

import logging
from pathlib import Path

from zonetrace import TraceConfig, TracingError, ZoneDetector, ZoneTracer
from zonetrace.logging import create_logger

CONFIG_PATH = Path(__file__).parent / "config" / "zones.yaml"

# Clicks of a user drawing a "parking" zone below the lobby
CLICKS = [
    (20, 150),
    (180, 150),
    (150, 50),     # inside the lobby: rejected
    (180, 250),
    (100, 120),    # crosses the first edge: rejected
    (20, 250),
]

HIT_TESTS = [(100, 50), (300, 50), (300, 150), (100, 200), (400, 150)]


def main():
    """Trace a zone, then hit-test some clicks against all zones."""

    config = TraceConfig.from_yaml(CONFIG_PATH)
    logger = create_logger("demo", level=logging.DEBUG)

    zones = config.polygons()
    tracer = ZoneTracer(
        "parking",
        existing_zones=zones,
        allow_overlap=config.allow_overlap,
        logger=logger,
    )

    for click in CLICKS:
        decision = tracer.add_vertex(click)
        print(f"click {click}: {decision.value}")

    try:
        parking = tracer.close()
    except TracingError as e:
        print(f"Could not close zone: {e}")
        return

    zones[parking.zone_id] = parking.polygon
    print(f"Closed {parking}")

    for point in HIT_TESTS:
        zone_id = ZoneDetector.find_zone(point, zones)
        print(f"hit {point}: {zone_id or 'none'}")


if __name__ == "__main__":
    main()
