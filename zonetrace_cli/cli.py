"""
zonetrace CLI - Main entry point.

Runs the zone predicates against zones defined in a YAML file.
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from zonetrace.config import TraceConfig
from zonetrace.geometry import Point, Segment, ZoneDetector
from zonetrace.logging import LogEvent, create_logger
from zonetrace.tracing import TracingError, ZoneTracer


def parse_point(text: str) -> Point:
    """
    Parse an "X,Y" argument.

    Raises:
        argparse.ArgumentTypeError: If text is not two comma-separated numbers
    """
    try:
        x, y = text.split(",")
        return Point(float(x), float(y))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid point '{text}', expected X,Y")


def cmd_list_zones(config: TraceConfig) -> int:
    for zone in config.zones:
        state = "enabled" if zone.enabled else "disabled"
        print(f"{zone.zone_id}\t{len(zone.coordinates)} vertices\t{state}")
    return 0


def cmd_point(config: TraceConfig, point: Point, logger) -> int:
    zone_id = ZoneDetector.find_zone(point, config.polygons())

    if zone_id is None:
        logger.info(
            event=LogEvent.ZONE_MISS,
            message="Point outside every zone",
            metadata={'point': point.as_tuple()},
        )
        print("none")
        return 0

    logger.info(
        event=LogEvent.ZONE_HIT,
        message=f"Point inside zone {zone_id}",
        metadata={'point': point.as_tuple(), 'zone_id': zone_id},
    )
    print(zone_id)
    return 0


def cmd_line(config: TraceConfig, segment: Segment, logger) -> int:
    crossed = ZoneDetector.crossed_zones(segment, config.polygons())

    if crossed:
        logger.info(
            event=LogEvent.ZONE_CROSSED,
            message=f"Segment crosses {len(crossed)} zone(s)",
            metadata={'zones': crossed},
        )
        for zone_id in crossed:
            print(zone_id)
    else:
        print("none")
    return 0


def cmd_trace(
    config: TraceConfig,
    zone_id: str,
    points: Sequence[Point],
    close: bool,
    logger,
) -> int:
    """Replay clicks through a tracer; exit 1 if any vertex is rejected."""
    existing = {
        other_id: polygon
        for other_id, polygon in config.polygons().items()
        if other_id != zone_id
    }
    tracer = ZoneTracer(
        zone_id,
        existing_zones=existing,
        allow_overlap=config.allow_overlap,
        logger=logger,
    )

    status = 0
    for point in points:
        decision = tracer.add_vertex(point)
        print(f"{point.x:g},{point.y:g}\t{decision.value}")
        if not decision.accepted:
            status = 1

    if close:
        try:
            zone = tracer.close()
            print(f"closed\t{zone}")
        except TracingError as e:
            print(f"not closed\t{e}")
            status = 1

    if status:
        logger.warning(
            event=LogEvent.CLI_ERROR,
            message=f"Zone {zone_id} did not validate",
            metadata={'zone_id': zone_id, 'vertices': len(tracer)},
        )

    return status


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zonetrace-cli",
        description="zonetrace CLI - Hit-test and validate zones from a YAML file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Which zone contains a click point
  zonetrace-cli --config config/zones.yaml point 120 45

  # Which zone boundaries a segment crosses
  zonetrace-cli --config config/zones.yaml line 0 0 300 300

  # Validate a zone drawn click by click
  zonetrace-cli --config config/zones.yaml trace parking 0,0 50,0 50,50 0,50 --close

  # List configured zones
  zonetrace-cli --config config/zones.yaml list-zones
"""
    )

    parser.add_argument(
        "--config",
        required=True,
        help="Path to zones YAML"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override log_level from the config file"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('list-zones', help='List configured zones')

    point = subparsers.add_parser('point', help='Find the zone containing a point')
    point.add_argument('x', type=float)
    point.add_argument('y', type=float)

    line = subparsers.add_parser('line', help='List zones crossed by a segment')
    line.add_argument('x1', type=float)
    line.add_argument('y1', type=float)
    line.add_argument('x2', type=float)
    line.add_argument('y2', type=float)

    trace = subparsers.add_parser('trace', help='Validate a zone traced vertex by vertex')
    trace.add_argument('zone_id', help='Id of the zone being drawn')
    trace.add_argument('points', nargs='+', type=parse_point, help='Vertices as X,Y')
    trace.add_argument('--close', action='store_true', help='Close the zone after the last vertex')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logger = create_logger("cli")
    if args.log_level:
        logger.set_level(getattr(logging, args.log_level))

    try:
        config = TraceConfig.from_yaml(args.config)
    except (FileNotFoundError, ValueError) as e:
        logger.error(
            event=LogEvent.CONFIG_ERROR,
            message=f"Cannot load zone config: {e}",
            metadata={'config': args.config},
            exc_info=e,
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args.log_level:
        logger.set_level(config.logging_level)

    logger.debug(
        event=LogEvent.CONFIG_LOADED,
        message=f"Loaded {len(config.zones)} zone(s)",
        metadata={'config': args.config},
    )

    try:
        if args.command == 'list-zones':
            return cmd_list_zones(config)

        elif args.command == 'point':
            return cmd_point(config, Point(args.x, args.y), logger)

        elif args.command == 'line':
            segment = Segment(Point(args.x1, args.y1), Point(args.x2, args.y2))
            return cmd_line(config, segment, logger)

        elif args.command == 'trace':
            return cmd_trace(config, args.zone_id, args.points, args.close, logger)

    except ValueError as e:
        logger.error(
            event=LogEvent.CLI_ERROR,
            message=f"Command '{args.command}' failed: {e}",
            exc_info=e,
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 1


if __name__ == '__main__':
    sys.exit(main())
