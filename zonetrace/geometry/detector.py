"""
Zone Detector Module
====================

Stateless application of the predicates to collections of zones and points.

Design:
- All methods are static (no instance state)
- Zones are passed in as {zone_id: Polygon} (insertion order is priority)
- Returns plain results, never mutates inputs
"""

from typing import List, Mapping, Optional

import numpy as np

from zonetrace.geometry.predicates import (
    is_line_intersects_polygon,
    is_point_inside_polygon,
)
from zonetrace.geometry.shapes import (
    Point,
    PointLike,
    Polygon,
    PolygonLike,
    SegmentLike,
    as_point,
    as_polygon,
    as_segment,
)


class ZoneDetector:
    """
    Stateless detector for hit-testing points and segments against zones.

    Usage:
        zones = {"entrance": entrance_polygon, "lobby": lobby_polygon}

        zone_id = ZoneDetector.find_zone((120, 40), zones)
        crossed = ZoneDetector.crossed_zones(((0, 0), (200, 200)), zones)
        mask = ZoneDetector.contains_points(points, zones["entrance"])
    """

    @staticmethod
    def find_zone(
        point: PointLike,
        zones: Mapping[str, Polygon],
    ) -> Optional[str]:
        """
        Return the id of the first zone containing point.

        Args:
            point: Click point
            zones: Mapping of zone_id to polygon

        Returns:
            Zone id, or None when the point is outside every zone
        """
        point = as_point(point)

        for zone_id, polygon in zones.items():
            if is_point_inside_polygon(point, polygon):
                return zone_id

        return None

    @staticmethod
    def crossed_zones(
        segment: SegmentLike,
        zones: Mapping[str, Polygon],
    ) -> List[str]:
        """Return ids of every zone whose boundary the segment crosses."""
        segment = as_segment(segment)

        return [
            zone_id
            for zone_id, polygon in zones.items()
            if is_line_intersects_polygon(segment, polygon)
        ]

    @staticmethod
    def contains_points(points: np.ndarray, polygon: PolygonLike) -> np.ndarray:
        """
        Test many points against one polygon.

        Args:
            points: Nx2 array of (x, y) coordinates
            polygon: Zone geometry

        Returns:
            Boolean mask of shape (N,) where True = inside zone

        Raises:
            ValueError: If points is not an Nx2 array
        """
        points = np.asarray(points, dtype=float)

        if points.size == 0:
            return np.array([], dtype=bool)

        if points.ndim != 2 or points.shape[1] != 2:
            raise ValueError(f"points must be Nx2 array, got shape {points.shape}")

        polygon = as_polygon(polygon)

        return np.array([
            is_point_inside_polygon(Point(float(x), float(y)), polygon)
            for x, y in points
        ], dtype=bool)
