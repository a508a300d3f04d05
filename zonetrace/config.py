"""
Configuration schema for zonetrace.

Zone definitions and tracing options are loaded from YAML into frozen,
validated dataclasses.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple, Union

import yaml

from zonetrace.geometry import Polygon


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


@dataclass(frozen=True)
class ZoneConfig:
    """Single zone definition."""

    zone_id: str
    coordinates: List[Tuple[float, float]]
    enabled: bool = True

    def __post_init__(self):
        """Validate zone configuration."""
        if not self.zone_id:
            raise ValueError("zone_id cannot be empty")

        if len(self.coordinates) < 3:
            raise ValueError(
                f"Zone '{self.zone_id}' must have at least 3 points, "
                f"got {len(self.coordinates)}"
            )

        for coord in self.coordinates:
            if len(coord) != 2:
                raise ValueError(
                    f"Zone '{self.zone_id}' has invalid coordinate {coord!r}, "
                    f"expected [x, y]"
                )

    def to_polygon(self) -> Polygon:
        return Polygon(tuple(self.coordinates))


@dataclass(frozen=True)
class TraceConfig:
    """
    Main configuration: known zones plus tracing options.

    Immutable after construction (frozen dataclass).
    """

    zones: List[ZoneConfig] = field(default_factory=list)
    allow_overlap: bool = False
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate trace configuration."""
        seen = set()
        for zone in self.zones:
            if zone.zone_id in seen:
                raise ValueError(f"Duplicate zone_id: {zone.zone_id}")
            seen.add(zone.zone_id)

        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(VALID_LOG_LEVELS)}"
            )

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    def polygons(self) -> Dict[str, Polygon]:
        """Enabled zones as {zone_id: Polygon}, in file order."""
        return {
            zone.zone_id: zone.to_polygon()
            for zone in self.zones
            if zone.enabled
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TraceConfig":
        """
        Build configuration from a parsed YAML mapping.

        Raises:
            ValueError: If required keys are missing or values invalid
        """
        if not isinstance(data, dict):
            raise ValueError(f"Configuration must be a mapping, got {type(data).__name__}")

        try:
            zones = [
                ZoneConfig(
                    zone_id=str(z["zone_id"]),
                    coordinates=[
                        tuple(float(value) for value in coord)
                        for coord in z["coordinates"]
                    ],
                    enabled=bool(z.get("enabled", True)),
                )
                for z in data.get("zones") or []
            ]
        except KeyError as e:
            raise ValueError(f"Missing required zone field: {e}")
        except TypeError as e:
            raise ValueError(f"Invalid zone data: {e}")

        return cls(
            zones=zones,
            allow_overlap=bool(data.get("allow_overlap", False)),
            log_level=str(data.get("log_level", "INFO")).upper(),
        )

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "TraceConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            allow_overlap: false
            log_level: INFO

            zones:
              - zone_id: "entrance"
                coordinates: [[100, 200], [500, 200], [500, 600], [100, 600]]
                enabled: true

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If YAML or zone data is invalid
        """
        path = Path(yaml_path)

        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}")

        return cls.from_dict(data or {})
