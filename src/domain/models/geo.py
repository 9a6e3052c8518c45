from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GeoPoint:
    lat: float
    lon: float

    def __post_init__(self) -> None:
        if not (-90.0 <= self.lat <= 90.0):
            raise ValueError(f"Invalid latitude: {self.lat}")
        if not (-180.0 <= self.lon <= 180.0):
            raise ValueError(f"Invalid longitude: {self.lon}")

    @property
    def x(self) -> float:
        return self.lat

    @property
    def y(self) -> float:
        return self.lon

    def distance(self, other: GeoPoint) -> float:
        """Straight-line distance over the raw (lat, lon) pair.

        Degrees are treated as planar units, so this is only a heuristic and
        not a geographic distance (see haversine_distance_m for that).
        """

        return math.hypot(self.lat - other.lat, self.lon - other.lon)
