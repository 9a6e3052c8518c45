from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .geo import GeoPoint


class SearchAlgorithm(str, Enum):
    BFS = "bfs"
    DIJKSTRA = "dijkstra"
    ASTAR = "astar"


@dataclass(frozen=True, slots=True)
class Route:
    algorithm: SearchAlgorithm
    origin: GeoPoint
    destination: GeoPoint
    path: tuple[GeoPoint, ...] = ()
    # Points in the order the search popped them from its frontier.
    visited: tuple[GeoPoint, ...] = ()
    distance_m: float | None = None

    @property
    def hop_count(self) -> int:
        return max(0, len(self.path) - 1)
