from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import Generic, TypeVar

from src.domain.models.geo import GeoPoint
from src.domain.models.road import RoadVertex


@dataclass(frozen=True, slots=True)
class WeightedVertex:
    """Dijkstra frontier entry: a vertex and the cost of the path reaching it."""

    vertex: RoadVertex
    weight: float

    @property
    def point(self) -> GeoPoint:
        return self.vertex.point

    @property
    def priority(self) -> float:
        return self.weight


@dataclass(frozen=True, slots=True)
class AStarVertex:
    """A* frontier entry: accumulated cost plus the heuristic estimate to goal."""

    vertex: RoadVertex
    weight: float
    predicted: float

    @property
    def point(self) -> GeoPoint:
        return self.vertex.point

    @property
    def priority(self) -> float:
        return self.weight + self.predicted


T = TypeVar("T", WeightedVertex, AStarVertex)


class Frontier(Generic[T]):
    """Min-priority queue of frontier entries.

    Entries with equal priority pop in the order they were pushed.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, T]] = []
        self._counter = itertools.count()

    def push(self, entry: T) -> None:
        heapq.heappush(self._heap, (entry.priority, next(self._counter), entry))

    def pop(self) -> T:
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
