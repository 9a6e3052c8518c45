from __future__ import annotations

from dataclasses import dataclass, field

from src.domain.exceptions.graph import EdgeStartMismatchError

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class RoadEdge:
    """Directed road segment between two intersections."""

    road_name: str
    road_type: str  # OSM highway tag, e.g. "residential"
    length: float
    start: GeoPoint
    end: GeoPoint


@dataclass(eq=False, slots=True)
class RoadVertex:
    """An intersection and the road segments leaving it.

    Edges are kept in a dict used as an insertion-ordered set: identical
    edges collapse, and iteration order is stable across runs.
    """

    point: GeoPoint
    _edges: dict[RoadEdge, None] = field(default_factory=dict, repr=False)

    @property
    def edges(self) -> tuple[RoadEdge, ...]:
        return tuple(self._edges)

    def iter_edges(self):
        return iter(self._edges)

    def add_edge(self, edge: RoadEdge) -> bool:
        if edge.start != self.point:
            raise EdgeStartMismatchError(point=self.point, edge=edge)
        if edge in self._edges:
            return False
        self._edges[edge] = None
        return True

    def __len__(self) -> int:
        return len(self._edges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RoadVertex):
            return NotImplemented
        return self.point == other.point

    def __hash__(self) -> int:
        return hash(self.point)
