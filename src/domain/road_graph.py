from __future__ import annotations

from typing import Iterable

from src.domain.algorithms import search
from src.domain.algorithms.search import NodeSearched
from src.domain.exceptions import (
    MissingEndpointError,
    MissingRoadMetadataError,
    NegativeLengthError,
    UnknownEndVertexError,
    UnknownStartVertexError,
)
from src.domain.models import GeoPoint, RoadEdge, RoadVertex


class RoadGraph:
    """Directed graph of intersections connected by road segments.

    Vertices are indexed by their GeoPoint; edges are stored by value under
    their start vertex and refer to their endpoints by point only.

    Not safe for concurrent mutation: load the whole graph first, then search.
    """

    def __init__(self) -> None:
        self._vertices: dict[GeoPoint, RoadVertex] = {}
        self._num_edges = 0

    @property
    def num_vertices(self) -> int:
        return len(self._vertices)

    @property
    def num_edges(self) -> int:
        # Counts successful add_edge calls, including repeats of an
        # identical edge that the vertex itself stores only once.
        return self._num_edges

    def get_vertices(self) -> set[GeoPoint]:
        return {GeoPoint(lat=p.lat, lon=p.lon) for p in self._vertices}

    def __contains__(self, point: object) -> bool:
        return point in self._vertices

    def add_vertex(self, point: GeoPoint | None) -> bool:
        """Add an intersection; returns False if point is None or already present."""

        if point is None or point in self._vertices:
            return False
        self._vertices[point] = RoadVertex(point=point)
        return True

    def add_edge(
        self,
        start: GeoPoint | None,
        end: GeoPoint | None,
        road_name: str | None,
        road_type: str | None,
        length: float,
    ) -> None:
        """Add a directed road segment from start to end.

        Both points must already be vertices. Raises a subclass of
        InvalidEdgeError naming the first precondition that failed.
        """

        if start is None or end is None:
            raise MissingEndpointError(start=start, end=end)
        if road_name is None or road_type is None:
            raise MissingRoadMetadataError(road_name=road_name, road_type=road_type)
        if not length >= 0:
            raise NegativeLengthError(length=length)
        if start not in self._vertices:
            raise UnknownStartVertexError(point=start)
        if end not in self._vertices:
            raise UnknownEndVertexError(point=end)

        edge = RoadEdge(
            road_name=road_name,
            road_type=road_type,
            length=float(length),
            start=start,
            end=end,
        )
        self._vertices[start].add_edge(edge)
        self._num_edges += 1

    def edges_from(self, point: GeoPoint) -> tuple[RoadEdge, ...]:
        vertex = self._vertices.get(point)
        if vertex is None:
            return ()
        return vertex.edges

    def path_length(self, path: Iterable[GeoPoint]) -> float:
        """Sum of the shortest edge joining each consecutive pair of points."""

        points = list(path)
        total = 0.0
        for a, b in zip(points, points[1:]):
            lengths = [e.length for e in self.edges_from(a) if e.end == b]
            if not lengths:
                raise ValueError(f"No edge from {a} to {b}")
            total += min(lengths)
        return total

    def bfs(
        self,
        start: GeoPoint | None,
        goal: GeoPoint | None,
        node_searched: NodeSearched | None = None,
    ) -> list[GeoPoint] | None:
        return search.bfs(self._vertices, start, goal, node_searched)

    def dijkstra(
        self,
        start: GeoPoint | None,
        goal: GeoPoint | None,
        node_searched: NodeSearched | None = None,
    ) -> list[GeoPoint] | None:
        return search.dijkstra(self._vertices, start, goal, node_searched)

    def a_star_search(
        self,
        start: GeoPoint | None,
        goal: GeoPoint | None,
        node_searched: NodeSearched | None = None,
    ) -> list[GeoPoint] | None:
        return search.a_star_search(self._vertices, start, goal, node_searched)
