from __future__ import annotations

import logging
from dataclasses import dataclass

from src.app.ports.output import IMapProvider
from src.domain.algorithms.search import NodeSearched
from src.domain.exceptions import NoPathFound
from src.domain.models import GeoPoint, Route, SearchAlgorithm
from src.domain.road_graph import RoadGraph

from .graph_builder import build_road_graph
from .routing_helpers import midpoint, nearest_vertex

logger = logging.getLogger(__name__)


def search(
    graph: RoadGraph,
    start: GeoPoint,
    goal: GeoPoint,
    algorithm: SearchAlgorithm | str,
    node_searched: NodeSearched | None = None,
) -> list[GeoPoint] | None:
    # Raises ValueError for names outside SearchAlgorithm.
    algorithm = SearchAlgorithm(algorithm)
    if algorithm is SearchAlgorithm.BFS:
        return graph.bfs(start, goal, node_searched)
    if algorithm is SearchAlgorithm.DIJKSTRA:
        return graph.dijkstra(start, goal, node_searched)
    return graph.a_star_search(start, goal, node_searched)


@dataclass(slots=True)
class RoutingService:
    """Application service (use case) for route calculation.

    Fetches a street graph around the request, turns it into a RoadGraph and
    runs one of the search algorithms over it. Domain stays pure.
    """

    map_provider: IMapProvider

    street_graph_dist_m: int = 2000
    default_algorithm: SearchAlgorithm = SearchAlgorithm.ASTAR

    def load_graph(self, *, origin: GeoPoint, destination: GeoPoint) -> RoadGraph:
        street_graph = self.map_provider.get_street_graph(
            center=midpoint(origin, destination), dist_m=int(self.street_graph_dist_m)
        )
        return build_road_graph(street_graph)

    def calculate_route(
        self,
        *,
        origin: GeoPoint,
        destination: GeoPoint,
        algorithm: SearchAlgorithm | str | None = None,
    ) -> Route:
        algorithm = SearchAlgorithm(algorithm or self.default_algorithm)
        graph = self.load_graph(origin=origin, destination=destination)

        start = nearest_vertex(graph, origin)
        goal = nearest_vertex(graph, destination)

        visited: list[GeoPoint] = []
        path = search(graph, start, goal, algorithm, visited.append)
        if path is None:
            raise NoPathFound(
                f"No path from {start} to {goal} ({algorithm.value}, "
                f"{len(visited)} vertices searched)"
            )

        distance_m = graph.path_length(path)
        logger.info(
            "Computed %s route: %d hops, %.1f m, %d vertices searched",
            algorithm.value,
            len(path) - 1,
            distance_m,
            len(visited),
        )

        return Route(
            algorithm=algorithm,
            origin=origin,
            destination=destination,
            path=tuple(path),
            visited=tuple(visited),
            distance_m=distance_m,
        )
