from __future__ import annotations

import logging
from typing import Any

import networkx as nx

from src.domain.algorithms.geo_utils import haversine_distance_m
from src.domain.models import GeoPoint
from src.domain.road_graph import RoadGraph

logger = logging.getLogger(__name__)


def _node_point(data: dict[str, Any]) -> GeoPoint | None:
    # OSMnx stores lon in x and lat in y.
    x = data.get("x")
    y = data.get("y")
    if x is None or y is None:
        return None
    try:
        return GeoPoint(lat=float(y), lon=float(x))
    except (TypeError, ValueError):
        return None


def _tag(value: Any) -> str:
    """Flatten an OSM tag that simplification may have turned into a list."""

    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ";".join(str(v).strip() for v in value if v is not None)
    return str(value).strip()


def build_road_graph(street_graph: nx.Graph) -> RoadGraph:
    """Convert a networkx street graph (as produced by OSMnx) into a RoadGraph.

    Undirected graphs contribute one edge per direction. Nodes without
    usable x/y coordinates are skipped along with their edges.
    """

    graph = RoadGraph()
    points: dict[Any, GeoPoint] = {}

    for node_id, data in street_graph.nodes(data=True):
        point = _node_point(data)
        if point is None:
            continue
        points[node_id] = point
        graph.add_vertex(point)

    skipped = 0
    for u, v, data in street_graph.edges(data=True):
        start = points.get(u)
        end = points.get(v)
        if start is None or end is None:
            skipped += 1
            continue

        length = data.get("length")
        length = (
            float(length) if length is not None else haversine_distance_m(start, end)
        )
        name = _tag(data.get("name"))
        road_type = _tag(data.get("highway"))

        graph.add_edge(start, end, name, road_type, length)
        if not street_graph.is_directed():
            graph.add_edge(end, start, name, road_type, length)

    if skipped:
        logger.debug("Skipped %d edges without georeferenced endpoints", skipped)
    logger.debug(
        "Built road graph with %d vertices and %d edges",
        graph.num_vertices,
        graph.num_edges,
    )
    return graph
