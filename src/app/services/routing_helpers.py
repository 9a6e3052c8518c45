from __future__ import annotations

from src.domain.exceptions import NoPathFound
from src.domain.models import GeoPoint
from src.domain.road_graph import RoadGraph


def midpoint(a: GeoPoint, b: GeoPoint) -> GeoPoint:
    return GeoPoint(lat=(a.lat + b.lat) / 2.0, lon=(a.lon + b.lon) / 2.0)


def nearest_vertex(graph: RoadGraph, point: GeoPoint) -> GeoPoint:
    """Closest graph vertex to an arbitrary coordinate."""

    if point in graph:
        return point

    best: GeoPoint | None = None
    best_d2 = float("inf")
    for candidate in graph.get_vertices():
        d_lat = candidate.lat - point.lat
        d_lon = candidate.lon - point.lon
        d2 = d_lat * d_lat + d_lon * d_lon
        if d2 < best_d2:
            best_d2 = d2
            best = candidate

    if best is None:
        raise NoPathFound("Street graph contains no vertices")
    return best

