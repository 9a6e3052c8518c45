from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from src.domain.models.geo import GeoPoint
    from src.domain.models.road import RoadEdge


class GraphError(Exception):
    """Base exception for road graph construction failures."""


class InvalidEdgeError(GraphError, ValueError):
    """Raised when an edge insertion violates one of its preconditions."""


class MissingEndpointError(InvalidEdgeError):
    def __init__(self, *, start: GeoPoint | None, end: GeoPoint | None) -> None:
        super().__init__(f"One or more endpoints is None (start={start}, end={end})")
        self.start = start
        self.end = end


class MissingRoadMetadataError(InvalidEdgeError):
    def __init__(self, *, road_name: Any, road_type: Any) -> None:
        super().__init__(
            "Road must have a name and a type "
            f"(road_name={road_name!r}, road_type={road_type!r})"
        )
        self.road_name = road_name
        self.road_type = road_type


class NegativeLengthError(InvalidEdgeError):
    def __init__(self, *, length: float) -> None:
        super().__init__(f"Length must be greater than or equal to 0 (length={length})")
        self.length = length


class UnknownStartVertexError(InvalidEdgeError):
    def __init__(self, *, point: GeoPoint) -> None:
        super().__init__(f"Start point is not a vertex of the graph: {point}")
        self.point = point


class UnknownEndVertexError(InvalidEdgeError):
    def __init__(self, *, point: GeoPoint) -> None:
        super().__init__(f"End point is not a vertex of the graph: {point}")
        self.point = point


class EdgeStartMismatchError(InvalidEdgeError):
    def __init__(self, *, point: GeoPoint, edge: RoadEdge) -> None:
        super().__init__(f"Edge starting at {edge.start} cannot leave vertex {point}")
        self.point = point
        self.edge = edge
