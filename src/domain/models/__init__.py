from .geo import GeoPoint
from .road import RoadEdge, RoadVertex
from .route import Route, SearchAlgorithm

__all__ = [
    "GeoPoint",
    "RoadEdge",
    "RoadVertex",
    "Route",
    "SearchAlgorithm",
]
