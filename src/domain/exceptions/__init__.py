from .graph import (
    EdgeStartMismatchError,
    GraphError,
    InvalidEdgeError,
    MissingEndpointError,
    MissingRoadMetadataError,
    NegativeLengthError,
    UnknownEndVertexError,
    UnknownStartVertexError,
)
from .routing import NoPathFound, PathReconstructionError, RoutingError

__all__ = [
    "EdgeStartMismatchError",
    "GraphError",
    "InvalidEdgeError",
    "MissingEndpointError",
    "MissingRoadMetadataError",
    "NegativeLengthError",
    "NoPathFound",
    "PathReconstructionError",
    "RoutingError",
    "UnknownEndVertexError",
    "UnknownStartVertexError",
]
