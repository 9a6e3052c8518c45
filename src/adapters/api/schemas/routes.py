from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class GeoPointSchema(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)


class RouteRequestSchema(BaseModel):
    origin: GeoPointSchema
    destination: GeoPointSchema
    algorithm: Literal["bfs", "dijkstra", "astar"] | None = None


class RouteSchema(BaseModel):
    algorithm: Literal["bfs", "dijkstra", "astar"]
    origin: GeoPointSchema
    destination: GeoPointSchema
    path: list[GeoPointSchema] = []
    visited: list[GeoPointSchema] = []

    distance_m: float | None = None
    hop_count: int = 0
