from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from src.adapters.api.dependencies import get_routing_service
from src.adapters.api.schemas.routes import (
    GeoPointSchema,
    RouteRequestSchema,
    RouteSchema,
)
from src.app.services.routing_service import RoutingService
from src.domain.exceptions import NoPathFound
from src.domain.models import GeoPoint, Route, SearchAlgorithm

router = APIRouter(tags=["routes"])


def _point_to_schema(p: GeoPoint) -> GeoPointSchema:
    return GeoPointSchema(lat=p.lat, lon=p.lon)


def _route_to_schema(route: Route) -> RouteSchema:
    return RouteSchema(
        algorithm=route.algorithm.value,
        origin=_point_to_schema(route.origin),
        destination=_point_to_schema(route.destination),
        path=[_point_to_schema(p) for p in route.path],
        visited=[_point_to_schema(p) for p in route.visited],
        distance_m=route.distance_m,
        hop_count=route.hop_count,
    )


@router.post("/routes", response_model=RouteSchema)
def calculate_route(
    req: RouteRequestSchema,
    service: RoutingService = Depends(get_routing_service),
) -> RouteSchema:
    origin = GeoPoint(lat=req.origin.lat, lon=req.origin.lon)
    destination = GeoPoint(lat=req.destination.lat, lon=req.destination.lon)
    algorithm = SearchAlgorithm(req.algorithm) if req.algorithm else None
    try:
        route = service.calculate_route(
            origin=origin, destination=destination, algorithm=algorithm
        )
    except NoPathFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _route_to_schema(route)
