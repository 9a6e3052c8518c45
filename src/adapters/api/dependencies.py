from __future__ import annotations

from functools import lru_cache

from src.adapters.config import RoutingRuntimeConfig
from src.adapters.maps.osmnx_map_adapter import OSMnxMapAdapter
from src.app.services.routing_service import RoutingService


@lru_cache(maxsize=8)
def get_map_provider(
    network_type: str, graph_path: str | None, cache_folder: str
) -> OSMnxMapAdapter:
    # One adapter per settings tuple, so a prebuilt graph is parsed only once.
    return OSMnxMapAdapter(
        network_type=network_type,
        graph_path=graph_path,
        cache_folder=cache_folder,
    )


def get_routing_service() -> RoutingService:
    cfg = RoutingRuntimeConfig.from_env()
    map_provider = get_map_provider(cfg.network_type, cfg.graph_path, cfg.cache_folder)
    return RoutingService(
        map_provider=map_provider,
        street_graph_dist_m=cfg.street_graph_dist_m,
        default_algorithm=cfg.default_algorithm,
    )
