from __future__ import annotations

import os
from dataclasses import dataclass

from src.domain.models import SearchAlgorithm


def env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_str(name: str) -> str | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    return raw.strip() or None


@dataclass(frozen=True, slots=True)
class RoutingRuntimeConfig:
    """Runtime settings for the routing API.

    Env vars:
      - OSM_NETWORK_TYPE: OSMnx network type (default: drive)
      - STREET_GRAPH_DIST_M: radius of the street graph fetched per request
      - ROUTING_ALGORITHM: bfs|dijkstra|astar (default: astar)
      - OSM_GRAPH_PATH: optional prebuilt .graphml to load instead of downloading
      - OSMNX_CACHE_FOLDER: OSMnx HTTP cache folder (default: data/osm_cache)
    """

    network_type: str = "drive"
    street_graph_dist_m: int = 2000
    default_algorithm: SearchAlgorithm = SearchAlgorithm.ASTAR
    graph_path: str | None = None
    cache_folder: str = "data/osm_cache"

    @staticmethod
    def from_env() -> "RoutingRuntimeConfig":
        dist_raw = _env_str("STREET_GRAPH_DIST_M")
        algorithm_raw = _env_str("ROUTING_ALGORITHM")
        try:
            algorithm = SearchAlgorithm((algorithm_raw or "astar").lower())
        except ValueError:
            raise RuntimeError(
                f"Unsupported ROUTING_ALGORITHM: {algorithm_raw} "
                f"(expected one of {[a.value for a in SearchAlgorithm]})"
            ) from None

        return RoutingRuntimeConfig(
            network_type=_env_str("OSM_NETWORK_TYPE") or "drive",
            street_graph_dist_m=int(dist_raw) if dist_raw else 2000,
            default_algorithm=algorithm,
            graph_path=_env_str("OSM_GRAPH_PATH"),
            cache_folder=_env_str("OSMNX_CACHE_FOLDER") or "data/osm_cache",
        )
