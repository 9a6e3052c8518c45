from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import osmnx as ox

from src.app.ports.output import IMapProvider
from src.domain.models import GeoPoint


@dataclass(slots=True)
class OSMnxMapAdapter(IMapProvider):
    """OSMnx-backed map provider.

    When graph_path is set, a prebuilt .graphml is loaded once and reused for
    every request instead of querying Overpass.
    """

    network_type: str = "drive"
    graph_path: str | None = None
    cache_folder: str = "data/osm_cache"

    _prebuilt_graph: Any | None = None

    def _configure_osmnx(self) -> None:
        # Make Overpass/OSM downloads cacheable across requests.
        ox.settings.use_cache = True
        ox.settings.log_console = False
        ox.settings.cache_folder = self.cache_folder

    def _load_prebuilt_graph(self) -> Any | None:
        if self._prebuilt_graph is not None:
            return self._prebuilt_graph

        if not self.graph_path:
            return None

        if not self.graph_path.lower().endswith(".graphml"):
            raise RuntimeError(f"Unsupported OSM_GRAPH_PATH format: {self.graph_path}")

        # OSMnx loader keeps numeric edge attributes (e.g. "length") typed.
        self._prebuilt_graph = ox.load_graphml(self.graph_path)
        return self._prebuilt_graph

    def get_street_graph(self, *, center: GeoPoint, dist_m: int) -> Any:
        self._configure_osmnx()

        prebuilt = self._load_prebuilt_graph()
        if prebuilt is not None:
            return prebuilt

        # OSMnx uses (lat, lon)
        return ox.graph_from_point(
            (center.lat, center.lon), dist=int(dist_m), network_type=self.network_type
        )
