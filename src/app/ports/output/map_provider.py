from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from src.domain.models import GeoPoint


class IMapProvider(ABC):
    """Port for fetching street network data."""

    @abstractmethod
    def get_street_graph(self, *, center: GeoPoint, dist_m: int) -> Any:
        """Return a networkx street graph around a center point.

        Nodes carry lon/lat in their x/y attributes; edges may carry
        length (metres), name and highway.
        """
