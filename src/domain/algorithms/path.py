from __future__ import annotations

from typing import Mapping

from src.domain.exceptions import PathReconstructionError
from src.domain.models.geo import GeoPoint


def reconstruct_path(
    start: GeoPoint, goal: GeoPoint, parents: Mapping[GeoPoint, GeoPoint]
) -> list[GeoPoint]:
    """Walk the predecessor map back from goal and return start..goal."""

    out: list[GeoPoint] = []
    cur = goal
    while cur != start:
        out.append(cur)
        if cur not in parents:
            raise PathReconstructionError(f"No predecessor recorded for {cur}")
        cur = parents[cur]
        # A chain longer than the map itself can only be a cycle.
        if len(out) > len(parents):
            raise PathReconstructionError(f"Predecessor cycle reached from {goal}")
    out.append(start)
    out.reverse()
    return out
