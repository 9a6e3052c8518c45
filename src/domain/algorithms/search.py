from __future__ import annotations

from collections import deque
from typing import Callable, Mapping

from src.domain.models.geo import GeoPoint
from src.domain.models.road import RoadVertex

from .frontier import AStarVertex, Frontier, WeightedVertex
from .path import reconstruct_path

NodeSearched = Callable[[GeoPoint], None]
Vertices = Mapping[GeoPoint, RoadVertex]


def _noop(_: GeoPoint) -> None:
    return None


def bfs(
    vertices: Vertices,
    start: GeoPoint | None,
    goal: GeoPoint | None,
    node_searched: NodeSearched | None = None,
) -> list[GeoPoint] | None:
    """Fewest-hops path from start to goal, or None if goal is unreachable."""

    if start is None or goal is None:
        return None
    if start not in vertices or goal not in vertices:
        return None
    visit = node_searched or _noop

    parents: dict[GeoPoint, GeoPoint] = {}
    visited: set[GeoPoint] = {start}
    queue: deque[GeoPoint] = deque([start])

    while queue:
        cur = queue.popleft()
        visit(cur)
        if cur == goal:
            return reconstruct_path(start, goal, parents)

        for edge in vertices[cur].iter_edges():
            nxt = edge.end
            if nxt not in visited:
                visited.add(nxt)
                parents[nxt] = cur
                queue.append(nxt)

    return None


def dijkstra(
    vertices: Vertices,
    start: GeoPoint | None,
    goal: GeoPoint | None,
    node_searched: NodeSearched | None = None,
) -> list[GeoPoint] | None:
    """Shortest path by summed edge length, or None if goal is unreachable.

    Outdated frontier entries are not discarded: a point pushed several
    times is reported to node_searched once per pop.
    """

    if start is None or goal is None:
        return None
    if start not in vertices or goal not in vertices:
        return None
    visit = node_searched or _noop

    parents: dict[GeoPoint, GeoPoint] = {}
    best: dict[GeoPoint, float] = {start: 0.0}
    frontier: Frontier[WeightedVertex] = Frontier()
    frontier.push(WeightedVertex(vertex=vertices[start], weight=0.0))

    while frontier:
        cur = frontier.pop()
        visit(cur.point)
        if cur.point == goal:
            return reconstruct_path(start, goal, parents)

        for edge in cur.vertex.iter_edges():
            nxt = edge.end
            weight = cur.weight + edge.length
            known = best.get(nxt)
            if known is None or weight < known:
                best[nxt] = weight
                parents[nxt] = cur.point
                frontier.push(WeightedVertex(vertex=vertices[nxt], weight=weight))

    return None


def a_star_search(
    vertices: Vertices,
    start: GeoPoint | None,
    goal: GeoPoint | None,
    node_searched: NodeSearched | None = None,
) -> list[GeoPoint] | None:
    """Shortest path by summed edge length, guided by GeoPoint.distance to goal.

    The result is only guaranteed optimal when the heuristic never exceeds
    the remaining edge length, which raw-coordinate distance does not ensure
    for arbitrary length units.
    """

    if start is None or goal is None:
        return None
    if start not in vertices or goal not in vertices:
        return None
    visit = node_searched or _noop

    parents: dict[GeoPoint, GeoPoint] = {}
    # Keyed by point, holds accumulated cost + heuristic.
    best_total: dict[GeoPoint, float] = {start: 0.0}
    frontier: Frontier[AStarVertex] = Frontier()
    frontier.push(AStarVertex(vertex=vertices[start], weight=0.0, predicted=0.0))

    while frontier:
        cur = frontier.pop()
        visit(cur.point)
        if cur.point == goal:
            return reconstruct_path(start, goal, parents)

        for edge in cur.vertex.iter_edges():
            nxt = edge.end
            predicted = nxt.distance(goal)
            weight = cur.weight + edge.length
            total = weight + predicted
            known = best_total.get(nxt)
            if known is None or total < known:
                best_total[nxt] = total
                parents[nxt] = cur.point
                frontier.push(
                    AStarVertex(vertex=vertices[nxt], weight=weight, predicted=predicted)
                )

    return None
