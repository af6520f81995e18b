from __future__ import annotations

import heapq
import itertools
import math
from dataclasses import dataclass

from graph_model.models import DEFAULT_WEIGHT, Graph

from .adjacency import build_weighted_adjacency
from .models import PathResult

DEFAULT_ITERATION_SLACK = 200


@dataclass(slots=True)
class _OpenEntry:
    id: str
    f: float


def iteration_cap(graph: Graph, slack: int = DEFAULT_ITERATION_SLACK) -> int:
    n = len(graph.nodes)
    return n * n + slack


def _walk_back(previous: dict[str, str | None], end_id: str) -> list[str]:
    path: list[str] = []
    current: str | None = end_id
    while current is not None:
        path.append(current)
        current = previous.get(current)
    path.reverse()
    return path


def dijkstra(
    graph: Graph,
    start_id: str,
    end_id: str,
    *,
    iteration_slack: int = DEFAULT_ITERATION_SLACK,
    default_weight: float = DEFAULT_WEIGHT,
) -> PathResult:
    """Single-source shortest path over non-negative weights.

    Uses a lazy-deletion binary heap: stale entries stay queued and are
    skipped once their node is settled. Exceeding ``|V|^2 + iteration_slack``
    loop iterations returns an aborted result instead of a path.
    """
    if start_id not in graph.nodes or end_id not in graph.nodes:
        return PathResult()

    adjacency = build_weighted_adjacency(graph, default_weight)
    distances = {node_id: math.inf for node_id in graph.nodes}
    previous: dict[str, str | None] = {node_id: None for node_id in graph.nodes}
    distances[start_id] = 0.0
    settled: set[str] = set()

    # seq keeps equal-distance pops in push order.
    seq = itertools.count()
    heap: list[tuple[float, int, str]] = [(0.0, next(seq), start_id)]

    max_iterations = iteration_cap(graph, iteration_slack)
    iterations = 0
    while heap:
        if iterations > max_iterations:
            return PathResult(aborted=True)
        iterations += 1

        dist, _, u = heapq.heappop(heap)
        if u in settled:
            continue
        settled.add(u)

        if u == end_id or math.isinf(dist):
            break

        for nei in adjacency[u]:
            alt = dist + nei.weight
            if alt < distances[nei.target]:
                distances[nei.target] = alt
                previous[nei.target] = u
                heapq.heappush(heap, (alt, next(seq), nei.target))

    if math.isinf(distances[end_id]):
        return PathResult()
    return PathResult(path=_walk_back(previous, end_id), cost=distances[end_id])


def euclidean(graph: Graph, a_id: str, b_id: str) -> float:
    a = graph.nodes.get(a_id)
    b = graph.nodes.get(b_id)
    if a is None or b is None:
        return 0.0
    return math.hypot(a.x - b.x, a.y - b.y)


def astar(
    graph: Graph,
    start_id: str,
    end_id: str,
    *,
    iteration_slack: int = DEFAULT_ITERATION_SLACK,
    default_weight: float = DEFAULT_WEIGHT,
) -> PathResult:
    """A* search guided by straight-line distance to the end node.

    The heuristic compares canvas coordinates while weights come from node
    properties, so it is only admissible when every edge weight is at least
    the Euclidean distance between its endpoints. Otherwise the returned cost
    can exceed the true optimum. The reported cost is g(end), never f.
    """
    if start_id not in graph.nodes or end_id not in graph.nodes:
        return PathResult()

    adjacency = build_weighted_adjacency(graph, default_weight)
    g_score = {node_id: math.inf for node_id in graph.nodes}
    f_score = {node_id: math.inf for node_id in graph.nodes}
    previous: dict[str, str | None] = {node_id: None for node_id in graph.nodes}
    closed: set[str] = set()

    g_score[start_id] = 0.0
    f_score[start_id] = euclidean(graph, start_id, end_id)
    open_set = [_OpenEntry(id=start_id, f=f_score[start_id])]

    max_iterations = iteration_cap(graph, iteration_slack)
    iterations = 0
    while open_set:
        if iterations > max_iterations:
            return PathResult(aborted=True)
        iterations += 1

        # Stable sort: equal f keeps insertion order.
        open_set.sort(key=lambda entry: entry.f)
        u = open_set.pop(0).id

        if u in closed:
            continue
        closed.add(u)

        if u == end_id:
            return PathResult(path=_walk_back(previous, end_id), cost=g_score[end_id])

        for nei in adjacency[u]:
            tentative = g_score[u] + nei.weight
            if tentative < g_score[nei.target]:
                previous[nei.target] = u
                g_score[nei.target] = tentative
                f = tentative + euclidean(graph, nei.target, end_id)
                f_score[nei.target] = f

                existing = next((entry for entry in open_set if entry.id == nei.target), None)
                if existing is None:
                    open_set.append(_OpenEntry(id=nei.target, f=f))
                else:
                    existing.f = f

    return PathResult()
