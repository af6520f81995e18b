from __future__ import annotations

from collections import deque

from graph_model.models import Graph

from .adjacency import build_adjacency


def bfs(graph: Graph, start_id: str) -> list[str]:
    """Level-order visit sequence from ``start_id``; empty when the start is unknown."""
    if start_id not in graph.nodes:
        return []

    adjacency = build_adjacency(graph)
    visited = {start_id}
    order: list[str] = []
    queue = deque([start_id])
    while queue:
        current = queue.popleft()
        order.append(current)
        for nei in adjacency[current]:
            # Marking on enqueue keeps each node in the queue at most once.
            if nei not in visited:
                visited.add(nei)
                queue.append(nei)
    return order


def dfs(graph: Graph, start_id: str) -> list[str]:
    """Preorder visit sequence with an explicit stack.

    Neighbours are pushed in reverse so the first neighbour in adjacency order
    is explored first, matching the recursive left-to-right order.
    """
    if start_id not in graph.nodes:
        return []

    adjacency = build_adjacency(graph)
    visited: set[str] = set()
    order: list[str] = []
    stack = [start_id]
    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        order.append(current)
        for nei in reversed(adjacency[current]):
            if nei not in visited:
                stack.append(nei)
    return order
