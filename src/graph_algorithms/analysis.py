from __future__ import annotations

from collections import deque

from graph_model.models import Graph

from .adjacency import build_adjacency
from .models import DegreeEntry

DEFAULT_CENTRALITY_LIMIT = 5


def degree_centrality(graph: Graph, limit: int = DEFAULT_CENTRALITY_LIMIT) -> list[DegreeEntry]:
    """Top ``limit`` nodes by undirected degree.

    Equal degrees keep node insertion order (``sorted`` is stable).
    """
    if limit < 0:
        raise ValueError("limit must be >= 0")

    degrees = {node_id: 0 for node_id in graph.nodes}
    for edge in graph.edges:
        degrees[edge.source] += 1
        degrees[edge.target] += 1

    ranked = sorted(degrees.items(), key=lambda item: item[1], reverse=True)
    return [DegreeEntry(id=node_id, degree=degree) for node_id, degree in ranked[:limit]]


def connected_components(graph: Graph) -> list[list[str]]:
    """Components seeded in node insertion order, members in BFS order."""
    adjacency = build_adjacency(graph)
    visited: set[str] = set()
    components: list[list[str]] = []

    for seed in graph.nodes:
        if seed in visited:
            continue
        component: list[str] = []
        visited.add(seed)
        queue = deque([seed])
        while queue:
            u = queue.popleft()
            component.append(u)
            for v in adjacency[u]:
                if v not in visited:
                    visited.add(v)
                    queue.append(v)
        components.append(component)

    return components


def welsh_powell_coloring(graph: Graph) -> dict[str, int]:
    """Greedy Welsh-Powell colouring with colours numbered from 1.

    Each round scans the uncoloured nodes in degree order and the colour map
    is filled in place, so a node already given the round's colour blocks its
    neighbours later in the same scan.
    """
    adjacency = build_adjacency(graph)
    ordered = sorted(graph.nodes, key=lambda node_id: len(adjacency[node_id]), reverse=True)

    colors: dict[str, int] = {}
    color = 1
    while len(colors) < len(ordered):
        for node_id in [n for n in ordered if n not in colors]:
            if all(colors.get(nei) != color for nei in adjacency[node_id]):
                colors[node_id] = color
        color += 1

    return colors
