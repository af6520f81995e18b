from __future__ import annotations

from graph_model.models import DEFAULT_WEIGHT, Graph
from graph_model.weights import is_usable_weight

from .models import Neighbor


def build_adjacency(graph: Graph) -> dict[str, list[str]]:
    """Unweighted undirected adjacency, neighbours in edge-insertion order."""
    adjacency: dict[str, list[str]] = {node_id: [] for node_id in graph.nodes}
    for edge in graph.edges:
        adjacency[edge.source].append(edge.target)
        adjacency[edge.target].append(edge.source)
    return adjacency


def build_weighted_adjacency(graph: Graph, default_weight: float = DEFAULT_WEIGHT) -> dict[str, list[Neighbor]]:
    """Weighted undirected adjacency.

    Weights that are not finite positive numbers (missing, zero, negative, NaN,
    inf) are coerced to ``default_weight``.
    """
    adjacency: dict[str, list[Neighbor]] = {node_id: [] for node_id in graph.nodes}
    for edge in graph.edges:
        weight = float(edge.weight) if is_usable_weight(edge.weight) else default_weight
        adjacency[edge.source].append(Neighbor(target=edge.target, weight=weight))
        adjacency[edge.target].append(Neighbor(target=edge.source, weight=weight))
    return adjacency
