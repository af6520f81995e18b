from __future__ import annotations

import csv
import io
from typing import Any

from .models import Graph
from .wire_models import NodeValue


def adjacency_by_label(graph: Graph) -> dict[str, list[str]]:
    adjacency: dict[str, list[str]] = {node.label: [] for node in graph.get_nodes()}
    for edge in graph.get_edges():
        if edge.source not in graph or edge.target not in graph:
            continue
        for node_id in (edge.source, edge.target):
            adjacency[graph.nodes[node_id].label].append(graph.nodes[edge.other(node_id)].label)
    return adjacency


def adjacency_matrix(graph: Graph) -> dict[str, Any]:
    nodes = graph.get_nodes()
    index = {node.id: idx for idx, node in enumerate(nodes)}
    matrix = [[0] * len(nodes) for _ in nodes]
    for edge in graph.get_edges():
        i = index.get(edge.source)
        j = index.get(edge.target)
        if i is None or j is None:
            continue
        matrix[i][j] = 1
        matrix[j][i] = 1
    return {"labels": [node.label for node in nodes], "matrix": matrix}


def export_graph_document(graph: Graph) -> dict[str, Any]:
    edges = []
    for edge in graph.get_edges():
        source = graph.get_node(edge.source)
        target = graph.get_node(edge.target)
        edges.append(
            {
                "id": edge.id,
                "sourceId": edge.source,
                "targetId": edge.target,
                "weight": edge.weight,
                "sourceLabel": source.label if source else None,
                "targetLabel": target.label if target else None,
            }
        )
    return {
        "nodes": [NodeValue.from_domain(node).model_dump() for node in graph.get_nodes()],
        "edges": edges,
        "adjacencyList": adjacency_by_label(graph),
        "adjacencyMatrix": adjacency_matrix(graph),
    }


def export_graph_csv(graph: Graph) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["ID", "Label", "X", "Y", "Activity", "Interaction", "Connection"])
    for node in graph.get_nodes():
        props = node.properties
        writer.writerow(
            [
                node.id,
                node.label,
                node.x,
                node.y,
                props.get("activity"),
                props.get("interactionCount"),
                props.get("connectionCount"),
            ]
        )
    writer.writerow([])
    writer.writerow(["Source", "Target", "Weight"])
    for edge in graph.get_edges():
        writer.writerow([edge.source, edge.target, edge.weight])
    return buffer.getvalue()
