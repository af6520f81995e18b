from __future__ import annotations

import copy
import logging
import threading
from typing import Any

from graph_model.models import Graph, GraphIntegrityError, Node

from .metrics import SAVED_EDGES, SAVED_NODES, SKIPPED_EDGES


class InMemoryGraphRepository:
    """Process-local stand-in for the database with the same save/load semantics."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._nodes: dict[str, dict[str, Any]] = {}
        self._edges: list[dict[str, Any]] = []
        self._logger = logging.getLogger("graph-storage")

    def save_graph(self, graph: Graph) -> None:
        with self._lock:
            for node in graph.get_nodes():
                self._nodes[node.id] = {
                    "id": node.id,
                    "label": node.label,
                    "x": node.x,
                    "y": node.y,
                    "properties": copy.deepcopy(node.properties),
                }
            self._edges = [
                {"id": edge.id, "source_id": edge.source, "target_id": edge.target, "weight": edge.weight}
                for edge in graph.get_edges()
            ]
            SAVED_NODES.set(len(graph.nodes))
            SAVED_EDGES.set(len(graph.edges))
        self._logger.info("saved graph nodes=%d edges=%d", len(graph.nodes), len(graph.edges))

    def load_graph(self) -> Graph:
        with self._lock:
            node_rows = [copy.deepcopy(row) for row in self._nodes.values()]
            edge_rows = list(self._edges)

        graph = Graph()
        for row in node_rows:
            graph.add_node(
                Node(id=row["id"], label=row["label"], x=row["x"], y=row["y"], properties=row["properties"] or {})
            )
        for row in edge_rows:
            try:
                graph.add_edge(row["source_id"], row["target_id"], weight=row["weight"], edge_id=row["id"])
            except GraphIntegrityError as exc:
                SKIPPED_EDGES.inc()
                self._logger.warning("skipping edge id=%s: %s", row["id"], exc)
        return graph

    def clear(self) -> None:
        with self._lock:
            self._nodes.clear()
            self._edges.clear()
