from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any

DEFAULT_WEIGHT = 1.0


class GraphIntegrityError(ValueError):
    """Raised when an edge references a node id the graph does not hold."""


def default_properties() -> dict[str, Any]:
    return {"isActive": True, "activity": 0.0, "interactionCount": 0, "connectionCount": 0}


@dataclass(slots=True)
class Node:
    id: str
    label: str = ""
    x: float = 0.0
    y: float = 0.0
    properties: dict[str, Any] = field(default_factory=default_properties)

    def __post_init__(self) -> None:
        if not self.label:
            self.label = self.id


@dataclass(slots=True)
class Edge:
    source: str
    target: str
    weight: float = DEFAULT_WEIGHT
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def other(self, node_id: str) -> str:
        return self.target if node_id == self.source else self.source


class Graph:
    """Arena-style graph: nodes indexed by id, edges stored by endpoint id.

    Iteration order over nodes and edges is insertion order; the algorithms
    rely on it for deterministic output.
    """

    def __init__(self) -> None:
        self.nodes: dict[str, Node] = {}
        self.edges: list[Edge] = []

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def has_node(self, node_id: str) -> bool:
        return node_id in self.nodes

    def add_node(self, node: Node) -> None:
        if node.id not in self.nodes:
            self.nodes[node.id] = node

    def add_edge(
        self,
        source_id: str,
        target_id: str,
        weight: float | None = None,
        edge_id: str | None = None,
    ) -> Edge:
        if source_id not in self.nodes or target_id not in self.nodes:
            raise GraphIntegrityError(f"Nodes not found: {source_id}, {target_id}")

        edge = Edge(
            source=source_id,
            target=target_id,
            weight=DEFAULT_WEIGHT if weight is None else float(weight),
        )
        if edge_id:
            edge.id = edge_id
        self.edges.append(edge)
        return edge

    def get_node(self, node_id: str) -> Node | None:
        return self.nodes.get(node_id)

    def get_nodes(self) -> list[Node]:
        return list(self.nodes.values())

    def get_edges(self) -> list[Edge]:
        return list(self.edges)
