from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from . import models
from .weights import is_usable_weight, property_weight


class LabelValidationError(ValueError):
    """Raised when submitted node labels are empty or not unique."""


def _endpoint_id(value: Any) -> Any:
    if isinstance(value, dict):
        return value.get("id")
    return value


class WireModel(BaseModel):
    # Clients attach UI-only fields (sourceLabel, adjacency exports, ...); drop them.
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class NodeValue(WireModel):
    id: str
    label: str = ""
    x: float = 0.0
    y: float = 0.0
    properties: dict[str, Any] | None = None

    @classmethod
    def from_domain(cls, node: models.Node) -> "NodeValue":
        return cls(id=node.id, label=node.label, x=node.x, y=node.y, properties=dict(node.properties))

    def to_domain(self) -> models.Node:
        properties = dict(self.properties) if self.properties is not None else models.default_properties()
        return models.Node(id=self.id, label=self.label, x=self.x, y=self.y, properties=properties)


class EdgeValue(WireModel):
    id: str | None = None
    source_id: str | None = Field(default=None, alias="sourceId")
    target_id: str | None = Field(default=None, alias="targetId")
    weight: float | None = None

    @model_validator(mode="before")
    @classmethod
    def _accept_legacy_endpoints(cls, data: Any) -> Any:
        # Older clients send {source, target} with either ids or whole node objects.
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if not data.get("sourceId") and data.get("source") is not None:
            data["sourceId"] = _endpoint_id(data.pop("source"))
        if not data.get("targetId") and data.get("target") is not None:
            data["targetId"] = _endpoint_id(data.pop("target"))
        return data

    @classmethod
    def from_domain(cls, edge: models.Edge) -> "EdgeValue":
        return cls(id=edge.id, source_id=edge.source, target_id=edge.target, weight=edge.weight)


class GraphValue(WireModel):
    nodes: list[NodeValue] = Field(default_factory=list)
    edges: list[EdgeValue] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, graph: models.Graph) -> "GraphValue":
        return cls(
            nodes=[NodeValue.from_domain(node) for node in graph.get_nodes()],
            edges=[EdgeValue.from_domain(edge) for edge in graph.get_edges()],
        )

    def validate_labels(self) -> None:
        seen: set[str] = set()
        for node in self.nodes:
            if not node.label or not node.label.strip():
                raise LabelValidationError("Node names cannot be empty.")
            if node.label in seen:
                raise LabelValidationError(
                    f'Duplicate node name found: "{node.label}". Node names must be unique.'
                )
            seen.add(node.label)

    def to_domain(self, derive_missing_weights: bool = True) -> models.Graph:
        """Build a Graph; raises GraphIntegrityError for edges with blank or unknown endpoints."""
        graph = models.Graph()
        for item in self.nodes:
            graph.add_node(item.to_domain())

        for item in self.edges:
            if not item.source_id or not item.target_id:
                raise models.GraphIntegrityError(f"Nodes not found: {item.source_id}, {item.target_id}")
            weight = item.weight if is_usable_weight(item.weight) else None
            if weight is None and derive_missing_weights:
                source = graph.get_node(item.source_id)
                target = graph.get_node(item.target_id)
                if source is not None and target is not None:
                    weight = property_weight(source, target)
            graph.add_edge(item.source_id, item.target_id, weight=weight, edge_id=item.id)
        return graph

    def to_payload(self) -> dict[str, Any]:
        return {
            "nodes": [node.model_dump() for node in self.nodes],
            "edges": [
                {"sourceId": edge.source_id, "targetId": edge.target_id, "weight": edge.weight}
                for edge in self.edges
            ],
        }
