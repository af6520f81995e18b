from .export import adjacency_by_label, adjacency_matrix, export_graph_csv, export_graph_document
from .models import DEFAULT_WEIGHT, Edge, Graph, GraphIntegrityError, Node, default_properties
from .weights import property_distance, property_weight
from .wire_models import EdgeValue, GraphValue, LabelValidationError, NodeValue

__all__ = [
    "DEFAULT_WEIGHT",
    "Edge",
    "EdgeValue",
    "Graph",
    "GraphIntegrityError",
    "GraphValue",
    "LabelValidationError",
    "Node",
    "NodeValue",
    "adjacency_by_label",
    "adjacency_matrix",
    "default_properties",
    "export_graph_csv",
    "export_graph_document",
    "property_distance",
    "property_weight",
]
