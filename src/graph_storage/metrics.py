from __future__ import annotations

from prometheus_client import Counter, Gauge, Histogram

STORAGE_RETRIES = Counter("graph_storage_retries_total", "Number of storage retries")
SKIPPED_EDGES = Counter("graph_storage_skipped_edges_total", "Stored edges dropped on load for missing endpoints")
SAVED_NODES = Gauge("graph_storage_saved_nodes", "Node count of the last saved graph")
SAVED_EDGES = Gauge("graph_storage_saved_edges", "Edge count of the last saved graph")
QUERY_LATENCY_SECONDS = Histogram(
    "graph_storage_query_latency_seconds",
    "Latency of graph load/save operations",
    ["operation"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2, 5),
)
