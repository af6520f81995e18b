from __future__ import annotations

from prometheus_client import Counter, Histogram

ALGORITHM_RUNS = Counter("graph_algorithm_runs_total", "Number of algorithm invocations", ["algorithm"])
ABORTED_PATH_SEARCHES = Counter(
    "graph_algorithm_aborted_total",
    "Shortest-path searches stopped by the iteration cap",
    ["algorithm"],
)
ALGORITHM_LATENCY_SECONDS = Histogram(
    "graph_algorithm_latency_seconds",
    "Latency of algorithm invocations",
    ["algorithm"],
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2, 5),
)
