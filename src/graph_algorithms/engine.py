from __future__ import annotations

import logging
import time
from typing import Any, Callable

from graph_model.models import Graph

from .analysis import connected_components, degree_centrality, welsh_powell_coloring
from .config import AlgorithmConfig, load_algorithm_config
from .metrics import ABORTED_PATH_SEARCHES, ALGORITHM_LATENCY_SECONDS, ALGORITHM_RUNS
from .models import DegreeEntry, PathResult
from .shortest_path import astar, dijkstra
from .traversal import bfs, dfs


class UnknownAlgorithmError(KeyError):
    pass


class GraphAlgorithmsEngine:
    """Runs the analysis algorithms over a caller-supplied graph snapshot.

    The engine holds configuration only; every call builds its own adjacency
    views, so one engine can serve concurrent callers as long as each passes
    its own graph.

    Notes:
    - Traversals return an empty order for an unknown start node.
    - Dijkstra/A* give up after |V|^2 + iteration_slack loop iterations and
      report ``aborted`` instead of a path.
    - A* ranks by g + euclid(node, end); with property-derived weights the
      heuristic may overestimate, so its cost is not guaranteed optimal.
    """

    DISPLAY_NAMES = {
        "bfs": "BFS",
        "dfs": "DFS",
        "dijkstra": "Dijkstra",
        "astar": "A*",
        "degree_centrality": "Degree Centrality",
        "welsh_powell": "Welsh-Powell Coloring",
        "connected_components": "Connected Components",
    }

    def __init__(self, config: AlgorithmConfig | None = None) -> None:
        self.config = config or load_algorithm_config()
        self.logger = logging.getLogger("graph-algorithms")
        self._handlers: dict[str, Callable[..., dict[str, Any]]] = {
            "bfs": self._bfs_body,
            "dfs": self._dfs_body,
            "dijkstra": self._dijkstra_body,
            "astar": self._astar_body,
            "degree_centrality": self._centrality_body,
            "welsh_powell": self._coloring_body,
            "connected_components": self._components_body,
        }

    def bfs(self, graph: Graph, start_id: str) -> list[str]:
        return bfs(graph, start_id)

    def dfs(self, graph: Graph, start_id: str) -> list[str]:
        return dfs(graph, start_id)

    def dijkstra(self, graph: Graph, start_id: str, end_id: str) -> PathResult:
        result = dijkstra(
            graph,
            start_id,
            end_id,
            iteration_slack=self.config.iteration_slack,
            default_weight=self.config.default_weight,
        )
        self._note_abort("dijkstra", result, graph, start_id, end_id)
        return result

    def astar(self, graph: Graph, start_id: str, end_id: str) -> PathResult:
        result = astar(
            graph,
            start_id,
            end_id,
            iteration_slack=self.config.iteration_slack,
            default_weight=self.config.default_weight,
        )
        self._note_abort("astar", result, graph, start_id, end_id)
        return result

    def degree_centrality(self, graph: Graph, limit: int | None = None) -> list[DegreeEntry]:
        return degree_centrality(graph, self.config.default_centrality_limit if limit is None else limit)

    def welsh_powell(self, graph: Graph) -> dict[str, int]:
        return welsh_powell_coloring(graph)

    def connected_components(self, graph: Graph) -> list[list[str]]:
        return connected_components(graph)

    def _note_abort(self, name: str, result: PathResult, graph: Graph, start_id: str, end_id: str) -> None:
        if not result.aborted:
            return
        ABORTED_PATH_SEARCHES.labels(algorithm=name).inc()
        self.logger.warning(
            "path search aborted algorithm=%s start=%s end=%s nodes=%d edges=%d",
            name,
            start_id,
            end_id,
            len(graph.nodes),
            len(graph.edges),
        )

    def _bfs_body(self, graph: Graph, start_id: str) -> dict[str, Any]:
        return {"startNode": start_id, "visitedOrder": self.bfs(graph, start_id)}

    def _dfs_body(self, graph: Graph, start_id: str) -> dict[str, Any]:
        return {"startNode": start_id, "visitedOrder": self.dfs(graph, start_id)}

    def _dijkstra_body(self, graph: Graph, start_id: str, end_id: str) -> dict[str, Any]:
        return {"startNode": start_id, "endNode": end_id, **self.dijkstra(graph, start_id, end_id).to_dict()}

    def _astar_body(self, graph: Graph, start_id: str, end_id: str) -> dict[str, Any]:
        return {"startNode": start_id, "endNode": end_id, **self.astar(graph, start_id, end_id).to_dict()}

    def _centrality_body(self, graph: Graph, limit: int | None = None) -> dict[str, Any]:
        return {"topNodes": [entry.to_dict() for entry in self.degree_centrality(graph, limit)]}

    def _coloring_body(self, graph: Graph) -> dict[str, Any]:
        return {"colors": self.welsh_powell(graph)}

    def _components_body(self, graph: Graph) -> dict[str, Any]:
        communities = self.connected_components(graph)
        return {"communities": communities, "count": len(communities)}

    def run(self, algorithm: str, graph: Graph, **params: Any) -> dict[str, Any]:
        """Run one algorithm and wrap its result with name and timing metadata."""
        handler = self._handlers.get(algorithm)
        if handler is None:
            raise UnknownAlgorithmError(algorithm)

        started = time.perf_counter()
        body = handler(graph, **params)
        elapsed = time.perf_counter() - started

        ALGORITHM_RUNS.labels(algorithm=algorithm).inc()
        ALGORITHM_LATENCY_SECONDS.labels(algorithm=algorithm).observe(elapsed)
        self.logger.debug(
            "algorithm=%s nodes=%d edges=%d elapsed_ms=%.3f",
            algorithm,
            len(graph.nodes),
            len(graph.edges),
            elapsed * 1000.0,
        )
        return {"algorithm": self.DISPLAY_NAMES[algorithm], **body, "executionTimeMs": int(elapsed * 1000)}
