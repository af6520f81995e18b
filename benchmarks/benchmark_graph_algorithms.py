from __future__ import annotations

import time

from graph_algorithms.config import AlgorithmConfig
from graph_algorithms.engine import GraphAlgorithmsEngine
from graph_model.generator import generate_random_graph


def make_engine() -> GraphAlgorithmsEngine:
    cfg = AlgorithmConfig(
        default_centrality_limit=5,
        iteration_slack=200,
        default_weight=1.0,
    )
    return GraphAlgorithmsEngine(cfg)


def bench(engine: GraphAlgorithmsEngine, algorithm: str, graph, repeats: int, **params) -> float:
    start = time.perf_counter()
    for _ in range(repeats):
        engine.run(algorithm, graph, **params)
    return (time.perf_counter() - start) / repeats


def main(node_count: int = 500, repeats: int = 20) -> None:
    engine = make_engine()
    graph = generate_random_graph(node_count, seed=42)
    ids = list(graph.nodes)
    start_id, end_id = ids[0], ids[-1]

    print(f"node_count={len(graph.nodes)}")
    print(f"edge_count={len(graph.edges)}")
    cases = [
        ("bfs", {"start_id": start_id}),
        ("dfs", {"start_id": start_id}),
        ("dijkstra", {"start_id": start_id, "end_id": end_id}),
        ("astar", {"start_id": start_id, "end_id": end_id}),
        ("degree_centrality", {"limit": 10}),
        ("welsh_powell", {}),
        ("connected_components", {}),
    ]
    for algorithm, params in cases:
        elapsed = bench(engine, algorithm, graph, repeats, **params)
        print(f"{algorithm}_ms={elapsed * 1000:.3f}")


if __name__ == "__main__":
    main()
