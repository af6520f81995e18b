from __future__ import annotations

import logging

from graph_model.models import Graph, Node
from graph_storage import GraphRepository, InMemoryGraphRepository, StorageConfig, create_repository


def _graph() -> Graph:
    graph = Graph()
    graph.add_node(Node("A", "Alice", 1, 2, {"isActive": True, "activity": 0.4, "interactionCount": 3, "connectionCount": 1}))
    graph.add_node(Node("B", "Bob", 3, 4))
    graph.add_node(Node("C", "Carol", 5, 6))
    graph.add_edge("A", "B", weight=0.5, edge_id="e1")
    graph.add_edge("B", "C", weight=2.0, edge_id="e2")
    return graph


def test_round_trip_preserves_order_and_weights() -> None:
    repo = InMemoryGraphRepository()
    repo.save_graph(_graph())

    loaded = repo.load_graph()

    assert [node.id for node in loaded.get_nodes()] == ["A", "B", "C"]
    assert loaded.get_node("A").properties["activity"] == 0.4
    assert [(e.id, e.source, e.target, e.weight) for e in loaded.get_edges()] == [
        ("e1", "A", "B", 0.5),
        ("e2", "B", "C", 2.0),
    ]


def test_save_upserts_nodes_and_replaces_edges() -> None:
    repo = InMemoryGraphRepository()
    repo.save_graph(_graph())

    second = Graph()
    second.add_node(Node("B", "Bobby", 9, 9))
    second.add_node(Node("D", "Dave"))
    second.add_edge("B", "D", edge_id="e3")
    repo.save_graph(second)

    loaded = repo.load_graph()

    assert [node.id for node in loaded.get_nodes()] == ["A", "B", "C", "D"]
    assert loaded.get_node("B").label == "Bobby"
    assert [edge.id for edge in loaded.get_edges()] == ["e3"]


def test_load_returns_independent_snapshots() -> None:
    repo = InMemoryGraphRepository()
    source = _graph()
    repo.save_graph(source)

    source.get_node("A").properties["activity"] = 0.99
    first = repo.load_graph()
    first.get_node("A").label = "changed"
    first.add_node(Node("Z"))

    second = repo.load_graph()
    assert second.get_node("A").label == "Alice"
    assert second.get_node("A").properties["activity"] == 0.4
    assert "Z" not in second


def test_dangling_edges_are_skipped_on_load(caplog) -> None:
    repo = InMemoryGraphRepository()
    repo.save_graph(_graph())
    repo._edges.append({"id": "ghost", "source_id": "A", "target_id": "gone", "weight": 1.0})

    with caplog.at_level(logging.WARNING, logger="graph-storage"):
        loaded = repo.load_graph()

    assert [edge.id for edge in loaded.get_edges()] == ["e1", "e2"]
    assert "skipping edge id=ghost" in caplog.text


def test_empty_repository_loads_empty_graph() -> None:
    repo = InMemoryGraphRepository()
    repo.save_graph(_graph())
    repo.clear()

    loaded = repo.load_graph()

    assert len(loaded) == 0
    assert loaded.get_edges() == []


def test_create_repository_memory_backend() -> None:
    cfg = StorageConfig(
        backend="memory",
        postgres_dsn="postgresql://unused",
        pg_min_conn=1,
        pg_max_conn=1,
        retry_attempts=1,
        retry_base_delay=0.0,
    )

    repo = create_repository(cfg)

    assert isinstance(repo, InMemoryGraphRepository)
    assert isinstance(repo, GraphRepository)
