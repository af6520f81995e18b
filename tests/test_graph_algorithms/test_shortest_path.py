from __future__ import annotations

import math

import pytest

from graph_algorithms.shortest_path import astar, dijkstra, iteration_cap
from graph_model.generator import generate_random_graph
from graph_model.models import Graph, Node


def _graph(nodes: list, edges: list[tuple]) -> Graph:
    graph = Graph()
    for item in nodes:
        if isinstance(item, tuple):
            node_id, x, y = item
            graph.add_node(Node(node_id, node_id, x, y))
        else:
            graph.add_node(Node(item))
    for edge in edges:
        graph.add_edge(*edge)
    return graph


def _euclidean_weighted(graph: Graph, slack: float = 0.01) -> Graph:
    # weight >= straight-line distance keeps the A* heuristic admissible
    out = Graph()
    for node in graph.get_nodes():
        out.add_node(Node(node.id, node.label, node.x, node.y, dict(node.properties)))
    for edge in graph.get_edges():
        a, b = graph.nodes[edge.source], graph.nodes[edge.target]
        out.add_edge(edge.source, edge.target, weight=math.hypot(a.x - b.x, a.y - b.y) + slack)
    return out


@pytest.mark.parametrize("search", [dijkstra, astar])
def test_single_edge_path(search) -> None:
    graph = _graph(["A", "B"], [("A", "B", 1.0)])

    result = search(graph, "A", "B")

    assert result.path == ["A", "B"]
    assert result.cost == 1
    assert result.to_dict() == {"path": ["A", "B"], "cost": 1}


@pytest.mark.parametrize("search", [dijkstra, astar])
def test_missing_end_is_unreachable_not_error(search) -> None:
    graph = _graph(["A", "B"], [("A", "B", 1.0)])

    result = search(graph, "A", "Z")

    assert result.to_dict() == {"path": [], "cost": 0}
    assert result.aborted is False


@pytest.mark.parametrize("search", [dijkstra, astar])
def test_missing_start_is_unreachable(search) -> None:
    graph = _graph(["A", "B"], [("A", "B", 1.0)])

    assert search(graph, "Z", "B").to_dict() == {"path": [], "cost": 0}


@pytest.mark.parametrize("search", [dijkstra, astar])
def test_disconnected_end(search) -> None:
    graph = _graph(["A", "B", "C"], [("A", "B", 1.0)])

    result = search(graph, "A", "C")

    assert result.path == []
    assert result.cost == 0
    assert not result.found


@pytest.mark.parametrize("search", [dijkstra, astar])
def test_start_equals_end(search) -> None:
    graph = _graph(["A", "B"], [("A", "B", 3.0)])

    result = search(graph, "A", "A")

    assert result.path == ["A"]
    assert result.cost == 0


def test_dijkstra_prefers_cheaper_multi_hop_route() -> None:
    graph = _graph(["A", "B", "C"], [("A", "B", 1.0), ("B", "C", 1.0), ("A", "C", 5.0)])

    result = dijkstra(graph, "A", "C")

    assert result.path == ["A", "B", "C"]
    assert result.cost == 2


def test_edges_are_traversed_in_both_directions() -> None:
    graph = _graph(["A", "B", "C"], [("B", "A", 2.0), ("C", "B", 3.0)])

    assert dijkstra(graph, "A", "C").path == ["A", "B", "C"]
    assert dijkstra(graph, "C", "A").path == ["C", "B", "A"]
    assert dijkstra(graph, "C", "A").cost == 5


def test_non_positive_weight_counts_as_default() -> None:
    graph = _graph(["A", "B", "C"], [("A", "B", 0.0), ("B", "C", -4.0)])

    result = dijkstra(graph, "A", "C")

    assert result.path == ["A", "B", "C"]
    assert result.cost == 2


def test_iteration_cap_is_node_count_squared_plus_slack() -> None:
    graph = _graph(["A", "B", "C"], [])

    assert iteration_cap(graph) == 9 + 200
    assert iteration_cap(graph, slack=0) == 9


@pytest.mark.parametrize("search", [dijkstra, astar])
def test_runaway_iteration_aborts(search) -> None:
    graph = _graph(["A", "B"], [("A", "B", 1.0)])

    # |V|^2 + slack == 0: the second loop iteration trips the valve
    result = search(graph, "A", "B", iteration_slack=-4)

    assert result.aborted is True
    assert result.to_dict() == {"path": [], "cost": 0, "aborted": True}


def test_astar_matches_dijkstra_on_handmade_admissible_graph() -> None:
    graph = _graph(
        [("A", 0, 0), ("B", 3, 4), ("C", 6, 8), ("D", 3, 0)],
        [("A", "B", 5.0), ("B", "C", 5.0), ("A", "D", 3.0), ("D", "C", 9.0)],
    )

    expected = dijkstra(graph, "A", "C")
    result = astar(graph, "A", "C")

    assert expected.path == ["A", "B", "C"]
    assert expected.cost == 10
    assert result.path == expected.path
    assert result.cost == expected.cost


def test_astar_cost_equals_dijkstra_when_heuristic_admissible() -> None:
    for seed in (3, 11, 29):
        graph = _euclidean_weighted(generate_random_graph(30, seed=seed))
        ids = list(graph.nodes)
        for start, end in [(ids[0], ids[-1]), (ids[5], ids[17]), (ids[9], ids[2])]:
            d = dijkstra(graph, start, end)
            a = astar(graph, start, end)
            assert not d.aborted and not a.aborted
            if d.found:
                assert a.found
                assert a.cost == pytest.approx(d.cost)
                assert a.path[0] == start and a.path[-1] == end
            else:
                assert not a.found


def test_astar_can_overshoot_with_inadmissible_heuristic() -> None:
    # The cheap route detours through B, which sits far from E on the canvas,
    # so A* settles E through C first and reports the dearer route.
    graph = _graph(
        [("A", 0, 0), ("B", -100, 0), ("C", 10, 1), ("E", 10, 0)],
        [("A", "B", 1.0), ("B", "E", 1.0), ("A", "C", 5.0), ("C", "E", 5.0)],
    )

    assert dijkstra(graph, "A", "E").to_dict() == {"path": ["A", "B", "E"], "cost": 2}
    assert astar(graph, "A", "E").to_dict() == {"path": ["A", "C", "E"], "cost": 10}


def test_astar_reports_accumulated_weight_not_f_score() -> None:
    graph = _graph([("A", 0, 0), ("B", 100, 0)], [("A", "B", 150.0)])

    result = astar(graph, "A", "B")

    assert result.cost == 150
