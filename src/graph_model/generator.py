from __future__ import annotations

import math
import random
import uuid

from .models import Graph, Node
from .weights import property_weight

VIEW_WIDTH = 1200
VIEW_HEIGHT = 900
MARGIN = 50


def generate_random_graph(node_count: int, seed: int | None = None) -> Graph:
    """Lay nodes out on a jittered grid and wire each to 1-3 random peers.

    Edge weights are property-derived and every node's connectionCount is set
    to its final degree.
    """
    rng = random.Random(seed)
    graph = Graph()
    if node_count <= 0:
        return graph

    cols = math.ceil(math.sqrt(node_count))
    rows = math.ceil(node_count / cols)
    cell_w = max((VIEW_WIDTH - MARGIN * 2) / cols, 1)
    cell_h = max((VIEW_HEIGHT - MARGIN * 2) / rows, 1)

    nodes: list[Node] = []
    for i in range(node_count):
        r, c = divmod(i, cols)
        jitter_x = (rng.random() - 0.5) * min(cell_w * 0.3, 30)
        jitter_y = (rng.random() - 0.5) * min(cell_h * 0.3, 30)
        node = Node(
            id=uuid.UUID(int=rng.getrandbits(128), version=4).hex,
            label=f"Node {i + 1}",
            x=MARGIN + c * cell_w + cell_w / 2 + jitter_x,
            y=MARGIN + r * cell_h + cell_h / 2 + jitter_y,
            properties={
                "isActive": rng.random() > 0.2,
                "activity": rng.random(),
                "interactionCount": rng.randrange(100),
                "connectionCount": 0,
            },
        )
        nodes.append(node)
        graph.add_node(node)

    linked: set[frozenset[str]] = set()
    for node in nodes:
        for _ in range(rng.randint(1, 3)):
            target = nodes[rng.randrange(len(nodes))]
            if target.id == node.id:
                continue
            key = frozenset((node.id, target.id))
            if key in linked:
                continue
            linked.add(key)
            graph.add_edge(node.id, target.id, weight=property_weight(node, target))

    degree = {node.id: 0 for node in nodes}
    for edge in graph.get_edges():
        degree[edge.source] += 1
        degree[edge.target] += 1
    for node in nodes:
        node.properties["connectionCount"] = degree[node.id]

    return graph
