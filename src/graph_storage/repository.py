from __future__ import annotations

from typing import Protocol, runtime_checkable

from graph_model.models import Graph


@runtime_checkable
class GraphRepository(Protocol):
    """Persistence collaborator handed to the HTTP layer.

    ``save_graph`` is a full replace: nodes are upserted by id, then every
    stored edge is dropped and the graph's edges are written again.
    ``load_graph`` returns a fresh snapshot, skipping edges whose endpoints
    are no longer stored.
    """

    def load_graph(self) -> Graph: ...

    def save_graph(self, graph: Graph) -> None: ...
