from __future__ import annotations

import logging
from typing import Any

from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from graph_algorithms.engine import GraphAlgorithmsEngine
from graph_model.export import export_graph_csv, export_graph_document
from graph_model.models import Graph, GraphIntegrityError, Node
from graph_model.wire_models import GraphValue, LabelValidationError
from graph_storage import GraphRepository, create_repository

from .config import load_api_config

logger = logging.getLogger("graph-api")


def get_repository(request: Request) -> GraphRepository:
    return request.app.state.repository


def get_engine(request: Request) -> GraphAlgorithmsEngine:
    return request.app.state.engine


def _error(status_code: int, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={**extra, "error": message})


def _run_algorithm(
    repo: GraphRepository,
    engine: GraphAlgorithmsEngine,
    algorithm: str,
    **params: Any,
) -> dict[str, Any] | JSONResponse:
    try:
        graph = repo.load_graph()
        return engine.run(algorithm, graph, **params)
    except Exception as exc:  # noqa: BLE001
        logger.exception("algorithm=%s failed", algorithm)
        return _error(500, str(exc))


def sample_graph() -> Graph:
    graph = Graph()
    graph.add_node(Node("A", "Node A", 0, 0, {"isActive": True, "interactionCount": 10, "connectionCount": 2}))
    graph.add_node(Node("B", "Node B", 10, 10, {"isActive": True, "interactionCount": 5, "connectionCount": 1}))
    graph.add_edge("A", "B")
    return graph


def create_app(
    repository: GraphRepository | None = None,
    engine: GraphAlgorithmsEngine | None = None,
) -> FastAPI:
    cfg = load_api_config()
    app = FastAPI(title="Graph Analysis API")
    app.state.repository = repository if repository is not None else create_repository()
    app.state.engine = engine or GraphAlgorithmsEngine()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cfg.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def root() -> dict[str, str]:
        return {"message": "API Running"}

    @app.get("/health")
    def health_check() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/metrics")
    def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.post("/graph/save", response_model=None)
    def save_graph(payload: GraphValue, repo: GraphRepository = Depends(get_repository)):
        try:
            payload.validate_labels()
            graph = payload.to_domain()
        except (LabelValidationError, GraphIntegrityError) as exc:
            return _error(400, str(exc), success=False)

        try:
            repo.save_graph(graph)
        except Exception as exc:  # noqa: BLE001
            logger.exception("graph save failed")
            return _error(500, str(exc), success=False)

        logger.info("saved nodes=%d edges=%d", len(graph.nodes), len(graph.edges))
        return {"success": True, "message": "Graph saved"}

    @app.get("/graph/load", response_model=None)
    def load_graph(repo: GraphRepository = Depends(get_repository)):
        try:
            graph = repo.load_graph()
        except Exception as exc:  # noqa: BLE001
            logger.exception("graph load failed")
            return _error(500, str(exc), success=False)

        logger.info("loaded nodes=%d edges=%d", len(graph.nodes), len(graph.edges))
        return GraphValue.from_domain(graph).to_payload()

    @app.get("/graph/export", response_model=None)
    def export_graph(
        export_format: str = Query("json", alias="format", pattern="^(json|csv)$", description="Export format"),
        repo: GraphRepository = Depends(get_repository),
    ):
        try:
            graph = repo.load_graph()
        except Exception as exc:  # noqa: BLE001
            logger.exception("graph export failed")
            return _error(500, str(exc), success=False)

        if export_format == "csv":
            return Response(
                content=export_graph_csv(graph),
                media_type="text/csv",
                headers={"Content-Disposition": "attachment; filename=graph.csv"},
            )
        return export_graph_document(graph)

    @app.get("/graph/test")
    def test_graph() -> dict[str, Any]:
        return GraphValue.from_domain(sample_graph()).to_payload()

    @app.get("/algorithm/bfs/{start_node_id}", response_model=None)
    def run_bfs(
        start_node_id: str,
        repo: GraphRepository = Depends(get_repository),
        engine: GraphAlgorithmsEngine = Depends(get_engine),
    ):
        if not start_node_id.strip():
            return _error(400, "startNodeId is required")
        return _run_algorithm(repo, engine, "bfs", start_id=start_node_id)

    @app.get("/algorithm/dfs/{start_node_id}", response_model=None)
    def run_dfs(
        start_node_id: str,
        repo: GraphRepository = Depends(get_repository),
        engine: GraphAlgorithmsEngine = Depends(get_engine),
    ):
        if not start_node_id.strip():
            return _error(400, "startNodeId is required")
        return _run_algorithm(repo, engine, "dfs", start_id=start_node_id)

    @app.get("/algorithm/dijkstra/{start_node_id}/{end_node_id}", response_model=None)
    def run_dijkstra(
        start_node_id: str,
        end_node_id: str,
        repo: GraphRepository = Depends(get_repository),
        engine: GraphAlgorithmsEngine = Depends(get_engine),
    ):
        if not start_node_id.strip() or not end_node_id.strip():
            return _error(400, "startNodeId and endNodeId are required")
        return _run_algorithm(repo, engine, "dijkstra", start_id=start_node_id, end_id=end_node_id)

    @app.get("/algorithm/astar/{start_node_id}/{end_node_id}", response_model=None)
    def run_astar(
        start_node_id: str,
        end_node_id: str,
        repo: GraphRepository = Depends(get_repository),
        engine: GraphAlgorithmsEngine = Depends(get_engine),
    ):
        if not start_node_id.strip() or not end_node_id.strip():
            return _error(400, "startNodeId and endNodeId are required")
        return _run_algorithm(repo, engine, "astar", start_id=start_node_id, end_id=end_node_id)

    @app.get("/algorithm/centrality/degree", response_model=None)
    def run_degree_centrality(
        limit: int | None = Query(None, ge=0, description="Number of top nodes to return"),
        repo: GraphRepository = Depends(get_repository),
        engine: GraphAlgorithmsEngine = Depends(get_engine),
    ):
        return _run_algorithm(repo, engine, "degree_centrality", limit=limit)

    @app.get("/algorithm/coloring/welsh-powell", response_model=None)
    def run_welsh_powell(
        repo: GraphRepository = Depends(get_repository),
        engine: GraphAlgorithmsEngine = Depends(get_engine),
    ):
        return _run_algorithm(repo, engine, "welsh_powell")

    @app.get("/algorithm/communities", response_model=None)
    def run_connected_components(
        repo: GraphRepository = Depends(get_repository),
        engine: GraphAlgorithmsEngine = Depends(get_engine),
    ):
        return _run_algorithm(repo, engine, "connected_components")

    return app
