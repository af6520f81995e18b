from __future__ import annotations

import logging
import time
from typing import Any

import psycopg2
from psycopg2.extras import Json, RealDictCursor
from psycopg2.pool import ThreadedConnectionPool

from graph_model.models import Graph, GraphIntegrityError, Node

from .config import StorageConfig
from .metrics import QUERY_LATENCY_SECONDS, SAVED_EDGES, SAVED_NODES, SKIPPED_EDGES
from .utils import retry

DB_TRANSIENT_EXCEPTIONS = (psycopg2.OperationalError, psycopg2.InterfaceError)

SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS nodes (
        seq BIGSERIAL,
        id TEXT PRIMARY KEY,
        label TEXT NOT NULL,
        x DOUBLE PRECISION NOT NULL DEFAULT 0,
        y DOUBLE PRECISION NOT NULL DEFAULT 0,
        properties JSONB NOT NULL DEFAULT '{}'::jsonb
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS edges (
        seq BIGSERIAL,
        id TEXT PRIMARY KEY,
        source_id TEXT NOT NULL,
        target_id TEXT NOT NULL,
        weight DOUBLE PRECISION
    )
    """,
)


class StorageRepository:
    """PostgreSQL-backed graph repository (tables ``nodes`` and ``edges``)."""

    def __init__(self, cfg: StorageConfig, pool: Any | None = None) -> None:
        self._cfg = cfg
        self._pool = pool or ThreadedConnectionPool(cfg.pg_min_conn, cfg.pg_max_conn, dsn=cfg.postgres_dsn)
        self._logger = logging.getLogger("graph-storage")

    def _retry(self, operation):
        return retry(
            operation,
            attempts=self._cfg.retry_attempts,
            base_delay=self._cfg.retry_base_delay,
            retry_on=DB_TRANSIENT_EXCEPTIONS,
        )

    def _run(self, query: str, params: tuple | None = None, *, fetch: str | None = None):
        conn = self._pool.getconn()
        try:
            with conn:
                with conn.cursor(cursor_factory=RealDictCursor) as cur:
                    cur.execute(query, params)
                    if fetch == "one":
                        return cur.fetchone()
                    if fetch == "all":
                        return cur.fetchall()
                    return None
        finally:
            self._pool.putconn(conn)

    def ensure_schema(self) -> None:
        for statement in SCHEMA_STATEMENTS:
            self._retry(lambda statement=statement: self._run(statement))

    def load_graph(self) -> Graph:
        started = time.perf_counter()
        node_rows = self._retry(
            lambda: self._run("SELECT id, label, x, y, properties FROM nodes ORDER BY seq ASC", fetch="all")
        )
        edge_rows = self._retry(
            lambda: self._run("SELECT id, source_id, target_id, weight FROM edges ORDER BY seq ASC", fetch="all")
        )

        graph = Graph()
        for row in node_rows or []:
            graph.add_node(
                Node(
                    id=row["id"],
                    label=row["label"],
                    x=float(row["x"] or 0.0),
                    y=float(row["y"] or 0.0),
                    properties=row["properties"] or {},
                )
            )

        for row in edge_rows or []:
            try:
                graph.add_edge(row["source_id"], row["target_id"], weight=row["weight"], edge_id=row["id"])
            except GraphIntegrityError as exc:
                SKIPPED_EDGES.inc()
                self._logger.warning("skipping edge id=%s: %s", row["id"], exc)

        QUERY_LATENCY_SECONDS.labels(operation="load").observe(time.perf_counter() - started)
        self._logger.info("loaded graph nodes=%d edges=%d", len(graph.nodes), len(graph.edges))
        return graph

    def save_graph(self, graph: Graph) -> None:
        node_rows = [(node.id, node.label, node.x, node.y, Json(node.properties)) for node in graph.get_nodes()]
        edge_rows = [(edge.id, edge.source, edge.target, edge.weight) for edge in graph.get_edges()]

        def op() -> None:
            conn = self._pool.getconn()
            try:
                with conn:
                    with conn.cursor() as cur:
                        if node_rows:
                            cur.executemany(
                                """
                                INSERT INTO nodes (id, label, x, y, properties)
                                VALUES (%s, %s, %s, %s, %s)
                                ON CONFLICT (id) DO UPDATE SET
                                    label = EXCLUDED.label,
                                    x = EXCLUDED.x,
                                    y = EXCLUDED.y,
                                    properties = EXCLUDED.properties
                                """,
                                node_rows,
                            )
                        cur.execute("DELETE FROM edges")
                        if edge_rows:
                            cur.executemany(
                                "INSERT INTO edges (id, source_id, target_id, weight) VALUES (%s, %s, %s, %s)",
                                edge_rows,
                            )
            finally:
                self._pool.putconn(conn)

        started = time.perf_counter()
        self._retry(op)
        QUERY_LATENCY_SECONDS.labels(operation="save").observe(time.perf_counter() - started)
        SAVED_NODES.set(len(node_rows))
        SAVED_EDGES.set(len(edge_rows))
        self._logger.info("saved graph nodes=%d edges=%d", len(node_rows), len(edge_rows))

    def close(self) -> None:
        self._pool.closeall()
