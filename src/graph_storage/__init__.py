from .config import StorageConfig, load_config
from .memory import InMemoryGraphRepository
from .repository import GraphRepository


def create_repository(cfg: StorageConfig | None = None) -> GraphRepository:
    cfg = cfg or load_config()
    if cfg.backend == "memory":
        return InMemoryGraphRepository()
    # psycopg2 is only needed for the postgres backend.
    from .db import StorageRepository

    repo = StorageRepository(cfg)
    repo.ensure_schema()
    return repo


__all__ = ["GraphRepository", "InMemoryGraphRepository", "StorageConfig", "create_repository", "load_config"]
