from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from graph_storage.config import load_config  # noqa: E402
from graph_storage.db import StorageRepository  # noqa: E402


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    cfg = load_config()
    repo = StorageRepository(cfg)
    try:
        repo.ensure_schema()
    finally:
        repo.close()
    print(f"schema ready: {cfg.postgres_dsn.rsplit('@', 1)[-1]}")


if __name__ == "__main__":
    main()
