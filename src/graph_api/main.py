from __future__ import annotations

import logging

import uvicorn

from .config import load_api_config


def main() -> None:
    cfg = load_api_config()
    logging.basicConfig(level=cfg.log_level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    uvicorn.run("graph_api.api:create_app", factory=True, host=cfg.host, port=cfg.port)


if __name__ == "__main__":
    main()
