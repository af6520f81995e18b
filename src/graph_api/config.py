from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(slots=True)
class ApiConfig:
    host: str
    port: int
    log_level: str
    cors_origins: tuple[str, ...]


def load_api_config() -> ApiConfig:
    raw_origins = os.getenv("API_CORS_ORIGINS", "*")
    return ApiConfig(
        host=os.getenv("API_HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3001")),
        log_level=os.getenv("API_LOG_LEVEL", "INFO").upper(),
        cors_origins=tuple(origin.strip() for origin in raw_origins.split(",") if origin.strip()),
    )
