# api/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    duckdb_path: str
    host: str
    port: int
    log_level: str
    cors_origins: tuple[str, ...]
    seed_estoque: bool
    debug: bool


def _bool_env(nome: str, default: str) -> bool:
    return os.environ.get(nome, default).lower() == "true"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    origins = os.environ.get("API_CORS_ORIGINS", "http://localhost:5173")
    return Settings(
        duckdb_path=os.environ.get("DUCKDB_PATH", ":memory:"),
        host=os.environ.get("API_HOST", "127.0.0.1"),
        port=int(os.environ.get("API_PORT", "8000")),
        log_level=os.environ.get("API_LOG_LEVEL", "INFO").upper(),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        seed_estoque=_bool_env("API_SEED_ESTOQUE", "true"),
        debug=_bool_env("API_DEBUG", "false"),
    )
