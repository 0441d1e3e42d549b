from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List

DEFAULT_TASK_LIST_FORMAT = "[:check] :id. :description"


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - PERSISTENCE_BACKEND: 'memory' (default) or 'sqlite'
    - SQLITE_DB_PATH: path to sqlite db file. Default './data/todos.db'
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    - LOG_LEVEL: root log level name (default: INFO)
    - TASK_LIST_FORMAT: display format used by GET /api/todo
      (default: '[:check] :id. :description')
    """

    persistence_backend: str = "memory"
    sqlite_db_path: str = "./data/todos.db"
    cors_allow_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    task_list_format: str = DEFAULT_TASK_LIST_FORMAT


def _env(name: str, default: str) -> str:
    """Environment value for name; unset and empty both mean default."""
    return os.getenv(name) or default


def _parse_origins(raw: str) -> List[str]:
    """'*' (alone or anywhere in the list) allows every origin."""
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    if not origins or "*" in origins:
        return ["*"]
    return origins


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    backend = _env("PERSISTENCE_BACKEND", "memory").strip().lower()
    if backend not in {"memory", "sqlite"}:
        backend = "memory"

    return Settings(
        persistence_backend=backend,
        sqlite_db_path=_env("SQLITE_DB_PATH", "./data/todos.db").strip(),
        cors_allow_origins=_parse_origins(_env("CORS_ALLOW_ORIGINS", "*")),
        log_level=_env("LOG_LEVEL", "INFO").strip().upper(),
        task_list_format=_env("TASK_LIST_FORMAT", DEFAULT_TASK_LIST_FORMAT),
    )
