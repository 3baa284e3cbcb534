"""
Process settings read from environment variables.

Values are read when the process starts (pool creation, uvicorn start-up);
nothing here reloads at runtime.
"""

from __future__ import annotations

import os
from typing import Any

DEFAULT_DB_HOST = "localhost"
DEFAULT_DB_PORT = 5432
DEFAULT_POOL_MIN_SIZE = 1
DEFAULT_POOL_MAX_SIZE = 10
DEFAULT_COMMAND_TIMEOUT_S = 30

DEFAULT_HTTP_HOST = "0.0.0.0"
DEFAULT_HTTP_PORT = 3000

DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def database_url() -> str:
    return _env_str("DATABASE_URL")


def database_params() -> dict[str, Any]:
    """
    Connection keywords for asyncpg when DATABASE_URL is not set.

    Empty user/password/database are passed as None so asyncpg falls back
    to its own defaults (PGUSER, PGPASSWORD, ...).
    """
    return {
        "host": _env_str("DB_HOST", DEFAULT_DB_HOST),
        "port": _env_int("DB_PORT", DEFAULT_DB_PORT),
        "user": _env_str("DB_USER") or None,
        # Passwords are taken verbatim.
        "password": os.environ.get("DB_PASS") or None,
        "database": _env_str("DB_NAME") or None,
    }


def pool_min_size() -> int:
    return max(_env_int("DB_POOL_MIN_SIZE", DEFAULT_POOL_MIN_SIZE), 0)


def pool_max_size() -> int:
    return max(_env_int("DB_POOL_MAX_SIZE", DEFAULT_POOL_MAX_SIZE), 1, pool_min_size())


def command_timeout_s() -> int:
    return _env_int("DB_COMMAND_TIMEOUT", DEFAULT_COMMAND_TIMEOUT_S)


def http_host() -> str:
    return _env_str("HOST", DEFAULT_HTTP_HOST)


def http_port() -> int:
    return _env_int("PORT", DEFAULT_HTTP_PORT)


def cors_origins() -> list[str]:
    raw = _env_str("CORS_ORIGINS")
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip().rstrip("/") for origin in raw.split(",") if origin.strip()]


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()
