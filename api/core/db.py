"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`). Every helper below acquires a
pooled connection for one statement and hands it back when the statement
finishes, including when it raises.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

Connection string lookup order:
- ConnectionStrings__DefaultConnection
- DATABASE_URL
"""

from __future__ import annotations

import logging
import os
from typing import Any
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

import asyncpg

CONNECTION_STRING_ENV_VARS = ("ConnectionStrings__DefaultConnection", "DATABASE_URL")

DEFAULT_POOL_MIN_SIZE = 1
DEFAULT_POOL_MAX_SIZE = 5
DEFAULT_COMMAND_TIMEOUT_S = 30

# Npgsql keyword -> URL component.
_KEYWORD_ALIASES = {
    "host": "host",
    "server": "host",
    "port": "port",
    "database": "database",
    "username": "user",
    "user id": "user",
    "userid": "user",
    "user": "user",
    "password": "password",
}

_pool: asyncpg.Pool | None = None

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def keyword_to_url(conn_str: str) -> str:
    """
    Convert a `Host=...;Database=...;Username=...;Password=...` connection
    string into a postgresql:// URL. Unknown keywords are ignored.
    """
    values: dict[str, str] = {}
    for part in conn_str.split(";"):
        if "=" not in part:
            continue
        key, value = part.split("=", 1)
        target = _KEYWORD_ALIASES.get(key.strip().lower())
        if target:
            values[target] = value.strip()

    host = values.get("host", "localhost")
    if "port" in values:
        host = f"{host}:{values['port']}"

    auth = ""
    if "user" in values:
        auth = quote(values["user"], safe="")
        if "password" in values:
            auth += ":" + quote(values["password"], safe="")
        auth += "@"

    return f"postgresql://{auth}{host}/{values.get('database', '')}"


def database_url() -> str:
    for name in CONNECTION_STRING_ENV_VARS:
        raw = os.environ.get(name, "").strip()
        if not raw:
            continue
        if "://" not in raw:
            return keyword_to_url(raw)
        return _sanitize_database_url(raw)
    raise RuntimeError("No connection string configured. Set ConnectionStrings__DefaultConnection or DATABASE_URL.")


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    min_size = _env_int("DB_POOL_MIN_SIZE", DEFAULT_POOL_MIN_SIZE)
    max_size = max(min_size, _env_int("DB_POOL_MAX_SIZE", DEFAULT_POOL_MAX_SIZE))
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=min_size,
        max_size=max_size,
        command_timeout=_env_int("DB_COMMAND_TIMEOUT_S", DEFAULT_COMMAND_TIMEOUT_S),
    )
    logger.info("db_pool_created min_size=%s max_size=%s", min_size, max_size)


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None
    logger.info("db_pool_closed")


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    row = await pool().fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    rows = await pool().fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


async def fetch_val(sql: str, *args: Any) -> Any:
    """
    Run a query and return the first column of the first row (or None).
    """
    return await pool().fetchval(sql, *args)


async def ping() -> None:
    """
    Trivial round trip used by the health probe. Raises on any failure.
    """
    await fetch_val("SELECT 1")
