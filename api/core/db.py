"""
Async database access helpers (raw SQL) using asyncpg.

This module creates the connection pool. FastAPI opens it once in the app
lifespan, keeps it on `app.state.pool`, and hands it to route handlers through
the `get_pool` dependency (see `api/main.py`).

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
import os
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg
from fastapi import Request

logger = logging.getLogger(__name__)


# Boot failures abort the process; they never reach a request.
class StartupError(RuntimeError):
    pass


# Any failure while running a statement against the pool.
class StorageError(RuntimeError):
    pass


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise StartupError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


async def create_pool() -> asyncpg.Pool:
    dsn = database_url()
    try:
        pool = await asyncpg.create_pool(dsn=dsn, min_size=1, max_size=5)
    except Exception as exc:
        raise StartupError(f"Database connection failed: {exc}") from exc
    logger.info("Database pool opened")
    return pool


async def close_pool(pool: asyncpg.Pool) -> None:
    await pool.close()
    logger.info("Database pool closed")


def get_pool(request: Request) -> asyncpg.Pool:
    pool = getattr(request.app.state, "pool", None)
    if pool is None:
        raise StorageError("DB pool is not initialized. Open it in the app lifespan.")
    return pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


def _storage_error(exc: Exception) -> StorageError:
    message = str(exc).strip() or type(exc).__name__
    return StorageError(message)


async def fetch_one(pool: asyncpg.Pool, sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    try:
        row = await pool.fetchrow(sql, *args)
    except Exception as exc:
        raise _storage_error(exc) from exc
    return _record_to_dict(row) if row is not None else None


async def fetch_all(pool: asyncpg.Pool, sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    try:
        rows = await pool.fetch(sql, *args)
    except Exception as exc:
        raise _storage_error(exc) from exc
    return [_record_to_dict(r) for r in rows]
