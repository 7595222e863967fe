"""asyncpg pool backing the Postgres snapshot store.

Only opened when SNAPSHOT_BACKEND=postgres. The server and the build script
share this module: each process opens the pool once, and every snapshot
read or write borrows a connection through get_connection().
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator
from urllib.parse import urlsplit

import asyncpg

from footle.config import get_settings

logger = logging.getLogger(__name__)

# One snapshot read at startup, one write per build
POOL_MIN_SIZE = 1
POOL_MAX_SIZE = 2
COMMAND_TIMEOUT_SECONDS = 30

_pool: asyncpg.Pool | None = None


def _describe(database_url: str) -> str:
    """host:port/dbname of a connection URL, without credentials."""
    parts = urlsplit(database_url)
    host = parts.hostname or "localhost"
    port = f":{parts.port}" if parts.port else ""
    return f"{host}{port}{parts.path}"


async def init_pool(database_url: str | None = None) -> asyncpg.Pool:
    """Open the snapshot database pool (idempotent).

    Args:
        database_url: Connection URL; defaults to settings.database_url

    Raises:
        ValueError: If no database URL is configured
    """
    global _pool
    if _pool is not None:
        return _pool

    url = database_url or get_settings().database_url
    if not url:
        raise ValueError(
            "SNAPSHOT_BACKEND=postgres needs a database. Set DATABASE_URL."
        )

    logger.info(f"Opening snapshot database pool to {_describe(url)}")
    _pool = await asyncpg.create_pool(
        url,
        min_size=POOL_MIN_SIZE,
        max_size=POOL_MAX_SIZE,
        command_timeout=COMMAND_TIMEOUT_SECONDS,
    )
    return _pool


async def close_pool() -> None:
    """Close the pool if it was opened. Safe to call for the file backend."""
    global _pool
    if _pool is None:
        return
    logger.info("Closing snapshot database pool")
    await _pool.close()
    _pool = None


def get_pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError(
            "Snapshot database pool is not open. Call init_pool() first."
        )
    return _pool


@asynccontextmanager
async def get_connection() -> AsyncGenerator[asyncpg.Connection, None]:
    """Borrow a connection from the snapshot pool."""
    async with get_pool().acquire() as conn:
        yield conn
