"""Roster snapshot persistence.

A snapshot is stored as one opaque blob per name: the pydantic JSON dump of
RosterSnapshot. Two backends are available:
1. FileSnapshotStore - one <name>.json file per snapshot (default)
2. PostgresSnapshotStore - one row per snapshot in roster_snapshot

Both round-trip exactly: load(name) after save(name, snapshot) returns a
snapshot equal to the one saved, player order included.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

from footle.config import Settings
from footle.db import get_connection
from footle.exceptions import SnapshotNotFoundError
from footle.schemas.roster import RosterSnapshot

logger = logging.getLogger(__name__)

_CREATE_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS roster_snapshot (
        name TEXT PRIMARY KEY,
        payload BYTEA NOT NULL,
        updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    )
"""

_UPSERT_SQL = """
    INSERT INTO roster_snapshot (name, payload, updated_at)
    VALUES ($1, $2, NOW())
    ON CONFLICT (name) DO UPDATE SET
        payload = EXCLUDED.payload,
        updated_at = NOW()
"""

_SELECT_SQL = "SELECT payload FROM roster_snapshot WHERE name = $1"


def encode_snapshot(snapshot: RosterSnapshot) -> bytes:
    return snapshot.model_dump_json().encode("utf-8")


def decode_snapshot(payload: bytes) -> RosterSnapshot:
    return RosterSnapshot.model_validate_json(payload)


class SnapshotStore(Protocol):
    """Named snapshot persistence."""

    async def save(self, name: str, snapshot: RosterSnapshot) -> None:
        """Store a snapshot, replacing any previous one with the same name."""
        ...

    async def load(self, name: str) -> RosterSnapshot:
        """Load a snapshot. Raises SnapshotNotFoundError if none was saved."""
        ...


class FileSnapshotStore:
    """Stores each snapshot as <directory>/<name>.json."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def path_for(self, name: str) -> Path:
        return self.directory / f"{name}.json"

    async def save(self, name: str, snapshot: RosterSnapshot) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.path_for(name)

        # Temp file + os.replace: readers see the old or the new snapshot, never a partial one
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(encode_snapshot(snapshot))
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.info(f"Saved snapshot '{name}' ({len(snapshot.players)} players) to {path}")

    async def load(self, name: str) -> RosterSnapshot:
        path = self.path_for(name)
        try:
            payload = path.read_bytes()
        except FileNotFoundError as e:
            raise SnapshotNotFoundError(name) from e

        snapshot = decode_snapshot(payload)
        logger.info(f"Loaded snapshot '{name}' ({len(snapshot.players)} players) from {path}")
        return snapshot


class PostgresSnapshotStore:
    """Stores snapshots in the roster_snapshot table (requires init_pool())."""

    async def ensure_schema(self) -> None:
        """Create the roster_snapshot table if it doesn't exist."""
        async with get_connection() as conn:
            await conn.execute(_CREATE_TABLE_SQL)

    async def save(self, name: str, snapshot: RosterSnapshot) -> None:
        async with get_connection() as conn:
            await conn.execute(_UPSERT_SQL, name, encode_snapshot(snapshot))
        logger.info(f"Saved snapshot '{name}' ({len(snapshot.players)} players) to database")

    async def load(self, name: str) -> RosterSnapshot:
        async with get_connection() as conn:
            payload = await conn.fetchval(_SELECT_SQL, name)

        if payload is None:
            raise SnapshotNotFoundError(name)

        snapshot = decode_snapshot(bytes(payload))
        logger.info(f"Loaded snapshot '{name}' ({len(snapshot.players)} players) from database")
        return snapshot


def get_snapshot_store(settings: Settings) -> SnapshotStore:
    """Create the snapshot store selected by SNAPSHOT_BACKEND."""
    backend = settings.snapshot_backend.lower()
    if backend == "file":
        return FileSnapshotStore(settings.snapshot_dir)
    if backend == "postgres":
        return PostgresSnapshotStore()
    raise ValueError(f"Unknown snapshot backend: {settings.snapshot_backend!r}")
