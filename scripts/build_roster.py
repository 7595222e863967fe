#!/usr/bin/env python
"""
Build the roster snapshot the game picks its daily secret from.

Queries every domestic league on Sorare, lists their clubs and eligible
players, keeps the most followed ones and saves them in a shuffled order.
That order decides which player is the secret on which day, so only rebuild
when you want a new rotation.

Usage:
    python -m scripts.build_roster                  # Build and save (ROSTER_SIZE players)
    python -m scripts.build_roster --size 500       # Build a smaller roster
    python -m scripts.build_roster --dry-run        # Build without saving
    python -m scripts.build_roster --status         # Show the saved snapshot

Requires SORARE_API_KEY. If fewer than --size players are found, nothing is saved.
"""

import argparse
import asyncio
import logging
import sys
from datetime import UTC, datetime

from dotenv import load_dotenv

# Load environment before settings are read
load_dotenv(".env.local")
load_dotenv(".env")

from footle.config import Settings, get_settings  # noqa: E402
from footle.db import close_pool, init_pool  # noqa: E402
from footle.exceptions import InsufficientRosterError, SnapshotNotFoundError  # noqa: E402
from footle.services.daily import select_index  # noqa: E402
from footle.services.roster_builder import RosterBuilder  # noqa: E402
from footle.services.snapshot_store import (  # noqa: E402
    PostgresSnapshotStore,
    SnapshotStore,
    get_snapshot_store,
)
from footle.services.sorare_client import SorareApiClient  # noqa: E402

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 1800  # 30 min


async def open_store(settings: Settings) -> SnapshotStore:
    """Create the configured snapshot store, connecting to Postgres if needed."""
    store = get_snapshot_store(settings)
    if isinstance(store, PostgresSnapshotStore):
        await init_pool()
        await store.ensure_schema()
    return store


async def build(
    settings: Settings,
    store: SnapshotStore,
    size: int,
    name: str,
    dry_run: bool = False,
) -> int:
    """Build the roster and save it unless dry_run. Returns the number of players."""
    if not settings.sorare_api_key:
        logger.warning("SORARE_API_KEY not set, requests may be rejected or throttled")

    async with SorareApiClient(
        api_key=settings.sorare_api_key,
        base_url=settings.sorare_api_url,
        requests_per_second=settings.sorare_requests_per_second,
        max_concurrent=settings.sorare_max_concurrent,
        timeout=settings.sorare_timeout,
    ) as client:
        builder = RosterBuilder(client, store, snapshot_name=name)
        snapshot = await builder.build(size, persist=not dry_run)

    if dry_run:
        logger.info(f"[DRY RUN] Would save {len(snapshot.players)} players as '{name}'")
        for player in snapshot.players[:10]:
            logger.info(f"  {player.slug} ({player.popularity} followers)")
    else:
        logger.info(f"Saved {len(snapshot.players)} players as '{name}'")
    return len(snapshot.players)


async def show_status(settings: Settings, store: SnapshotStore, name: str) -> None:
    """Print what the saved snapshot contains and who today's secret is."""
    try:
        snapshot = await store.load(name)
    except SnapshotNotFoundError as e:
        print(f"No snapshot: {e}")
        return

    print("\n=== Roster Snapshot ===")
    print(f"Name: {name}")
    print(f"Players: {len(snapshot.players)}")
    print(f"Built at: {snapshot.built_at.isoformat()}")
    if snapshot.players:
        index = select_index(datetime.now(UTC), len(snapshot.players), settings.epoch)
        secret = snapshot.players[index]
        print(f"Today's secret (day index {index}): {secret.display_name} ({secret.slug})")


async def main() -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Build the Footle roster snapshot")
    parser.add_argument(
        "--size",
        type=int,
        default=settings.roster_size,
        help=f"Number of players to keep (default: {settings.roster_size})",
    )
    parser.add_argument(
        "--name",
        default=settings.snapshot_name,
        help=f"Snapshot name (default: {settings.snapshot_name})",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Build the roster without saving it",
    )
    parser.add_argument(
        "--status",
        action="store_true",
        help="Show the saved snapshot and today's secret",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=DEFAULT_TIMEOUT_SECONDS,
        help=f"Abort the build after this many seconds (default: {DEFAULT_TIMEOUT_SECONDS})",
    )

    args = parser.parse_args()

    store = await open_store(settings)
    try:
        if args.status:
            await show_status(settings, store, args.name)
            return 0

        try:
            await asyncio.wait_for(
                build(settings, store, args.size, args.name, dry_run=args.dry_run),
                timeout=args.timeout,
            )
        except InsufficientRosterError as e:
            logger.error(f"Roster build failed: {e}. Lower --size or check the API key.")
            return 1
        except TimeoutError:
            logger.error(
                f"Roster build timed out after {args.timeout}s. "
                "Check Sorare API responsiveness or raise the rate limit."
            )
            return 1
        return 0
    finally:
        await close_pool()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
