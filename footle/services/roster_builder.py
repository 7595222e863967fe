"""Roster builder - discovers the most followed Sorare players and snapshots them.

Pipeline:
1. List domestic leagues (single query)
2. Fan out one query per league to list its clubs
3. Fan out one query per club to list its eligible players
4. Rank by popularity, keep the top N, shuffle into presentation order
5. Persist the snapshot

Each fan-out stage waits for all of its tasks. A failing task is logged and
contributes nothing; only ending up with fewer than N players is fatal.
"""

import asyncio
import logging
import random
import time
from collections.abc import Awaitable, Callable, Iterable
from typing import Protocol, TypeVar

from footle.exceptions import InsufficientRosterError
from footle.schemas.roster import CandidateSummary, RosterSnapshot
from footle.services.snapshot_store import SnapshotStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RosterSource(Protocol):
    """The subset of SorareApiClient the builder depends on."""

    async def list_domestic_leagues(self) -> list[str]: ...

    async def list_clubs(self, league_slug: str) -> list[str]: ...

    async def list_active_players(self, club_slug: str) -> list[CandidateSummary]: ...


def rank_candidates(
    candidates: Iterable[CandidateSummary], target_size: int
) -> list[CandidateSummary]:
    """Keep the target_size most popular candidates, most popular first.

    Ties keep their original order (sorted() is stable).

    Raises:
        InsufficientRosterError: If fewer than target_size candidates are given
    """
    ranked = sorted(candidates, key=lambda c: c.popularity, reverse=True)
    if len(ranked) < target_size:
        raise InsufficientRosterError(found=len(ranked), target=target_size)
    return ranked[:target_size]


def _dedupe(items: Iterable[T], key: Callable[[T], str]) -> list[T]:
    """Drop repeated items, keeping the first occurrence."""
    seen: set[str] = set()
    unique = []
    for item in items:
        k = key(item)
        if k in seen:
            continue
        seen.add(k)
        unique.append(item)
    return unique


class RosterBuilder:
    """Builds and persists the roster snapshot."""

    def __init__(
        self,
        source: RosterSource,
        store: SnapshotStore,
        snapshot_name: str = "players",
        rng: random.Random | None = None,
    ) -> None:
        self.source = source
        self.store = store
        self.snapshot_name = snapshot_name
        self._rng = rng

    async def _fan_out(
        self,
        stage: str,
        keys: list[str],
        fetch: Callable[[str], Awaitable[list[T]]],
    ) -> list[T]:
        """Run fetch(key) for every key concurrently and collect the results.

        Results land in one shared list guarded by a lock. Failed keys are
        logged and skipped.
        """
        collected: list[T] = []
        lock = asyncio.Lock()

        async def fetch_one(key: str) -> bool:
            """Fetch a single key, return False on failure."""
            try:
                items = await fetch(key)
            except Exception as e:
                logger.error(f"Failed to list {stage} for {key}: {type(e).__name__}: {e}")
                return False
            async with lock:
                collected.extend(items)
            return True

        results = await asyncio.gather(*(fetch_one(k) for k in keys))

        failed_count = results.count(False)
        if failed_count > 0:
            logger.warning(
                f"Listing {stage} completed with {failed_count}/{len(keys)} failures"
            )
        return collected

    async def collect_candidates(self) -> list[CandidateSummary]:
        """Discover every eligible player across all domestic leagues."""
        try:
            leagues = await self.source.list_domestic_leagues()
        except Exception as e:
            logger.error(f"Failed to list leagues: {type(e).__name__}: {e}")
            leagues = []
        logger.info(f"Found {len(leagues)} domestic leagues")

        clubs = await self._fan_out("clubs", leagues, self.source.list_clubs)
        clubs = _dedupe(clubs, key=lambda slug: slug)
        logger.info(f"Found {len(clubs)} clubs")

        players = await self._fan_out("players", clubs, self.source.list_active_players)
        players = _dedupe(players, key=lambda p: p.slug)
        logger.info(f"Found {len(players)} eligible players")

        return players

    async def build(self, target_size: int, persist: bool = True) -> RosterSnapshot:
        """
        Build a roster of the target_size most followed players.

        Args:
            target_size: Number of players to keep
            persist: Save the snapshot (False for dry runs)

        Returns:
            The snapshot, in its shuffled presentation order

        Raises:
            ValueError: If target_size is not positive
            InsufficientRosterError: If fewer than target_size players were found
        """
        if target_size <= 0:
            raise ValueError(f"target_size must be positive, got {target_size}")

        start = time.monotonic()
        candidates = await self.collect_candidates()
        top = rank_candidates(candidates, target_size)

        rng = self._rng or random.Random(time.time_ns())
        rng.shuffle(top)

        snapshot = RosterSnapshot(players=top)
        elapsed = time.monotonic() - start
        logger.info(
            f"Built roster of {len(top)} players from {len(candidates)} candidates "
            f"in {elapsed:.1f}s"
        )

        if persist:
            await self.store.save(self.snapshot_name, snapshot)
        return snapshot
