"""Daily secret selection and the per-day game state.

The secret is roster[select_index(now)]: the number of whole 24h periods
since a fixed epoch, modulo the roster size. The roster order is fixed by the
snapshot, so every server process picks the same player on the same day.
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone

from footle.exceptions import EmptyRosterError
from footle.schemas.roster import CandidateSummary

logger = logging.getLogger(__name__)

DAY = timedelta(hours=24)


def select_index(now: datetime, roster_size: int, epoch: datetime) -> int:
    """Index of the day's secret in a roster of roster_size players.

    Args:
        now: Current instant (timezone-aware)
        roster_size: Number of players in the roster
        epoch: Reference instant where index 0 starts (timezone-aware)

    Returns:
        floor((now - epoch) / 24h) mod roster_size, always in [0, roster_size).
        The difference is taken between absolute instants, so the timezone
        now is expressed in has no effect.

    Raises:
        EmptyRosterError: If roster_size is not positive
        ValueError: If now or epoch is naive
    """
    if roster_size <= 0:
        raise EmptyRosterError(f"Cannot select from a roster of size {roster_size}")
    if now.tzinfo is None or epoch.tzinfo is None:
        raise ValueError("select_index requires timezone-aware datetimes")
    elapsed = now.astimezone(timezone.utc) - epoch.astimezone(timezone.utc)
    return (elapsed // DAY) % roster_size


class DailyGame:
    """
    Process-wide game state: the roster, today's index and today's found count.

    The index is recomputed on every call because the server keeps running
    across day boundaries. When it moves, the found count resets to zero.
    All reads and writes go through one asyncio.Lock.
    """

    def __init__(self, players: list[CandidateSummary], epoch: datetime) -> None:
        if not players:
            raise EmptyRosterError("Roster snapshot is empty, cannot serve a daily game")
        if epoch.tzinfo is None:
            raise ValueError("Daily epoch must be timezone-aware")

        self.players = list(players)
        self.epoch = epoch
        self._lock = asyncio.Lock()
        self._index: int | None = None
        self._found = 0

    def _refresh(self, now: datetime) -> int:
        """Recompute today's index, resetting the counter on a new day. Caller holds the lock."""
        index = select_index(now, len(self.players), self.epoch)
        if index != self._index:
            if self._index is not None:
                logger.info(
                    f"New day: secret changed from index {self._index} to {index}, "
                    f"{self._found} people found yesterday's player"
                )
            else:
                logger.info(f"Serving day index {index}")
            logger.debug(f"Today's secret: {self.players[index].slug}")
            self._index = index
            self._found = 0
        return index

    @staticmethod
    def _now(now: datetime | None) -> datetime:
        return now if now is not None else datetime.now(timezone.utc)

    async def today(self, now: datetime | None = None) -> tuple[int, CandidateSummary]:
        """Today's day index and secret player."""
        async with self._lock:
            index = self._refresh(self._now(now))
            return index, self.players[index]

    async def record_win(self, day_index: int, now: datetime | None = None) -> bool:
        """Count one more person who found the secret of day_index.

        Wins for a day that has already rolled over are ignored.

        Returns:
            True if the win was counted
        """
        async with self._lock:
            index = self._refresh(self._now(now))
            if index != day_index:
                logger.info(f"Ignoring win for stale day index {day_index} (now {index})")
                return False
            self._found += 1
            return True

    async def found_count(self, now: datetime | None = None) -> tuple[int, int]:
        """Today's day index and the number of people who found the secret."""
        async with self._lock:
            index = self._refresh(self._now(now))
            return index, self._found
