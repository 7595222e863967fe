"""Guess service - scores one guess against today's secret."""

import logging

from footle.exceptions import SecretUnavailableError
from footle.services.comparator import ComparisonVerdict, WinRule, compare
from footle.services.daily import DailyGame
from footle.services.resolver import PlayerSource, resolve_pair

logger = logging.getLogger(__name__)


class GuessService:
    """Resolves today's secret and the guess, compares them and counts wins."""

    def __init__(
        self,
        game: DailyGame,
        source: PlayerSource,
        win_rule: WinRule = WinRule.IDENTIFIER,
        resolve_timeout: float | None = 15.0,
    ) -> None:
        self.game = game
        self.source = source
        self.win_rule = win_rule
        self.resolve_timeout = resolve_timeout

    async def guess(self, guess_slug: str, attempts: int) -> ComparisonVerdict:
        """
        Score a guess.

        An empty or unknown slug yields an invalid verdict rather than an error.

        Raises:
            SecretUnavailableError: If today's secret could not be fetched
            TimeoutError: If fetching both players took longer than resolve_timeout
        """
        guess_slug = guess_slug.strip()
        if not guess_slug:
            return ComparisonVerdict(attempts=attempts, invalid=True)

        day_index, secret = await self.game.today()
        pair = await resolve_pair(
            self.source, secret.slug, guess_slug, timeout=self.resolve_timeout
        )

        if pair.secret is None:
            logger.error(f"Could not fetch today's secret {secret.slug} (day {day_index})")
            raise SecretUnavailableError(f"Secret player {secret.slug} is unavailable")

        verdict = compare(pair.secret, pair.guess, attempts, self.win_rule)
        if verdict.is_win:
            await self.game.record_win(day_index)
        return verdict
