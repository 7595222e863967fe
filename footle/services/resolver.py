"""Fetches the secret and the guessed player concurrently."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

from footle.services.sorare_client import SubjectAttributes

logger = logging.getLogger(__name__)


class PlayerSource(Protocol):
    async def fetch_player_detail(self, slug: str) -> SubjectAttributes | None: ...


@dataclass(slots=True, frozen=True)
class ResolvedPair:
    """Secret and guess details; None means the player could not be resolved."""

    secret: SubjectAttributes | None
    guess: SubjectAttributes | None


async def resolve_pair(
    source: PlayerSource,
    secret_slug: str,
    guess_slug: str,
    timeout: float | None = 15.0,
) -> ResolvedPair:
    """
    Fetch both players' details in parallel.

    Results are keyed by slug, so the pairing never depends on which request
    finishes first. Guessing the secret itself costs a single request.

    Args:
        source: Player detail gateway (SorareApiClient)
        secret_slug: Today's secret
        guess_slug: The guessed player
        timeout: Upper bound in seconds for both fetches together (None = no bound)

    Returns:
        ResolvedPair with the details of both players

    Raises:
        TimeoutError: If the fetches don't complete within timeout
    """
    slugs = list(dict.fromkeys([secret_slug, guess_slug]))

    results = await asyncio.wait_for(
        asyncio.gather(*(source.fetch_player_detail(slug) for slug in slugs)),
        timeout=timeout,
    )
    by_slug = dict(zip(slugs, results, strict=True))

    return ResolvedPair(secret=by_slug[secret_slug], guess=by_slug[guess_slug])
