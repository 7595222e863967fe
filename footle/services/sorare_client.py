"""Sorare GraphQL API client with rate limiting for roster collection and guesses."""

import asyncio
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx
from tenacity import (
    RetryError,
    before_sleep_log,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from footle.exceptions import GatewayError
from footle.schemas.roster import CandidateSummary

logger = logging.getLogger(__name__)

SORARE_GRAPHQL_URL = "https://api.sorare.com/graphql"

# HTTP status codes that should trigger a retry
RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}

DOMESTIC_LEAGUE_FORMAT = "DOMESTIC_LEAGUE"

# =============================================================================
# GraphQL documents
# =============================================================================

LEAGUES_QUERY = """
query {
    football {
        leaguesOpenForGameStats {
            slug
            format
        }
    }
}
"""

COMPETITION_CLUBS_QUERY = """
query($slug: String!) {
    football {
        competition(slug: $slug) {
            clubs {
                nodes {
                    slug
                }
            }
        }
    }
}
"""

CLUB_PLAYERS_QUERY = """
query($slug: String!) {
    football {
        club(slug: $slug) {
            activePlayers {
                nodes {
                    slug
                    subscriptionsCount
                    displayName
                    cardSupply {
                        limited
                    }
                }
            }
        }
    }
}
"""

PLAYER_DETAIL_QUERY = """
query($slug: String!) {
    football {
        player(slug: $slug) {
            slug
            age
            position
            shirtNumber
            pictureUrl
            displayName
            l5: averageScore(type: LAST_FIVE_SO5_AVERAGE_SCORE)
            l15: averageScore(type: LAST_FIFTEEN_SO5_AVERAGE_SCORE)
            activeClub {
                slug
                pictureUrl
                domesticLeague {
                    slug
                }
            }
            country {
                flagUrl
                code
            }
        }
    }
}
"""


class Position(str, Enum):
    """Short position codes shown in the guess grid."""

    GK = "GK"
    DEF = "DEF"
    MID = "MID"
    FWD = "FWD"
    ERR = "ERR"


_POSITIONS = {
    "Goalkeeper": Position.GK,
    "Defender": Position.DEF,
    "Midfielder": Position.MID,
    "Forward": Position.FWD,
}


def short_position(position: str | None) -> Position:
    """Map Sorare's position name to its short code (ERR when unknown)."""
    return _POSITIONS.get(position or "", Position.ERR)


def _safe_int(val: Any, default: int = 0) -> int:
    """Safely convert API value to int, handling None and empty strings.

    Floats are truncated, so a 67.8 average score becomes 67.
    """
    if val is None or val == "":
        return default
    try:
        return int(float(val))
    except (ValueError, TypeError):
        return default


def _is_retryable_error(exception: BaseException) -> bool:
    """Check if an error should trigger a retry."""
    if isinstance(exception, (httpx.TimeoutException, httpx.NetworkError)):
        return True
    if isinstance(exception, httpx.HTTPStatusError):
        return exception.response.status_code in RETRYABLE_STATUS_CODES
    return False


@dataclass(slots=True, frozen=True)
class SubjectAttributes:
    """Everything the comparator needs to know about one player."""

    slug: str
    display_name: str
    age: int
    position: Position
    shirt_number: int
    picture_url: str

    # Club
    club_slug: str
    club_picture_url: str
    club_league_slug: str

    # Nationality
    flag_url: str
    nationality_code: str  # Upper-cased, e.g. "FR" or "GB-ENG"

    # Recent form (SO5 average scores, truncated)
    form_short: int  # last 5 games
    form_long: int  # last 15 games


class SorareApiClient:
    """
    Sorare GraphQL client with rate limiting.

    The roster build issues one query per league and one per club (several
    hundred requests), so requests are throttled and retried on transient
    failures. Every request has a bounded timeout.
    """

    def __init__(
        self,
        api_key: str = "",
        base_url: str = SORARE_GRAPHQL_URL,
        requests_per_second: float = 10.0,
        max_concurrent: int = 8,
        timeout: float = 10.0,
    ):
        """
        Initialize the client.

        Args:
            api_key: Sorare API key, sent in the APIKEY header
            base_url: GraphQL endpoint
            requests_per_second: Target rate (10.0 = 10 requests/sec)
            max_concurrent: Maximum concurrent requests
            timeout: Per-request timeout in seconds
        """
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.delay = 1.0 / requests_per_second
        self.semaphore = asyncio.Semaphore(max_concurrent)
        self._last_request_time = 0.0
        self._lock = asyncio.Lock()
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client (lazy initialization, coroutine-safe)."""
        if self._client is None:
            async with self._lock:
                if self._client is None:  # Double-check after acquiring lock
                    headers = {"User-Agent": "Footle/1.0 (daily player guessing game)"}
                    if self.api_key:
                        headers["APIKEY"] = self.api_key
                    self._client = httpx.AsyncClient(timeout=self.timeout, headers=headers)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client and release resources (coroutine-safe)."""
        async with self._lock:
            if self._client is not None:
                await self._client.aclose()
                self._client = None

    async def __aenter__(self) -> "SorareApiClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, *args: object) -> None:
        """Exit async context manager and close client."""
        await self.close()

    async def _rate_limit(self) -> None:
        """Apply rate limiting between requests."""
        async with self._lock:
            now = time.monotonic()
            elapsed = now - self._last_request_time
            if elapsed < self.delay:
                await asyncio.sleep(self.delay - elapsed)
            self._last_request_time = time.monotonic()

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=30),
        retry=retry_if_exception(_is_retryable_error),
        before_sleep=before_sleep_log(logger, logging.WARNING),
    )
    async def _query(
        self, query: str, variables: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Run a rate-limited GraphQL query with retries and return its data."""
        async with self.semaphore:
            await self._rate_limit()

            client = await self._get_client()
            payload: dict[str, Any] = {"query": query}
            if variables:
                payload["variables"] = variables
            response = await client.post(self.base_url, json=payload)
            response.raise_for_status()
            try:
                body = response.json()
            except ValueError as e:
                raise GatewayError(f"Sorare API returned a non-JSON body: {e}") from e

        if not isinstance(body, dict):
            raise GatewayError(f"Unexpected GraphQL response type: {type(body).__name__}")

        errors = body.get("errors")
        data = body.get("data")
        if errors and not data:
            if not isinstance(errors, list):
                errors = [errors]
            messages = "; ".join(
                str(e.get("message", e)) if isinstance(e, dict) else str(e) for e in errors
            )
            raise GatewayError(f"GraphQL errors: {messages}")
        if errors:
            logger.warning(f"GraphQL returned partial data with errors: {errors}")
        if data is not None and not isinstance(data, dict):
            raise GatewayError(f"Unexpected GraphQL data type: {type(data).__name__}")
        return data or {}

    async def list_domestic_leagues(self) -> list[str]:
        """Fetch slugs of every league open for game stats with a domestic format."""
        data = await self._query(LEAGUES_QUERY)
        leagues = (data.get("football") or {}).get("leaguesOpenForGameStats") or []
        return [
            league["slug"]
            for league in leagues
            if league.get("format") == DOMESTIC_LEAGUE_FORMAT and league.get("slug")
        ]

    async def list_clubs(self, league_slug: str) -> list[str]:
        """Fetch slugs of the clubs playing in a competition."""
        data = await self._query(COMPETITION_CLUBS_QUERY, {"slug": league_slug})
        competition = (data.get("football") or {}).get("competition") or {}
        nodes = (competition.get("clubs") or {}).get("nodes") or []
        return [node["slug"] for node in nodes if node.get("slug")]

    async def list_active_players(self, club_slug: str) -> list[CandidateSummary]:
        """
        Fetch a club's active players that have limited cards in circulation.

        Players without any card supply entry are not tradable on Sorare and
        tend to be youth or reserve players nobody would recognise, so they
        are left out of the roster.
        """
        data = await self._query(CLUB_PLAYERS_QUERY, {"slug": club_slug})
        club = (data.get("football") or {}).get("club") or {}
        nodes = (club.get("activePlayers") or {}).get("nodes") or []

        players = []
        for node in nodes:
            if not node.get("cardSupply"):
                continue
            slug = node.get("slug")
            if not slug:
                logger.warning(f"Skipping player without slug in club {club_slug}: {node}")
                continue
            players.append(
                CandidateSummary(
                    slug=slug,
                    display_name=node.get("displayName") or slug,
                    popularity=max(_safe_int(node.get("subscriptionsCount")), 0),
                )
            )
        return players

    async def fetch_player_detail(self, slug: str) -> SubjectAttributes | None:
        """
        Fetch the full attribute set of one player.

        Never raises: any transport, HTTP, GraphQL or parsing failure is logged
        and reported as None, the same as an unknown slug. A player without a
        positive age is treated as unknown too.

        Args:
            slug: Sorare player slug

        Returns:
            SubjectAttributes, or None when the player could not be resolved
        """
        try:
            data = await self._query(PLAYER_DETAIL_QUERY, {"slug": slug})
        except (httpx.HTTPError, RetryError, GatewayError) as e:
            logger.warning(f"Failed to fetch player {slug}: {type(e).__name__}: {e}")
            return None

        try:
            return _parse_player(slug, data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning(f"Malformed player payload for {slug}: {type(e).__name__}: {e}")
            return None


def _parse_player(slug: str, data: dict[str, Any]) -> SubjectAttributes | None:
    """Build SubjectAttributes from a player detail payload."""
    player = (data.get("football") or {}).get("player")
    if not player:
        logger.info(f"Player {slug} not found")
        return None

    age = _safe_int(player.get("age"))
    if age <= 0:
        logger.info(f"Player {slug} has no age, treating as unknown")
        return None

    club = player.get("activeClub") or {}
    league = club.get("domesticLeague") or {}
    country = player.get("country") or {}

    return SubjectAttributes(
        slug=slug,
        display_name=player.get("displayName") or slug,
        age=age,
        position=short_position(player.get("position")),
        shirt_number=_safe_int(player.get("shirtNumber")),
        picture_url=player.get("pictureUrl") or "",
        club_slug=club.get("slug") or "",
        club_picture_url=club.get("pictureUrl") or "",
        club_league_slug=league.get("slug") or "",
        flag_url=country.get("flagUrl") or "",
        nationality_code=(country.get("code") or "").upper(),
        form_short=_safe_int(player.get("l5")),
        form_long=_safe_int(player.get("l15")),
    )
