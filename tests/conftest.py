"""Shared pytest fixtures and factories for backend tests."""

import asyncio
from datetime import datetime
from zoneinfo import ZoneInfo

import pytest
from httpx import ASGITransport, AsyncClient

from footle.main import app
from footle.schemas.roster import CandidateSummary
from footle.services.sorare_client import Position, SubjectAttributes

# 2023-04-30 00:00 Paris (CEST) == 2023-04-29 22:00 UTC
EPOCH = datetime(2023, 4, 30, tzinfo=ZoneInfo("Europe/Paris"))


# =============================================================================
# Factories
# =============================================================================


def make_player(slug: str = "kylian-mbappe-lottin", **overrides) -> SubjectAttributes:
    """Player details with sensible defaults (a French forward in Ligue 1)."""
    defaults = {
        "slug": slug,
        "display_name": slug.replace("-", " ").title(),
        "age": 25,
        "position": Position.FWD,
        "shirt_number": 10,
        "picture_url": f"https://assets.sorare.com/player/{slug}.png",
        "club_slug": "club-a",
        "club_picture_url": "https://assets.sorare.com/club/club-a.png",
        "club_league_slug": "ligue-1-fr",
        "flag_url": "https://assets.sorare.com/flag/FR.png",
        "nationality_code": "FR",
        "form_short": 70,
        "form_long": 65,
    }
    defaults.update(overrides)
    return SubjectAttributes(**defaults)


def make_roster(size: int) -> list[CandidateSummary]:
    """Roster of `size` distinct players, most popular first."""
    return [
        CandidateSummary(
            slug=f"player-{i}",
            display_name=f"Player {i}",
            popularity=(size - i) * 100,
        )
        for i in range(size)
    ]


class FakePlayerSource:
    """In-memory stand-in for SorareApiClient.fetch_player_detail."""

    def __init__(
        self,
        players: dict[str, SubjectAttributes],
        delays: dict[str, float] | None = None,
    ) -> None:
        self.players = players
        self.delays = delays or {}
        self.calls: list[str] = []

    async def fetch_player_detail(self, slug: str) -> SubjectAttributes | None:
        self.calls.append(slug)
        delay = self.delays.get(slug)
        if delay:
            await asyncio.sleep(delay)
        return self.players.get(slug)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
async def async_client():
    """Async HTTP client for testing the FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def clear_app_state():
    """Remove game state from the app before and after a test."""
    for attr in ("game", "guess_service", "sorare_client"):
        if hasattr(app.state, attr):
            delattr(app.state, attr)
    yield app.state
    for attr in ("game", "guess_service", "sorare_client"):
        if hasattr(app.state, attr):
            delattr(app.state, attr)
