"""Integration tests for API endpoints."""

from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from footle.services.daily import DailyGame
from footle.services.guess import GuessService
from footle.services.presentation import INVALID_GUESS_MESSAGE
from tests.conftest import EPOCH, FakePlayerSource, make_player, make_roster


@pytest.fixture
def game_state(clear_app_state):
    """Install a five-player game backed by an in-memory player source."""
    roster = make_roster(5)
    game = DailyGame(roster, EPOCH)
    source = FakePlayerSource(
        {
            c.slug: make_player(c.slug, display_name=c.display_name, age=20 + i, shirt_number=i + 1)
            for i, c in enumerate(roster)
        }
    )
    clear_app_state.game = game
    clear_app_state.guess_service = GuessService(game, source)
    return clear_app_state, game, source


class TestHealthEndpoint:
    """Tests for health check endpoint."""

    async def test_health_returns_healthy(self, async_client: AsyncClient):
        """Health endpoint should return healthy status."""
        response = await async_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestDocsEndpoint:
    """Tests for documentation endpoints."""

    async def test_docs_available(self, async_client: AsyncClient):
        """OpenAPI docs should be available."""
        response = await async_client.get("/docs")

        # FastAPI redirects /docs to /docs/ or returns HTML
        assert response.status_code in (200, 307)


class TestCors:
    """Tests for CORS configuration."""

    async def test_preflight_allows_frontend(self, async_client: AsyncClient):
        response = await async_client.options(
            "/api/v1/game/players",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "GET",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


class TestGameNotLoaded:
    """Endpoints answer 503 until a roster is loaded."""

    @pytest.mark.parametrize(
        "path",
        ["/api/v1/game/players", "/api/v1/game/stats", "/api/v1/game/guess?player=x"],
    )
    async def test_returns_503(self, async_client: AsyncClient, clear_app_state, path):
        response = await async_client.get(path)

        assert response.status_code == 503
        assert "No roster snapshot" in response.json()["detail"]


class TestPlayersEndpoint:
    """Tests for GET /api/v1/game/players."""

    async def test_lists_roster_in_snapshot_order(self, async_client: AsyncClient, game_state):
        _, game, _ = game_state

        response = await async_client.get("/api/v1/game/players")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 5
        assert [p["slug"] for p in data["players"]] == [p.slug for p in game.players]
        assert data["players"][0] == {"slug": "player-0", "name": "Player 0"}


class TestGuessEndpoint:
    """Tests for GET /api/v1/game/guess."""

    async def test_wrong_guess_returns_tiles(self, async_client: AsyncClient, game_state):
        _, game, _ = game_state
        index, _ = await game.today()
        other = game.players[(index + 1) % 5]

        response = await async_client.get(
            "/api/v1/game/guess", params={"player": other.slug, "attempts": 1}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["invalid"] is False
        assert data["win"] is None
        assert data["header"]["slug"] == other.slug
        assert [c["attribute"] for c in data["cells"]] == [
            "age", "club", "nationality", "shirt_number", "position", "form_short", "form_long"
        ]

        age = data["cells"][0]
        assert age["color"] == "red"
        assert age["arrow"] in ("up", "down")
        club = data["cells"][1]
        assert club["color"] == "green"
        assert club["is_image"] is True

    async def test_correct_guess_wins_and_counts(self, async_client: AsyncClient, game_state):
        _, game, _ = game_state
        _, secret = await game.today()

        response = await async_client.get(
            "/api/v1/game/guess", params={"player": secret.slug, "attempts": 3}
        )

        data = response.json()
        assert all(c["color"] == "green" for c in data["cells"])
        assert data["win"] == {
            "name": secret.display_name,
            "attempts": 3,
            "message": f"Good Job ! You found {secret.display_name} in 3 trys !",
        }

        stats = (await async_client.get("/api/v1/game/stats")).json()
        assert stats["found_count"] == 1
        assert stats["message"] == "Today 1 people found !"

    @pytest.mark.parametrize("params", [{"player": "not-a-player"}, {"player": ""}, {}])
    async def test_invalid_guess(self, async_client: AsyncClient, game_state, params):
        response = await async_client.get("/api/v1/game/guess", params=params)

        assert response.status_code == 200
        data = response.json()
        assert data["invalid"] is True
        assert data["error"] == INVALID_GUESS_MESSAGE
        assert data["cells"] == []

    @pytest.mark.parametrize(
        "raw,echoed",
        [("-1", -1), ("abc", 0), ("", 0), (" 4 ", 4), ("2.5", 0)],
    )
    async def test_attempts_echoed_without_validation(
        self, async_client: AsyncClient, game_state, raw, echoed
    ):
        """The try count is the caller's business: odd values are echoed or read as 0."""
        _, game, _ = game_state
        _, secret = await game.today()

        response = await async_client.get(
            "/api/v1/game/guess", params={"player": secret.slug, "attempts": raw}
        )

        assert response.status_code == 200
        assert response.json()["win"]["attempts"] == echoed

    async def test_secret_unavailable(self, async_client: AsyncClient, game_state):
        _, game, source = game_state
        _, secret = await game.today()
        del source.players[secret.slug]

        response = await async_client.get(
            "/api/v1/game/guess", params={"player": "player-0", "attempts": 1}
        )

        assert response.status_code == 503

    async def test_timeout(self, async_client: AsyncClient, game_state):
        state, game, source = game_state
        _, secret = await game.today()
        source.delays[secret.slug] = 1.0
        state.guess_service = GuessService(game, source, resolve_timeout=0.05)

        response = await async_client.get(
            "/api/v1/game/guess", params={"player": "player-0", "attempts": 1}
        )

        assert response.status_code == 504

    async def test_unexpected_error(self, async_client: AsyncClient, game_state):
        state, game, source = game_state
        source.fetch_player_detail = AsyncMock(side_effect=RuntimeError("boom"))

        response = await async_client.get(
            "/api/v1/game/guess", params={"player": "player-0", "attempts": 1}
        )

        assert response.status_code == 500
        assert "boom" not in response.json()["detail"]


class TestStatsEndpoint:
    """Tests for GET /api/v1/game/stats."""

    async def test_starts_at_zero(self, async_client: AsyncClient, game_state):
        _, game, _ = game_state
        index, _ = await game.today()

        response = await async_client.get("/api/v1/game/stats")

        assert response.status_code == 200
        assert response.json() == {
            "day_index": index,
            "found_count": 0,
            "message": "Today 0 people found !",
        }
