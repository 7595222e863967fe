"""Main FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from footle.api.game import router as game_router
from footle.config import get_settings
from footle.db import close_pool, init_pool
from footle.services.comparator import WinRule
from footle.services.daily import DailyGame
from footle.services.guess import GuessService
from footle.services.snapshot_store import PostgresSnapshotStore, get_snapshot_store
from footle.services.sorare_client import SorareApiClient

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Footle Backend",
    description="Daily guess-the-footballer game: roster, guesses and daily stats",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(game_router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint for container orchestration."""
    return {"status": "healthy"}


@app.on_event("startup")
async def startup_event() -> None:
    """Load the roster snapshot and build the game state.

    A missing or empty snapshot aborts startup: the server cannot serve a
    game without a roster.
    """
    logger.info("Starting Footle Backend")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    logger.info(f"Sorare API: {settings.sorare_api_url}")

    win_rule = WinRule(settings.win_rule)

    store = get_snapshot_store(settings)
    if isinstance(store, PostgresSnapshotStore):
        await init_pool()
    snapshot = await store.load(settings.snapshot_name)

    game = DailyGame(snapshot.players, settings.epoch)
    client = SorareApiClient(
        api_key=settings.sorare_api_key,
        base_url=settings.sorare_api_url,
        requests_per_second=settings.sorare_requests_per_second,
        max_concurrent=settings.sorare_max_concurrent,
        timeout=settings.sorare_timeout,
    )

    app.state.game = game
    app.state.sorare_client = client
    app.state.guess_service = GuessService(
        game, client, win_rule=win_rule, resolve_timeout=settings.resolve_timeout
    )

    day_index, _ = await game.today()
    logger.info(
        f"Loaded roster of {len(snapshot.players)} players built at {snapshot.built_at}, "
        f"day index {day_index}, win rule {win_rule.value}"
    )


@app.on_event("shutdown")
async def shutdown_event() -> None:
    """Cleanup on shutdown."""
    logger.info("Shutting down Footle Backend")
    client = getattr(app.state, "sorare_client", None)
    if client is not None:
        await client.close()
    await close_pool()
