"""Shared FastAPI dependencies for API routes."""

from fastapi import HTTPException, Request

from footle.services.daily import DailyGame
from footle.services.guess import GuessService


def require_game(request: Request) -> DailyGame:
    """FastAPI dependency returning the loaded daily game.

    Raises HTTPException 503 if startup has not loaded a roster.

    Usage:
        @router.get("/endpoint")
        async def endpoint(game: DailyGame = Depends(require_game)):
            ...
    """
    game = getattr(request.app.state, "game", None)
    if game is None:
        raise HTTPException(
            status_code=503,
            detail="Game not available. No roster snapshot has been loaded.",
        )
    return game


def require_guess_service(request: Request) -> GuessService:
    """FastAPI dependency returning the guess service (503 if not initialized)."""
    service = getattr(request.app.state, "guess_service", None)
    if service is None:
        raise HTTPException(
            status_code=503,
            detail="Game not available. No roster snapshot has been loaded.",
        )
    return service
