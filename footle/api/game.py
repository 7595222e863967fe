"""Game API routes - roster picker, guesses and daily stats."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from footle.dependencies import require_game, require_guess_service
from footle.exceptions import SecretUnavailableError
from footle.schemas.game import (
    GuessResponse,
    PlayerOption,
    PlayersResponse,
    StatsResponse,
)
from footle.services.daily import DailyGame
from footle.services.guess import GuessService
from footle.services.presentation import build_guess_response, found_message

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/game", tags=["game"])


@router.get("/players", response_model=PlayersResponse)
async def list_players(game: DailyGame = Depends(require_game)) -> PlayersResponse:
    """All guessable players, in the snapshot's presentation order."""
    return PlayersResponse(
        players=[PlayerOption(slug=p.slug, name=p.display_name) for p in game.players],
        total=len(game.players),
    )


def parse_attempts(raw: str) -> int:
    """Client-supplied try count. Anything that isn't an integer counts as 0."""
    try:
        return int(raw.strip())
    except ValueError:
        return 0


@router.get("/guess", response_model=GuessResponse)
async def make_guess(
    player: str = Query(default="", description="Slug of the guessed player"),
    attempts: str = Query(default="0", description="Number of tries so far (echoed back)"),
    service: GuessService = Depends(require_guess_service),
) -> GuessResponse:
    """
    Compare a guessed player against today's secret.

    Unknown players are not an error: the response has invalid=true and a
    message asking to pick a player from the list.
    """
    try:
        verdict = await service.guess(player, parse_attempts(attempts))
    except SecretUnavailableError as e:
        raise HTTPException(
            status_code=503,
            detail="Today's player is temporarily unavailable, please retry",
        ) from e
    except TimeoutError as e:
        logger.warning(f"Timed out resolving guess {player!r}")
        raise HTTPException(
            status_code=504,
            detail="Player data source timed out, please retry",
        ) from e
    except Exception as e:
        logger.exception(f"Failed to score guess: {e}")
        raise HTTPException(
            status_code=500,
            detail="Internal server error while scoring guess",
        ) from e

    return build_guess_response(verdict)


@router.get("/stats", response_model=StatsResponse)
async def get_stats(game: DailyGame = Depends(require_game)) -> StatsResponse:
    """How many people found today's player."""
    day_index, found = await game.found_count()
    return StatsResponse(day_index=day_index, found_count=found, message=found_message(found))
