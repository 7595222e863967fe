"""Turns a ComparisonVerdict into the tiles the frontend draws.

Tier colors: EXACT -> green, PARTIAL -> yellow, NONE -> red.
Arrows only appear on numeric attributes that missed: "up" when the guess is
higher than the secret, "down" when it is lower.
"""

from footle.schemas.game import GuessCell, GuessHeader, GuessResponse, WinBanner
from footle.services.comparator import (
    CLUB,
    NATIONALITY,
    NUMERIC_ATTRIBUTES,
    AttributeVerdict,
    ComparisonVerdict,
    Direction,
    MatchLevel,
)

INVALID_GUESS_MESSAGE = "Error : Please pick a player in the list"

TIER_COLORS = {
    MatchLevel.EXACT: "green",
    MatchLevel.PARTIAL: "yellow",
    MatchLevel.NONE: "red",
}

_ARROWS = {
    Direction.GUESS_HIGHER: "up",
    Direction.GUESS_LOWER: "down",
}

# Attributes whose display value is an image URL
IMAGE_ATTRIBUTES = frozenset({CLUB, NATIONALITY})


def arrow_for(verdict: AttributeVerdict) -> str | None:
    if verdict.attribute not in NUMERIC_ATTRIBUTES or verdict.match != MatchLevel.NONE:
        return None
    return _ARROWS.get(verdict.direction)


def to_cell(verdict: AttributeVerdict) -> GuessCell:
    return GuessCell(
        attribute=verdict.attribute,
        color=TIER_COLORS[verdict.match],
        content=verdict.display_value,
        is_image=verdict.attribute in IMAGE_ATTRIBUTES,
        arrow=arrow_for(verdict),
    )


def verdict_cells(verdict: ComparisonVerdict) -> list[GuessCell]:
    """Tiles in attribute order (empty for an invalid guess)."""
    return [to_cell(v) for v in verdict.attributes]


def win_message(name: str, attempts: int) -> str:
    return f"Good Job ! You found {name} in {attempts} trys !"


def found_message(count: int) -> str:
    return f"Today {count} people found !"


def build_guess_response(verdict: ComparisonVerdict) -> GuessResponse:
    """Header, tiles in attribute order, then the win banner if any."""
    if verdict.invalid:
        return GuessResponse(invalid=True, error=INVALID_GUESS_MESSAGE)

    win = None
    if verdict.is_win:
        win = WinBanner(
            name=verdict.secret_name,
            attempts=verdict.attempts,
            message=win_message(verdict.secret_name, verdict.attempts),
        )

    return GuessResponse(
        header=GuessHeader(
            slug=verdict.guess_slug,
            name=verdict.guess_name,
            picture_url=verdict.guess_picture_url,
        ),
        cells=verdict_cells(verdict),
        win=win,
    )
