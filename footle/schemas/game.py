"""Game API response schemas."""

from typing import Literal

from pydantic import BaseModel, Field


class PlayerOption(BaseModel):
    """One entry of the guess picker."""

    slug: str
    name: str


class PlayersResponse(BaseModel):
    """Response for GET /players: the roster in presentation order."""

    players: list[PlayerOption]
    total: int = Field(ge=0)


class GuessHeader(BaseModel):
    """Who was guessed."""

    slug: str
    name: str
    picture_url: str


class GuessCell(BaseModel):
    """One colored tile of the guess row."""

    attribute: str
    color: Literal["green", "yellow", "red"]
    content: str
    is_image: bool = False  # content is a URL (club crest, flag)
    arrow: Literal["up", "down"] | None = None  # up: guess is higher than the secret


class WinBanner(BaseModel):
    """Shown when the guess found the secret."""

    name: str
    attempts: int
    message: str


class GuessResponse(BaseModel):
    """Response for GET /guess."""

    invalid: bool = False
    error: str | None = None
    header: GuessHeader | None = None
    cells: list[GuessCell] = []
    win: WinBanner | None = None


class StatsResponse(BaseModel):
    """Response for GET /stats."""

    day_index: int = Field(ge=0)
    found_count: int = Field(ge=0)
    message: str
