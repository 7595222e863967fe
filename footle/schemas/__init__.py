"""API response and snapshot schemas."""

from footle.schemas.game import (
    GuessCell,
    GuessHeader,
    GuessResponse,
    PlayerOption,
    PlayersResponse,
    StatsResponse,
    WinBanner,
)
from footle.schemas.roster import CandidateSummary, RosterSnapshot

__all__ = [
    "CandidateSummary",
    "GuessCell",
    "GuessHeader",
    "GuessResponse",
    "PlayerOption",
    "PlayersResponse",
    "RosterSnapshot",
    "StatsResponse",
    "WinBanner",
]
