"""Roster snapshot models.

The snapshot is persisted as this model's JSON dump, so these classes define
the on-disk format as well as the /players API payload.
"""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


class CandidateSummary(BaseModel):
    """One player eligible to be the daily secret or to be guessed."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    slug: str
    display_name: str
    popularity: int = Field(ge=0)  # Sorare subscriptionsCount, ranking only


class RosterSnapshot(BaseModel):
    """The built roster in its permanent presentation order."""

    players: list[CandidateSummary]
    built_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
