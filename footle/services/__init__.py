"""Service layer for business logic."""

from footle.services.daily import DailyGame
from footle.services.guess import GuessService
from footle.services.roster_builder import RosterBuilder
from footle.services.sorare_client import SorareApiClient

__all__ = ["DailyGame", "GuessService", "RosterBuilder", "SorareApiClient"]
