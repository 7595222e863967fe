"""Application configuration using pydantic-settings."""

from datetime import datetime
from functools import lru_cache
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Sorare GraphQL API
    sorare_api_url: str = "https://api.sorare.com/graphql"
    sorare_api_key: str = ""
    sorare_timeout: float = 10.0  # seconds per request
    sorare_requests_per_second: float = 10.0
    sorare_max_concurrent: int = 8

    # Upper bound for fetching secret + guess together
    resolve_timeout: float = 15.0

    # Roster snapshot
    roster_size: int = 1500
    snapshot_name: str = "players"
    snapshot_backend: str = "file"  # "file" or "postgres"
    snapshot_dir: str = "data"
    database_url: str = ""

    # Daily rotation: the secret changes every 24h counted from this instant
    daily_epoch: datetime = datetime(2023, 4, 30)
    daily_timezone: str = "Europe/Paris"

    # "identifier" (guess must be the secret) or "all_exact" (every attribute green)
    win_rule: str = "identifier"

    # CORS - comma-separated list of allowed origins
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    # Logging
    log_level: str = "INFO"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def epoch(self) -> datetime:
        """Daily epoch as a timezone-aware datetime."""
        if self.daily_epoch.tzinfo is not None:
            return self.daily_epoch
        return self.daily_epoch.replace(tzinfo=ZoneInfo(self.daily_timezone))


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
