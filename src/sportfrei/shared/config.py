"""Configuration for SportFrei, loaded from environment variables and .env files."""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "sportfrei"


def find_env_file() -> Path | None:
    """
    Locate the .env file to load settings from.

    Searches the current directory and its parents first, then falls back to
    ``~/.config/sportfrei/.env``.

    Returns:
        Path to the first .env file found, or None
    """
    cwd = Path.cwd()
    for directory in (cwd, *cwd.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate

    fallback = CONFIG_DIR / ".env"
    if fallback.is_file():
        return fallback

    return None


# Find env file once at module load
_env_file = find_env_file()


class StravaSettings(BaseSettings):
    """
    Strava API credentials and endpoints.

    Attributes:
        client_id: Strava application client ID
        client_secret: Strava application client secret
        refresh_token: Long-lived refresh token with activity:read_all scope
        api_url: Base URL of the Strava v3 API
        token_url: OAuth token endpoint
        timeout: HTTP timeout in seconds
    """

    model_config = SettingsConfigDict(
        env_prefix="STRAVA_",
        env_file=_env_file,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    client_id: str = Field(description="Strava application client ID")
    client_secret: str = Field(description="Strava application client secret")
    refresh_token: str = Field(description="OAuth refresh token")

    api_url: str = Field(
        default="https://www.strava.com/api/v3",
        description="Strava API base URL",
    )
    token_url: str = Field(
        default="https://www.strava.com/oauth/token",
        description="Strava OAuth token endpoint",
    )
    timeout: float = Field(default=30.0, description="HTTP timeout (seconds)", gt=0)


class DashboardSettings(BaseSettings):
    """Dashboard behaviour knobs."""

    model_config = SettingsConfigDict(
        env_prefix="SPORTFREI_",
        env_file=_env_file,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    recent_days: int = Field(default=30, description="Rolling window length (days)", ge=1)
    per_page: int = Field(default=30, description="Activities fetched per page", ge=1, le=200)
    max_pages: int = Field(default=5, description="Maximum pages to fetch", ge=1)
    refresh_seconds: float = Field(
        default=1.0,
        description="Redraw interval for the live dashboard",
        gt=0,
    )
    exact_previous_month: bool = Field(
        default=True,
        description="Use calendar arithmetic for 'last month' instead of a 35-day offset",
    )


@lru_cache
def get_strava_settings() -> StravaSettings:
    """
    Get Strava settings (cached singleton pattern).

    Raises:
        ValidationError: If required environment variables are missing
    """
    return StravaSettings()  # type: ignore[call-arg]


@lru_cache
def get_dashboard_settings() -> DashboardSettings:
    """Get dashboard settings (cached singleton pattern)."""
    return DashboardSettings()
