"""Strava API integration."""

from .client import StravaAPIClient, StravaAPIError

__all__ = [
    "StravaAPIClient",
    "StravaAPIError",
]
