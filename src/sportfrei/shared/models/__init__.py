"""Data models for Strava athletes and activities."""

from .activity import Activity, Sport
from .athlete import ActivityTotals, Athlete, AthleteStats
from .snapshot import DashboardSnapshot, load_snapshot

__all__ = [
    "Activity",
    "ActivityTotals",
    "Athlete",
    "AthleteStats",
    "DashboardSnapshot",
    "Sport",
    "load_snapshot",
]
