"""Shared fixtures for SportFrei tests."""

from datetime import datetime, timedelta
from typing import Any

import pytest

from sportfrei.shared.models import Activity, Athlete, AthleteStats

NOW = datetime(2025, 3, 20, 12, 0, 0)

_next_id = 0


def make_activity(
    start: datetime,
    distance_km: float = 5.0,
    moving_time: int = 1800,
    activity_type: str = "Run",
    sport_type: str | None = None,
    **extra: Any,
) -> Activity:
    """Build an activity with sensible defaults."""
    global _next_id
    _next_id += 1
    return Activity(
        id=_next_id,
        name=extra.pop("name", f"Activity {_next_id}"),
        activity_type=activity_type,
        sport_type=sport_type if sport_type is not None else activity_type,
        start_date_local=start,
        distance=distance_km * 1000.0,
        moving_time=moving_time,
        elapsed_time=moving_time,
        **extra,
    )


def days_ago(days: float) -> datetime:
    return NOW - timedelta(days=days)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def athlete() -> Athlete:
    return Athlete(id=12345, username="testuser", firstname="John", lastname="Doe")


@pytest.fixture
def stats() -> AthleteStats:
    return AthleteStats(biggest_ride_distance=120_000.0)


@pytest.fixture
def activities() -> list[Activity]:
    return [
        make_activity(days_ago(2), distance_km=10.0, moving_time=3000, name="Morning Run"),
        make_activity(days_ago(40), distance_km=10.0, moving_time=2800, name="Fast Run"),
        make_activity(days_ago(3), distance_km=30.0, moving_time=3600, activity_type="Ride"),
        make_activity(days_ago(5), distance_km=0.0, moving_time=3600, activity_type="Yoga"),
    ]


def strava_activity_json(**overrides: Any) -> dict[str, Any]:
    """Activity payload shaped like the Strava API response."""
    data: dict[str, Any] = {
        "id": 123456789,
        "name": "Morning Run",
        "type": "Run",
        "sport_type": "Run",
        "start_date": "2025-03-18T06:30:00Z",
        "start_date_local": "2025-03-18T07:30:00Z",
        "timezone": "(GMT+01:00) Europe/Berlin",
        "distance": 5000.0,
        "moving_time": 1630,
        "elapsed_time": 1700,
        "total_elevation_gain": 42.0,
        "average_speed": 3.07,
        "max_speed": 4.1,
        "average_heartrate": 152.3,
        "max_heartrate": 171.0,
        "calories": 380.0,
        "description": "Easy morning run",
        "kudos_count": 5,
        "pr_count": 1,
        "private": False,
        "commute": False,
        "manual": False,
        "gear_id": None,
    }
    data.update(overrides)
    return data
