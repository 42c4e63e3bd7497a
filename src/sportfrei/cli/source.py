"""Activity data loading for sportfrei CLI commands."""

import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

import httpx
from pydantic import ValidationError

from ..shared.config import StravaSettings, get_dashboard_settings, get_strava_settings
from ..shared.models import Activity, DashboardSnapshot, load_snapshot
from ..shared.strava import StravaAPIClient, StravaAPIError
from .display import console, display_error, display_info, display_success

logger = logging.getLogger(__name__)


def load_from_file(path: Path) -> DashboardSnapshot:
    """
    Load a snapshot file.

    Raises:
        SystemExit: If the file is missing or malformed
    """
    try:
        return load_snapshot(path)
    except OSError as e:
        display_error(f"Cannot read {path}: {e.strerror or e}")
        sys.exit(1)
    except (json.JSONDecodeError, ValidationError) as e:
        display_error(f"Invalid snapshot file {path}")
        display_info(str(e))
        sys.exit(1)


def _require_strava_settings() -> StravaSettings:
    try:
        return get_strava_settings()
    except ValidationError:
        display_error("Missing Strava credentials")
        display_info(
            "Set STRAVA_CLIENT_ID, STRAVA_CLIENT_SECRET and STRAVA_REFRESH_TOKEN "
            "in your environment or .env file"
        )
        sys.exit(1)


def _exit_on_request_error(error: Exception, settings: StravaSettings) -> NoReturn:
    if isinstance(error, StravaAPIError):
        display_error(f"HTTP {error.status_code}: {error.message}")
    elif isinstance(error, httpx.TimeoutException):
        display_error(f"Request timed out after {settings.timeout}s")
    else:
        display_error(f"Request failed: {error}")
    sys.exit(1)


def fetch_from_strava(max_pages: int | None = None) -> DashboardSnapshot:
    """
    Fetch athlete, stats and activities from Strava.

    Args:
        max_pages: Page limit for activities (defaults to settings)

    Returns:
        Snapshot of the athlete's data

    Raises:
        SystemExit: On missing credentials or request failure
    """
    strava_settings = _require_strava_settings()
    dashboard_settings = get_dashboard_settings()
    pages = max_pages or dashboard_settings.max_pages

    try:
        with StravaAPIClient(strava_settings) as client, console.status("Loading athlete data..."):
            athlete = client.get_athlete()
            stats = client.get_athlete_stats(athlete.id)
            activities = client.get_all_activities(
                max_pages=pages, per_page=dashboard_settings.per_page
            )
    except (StravaAPIError, httpx.RequestError) as e:
        _exit_on_request_error(e, strava_settings)

    logger.info(f"Loaded {len(activities)} activities for athlete {athlete.id}")
    display_success(f"Loaded {len(activities)} activities")
    return DashboardSnapshot(athlete=athlete, stats=stats, activities=activities)


def fetch_activity(activity_id: int) -> Activity:
    """
    Fetch a single activity from Strava.

    Raises:
        SystemExit: On missing credentials or request failure
    """
    strava_settings = _require_strava_settings()

    try:
        with StravaAPIClient(strava_settings) as client, console.status("Loading activity..."):
            return client.get_activity(activity_id)
    except (StravaAPIError, httpx.RequestError) as e:
        _exit_on_request_error(e, strava_settings)


def find_activity(file: Path | None, activity_id: int) -> Activity:
    """
    Look up an activity in a snapshot file, or fetch it from Strava.

    Raises:
        SystemExit: If the activity is not in the snapshot or cannot be fetched
    """
    if file is None:
        return fetch_activity(activity_id)

    for activity in load_from_file(file).activities:
        if activity.id == activity_id:
            return activity

    display_error(f"Activity {activity_id} not found in {file}")
    sys.exit(1)


def load_data(file: Path | None, max_pages: int | None = None) -> DashboardSnapshot:
    """Load from ``file`` when given, otherwise from the Strava API."""
    if file is not None:
        return load_from_file(file)
    return fetch_from_strava(max_pages)
