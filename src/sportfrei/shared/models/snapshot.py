"""Offline snapshot of everything the dashboard needs."""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field

from .activity import Activity
from .athlete import Athlete, AthleteStats

logger = logging.getLogger(__name__)


class DashboardSnapshot(BaseModel):
    """
    Athlete, stats and activities captured at one point in time.

    Uses Strava's own JSON field names, so a snapshot can be produced by
    dumping the three API responses into a single object.
    """

    athlete: Athlete | None = None
    stats: AthleteStats | None = None
    activities: list[Activity] = Field(default_factory=list)


def load_snapshot(path: Path) -> DashboardSnapshot:
    """
    Load a snapshot JSON file.

    Args:
        path: Path to a JSON file with ``athlete``, ``stats`` and ``activities``

    Returns:
        Parsed snapshot

    Raises:
        OSError: If the file cannot be read
        json.JSONDecodeError: If the file is not valid JSON
        pydantic.ValidationError: If the content does not match the models
    """
    logger.info(f"Loading snapshot from {path}")
    with open(path) as f:
        data = json.load(f)

    snapshot = DashboardSnapshot.model_validate(data)
    logger.debug(f"Snapshot holds {len(snapshot.activities)} activities")
    return snapshot
