"""Dashboard metric computations.

All three metrics are independent pure functions over the activity list;
a degenerate input for one never affects the others.
"""

from collections.abc import Sequence
from datetime import datetime

from pydantic import BaseModel

from ..shared.models import Activity, AthleteStats
from .windows import RECENT_DAYS, in_month, month_label, previous_month_label, rolling_window

NO_PACE = "--:--"
MONTHS_PER_YEAR = 12


def format_pace(seconds: float | None) -> str:
    """
    Format a pace in seconds per km as ``m:ss``.

    ``None`` and zero both mean "no pace" and render as ``--:--``.

    Example:
        >>> format_pace(326)
        '5:26'
    """
    if not seconds:
        return NO_PACE

    total = int(seconds)
    return f"{total // 60}:{total % 60:02d}"


class DistanceMetric(BaseModel):
    """All-time biggest ride vs. ride volume in the recent window (km)."""

    all_time_km: float
    recent_km: float

    model_config = {"frozen": True}

    @property
    def baseline_km(self) -> float:
        """Implied monthly average of the all-time biggest ride."""
        return self.all_time_km / MONTHS_PER_YEAR


class PaceMetric(BaseModel):
    """Best run pace ever vs. best in the recent window (seconds per km)."""

    all_time_best: float | None = None
    recent_best: float | None = None

    model_config = {"frozen": True}

    @property
    def all_time_display(self) -> str:
        return format_pace(self.all_time_best)

    @property
    def recent_display(self) -> str:
        return format_pace(self.recent_best)


class CountMetric(BaseModel):
    """Activity counts for this month and last month."""

    this_month: int
    prev_month: int

    model_config = {"frozen": True}


def compute_distance(
    activities: Sequence[Activity],
    stats: AthleteStats | None,
    now: datetime,
    days: int = RECENT_DAYS,
) -> DistanceMetric:
    """
    Compute the distance metric.

    The all-time value is the upstream peak (biggest single ride) while the
    recent value is the summed ride volume inside the window.

    Args:
        activities: Activity set in any order
        stats: Athlete stats, or None when not loaded
        now: Reference instant
        days: Rolling window length

    Returns:
        DistanceMetric in kilometers
    """
    biggest = stats.biggest_ride_distance if stats else None
    all_time_km = (biggest or 0.0) / 1000.0

    recent_km = sum(a.distance_km for a in rolling_window(activities, now, days) if a.is_ride)

    return DistanceMetric(all_time_km=all_time_km, recent_km=recent_km)


def _best_pace(activities: Sequence[Activity]) -> float | None:
    paces = [
        pace
        for a in activities
        if a.is_run and (pace := a.pace_seconds_per_km) is not None
    ]
    return min(paces, default=None)


def compute_pace(
    activities: Sequence[Activity],
    now: datetime,
    days: int = RECENT_DAYS,
) -> PaceMetric:
    """
    Compute best running pace, all-time and within the window.

    Only runs with positive distance qualify; when none do, the pace is None.
    """
    return PaceMetric(
        all_time_best=_best_pace(activities),
        recent_best=_best_pace(rolling_window(activities, now, days)),
    )


def compute_monthly_count(
    activities: Sequence[Activity],
    now: datetime,
    exact: bool = True,
) -> CountMetric:
    """Count activities of every sport in this month and the previous one."""
    return CountMetric(
        this_month=len(in_month(activities, month_label(now))),
        prev_month=len(in_month(activities, previous_month_label(now, exact=exact))),
    )
