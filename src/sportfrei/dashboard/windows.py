"""Time windows over activity start times.

Every function takes the reference instant explicitly and never reads the
clock. Results keep the input order.
"""

from collections.abc import Iterable
from datetime import datetime, timedelta

from ..shared.models import Activity

RECENT_DAYS = 30
LEGACY_MONTH_OFFSET_DAYS = 35


def _wall_clock(moment: datetime) -> datetime:
    # Start times are naive local wall-clock values.
    return moment.replace(tzinfo=None)


def rolling_window(
    activities: Iterable[Activity],
    now: datetime,
    days: int = RECENT_DAYS,
) -> list[Activity]:
    """Activities that started strictly after ``now - days``."""
    cutoff = _wall_clock(now) - timedelta(days=days)
    return [a for a in activities if a.start_date_local > cutoff]


def month_label(moment: datetime) -> str:
    """Year-month label, e.g. '2025-03'."""
    return moment.strftime("%Y-%m")


def previous_month_label(now: datetime, exact: bool = True) -> str:
    """
    Label of the month before ``now``.

    Args:
        now: Reference instant
        exact: Use calendar arithmetic. When False, take the label of
            ``now - 35 days``, which skips a month when ``now`` falls in the
            first days of a month following a short one.

    Returns:
        Year-month label
    """
    now = _wall_clock(now)
    if not exact:
        return month_label(now - timedelta(days=LEGACY_MONTH_OFFSET_DAYS))

    if now.month == 1:
        return f"{now.year - 1:04d}-12"
    return f"{now.year:04d}-{now.month - 1:02d}"


def in_month(activities: Iterable[Activity], label: str) -> list[Activity]:
    """Activities whose local start time falls in the labelled month."""
    return [a for a in activities if month_label(a.start_date_local) == label]
