"""Dashboard panel layout with rich."""

import logging
from collections.abc import Sequence
from datetime import datetime

from rich.layout import Layout
from rich.panel import Panel
from rich.text import Text

from ..shared.models import Activity, Athlete, AthleteStats
from .metrics import (
    CountMetric,
    DistanceMetric,
    PaceMetric,
    compute_distance,
    compute_monthly_count,
    compute_pace,
)
from .trend import count_trend, distance_trend, pace_trend

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No data available"
FALLBACK_NAME = "Athlete"
PANEL_NAMES = ("distance", "pace", "count")


def no_data_panel() -> Panel:
    """Full-width placeholder shown until athlete data has loaded."""
    return Panel(Text(NO_DATA_MESSAGE, style="yellow"), title="Dashboard")


def distance_panel(metric: DistanceMetric, athlete: Athlete) -> Panel:
    trend = distance_trend(metric)
    name = athlete.firstname.strip() or FALLBACK_NAME
    body = (
        "Biggest Distance\n\n"
        f"{metric.recent_km:.1f} km {trend.glyph}\n"
        f"(vs {metric.baseline_km:.1f} km monthly avg)\n"
        f"All-time: {metric.all_time_km:.1f} km"
    )
    return Panel(Text(body, style=trend.color), title=f"Welcome, {name}!", border_style="cyan")


def pace_panel(metric: PaceMetric) -> Panel:
    trend = pace_trend(metric)
    body = f"Best Pace\n\n{metric.recent_display} /km {trend.glyph}\n(vs {metric.all_time_display})"
    return Panel(Text(body, style=trend.color), title="Best Pace", border_style="green")


def count_panel(metric: CountMetric) -> Panel:
    trend = count_trend(metric)
    body = (
        f"This Month\n\n{metric.this_month} {trend.glyph}\n"
        f"(vs {metric.prev_month} last month)"
    )
    return Panel(Text(body, style=trend.color), title="This Month", border_style="yellow")


def build_metric_panels(
    activities: Sequence[Activity],
    stats: AthleteStats | None,
    athlete: Athlete,
    now: datetime,
    *,
    recent_days: int = 30,
    exact_previous_month: bool = True,
) -> tuple[Panel, Panel, Panel]:
    """Compute the three metrics and wrap each in its panel."""
    distance = compute_distance(activities, stats, now, days=recent_days)
    pace = compute_pace(activities, now, days=recent_days)
    count = compute_monthly_count(activities, now, exact=exact_previous_month)

    logger.debug(f"Dashboard metrics: {distance!r} {pace!r} {count!r}")
    return distance_panel(distance, athlete), pace_panel(pace), count_panel(count)


def render_dashboard(
    layout: Layout,
    activities: Sequence[Activity],
    stats: AthleteStats | None,
    athlete: Athlete | None,
    now: datetime,
    *,
    recent_days: int = 30,
    exact_previous_month: bool = True,
) -> None:
    """
    Draw the dashboard into ``layout``.

    Called once per frame. Without an athlete the whole area gets a single
    "No data available" panel; otherwise it is split into three equal
    columns (distance, pace, monthly count). Inputs are never mutated.

    Args:
        layout: Region of the display to draw into
        activities: Activity set in any order
        stats: Athlete stats, or None when not loaded
        athlete: Athlete profile, or None when nothing has loaded
        now: Reference instant for all windows
        recent_days: Rolling window length
        exact_previous_month: Calendar arithmetic for "last month"
    """
    if athlete is None:
        layout.unsplit()
        layout.update(no_data_panel())
        return

    panels = build_metric_panels(
        activities,
        stats,
        athlete,
        now,
        recent_days=recent_days,
        exact_previous_month=exact_previous_month,
    )
    layout.split_row(
        *(Layout(panel, name=name, ratio=1) for name, panel in zip(PANEL_NAMES, panels))
    )
