"""Metric aggregation and trend rendering for the dashboard view."""

from .metrics import (
    CountMetric,
    DistanceMetric,
    PaceMetric,
    compute_distance,
    compute_monthly_count,
    compute_pace,
    format_pace,
)
from .panels import build_metric_panels, no_data_panel, render_dashboard
from .trend import Trend, count_trend, distance_trend, evaluate, pace_trend

__all__ = [
    "CountMetric",
    "DistanceMetric",
    "PaceMetric",
    "Trend",
    "build_metric_panels",
    "compute_distance",
    "compute_monthly_count",
    "compute_pace",
    "count_trend",
    "distance_trend",
    "evaluate",
    "format_pace",
    "no_data_panel",
    "pace_trend",
    "render_dashboard",
]
