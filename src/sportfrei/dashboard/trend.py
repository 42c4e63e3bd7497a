"""Trend classification for dashboard metrics.

There is no neutral state: ties and missing values resolve to DECLINING.
"""

from enum import Enum

from .metrics import CountMetric, DistanceMetric, PaceMetric


class Trend(str, Enum):
    IMPROVING = "improving"
    DECLINING = "declining"

    @property
    def color(self) -> str:
        return "green" if self is Trend.IMPROVING else "red"

    @property
    def glyph(self) -> str:
        return "↑" if self is Trend.IMPROVING else "↓"


def evaluate(current: float | None, baseline: float | None) -> Trend:
    """IMPROVING iff both values are defined and ``current > baseline``."""
    if current is None or baseline is None:
        return Trend.DECLINING
    return Trend.IMPROVING if current > baseline else Trend.DECLINING


def distance_trend(metric: DistanceMetric) -> Trend:
    return evaluate(metric.recent_km, metric.baseline_km)


def pace_trend(metric: PaceMetric) -> Trend:
    """
    IMPROVING iff the recent best is strictly faster than the all-time best.

    No recent run means DECLINING.
    """
    if metric.recent_best is None or metric.all_time_best is None:
        return Trend.DECLINING
    return Trend.IMPROVING if metric.recent_best < metric.all_time_best else Trend.DECLINING


def count_trend(metric: CountMetric) -> Trend:
    return evaluate(metric.this_month, metric.prev_month)
