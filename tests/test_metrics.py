from datetime import datetime

import pytest

from conftest import NOW, days_ago, make_activity
from sportfrei.dashboard.metrics import (
    compute_distance,
    compute_monthly_count,
    compute_pace,
    format_pace,
)
from sportfrei.shared.models import AthleteStats


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (326, "5:26"),
        (60, "1:00"),
        (59, "0:59"),
        (1, "0:01"),
        (5999, "99:59"),
        (326.9, "5:26"),
        (0, "--:--"),
        (None, "--:--"),
    ],
)
def test_format_pace(seconds, expected):
    assert format_pace(seconds) == expected


def test_distance_sums_recent_rides():
    activities = [
        make_activity(days_ago(1), distance_km=5.0, activity_type="Ride"),
        make_activity(days_ago(10), distance_km=10.0, activity_type="Ride"),
        make_activity(days_ago(45), distance_km=80.0, activity_type="Ride"),
        make_activity(days_ago(2), distance_km=12.0, activity_type="Run"),
    ]
    stats = AthleteStats(biggest_ride_distance=120_000.0)

    metric = compute_distance(activities, stats, NOW)

    assert metric.recent_km == pytest.approx(15.0)
    assert metric.all_time_km == pytest.approx(120.0)
    assert metric.baseline_km == pytest.approx(10.0)


def test_distance_without_stats():
    activities = [make_activity(days_ago(1), distance_km=5.0, activity_type="Ride")]

    metric = compute_distance(activities, None, NOW)

    assert metric.all_time_km == 0.0
    assert metric.baseline_km == 0.0
    assert metric.recent_km == pytest.approx(5.0)


def test_distance_counts_ride_in_either_field():
    activities = [
        make_activity(days_ago(1), distance_km=7.0, activity_type="Ride", sport_type="Other"),
    ]

    metric = compute_distance(activities, None, NOW)

    assert metric.recent_km == pytest.approx(7.0)


def test_distance_missing_biggest_ride():
    metric = compute_distance([], AthleteStats(), NOW)

    assert metric.all_time_km == 0.0
    assert metric.recent_km == 0.0


def test_pace_best_all_time_and_recent():
    activities = [
        make_activity(days_ago(2), distance_km=10.0, moving_time=3000),
        make_activity(days_ago(5), distance_km=5.0, moving_time=1600),
        make_activity(days_ago(90), distance_km=10.0, moving_time=2800),
    ]

    metric = compute_pace(activities, NOW)

    assert metric.all_time_best == pytest.approx(280.0)
    assert metric.recent_best == pytest.approx(300.0)
    assert metric.all_time_display == "4:40"
    assert metric.recent_display == "5:00"


def test_pace_no_runs():
    activities = [make_activity(days_ago(1), activity_type="Ride")]

    metric = compute_pace(activities, NOW)

    assert metric.all_time_best is None
    assert metric.recent_best is None
    assert metric.all_time_display == "--:--"
    assert metric.recent_display == "--:--"


def test_pace_ignores_zero_distance_runs():
    activities = [
        make_activity(days_ago(1), distance_km=0.0, moving_time=600),
        make_activity(days_ago(50), distance_km=5.0, moving_time=1500),
    ]

    metric = compute_pace(activities, NOW)

    assert metric.all_time_best == pytest.approx(300.0)
    assert metric.recent_best is None


def test_monthly_count_all_sports():
    activities = [
        make_activity(datetime(2025, 3, 1), activity_type="Run"),
        make_activity(datetime(2025, 3, 19), activity_type="Ride"),
        make_activity(datetime(2025, 3, 19), activity_type="Yoga"),
        make_activity(datetime(2025, 2, 10), activity_type="Swim"),
        make_activity(datetime(2025, 1, 10), activity_type="Run"),
    ]

    metric = compute_monthly_count(activities, NOW)

    assert metric.this_month == 3
    assert metric.prev_month == 1


def test_monthly_count_legacy_previous_month():
    now = datetime(2025, 3, 3, 9, 0)
    activities = [
        make_activity(datetime(2025, 2, 10)),
        make_activity(datetime(2025, 1, 20)),
        make_activity(datetime(2025, 1, 21)),
    ]

    assert compute_monthly_count(activities, now).prev_month == 1
    assert compute_monthly_count(activities, now, exact=False).prev_month == 2


def test_monthly_count_empty():
    metric = compute_monthly_count([], NOW)

    assert metric.this_month == 0
    assert metric.prev_month == 0
