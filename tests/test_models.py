import json
from datetime import datetime

import pytest
from pydantic import ValidationError

from conftest import strava_activity_json
from sportfrei.shared.models import Activity, AthleteStats, Sport, load_snapshot


def test_parse_strava_activity():
    activity = Activity.model_validate(strava_activity_json())

    assert activity.id == 123456789
    assert activity.activity_type == "Run"
    assert activity.moving_time == 1630
    assert activity.pr_count == 1
    assert activity.description == "Easy morning run"
    assert activity.distance_km == pytest.approx(5.0)


def test_start_date_local_keeps_wall_clock():
    activity = Activity.model_validate(strava_activity_json())

    assert activity.start_date_local == datetime(2025, 3, 18, 7, 30)
    assert activity.start_date_local.tzinfo is None


def test_either_sport_field_classifies():
    ride = Activity.model_validate(strava_activity_json(type="Ride", sport_type="Other"))
    run = Activity.model_validate(strava_activity_json(type="Workout", sport_type="Run"))
    other = Activity.model_validate(strava_activity_json(type="Swim", sport_type="Swim"))

    assert ride.is_ride and ride.sport is Sport.RIDE
    assert run.is_run and run.sport is Sport.RUN
    assert other.sport is Sport.OTHER


def test_pace_undefined_for_zero_distance():
    activity = Activity.model_validate(strava_activity_json(distance=0.0))

    assert activity.pace_seconds_per_km is None


def test_pace_seconds_per_km():
    activity = Activity.model_validate(strava_activity_json(distance=5000.0, moving_time=1630))

    assert activity.pace_seconds_per_km == pytest.approx(326.0)


def test_negative_distance_rejected():
    with pytest.raises(ValidationError):
        Activity.model_validate(strava_activity_json(distance=-1.0))


def test_activity_is_immutable():
    activity = Activity.model_validate(strava_activity_json())

    with pytest.raises(ValidationError):
        activity.distance = 1.0


def test_parse_athlete_stats():
    stats = AthleteStats.model_validate(
        {
            "biggest_ride_distance": 120500.0,
            "biggest_climb_elevation_gain": 850.0,
            "recent_run_totals": {
                "count": 10,
                "distance": 50000.0,
                "moving_time": 18000,
                "elapsed_time": 20000,
                "elevation_gain": 500.0,
            },
            "all_ride_totals": {
                "count": 50,
                "distance": 1000000.0,
                "moving_time": 144000,
                "elapsed_time": 150000,
                "elevation_gain": 10000.0,
            },
        }
    )

    assert stats.biggest_ride_distance == pytest.approx(120500.0)
    assert stats.recent_run_totals.count == 10
    assert stats.all_ride_totals.count == 50
    assert stats.ytd_run_totals.count == 0


def test_load_snapshot(tmp_path):
    path = tmp_path / "snapshot.json"
    path.write_text(
        json.dumps(
            {
                "athlete": {"id": 1, "firstname": "Jane", "lastname": "Roe"},
                "stats": {"biggest_ride_distance": 80000.0},
                "activities": [strava_activity_json(), strava_activity_json(id=2, type="Ride")],
            }
        )
    )

    snapshot = load_snapshot(path)

    assert snapshot.athlete is not None
    assert snapshot.athlete.firstname == "Jane"
    assert snapshot.stats is not None
    assert len(snapshot.activities) == 2
    assert snapshot.activities[1].is_ride


def test_load_snapshot_without_athlete(tmp_path):
    path = tmp_path / "empty.json"
    path.write_text("{}")

    snapshot = load_snapshot(path)

    assert snapshot.athlete is None
    assert snapshot.stats is None
    assert snapshot.activities == []


def test_relative_performance():
    activity = Activity.model_validate(
        strava_activity_json(distance=5000.0, average_speed=2.5, average_heartrate=160.0)
    )

    assert activity.relative_performance == pytest.approx(12.5)


@pytest.mark.parametrize(
    "overrides",
    [
        {"average_speed": None},
        {"average_speed": 0.0},
        {"average_heartrate": None},
        {"average_heartrate": 0.0},
    ],
)
def test_relative_performance_needs_speed_and_heartrate(overrides):
    activity = Activity.model_validate(strava_activity_json(**overrides))

    assert activity.relative_performance is None
