"""Activity data model as returned by the Strava activities endpoint."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class Sport(str, Enum):
    """Sport classification used by the dashboard metrics."""

    RUN = "Run"
    RIDE = "Ride"
    OTHER = "Other"


class Activity(BaseModel):
    """
    Represents a single logged activity (run, ride, swim, ...).

    Strava reports the sport twice, in the legacy ``type`` field and in
    ``sport_type``. Either one matching is enough to classify the activity.
    """

    id: int = Field(description="Strava activity ID")
    name: str = Field(default="", description="Activity title")

    activity_type: str = Field(
        default="",
        description="Legacy sport field (e.g. 'Run', 'Ride')",
        alias="type",
    )
    sport_type: str = Field(default="", description="Sport field (e.g. 'Run', 'TrailRun')")

    # Timing
    start_date: datetime | None = Field(default=None, description="Start time (UTC)")
    start_date_local: datetime = Field(
        description="Start time in the athlete's local wall-clock time",
    )
    timezone: str | None = Field(default=None, description="Strava timezone label")

    # Core metrics
    distance: float = Field(default=0.0, description="Distance in meters", ge=0)
    moving_time: int = Field(default=0, description="Moving time in seconds", ge=0)
    elapsed_time: int = Field(default=0, description="Elapsed time in seconds", ge=0)
    total_elevation_gain: float = Field(default=0.0, description="Elevation gain in meters")

    # Optional performance metrics
    average_speed: float | None = Field(default=None, description="Average speed (m/s)")
    max_speed: float | None = Field(default=None, description="Max speed (m/s)")
    average_heartrate: float | None = Field(default=None, description="Average heart rate (bpm)")
    max_heartrate: float | None = Field(default=None, description="Max heart rate (bpm)")
    calories: float | None = Field(default=None, description="Calories burned")

    # Metadata
    description: str | None = None
    kudos_count: int | None = None
    comment_count: int | None = None
    achievement_count: int | None = None
    pr_count: int | None = None
    private: bool | None = None
    commute: bool | None = None
    manual: bool | None = None
    gear_id: str | None = None

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("start_date_local")
    @classmethod
    def drop_local_timezone(cls, value: datetime) -> datetime:
        """Strava marks local times with a bogus 'Z'; keep the wall clock only."""
        return value.replace(tzinfo=None)

    def _is(self, sport: Sport) -> bool:
        return sport.value in (self.activity_type, self.sport_type)

    @property
    def is_run(self) -> bool:
        return self._is(Sport.RUN)

    @property
    def is_ride(self) -> bool:
        return self._is(Sport.RIDE)

    @property
    def sport(self) -> Sport:
        """Dashboard classification; a Ride match wins over a Run match."""
        if self.is_ride:
            return Sport.RIDE
        if self.is_run:
            return Sport.RUN
        return Sport.OTHER

    @property
    def distance_km(self) -> float:
        return self.distance / 1000.0

    @property
    def pace_seconds_per_km(self) -> float | None:
        """Moving pace in seconds per km, or None for zero-distance activities."""
        if self.distance <= 0:
            return None
        return self.moving_time / self.distance_km

    @property
    def relative_performance(self) -> float | None:
        """Time at average speed per beat of average heart rate, or None without both."""
        if not self.average_speed or not self.average_heartrate:
            return None
        return (self.distance / self.average_speed) / self.average_heartrate
