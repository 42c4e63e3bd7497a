"""Athlete profile and summary statistics models."""

from pydantic import BaseModel, Field


class Athlete(BaseModel):
    """Authenticated athlete profile (GET /athlete)."""

    id: int = Field(description="Strava athlete ID")
    username: str | None = None
    firstname: str = Field(default="", description="First name, used in the dashboard greeting")
    lastname: str = ""
    city: str | None = None
    country: str | None = None
    profile: str | None = Field(default=None, description="Profile picture URL")
    profile_medium: str | None = None

    model_config = {"frozen": True}


class ActivityTotals(BaseModel):
    """Aggregated totals for one sport over one period."""

    count: int = 0
    distance: float = Field(default=0.0, description="Total distance in meters")
    moving_time: int = Field(default=0, description="Total moving time in seconds")
    elapsed_time: int = Field(default=0, description="Total elapsed time in seconds")
    elevation_gain: float = Field(default=0.0, description="Total elevation gain in meters")

    model_config = {"frozen": True}


class AthleteStats(BaseModel):
    """
    Athlete summary statistics (GET /athletes/{id}/stats).

    ``biggest_ride_distance`` is the upstream all-time maximum and is used
    as-is; it is never recomputed from the local activity list.
    """

    biggest_ride_distance: float | None = Field(
        default=None,
        description="Longest ride ever recorded (meters)",
        ge=0,
    )
    biggest_climb_elevation_gain: float | None = Field(
        default=None,
        description="Biggest climb ever recorded (meters)",
    )

    recent_run_totals: ActivityTotals = Field(default_factory=ActivityTotals)
    recent_ride_totals: ActivityTotals = Field(default_factory=ActivityTotals)
    ytd_run_totals: ActivityTotals = Field(default_factory=ActivityTotals)
    ytd_ride_totals: ActivityTotals = Field(default_factory=ActivityTotals)
    all_run_totals: ActivityTotals = Field(default_factory=ActivityTotals)
    all_ride_totals: ActivityTotals = Field(default_factory=ActivityTotals)

    model_config = {"frozen": True}
