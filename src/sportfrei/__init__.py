"""SportFrei: a terminal dashboard for Strava activity history."""

__version__ = "0.1.0"
