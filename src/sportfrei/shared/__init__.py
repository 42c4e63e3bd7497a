"""Shared models, configuration and Strava integration for SportFrei."""
