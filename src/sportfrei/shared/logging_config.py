"""Logging bootstrap for the SportFrei CLI."""

import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None) -> None:
    """
    Configure the root logger once.

    Args:
        level: Log level name. Falls back to the LOG_LEVEL environment
            variable, then WARNING so log lines don't tear the dashboard.
    """
    log_level = (level or os.environ.get("LOG_LEVEL", "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format=LOG_FORMAT,
    )
