"""Dashboard command for sportfrei CLI."""

import time
from datetime import datetime
from pathlib import Path

import typer
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel

from ...dashboard import render_dashboard
from ...shared.config import get_dashboard_settings
from ...shared.models import DashboardSnapshot
from ..display import console
from ..source import load_data

# Three bordered panels of five text lines, plus slack for wrapping.
DASHBOARD_HEIGHT = 10


def draw(layout: Layout, snapshot: DashboardSnapshot, now: datetime, exact_month: bool) -> None:
    """Render one frame of the dashboard from a snapshot."""
    settings = get_dashboard_settings()
    render_dashboard(
        layout,
        snapshot.activities,
        snapshot.stats,
        snapshot.athlete,
        now,
        recent_days=settings.recent_days,
        exact_previous_month=exact_month,
    )


def live_screen(body: Layout) -> Layout:
    """Full-screen frame with a header, the dashboard body and a footer."""
    screen = Layout()
    screen.split_column(
        Layout(Panel("SportFrei - Dashboard"), name="header", size=3),
        body,
        Layout(Panel("[Ctrl+C] Quit"), name="footer", size=3),
    )
    return screen


def show_dashboard(
    file: Path | None = typer.Option(
        None, "--file", "-f", help="Render from a JSON snapshot instead of Strava"
    ),
    live: bool = typer.Option(False, "--live", "-l", help="Keep redrawing until Ctrl+C"),
    refresh: float | None = typer.Option(
        None, "--refresh", "-r", help="Redraw interval in seconds (with --live)"
    ),
    pages: int | None = typer.Option(None, "--pages", "-p", help="Activity pages to fetch"),
    legacy_month: bool = typer.Option(
        False, "--legacy-month", help="Treat 'last month' as the month 35 days ago"
    ),
) -> None:
    """
    Show distance, pace and monthly activity trends.

    Examples:
        sportfrei dashboard                   # Fetch from Strava and print once
        sportfrei dashboard --live            # Full-screen, redraws every second
        sportfrei dashboard -f snapshot.json  # Offline
    """
    settings = get_dashboard_settings()
    snapshot = load_data(file, pages)
    exact_month = settings.exact_previous_month and not legacy_month

    body = Layout(name="body")

    if not live:
        draw(body, snapshot, datetime.now(), exact_month)
        console.print(body, height=DASHBOARD_HEIGHT)
        return

    interval = refresh or settings.refresh_seconds
    draw(body, snapshot, datetime.now(), exact_month)

    try:
        with Live(live_screen(body), console=console, screen=True, auto_refresh=False) as display:
            while True:
                draw(body, snapshot, datetime.now(), exact_month)
                display.refresh()
                time.sleep(interval)
    except KeyboardInterrupt:
        pass
