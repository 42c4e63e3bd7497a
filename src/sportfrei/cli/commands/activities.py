"""Activity listing commands for sportfrei CLI."""

from pathlib import Path

import typer

from ..display import activities_table, activity_panel, console, display_info
from ..source import find_activity, load_data


def list_activities(
    file: Path | None = typer.Option(
        None, "--file", "-f", help="Read from a JSON snapshot instead of Strava"
    ),
    limit: int = typer.Option(20, "--limit", "-n", help="Number of activities to show", min=1),
    pages: int | None = typer.Option(None, "--pages", "-p", help="Activity pages to fetch"),
) -> None:
    """
    List recent activities, newest first.

    Examples:
        sportfrei activities            # Last 20 activities
        sportfrei activities -n 50      # Last 50
    """
    snapshot = load_data(file, pages)

    if not snapshot.activities:
        display_info("No activities found")
        return

    newest = sorted(snapshot.activities, key=lambda a: a.start_date_local, reverse=True)
    console.print(activities_table(newest[:limit]))


def show_activity(
    activity_id: int = typer.Argument(..., help="Strava activity ID"),
    file: Path | None = typer.Option(
        None, "--file", "-f", help="Look up in a JSON snapshot instead of Strava"
    ),
) -> None:
    """
    Show details of a single activity.

    Examples:
        sportfrei activity 123456789
        sportfrei activity 123456789 -f snapshot.json
    """
    console.print(activity_panel(find_activity(file, activity_id)))
