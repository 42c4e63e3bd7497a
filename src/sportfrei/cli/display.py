"""Terminal output helpers for the sportfrei CLI."""

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..dashboard.metrics import format_pace
from ..shared.models import Activity

console = Console()

SPORT_COLORS = {
    "Run": "green",
    "Ride": "blue",
    "Swim": "cyan",
    "Hike": "yellow",
    "Walk": "yellow",
}


def display_error(message: str) -> None:
    console.print(f"[red]✗[/red] {message}")


def display_info(message: str) -> None:
    console.print(f"[dim]{message}[/dim]")


def display_success(message: str) -> None:
    console.print(f"[green]✓[/green] {message}")


def format_duration(seconds: int) -> str:
    """Format seconds as h:mm:ss."""
    return f"{seconds // 3600}:{(seconds % 3600) // 60:02d}:{seconds % 60:02d}"


def _optional(value: float | None) -> str:
    return f"{value:.0f}" if value is not None else "---"


def activities_table(activities: Sequence[Activity]) -> Table:
    """
    Build a table of activities, one row each.

    Args:
        activities: Activities in display order

    Returns:
        rich Table ready to print
    """
    table = Table(title=f"Activities ({len(activities)} total)")
    table.add_column("Date")
    table.add_column("Name", max_width=25, no_wrap=True)
    table.add_column("Type")
    table.add_column("Distance", justify="right", style="cyan")
    table.add_column("Elev", justify="right")
    table.add_column("Duration", justify="right", style="green")
    table.add_column("Pace", justify="right", style="yellow")
    table.add_column("HR", justify="right", style="red")
    table.add_column("Cal", justify="right")
    table.add_column("RelPerf", justify="right", style="magenta")

    for activity in activities:
        sport = activity.sport_type or activity.activity_type
        table.add_row(
            activity.start_date_local.strftime("%Y-%m-%d %H:%M"),
            activity.name,
            f"[{SPORT_COLORS.get(sport, 'magenta')}]{sport}[/]",
            f"{activity.distance_km:.1f}",
            f"{activity.total_elevation_gain:.0f}",
            format_duration(activity.moving_time),
            format_pace(activity.pace_seconds_per_km),
            _optional(activity.average_heartrate),
            _optional(activity.calories),
            _optional(activity.relative_performance),
        )

    return table


def activity_panel(activity: Activity) -> Panel:
    """Detail view of a single activity."""
    speed_kmh = (activity.average_speed or 0.0) * 3.6
    lines = [
        f"[bold]{escape(activity.name)}[/bold]",
        "",
        f"Type: {activity.sport_type or activity.activity_type}",
        f"Date: {activity.start_date_local:%Y-%m-%d %H:%M}",
        f"Distance: {activity.distance_km:.2f} km",
        f"Moving Time: {activity.moving_time // 3600}h {(activity.moving_time % 3600) // 60}m",
        f"Pace: {format_pace(activity.pace_seconds_per_km)} /km",
        f"Elevation Gain: {activity.total_elevation_gain:.0f} m",
        f"Average Speed: {speed_kmh:.2f} km/h",
        f"Average HR: {_optional(activity.average_heartrate)}",
    ]
    if activity.description:
        lines += ["", escape(activity.description)]

    return Panel("\n".join(lines), title=f"Activity {activity.id}", expand=False)
