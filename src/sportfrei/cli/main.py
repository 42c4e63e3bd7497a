"""Entry point for the sportfrei CLI."""

import typer

from .. import __version__
from ..shared.logging_config import setup_logging
from .commands.activities import list_activities, show_activity
from .commands.dashboard import show_dashboard
from .display import console

app = typer.Typer(
    name="sportfrei",
    help="Strava activity dashboard for the terminal.",
    no_args_is_help=True,
)

app.command("dashboard")(show_dashboard)
app.command("activities")(list_activities)
app.command("activity")(show_activity)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"sportfrei {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Strava activity dashboard for the terminal."""
    setup_logging("DEBUG" if verbose else None)


if __name__ == "__main__":
    app()
