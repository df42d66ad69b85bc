"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import ScheduleConfig, get_default_config_path
from ..domain.exceptions import AvailabilityError

app = typer.Typer(
    name="slotavailability",
    help="Compute free periods and bookable sessions from availability and bookings",
    add_completion=False
)

console = Console()


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
):
    """
    Compute free periods and bookable sessions.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def _load_config(config_file: Optional[Path]) -> ScheduleConfig:
    config_path = config_file or get_default_config_path()
    return ScheduleConfig.load_from_yaml(config_path)


@app.command()
def periods(
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./availability.yaml")] = None,
):
    """
    Show the free periods left after removing booked time.

    Examples:

        slotavailability periods
        slotavailability periods --config week.yaml
    """
    try:
        config = _load_config(config_file)
        availability = config.build_availability()
        free_periods = availability.periods()

        console.print()
        if not free_periods:
            console.print("[yellow]⚠ No free periods left.[/yellow]\n")
            return

        table = Table(
            title=f"Free periods ({config.timezone})",
            show_header=True,
            header_style="bold cyan"
        )
        table.add_column("Start", style="bold yellow")
        table.add_column("End")
        table.add_column("Minutes", justify="right", style="dim")

        for period in free_periods:
            table.add_row(
                period.start.to_datetime_string(),
                period.end.to_datetime_string(),
                str(period.duration_minutes())
            )

        console.print(table)
        console.print()

    except FileNotFoundError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    except (AvailabilityError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def sessions(
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./availability.yaml")] = None,
    interval: Annotated[Optional[str], typer.Option("--interval", "-i", help="Session length, e.g. '15 minutes'")] = None,
):
    """
    List bookable session start times.

    Examples:

        slotavailability sessions
        slotavailability sessions --interval "30 minutes"
    """
    try:
        config = _load_config(config_file)
        availability = config.build_availability()
        session_interval = interval or config.defaults.session_interval
        starts = availability.sessions(session_interval)

        console.print()
        if not starts:
            console.print(
                f"[yellow]⚠ No sessions of {session_interval} available.[/yellow]\n"
                "Try a shorter interval."
            )
            return

        console.print(f"[bold green]✓ {len(starts)} session(s) of {session_interval}:[/bold green]\n")
        for start in starts:
            console.print(f"  {start.to_datetime_string()}")
        console.print()

    except FileNotFoundError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    except (AvailabilityError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]slotavailability[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
