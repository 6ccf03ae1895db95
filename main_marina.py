"""Mini README: Entry point CLI for the marina fleet manager.

This script exposes a Typer command that loads the fleet from a data file,
runs the interactive console, and writes the fleet back to the same file
when the operator exits. Settings are read from ``MARINA_`` environment
variables.
"""

from __future__ import annotations

from pathlib import Path

import typer

from marina.billing import BillingEngine
from marina.configuration import get_settings
from marina.fleet import FleetFileError
from marina.interface import MarinaConsole, printable
from marina.logging_utils import configure_root_logger, get_logger
from marina.persistence import FleetFile

LOGGER = get_logger(__name__)

cli = typer.Typer(help="Manage the marina's vessels from a flat data file.")


@cli.command()
def run(
    data_file: Path = typer.Argument(..., help="Data file holding one vessel per line."),
) -> None:
    """Load the fleet, run the console, and save on exit."""

    settings = get_settings()
    configure_root_logger(settings.log_level)

    fleet_file = FleetFile(
        data_file,
        capacity=settings.max_vessels,
        strict_ranges=settings.strict_location_ranges,
    )
    result = fleet_file.load()
    if not result.opened:
        typer.echo(f"Warning: Could not open {data_file} for reading.")
    for rejected in result.rejected:
        typer.echo(f"Skipped line {rejected.line_number}: {printable(str(rejected.error))}")
    if result.truncated:
        typer.echo(
            f"Warning: Only the first {settings.max_vessels} vessels in {data_file} were loaded."
        )

    console = MarinaConsole(
        result.store,
        BillingEngine(),
        strict_ranges=settings.strict_location_ranges,
    )
    console.run()

    try:
        fleet_file.save(result.store)
    except FleetFileError as error:
        typer.echo(str(error), err=True)
        raise typer.Exit(code=1) from error

    typer.echo("\nExiting Boat Management System")


if __name__ == "__main__":
    cli()
