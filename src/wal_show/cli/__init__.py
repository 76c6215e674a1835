"""CLI entry point, registers the wal-show command."""

import typer

app = typer.Typer(
    name="wal-show",
    help="Show the timeline history of a WAL archive",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import the command to register it
from .show import main as _main  # noqa: F401, E402
