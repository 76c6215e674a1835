"""Main wal-show command: render archived timelines."""

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from .. import __version__
from ..exceptions import InvalidConfigError, WalShowError
from ..formatters import OutputType, get_writer
from ..loader import load_timelines
from ..logging_config import setup_logging
from . import app
from ._common import console, resolve_config


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"wal-show {__version__}")
        raise typer.Exit()


@app.command()
def main(
    input_path: str = typer.Option(
        "-",
        "--input",
        "-i",
        help="JSON file with timeline records ('-' reads stdin)",
    ),
    detailed_json: bool = typer.Option(
        False,
        "--detailed-json",
        help="Output in machine-readable JSON format",
    ),
    output_type: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: table | json (unknown values render a table)",
    ),
    without_backups: bool = typer.Option(
        False,
        "--without-backups",
        help="Omit the backups count column",
    ),
    width: Optional[int] = typer.Option(
        None,
        "--width",
        help="Fixed table width in characters",
        min=20,
    ),
    indent: Optional[int] = typer.Option(
        None,
        "--indent",
        help="Pretty-print JSON with this indent",
        min=0,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    log_file: Optional[str] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """
    Render the timelines of a WAL archive.

    Reads the timeline records collected from the archive and prints them as
    a table, or as JSON for scripts.

    [bold cyan]Examples:[/bold cyan]

      wal-show --input timelines.json

      wal-show --input timelines.json --detailed-json

      cat timelines.json | wal-show --without-backups
    """
    try:
        settings = resolve_config(
            config=config,
            output_type=output_type,
            detailed_json=detailed_json,
            without_backups=without_backups,
            width=width,
            indent=indent,
            verbose=verbose,
            quiet=quiet,
            log_file=log_file,
        )
        try:
            logger = setup_logging(settings.verbosity, log_file=settings.log_file)
        except OSError as e:
            raise InvalidConfigError("log_file", settings.log_file, e.strerror or str(e)) from e

        source = sys.stdin if input_path == "-" else Path(input_path)
        timelines = load_timelines(source)

        resolved = OutputType.parse(settings.output_type)
        logger.debug("Rendering %d timelines as %s", len(timelines), resolved.name.lower())
        writer = get_writer(
            resolved,
            sys.stdout,
            settings.include_backups,
            width=settings.table_width,
            indent=settings.json_indent,
        )
        writer.write(timelines)
        if resolved is OutputType.JSON:
            sys.stdout.write("\n")

    except WalShowError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)
