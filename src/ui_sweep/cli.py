"""Command-line interface for UI Sweep"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from . import __version__
from .api import sweep
from .config import load_config
from .exceptions import UISweepError
from .formatters import TextReportFormatter
from .logging_config import setup_logging

app = typer.Typer(
    name="ui-sweep",
    help="UI Sweep - find potentially unused frontend files",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


@app.command()
def main(
    root: Path = typer.Option(
        Path("."),
        "--root",
        "-C",
        help="Frontend project root (the directory holding src/)",
        file_okay=False,
        dir_okay=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress all but ERROR logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    List frontend files that look unused.

    Findings never change the exit status: the report is advisory.

    [bold cyan]Examples:[/bold cyan]

      ui-sweep

      ui-sweep -C ../frontend --verbose
    """
    if version:
        console.print(f"[bold cyan]UI Sweep[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    if verbose and quiet:
        console.print("[red]Error:[/red] --verbose and --quiet are mutually exclusive")
        raise typer.Exit(1)

    logger = setup_logging(verbose=verbose, quiet=quiet)

    try:
        config = load_config(project_root=root, verbose=verbose, quiet=quiet)
        # ui-sweep.toml may set the verbosity when no flag was given
        logger = setup_logging(
            verbose=config.verbosity == "verbose", quiet=config.verbosity == "quiet"
        )
        logger.debug(f"Loaded config: {config}")

        result = sweep(root, config=config)
        TextReportFormatter().render(result, console)

    except UISweepError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
