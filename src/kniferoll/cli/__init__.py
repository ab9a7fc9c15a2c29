"""
Kniferoll CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

import logging

import typer
from rich.console import Console

from kniferoll import __version__
from kniferoll.cli import record, suggest
from kniferoll.core.config.env import load_layered_env

# Create the main Typer app
app = typer.Typer(
    name="kniferoll",
    help="Prep-list item suggestions ranked by recency and frequency",
    no_args_is_help=True,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
) -> None:
    """
    Kniferoll - prep-list suggestions.

    Quick Start:
        kniferoll record "Brunoise shallots" -q 2 -u qt   # Build history
        kniferoll suggest                                 # See what to prep
        kniferoll suggest -q sha                          # Autocomplete
    """
    # Precedence: OS env > project .env > user .env
    load_layered_env()

    if debug:
        logging.basicConfig(level=logging.DEBUG)

    ctx.obj = {"debug": debug}


app.add_typer(suggest.app, name="suggest")
app.command(name="record")(record.record)


@app.command()
def version() -> None:
    """Show kniferoll version and exit."""
    console.print(f"kniferoll version {__version__}")
    raise typer.Exit(0)


def cli_main() -> None:
    """Main CLI entry point."""
    app()


__all__ = ["app", "cli_main"]
