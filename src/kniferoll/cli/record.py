"""
Kniferoll CLI - Record command.

Record that an item was added to a prep list so it ranks higher next time.
"""

from pathlib import Path

import typer
from rich.console import Console

from kniferoll.cli.errors import ExitCode, print_error
from kniferoll.core.services.suggestions import SuggestionService, SuggestionServiceError
from kniferoll.core.suggestions.formatting import format_quantity_display

console = Console()


def record(
    description: str = typer.Argument(..., help="Item description, e.g. 'Brunoise shallots'"),
    quantity: float | None = typer.Option(
        None,
        "--quantity",
        "-q",
        help="Quantity prepped this time",
    ),
    unit: str | None = typer.Option(
        None,
        "--unit",
        "-u",
        help="Unit for the quantity (e.g. qt, lbs, 'shallow 9')",
    ),
    store: Path | None = typer.Option(
        None,
        "--store",
        help="Suggestions file (default from config)",
    ),
) -> None:
    """
    Record a use of a prep item.

    Matching is case-insensitive: recording "carrots" bumps an existing
    "Carrots" suggestion instead of creating a new one.

    Examples:
        kniferoll record "Brunoise shallots" -q 2 -u qt
        kniferoll record Carrots
    """
    try:
        service = SuggestionService.from_project_dir(store_path=store)
        candidate = service.record_use(description, quantity=quantity, unit_id=unit)
    except ValueError as e:
        print_error(str(e), solution='kniferoll record "Item name"')
        raise typer.Exit(ExitCode.USER_ERROR)
    except SuggestionServiceError as e:
        print_error("Cannot record item", reason=str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    uses = candidate.use_count or 0
    detail = format_quantity_display(candidate.last_quantity_used, candidate.default_unit_id)
    suffix = f" [dim]({detail})[/dim]" if detail else ""
    console.print(
        f"[green]Recorded[/green] {candidate.description}{suffix} "
        f"- {uses} use{'s' if uses != 1 else ''}"
    )


__all__ = ["record"]
