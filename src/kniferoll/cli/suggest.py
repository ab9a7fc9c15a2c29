"""
Kniferoll CLI - Suggest command.

Show ranked prep-item suggestions for today's list.
"""

import json as json_module
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from kniferoll.cli.errors import (
    ExitCode,
    print_error,
    print_incompatible_flags_error,
    print_invalid_date_error,
)
from kniferoll.core.services.suggestions import SuggestionService, SuggestionServiceError
from kniferoll.core.suggestions.formatting import format_quantity_display
from kniferoll.core.suggestions.models import RankedCandidate
from kniferoll.core.suggestions.ranking import parse_calendar_date
from kniferoll.utils.dates import format_to_date_string, get_today_local_date, to_local_date

app = typer.Typer(
    name="suggest",
    help="Show ranked prep-item suggestions",
    no_args_is_help=False,
)

console = Console()


def _format_score(score: float) -> str:
    if score >= 0.6:
        return f"[green]{score:.2f}[/green]"
    if score >= 0.3:
        return f"[yellow]{score:.2f}[/yellow]"
    return f"[dim]{score:.2f}[/dim]"


def _format_last_used(suggestion: RankedCandidate) -> str:
    if not suggestion.last_used:
        return "[dim]never[/dim]"
    # Same local calendar day the recency score was computed from
    used_on = parse_calendar_date(suggestion.last_used)
    if used_on is None:
        return f"[dim]{escape(suggestion.last_used)}[/dim]"
    return format_to_date_string(used_on)


@app.callback(invoke_without_command=True)
def suggest(
    ctx: typer.Context,
    current: list[str] | None = typer.Option(
        None,
        "--current",
        "-c",
        help="Item already on today's list (repeatable)",
    ),
    dismiss: list[str] | None = typer.Option(
        None,
        "--dismiss",
        "-d",
        help="Suggestion id to hide (repeatable)",
    ),
    query: str | None = typer.Option(
        None,
        "--query",
        "-q",
        help="Partial item name to autocomplete",
    ),
    limit: int | None = typer.Option(
        None,
        "--limit",
        "-n",
        min=1,
        help="Maximum number of suggestions to show (default from config)",
    ),
    show_all: bool = typer.Option(
        False,
        "--all",
        help="Show every qualifying suggestion",
    ),
    today: str | None = typer.Option(
        None,
        "--today",
        help="Rank as of this date (YYYY-MM-DD, default: local today)",
    ),
    store: Path | None = typer.Option(
        None,
        "--store",
        help="Suggestions file (default from config)",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output suggestions as JSON",
    ),
) -> None:
    """
    Show ranked suggestions for today's prep list.

    Items are ranked by how recently and how often they were used. Items
    already on the list and dismissed suggestions are left out.

    Examples:
        kniferoll suggest                        # Top suggestions
        kniferoll suggest -c Carrots -c Onions   # Skip items already listed
        kniferoll suggest -q sha                 # Autocomplete "sha..."
        kniferoll suggest --all --json           # Everything, as JSON
    """
    debug = (ctx.obj or {}).get("debug", False)

    if limit is not None and show_all:
        print_incompatible_flags_error("--limit", "--all")
        raise typer.Exit(ExitCode.USER_ERROR)

    as_of = None
    if today:
        try:
            as_of = to_local_date(today)
        except ValueError:
            print_invalid_date_error(today)
            raise typer.Exit(ExitCode.USER_ERROR)

    try:
        service = SuggestionService.from_project_dir(store_path=store)
        suggestions = service.get_suggestions(
            current_items=current or [],
            dismissed_ids=dismiss or [],
            query=query,
            limit=limit,
            today=as_of,
            show_all=show_all,
        )
    except SuggestionServiceError as e:
        print_error("Cannot load suggestions", reason=str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)
    except Exception as e:
        print_error(str(e))
        if debug:
            import traceback

            console.print(traceback.format_exc())
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    if json_output:
        payload = {
            "date": format_to_date_string(as_of) if as_of else get_today_local_date(),
            "query": query,
            "total_suggestions": len(suggestions),
            "suggestions": [s.model_dump(mode="json", by_alias=True) for s in suggestions],
        }
        typer.echo(json_module.dumps(payload, indent=2))
        raise typer.Exit(ExitCode.SUCCESS)

    if not suggestions:
        if query:
            console.print(f"[yellow]No suggestions match '{query}'[/yellow]")
        else:
            console.print("[yellow]No suggestions yet. Record items to build history.[/yellow]")
        raise typer.Exit(ExitCode.SUCCESS)

    table = Table(show_header=True, title="Suggestions")
    table.add_column("#", style="dim", width=3)
    table.add_column("Item", style="bold")
    table.add_column("Last qty")
    table.add_column("Uses", justify="right")
    table.add_column("Last used")
    table.add_column("Score", justify="right")
    table.add_column("ID", style="dim")

    for idx, suggestion in enumerate(suggestions, start=1):
        table.add_row(
            str(idx),
            suggestion.description or "",
            format_quantity_display(suggestion.last_quantity_used, suggestion.default_unit_id),
            str(suggestion.use_count or 0),
            _format_last_used(suggestion),
            _format_score(suggestion.weighted_score),
            suggestion.id,
        )

    console.print(table)
    raise typer.Exit(ExitCode.SUCCESS)


__all__ = ["app"]
