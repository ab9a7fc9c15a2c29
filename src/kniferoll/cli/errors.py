"""
Standardized error handling and exit codes for the kniferoll CLI.

Every command reports failures through print_error so messages share one
shape: the problem, optionally why it happened, optionally how to fix it.
"""

from enum import IntEnum

from rich.console import Console

console = Console(stderr=True)


class ExitCode(IntEnum):
    """Standard exit codes for kniferoll CLI operations."""

    SUCCESS = 0
    """Operation completed successfully."""

    GENERAL_ERROR = 1
    """Unexpected failure (storage, configuration)."""

    USER_ERROR = 2
    """Invalid input the user can correct."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it

    Example:
        >>> print_error(
        ...     "Cannot read suggestions",
        ...     reason="Permission denied",
        ...     solution="kniferoll suggest --store ./suggestions.jsonl",
        ... )
    """
    console.print(f"[red]Error:[/red] {problem}")

    if reason:
        console.print(f"[dim]{reason}[/dim]")

    if solution:
        console.print(f"[cyan]→ Try:[/cyan] {solution}")


def print_incompatible_flags_error(flag1: str, flag2: str) -> None:
    """Print error when incompatible CLI flags are used together."""
    print_error(
        f"Cannot use {flag1} with {flag2}",
        solution=f"Remove one of the flags: {flag1} or {flag2}",
    )


def print_invalid_date_error(value: str) -> None:
    """Print error when a date option is not YYYY-MM-DD."""
    print_error(
        f"Invalid date: {value}",
        reason="Dates must be calendar dates in YYYY-MM-DD form",
        solution="--today 2024-06-15",
    )


__all__ = [
    "ExitCode",
    "print_error",
    "print_incompatible_flags_error",
    "print_invalid_date_error",
]
