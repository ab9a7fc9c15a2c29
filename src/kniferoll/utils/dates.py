"""
Local calendar-date helpers.

Prep lists are keyed by the kitchen's local date, never the UTC date, so
every "today" here comes from the local clock.
"""

from datetime import date


def get_today_local_date() -> str:
    """Get today's date as YYYY-MM-DD in the local timezone."""
    return format_to_date_string(date.today())


def to_local_date(date_string: str) -> date:
    """
    Parse a YYYY-MM-DD string as a local calendar date.

    Raises:
        ValueError: If the string is not a valid calendar date
    """
    year, month, day = (int(part) for part in date_string.strip().split("-"))
    return date(year, month, day)


def format_to_date_string(value: date) -> str:
    """Format a date (or datetime) as YYYY-MM-DD."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
