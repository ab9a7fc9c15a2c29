"""Utility modules for kniferoll."""

from .dates import format_to_date_string, get_today_local_date, to_local_date
from .project import find_project_root, get_project_root

__all__ = [
    "find_project_root",
    "format_to_date_string",
    "get_project_root",
    "get_today_local_date",
    "to_local_date",
]
