"""
Suggestion system for kniferoll.

Ranks previously-used prep items for the autocomplete by a blend of how
often and how recently they were used, skipping items the user dismissed
or already added to today's list.
"""

from kniferoll.core.suggestions.engine import SuggestionEngine
from kniferoll.core.suggestions.formatting import format_quantity_display
from kniferoll.core.suggestions.models import (
    Candidate,
    CurrentItem,
    RankedCandidate,
)
from kniferoll.core.suggestions.ranking import (
    calculate_recency_score,
    calculate_weighted_score,
    filter_by_query,
    is_already_listed,
    parse_calendar_date,
    rank_suggestions,
)
from kniferoll.core.suggestions.store import SuggestionStore

__all__ = [
    # Models
    "Candidate",
    "CurrentItem",
    "RankedCandidate",
    # Ranking
    "calculate_recency_score",
    "calculate_weighted_score",
    "filter_by_query",
    "is_already_listed",
    "parse_calendar_date",
    "rank_suggestions",
    # Formatting
    "format_quantity_display",
    # Storage
    "SuggestionStore",
    # Engine
    "SuggestionEngine",
]
