"""
Suggestion engine for kniferoll.

Holds the per-session state around the ranker: the candidates loaded for a
station and shift, the items already on today's list, and the suggestions
the user dismissed. The displayed list is recomputed from the full ranking
so a dismissal pulls the next-best suggestion into view.
"""

import logging
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any

from kniferoll.core.suggestions.models import Candidate, CurrentItem, RankedCandidate
from kniferoll.core.suggestions.ranking import (
    DEFAULT_MAX_USE_COUNT,
    filter_by_query,
    is_already_listed,
    rank_suggestions,
)

logger = logging.getLogger(__name__)


class SuggestionEngine:
    """Ranks candidates for one prep-list view and tracks dismissals.

    Example:
        >>> engine = SuggestionEngine(candidates, current_items=["Carrots"], top_n=3)
        >>> engine.displayed
        [...]
        >>> engine.dismiss("s-1")
        >>> engine.search("onion")
    """

    def __init__(
        self,
        candidates: Iterable[Candidate | Mapping[str, Any]],
        *,
        current_items: Iterable[CurrentItem | Mapping[str, Any] | str] = (),
        top_n: int | None = 3,
        max_use_count: int = DEFAULT_MAX_USE_COUNT,
        today: date | None = None,
    ) -> None:
        """Initialize engine.

        Args:
            candidates: Candidates loaded for this view
            current_items: Items already on today's list
            top_n: Number of suggestions to display (None = all)
            max_use_count: Minimum frequency ceiling for scoring
            today: Reference date for recency (defaults to local today)
        """
        self.candidates = list(candidates)
        self.top_n = top_n
        self.max_use_count = max_use_count
        self.today = today
        self.dismissed_ids: set[str] = set()
        self.current_items: list[CurrentItem | Mapping[str, Any] | str] = list(current_items)

        self.master: list[RankedCandidate] = []
        self.all_ranked: list[RankedCandidate] = []
        self._rerank()

    @property
    def displayed(self) -> list[RankedCandidate]:
        """Top suggestions after removing dismissals and current items.

        Filters the existing ranking instead of re-scoring, so dismissing
        one suggestion never reorders the rest.
        """
        visible = [
            s
            for s in self.all_ranked
            if s.id not in self.dismissed_ids
            and not is_already_listed(s.description, self.current_items)
        ]
        return visible[: self.top_n]

    def dismiss(self, candidate_id: str) -> None:
        """Hide a suggestion for the rest of this session."""
        self.dismissed_ids.add(candidate_id)
        logger.debug("Dismissed suggestion %s", candidate_id)

    def clear_dismissals(self) -> None:
        """Bring back every dismissed suggestion."""
        self.dismissed_ids.clear()

    def set_current_items(
        self, current_items: Iterable[CurrentItem | Mapping[str, Any] | str]
    ) -> None:
        """Replace the items already on today's list and re-rank."""
        self.current_items = list(current_items)
        self._rerank()

    def search(self, query: str, limit: int | None = None) -> list[RankedCandidate]:
        """Autocomplete lookup over every candidate, current items included.

        Args:
            query: Partial description typed by the user
            limit: Maximum matches to return (None = all)

        Returns:
            Matching candidates in ranked order
        """
        matches = filter_by_query(self.master, query)
        if limit is not None:
            return matches[:limit]
        return matches

    def _rerank(self) -> None:
        self.master = rank_suggestions(
            self.candidates,
            (),
            (),
            None,
            max_use_count=self.max_use_count,
            today=self.today,
        )
        self.all_ranked = rank_suggestions(
            self.candidates,
            (),
            self.current_items,
            None,
            max_use_count=self.max_use_count,
            today=self.today,
        )
