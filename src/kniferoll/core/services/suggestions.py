"""
Suggestion service: ranking and recording prep-item suggestions.

Wraps core/suggestions/ into a service that any interface (CLI, API, UI hook)
can call. Config and storage are passed in explicitly; the service keeps no
state between calls beyond those collaborators.

Usage:
    >>> from kniferoll.core.services.suggestions import SuggestionService
    >>> service = SuggestionService.from_project_dir(project_dir)
    >>> suggestions = service.get_suggestions(current_items=["Carrots"])
    >>> service.record_use("Onions", quantity=2, unit_id="u-qt")
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date
from pathlib import Path

from kniferoll.core.config.loader import load_config
from kniferoll.core.config.models import KnifeRollConfig
from kniferoll.core.suggestions.engine import SuggestionEngine
from kniferoll.core.suggestions.models import Candidate, RankedCandidate
from kniferoll.core.suggestions.store import SuggestionStore
from kniferoll.utils.project import get_project_root

logger = logging.getLogger(__name__)

# ============================================================================
# Typed exceptions
# ============================================================================


class SuggestionServiceError(Exception):
    """Base exception for SuggestionService errors."""


# ============================================================================
# SuggestionService
# ============================================================================


class SuggestionService:
    """
    Service for ranking and recording prep-item suggestions.

    Example:
        >>> service = SuggestionService(store, KnifeRollConfig())
        >>> for s in service.get_suggestions(limit=3):
        ...     print(f"{s.description}: {s.weighted_score:.2f}")
    """

    def __init__(self, store: SuggestionStore, config: KnifeRollConfig) -> None:
        """
        Initialize service with its collaborators.

        Args:
            store: Storage the candidates are read from and recorded to
            config: Loaded configuration
        """
        self.store = store
        self.config = config

    @classmethod
    def from_project_dir(
        cls,
        project_dir: Path | None = None,
        store_path: Path | None = None,
    ) -> SuggestionService:
        """
        Create service from a project directory.

        Args:
            project_dir: Project root directory (auto-detected if None)
            store_path: Explicit store file, overriding config

        Returns:
            Configured SuggestionService instance
        """
        if project_dir is None:
            project_dir = get_project_root()

        config = load_config(project_dir)
        if store_path is None:
            store_path = Path(config.store.path)
            if not store_path.is_absolute():
                store_path = project_dir / store_path

        logger.debug("Using suggestion store %s", store_path)
        return cls(SuggestionStore(store_path), config)

    # ============================================================================
    # Suggestion methods
    # ============================================================================

    def build_engine(
        self,
        current_items: Iterable[str] = (),
        dismissed_ids: Iterable[str] = (),
        limit: int | None = None,
        today: date | None = None,
        show_all: bool = False,
    ) -> SuggestionEngine:
        """
        Load candidates and build an engine for one prep-list view.

        Args:
            current_items: Descriptions already on today's list
            dismissed_ids: Suggestion ids to hide
            limit: Display limit (defaults to suggestions.limit from config)
            today: Reference date for recency
            show_all: Display every qualifying suggestion, ignoring limits

        Returns:
            SuggestionEngine with the dismissals applied

        Raises:
            SuggestionServiceError: If the store cannot be read
        """
        candidates = self._load_candidates()
        top_n = limit if limit is not None else self.config.suggestions.limit
        if show_all:
            top_n = None

        engine = SuggestionEngine(
            candidates,
            current_items=current_items,
            top_n=top_n,
            max_use_count=self.config.suggestions.max_use_count,
            today=today,
        )
        for candidate_id in dismissed_ids:
            engine.dismiss(candidate_id)
        return engine

    def get_suggestions(
        self,
        current_items: Iterable[str] = (),
        dismissed_ids: Iterable[str] = (),
        query: str | None = None,
        limit: int | None = None,
        today: date | None = None,
        show_all: bool = False,
    ) -> list[RankedCandidate]:
        """
        Get ranked suggestions for the current prep list.

        Without a query this is the displayed top-N list. With a query it is
        the autocomplete lookup, which searches every candidate (current
        items included) and is capped by suggestions.search_limit.

        Args:
            current_items: Descriptions already on today's list
            dismissed_ids: Suggestion ids to hide (ignored for queries)
            query: Partial description typed by the user
            limit: Maximum results (defaults from config)
            today: Reference date for recency
            show_all: Return every match, ignoring limits

        Returns:
            Ranked suggestions (highest score first)

        Raises:
            SuggestionServiceError: If the store cannot be read
        """
        engine = self.build_engine(current_items, dismissed_ids, limit, today, show_all)

        if query and query.strip():
            search_limit = limit if limit is not None else self.config.suggestions.search_limit
            if show_all:
                search_limit = None
            return engine.search(query, limit=search_limit)

        return engine.displayed

    def record_use(
        self,
        description: str,
        *,
        quantity: float | None = None,
        unit_id: str | None = None,
    ) -> Candidate:
        """
        Record that an item was added to a prep list.

        Raises:
            ValueError: If description is blank
            SuggestionServiceError: If the store cannot be written
        """
        try:
            return self.store.record_use(
                description,
                unit_id=unit_id,
                quantity=quantity,
                kitchen_id=self.config.store.kitchen_id,
            )
        except OSError as e:
            raise SuggestionServiceError(f"Failed to write {self.store.path}: {e}") from e

    def _load_candidates(self) -> list[Candidate]:
        try:
            return self.store.list_candidates()
        except OSError as e:
            raise SuggestionServiceError(f"Failed to read {self.store.path}: {e}") from e
