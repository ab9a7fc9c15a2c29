"""
Suggestion storage backed by a JSON-lines file.

Each line holds one candidate record. The store is the local stand-in for
the hosted suggestions table: it lists candidates for ranking and records a
use whenever an item is added to a prep list.
"""

import json
import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError

from kniferoll.core.suggestions.models import Candidate

logger = logging.getLogger(__name__)


class SuggestionStore:
    """Read and write suggestion candidates in a JSONL file.

    Example:
        >>> store = SuggestionStore(Path(".kniferoll/suggestions.jsonl"))
        >>> store.record_use("Brunoise shallots", unit_id="u-qt", quantity=2)
        >>> candidates = store.list_candidates()
    """

    def __init__(self, path: Path) -> None:
        """Initialize store.

        Args:
            path: Path to the suggestions JSONL file (created on first write)
        """
        self.path = Path(path)

    def list_candidates(self) -> list[Candidate]:
        """Load every stored candidate.

        Malformed lines are skipped with a warning so one bad record does
        not hide the rest of the history.

        Returns:
            Candidates in file order (empty if the file doesn't exist)
        """
        if not self.path.exists():
            return []

        candidates: list[Candidate] = []
        with self.path.open("r", encoding="utf-8") as f:
            for line_no, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    candidates.append(Candidate.model_validate(json.loads(line)))
                except (json.JSONDecodeError, ValidationError) as e:
                    logger.warning("Skipping malformed suggestion at %s:%d: %s", self.path, line_no, e)
        return candidates

    def find_by_description(self, description: str) -> Candidate | None:
        """Find a candidate by case-insensitive description match."""
        needle = description.strip().casefold()
        for candidate in self.list_candidates():
            if candidate.normalized_description == needle:
                return candidate
        return None

    def record_use(
        self,
        description: str,
        *,
        unit_id: str | None = None,
        quantity: float | None = None,
        kitchen_id: str | None = None,
        now: datetime | None = None,
    ) -> Candidate:
        """Record that an item was added to a prep list.

        Increments the matching candidate's use_count and refreshes its
        last-used details, or creates a new candidate with a count of 1.

        Args:
            description: Item description as entered
            unit_id: Unit chosen for this use
            quantity: Quantity entered for this use (0 is stored as None)
            kitchen_id: Owning kitchen, for new records
            now: Timestamp of the use (defaults to current UTC time)

        Returns:
            The created or updated candidate

        Raises:
            ValueError: If description is blank
        """
        normalized = description.strip()
        if not normalized:
            raise ValueError("description cannot be empty")

        if now is None:
            now = datetime.now(timezone.utc)
        timestamp = now.isoformat()

        candidates = self.list_candidates()
        needle = normalized.casefold()

        updated: Candidate | None = None
        for index, candidate in enumerate(candidates):
            if candidate.normalized_description != needle:
                continue
            updated = candidate.model_copy(
                update={
                    "use_count": (candidate.use_count or 1) + 1,
                    "default_unit_id": unit_id or None,
                    "last_used": timestamp,
                    "last_quantity_used": quantity or None,
                }
            )
            candidates[index] = updated
            break

        if updated is None:
            updated = Candidate(
                id=str(uuid.uuid4()),
                description=normalized,
                kitchen_id=kitchen_id,
                default_unit_id=unit_id or None,
                use_count=1,
                last_used=timestamp,
                last_quantity_used=quantity or None,
                created_at=timestamp,
            )
            candidates.append(updated)
            logger.debug("Created suggestion %s for %r", updated.id, normalized)
        else:
            logger.debug("Incremented suggestion %s to %s uses", updated.id, updated.use_count)

        self._write_all(candidates)
        return updated

    def _write_all(self, candidates: list[Candidate]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            for candidate in candidates:
                json.dump(candidate.model_dump(mode="json"), f)
                f.write("\n")
