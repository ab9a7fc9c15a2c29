"""
Tests for the JSON-lines suggestion store.

Covers loading candidates, tolerating bad lines, and the record-a-use upsert.
"""

import json
from datetime import datetime, timezone

import pytest

from kniferoll.core.suggestions.ranking import rank_suggestions
from kniferoll.core.suggestions.store import SuggestionStore

NOW = datetime(2024, 6, 15, 18, 30, tzinfo=timezone.utc)


@pytest.fixture
def store(tmp_path):
    return SuggestionStore(tmp_path / "data" / "suggestions.jsonl")


class TestListCandidates:
    """Test SuggestionStore.list_candidates()."""

    def test_missing_file_is_empty(self, store):
        assert store.list_candidates() == []

    def test_reads_records_in_order(self, store_file):
        store = SuggestionStore(store_file)

        candidates = store.list_candidates()

        assert [c.id for c in candidates] == ["c-1", "c-2", "c-3", "c-4"]
        assert candidates[0].description == "Carrots"
        assert candidates[3].last_used is None

    def test_skips_malformed_lines(self, tmp_path, caplog):
        path = tmp_path / "suggestions.jsonl"
        path.write_text(
            '{"id": "ok-1", "description": "Leeks"}\n'
            "not json\n"
            "\n"
            '{"description": "missing id"}\n'
            '{"id": "ok-2", "description": "Fennel"}\n'
        )

        with caplog.at_level("WARNING"):
            candidates = SuggestionStore(path).list_candidates()

        assert [c.id for c in candidates] == ["ok-1", "ok-2"]
        assert "Skipping malformed suggestion" in caplog.text


class TestFindByDescription:
    """Test SuggestionStore.find_by_description()."""

    def test_case_insensitive(self, store_file):
        store = SuggestionStore(store_file)

        found = store.find_by_description("  SHALLOTS ")

        assert found is not None
        assert found.id == "c-3"

    def test_not_found(self, store_file):
        assert SuggestionStore(store_file).find_by_description("Fennel") is None


class TestRecordUse:
    """Test SuggestionStore.record_use()."""

    def test_creates_new_candidate(self, store):
        candidate = store.record_use(
            "  Brunoise shallots ", unit_id="qt", quantity=2, kitchen_id="k-1", now=NOW
        )

        assert candidate.description == "Brunoise shallots"
        assert candidate.use_count == 1
        assert candidate.last_used == NOW.isoformat()
        assert candidate.created_at == NOW.isoformat()
        assert candidate.default_unit_id == "qt"
        assert candidate.last_quantity_used == 2
        assert candidate.kitchen_id == "k-1"
        assert store.path.exists()

    def test_persists_as_jsonl(self, store):
        store.record_use("Leeks", now=NOW)
        store.record_use("Fennel", now=NOW)

        lines = store.path.read_text().splitlines()

        assert len(lines) == 2
        assert json.loads(lines[0])["description"] == "Leeks"
        assert json.loads(lines[1])["description"] == "Fennel"

    def test_increments_existing_case_insensitive(self, store_file):
        store = SuggestionStore(store_file)

        updated = store.record_use("carrots", unit_id="lbs", quantity=5, now=NOW)

        assert updated.id == "c-1"
        assert updated.description == "Carrots"
        assert updated.use_count == 11
        assert updated.last_used == NOW.isoformat()
        assert updated.default_unit_id == "lbs"
        assert updated.last_quantity_used == 5
        assert len(store.list_candidates()) == 4
        assert store.find_by_description("Carrots").use_count == 11

    def test_null_count_treated_as_one(self, tmp_path):
        path = tmp_path / "s.jsonl"
        path.write_text('{"id": "x", "description": "Leeks", "use_count": null}\n')

        updated = SuggestionStore(path).record_use("Leeks", now=NOW)

        assert updated.use_count == 2

    def test_zero_quantity_stored_as_none(self, store):
        candidate = store.record_use("Leeks", quantity=0, unit_id="", now=NOW)

        assert candidate.last_quantity_used is None
        assert candidate.default_unit_id is None

    def test_blank_description_rejected(self, store):
        with pytest.raises(ValueError, match="description cannot be empty"):
            store.record_use("   ")

    def test_defaults_to_current_time(self, store):
        candidate = store.record_use("Leeks")

        assert candidate.last_used is not None
        assert datetime.fromisoformat(candidate.last_used).tzinfo is not None

    def test_recorded_use_ranks_as_today(self, store):
        """A freshly recorded item scores as used today."""
        now = datetime.now(timezone.utc)
        store.record_use("Leeks", now=now)

        ranked = rank_suggestions(store.list_candidates(), set(), [], None)

        assert ranked[0].recency_score == 1.0
