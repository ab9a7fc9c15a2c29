"""
Pytest configuration and shared fixtures.

Provides a pinned "today", sample candidate records, suggestion files and
an isolated project directory so no test reads the real user config.
"""

import json
from datetime import date
from pathlib import Path
from typing import Any

import pytest

# ==============================================================================
# Environment Isolation
# ==============================================================================


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point XDG config at a temp dir and clear KNIFEROLL_* overrides."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    for name in (
        "KNIFEROLL_SUGGESTION_LIMIT",
        "KNIFEROLL_MAX_USE_COUNT",
        "KNIFEROLL_STORE_PATH",
    ):
        monkeypatch.delenv(name, raising=False)


# ==============================================================================
# Date Fixtures
# ==============================================================================


@pytest.fixture
def today() -> date:
    """A fixed reference date for recency scoring."""
    return date(2024, 6, 15)


# ==============================================================================
# Sample Data Fixtures
# ==============================================================================


@pytest.fixture
def sample_candidates() -> list[dict[str, Any]]:
    """
    Three candidates relative to 2024-06-15.

    - Carrots: used today, moderate count (score 0.68)
    - Onions: used 5 days ago, low count (score 0.34)
    - Tomatoes: used months ago, saturated count (score 0.52)
    """
    return [
        {"id": "1", "description": "Carrots", "use_count": 10, "last_used": "2024-06-15"},
        {"id": "2", "description": "Onions", "use_count": 5, "last_used": "2024-06-10"},
        {"id": "3", "description": "Tomatoes", "use_count": 50, "last_used": "2024-01-01"},
    ]


@pytest.fixture
def kitchen_candidates() -> list[dict[str, Any]]:
    """
    Four candidates with distinct scores relative to 2024-06-15.

    Ranked order: Carrots (0.68), Onions (0.64), Shallots (0.52), Chives (0.12).
    """
    return [
        {"id": "c-1", "description": "Carrots", "use_count": 10, "last_used": "2024-06-15"},
        {"id": "c-2", "description": "Onions", "use_count": 5, "last_used": "2024-06-15"},
        {"id": "c-3", "description": "Shallots", "use_count": 5, "last_used": "2024-06-14"},
        {"id": "c-4", "description": "Chives", "use_count": 0, "last_used": None},
    ]


def write_jsonl(path: Path, records: list[dict[str, Any]]) -> Path:
    """Write records to a JSON-lines file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(json.dumps(r) + "\n" for r in records))
    return path


# ==============================================================================
# Directory Fixtures
# ==============================================================================


@pytest.fixture
def project_dir(tmp_path) -> Path:
    """
    Provide a temporary project directory.

    Creates:
    - .kniferoll.json
    - .kniferoll/ data directory
    """
    project = tmp_path / "project"
    project.mkdir()
    (project / ".kniferoll").mkdir()
    (project / ".kniferoll.json").write_text(json.dumps({"suggestions": {"limit": 3}}))
    return project


@pytest.fixture
def store_file(project_dir, kitchen_candidates) -> Path:
    """Default suggestions file inside project_dir, seeded with kitchen_candidates."""
    return write_jsonl(project_dir / ".kniferoll" / "suggestions.jsonl", kitchen_candidates)
