"""Tests for the record and version CLI commands."""

import json

from typer.testing import CliRunner

from kniferoll import __version__
from kniferoll.cli import app

runner = CliRunner()


class TestRecord:
    """Test kniferoll record."""

    def test_creates_store(self, project_dir, monkeypatch):
        monkeypatch.chdir(project_dir)

        result = runner.invoke(app, ["record", "Brunoise shallots", "-q", "2", "-u", "qt"])

        assert result.exit_code == 0, result.output
        assert "Recorded" in result.output
        assert "1 use" in result.output

        lines = (project_dir / ".kniferoll" / "suggestions.jsonl").read_text().splitlines()
        record = json.loads(lines[0])
        assert record["description"] == "Brunoise shallots"
        assert record["default_unit_id"] == "qt"
        assert record["last_quantity_used"] == 2.0

    def test_increments_existing(self, store_file, project_dir, monkeypatch):
        monkeypatch.chdir(project_dir)

        result = runner.invoke(app, ["record", "carrots"])

        assert result.exit_code == 0, result.output
        assert "11 uses" in result.output

    def test_recorded_item_is_suggested(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        store = tmp_path / "prep.jsonl"

        runner.invoke(app, ["record", "Leeks", "--store", str(store)])
        result = runner.invoke(app, ["suggest", "--json", "--store", str(store)])

        data = json.loads(result.output)
        assert data["suggestions"][0]["description"] == "Leeks"
        assert data["suggestions"][0]["recencyScore"] == 1.0

    def test_blank_description(self, project_dir, monkeypatch):
        monkeypatch.chdir(project_dir)

        result = runner.invoke(app, ["record", "   "])

        assert result.exit_code == 2
        assert "description cannot be empty" in result.output


class TestVersion:
    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.output
