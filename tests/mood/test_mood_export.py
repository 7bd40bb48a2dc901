"""Tests for MoodExporter."""

import json
from datetime import date, datetime

from mood.export import MoodExporter


def _seed(store):
    store.create("u1", mood=5, note="Great run", tags=["Exercise"], now=datetime(2024, 1, 2, 7, 30))
    store.create("u1", mood=2, tags=["Work", "Stress"], now=datetime(2024, 1, 3, 22, 0))
    store.create("u2", mood=3, now=datetime(2024, 1, 3, 9, 0))


def test_default_filename():
    assert MoodExporter.default_filename(today=date(2024, 1, 5)) == "mood-tracker-data-2024-01-05.json"
    assert MoodExporter.default_filename("markdown", today=date(2024, 1, 5)) == "mood-tracker-data-2024-01-05.md"


def test_export_json(store, tmp_path):
    _seed(store)
    out = tmp_path / "nested" / "export.json"

    count = MoodExporter(store).export_json("u1", out)

    assert count == 2
    data = json.loads(out.read_text())
    assert data["count"] == 2
    assert [e["mood"] for e in data["entries"]] == [2, 5]
    assert data["entries"][1]["note"] == "Great run"
    assert data["entries"][0]["tags"] == ["Work", "Stress"]
    assert all(e["user_id"] == "u1" for e in data["entries"])


def test_json_entries_load_back(store):
    _seed(store)
    from mood.models import MoodEntry

    payload = json.loads(MoodExporter(store).to_json("u1"))
    restored = [MoodEntry.from_dict(e) for e in payload["entries"]]
    assert restored == store.list_entries("u1")


def test_export_markdown(store, tmp_path):
    _seed(store)
    out = tmp_path / "export.md"

    count = MoodExporter(store).export_markdown("u1", out)

    assert count == 2
    text = out.read_text()
    assert text.startswith("# Mood Export")
    assert "## 2024-01-03: Bad (2/5)" in text
    assert "## 2024-01-02: Excellent (5/5)" in text
    assert "**Tags:** Work, Stress" in text
    assert "Great run" in text
    assert text.index("2024-01-03") < text.index("2024-01-02")


def test_export_empty(store, tmp_path):
    out = tmp_path / "empty.json"
    assert MoodExporter(store).export_json("nobody", out) == 0
    assert json.loads(out.read_text())["entries"] == []
