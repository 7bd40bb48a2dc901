"""Shared test fixtures for moodtrack."""

import sys
from datetime import date, datetime, time
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def make_entry():
    """Factory for MoodEntry values without touching a store."""
    from mood.models import MoodEntry

    counter = {"n": 0}

    def _make(mood, day, tags=(), note="", user_id="user-1", entry_id=None, hour=9):
        counter["n"] += 1
        if isinstance(day, str):
            day = date.fromisoformat(day)
        return MoodEntry(
            id=entry_id or f"e{counter['n']}",
            user_id=user_id,
            mood=mood,
            date=day,
            timestamp=datetime.combine(day, time(hour, 0)),
            note=note,
            tags=tuple(tags),
        )

    return _make


@pytest.fixture
def sample_entries(make_entry):
    """A small January 2024 history, newest first like the store returns it."""
    return [
        make_entry(4, "2024-01-10", tags=["Work", "Sleep"], note="Productive day"),
        make_entry(2, "2024-01-09", tags=["Stress", "Work"]),
        make_entry(5, "2024-01-08", tags=["Exercise", "Social"]),
        make_entry(3, "2024-01-03", tags=["Work"]),
        make_entry(5, "2024-01-01", tags=["Family"]),
    ]


@pytest.fixture
def store(tmp_path):
    """Fresh SQLite-backed MoodStore."""
    from mood.store import MoodStore

    return MoodStore(tmp_path / "mood.db")


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Config pointing every path into tmp_path, picked up via MOODTRACK_CONFIG."""
    import yaml

    cfg = {
        "user_id": "cli-user",
        "paths": {
            "db_path": str(tmp_path / "mood.db"),
            "log_file": str(tmp_path / "moodtrack.log"),
            "export_dir": str(tmp_path / "exports"),
        },
        "logging": {"level": "WARNING"},
    }
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(cfg))
    monkeypatch.setenv("MOODTRACK_CONFIG", str(path))
    return path
