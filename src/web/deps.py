"""Dependency injection for FastAPI routes."""

from functools import lru_cache
from pathlib import Path

from fastapi import HTTPException

from cli.config import load_config
from cli.config_models import MoodConfig
from mood.export import MoodExporter
from mood.store import MoodStore, MoodStoreError
from mood.suggest import MoodSuggester, create_suggester


@lru_cache
def get_config() -> MoodConfig:
    """Load shared config (./config.yaml or ~/.moodtrack/config.yaml)."""
    return load_config()


def get_db_path() -> Path:
    return get_config().paths.db_path


def get_store() -> MoodStore:
    return MoodStore(get_db_path())


def open_store() -> MoodStore:
    """Store for a route handler; database failures become a 503."""
    try:
        return get_store()
    except MoodStoreError as e:
        raise HTTPException(status_code=503, detail=str(e))


def get_exporter() -> MoodExporter:
    return MoodExporter(open_store())


def get_suggester() -> MoodSuggester:
    cfg = get_config().suggester
    return create_suggester(cfg.provider, delay=cfg.delay_seconds)
