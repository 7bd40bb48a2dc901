"""Shared CLI utilities."""

import sys
from datetime import date

import click
import structlog
from rich.console import Console

console = Console()
logger = structlog.get_logger()


def get_components() -> dict:
    """Initialize store, exporter and suggester from config."""
    from cli.config import load_config
    from mood.export import MoodExporter
    from mood.store import MoodStore, MoodStoreError
    from mood.suggest import create_suggester

    try:
        config = load_config()
    except ValueError as e:
        console.print(f"[red]Config error:[/] {e}")
        sys.exit(1)

    try:
        store = MoodStore(config.paths.db_path)
    except MoodStoreError as e:
        console.print(f"[red]Database error:[/] {e}")
        sys.exit(1)

    return {
        "config": config,
        "user_id": config.user_id,
        "store": store,
        "exporter": MoodExporter(store),
        "suggester": create_suggester(
            config.suggester.provider, delay=config.suggester.delay_seconds
        ),
    }


def parse_date_option(value: str | None) -> date:
    """Parse a YYYY-MM-DD option, defaulting to today."""
    if not value:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"Expected YYYY-MM-DD, got {value!r}")


def parse_tags_option(value: str | None) -> list[str]:
    return [t.strip() for t in value.split(",") if t.strip()] if value else []


def mood_cell(mood: int | None) -> str:
    """Rich markup for one mood value, or a dim placeholder."""
    from mood.models import MOOD_LEVELS

    info = MOOD_LEVELS.get(mood) if mood is not None else None
    if info is None:
        return "[dim]·[/]"
    return f"[{info.color}]{info.emoji}[/]"
