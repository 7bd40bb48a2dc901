"""Init CLI command."""

from pathlib import Path

import click
from rich.console import Console

from cli.config import load_config, write_default_config
from mood.store import MoodStore

console = Console()


@click.command()
@click.option(
    "-c",
    "--config-path",
    default="~/.moodtrack/config.yaml",
    type=click.Path(),
    help="Where to write the config file",
)
def init(config_path: str):
    """Create the config file and database."""
    path = Path(config_path).expanduser()
    if path.exists():
        console.print(f"[dim]Config exists:[/] {path}")
    else:
        write_default_config(path)
        console.print(f"[green]✓[/] Created config: {path}")

    config = load_config(path)
    config.paths.export_dir.mkdir(parents=True, exist_ok=True)
    MoodStore(config.paths.db_path)
    console.print(f"[green]✓[/] Database: {config.paths.db_path}")
    console.print(f"[green]✓[/] Exports: {config.paths.export_dir}")

    console.print("\n[bold]Ready![/] Log your first mood with: moodtrack log 4")
