"""Mood data export CLI command."""

from pathlib import Path

import click
from rich.console import Console

from cli.utils import get_components
from shared_types import ExportFormat

console = Console()


@click.command()
@click.option("-o", "--output", type=click.Path(), help="Output path (default: export dir from config)")
@click.option(
    "-f",
    "--format",
    "fmt",
    default=ExportFormat.JSON.value,
    type=click.Choice([f.value for f in ExportFormat]),
    help="Export format",
)
def export(output: str | None, fmt: str):
    """Export all your mood entries."""
    c = get_components()
    exporter = c["exporter"]
    output_path = Path(output) if output else c["config"].paths.export_dir / exporter.default_filename(fmt)

    with console.status("Exporting..."):
        if fmt == ExportFormat.MARKDOWN:
            count = exporter.export_markdown(c["user_id"], output_path)
        else:
            count = exporter.export_json(c["user_id"], output_path)

    console.print(f"[green]Exported {count} entries to {output_path}[/]")
