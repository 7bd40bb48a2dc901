"""Mood statistics CLI commands."""

import click
from rich.console import Console
from rich.table import Table

from cli.utils import get_components, mood_cell
from mood.models import MOOD_LEVELS, mood_label
from mood.stats import good_day_ratio, mood_distribution, overall_stats, tag_stats

console = Console()


@click.command()
def stats():
    """Overall mood statistics and distribution."""
    c = get_components()
    entries = c["store"].snapshot(c["user_id"])
    summary = overall_stats(entries)

    if summary is None:
        console.print("[yellow]No data yet. Start tracking your moods to see insights.[/]")
        return

    console.print(f"[bold]Average mood:[/] {summary.average_mood}")
    console.print(f"[bold]Total entries:[/] {summary.total_entries}")
    console.print(
        f"[bold]Most common:[/] {mood_cell(summary.most_common_mood)} {mood_label(summary.most_common_mood)}"
    )
    console.print(f"[bold]Good days:[/] {good_day_ratio(entries):.0%}")

    table = Table(show_header=True, title="Mood Distribution")
    table.add_column("Level")
    table.add_column("Count", justify="right")
    table.add_column("", min_width=10)

    dist = mood_distribution(entries)
    for level in sorted(dist, reverse=True):
        info = MOOD_LEVELS[level]
        table.add_row(f"{info.emoji} {info.label}", str(dist[level]), f"[{info.color}]{'█' * dist[level]}[/]")

    console.print(table)


@click.command()
@click.option("-n", "--limit", type=click.IntRange(1, None), help="Max tags (default from config)")
def tags(limit: int | None):
    """Average mood per tag, most used tags first."""
    c = get_components()
    limit = limit or c["config"].analytics.top_tags
    rows = tag_stats(c["store"].snapshot(c["user_id"]), limit=limit)

    if not rows:
        console.print("[yellow]No tagged entries yet. Add tags with: moodtrack log 4 -t Work,Sleep[/]")
        return

    table = Table(show_header=True, title="Mood by Factors")
    table.add_column("Tag")
    table.add_column("Entries", justify="right")
    table.add_column("Avg", justify="right")

    for row in rows:
        table.add_row(row.tag, str(row.count), f"{row.average_mood:.1f}")

    console.print(table)
