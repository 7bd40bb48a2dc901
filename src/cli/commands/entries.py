"""Mood entry CLI commands: log, suggest, list, edit, delete, clear."""

import sys

import click
from rich.console import Console
from rich.table import Table

from cli.utils import get_components, mood_cell, parse_date_option, parse_tags_option
from mood.models import MOOD_LEVELS, MOOD_TAGS, NOTE_MAX_CHARS, mood_label

console = Console()

MOOD_CHOICE = click.IntRange(1, 5)


def _check_note(note: str | None) -> None:
    if note and len(note) > NOTE_MAX_CHARS:
        raise click.BadParameter(f"Note is limited to {NOTE_MAX_CHARS} characters ({len(note)} given)")


@click.command()
@click.argument("mood", type=MOOD_CHOICE)
@click.option("-n", "--note", default="", help="Optional note (max 500 chars)")
@click.option("-t", "--tags", help=f"Comma-separated tags: {', '.join(MOOD_TAGS)}")
@click.option("-d", "--date", "on", help="Backfill a past day (YYYY-MM-DD)")
def log(mood: int, note: str, tags: str, on: str):
    """Log how you feel today (1 = terrible, 5 = excellent)."""
    _check_note(note)
    c = get_components()
    entry_date = parse_date_option(on) if on else None

    try:
        entry = c["store"].create(
            c["user_id"],
            mood=mood,
            note=note,
            tags=parse_tags_option(tags),
            entry_date=entry_date,
        )
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    console.print(
        f"[green]Logged[/] {mood_cell(entry.mood)} {mood_label(entry.mood)} for {entry.date.isoformat()}"
        f" [dim]({entry.id})[/]"
    )


@click.command()
@click.option("--save", is_flag=True, help="Log the suggested mood right away")
def suggest(save: bool):
    """Suggest a mood level (placeholder analysis, not real detection)."""
    c = get_components()
    with console.status("Analyzing..."):
        suggestion = c["suggester"].suggest()

    info = MOOD_LEVELS[suggestion.mood]
    console.print(
        f"Suggested: {mood_cell(suggestion.mood)} [bold]{info.label}[/] "
        f"({suggestion.mood}/5, {suggestion.confidence:.0%} confidence)"
    )
    if save:
        entry = c["store"].create(c["user_id"], mood=suggestion.mood)
        console.print(f"[green]Logged[/] {entry.id}")


@click.group()
def entries():
    """Browse and manage logged mood entries."""
    pass


@entries.command("list")
@click.option("-n", "--limit", default=10, help="Max entries to show")
def entries_list(limit: int):
    """Show recent entries, newest first."""
    c = get_components()
    rows = c["store"].list_entries(c["user_id"], limit=limit)

    if not rows:
        console.print("[yellow]No mood entries yet. Log one with: moodtrack log 4[/]")
        return

    table = Table(show_header=True, title="Recent Entries")
    table.add_column("ID", style="dim")
    table.add_column("Date")
    table.add_column("Mood")
    table.add_column("Tags")
    table.add_column("Note", max_width=40)

    for entry in rows:
        table.add_row(
            entry.id,
            entry.timestamp.strftime("%b %d, %H:%M"),
            f"{mood_cell(entry.mood)} {mood_label(entry.mood)}",
            ", ".join(entry.tags),
            entry.note[:40],
        )

    console.print(table)


@entries.command("edit")
@click.argument("entry_id")
@click.option("-m", "--mood", type=MOOD_CHOICE, help="New mood level")
@click.option("-n", "--note", help="Replace note")
@click.option("-t", "--tags", help="Replace tags (comma-separated, empty string clears)")
def entries_edit(entry_id: str, mood: int | None, note: str | None, tags: str | None):
    """Edit an entry's mood, note or tags."""
    _check_note(note)
    if mood is None and note is None and tags is None:
        console.print("[yellow]Nothing to change.[/]")
        return

    c = get_components()
    try:
        entry = c["store"].update(
            c["user_id"],
            entry_id,
            mood=mood,
            note=note,
            tags=parse_tags_option(tags) if tags is not None else None,
        )
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    if entry is None:
        console.print(f"[red]Not found:[/] {entry_id}")
        return
    console.print(f"[green]Updated:[/] {entry.id} {mood_cell(entry.mood)} {mood_label(entry.mood)}")


@entries.command("delete")
@click.argument("entry_id")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
def entries_delete(entry_id: str, yes: bool):
    """Delete one entry."""
    c = get_components()
    if not yes and not click.confirm(f"Delete {entry_id}?"):
        return

    if c["store"].delete(c["user_id"], entry_id):
        console.print(f"[green]Deleted:[/] {entry_id}")
    else:
        console.print(f"[red]Not found:[/] {entry_id}")


@entries.command("clear")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
def entries_clear(yes: bool):
    """Delete ALL of your mood entries. Cannot be undone."""
    c = get_components()
    if not yes and not click.confirm("Delete all mood entries? This cannot be undone."):
        return
    removed = c["store"].clear(c["user_id"])
    console.print(f"[green]Removed {removed} entries.[/]")
