"""Mood calendar CLI commands: weekly strip, month grid, rolling trend."""

from datetime import date

import click
from rich.console import Console
from rich.table import Table

from cli.utils import get_components, mood_cell, parse_date_option
from mood.calendar import WEEKDAY_LABELS, month_grid, weekly_snapshot
from mood.models import mood_label
from mood.series import rolling_series

console = Console()

GRID_HEADER = ("Sun",) + WEEKDAY_LABELS[:-1]


@click.command()
@click.option("-d", "--date", "on", help="Any day in the week to show (YYYY-MM-DD)")
def week(on: str | None):
    """Show this week's moods, Monday to Sunday."""
    c = get_components()
    reference = parse_date_option(on)
    try:
        slots = weekly_snapshot(c["store"].snapshot(c["user_id"]), reference)
    except ValueError as e:
        raise click.BadParameter(str(e))

    table = Table(show_header=True, title=f"Week of {slots[0].date:%b %d, %Y}")
    for slot in slots:
        table.add_column(slot.weekday, justify="center")
    table.add_row(*(mood_cell(s.mood) for s in slots))
    table.add_row(*(f"[dim]{s.date.day}[/]" for s in slots))
    console.print(table)

    logged = sum(1 for s in slots if s.has_entry)
    console.print(f"\n[bold]Logged:[/] {logged}/7 days")


@click.command()
@click.option("-m", "--month", "month_str", help="Month to show (YYYY-MM), default current")
def calendar(month_str: str | None):
    """Show a month calendar with the mood logged each day."""
    today = date.today()
    if month_str:
        try:
            year, month = (int(p) for p in month_str.split("-"))
            date(year, month, 1)
        except ValueError:
            raise click.BadParameter(f"Expected YYYY-MM, got {month_str!r}")
    else:
        year, month = today.year, today.month

    c = get_components()
    try:
        grid = month_grid(c["store"].snapshot(c["user_id"]), year, month, today=today)
    except ValueError as e:
        raise click.BadParameter(str(e))

    table = Table(show_header=True, title=f"{date(year, month, 1):%B %Y}")
    for name in GRID_HEADER:
        table.add_column(name, justify="center")

    for week_cells in grid.weeks:
        row = []
        for cell in week_cells:
            day = f"[bold underline]{cell.date.day}[/]" if cell.is_today else str(cell.date.day)
            if not cell.in_month:
                row.append(f"[dim]{cell.date.day}[/]")
            else:
                row.append(f"{day} {mood_cell(cell.mood)}")
        table.add_row(*row)

    console.print(table)

    avg = f"{grid.average_mood:.1f}" if grid.days_tracked else "-"
    console.print(
        f"\n[bold]Days tracked:[/] {grid.days_tracked}  |  "
        f"[bold]Average:[/] {avg}  |  [bold]Good days:[/] {grid.good_days}"
    )


@click.command()
@click.option("-d", "--days", type=click.IntRange(1, 366), help="Days to show (default from config)")
@click.option("-e", "--end", help="Last day of the series (YYYY-MM-DD), default today")
def trend(days: int | None, end: str | None):
    """Show the day-by-day mood trend."""
    c = get_components()
    days = days or c["config"].analytics.trend_days
    try:
        points = rolling_series(c["store"].snapshot(c["user_id"]), parse_date_option(end), days=days)
    except ValueError as e:
        raise click.BadParameter(str(e))

    table = Table(show_header=True, title=f"Mood - last {days} days")
    table.add_column("Date", style="dim")
    table.add_column("Mood")
    table.add_column("Level", min_width=5)

    for point in points:
        bar = "█" * point.mood if point.mood else ""
        table.add_row(point.label, f"{mood_cell(point.mood)} {mood_label(point.mood)}", bar)

    console.print(table)

    logged = [p.mood for p in points if p.mood is not None]
    if logged:
        console.print(f"\n[bold]Average:[/] {sum(logged) / len(logged):.1f}  |  Entries: {len(logged)}")
    else:
        console.print("\n[yellow]No entries in this period.[/]")
