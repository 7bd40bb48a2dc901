"""Weekly and monthly calendar projections of mood entries."""

import calendar as _calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Optional

from .lookup import index_by_date
from .models import GOOD_DAY_THRESHOLD, MoodEntry

WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


@dataclass(frozen=True)
class DaySlot:
    date: date
    weekday: str
    mood: Optional[int]
    has_entry: bool


@dataclass(frozen=True)
class CalendarCell:
    date: date
    in_month: bool
    is_today: bool
    entry: Optional[MoodEntry]

    @property
    def mood(self) -> Optional[int]:
        return self.entry.mood if self.entry else None


@dataclass(frozen=True)
class MonthGrid:
    """Sunday-start grid of whole weeks covering one month."""

    year: int
    month: int
    cells: tuple[CalendarCell, ...]

    @property
    def weeks(self) -> list[tuple[CalendarCell, ...]]:
        return [self.cells[i:i + 7] for i in range(0, len(self.cells), 7)]

    @property
    def month_entries(self) -> list[MoodEntry]:
        return [c.entry for c in self.cells if c.in_month and c.entry is not None]

    @property
    def days_tracked(self) -> int:
        return len(self.month_entries)

    @property
    def average_mood(self) -> float:
        """Mean mood over tracked days of the month, 0 when none."""
        entries = self.month_entries
        if not entries:
            return 0
        return sum(e.mood for e in entries) / len(entries)

    @property
    def good_days(self) -> int:
        return sum(1 for e in self.month_entries if e.mood >= GOOD_DAY_THRESHOLD)


def week_start(day: date) -> date:
    """Monday of the ISO week containing ``day``."""
    return day - timedelta(days=day.weekday())


def weekly_snapshot(entries: Iterable[MoodEntry], reference_date: date) -> list[DaySlot]:
    """Seven slots, Monday through Sunday, for the week of ``reference_date``."""
    index = index_by_date(entries)
    try:
        monday = week_start(reference_date)
        days = [monday + timedelta(days=offset) for offset in range(7)]
    except OverflowError:
        raise ValueError(f"week of {reference_date} runs past the supported date range")

    slots = []
    for offset, day in enumerate(days):
        entry = index.get(day.isoformat())
        slots.append(
            DaySlot(
                date=day,
                weekday=WEEKDAY_LABELS[offset],
                mood=entry.mood if entry else None,
                has_entry=entry is not None,
            )
        )
    return slots


def month_grid(
    entries: Iterable[MoodEntry],
    year: int,
    month: int,
    today: Optional[date] = None,
) -> MonthGrid:
    """Build the calendar grid for ``year``/``month``.

    Args:
        entries: Entry snapshot, in store order.
        year: Target year.
        month: Target month (1-12).
        today: Day to flag as today. Defaults to the wall-clock date.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1-12, got {month}")
    today = today or date.today()
    index = index_by_date(entries)

    first = date(year, month, 1)
    last = date(year, month, _calendar.monthrange(year, month)[1])
    # date.weekday(): Monday=0 .. Sunday=6
    try:
        start = first - timedelta(days=(first.weekday() + 1) % 7)
        end = last + timedelta(days=(5 - last.weekday()) % 7)
    except OverflowError:
        raise ValueError(f"grid for {year}-{month:02d} runs past the supported date range")

    cells = []
    day = start
    while day <= end:
        cells.append(
            CalendarCell(
                date=day,
                in_month=day.month == month and day.year == year,
                is_today=day == today,
                entry=index.get(day.isoformat()),
            )
        )
        day += timedelta(days=1)

    return MonthGrid(year=year, month=month, cells=tuple(cells))
