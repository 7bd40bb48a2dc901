"""Rolling day-by-day mood series for trend charts."""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Optional

from .lookup import index_by_date
from .models import MoodEntry

DEFAULT_TREND_DAYS = 30


@dataclass(frozen=True)
class SeriesPoint:
    date: date
    label: str
    mood: Optional[int]  # None = no entry that day


def day_label(day: date) -> str:
    """Short chart label, e.g. 'Jan 5'."""
    return f"{day:%b} {day.day}"


def rolling_series(
    entries: Iterable[MoodEntry],
    end_date: date,
    days: int = DEFAULT_TREND_DAYS,
) -> list[SeriesPoint]:
    """One point per day for ``days`` days ending at ``end_date``, oldest first."""
    if days < 1:
        raise ValueError(f"days must be >= 1, got {days}")
    index = index_by_date(entries)
    try:
        start = end_date - timedelta(days=days - 1)
    except OverflowError:
        raise ValueError(f"{days} days before {end_date} is outside the supported date range")

    points = []
    for offset in range(days):
        day = start + timedelta(days=offset)
        entry = index.get(day.isoformat())
        points.append(SeriesPoint(date=day, label=day_label(day), mood=entry.mood if entry else None))
    return points
