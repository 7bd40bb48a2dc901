"""Date-keyed lookup over a mood entry snapshot."""

from datetime import date, datetime
from typing import Iterable, Optional, Union

from .models import MoodEntry

DateLike = Union[date, datetime, str]


def date_key(value: DateLike) -> str:
    """Normalize a date, datetime or ISO string to a YYYY-MM-DD key."""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    text = str(value).strip()
    # Validate instead of trusting the prefix blindly
    return date.fromisoformat(text[:10]).isoformat()


def valid_entries(entries: Iterable[MoodEntry]) -> list[MoodEntry]:
    """Drop entries whose mood is missing or outside 1..5, keeping order."""
    return [e for e in entries if e.is_valid]


def find_by_date(entries: Iterable[MoodEntry], day: DateLike) -> Optional[MoodEntry]:
    """First well-formed entry (in the given order) logged for ``day``."""
    key = date_key(day)
    return next((e for e in entries if e.is_valid and e.date.isoformat() == key), None)


def index_by_date(entries: Iterable[MoodEntry]) -> dict[str, MoodEntry]:
    """Map date key -> entry, keeping the first match like find_by_date."""
    index: dict[str, MoodEntry] = {}
    for entry in entries:
        if entry.is_valid:
            index.setdefault(entry.date.isoformat(), entry)
    return index
