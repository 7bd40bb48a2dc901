"""Mood entry data model and the static level/tag tables."""

import json
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Optional

from shared_types import MoodLevel, MoodTag

MIN_MOOD = MoodLevel.TERRIBLE.value
MAX_MOOD = MoodLevel.EXCELLENT.value
GOOD_DAY_THRESHOLD = MoodLevel.GOOD.value
NOTE_MAX_CHARS = 500

MOOD_TAGS: tuple[str, ...] = tuple(t.value for t in MoodTag)


@dataclass(frozen=True)
class MoodLevelInfo:
    level: int
    label: str
    emoji: str
    color: str  # rich color name


MOOD_LEVELS: dict[int, MoodLevelInfo] = {
    5: MoodLevelInfo(5, "Excellent", "😄", "bright_green"),
    4: MoodLevelInfo(4, "Good", "😊", "green"),
    3: MoodLevelInfo(3, "Okay", "😐", "yellow"),
    2: MoodLevelInfo(2, "Bad", "😔", "red"),
    1: MoodLevelInfo(1, "Terrible", "😢", "bright_red"),
}


def is_valid_mood(value: Any) -> bool:
    """True for an int (not bool) within 1..5."""
    return isinstance(value, int) and not isinstance(value, bool) and MIN_MOOD <= value <= MAX_MOOD


def mood_label(value: Optional[int]) -> str:
    info = MOOD_LEVELS.get(value) if value is not None else None
    return info.label if info else "No entry"


def _parse_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _parse_datetime(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def _parse_tags(value: Any) -> tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        value = json.loads(value) if value.startswith("[") else value.split(",")
    seen: dict[str, None] = {}
    for tag in value:
        tag = str(tag).strip()
        if tag:
            seen.setdefault(tag, None)
    return tuple(seen)


@dataclass(frozen=True)
class MoodEntry:
    """One user-submitted mood record.

    ``mood`` is kept as given so malformed records can still be carried
    through a snapshot; analytics skip them via ``is_valid``.
    """

    id: str
    user_id: str
    mood: Optional[int]
    date: date
    timestamp: datetime
    note: str = ""
    tags: tuple[str, ...] = field(default_factory=tuple)
    updated_at: Optional[datetime] = None

    @property
    def is_valid(self) -> bool:
        return is_valid_mood(self.mood)

    @property
    def is_good_day(self) -> bool:
        return self.is_valid and self.mood >= GOOD_DAY_THRESHOLD

    @property
    def level(self) -> Optional[MoodLevelInfo]:
        return MOOD_LEVELS.get(self.mood) if self.is_valid else None

    @classmethod
    def from_dict(cls, data: dict) -> "MoodEntry":
        """Build an entry from a stored row or an exported dict.

        Accepts both snake_case and the camelCase keys of exported documents.
        """
        timestamp = _parse_datetime(data.get("timestamp"))
        entry_date = _parse_date(data.get("date"))
        if entry_date is None and timestamp is not None:
            entry_date = timestamp.date()
        if entry_date is None:
            raise ValueError(f"Mood entry {data.get('id')!r} has no date")

        mood = data.get("mood")
        if isinstance(mood, str) and mood.strip().isdigit():
            mood = int(mood)

        return cls(
            id=str(data.get("id", "")),
            user_id=str(data.get("user_id", data.get("userId", ""))),
            mood=mood,
            date=entry_date,
            timestamp=timestamp or datetime.combine(entry_date, datetime.min.time()),
            note=data.get("note") or "",
            tags=_parse_tags(data.get("tags")),
            updated_at=_parse_datetime(data.get("updated_at", data.get("updatedAt"))),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "mood": self.mood,
            "date": self.date.isoformat(),
            "timestamp": self.timestamp.isoformat(),
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
            "note": self.note,
            "tags": list(self.tags),
        }
