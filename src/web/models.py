"""Pydantic request/response schemas for the web API."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from mood.models import NOTE_MAX_CHARS, MoodEntry
from mood.store import normalize_tags

# --- Entries ---


class MoodEntryCreate(BaseModel):
    mood: int = Field(..., ge=1, le=5)
    note: str = Field("", max_length=NOTE_MAX_CHARS)
    tags: list[str] = Field(default_factory=list)

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str]) -> list[str]:
        return normalize_tags(v)


class MoodEntryUpdate(BaseModel):
    mood: Optional[int] = Field(None, ge=1, le=5)
    note: Optional[str] = Field(None, max_length=NOTE_MAX_CHARS)
    tags: Optional[list[str]] = None

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: Optional[list[str]]) -> Optional[list[str]]:
        return normalize_tags(v) if v is not None else None


class MoodEntryOut(BaseModel):
    id: str
    mood: Optional[int]
    date: date
    timestamp: datetime
    updated_at: Optional[datetime] = None
    note: str = ""
    tags: list[str] = []

    @classmethod
    def from_entry(cls, entry: MoodEntry) -> "MoodEntryOut":
        return cls(
            id=entry.id,
            mood=entry.mood,
            date=entry.date,
            timestamp=entry.timestamp,
            updated_at=entry.updated_at,
            note=entry.note,
            tags=list(entry.tags),
        )


class MoodLevelOut(BaseModel):
    level: int
    label: str
    emoji: str


class ClearResult(BaseModel):
    removed: int


class SuggestionOut(BaseModel):
    mood: int
    label: str
    confidence: float


# --- Analytics ---


class DaySlotOut(BaseModel):
    date: date
    weekday: str
    mood: Optional[int] = None
    has_entry: bool


class CalendarCellOut(BaseModel):
    date: date
    in_month: bool
    is_today: bool
    entry: Optional[MoodEntryOut] = None


class MonthGridOut(BaseModel):
    year: int
    month: int
    cells: list[CalendarCellOut]
    days_tracked: int
    average_mood: float
    good_days: int


class SeriesPointOut(BaseModel):
    date: date
    label: str
    mood: Optional[int] = None


class StatsOut(BaseModel):
    total_entries: int
    average_mood: float
    most_common_mood: int
    mood_counts: dict[int, int]
    good_day_ratio: float


class TagStatOut(BaseModel):
    tag: str
    count: int
    average_mood: float


class DashboardOut(BaseModel):
    week: list[DaySlotOut]
    stats: Optional[StatsOut] = None
    recent: list[MoodEntryOut]
