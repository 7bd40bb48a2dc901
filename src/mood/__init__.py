from .calendar import CalendarCell, DaySlot, MonthGrid, month_grid, weekly_snapshot
from .export import MoodExporter
from .lookup import date_key, find_by_date, index_by_date
from .models import MOOD_LEVELS, MOOD_TAGS, MoodEntry
from .series import SeriesPoint, rolling_series
from .stats import MoodStats, TagStat, good_day_ratio, overall_stats, tag_stats
from .store import MoodStore, MoodStoreError

__all__ = [
    "MoodEntry",
    "MOOD_LEVELS",
    "MOOD_TAGS",
    "MoodStore",
    "MoodStoreError",
    "MoodExporter",
    "find_by_date",
    "index_by_date",
    "date_key",
    "weekly_snapshot",
    "month_grid",
    "DaySlot",
    "CalendarCell",
    "MonthGrid",
    "rolling_series",
    "SeriesPoint",
    "overall_stats",
    "tag_stats",
    "good_day_ratio",
    "MoodStats",
    "TagStat",
]
