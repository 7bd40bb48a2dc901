"""Overall mood statistics and per-tag correlation."""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from .lookup import valid_entries
from .models import MAX_MOOD, MIN_MOOD, MoodEntry

DEFAULT_TOP_TAGS = 8


@dataclass(frozen=True)
class MoodStats:
    total_entries: int
    average_mood: float
    most_common_mood: int
    mood_counts: dict[int, int] = field(default_factory=dict)


@dataclass(frozen=True)
class TagStat:
    tag: str
    count: int
    average_mood: float


def round_half_up(value: float | Decimal, places: int = 1) -> float:
    """Round half up (4.25 -> 4.3), not banker's rounding."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def most_common(counts: dict[int, int]) -> int:
    """Mood with the highest count.

    Scans keys in ascending order and lets a later key take a tie, so the
    higher mood wins: {2: 3, 4: 3} -> 4.
    """
    best = None
    for mood in sorted(counts):
        if best is None or counts[mood] >= counts[best]:
            best = mood
    if best is None:
        raise ValueError("most_common() of empty counts")
    return best


def overall_stats(entries: Iterable[MoodEntry]) -> Optional[MoodStats]:
    """Summary over all well-formed entries, or None when there are none."""
    entries = valid_entries(entries)
    if not entries:
        return None

    counts: dict[int, int] = {}
    for entry in entries:
        counts[entry.mood] = counts.get(entry.mood, 0) + 1

    total = sum(e.mood for e in entries)
    average = round_half_up(Decimal(total) / Decimal(len(entries)))

    return MoodStats(
        total_entries=len(entries),
        average_mood=average,
        most_common_mood=most_common(counts),
        mood_counts={mood: counts[mood] for mood in sorted(counts)},
    )


def mood_distribution(entries: Iterable[MoodEntry]) -> dict[int, int]:
    """Count per level 1..5, including levels never logged."""
    dist = {level: 0 for level in range(MIN_MOOD, MAX_MOOD + 1)}
    for entry in valid_entries(entries):
        dist[entry.mood] += 1
    return dist


def good_day_ratio(entries: Iterable[MoodEntry]) -> float:
    """Share of entries with mood >= 4; 0.0 for no entries."""
    entries = valid_entries(entries)
    if not entries:
        return 0.0
    return sum(1 for e in entries if e.is_good_day) / len(entries)


def recent_entries(entries: Iterable[MoodEntry], limit: int = 5) -> list[MoodEntry]:
    """First ``limit`` entries in snapshot order (newest first from the store)."""
    return list(entries)[:limit]


def tag_stats(entries: Iterable[MoodEntry], limit: int = DEFAULT_TOP_TAGS) -> list[TagStat]:
    """Per-tag entry count and average mood, most used first.

    An entry with several tags counts fully toward each of them. Ties in
    count keep first-seen order.
    """
    totals: dict[str, list[int]] = {}  # tag -> [count, mood_sum]
    for entry in valid_entries(entries):
        for tag in dict.fromkeys(entry.tags):
            bucket = totals.setdefault(tag, [0, 0])
            bucket[0] += 1
            bucket[1] += entry.mood

    ranked = sorted(totals.items(), key=lambda item: item[1][0], reverse=True)
    return [
        TagStat(tag=tag, count=count, average_mood=mood_sum / count)
        for tag, (count, mood_sum) in ranked[:limit]
    ]
