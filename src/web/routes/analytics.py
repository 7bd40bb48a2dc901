"""Mood analytics routes: weekly strip, calendar, trend, stats, tags."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from mood.calendar import month_grid, weekly_snapshot
from mood.series import rolling_series
from mood.stats import good_day_ratio, mood_distribution, overall_stats, recent_entries, tag_stats
from web.auth import get_current_user
from web.deps import get_config, open_store
from web.models import (
    CalendarCellOut,
    DashboardOut,
    DaySlotOut,
    MonthGridOut,
    MoodEntryOut,
    SeriesPointOut,
    StatsOut,
    TagStatOut,
)

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


def _snapshot(user_id: str):
    return open_store().snapshot(user_id)


def _stats_out(entries) -> StatsOut | None:
    summary = overall_stats(entries)
    if summary is None:
        return None
    return StatsOut(
        total_entries=summary.total_entries,
        average_mood=summary.average_mood,
        most_common_mood=summary.most_common_mood,
        mood_counts=summary.mood_counts,
        good_day_ratio=round(good_day_ratio(entries), 3),
    )


def _week_out(entries, reference: date) -> list[DaySlotOut]:
    try:
        slots = weekly_snapshot(entries, reference)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return [
        DaySlotOut(date=s.date, weekday=s.weekday, mood=s.mood, has_entry=s.has_entry)
        for s in slots
    ]


@router.get("/dashboard", response_model=DashboardOut)
async def dashboard(
    on: date | None = Query(None, alias="date"),
    user: dict = Depends(get_current_user),
):
    """This week's strip, overall stats and the latest few entries."""
    entries = _snapshot(user["id"])
    limit = get_config().analytics.recent_limit
    return DashboardOut(
        week=_week_out(entries, on or date.today()),
        stats=_stats_out(entries),
        recent=[MoodEntryOut.from_entry(e) for e in recent_entries(entries, limit=limit)],
    )


@router.get("/weekly", response_model=list[DaySlotOut])
async def weekly(
    on: date | None = Query(None, alias="date"),
    user: dict = Depends(get_current_user),
):
    return _week_out(_snapshot(user["id"]), on or date.today())


@router.get("/calendar", response_model=MonthGridOut)
async def calendar(
    year: int | None = Query(None, ge=1, le=9999),
    month: int | None = Query(None, ge=1, le=12),
    user: dict = Depends(get_current_user),
):
    today = date.today()
    entries = _snapshot(user["id"])
    try:
        grid = month_grid(entries, year or today.year, month or today.month, today=today)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return MonthGridOut(
        year=grid.year,
        month=grid.month,
        cells=[
            CalendarCellOut(
                date=c.date,
                in_month=c.in_month,
                is_today=c.is_today,
                entry=MoodEntryOut.from_entry(c.entry) if c.entry else None,
            )
            for c in grid.cells
        ],
        days_tracked=grid.days_tracked,
        average_mood=round(grid.average_mood, 1),
        good_days=grid.good_days,
    )


@router.get("/trend", response_model=list[SeriesPointOut])
async def trend(
    days: int | None = Query(None, ge=1, le=366),
    end: date | None = None,
    user: dict = Depends(get_current_user),
):
    days = days or get_config().analytics.trend_days
    entries = _snapshot(user["id"])
    try:
        points = rolling_series(entries, end or date.today(), days=days)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return [SeriesPointOut(date=p.date, label=p.label, mood=p.mood) for p in points]


@router.get("/stats", response_model=StatsOut | None)
async def stats(user: dict = Depends(get_current_user)):
    """Overall stats; null when nothing is logged yet."""
    return _stats_out(_snapshot(user["id"]))


@router.get("/tags", response_model=list[TagStatOut])
async def tags(
    limit: int | None = Query(None, ge=1),
    user: dict = Depends(get_current_user),
):
    limit = limit or get_config().analytics.top_tags
    return [
        TagStatOut(tag=t.tag, count=t.count, average_mood=round(t.average_mood, 2))
        for t in tag_stats(_snapshot(user["id"]), limit=limit)
    ]


@router.get("/distribution", response_model=dict[int, int])
async def distribution(user: dict = Depends(get_current_user)):
    """Count per mood level 1-5, zero-filled."""
    return mood_distribution(_snapshot(user["id"]))
