"""Mood entry CRUD routes wrapping src/mood/store.py (per-user)."""

import asyncio

import structlog
from fastapi import APIRouter, Depends, HTTPException, Response, status

from mood.models import MOOD_LEVELS, MOOD_TAGS
from web.auth import get_current_user
from web.deps import get_exporter, get_suggester, open_store
from web.models import (
    ClearResult,
    MoodEntryCreate,
    MoodEntryOut,
    MoodEntryUpdate,
    MoodLevelOut,
    SuggestionOut,
)

logger = structlog.get_logger()

router = APIRouter(prefix="/api/mood", tags=["mood"])


@router.get("/levels", response_model=list[MoodLevelOut])
async def list_levels():
    return [
        MoodLevelOut(level=info.level, label=info.label, emoji=info.emoji)
        for info in sorted(MOOD_LEVELS.values(), key=lambda i: i.level, reverse=True)
    ]


@router.get("/tags", response_model=list[str])
async def list_tags():
    return list(MOOD_TAGS)


@router.get("/entries", response_model=list[MoodEntryOut])
async def list_entries(
    limit: int | None = None,
    user: dict = Depends(get_current_user),
):
    entries = open_store().list_entries(user["id"], limit=limit)
    return [MoodEntryOut.from_entry(e) for e in entries]


@router.post("/entries", response_model=MoodEntryOut, status_code=status.HTTP_201_CREATED)
async def create_entry(
    body: MoodEntryCreate,
    user: dict = Depends(get_current_user),
):
    try:
        entry = open_store().create(user["id"], mood=body.mood, note=body.note, tags=body.tags)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return MoodEntryOut.from_entry(entry)


@router.delete("/entries", response_model=ClearResult)
async def clear_entries(user: dict = Depends(get_current_user)):
    """Delete every entry for the current user."""
    removed = open_store().clear(user["id"])
    return ClearResult(removed=removed)


@router.get("/entries/{entry_id}", response_model=MoodEntryOut)
async def get_entry(entry_id: str, user: dict = Depends(get_current_user)):
    entry = open_store().get(user["id"], entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Entry not found")
    return MoodEntryOut.from_entry(entry)


@router.patch("/entries/{entry_id}", response_model=MoodEntryOut)
async def update_entry(
    entry_id: str,
    body: MoodEntryUpdate,
    user: dict = Depends(get_current_user),
):
    try:
        entry = open_store().update(
            user["id"],
            entry_id,
            mood=body.mood,
            note=body.note,
            tags=body.tags,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if entry is None:
        raise HTTPException(status_code=404, detail="Entry not found")
    return MoodEntryOut.from_entry(entry)


@router.delete("/entries/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(entry_id: str, user: dict = Depends(get_current_user)):
    if not open_store().delete(user["id"], entry_id):
        raise HTTPException(status_code=404, detail="Entry not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/export")
async def export_entries(user: dict = Depends(get_current_user)):
    """Download all entries as a JSON file."""
    exporter = get_exporter()
    body = exporter.to_json(user["id"])
    filename = exporter.default_filename("json")
    logger.info("mood.exported", user_id=user["id"])
    return Response(
        content=body,
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/suggest", response_model=SuggestionOut)
async def suggest_mood(user: dict = Depends(get_current_user)):
    """Placeholder mood suggestion; not real expression analysis."""
    suggestion = await asyncio.to_thread(get_suggester().suggest)
    return SuggestionOut(
        mood=suggestion.mood,
        label=MOOD_LEVELS[suggestion.mood].label,
        confidence=round(suggestion.confidence, 2),
    )
