"""Tests for mood entry API routes."""

import asyncio
import json
import time
from datetime import date
from unittest.mock import MagicMock, patch

import pytest

from mood.store import MoodStoreError
from mood.suggest import MoodSuggestion, RandomMoodSuggester


def _create(client, headers, **body):
    body.setdefault("mood", 3)
    return client.post("/api/mood/entries", headers=headers, json=body)


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok"}


def test_requires_auth(client):
    assert client.get("/api/mood/entries").status_code in (401, 403)


def test_rejects_bad_token(client):
    res = client.get("/api/mood/entries", headers={"Authorization": "Bearer not-a-jwt"})
    assert res.status_code == 401


def test_levels_and_tags(client):
    levels = client.get("/api/mood/levels").json()
    assert [lvl["level"] for lvl in levels] == [5, 4, 3, 2, 1]
    assert levels[0]["label"] == "Excellent"

    tags = client.get("/api/mood/tags").json()
    assert len(tags) == 12
    assert tags[0] == "Work"


def test_list_empty(client, auth_headers):
    res = client.get("/api/mood/entries", headers=auth_headers)
    assert res.status_code == 200
    assert res.json() == []


def test_create_entry(client, auth_headers):
    res = _create(client, auth_headers, mood=4, note=" Nice day ", tags=["work", "Sleep"])
    assert res.status_code == 201
    data = res.json()
    assert data["mood"] == 4
    assert data["note"] == "Nice day"
    assert data["tags"] == ["Work", "Sleep"]
    assert data["date"] == date.today().isoformat()
    assert data["updated_at"] is None


def test_create_validation(client, auth_headers):
    assert _create(client, auth_headers, mood=0).status_code == 422
    assert _create(client, auth_headers, mood=6).status_code == 422
    assert _create(client, auth_headers, tags=["Crypto"]).status_code == 422
    assert _create(client, auth_headers, note="x" * 501).status_code == 422


def test_create_and_list_newest_first(client, auth_headers):
    _create(client, auth_headers, mood=2)
    _create(client, auth_headers, mood=5)
    res = client.get("/api/mood/entries", headers=auth_headers)
    assert [e["mood"] for e in res.json()] == [5, 2]

    limited = client.get("/api/mood/entries?limit=1", headers=auth_headers)
    assert len(limited.json()) == 1


def test_get_update_delete(client, auth_headers):
    entry_id = _create(client, auth_headers, mood=2, tags=["Work"]).json()["id"]

    res = client.get(f"/api/mood/entries/{entry_id}", headers=auth_headers)
    assert res.status_code == 200
    assert res.json()["mood"] == 2

    res = client.patch(f"/api/mood/entries/{entry_id}", headers=auth_headers, json={"mood": 4, "note": "better"})
    assert res.status_code == 200
    data = res.json()
    assert data["mood"] == 4
    assert data["note"] == "better"
    assert data["tags"] == ["Work"]
    assert data["updated_at"] is not None

    assert client.delete(f"/api/mood/entries/{entry_id}", headers=auth_headers).status_code == 204
    assert client.get(f"/api/mood/entries/{entry_id}", headers=auth_headers).status_code == 404


def test_missing_entry(client, auth_headers):
    assert client.get("/api/mood/entries/nope", headers=auth_headers).status_code == 404
    assert client.patch("/api/mood/entries/nope", headers=auth_headers, json={"mood": 3}).status_code == 404
    assert client.delete("/api/mood/entries/nope", headers=auth_headers).status_code == 404


def test_update_validation(client, auth_headers):
    entry_id = _create(client, auth_headers).json()["id"]
    res = client.patch(f"/api/mood/entries/{entry_id}", headers=auth_headers, json={"mood": 9})
    assert res.status_code == 422


def test_clear(client, auth_headers):
    for mood in (1, 2, 3):
        _create(client, auth_headers, mood=mood)
    res = client.delete("/api/mood/entries", headers=auth_headers)
    assert res.json() == {"removed": 3}
    assert client.get("/api/mood/entries", headers=auth_headers).json() == []


def test_user_isolation(client, auth_headers, auth_headers_b):
    entry_id = _create(client, auth_headers, mood=5).json()["id"]

    assert client.get("/api/mood/entries", headers=auth_headers_b).json() == []
    assert client.get(f"/api/mood/entries/{entry_id}", headers=auth_headers_b).status_code == 404
    assert client.delete(f"/api/mood/entries/{entry_id}", headers=auth_headers_b).status_code == 404
    assert client.delete("/api/mood/entries", headers=auth_headers_b).json() == {"removed": 0}
    assert len(client.get("/api/mood/entries", headers=auth_headers).json()) == 1


def test_export(client, auth_headers):
    _create(client, auth_headers, mood=4, tags=["Family"])
    res = client.get("/api/mood/export", headers=auth_headers)
    assert res.status_code == 200
    assert f"mood-tracker-data-{date.today().isoformat()}.json" in res.headers["content-disposition"]
    data = json.loads(res.content)
    assert data["count"] == 1
    assert data["entries"][0]["tags"] == ["Family"]


def test_suggest(client, auth_headers):
    suggester = MagicMock()
    suggester.suggest.return_value = MoodSuggestion(mood=2, confidence=0.8123)
    with patch("web.routes.entries.get_suggester", return_value=suggester):
        res = client.post("/api/mood/suggest", headers=auth_headers)
    assert res.status_code == 200
    assert res.json() == {"mood": 2, "label": "Bad", "confidence": 0.81}
    # suggestion is not logged
    assert client.get("/api/mood/entries", headers=auth_headers).json() == []


def test_suggest_random_in_range(client, auth_headers):
    data = client.post("/api/mood/suggest", headers=auth_headers).json()
    assert 1 <= data["mood"] <= 5
    assert 0.7 <= data["confidence"] <= 1.0


@pytest.mark.asyncio
async def test_suggest_keeps_event_loop_responsive():
    from web.routes.entries import suggest_mood

    gaps = []
    done = asyncio.Event()

    async def ticker():
        last = time.monotonic()
        while not done.is_set():
            await asyncio.sleep(0.02)
            now = time.monotonic()
            gaps.append(now - last)
            last = now

    task = asyncio.create_task(ticker())
    with patch("web.routes.entries.get_suggester", return_value=RandomMoodSuggester(delay=0.4)):
        result = await suggest_mood(user={"id": "u1"})
    done.set()
    await task

    assert 1 <= result.mood <= 5
    assert len(gaps) >= 5
    assert max(gaps) < 0.2


def test_store_failure_is_503(client, auth_headers):
    with patch("web.deps.get_store", side_effect=MoodStoreError("init failed: disk I/O error")):
        assert client.get("/api/mood/entries", headers=auth_headers).status_code == 503
        assert client.get("/api/mood/export", headers=auth_headers).status_code == 503
