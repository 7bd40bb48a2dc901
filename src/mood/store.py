"""SQLite-backed mood entry store with per-user change notifications."""

import json
import sqlite3
import threading
import uuid
from contextlib import contextmanager
from datetime import date, datetime
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional

import structlog

from db import wal_connect

from .models import MOOD_TAGS, MoodEntry, is_valid_mood

logger = structlog.get_logger()

Snapshot = tuple[MoodEntry, ...]
Listener = Callable[[Snapshot], None]


class MoodStoreError(Exception):
    """Raised when the underlying database fails."""


def normalize_tags(tags: Optional[Iterable[str]]) -> list[str]:
    """Validate against the tag vocabulary and drop duplicates, keeping order."""
    if not tags:
        return []
    by_lower = {t.lower(): t for t in MOOD_TAGS}
    result: list[str] = []
    for raw in tags:
        tag = by_lower.get(str(raw).strip().lower())
        if tag is None:
            raise ValueError(f"Unknown tag: {raw!r}. Must be one of {', '.join(MOOD_TAGS)}")
        if tag not in result:
            result.append(tag)
    return result


def _check_mood(mood) -> int:
    if not is_valid_mood(mood):
        raise ValueError(f"Mood must be an integer 1-5, got {mood!r}")
    return mood


class MoodStore:
    """SQLite persistence for mood entries, scoped by user id."""

    def __init__(self, db_path: str | Path):
        self.db_path = Path(db_path).expanduser()
        self._listeners: dict[str, list[Listener]] = {}
        self._lock = threading.Lock()
        self._init_db()

    @contextmanager
    def _connect(self, operation: str) -> Iterator[sqlite3.Connection]:
        try:
            conn = wal_connect(self.db_path, row_factory=True)
        except sqlite3.Error as e:
            logger.error("mood_store.connect_error", operation=operation, error=str(e))
            raise MoodStoreError(f"{operation} failed: {e}") from e
        try:
            with conn:
                yield conn
        except sqlite3.Error as e:
            logger.error("mood_store.db_error", operation=operation, error=str(e))
            raise MoodStoreError(f"{operation} failed: {e}") from e
        finally:
            conn.close()

    def _init_db(self):
        with self._connect("init") as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS mood_entries (
                    id TEXT PRIMARY KEY,
                    user_id TEXT NOT NULL,
                    mood INTEGER NOT NULL CHECK(mood BETWEEN 1 AND 5),
                    date TEXT NOT NULL,
                    timestamp TEXT NOT NULL,
                    updated_at TEXT,
                    note TEXT NOT NULL DEFAULT '',
                    tags TEXT NOT NULL DEFAULT '[]'
                )
            """)
            conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_mood_user_ts ON mood_entries(user_id, timestamp DESC)"
            )
            conn.execute("CREATE INDEX IF NOT EXISTS idx_mood_user_date ON mood_entries(user_id, date)")

    # --- Reads ---

    def get(self, user_id: str, entry_id: str) -> Optional[MoodEntry]:
        with self._connect("get") as conn:
            row = conn.execute(
                "SELECT * FROM mood_entries WHERE user_id = ? AND id = ?",
                (user_id, entry_id),
            ).fetchone()
        return MoodEntry.from_dict(dict(row)) if row else None

    def list_entries(self, user_id: str, limit: Optional[int] = None) -> list[MoodEntry]:
        """Entries for a user, newest timestamp first."""
        query = "SELECT * FROM mood_entries WHERE user_id = ? ORDER BY timestamp DESC, rowid DESC"
        params: list = [user_id]
        if limit is not None:
            query += " LIMIT ?"
            params.append(limit)
        with self._connect("list") as conn:
            rows = conn.execute(query, params).fetchall()
        return [MoodEntry.from_dict(dict(r)) for r in rows]

    def snapshot(self, user_id: str) -> Snapshot:
        """Immutable copy of a user's full entry collection."""
        return tuple(self.list_entries(user_id))

    # --- Writes ---

    def create(
        self,
        user_id: str,
        mood: int,
        note: str = "",
        tags: Optional[Iterable[str]] = None,
        now: Optional[datetime] = None,
        entry_date: Optional[date] = None,
    ) -> MoodEntry:
        """Insert a new entry. ``date`` comes from ``now`` unless backfilling.

        Raises:
            ValueError: mood outside 1-5 or a tag outside the vocabulary.
        """
        mood = _check_mood(mood)
        tag_list = normalize_tags(tags)
        now = now or datetime.now()
        entry = MoodEntry(
            id=uuid.uuid4().hex[:12],
            user_id=user_id,
            mood=mood,
            date=entry_date or now.date(),
            timestamp=now,
            note=(note or "").strip(),
            tags=tuple(tag_list),
        )
        with self._connect("create") as conn:
            conn.execute(
                """INSERT INTO mood_entries
                (id, user_id, mood, date, timestamp, updated_at, note, tags)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)""",
                (
                    entry.id,
                    entry.user_id,
                    entry.mood,
                    entry.date.isoformat(),
                    entry.timestamp.isoformat(),
                    None,
                    entry.note,
                    json.dumps(tag_list),
                ),
            )
        logger.info("mood_store.created", user_id=user_id, entry_id=entry.id, mood=mood)
        self._notify(user_id)
        return entry

    def update(
        self,
        user_id: str,
        entry_id: str,
        mood: Optional[int] = None,
        note: Optional[str] = None,
        tags: Optional[Iterable[str]] = None,
    ) -> Optional[MoodEntry]:
        """Change the given fields; the entry's date never changes.

        Returns the updated entry, or None if it doesn't exist for this user.
        """
        fields: dict = {}
        if mood is not None:
            fields["mood"] = _check_mood(mood)
        if note is not None:
            fields["note"] = note.strip()
        if tags is not None:
            fields["tags"] = json.dumps(normalize_tags(tags))
        fields["updated_at"] = datetime.now().isoformat()

        assignments = ", ".join(f"{name} = ?" for name in fields)
        with self._connect("update") as conn:
            cur = conn.execute(
                f"UPDATE mood_entries SET {assignments} WHERE user_id = ? AND id = ?",
                (*fields.values(), user_id, entry_id),
            )
            if cur.rowcount == 0:
                return None
        logger.info("mood_store.updated", user_id=user_id, entry_id=entry_id, fields=sorted(fields))
        self._notify(user_id)
        return self.get(user_id, entry_id)

    def delete(self, user_id: str, entry_id: str) -> bool:
        with self._connect("delete") as conn:
            cur = conn.execute(
                "DELETE FROM mood_entries WHERE user_id = ? AND id = ?",
                (user_id, entry_id),
            )
            deleted = cur.rowcount > 0
        if deleted:
            logger.info("mood_store.deleted", user_id=user_id, entry_id=entry_id)
            self._notify(user_id)
        return deleted

    def clear(self, user_id: str) -> int:
        """Delete every entry for a user; returns how many were removed."""
        with self._connect("clear") as conn:
            cur = conn.execute("DELETE FROM mood_entries WHERE user_id = ?", (user_id,))
            removed = cur.rowcount
        logger.warning("mood_store.cleared", user_id=user_id, removed=removed)
        if removed:
            self._notify(user_id)
        return removed

    # --- Change notifications ---

    def subscribe(self, user_id: str, listener: Listener) -> Callable[[], None]:
        """Push the current snapshot now and after every write for ``user_id``.

        Returns a function that removes the listener.
        """
        with self._lock:
            self._listeners.setdefault(user_id, []).append(listener)
        self._deliver(user_id, listener, self.snapshot(user_id))

        def unsubscribe() -> None:
            with self._lock:
                listeners = self._listeners.get(user_id, [])
                if listener in listeners:
                    listeners.remove(listener)
                if not listeners:
                    self._listeners.pop(user_id, None)

        return unsubscribe

    def _notify(self, user_id: str) -> None:
        with self._lock:
            listeners = list(self._listeners.get(user_id, []))
        if not listeners:
            return
        snap = self.snapshot(user_id)
        for listener in listeners:
            self._deliver(user_id, listener, snap)

    @staticmethod
    def _deliver(user_id: str, listener: Listener, snap: Snapshot) -> None:
        try:
            listener(snap)
        except Exception:
            logger.exception("mood_store.listener_error", user_id=user_id)
