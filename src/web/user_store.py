"""SQLite users table: one row per authenticated account."""

import os
import sqlite3
from pathlib import Path

import structlog

from db import wal_connect

logger = structlog.get_logger()

_DEFAULT_DB_PATH = Path(os.environ.get("MOODTRACK_HOME", Path.home() / ".moodtrack")) / "users.db"


def _get_conn(db_path: Path | None = None) -> sqlite3.Connection:
    return wal_connect(db_path or _DEFAULT_DB_PATH, row_factory=True)


def init_db(db_path: Path | None = None) -> None:
    """Create tables if they don't exist."""
    conn = _get_conn(db_path)
    try:
        conn.executescript("""
            CREATE TABLE IF NOT EXISTS users (
                id TEXT PRIMARY KEY,
                email TEXT,
                name TEXT,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                last_seen_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            );
        """)
        conn.commit()
    finally:
        conn.close()


def get_or_create_user(
    user_id: str,
    email: str | None = None,
    name: str | None = None,
    db_path: Path | None = None,
) -> dict:
    """Upsert a user row, keeping known email/name when the token omits them."""
    conn = _get_conn(db_path)
    try:
        existing = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
        if existing is None:
            conn.execute(
                "INSERT INTO users (id, email, name) VALUES (?, ?, ?)",
                (user_id, email, name),
            )
            logger.info("user_store.created", user_id=user_id)
        else:
            conn.execute(
                """UPDATE users
                SET email = COALESCE(?, email), name = COALESCE(?, name),
                    last_seen_at = CURRENT_TIMESTAMP
                WHERE id = ?""",
                (email, name, user_id),
            )
        conn.commit()
        row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
        return dict(row)
    finally:
        conn.close()
