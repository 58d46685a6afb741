"""Key-value access to the settings table."""

from __future__ import annotations

import sqlite3
from datetime import datetime


class SettingsStore:
    """Data access layer for persisted string settings."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def get(self, key: str) -> str | None:
        row = self._conn.execute(
            "SELECT value FROM settings WHERE key = ?", (key,)
        ).fetchone()
        return row["value"] if row else None

    def set(self, key: str, value: str) -> None:
        """Insert or replace a setting."""
        self._conn.execute(
            """INSERT OR REPLACE INTO settings (key, value, updated_at)
            VALUES (?, ?, ?)""",
            (key, value, datetime.now().isoformat()),
        )
        self._conn.commit()

    def delete(self, key: str) -> None:
        """Remove a setting. Missing keys are ignored."""
        self._conn.execute("DELETE FROM settings WHERE key = ?", (key,))
        self._conn.commit()
