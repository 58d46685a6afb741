"""Tests for ghmanager.storage."""

from __future__ import annotations

from pathlib import Path

from ghmanager.storage.db import SCHEMA_VERSION, get_connection
from ghmanager.storage.settings import SettingsStore


def _row_count(conn) -> int:
    return conn.execute("SELECT COUNT(*) FROM settings").fetchone()[0]


class TestConnection:
    def test_creates_settings_table(self, db_conn):
        tables = {
            row["name"]
            for row in db_conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
        }
        assert "settings" in tables

    def test_schema_version(self, db_conn):
        assert db_conn.execute("PRAGMA user_version").fetchone()[0] == SCHEMA_VERSION

    def test_reopen_is_idempotent(self, db_path: Path):
        get_connection(db_path).close()
        conn = get_connection(db_path)
        conn.close()


class TestSettingsStore:
    def test_missing_key(self, settings):
        assert settings.get("github_token") is None

    def test_set_and_get(self, settings):
        settings.set("github_token", "ghp_abc")
        assert settings.get("github_token") == "ghp_abc"

    def test_overwrite(self, settings, db_conn):
        settings.set("github_token", "ghp_old")
        settings.set("github_token", "ghp_new")
        assert settings.get("github_token") == "ghp_new"
        assert _row_count(db_conn) == 1

    def test_delete(self, settings):
        settings.set("github_token", "ghp_abc")
        settings.delete("github_token")
        assert settings.get("github_token") is None

    def test_delete_missing_is_noop(self, settings, db_conn):
        settings.delete("github_token")
        assert _row_count(db_conn) == 0

    def test_persists_across_connections(self, db_path: Path):
        conn = get_connection(db_path)
        SettingsStore(conn).set("github_token", "ghp_abc")
        conn.close()

        conn = get_connection(db_path)
        try:
            assert SettingsStore(conn).get("github_token") == "ghp_abc"
        finally:
            conn.close()
