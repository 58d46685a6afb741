"""Shared test fixtures for ghmanager.

PyGithub objects are stood in for by SimpleNamespace instances carrying the
attributes the projections read. No test touches the network.
"""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from ghmanager.storage.db import get_connection
from ghmanager.storage.settings import SettingsStore


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "test.db"


@pytest.fixture
def db_conn(db_path: Path) -> sqlite3.Connection:
    conn = get_connection(db_path)
    yield conn
    conn.close()


@pytest.fixture
def settings(db_conn: sqlite3.Connection) -> SettingsStore:
    return SettingsStore(db_conn)


@pytest.fixture
def github_cls():
    """Patched PyGithub Github class; .return_value is the API handle."""
    with patch("ghmanager.github.client.Github") as gh_cls:
        yield gh_cls


@pytest.fixture
def mock_github(github_cls):
    return github_cls.return_value


@pytest.fixture
def react_repo() -> SimpleNamespace:
    return SimpleNamespace(
        id=10270250,
        name="react",
        full_name="facebook/react",
        description="The library for web and native user interfaces.",
        stargazers_count=228000,
        language="JavaScript",
        owner=SimpleNamespace(
            login="facebook",
            avatar_url="https://avatars.githubusercontent.com/u/69631?v=4",
        ),
        html_url="https://github.com/facebook/react",
        forks_count=46500,
        open_issues_count=912,
        default_branch="main",
        created_at=datetime(2013, 5, 24, 16, 15, 54, tzinfo=timezone.utc),
        topics=["declarative", "frontend", "javascript", "ui"],
    )


@pytest.fixture
def bare_repo() -> SimpleNamespace:
    """A search hit with no description, language or owner details."""
    return SimpleNamespace(
        id=42,
        name="scratch",
        full_name="someone/scratch",
        description=None,
        stargazers_count=0,
        language=None,
        owner=None,
        html_url="https://github.com/someone/scratch",
    )


@pytest.fixture
def octocat() -> SimpleNamespace:
    return SimpleNamespace(
        login="octocat",
        name="The Octocat",
        avatar_url="https://avatars.githubusercontent.com/u/583231?v=4",
    )


@pytest.fixture
def sample_issue(octocat: SimpleNamespace) -> SimpleNamespace:
    return SimpleNamespace(
        number=31205,
        title="Bug: useEffect cleanup runs twice",
        state="open",
        html_url="https://github.com/facebook/react/issues/31205",
        created_at=datetime(2024, 10, 12, 9, 30, tzinfo=timezone.utc),
        updated_at=datetime(2024, 10, 14, 18, 0, tzinfo=timezone.utc),
        user=octocat,
        labels=[
            SimpleNamespace(name="Type: Bug", color="b60205"),
            SimpleNamespace(name="Status: Unconfirmed", color=None),
        ],
    )


@pytest.fixture
def anonymous_issue() -> SimpleNamespace:
    """A closed issue whose author account was deleted."""
    return SimpleNamespace(
        number=7,
        title="Old report",
        state="closed",
        html_url="https://github.com/facebook/react/issues/7",
        created_at=datetime(2013, 6, 1, tzinfo=timezone.utc),
        updated_at=datetime(2013, 6, 2, tzinfo=timezone.utc),
        user=None,
        labels=[],
    )


@pytest.fixture
def merged_pull(octocat: SimpleNamespace) -> SimpleNamespace:
    return SimpleNamespace(
        number=31210,
        title="Fix double cleanup in StrictMode",
        state="closed",
        html_url="https://github.com/facebook/react/pull/31210",
        created_at=datetime(2024, 10, 13, 8, 0, tzinfo=timezone.utc),
        updated_at=datetime(2024, 10, 15, 12, 0, tzinfo=timezone.utc),
        user=octocat,
        labels=[SimpleNamespace(name="CLA Signed", color="e7e7e7")],
        draft=False,
        merged_at=datetime(2024, 10, 15, 12, 0, tzinfo=timezone.utc),
        merged=True,
        comments=4,
        review_comments=9,
        commits=3,
        additions=120,
        deletions=45,
        changed_files=6,
    )


@pytest.fixture
def draft_pull(octocat: SimpleNamespace) -> SimpleNamespace:
    return SimpleNamespace(
        number=31300,
        title="WIP: experimental compiler flag",
        state="open",
        html_url="https://github.com/facebook/react/pull/31300",
        created_at=datetime(2024, 10, 20, tzinfo=timezone.utc),
        updated_at=datetime(2024, 10, 21, tzinfo=timezone.utc),
        user=octocat,
        labels=[],
        draft=True,
        merged_at=None,
        merged=False,
        comments=0,
        review_comments=0,
        commits=1,
        additions=10,
        deletions=0,
        changed_files=1,
    )
