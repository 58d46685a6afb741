"""Manual verification: exercise the access client against the real API.

Usage:
    GITHUB_TOKEN=ghp_... uv run python scripts/check_github_access.py owner/repo

Uses facebook/react by default if no argument given. Falls back to the token
stored by `ghmanager token set` when GITHUB_TOKEN is not set.
"""

from __future__ import annotations

import os
import sys

from ghmanager.config import Config
from ghmanager.credentials import TOKEN_KEY
from ghmanager.github.client import GitHubClient
from ghmanager.storage.db import get_connection
from ghmanager.storage.settings import SettingsStore


def main() -> None:
    config = Config.load()
    full_name = sys.argv[1] if len(sys.argv) > 1 else "facebook/react"
    owner, _, name = full_name.partition("/")

    token = os.getenv("GITHUB_TOKEN")
    if not token:
        conn = get_connection(config.db_path)
        token = SettingsStore(conn).get(TOKEN_KEY)
        conn.close()

    if not token:
        print("ERROR: Set GITHUB_TOKEN or run `ghmanager token set`")
        sys.exit(1)

    client = GitHubClient(token=token, api_url=config.api_url, per_page=5)

    try:
        user = client.get_authenticated_user()
        print(f"Authenticated as {user.login}")

        print(f"\n--- Search {name!r} (first page) ---")
        for repo in client.search_repositories(name):
            print(f"  {repo.full_name} ⭐ {repo.stargazers_count}")

        print(f"\n--- {full_name} ---")
        detail = client.get_repository(owner, name)
        print(f"  Language: {detail.language}")
        print(f"  Stars: {detail.stargazers_count}, Forks: {detail.forks_count}")
        print(f"  Topics: {', '.join(detail.topics) or '(none)'}")

        print("\n--- Issues ---")
        issues = client.list_issues(owner, name)
        for issue in issues:
            labels = ", ".join(f"{l.name}#{l.color}" for l in issue.labels)
            print(f"  #{issue.number} [{issue.state}] {issue.title} {labels}")

        print("\n--- Pull requests (detailed) ---")
        pulls = client.list_pull_requests(owner, name, detailed=True)
        for pr in pulls:
            print(f"  #{pr.number} [{pr.status}] {pr.title}")
            print(f"    +{pr.additions} -{pr.deletions} in {pr.changed_files} files, {pr.commits} commits")

        print(f"\nSummary: {len(issues)} issues, {len(pulls)} PRs")

    finally:
        client.close()


if __name__ == "__main__":
    main()
