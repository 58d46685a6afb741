"""Configuration loading for ghmanager.

Config sources (in priority order):
1. Explicit arguments passed to functions
2. Environment variables (GHMANAGER_DB_PATH, etc.)
3. .env file in current directory

The GitHub token is not part of the config: it is set through the UI or
`ghmanager token set` and persisted in the settings database.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_DB_PATH = Path("ghmanager.db")
DEFAULT_API_URL = "https://api.github.com"
DEFAULT_PER_PAGE = 30
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Config:
    db_path: Path = DEFAULT_DB_PATH
    api_url: str = DEFAULT_API_URL
    per_page: int = DEFAULT_PER_PAGE
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def load(cls) -> Config:
        per_page = os.getenv("GHMANAGER_PER_PAGE", str(DEFAULT_PER_PAGE))
        return cls(
            db_path=Path(os.getenv("GHMANAGER_DB_PATH", str(DEFAULT_DB_PATH))),
            api_url=os.getenv("GHMANAGER_GITHUB_API_URL", DEFAULT_API_URL),
            per_page=int(per_page) if per_page.isdigit() else -1,
            log_level=os.getenv("GHMANAGER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )

    def validate(self) -> list[str]:
        """Return a list of config issues."""
        issues = []
        if not self.api_url.startswith(("https://", "http://")):
            issues.append(f"GitHub API URL must be http(s) (GHMANAGER_GITHUB_API_URL): {self.api_url}")
        if not 1 <= self.per_page <= 100:
            issues.append("Page size must be between 1 and 100 (GHMANAGER_PER_PAGE)")
        if not isinstance(logging.getLevelName(self.log_level), int):
            issues.append(f"Unknown log level (GHMANAGER_LOG_LEVEL): {self.log_level}")
        return issues
