"""Thin wrapper around PyGithub for authenticated GitHub API access.

Every operation is a single request for the first page of results: no
pagination, no caching, no retries. Failures are re-raised as
``ghmanager.github.errors.GitHubError`` subclasses carrying the remote message.
"""

from __future__ import annotations

import logging

import requests
from github import Auth, Github
from github.GithubException import GithubException

from ghmanager.config import DEFAULT_API_URL, DEFAULT_PER_PAGE
from ghmanager.github.errors import ClientNotInitializedError, GitHubError, translate
from ghmanager.github.models import (
    AuthenticatedUser,
    Issue,
    PullRequest,
    RepositoryDetail,
    RepositorySummary,
)

logger = logging.getLogger(__name__)


class GitHubClient:
    """GitHub client bound to one token.

    A client built without a token is uninitialized: every operation raises
    ClientNotInitializedError before touching the network.

    Usage:
        client = GitHubClient(token="ghp_...")
        repo = client.get_repository("facebook", "react")
    """

    def __init__(
        self,
        token: str | None,
        api_url: str = DEFAULT_API_URL,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> None:
        self._gh: Github | None = None
        if token:
            # retry=None turns off PyGithub's default GithubRetry (5xx retries, rate-limit waits)
            self._gh = Github(
                auth=Auth.Token(token),
                base_url=api_url,
                per_page=per_page,
                retry=None,
            )

    @property
    def initialized(self) -> bool:
        return self._gh is not None

    def _github(self) -> Github:
        if self._gh is None:
            raise ClientNotInitializedError()
        return self._gh

    def get_authenticated_user(self) -> AuthenticatedUser:
        """Check the token with GET /user."""
        gh = self._github()
        try:
            return AuthenticatedUser.from_github(gh.get_user())
        except (GithubException, requests.RequestException) as e:
            raise self._failed("token check", e) from e

    def search_repositories(self, query: str) -> list[RepositorySummary]:
        """Search repositories, in GitHub's ranking order. Blank queries return []."""
        if not query.strip():
            return []
        gh = self._github()
        try:
            page = gh.search_repositories(query).get_page(0)
            return [RepositorySummary.from_github(repo) for repo in page]
        except (GithubException, requests.RequestException) as e:
            raise self._failed(f"search {query!r}", e) from e

    def get_repository(self, owner: str, name: str) -> RepositoryDetail:
        gh = self._github()
        try:
            return RepositoryDetail.from_github(gh.get_repo(f"{owner}/{name}"))
        except (GithubException, requests.RequestException) as e:
            raise self._failed(f"get {owner}/{name}", e) from e

    def list_issues(self, owner: str, name: str) -> list[Issue]:
        """List open and closed issues in GitHub's default order."""
        gh = self._github()
        try:
            repo = gh.withLazy(True).get_repo(f"{owner}/{name}")
            page = repo.get_issues(state="all").get_page(0)
            return [Issue.from_github(issue) for issue in page]
        except (GithubException, requests.RequestException) as e:
            raise self._failed(f"list issues of {owner}/{name}", e) from e

    def list_pull_requests(
        self, owner: str, name: str, detailed: bool = False
    ) -> list[PullRequest]:
        """List open, closed and merged pull requests in GitHub's default order.

        Args:
            detailed: Also fetch each PR individually to fill in the merged
                flag and the comment/commit/line counters.
        """
        gh = self._github()
        try:
            repo = gh.withLazy(True).get_repo(f"{owner}/{name}")
            page = repo.get_pulls(state="all").get_page(0)
            return [PullRequest.from_github(pr, detailed=detailed) for pr in page]
        except (GithubException, requests.RequestException) as e:
            raise self._failed(f"list pulls of {owner}/{name}", e) from e

    def _failed(
        self, action: str, exc: GithubException | requests.RequestException
    ) -> GitHubError:
        error = translate(exc)
        logger.warning(f"GitHub {action} failed: {error.message}")
        return error

    def close(self) -> None:
        if self._gh is not None:
            self._gh.close()
