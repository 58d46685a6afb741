"""Holds the single GitHub token and the client bound to it."""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable

from ghmanager.config import Config
from ghmanager.github.client import GitHubClient
from ghmanager.github.errors import GitHubError, InvalidTokenError
from ghmanager.github.models import AuthenticatedUser
from ghmanager.storage.settings import SettingsStore

logger = logging.getLogger(__name__)

TOKEN_KEY = "github_token"

ClientFactory = Callable[[str | None], GitHubClient]


def client_factory_for(config: Config) -> ClientFactory:
    """Build clients against the configured API URL and page size."""
    return partial(GitHubClient, api_url=config.api_url, per_page=config.per_page)


class CredentialStore:
    """Owns at most one token and the client built from it.

    A token persisted by an earlier process is restored on construction without
    a call to GET /user. The client is replaced, never mutated, when the token changes.
    """

    def __init__(
        self,
        settings: SettingsStore,
        client_factory: ClientFactory = GitHubClient,
    ) -> None:
        self._settings = settings
        self._client_factory = client_factory
        self._client: GitHubClient | None = None

        saved = settings.get(TOKEN_KEY)
        if saved:
            self._client = client_factory(saved)

    def is_initialized(self) -> bool:
        return self._client is not None

    @property
    def client(self) -> GitHubClient:
        """The live client, or an uninitialized one when no token is set."""
        if self._client is None:
            return self._client_factory(None)
        return self._client

    def set_token(self, token: str) -> AuthenticatedUser:
        """Validate a token with one GET /user call and persist it on success.

        Raises:
            InvalidTokenError: the token is blank. Nothing is persisted.
            GitHubError: the token check failed. Any persisted token is removed.
        """
        if not token or not token.strip():
            raise InvalidTokenError()

        candidate = self._client_factory(token)
        try:
            user = candidate.get_authenticated_user()
        except GitHubError:
            candidate.close()
            self._discard()
            raise

        self._settings.set(TOKEN_KEY, token)
        self._replace(candidate)
        logger.info(f"GitHub token saved for {user.login}")
        return user

    def clear_token(self) -> None:
        self._discard()
        logger.info("GitHub token cleared")

    def _discard(self) -> None:
        self._settings.delete(TOKEN_KEY)
        self._replace(None)

    def _replace(self, client: GitHubClient | None) -> None:
        if self._client is not None and self._client is not client:
            self._client.close()
        self._client = client
