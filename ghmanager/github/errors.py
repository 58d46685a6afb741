"""Errors raised by the GitHub access layer.

PyGithub and requests exceptions are translated into this hierarchy at the
client boundary. The remote service's message is kept as the error text.
"""

from __future__ import annotations

import requests
from github.GithubException import (
    BadCredentialsException,
    GithubException,
    UnknownObjectException,
)

NOT_INITIALIZED_MESSAGE = "GitHub not initialized. Please add your token in Settings."


class GitHubError(Exception):
    """Base class for access-layer failures."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


class ClientNotInitializedError(GitHubError):
    """No token is set; raised before any network access."""

    def __init__(self, message: str = NOT_INITIALIZED_MESSAGE) -> None:
        super().__init__(message)


class InvalidTokenError(ClientNotInitializedError):
    """A blank token was given."""

    def __init__(self, message: str = "Please enter a GitHub token") -> None:
        super().__init__(message)


class AuthenticationError(GitHubError):
    """The token was rejected (invalid, expired or revoked)."""


class NotFoundError(GitHubError):
    """The resource does not exist or the token cannot access it."""


class TransportError(GitHubError):
    """Network failure or an unexpected response from the API."""


def remote_message(exc: GithubException) -> str:
    data = exc.data
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return str(exc)


def translate(exc: GithubException | requests.RequestException) -> GitHubError:
    """Map a PyGithub/requests exception to a GitHubError."""
    if isinstance(exc, BadCredentialsException):
        return AuthenticationError(remote_message(exc), status=exc.status)
    if isinstance(exc, UnknownObjectException):
        return NotFoundError(remote_message(exc), status=exc.status)
    if isinstance(exc, GithubException):
        if exc.status == 401:
            return AuthenticationError(remote_message(exc), status=exc.status)
        if exc.status in (403, 404):
            return NotFoundError(remote_message(exc), status=exc.status)
        return TransportError(remote_message(exc), status=exc.status)
    return TransportError(str(exc) or exc.__class__.__name__)
