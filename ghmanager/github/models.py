"""Display-shaped records projected from PyGithub objects.

Each record is built once at the boundary and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any

DEFAULT_LABEL_COLOR = "000000"


def _iso(value: datetime | None) -> str:
    return value.isoformat() if value else ""


@dataclass(frozen=True)
class UserRef:
    login: str
    avatar_url: str

    @classmethod
    def from_github(cls, user: Any) -> UserRef:
        return cls(
            login=getattr(user, "login", None) or "",
            avatar_url=getattr(user, "avatar_url", None) or "",
        )


@dataclass(frozen=True)
class AuthenticatedUser:
    login: str
    name: str | None
    avatar_url: str

    @classmethod
    def from_github(cls, user: Any) -> AuthenticatedUser:
        return cls(
            login=user.login,
            name=user.name,
            avatar_url=user.avatar_url or "",
        )


@dataclass(frozen=True)
class Label:
    name: str
    color: str = DEFAULT_LABEL_COLOR


def normalize_label(raw: Any) -> Label:
    """Normalize a label given as a bare name, a JSON dict or a PyGithub Label."""
    if isinstance(raw, str):
        return Label(name=raw)
    if isinstance(raw, dict):
        name, color = raw.get("name"), raw.get("color")
    else:
        name, color = getattr(raw, "name", None), getattr(raw, "color", None)
    return Label(name=name or "", color=color or DEFAULT_LABEL_COLOR)


@dataclass(frozen=True)
class RepositorySummary:
    """A repository as shown in search results."""

    id: int
    name: str
    full_name: str
    description: str | None
    stargazers_count: int
    language: str | None
    owner: UserRef
    html_url: str

    @classmethod
    def from_github(cls, repo: Any) -> RepositorySummary:
        return cls(**_summary_fields(repo))

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class RepositoryDetail(RepositorySummary):
    """A single repository with the fields shown on its own page."""

    forks_count: int = 0
    open_issues_count: int = 0
    default_branch: str = ""
    created_at: str = ""
    topics: list[str] = field(default_factory=list)

    @classmethod
    def from_github(cls, repo: Any) -> RepositoryDetail:
        return cls(
            **_summary_fields(repo),
            forks_count=repo.forks_count or 0,
            open_issues_count=repo.open_issues_count or 0,
            default_branch=repo.default_branch or "",
            created_at=_iso(repo.created_at),
            topics=list(repo.topics or []),
        )


def _summary_fields(repo: Any) -> dict:
    return {
        "id": repo.id,
        "name": repo.name,
        "full_name": repo.full_name,
        "description": repo.description,
        "stargazers_count": repo.stargazers_count,
        "language": repo.language,
        "owner": UserRef.from_github(repo.owner),
        "html_url": repo.html_url,
    }


@dataclass(frozen=True)
class Issue:
    number: int
    title: str
    state: str
    html_url: str
    created_at: str
    updated_at: str
    user: UserRef | None
    labels: list[Label]

    @classmethod
    def from_github(cls, issue: Any) -> Issue:
        return cls(**_issue_fields(issue))

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class PullRequest(Issue):
    """A pull request.

    The list endpoint does not return the counters, so they stay None unless
    the record was built with ``detailed=True``.
    """

    draft: bool = False
    merged: bool = False
    comments: int | None = None
    review_comments: int | None = None
    commits: int | None = None
    additions: int | None = None
    deletions: int | None = None
    changed_files: int | None = None

    @classmethod
    def from_github(cls, pr: Any, detailed: bool = False) -> PullRequest:
        fields = _issue_fields(pr)
        fields["draft"] = bool(pr.draft)
        if not detailed:
            return cls(**fields, merged=pr.merged_at is not None)

        # Each attribute below triggers PyGithub's lazy completion (one GET per PR)
        return cls(
            **fields,
            merged=bool(pr.merged),
            comments=pr.comments,
            review_comments=pr.review_comments,
            commits=pr.commits,
            additions=pr.additions,
            deletions=pr.deletions,
            changed_files=pr.changed_files,
        )

    @property
    def status(self) -> str:
        if self.draft:
            return "Draft"
        if self.merged:
            return "Merged"
        return self.state

    @property
    def total_comments(self) -> int | None:
        if self.comments is None or self.review_comments is None:
            return None
        return self.comments + self.review_comments


def _issue_fields(issue: Any) -> dict:
    return {
        "number": issue.number,
        "title": issue.title or "",
        "state": issue.state,
        "html_url": issue.html_url,
        "created_at": _iso(issue.created_at),
        "updated_at": _iso(issue.updated_at),
        "user": UserRef.from_github(issue.user) if issue.user else None,
        "labels": [normalize_label(label) for label in issue.labels or []],
    }
