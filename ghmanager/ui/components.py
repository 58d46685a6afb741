"""Shared UI components for ghmanager Streamlit pages."""

from __future__ import annotations

import html

import streamlit as st

from ghmanager.github.errors import ClientNotInitializedError, GitHubError
from ghmanager.github.models import Issue, Label, PullRequest, RepositorySummary

STATUS_EMOJI = {
    "open": "\U0001f7e2",
    "closed": "\U0001f534",
    "Merged": "\U0001f7e3",
    "Draft": "\u26aa",
}


def label_text_color(color: str) -> str:
    """Black text on light label colors, white on dark ones."""
    try:
        value = int(color, 16)
    except ValueError:
        return "#fff"
    return "#000" if value > 0x7FFFFF else "#fff"


def status_badge(status: str) -> str:
    emoji = STATUS_EMOJI.get(status, "\u26aa")
    return f"{emoji} {status}"


def format_date(iso: str) -> str:
    return iso[:10] if iso else "unknown"


def label_html(label: Label) -> str:
    return (
        f'<span style="background-color:#{html.escape(label.color)};'
        f"color:{label_text_color(label.color)};"
        f'padding:2px 8px;border-radius:10px;font-size:0.8em;margin-right:4px">'
        f"{html.escape(label.name)}</span>"
    )


def render_error(error: GitHubError) -> None:
    """Show an access-layer error as plain text."""
    st.error(f"Error: {error.message}")
    if isinstance(error, ClientNotInitializedError):
        st.caption("Update your token on the Settings page.")


def render_repo_card(repo: RepositorySummary, on_open) -> None:
    with st.container(border=True):
        avatar, body = st.columns([1, 8])
        if repo.owner.avatar_url:
            avatar.image(repo.owner.avatar_url, width=40)
        body.markdown(f"**{repo.full_name}**")
        body.caption(repo.description or "No description available")
        meta = f"⭐ {repo.stargazers_count}"
        if repo.language:
            meta += f" · {repo.language}"
        body.write(meta)
        link, button = body.columns([3, 1])
        link.markdown(f"[View on GitHub ↗]({repo.html_url})")
        button.button(
            "Open",
            key=f"open_{repo.id}",
            on_click=on_open,
            args=(repo.owner.login, repo.name),
        )


def render_issue_card(issue: Issue, status: str) -> None:
    """Render an issue or pull request header, author line and labels."""
    with st.container(border=True):
        st.markdown(f"{status_badge(status)} [{issue.title}]({issue.html_url})")
        author = ""
        if issue.user:
            author = f" · Opened by [{issue.user.login}](https://github.com/{issue.user.login})"
        st.caption(
            f"#{issue.number}{author} · Created {format_date(issue.created_at)}"
            f" · Updated {format_date(issue.updated_at)}"
        )
        if issue.labels:
            st.markdown(
                "".join(label_html(label) for label in issue.labels),
                unsafe_allow_html=True,
            )
        if isinstance(issue, PullRequest) and issue.commits is not None:
            cols = st.columns(4)
            cols[0].metric("Comments", issue.total_comments)
            cols[1].metric("Commits", issue.commits)
            cols[2].metric("Changes", f"+{issue.additions} -{issue.deletions}")
            cols[3].metric("Files changed", issue.changed_files)
