"""Repository detail page."""

from __future__ import annotations

import streamlit as st

from ghmanager.github.client import GitHubClient
from ghmanager.github.errors import GitHubError
from ghmanager.ui.components import format_date, render_error


def render(client: GitHubClient, owner: str, name: str) -> None:
    try:
        with st.spinner("Loading repository..."):
            repo = client.get_repository(owner, name)
    except GitHubError as e:
        render_error(e)
        return

    avatar, title = st.columns([1, 10])
    if repo.owner.avatar_url:
        avatar.image(repo.owner.avatar_url, width=48)
    title.header(repo.full_name)
    title.caption(repo.description or "No description available")
    st.markdown(f"[View on GitHub ↗]({repo.html_url})")

    stats, info = st.columns(2)
    with stats:
        st.subheader("Repository Stats")
        st.metric("Stars", repo.stargazers_count)
        st.metric("Forks", repo.forks_count)
        st.metric("Open Issues", repo.open_issues_count)
    with info:
        st.subheader("Repository Info")
        st.write(f"**Language:** {repo.language or 'N/A'}")
        st.write(f"**Default Branch:** {repo.default_branch}")
        st.write(f"**Created:** {format_date(repo.created_at)}")

    if repo.topics:
        st.subheader("Topics")
        st.write(" ".join(f"`{topic}`" for topic in repo.topics))
