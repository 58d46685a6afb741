"""Repository search page."""

from __future__ import annotations

import streamlit as st

from ghmanager.credentials import CredentialStore
from ghmanager.github.errors import GitHubError
from ghmanager.ui.components import render_error, render_repo_card


def render(store: CredentialStore, on_open) -> None:
    """Render the dashboard. on_open(owner, name) selects a repository."""
    if not store.is_initialized():
        st.header("Welcome to GitHub Manager")
        st.info(
            "Please add your GitHub Personal Access Token in Settings to get started."
        )
        return

    st.header("GitHub Dashboard")
    query = st.text_input(
        "Search repositories",
        placeholder="Search repositories (e.g., 'react', 'vue', 'typescript')...",
        key="search_query",
    )

    if not query.strip():
        st.write("Search for any GitHub repository to get started.")
        st.caption('Try searching for: "react", "vue", "typescript", or any repository name')
        return

    try:
        with st.spinner("Searching repositories..."):
            repos = store.client.search_repositories(query)
    except GitHubError as e:
        render_error(e)
        return

    if not repos:
        st.info("No repositories found")
        return

    cols = st.columns(3)
    for i, repo in enumerate(repos):
        with cols[i % 3]:
            render_repo_card(repo, on_open)
