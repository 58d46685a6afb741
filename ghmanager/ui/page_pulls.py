"""Pull requests list page."""

from __future__ import annotations

import streamlit as st

from ghmanager.github.client import GitHubClient
from ghmanager.github.errors import GitHubError
from ghmanager.ui.components import render_error, render_issue_card


def render(client: GitHubClient, owner: str, name: str) -> None:
    st.header("Pull Requests")
    st.markdown(f"[View on GitHub ↗](https://github.com/{owner}/{name}/pulls)")

    # One extra request per PR, so off by default
    detailed = st.toggle("Show merge state and change counts", key="pulls_detailed")

    try:
        with st.spinner("Loading pull requests..."):
            pulls = client.list_pull_requests(owner, name, detailed=detailed)
    except GitHubError as e:
        render_error(e)
        return

    if not pulls:
        st.info("No pull requests found")
        return

    for pr in pulls:
        render_issue_card(pr, pr.status)
