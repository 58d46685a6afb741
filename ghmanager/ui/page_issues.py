"""Issues list page."""

from __future__ import annotations

import streamlit as st

from ghmanager.github.client import GitHubClient
from ghmanager.github.errors import GitHubError
from ghmanager.ui.components import render_error, render_issue_card


def render(client: GitHubClient, owner: str, name: str) -> None:
    st.header("Issues")
    st.markdown(f"[View on GitHub ↗](https://github.com/{owner}/{name}/issues)")

    try:
        with st.spinner("Loading issues..."):
            issues = client.list_issues(owner, name)
    except GitHubError as e:
        render_error(e)
        return

    if not issues:
        st.info("No issues found")
        return

    for issue in issues:
        render_issue_card(issue, issue.state)
