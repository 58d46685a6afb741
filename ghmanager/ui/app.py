"""Streamlit UI for ghmanager.

Views:
1. Dashboard: search repositories
2. Repository / Issues / Pull Requests: the selected repository
3. Settings: save or clear the GitHub token
"""

from __future__ import annotations

import streamlit as st

from ghmanager.config import Config
from ghmanager.credentials import CredentialStore, client_factory_for
from ghmanager.storage.db import get_connection
from ghmanager.storage.settings import SettingsStore
from ghmanager.ui import (
    page_dashboard,
    page_issues,
    page_pulls,
    page_repository,
    page_settings,
)

BASE_PAGES = ["Dashboard", "Settings"]
REPO_PAGES = ["Repository", "Issues", "Pull Requests"]


@st.cache_resource
def _get_connection():
    return get_connection(Config.load().db_path)


def get_store() -> CredentialStore:
    """One credential store per browser session, restored from the database."""
    if "credential_store" not in st.session_state:
        config = Config.load()
        settings = SettingsStore(_get_connection())
        st.session_state["credential_store"] = CredentialStore(
            settings, client_factory_for(config)
        )
    return st.session_state["credential_store"]


def open_repository(owner: str, name: str) -> None:
    st.session_state["repo"] = (owner, name)
    st.session_state["page"] = "Repository"


def main() -> None:
    st.set_page_config(page_title="GitHub Manager", page_icon="🐙", layout="wide")
    st.sidebar.title("GitHub Manager")

    store = get_store()
    selected = st.session_state.get("repo")

    pages = list(BASE_PAGES)
    if selected:
        owner, name = selected
        st.sidebar.caption("Current repository")
        st.sidebar.markdown(f"**{owner}/{name}**")
        pages += REPO_PAGES

    if st.session_state.get("page") not in pages:
        st.session_state["page"] = "Dashboard"
    page = st.sidebar.radio("Navigate", pages, key="page")

    if page == "Dashboard":
        page_dashboard.render(store, open_repository)
    elif page == "Settings":
        page_settings.render(store)
    elif page == "Repository":
        page_repository.render(store.client, *selected)
    elif page == "Issues":
        page_issues.render(store.client, *selected)
    elif page == "Pull Requests":
        page_pulls.render(store.client, *selected)


if __name__ == "__main__":
    main()
