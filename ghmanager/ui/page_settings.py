"""Settings page: save, validate and clear the GitHub token."""

from __future__ import annotations

import streamlit as st

from ghmanager.credentials import CredentialStore
from ghmanager.github.errors import GitHubError


def render(store: CredentialStore) -> None:
    """Render the settings page."""
    st.header("Settings")

    st.subheader("GitHub Integration")

    with st.form("token_form"):
        token = st.text_input(
            "GitHub Personal Access Token",
            type="password",
            placeholder="Enter your GitHub token (ghp_...)",
        )
        st.caption(
            "Create a token with 'repo' scope at "
            "[GitHub Settings](https://github.com/settings/tokens)"
        )
        if st.form_submit_button("Save Token", type="primary"):
            try:
                with st.spinner("Validating..."):
                    user = store.set_token(token)
                st.success(
                    f"Token saved successfully for {user.login}! "
                    "You can now use all GitHub features."
                )
            except GitHubError as e:
                st.error(e.message)

    # Status reflects any save submitted above
    if not store.is_initialized():
        st.warning("GitHub token: not set")
        return

    st.success("GitHub token: configured")
    if st.button("Clear Token"):
        store.clear_token()
        st.session_state.pop("repo", None)
        st.rerun()
