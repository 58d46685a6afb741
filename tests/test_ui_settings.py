"""Tests for the settings page, driven through Streamlit's AppTest."""

from __future__ import annotations

from streamlit.testing.v1 import AppTest


def settings_app(saved_token: str | None = None):
    from unittest.mock import MagicMock

    import streamlit as st

    from ghmanager.credentials import TOKEN_KEY, CredentialStore
    from ghmanager.github.errors import AuthenticationError
    from ghmanager.github.models import AuthenticatedUser
    from ghmanager.storage.db import get_connection
    from ghmanager.storage.settings import SettingsStore
    from ghmanager.ui import page_settings

    def client_for(token):
        client = MagicMock()
        if token == "ghp_bad":
            client.get_authenticated_user.side_effect = AuthenticationError(
                "Bad credentials", status=401
            )
        else:
            client.get_authenticated_user.return_value = AuthenticatedUser(
                login="octocat", name="The Octocat", avatar_url=""
            )
        return client

    if "store" not in st.session_state:
        settings = SettingsStore(get_connection(":memory:"))
        if saved_token:
            settings.set(TOKEN_KEY, saved_token)
        st.session_state.store = CredentialStore(settings, client_for)

    page_settings.render(st.session_state.store)


def _submit(at: AppTest, token: str) -> AppTest:
    at.text_input[0].input(token)
    return at.button[0].click().run()


class TestSettingsPage:
    def test_not_set_initially(self):
        at = AppTest.from_function(settings_app).run()
        assert not at.exception
        assert [w.value for w in at.warning] == ["GitHub token: not set"]
        assert len(at.button) == 1

    def test_status_updates_in_the_saving_run(self):
        at = AppTest.from_function(settings_app).run()
        at = _submit(at, "ghp_good")

        assert not at.exception
        successes = [s.value for s in at.success]
        assert any("Token saved successfully for octocat" in s for s in successes)
        assert "GitHub token: configured" in successes
        assert len(at.warning) == 0
        assert at.button[1].label == "Clear Token"

    def test_blank_token(self):
        at = AppTest.from_function(settings_app).run()
        at = _submit(at, "   ")

        assert [e.value for e in at.error] == ["Please enter a GitHub token"]
        assert [w.value for w in at.warning] == ["GitHub token: not set"]

    def test_rejected_token_clears_previous_status(self):
        at = AppTest.from_function(settings_app, kwargs={"saved_token": "ghp_old"}).run()
        assert "GitHub token: configured" in [s.value for s in at.success]

        at = _submit(at, "ghp_bad")

        assert [e.value for e in at.error] == ["Bad credentials"]
        assert [w.value for w in at.warning] == ["GitHub token: not set"]
        assert "GitHub token: configured" not in [s.value for s in at.success]
