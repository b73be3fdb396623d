"""Tests for sign-in session handling."""

from datetime import datetime

from google.oauth2.credentials import Credentials

from src.utils.google_auth import (
    GUEST_USER_ID,
    GoogleAuthService,
    guest_session,
    resolve_session,
)

USER_INFO = {"id": "123", "email": "alex@example.com", "name": "Alex", "picture": "https://example.com/a.png"}


def test_new_user_needs_onboarding():
    session = resolve_session(USER_INFO, None)
    assert session.user_id == "alex@example.com"
    assert session.name == "Alex"
    assert not session.onboarding_complete
    assert session.profile_data is None


def test_empty_profile_needs_onboarding():
    assert not resolve_session(USER_INFO, {}).onboarding_complete


def test_non_mapping_profile_needs_onboarding():
    assert not resolve_session(USER_INFO, ["age", 30]).onboarding_complete
    assert not resolve_session(USER_INFO, "corrupt").onboarding_complete


def test_saved_profile_completes_onboarding():
    blob = {"age": 30, "goal": "gain"}
    session = resolve_session(USER_INFO, blob)
    assert session.onboarding_complete
    assert session.profile_data == blob


def test_user_without_email_falls_back_to_id():
    assert resolve_session({"id": "123"}, None).user_id == "123"


def test_guest_session():
    guest = guest_session()
    assert guest.user_id == GUEST_USER_ID
    assert not guest.onboarding_complete


def test_authorization_url_requests_offline_access():
    service = GoogleAuthService("client-id", "secret", "http://localhost:8501")
    url = service.authorization_url()
    assert url.startswith("https://accounts.google.com/o/oauth2/auth")
    assert "access_type=offline" in url
    assert "client_id=client-id" in url


def test_credentials_dict_round_trip():
    credentials = Credentials(
        token="token",
        refresh_token="refresh",
        token_uri="https://oauth2.googleapis.com/token",
        client_id="client-id",
        client_secret="secret",
        scopes=["openid"],
        expiry=datetime(2030, 1, 1, 12, 0),
    )
    data = GoogleAuthService.to_dict(credentials)
    restored = GoogleAuthService.from_dict(data)
    assert restored.token == "token"
    assert restored.refresh_token == "refresh"
    assert restored.expiry == datetime(2030, 1, 1, 12, 0)
