"""Google OAuth sign-in for Streamlit.

Sign-in only identifies the user: the resulting email scopes everything the
app stores, and the saved questionnaire tells whether onboarding is done.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Optional

import requests
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

SCOPES = [
    "openid",
    "https://www.googleapis.com/auth/userinfo.email",
    "https://www.googleapis.com/auth/userinfo.profile",
    "https://www.googleapis.com/auth/drive.file",  # Files created by the app only
]

AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
TOKEN_URI = "https://oauth2.googleapis.com/token"
USERINFO_URL = "https://www.googleapis.com/oauth2/v2/userinfo"
REVOKE_URL = "https://oauth2.googleapis.com/revoke"

GUEST_USER_ID = "guest"


class AuthSession(BaseModel):
    """Who is using the app and whether they finished the questionnaire."""

    user_id: str = Field(..., description="Stable identifier used to scope storage")
    email: str = ""
    name: str = ""
    picture: str = ""
    onboarding_complete: bool = False
    profile_data: Optional[Dict[str, Any]] = Field(
        None, description="Saved questionnaire, present only once onboarding is complete"
    )


def resolve_session(user_info: Dict[str, Any], profile_blob: Any) -> AuthSession:
    """
    Build the session for a signed-in user.

    Args:
        user_info: Google user info (email, name, picture)
        profile_blob: Saved questionnaire, or None if nothing was stored

    Returns:
        AuthSession; onboarding counts as complete only for a non-empty mapping
    """
    complete = isinstance(profile_blob, dict) and len(profile_blob) > 0
    email = user_info.get("email", "")
    return AuthSession(
        user_id=email or user_info.get("id", GUEST_USER_ID),
        email=email,
        name=user_info.get("name", ""),
        picture=user_info.get("picture", ""),
        onboarding_complete=complete,
        profile_data=profile_blob if complete else None,
    )


def guest_session() -> AuthSession:
    return AuthSession(user_id=GUEST_USER_ID, name="Guest")


class GoogleAuthService:
    """OAuth 2.0 web flow against Google."""

    def __init__(self, client_id: str, client_secret: str, redirect_uri: str) -> None:
        self.client_config = {
            "web": {
                "client_id": client_id,
                "client_secret": client_secret,
                "auth_uri": AUTH_URI,
                "token_uri": TOKEN_URI,
            }
        }
        self.redirect_uri = redirect_uri

    def _flow(self) -> Flow:
        return Flow.from_client_config(
            client_config=self.client_config,
            scopes=SCOPES,
            redirect_uri=self.redirect_uri,
        )

    def authorization_url(self) -> str:
        url, _ = self._flow().authorization_url(
            access_type="offline",
            include_granted_scopes="true",
            prompt="consent",  # Always ask so Google returns a refresh token
        )
        return url

    def exchange_code(self, code: str) -> Credentials:
        """Trade the authorization code from the callback for credentials."""
        flow = self._flow()
        flow.fetch_token(code=code)
        return flow.credentials

    @staticmethod
    def refresh(credentials: Credentials) -> Credentials:
        if credentials.expired and credentials.refresh_token:
            credentials.refresh(Request())
        return credentials

    def user_info(self, credentials: Credentials) -> Dict[str, Any]:
        credentials = self.refresh(credentials)
        response = requests.get(
            USERINFO_URL,
            headers={"Authorization": f"Bearer {credentials.token}"},
            timeout=10,
        )
        response.raise_for_status()
        return response.json()

    @staticmethod
    def revoke(credentials: Credentials) -> None:
        try:
            requests.post(
                REVOKE_URL,
                params={"token": credentials.token},
                headers={"content-type": "application/x-www-form-urlencoded"},
                timeout=10,
            )
            logger.info("Credentials revoked")
        except Exception as e:
            logger.warning(f"Failed to revoke credentials: {e}")

    @staticmethod
    def to_dict(credentials: Credentials) -> Dict[str, Any]:
        """Serializable form kept in the Streamlit session."""
        return {
            "token": credentials.token,
            "refresh_token": credentials.refresh_token,
            "token_uri": credentials.token_uri,
            "client_id": credentials.client_id,
            "client_secret": credentials.client_secret,
            "scopes": credentials.scopes,
            "expiry": credentials.expiry.isoformat() if credentials.expiry else None,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Credentials:
        expiry = datetime.fromisoformat(data["expiry"]) if data.get("expiry") else None
        return Credentials(
            token=data["token"],
            refresh_token=data.get("refresh_token"),
            token_uri=data.get("token_uri"),
            client_id=data.get("client_id"),
            client_secret=data.get("client_secret"),
            scopes=data.get("scopes"),
            expiry=expiry,
        )
