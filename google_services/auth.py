#!/usr/bin/env python3
"""
Google OAuth2 Authentication - Shared authentication for Classroom and Drive.

Handles the token file, the interactive consent flow and service
instantiation for:
- Google Classroom API (courses, own coursework)
- Google Drive API (attachment download)
"""

import os
import json
import logging
from typing import Optional, List, Any

from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build

logger = logging.getLogger(__name__)

# Read-only access is all the assistant needs
SCOPES = [
    "https://www.googleapis.com/auth/classroom.courses.readonly",
    "https://www.googleapis.com/auth/classroom.coursework.me.readonly",
    "https://www.googleapis.com/auth/drive.readonly",
]

# Service API versions
SERVICE_VERSIONS = {
    "classroom": ("classroom", "v1"),
    "drive": ("drive", "v3"),
}

# Default paths
DEFAULT_CREDENTIALS_FILE = "credentials.json"
DEFAULT_TOKEN_FILE = "token.json"


class AuthorizationError(Exception):
    """Raised when the interactive consent flow cannot produce credentials."""


class CredentialStore:
    """
    Persists the user's refresh token as an ``authorized_user`` JSON file.

    The client id/secret written alongside the refresh token are taken from
    the OAuth client secrets file (``installed`` or ``web`` application).
    """

    def __init__(
        self,
        token_file: str = DEFAULT_TOKEN_FILE,
        credentials_file: str = DEFAULT_CREDENTIALS_FILE,
    ):
        self.token_file = token_file
        self.credentials_file = credentials_file

    def load(self) -> Optional[Credentials]:
        """Load saved credentials, or None if the token file is missing or unreadable."""
        try:
            with open(self.token_file, "r") as token:
                info = json.load(token)
            if not info.get("refresh_token"):
                raise ValueError("token file has no refresh token")
            return Credentials.from_authorized_user_info(info)
        except (OSError, ValueError) as e:
            logger.debug(f"No usable token at {self.token_file}: {e}")
            return None

    def save(self, creds: Credentials) -> bool:
        """
        Save credentials to the token file.

        Args:
            creds: Credentials returned by the consent flow

        Returns:
            True if the token file was written
        """
        try:
            with open(self.credentials_file, "r") as f:
                keys = json.load(f)
            key = keys.get("installed") or keys.get("web")
            if not key:
                raise ValueError("client secrets file has no 'installed' or 'web' section")

            payload = {
                "type": "authorized_user",
                "client_id": key["client_id"],
                "client_secret": key["client_secret"],
                "refresh_token": creds.refresh_token,
            }
            with open(self.token_file, "w") as token:
                json.dump(payload, token)
        except (OSError, ValueError, KeyError) as e:
            logger.warning(f"Failed to save token: {e}")
            return False

        logger.info(f"Saved token to {self.token_file}")
        return True


class ConsentFlow:
    """Browser-based OAuth2 consent for an installed application."""

    def __init__(
        self,
        credentials_file: str = DEFAULT_CREDENTIALS_FILE,
        scopes: Optional[List[str]] = None,
    ):
        self.credentials_file = credentials_file
        self.scopes = scopes or SCOPES

    def run(self) -> Credentials:
        """
        Run the interactive flow, always showing the account chooser.

        Consent is requested every time so Google issues a refresh token even
        when the app was granted before.
        """
        if not os.path.exists(self.credentials_file):
            raise AuthorizationError(
                f"Credentials file not found: {self.credentials_file}\n"
                "Download OAuth2 client credentials from Google Cloud Console:\n"
                "1. Go to https://console.cloud.google.com/apis/credentials\n"
                "2. Create OAuth 2.0 Client ID (Desktop application)\n"
                "3. Download JSON and save as 'credentials.json'"
            )

        try:
            flow = InstalledAppFlow.from_client_secrets_file(
                self.credentials_file, self.scopes
            )
            creds = flow.run_local_server(
                port=0,
                success_message="Authentication successful! You may close this window.",
                open_browser=True,
                access_type="offline",
                prompt="consent select_account",
            )
        except Exception as e:
            raise AuthorizationError(f"OAuth flow failed: {e}") from e

        if not creds:
            raise AuthorizationError("OAuth flow returned no credentials")
        if not creds.refresh_token:
            raise AuthorizationError("OAuth flow returned no refresh token")
        return creds


def authorize(store: CredentialStore, consent: ConsentFlow) -> Credentials:
    """
    Return saved credentials, running the consent flow only when none exist.

    Saved credentials are returned as-is; google-auth refreshes the access
    token on first use.

    Raises:
        AuthorizationError: If the consent flow cannot complete
    """
    creds = store.load()
    if creds is not None:
        return creds

    creds = consent.run()
    store.save(creds)
    logger.info("Authorized with Google")
    return creds


class GoogleAuth:
    """
    Google OAuth2 authentication handler.

    Manages credentials and service instantiation for the Classroom and
    Drive APIs.

    Usage:
        auth = GoogleAuth()
        classroom = auth.get_service("classroom")
        drive = auth.get_service("drive")
    """

    def __init__(
        self,
        credentials_file: Optional[str] = None,
        token_file: Optional[str] = None,
        store: Optional[CredentialStore] = None,
        consent: Optional[ConsentFlow] = None,
    ):
        """
        Initialize Google authentication.

        Args:
            credentials_file: Path to OAuth2 client credentials JSON file
                (download from Google Cloud Console)
            token_file: Path to store/load user tokens
            store: Credential store override
            consent: Consent flow override
        """
        self.credentials_file = credentials_file or DEFAULT_CREDENTIALS_FILE
        self.token_file = token_file or DEFAULT_TOKEN_FILE
        self.store = store or CredentialStore(self.token_file, self.credentials_file)
        self.consent = consent or ConsentFlow(self.credentials_file)
        self._credentials: Optional[Credentials] = None
        self._services: dict = {}

    @property
    def credentials(self) -> Credentials:
        """Get current credentials (lazy load)."""
        if self._credentials is None:
            self._credentials = authorize(self.store, self.consent)
        return self._credentials

    def authorize(self) -> Credentials:
        """Authorize now rather than on first service use."""
        return self.credentials

    def get_service(self, service_name: str) -> Any:
        """
        Get an authenticated Google API service.

        Args:
            service_name: One of 'classroom', 'drive'

        Returns:
            Google API service object

        Raises:
            ValueError: If service_name is not recognized
            AuthorizationError: If authentication fails
        """
        if service_name not in SERVICE_VERSIONS:
            raise ValueError(
                f"Unknown service: {service_name}. "
                f"Valid services: {list(SERVICE_VERSIONS.keys())}"
            )

        # Return cached service if available
        if service_name in self._services:
            return self._services[service_name]

        api_name, api_version = SERVICE_VERSIONS[service_name]
        service = build(api_name, api_version, credentials=self.credentials)
        self._services[service_name] = service

        return service


# =============================================================================
# MAIN (for testing)
# =============================================================================

if __name__ == "__main__":
    import sys

    logging.basicConfig(level=logging.INFO)

    print("Google OAuth2 Authentication Test")
    print("=" * 50)

    auth = GoogleAuth()
    print(f"\nCredentials file: {auth.credentials_file}")
    print(f"Token file: {auth.token_file}")
    print(f"Scopes: {len(SCOPES)} requested")

    try:
        for service_name in SERVICE_VERSIONS.keys():
            auth.get_service(service_name)
            print(f"  {service_name}: OK")
    except AuthorizationError as e:
        print(f"Authentication: FAILED - {e}")
        sys.exit(1)
