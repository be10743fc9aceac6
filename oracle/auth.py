"""
Auth - Credential verification behind a pluggable collaborator.

The API never checks credentials itself; it asks a CredentialVerifier. The
default implementation compares against a username and SHA-256 password
digest from settings and refuses every login when none is configured.
Deployments with a real identity provider supply their own verifier through
the FastAPI dependency override for get_credential_verifier.
"""

import hashlib
import hmac
import secrets
from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass
class LoginResult:
    authenticated: bool
    username: str
    token: Optional[str] = None


class CredentialVerifier(Protocol):
    """Checks credentials and issues session tokens."""

    def verify(self, username: str, password: str) -> LoginResult: ...


class SettingsCredentialVerifier:
    """Verifies against a single configured account."""

    def __init__(self, username: str = "", password_sha256: str = ""):
        self._username = username
        self._password_sha256 = password_sha256.lower()

    @property
    def configured(self) -> bool:
        return bool(self._username and self._password_sha256)

    def verify(self, username: str, password: str) -> LoginResult:
        if not self.configured:
            return LoginResult(authenticated=False, username=username)

        digest = hashlib.sha256(password.encode("utf-8")).hexdigest()
        ok = hmac.compare_digest(username, self._username) and hmac.compare_digest(
            digest, self._password_sha256
        )
        if not ok:
            return LoginResult(authenticated=False, username=username)
        return LoginResult(authenticated=True, username=username, token=secrets.token_urlsafe(32))
