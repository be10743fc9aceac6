"""Tests for credential verification."""

import hashlib

from oracle.auth import SettingsCredentialVerifier


def digest(password):
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


class TestSettingsCredentialVerifier:
    def test_unconfigured_refuses_everyone(self):
        verifier = SettingsCredentialVerifier()

        assert verifier.configured is False
        assert verifier.verify("admin", "").authenticated is False

    def test_valid_credentials(self):
        verifier = SettingsCredentialVerifier("analyst", digest("s3cret"))

        result = verifier.verify("analyst", "s3cret")

        assert result.authenticated is True
        assert result.username == "analyst"
        assert len(result.token) > 20

    def test_tokens_are_unique(self):
        verifier = SettingsCredentialVerifier("analyst", digest("s3cret"))
        assert verifier.verify("analyst", "s3cret").token != verifier.verify("analyst", "s3cret").token

    def test_wrong_password(self):
        verifier = SettingsCredentialVerifier("analyst", digest("s3cret"))

        result = verifier.verify("analyst", "guess")

        assert result.authenticated is False
        assert result.token is None

    def test_wrong_username(self):
        verifier = SettingsCredentialVerifier("analyst", digest("s3cret"))
        assert verifier.verify("admin", "s3cret").authenticated is False

    def test_uppercase_digest_accepted(self):
        verifier = SettingsCredentialVerifier("analyst", digest("s3cret").upper())
        assert verifier.verify("analyst", "s3cret").authenticated is True
