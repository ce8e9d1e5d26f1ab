"""Unit tests for Settings.

Tests cover:
- Defaults for token lifetimes and single-use expiries
- Fail-fast validation (short secret, bad duration, bcrypt range)
- Environment helpers
"""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from src.core.config import Settings
from src.core.enums import Environment

VALID = {
    "database_url": "sqlite+aiosqlite:///./test.db",
    "secret_key": "s" * 32,
}


def make_settings(**overrides):
    return Settings(_env_file=None, **{**VALID, **overrides})


@pytest.mark.unit
class TestSettingsDefaults:
    def test_token_lifetime_defaults(self):
        settings = make_settings()

        assert settings.access_token_lifetime == timedelta(minutes=15)
        assert settings.refresh_token_lifetime == timedelta(days=7)
        assert settings.email_verification_expiry_seconds == 86400
        assert settings.password_reset_expiry_seconds == 3600
        assert settings.email_verification_enabled is True

    def test_human_readable_lifetimes(self):
        settings = make_settings(
            access_token_expiry="15 minutes", refresh_token_expiry="30 days"
        )

        assert settings.access_token_lifetime == timedelta(minutes=15)
        assert settings.refresh_token_lifetime == timedelta(days=30)

    def test_frontend_url_trailing_slash_removed(self):
        settings = make_settings(frontend_url="https://app.example.com/")

        assert settings.frontend_url == "https://app.example.com"


@pytest.mark.unit
class TestSettingsValidation:
    def test_short_secret_key_rejected(self):
        with pytest.raises(ValidationError, match="at least 32 bytes"):
            make_settings(secret_key="too-short")

    def test_unparsable_expiry_rejected(self):
        with pytest.raises(ValidationError, match="Invalid duration"):
            make_settings(access_token_expiry="soon")

    def test_zero_expiry_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(refresh_token_expiry="0d")

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_bcrypt_rounds_out_of_range_rejected(self, rounds):
        with pytest.raises(ValidationError, match="between 4 and 31"):
            make_settings(bcrypt_rounds=rounds)

    def test_non_positive_single_use_expiry_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(password_reset_expiry_seconds=0)


@pytest.mark.unit
class TestSettingsEnvironment:
    def test_environment_helpers(self):
        assert make_settings(environment=Environment.DEVELOPMENT).is_development
        assert make_settings(environment=Environment.CI).is_testing
        assert make_settings(environment=Environment.PRODUCTION).is_production

    def test_values_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("ACCESS_TOKEN_EXPIRY", "5m")
        monkeypatch.setenv("EMAIL_VERIFICATION_ENABLED", "false")

        settings = Settings(_env_file=None, **VALID)

        assert settings.access_token_lifetime == timedelta(minutes=5)
        assert settings.email_verification_enabled is False
