"""
Tests for startup configuration.
"""

import pytest
from pydantic import ValidationError

from carlog.core.config import Settings


class TestSecrets:
    def test_missing_secrets_are_fatal(self, monkeypatch):
        monkeypatch.delenv("JWT_ACCESS_SECRET", raising=False)
        monkeypatch.delenv("JWT_REFRESH_SECRET", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_identical_secrets_are_fatal(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, JWT_ACCESS_SECRET="same", JWT_REFRESH_SECRET="same")

    def test_defaults(self):
        settings = Settings(_env_file=None, JWT_ACCESS_SECRET="a", JWT_REFRESH_SECRET="b")
        assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 15
        assert settings.REFRESH_TOKEN_EXPIRE_DAYS == 7
        assert settings.MAX_REFRESH_TOKENS == 5


class TestCors:
    def test_comma_separated_origins(self):
        settings = Settings(
            _env_file=None,
            JWT_ACCESS_SECRET="a",
            JWT_REFRESH_SECRET="b",
            BACKEND_CORS_ORIGINS="http://a.test, http://b.test",
        )
        assert settings.cors_origins == ["http://a.test", "http://b.test"]
