"""
Tests for Application Settings
"""

import pytest
from pydantic import ValidationError

from swift_api.config import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.delenv("RATE_LIMIT_ENABLED", raising=False)

        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.database_url is None
        assert settings.uses_memory_database
        assert settings.max_list_limit == 1000
        assert settings.enforce_length_limits
        assert settings.max_text_length == 100
        assert settings.require_cover_url
        assert settings.rate_limit_enabled
        assert not settings.auto_migrate

    def test_database_url_from_environment(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite:///./books.db")

        settings = Settings()

        assert settings.database_url == "sqlite:///./books.db"
        assert not settings.uses_memory_database

    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            Settings(environment="qa")

    def test_max_list_limit_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(max_list_limit=0)

    @pytest.mark.parametrize(
        ("environment", "expected"),
        [
            ("development", True),
            ("test", False),
            ("staging", False),
            ("production", False),
        ],
    )
    def test_docs_only_in_development(self, environment, expected):
        assert Settings(environment=environment).docs_enabled is expected

    def test_allowed_origins_list(self):
        settings = Settings(allowed_origins="http://a.example, http://b.example,")

        assert settings.allowed_origins_list == ["http://a.example", "http://b.example"]

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
