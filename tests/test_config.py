"""Tests for Settings."""

from __future__ import annotations

import pytest

from config import Settings


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for key in ("ENVIRONMENT", "LOG_LEVEL", "HOST", "PORT", "ALLOWED_ORIGINS"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestSettings:
    def test_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        settings = Settings(_env_file=None)
        assert settings.environment == "development"
        assert settings.log_level == "INFO"
        assert settings.port == 3000
        assert settings.is_production is False

    def test_env_overrides(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("PORT", "8080")
        clean_env.setenv("environment", "Production")
        settings = Settings(_env_file=None)
        assert settings.port == 8080
        assert settings.is_production is True

    def test_allowed_origins_list(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test")
        settings = Settings(_env_file=None)
        assert settings.allowed_origins_list == ["http://a.test", "http://b.test"]

    def test_env_file(self, clean_env: pytest.MonkeyPatch, tmp_path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("LOG_LEVEL=DEBUG\n", encoding="utf-8")
        settings = Settings(_env_file=env_file)
        assert settings.log_level == "DEBUG"
