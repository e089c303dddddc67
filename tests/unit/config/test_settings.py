"""Tests for Settings configuration class."""

from pathlib import Path

import pytest


class TestSettingsDefaults:
    """Test that Settings loads sensible defaults."""

    def test_settings_loads_with_defaults(self, monkeypatch):
        """Settings should load with default values when no env vars are set."""
        for var in ("DIRECTORY_DB_PATH", "PROFILES_PATH", "LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)

        from talent_match.config.settings import Settings

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.directory_db_path == Path("./data/directory.db")
        assert settings.profiles_path is None
        assert settings.log_level == "INFO"


class TestSettingsFromEnvironment:
    """Test that Settings reads environment variables."""

    def test_settings_reads_environment(self, monkeypatch):
        """Environment variables should override defaults."""
        monkeypatch.setenv("DIRECTORY_DB_PATH", "/tmp/dir.db")
        monkeypatch.setenv("PROFILES_PATH", "pool.yaml")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        from talent_match.config.settings import Settings

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.directory_db_path == Path("/tmp/dir.db")
        assert settings.profiles_path == Path("pool.yaml")
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level_raises(self, monkeypatch):
        """An unknown log level should fail validation."""
        from pydantic import ValidationError

        from talent_match.config.settings import Settings

        monkeypatch.setenv("LOG_LEVEL", "chatty")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)  # type: ignore[call-arg]


class TestSettingsSingleton:
    """Test get_settings / reset_settings."""

    def test_get_settings_returns_same_instance(self):
        """get_settings should cache the instance until reset."""
        from talent_match.config.settings import get_settings, reset_settings

        first = get_settings()
        assert get_settings() is first

        reset_settings()
        assert get_settings() is not first
