"""Tests for settings loaded from the environment."""

import pytest
from pydantic import ValidationError

from shopledger.config import AppSettings, get_settings, validate_all_settings
from shopledger.config.settings import StorageSettings
from shopledger.models import Period


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestAppSettings:
    """Tests for AppSettings."""

    def test_defaults(self):
        settings = AppSettings()
        assert settings.default_period == Period.ALL
        assert settings.recent_activity_limit == 5
        assert settings.currency_symbol == "$"
        assert settings.log_level == "INFO"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("SHOPLEDGER_DEFAULT_PERIOD", "30d")
        monkeypatch.setenv("SHOPLEDGER_RECENT_ACTIVITY_LIMIT", "8")
        monkeypatch.setenv("SHOPLEDGER_LOG_LEVEL", "debug")
        settings = AppSettings()
        assert settings.default_period == Period.LAST_30_DAYS
        assert settings.recent_activity_limit == 8
        assert settings.log_level == "DEBUG"

    def test_debug_mode_forces_debug_logging(self, monkeypatch):
        monkeypatch.setenv("SHOPLEDGER_DEBUG_MODE", "true")
        settings = AppSettings(log_level="WARNING")
        assert settings.debug_mode is True
        assert settings.effective_log_level == "DEBUG"

    def test_effective_level_without_debug(self):
        assert AppSettings(log_level="ERROR").effective_log_level == "ERROR"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            AppSettings(log_level="LOUD")

    def test_limit_range(self):
        with pytest.raises(ValidationError):
            AppSettings(recent_activity_limit=0)


class TestStorageSettings:
    """Tests for StorageSettings."""

    def test_defaults(self):
        settings = StorageSettings()
        assert settings.backend == "json_file"
        assert settings.data_dir == "data"
        assert settings.write_attempts == 3

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("SHOPLEDGER_STORAGE_BACKEND", "memory")
        assert StorageSettings().backend == "memory"

    def test_unknown_backend(self):
        with pytest.raises(ValidationError):
            StorageSettings(backend="redis")


class TestValidateAllSettings:
    """Tests for the startup settings check."""

    def test_all_valid(self):
        results = validate_all_settings()
        assert results == {"storage": True, "app": True}

    def test_reports_invalid_section(self, monkeypatch):
        monkeypatch.setenv("SHOPLEDGER_STORAGE_WRITE_ATTEMPTS", "99")
        results = validate_all_settings()
        assert results["storage"] is False
        assert "storage_error" in results
        assert results["app"] is True


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
