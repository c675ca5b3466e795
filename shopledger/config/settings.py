"""
Configuration Management for Shop Ledger

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Every setting has a working default, so the dashboard starts with no
.env file at all. Environment variables only override.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shopledger.models.reports import Period


class StorageSettings(BaseSettings):
    """Key-value persistence configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SHOPLEDGER_STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    backend: Literal["json_file", "memory"] = Field(
        default="json_file",
        description="Which key-value store backs the ledger"
    )
    data_dir: str = Field(
        default="data",
        description="Directory holding one JSON file per persisted key"
    )
    write_attempts: int = Field(
        default=3,
        ge=1,
        le=5,
        description="How many times a failed file write is attempted"
    )


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="SHOPLEDGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Log at DEBUG and show configuration in the sidebar"
    )

    # Dashboard
    default_period: Period = Field(
        default=Period.ALL,
        description="Reporting period selected when the dashboard opens"
    )
    recent_activity_limit: int = Field(
        default=5,
        ge=1,
        le=50,
        description="How many entries the recent activity feed shows"
    )
    currency_symbol: str = Field(
        default="$",
        max_length=3,
        description="Symbol prefixed to every displayed amount"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Standard library log level name"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept level names the logging module knows."""
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def effective_log_level(self) -> str:
        """DEBUG whenever debug mode is on, the configured level otherwise."""
        return "DEBUG" if self.debug_mode else self.log_level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def storage(self) -> StorageSettings:
        return StorageSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, with a
    "<name>_error" entry describing each failure.
    """
    results = {}

    settings = get_settings()

    try:
        _ = settings.storage
        results["storage"] = True
    except Exception as e:
        results["storage"] = False
        results["storage_error"] = str(e)

    try:
        _ = settings.app
        results["app"] = True
    except Exception as e:
        results["app"] = False
        results["app_error"] = str(e)

    return results
