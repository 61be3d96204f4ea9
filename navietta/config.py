"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
- geocoding endpoint and credentials
- LLM model, key and token budgets
- mock generator behaviour
- logging and server settings

Configuration can be overridden via environment variables:
- NAV_GEO_USERNAME=myaccount (or GEONAMES_USERNAME)
- NAV_LLM_API_KEY=sk-... (or ANTHROPIC_API_KEY)
- NAV_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeoNamesConfig(BaseSettings):
    """Geocoding configuration.

    Environment variables prefixed with NAV_GEO_.
    """

    model_config = SettingsConfigDict(env_prefix="NAV_GEO_", populate_by_name=True)

    enabled: bool = True
    base_url: str = "http://api.geonames.org/searchJSON"
    username: str = Field(
        default="demo",
        validation_alias=AliasChoices("NAV_GEO_USERNAME", "GEONAMES_USERNAME"),
    )
    max_rows: int = 5
    feature_classes: tuple[str, ...] = ("P", "A")
    # None keeps the transport default
    timeout_seconds: Optional[float] = None


class ValidationConfig(BaseSettings):
    """Journey validation configuration.

    Environment variables prefixed with NAV_VALIDATION_.
    """

    model_config = SettingsConfigDict(env_prefix="NAV_VALIDATION_")

    report_all_failures: bool = False


class LLMConfig(BaseSettings):
    """LLM recommendation configuration.

    Environment variables prefixed with NAV_LLM_.
    """

    model_config = SettingsConfigDict(env_prefix="NAV_LLM_", populate_by_name=True)

    api_key: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("NAV_LLM_API_KEY", "ANTHROPIC_API_KEY"),
    )
    model: str = "claude-sonnet-4-20250514"
    max_tokens_recommendations: int = 2500
    max_tokens_follow_up: int = 1000

    @property
    def is_configured(self) -> bool:
        """True when a non-empty API key is available."""
        return self.api_key is not None and bool(self.api_key.get_secret_value())


class MockConfig(BaseSettings):
    """Mock recommendation generator configuration.

    Environment variables prefixed with NAV_MOCK_.
    """

    model_config = SettingsConfigDict(env_prefix="NAV_MOCK_")

    delay_seconds: float = 0.0


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with NAV_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="NAV_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class ServerConfig(BaseSettings):
    """HTTP server configuration.

    Environment variables prefixed with NAV_SERVER_.
    """

    model_config = SettingsConfigDict(env_prefix="NAV_SERVER_")

    host: str = "127.0.0.1"
    port: int = 3000


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.geocoding.username)
        print(config.llm.is_configured)

    Environment variables prefixed with NAV_.
    """

    model_config = SettingsConfigDict(env_prefix="NAV_")

    geocoding: GeoNamesConfig = Field(default_factory=GeoNamesConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    llm: LLMConfig = Field(default_factory=LLMConfig)
    mock: MockConfig = Field(default_factory=MockConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
