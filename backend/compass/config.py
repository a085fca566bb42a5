"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Primary provider (OpenAI)
    openai_api_key: SecretStr | None = None
    openai_model: str = "gpt-4o"

    # Secondary provider (Gemini)
    gemini_api_key: SecretStr | None = None
    gemini_model: str = "gemini-2.5-flash"

    # Per-call provider timeout (milliseconds)
    provider_timeout_ms: int = 15000

    # Recommendations
    recommendation_default_limit: int = 10

    # Chat messages are stored against this user until auth exists
    default_user_id: int = 1

    # Seed catalog (None = bundled fixture)
    catalog_fixture_path: str | None = None

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
