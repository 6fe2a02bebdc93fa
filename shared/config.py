"""
Centralized configuration for the Paylinks backend.

All settings are loaded from environment variables with sensible defaults.
Integration settings are namespaced by service (SUPABASE_*, STRIPE_*).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Paylinks"
    app_version: str = "0.1.0"
    log_level: str = "INFO"

    # Record store (user credentials)
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    users_table: str = "users"

    # Stripe
    stripe_secret_key: str = ""
    stripe_publishable_key: str = ""


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
