"""
API configuration using Pydantic Settings.

Loads server, session and CORS configuration from environment variables
with sensible defaults.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """API configuration settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Server settings
    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False
    reload: bool = False
    environment: str = "development"

    # Session settings
    session_secret: str = "your-secret-key"
    session_cookie: str = "session"
    session_max_age: int = 24 * 60 * 60  # seconds

    # CORS settings
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = False
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    @property
    def is_production(self) -> bool:
        """Whether production transport security applies."""
        return self.environment.lower() == "production"


def get_settings() -> APISettings:
    """Get settings instance."""
    return APISettings()
