"""Configuration management using pydantic-settings."""

from flask import current_app
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = "development"
    port: int = 3000
    api_prefix: str = "/api"
    cors_origins: list[str] = ["http://localhost:3000"]

    # MongoDB Configuration
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db_name: str = "backend_template"
    mongo_timeout_ms: int = 5000

    # JWT Configuration
    # JWT_SECRET is accepted for compatibility with existing deployments
    jwt_secret_key: str = Field(
        default="change-me-in-production-use-env-var",
        validation_alias=AliasChoices("jwt_secret_key", "jwt_secret"),
    )
    jwt_expiry_seconds: int = 3600

    # Bcrypt work factor (higher = more secure but slower)
    # For tests, use 4 for faster execution while maintaining functionality
    bcrypt_work_factor: int = 10

    # Logging Configuration
    log_level: str = "INFO"
    # When set, error.log and combined.log are written to this directory
    log_dir: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


SETTINGS_KEY = "backend_template.settings"


def get_settings() -> Settings:
    """Return the Settings attached to the current Flask app."""
    return current_app.extensions[SETTINGS_KEY]
