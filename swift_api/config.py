"""
Application Configuration Module

Pydantic Settings for type-safe configuration management.

Values are read from environment variables (case-insensitive) and fall back
to a local .env file, then to the defaults below. Invalid values fail at
startup with a ValidationError instead of surfacing during a request.

Storage Selection
=================
DATABASE_URL is the single switch between the two storage modes:
- unset: ephemeral in-memory SQLite, lost when the process exits
- set (e.g. sqlite:///./books.db): durable store reused across restarts

Usage:
    from swift_api.config import get_settings

    settings = get_settings()
    print(settings.app_name)
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Field(...) is used for required fields with descriptions.
    default=value is used for optional fields with defaults.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(
        default="Books API",
        description="Application name displayed in docs and logs"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (SQL echo, detailed errors)"
    )
    api_version: str = Field(
        default="v1",
        description="API version reported in docs and health checks"
    )
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind the server to"
    )
    port: int = Field(
        default=8001,
        description="Port to bind the server to"
    )
    environment: str = Field(
        default="development",
        description="Environment: development, test, staging, production"
    )

    # -------------------------------------------------------------------------
    # Database Settings
    # -------------------------------------------------------------------------
    database_url: Optional[str] = Field(
        default=None,
        description="Durable store URL; unset selects an in-memory database"
    )
    auto_migrate: bool = Field(
        default=False,
        description="Apply Alembic migrations to a durable store at startup"
    )
    alembic_config: str = Field(
        default="alembic.ini",
        description="Path to the Alembic configuration file"
    )

    # -------------------------------------------------------------------------
    # Listing & Validation Policy
    # -------------------------------------------------------------------------
    max_list_limit: int = Field(
        default=1000,
        ge=1,
        description="Largest 'limit' accepted by GET /books"
    )
    enforce_length_limits: bool = Field(
        default=True,
        description="Reject titles/authors longer than max_text_length"
    )
    max_text_length: int = Field(
        default=100,
        ge=1,
        description="Maximum length of title and author"
    )
    require_cover_url: bool = Field(
        default=True,
        description="Require coverImage to be a well-formed URL"
    )

    # -------------------------------------------------------------------------
    # Rate Limiting Settings
    # -------------------------------------------------------------------------
    rate_limit_enabled: bool = Field(
        default=True,
        description="Enable request rate limiting"
    )
    rate_limit_read: str = Field(
        default="100/minute",
        description="Shared per-client limit for book reads"
    )
    rate_limit_write: str = Field(
        default="30/minute",
        description="Shared per-client limit for book writes"
    )

    # -------------------------------------------------------------------------
    # CORS Settings
    # -------------------------------------------------------------------------
    allowed_origins: str = Field(
        default="http://localhost:3000,http://localhost:8080",
        description="Comma-separated list of allowed CORS origins"
    )

    # -------------------------------------------------------------------------
    # Logging Settings
    # -------------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def allowed_origins_list(self) -> List[str]:
        """Parse comma-separated CORS origins into a list."""
        return [
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        ]

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def docs_enabled(self) -> bool:
        """Interactive documentation is only mounted in development."""
        return self.environment == "development"

    @property
    def uses_memory_database(self) -> bool:
        """True when no durable store is configured."""
        return not self.database_url

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate that log_level is a valid Python logging level.

        Returns:
            The validated value (uppercase)

        Raises:
            ValueError: If log level is invalid
        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is a known value."""
        valid_envs = {"development", "test", "staging", "production"}
        if v.lower() not in valid_envs:
            raise ValueError(f"environment must be one of {valid_envs}")
        return v.lower()

    @field_validator("database_url")
    @classmethod
    def blank_database_url_is_unset(cls, v: Optional[str]) -> Optional[str]:
        """An empty DATABASE_URL means the same as an absent one."""
        if v is None or not v.strip():
            return None
        return v.strip()


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    The first call reads the environment and .env and validates them;
    later calls return the same instance.

    Returns:
        Cached Settings instance
    """
    return Settings()
