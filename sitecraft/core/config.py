"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables
(optionally a local .env file). Nothing here is required: every setting has a
default suitable for local development.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from sitecraft.core.config import get_settings

    settings = get_settings()
    limit = settings.default_page_size

    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sitecraft.core.enums import Environment


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. .env file in the working directory
        3. Default values
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool | None = Field(
        default=None,
        description="Force JSON log output. Defaults to JSON outside development.",
    )

    # Application metadata
    app_name: str = Field(
        default="Sitecraft",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Query defaults
    default_page_size: int = Field(
        default=10,
        ge=1,
        description="Default number of items per page for list queries",
    )
    max_page_size: int = Field(
        default=100,
        ge=1,
        description="Upper bound for a requested page size",
    )
    recent_items_limit: int = Field(
        default=5,
        ge=1,
        description="Default number of items returned by 'recent' queries",
    )

    # Domain events
    events_strict_mode: bool = Field(
        default=False,
        description="Fail at startup when a registered event has no logging handler",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name in any case.

        Returns:
            str: Upper-case log level.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level

    @model_validator(mode="after")
    def validate_page_sizes(self) -> "Settings":
        """
        Ensure the default page size does not exceed the maximum.

        Returns:
            Settings: The validated settings.

        Raises:
            ValueError: If default_page_size > max_page_size.
        """
        if self.default_page_size > self.max_page_size:
            raise ValueError("default_page_size must not exceed max_page_size")
        return self

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """True for both TESTING and CI."""
        return self.environment in (Environment.TESTING, Environment.CI)

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    @property
    def use_json_logs(self) -> bool:
        """Explicit log_json if set, otherwise JSON everywhere but development."""
        if self.log_json is not None:
            return self.log_json
        return not self.is_development


@lru_cache()
def get_settings() -> Settings:
    """Application settings singleton. Tests reset it with get_settings.cache_clear()."""
    return Settings()
