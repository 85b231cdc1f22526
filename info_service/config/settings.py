"""Typed runtime settings with dotenv support and startup validation."""

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for API runtime identification and binding.

    Environment variable names map directly to field names in uppercase.
    Example: `environment_name` reads from `ENVIRONMENT_NAME`.

    Attributes:
        application_name: Application name reported by informational endpoints.
        application_version: Application version reported by informational endpoints.
        application_description: Description published in the OpenAPI document.
        environment_name: Runtime environment label.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        log_level: Root logging level name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    application_name: str = Field(default="learn-python", min_length=1)
    application_version: str = Field(default="1.0.0", min_length=1)
    application_description: str = Field(
        default="A learning project for FastAPI with runtime introspection endpoints"
    )
    environment_name: str = Field(default="development", min_length=1)
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=8080, ge=1, le=65535)
    log_level: str = Field(default="INFO")

    @field_validator("application_name", "application_version", "environment_name")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return normalized_value

    @property
    def is_production(self) -> bool:
        """Return whether the runtime environment is flagged as production.

        Returns:
            bool: True when `environment_name` equals `production` ignoring case.
        """

        return self.environment_name.lower() == "production"


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
