"""
Configuration for the EPR CLI.
Loads settings from EPR_* environment variables and .env files.
"""
import logging

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError


DEFAULT_URL = "http://localhost:8042"


class Settings(BaseSettings):
    """
    Defines the CLI's configuration settings.
    Pydantic automatically reads these from environment variables
    (``EPR_URL``, ``EPR_TIMEOUT``, ``EPR_LOG_LEVEL``).

    Command line flags take precedence over these values.
    """
    model_config = SettingsConfigDict(
        env_prefix="EPR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Base URL of the registry service
    url: str = DEFAULT_URL
    # HTTP request timeout in seconds
    timeout: float = 30.0
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level


def get_settings() -> Settings:
    """
    Build settings from the current environment.

    Raises:
        ConfigError: If an EPR_* variable holds an invalid value
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigError(f"invalid configuration: {e}") from e
