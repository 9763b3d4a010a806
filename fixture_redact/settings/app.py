"""Redaction settings powered by Pydantic BaseSettings."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RedactionSettings(BaseSettings):
    """Centralized environment configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FIXTURE_REDACT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO")
    json_logs: bool = Field(default=True)
    log_sensitive_values: bool = Field(
        default=False,
        description="Include raw secret values in debug events",
    )
    credentials_placeholder_prefix: str = Field(default="SECURITY_", min_length=1)
    parameters_placeholder_prefix: str = Field(default="PARAMS_", min_length=1)
    input_placeholder_prefix: str = Field(default="INPUT_", min_length=1)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            msg = f"Unknown log level: {v}"
            raise ValueError(msg)
        return level

    @property
    def log_level_value(self) -> int:
        """Numeric logging level."""
        value: int = logging.getLevelName(self.log_level)
        return value


def get_settings() -> RedactionSettings:
    """Get a settings instance."""
    return RedactionSettings()
