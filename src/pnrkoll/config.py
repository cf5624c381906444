"""
pnrkoll configuration management using pydantic-settings.

Values come from PNRKOLL_* environment variables or a .env file.
"""

import logging
from datetime import date
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pnrkoll.swedish.messages import SUPPORTED_LANGUAGES


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PNRKOLL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", description="Logging level")

    language: str = Field(
        default="sv",
        description="Language for console text and error messages: sv or en",
    )

    quit_command: str = Field(
        default="q",
        description="Input that ends the interactive session (case-insensitive)",
    )

    reference_date: Optional[date] = Field(
        default=None,
        description="Date used instead of today when resolving the century",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        language = v.lower()
        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(f"LANGUAGE must be one of {SUPPORTED_LANGUAGES}")
        return language

    @field_validator("quit_command")
    @classmethod
    def validate_quit_command(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("QUIT_COMMAND must not be blank")
        return v.strip()


# Global settings instance
settings = Settings()
