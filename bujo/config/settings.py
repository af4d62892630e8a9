"""
Configuration Settings
======================

Centralized configuration using Pydantic V2 Settings.
"""

from typing import List
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bujo.core.constants import DEFAULT_TIMEZONE, MissingLabelPolicy


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_env: str = Field(default="development")
    app_debug: bool = Field(default=False)
    database_url: str = Field(default="sqlite:///./data/bujo.db")
    default_timezone: str = Field(default=DEFAULT_TIMEZONE)
    admin_users: List[str] = Field(default_factory=list)
    missing_label_policy: MissingLabelPolicy = Field(default=MissingLabelPolicy.DROP)

    @field_validator("default_timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Reject names the zoneinfo database does not know."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown timezone: {v}")
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
