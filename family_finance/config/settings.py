"""
Configuration Management for Family Finance

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
There are no external services, so the only knobs are where name
overrides live and how logs are rendered.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FamilyFinanceSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from FAMILY_FINANCE_* environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="FAMILY_FINANCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Name store
    names_store_path: Optional[str] = Field(
        default=None,
        description="JSON file holding member name overrides (in-memory if unset)"
    )
    name_key_prefix: str = Field(
        default="member_name_",
        min_length=1,
        description="Prefix of the store key for a member's display name"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Minimum log level"
    )
    json_logs: bool = Field(
        default=True,
        description="Render logs as JSON (console renderer otherwise)"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept stdlib level names."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def log_level_number(self) -> int:
        """Get the log level as a stdlib logging constant."""
        return logging.getLevelName(self.log_level)


@lru_cache()
def get_settings() -> FamilyFinanceSettings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return FamilyFinanceSettings()
