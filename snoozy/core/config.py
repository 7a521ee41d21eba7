"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

import datetime
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Snoozy"
    VERSION: str = "1.0.0"
    PROJECT_URL: str = ""

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./snoozy.db"

    # Calendar days and night keys are computed in this zone whenever the
    # reference "now" carries no tzinfo of its own.
    TIMEZONE: str = "Europe/Berlin"

    # Defaults for the app_settings row
    NOTIFICATIONS_ENABLED: bool = False
    REMINDER_MINUTES_BEFORE: int = 60

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def tzinfo(self) -> datetime.tzinfo:
        return ZoneInfo(self.TIMEZONE)


# Global settings instance
settings = Settings()
