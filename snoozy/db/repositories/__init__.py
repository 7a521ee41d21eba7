"""Database repositories."""

from snoozy.db.repositories.profile import AppSettingsRepository, BabyProfileRepository
from snoozy.db.repositories.sleep_interval import SleepIntervalRepository

__all__ = [
    "SleepIntervalRepository",
    "BabyProfileRepository",
    "AppSettingsRepository",
]
