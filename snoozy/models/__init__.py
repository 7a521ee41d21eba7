"""SQLModel database models."""

from snoozy.models.profile import AppSettingsRecord, BabyProfileRecord
from snoozy.models.sleep_interval import SleepIntervalRecord

__all__ = [
    "SleepIntervalRecord",
    "BabyProfileRecord",
    "AppSettingsRecord",
]
