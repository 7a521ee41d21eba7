"""Pydantic schemas for domain values and request/response validation."""

from snoozy.schemas.backup import ExportData, ExportMetadata, SleepEntryExport
from snoozy.schemas.profile import AppSettings, BabyProfile
from snoozy.schemas.sleep_interval import (
    CompletedSleep,
    ManualEntryCreate,
    OngoingSleep,
    SleepInterval,
    SleepIntervalResponse,
    SleepIntervalUpdate,
    build_interval,
)
from snoozy.schemas.statistics import (
    BedtimeResponse,
    DailySleepData,
    DailyTimeData,
    Period,
    ReminderPlan,
    SleepSummary,
)

__all__ = [
    "OngoingSleep",
    "CompletedSleep",
    "SleepInterval",
    "SleepIntervalUpdate",
    "SleepIntervalResponse",
    "ManualEntryCreate",
    "build_interval",
    "Period",
    "DailySleepData",
    "DailyTimeData",
    "SleepSummary",
    "BedtimeResponse",
    "ReminderPlan",
    "BabyProfile",
    "AppSettings",
    "ExportData",
    "ExportMetadata",
    "SleepEntryExport",
]
