"""
Backup file schemas.

The export document mirrors the mobile app's JSON backup::

    {
      "metadata":     {"exportDate": "...", "appVersion": "1.0.0"},
      "babyProfile":  {...},
      "appSettings":  {"notificationsEnabled": true, "reminderMinutesBefore": 60},
      "sleepEntries": [{"id": "...", "startTime": "...", "endTime": null}, ...]
    }

Timestamps are ISO-8601 with offset; ``endTime: null`` marks the ongoing
sleep and must survive a round trip.
"""

import datetime
import uuid
from typing import Optional, Union

from pydantic import AwareDatetime, Field

from snoozy.schemas.profile import AppSettings, BabyProfile, CamelModel
from snoozy.schemas.sleep_interval import CompletedSleep, OngoingSleep, build_interval


class ExportMetadata(CamelModel):
    export_date: AwareDatetime
    app_version: str


class SleepEntryExport(CamelModel):
    """One sleep interval in the backup file."""

    id: uuid.UUID
    start_time: AwareDatetime
    end_time: Optional[AwareDatetime] = None

    @classmethod
    def from_interval(cls, interval: Union[OngoingSleep, CompletedSleep]) -> "SleepEntryExport":
        return cls(id=interval.id, start_time=interval.start_time, end_time=interval.end_time)

    def to_interval(self) -> Union[OngoingSleep, CompletedSleep]:
        return build_interval(self.start_time, self.end_time, interval_id=self.id)


class ExportData(CamelModel):
    """The complete backup document."""

    metadata: ExportMetadata
    baby_profile: BabyProfile
    app_settings: AppSettings
    sleep_entries: list[SleepEntryExport] = Field(default_factory=list)
