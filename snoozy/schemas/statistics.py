"""
Sleep statistics schemas.

Chart series (one point per calendar day) and the scalar summary
returned by the statistics engine.  Durations are ``timedelta``; the
``*_hm`` helpers give the (hours, minutes) pair summary cards display.
"""

import datetime
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field


class Period(str, Enum):
    """Reporting horizon."""

    WEEK = "week"
    MONTH = "month"
    ALL = "all"


def hours_minutes(value: datetime.timedelta) -> tuple[int, int]:
    """Split a duration into whole hours and remaining whole minutes."""
    seconds = max(int(value.total_seconds()), 0)
    return seconds // 3600, (seconds % 3600) // 60


class DailySleepData(BaseModel):
    """Total sleep on one calendar day (bar chart point)."""

    date: datetime.date
    total_hours: float = Field(..., ge=0.0)
    day_label: str
    is_today: bool
    index: int = Field(..., description="Position on the x-axis, 0 = oldest day")


class DailyTimeData(BaseModel):
    """A clock time on one calendar day (sleep-start or wake-up chart point)."""

    date: datetime.date
    time_value: float = Field(..., description="Hours as decimal, e.g. 19.5 = 19:30; 0 without data")
    time_label: str = Field(..., description="HH:MM, or '--:--' without data")
    day_label: str
    is_today: bool
    has_data: bool
    index: int


class SleepSummary(BaseModel):
    """Aggregate statistics over the completed entries of a period."""

    period: Period
    average_daily_sleep: datetime.timedelta
    average_sleep_sessions: float
    average_night_sleep: datetime.timedelta
    longest_sleep: datetime.timedelta
    shortest_sleep: datetime.timedelta
    total_entries: int
    unique_days: int = Field(..., ge=1, description="Distinct days with entries, at least 1")
    has_data: bool

    @property
    def average_daily_sleep_hm(self) -> tuple[int, int]:
        return hours_minutes(self.average_daily_sleep)

    @property
    def average_night_sleep_hm(self) -> tuple[int, int]:
        return hours_minutes(self.average_night_sleep)

    @property
    def longest_sleep_hm(self) -> tuple[int, int]:
        return hours_minutes(self.longest_sleep)

    @property
    def shortest_sleep_hm(self) -> tuple[int, int]:
        return hours_minutes(self.shortest_sleep)


class BedtimeResponse(BaseModel):
    """Average evening bedtime of the last week (``None`` without data)."""

    bedtime: Optional[datetime.time]
    has_data: bool


class ReminderPlan(BaseModel):
    """What the notification collaborator should do with the bedtime reminder."""

    action: Literal["schedule", "cancel"]
    reason: str
    bedtime: Optional[datetime.time] = None
    reminder_time: Optional[datetime.time] = None
    minutes_before: Optional[int] = None
    title: Optional[str] = None
    body: Optional[str] = None
