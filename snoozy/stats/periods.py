"""
Reporting windows and local-time helpers shared by every statistic.

All statistics are computed against an explicit reference ``now``.
Calendar days, hours of day and night keys are read in ``now``'s own
timezone, so the caller decides what "local" means.  A naive ``now`` is
interpreted in the configured ``TIMEZONE``.

Two window notions coexist:

- **series windows** — the N calendar days ending today (N = 7 for week
  and for ``all``, 30 for month), one chart point per day;
- **entry windows** — completed entries whose start lies within the last
  7 / 30 days before ``now`` (no lower bound for ``all``), used by the
  scalar aggregates.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Optional, Union

from pydantic import BaseModel, Field

from snoozy.core.config import settings
from snoozy.schemas.sleep_interval import CompletedSleep, OngoingSleep
from snoozy.schemas.statistics import Period

# ======================================================================
# Configuration
# ======================================================================

_DEFAULT_WEEKDAY_LABELS: list[str] = ["Mo", "Di", "Mi", "Do", "Fr", "Sa", "So"]


class StatsConfig(BaseModel):
    """Thresholds and window lengths for the statistics engine."""

    week_days: int = Field(7, ge=1)
    month_days: int = Field(30, ge=1)

    # A sleep starting at or after night_start_hour, or before
    # night_end_hour, is night sleep.
    night_start_hour: int = Field(18, ge=0, le=23)
    night_end_hour: int = Field(6, ge=0, le=23)

    # Morning wake-ups are read from sleeps ending in [start, end).
    wake_window_start_hour: int = Field(4, ge=0, le=23)
    wake_window_end_hour: int = Field(12, ge=1, le=24)

    # Monday first, as datetime.date.weekday()
    weekday_labels: list[str] = Field(default_factory=lambda: list(_DEFAULT_WEEKDAY_LABELS), min_length=7,
                                      max_length=7, )

    def series_days(self, period: Period) -> int:
        """Chart length; ``all`` falls back to the week view."""
        if period == Period.MONTH:
            return self.month_days
        return self.week_days

    def lookback(self, period: Period) -> Optional[datetime.timedelta]:
        """Entry window length, or ``None`` for no lower bound."""
        if period == Period.WEEK:
            return datetime.timedelta(days=self.week_days)
        if period == Period.MONTH:
            return datetime.timedelta(days=self.month_days)
        return None


DEFAULT_CONFIG = StatsConfig()

AnyInterval = Union[OngoingSleep, CompletedSleep]

# ======================================================================
# Time helpers
# ======================================================================


def resolve_now(now: Optional[datetime.datetime] = None) -> datetime.datetime:
    """Return an aware reference time (wall clock when ``now`` is None)."""
    if now is None:
        return datetime.datetime.now(settings.tzinfo)
    if now.tzinfo is None:
        return now.replace(tzinfo=settings.tzinfo)
    return now


def local_day(ts: datetime.datetime, tz: datetime.tzinfo) -> datetime.date:
    return ts.astimezone(tz).date()


def local_hour(ts: datetime.datetime, tz: datetime.tzinfo) -> int:
    return ts.astimezone(tz).hour


def clock_hours(ts: datetime.datetime, tz: datetime.tzinfo) -> float:
    """Clock time as decimal hours, minute precision (19:30 -> 19.5)."""
    local = ts.astimezone(tz)
    return local.hour + local.minute / 60.0


def clock_label(ts: datetime.datetime, tz: datetime.tzinfo) -> str:
    return ts.astimezone(tz).strftime("%H:%M")


# ======================================================================
# Windows
# ======================================================================


def window_days(period: Period, now: datetime.datetime, config: StatsConfig = DEFAULT_CONFIG, ) -> list[datetime.date]:
    """The series window: calendar days ending today, oldest first."""
    today = now.date()
    days = config.series_days(period)
    return [today - datetime.timedelta(days=offset) for offset in range(days - 1, -1, -1)]


def day_label(day: datetime.date, period: Period, config: StatsConfig = DEFAULT_CONFIG) -> str:
    """Weekday abbreviation for week charts, day-of-month for month charts."""
    if period == Period.MONTH:
        return str(day.day)
    return config.weekday_labels[day.weekday()]


def filter_entries(intervals: Iterable[AnyInterval], period: Period, now: datetime.datetime,
                   config: StatsConfig = DEFAULT_CONFIG, ) -> list[CompletedSleep]:
    """Completed entries of the entry window, ordered by start."""
    lookback = config.lookback(period)
    cutoff = now - lookback if lookback is not None else None
    entries = [i for i in intervals if
               isinstance(i, CompletedSleep) and (cutoff is None or i.start_time >= cutoff)]
    return sorted(entries, key=lambda e: e.start_time)
