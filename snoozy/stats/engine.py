"""
Statistics engine facade.

Binds the pure statistics functions to an :class:`IntervalStore` and a
:class:`StatsConfig`.  The engine keeps a copy of the most recently
loaded collection; call :meth:`StatisticsEngine.reload` after the store
changed.  ``now`` is always a parameter (``None`` = wall clock).
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, Optional

from snoozy.schemas.sleep_interval import CompletedSleep
from snoozy.schemas.statistics import DailySleepData, DailyTimeData, Period, SleepSummary
from snoozy.stats.bedtime import average_bedtime
from snoozy.stats.night import night_sleep_durations
from snoozy.stats.periods import DEFAULT_CONFIG, AnyInterval, StatsConfig, filter_entries, resolve_now
from snoozy.stats.series import daily_totals, sleep_time_data, wake_time_data
from snoozy.stats.summary import compute_summary

if TYPE_CHECKING:
    from snoozy.services.interval_store import IntervalStore


class StatisticsEngine:
    """Statistics over the intervals of one store."""

    def __init__(self, store: IntervalStore, config: Optional[StatsConfig] = None):
        self.store = store
        self.config = config or DEFAULT_CONFIG
        self._intervals: Optional[list[AnyInterval]] = None

    @property
    def intervals(self) -> list[AnyInterval]:
        if self._intervals is None:
            self.reload()
        return self._intervals

    def reload(self) -> list[AnyInterval]:
        self._intervals = self.store.load()
        return list(self._intervals)

    # ------------------------------------------------------------------
    # Series
    # ------------------------------------------------------------------

    def daily_totals(self, period: Period, now: Optional[datetime.datetime] = None) -> list[DailySleepData]:
        return daily_totals(self.intervals, period, resolve_now(now), self.config)

    def sleep_time_data(self, period: Period, now: Optional[datetime.datetime] = None) -> list[DailyTimeData]:
        return sleep_time_data(self.intervals, period, resolve_now(now), self.config)

    def wake_time_data(self, period: Period, now: Optional[datetime.datetime] = None) -> list[DailyTimeData]:
        return wake_time_data(self.intervals, period, resolve_now(now), self.config)

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    def entries(self, period: Period, now: Optional[datetime.datetime] = None) -> list[CompletedSleep]:
        return filter_entries(self.intervals, period, resolve_now(now), self.config)

    def night_sleep_durations(self, period: Period,
                              now: Optional[datetime.datetime] = None, ) -> dict[datetime.date, datetime.timedelta]:
        return night_sleep_durations(self.intervals, period, resolve_now(now), self.config)

    def summary(self, period: Period, now: Optional[datetime.datetime] = None) -> SleepSummary:
        return compute_summary(self.intervals, period, resolve_now(now), self.config)

    def average_bedtime(self, now: Optional[datetime.datetime] = None) -> Optional[datetime.time]:
        return average_bedtime(self.intervals, resolve_now(now), self.config)
