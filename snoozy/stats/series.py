"""
Per-day chart series.

Each series has exactly one point per day of the series window
(oldest first, ``index`` 0..N-1):

- :func:`daily_totals`    — hours slept per day, bucketed by start day;
  an ongoing sleep counts up to ``now``.
- :func:`sleep_time_data` — earliest evening (>= 18:00) start of a
  completed sleep on that day.
- :func:`wake_time_data`  — earliest morning (04:00-12:00) end of a
  completed sleep on that day, i.e. the end of the night.

Days without a qualifying sleep get ``has_data=False``, ``time_value=0``
and the ``"--:--"`` placeholder.
"""

from __future__ import annotations

import datetime
from typing import Callable, Iterable, Optional

from snoozy.schemas.sleep_interval import CompletedSleep
from snoozy.schemas.statistics import DailySleepData, DailyTimeData, Period
from snoozy.stats.periods import (
    DEFAULT_CONFIG,
    AnyInterval,
    StatsConfig,
    clock_hours,
    clock_label,
    day_label,
    local_day,
    local_hour,
    window_days,
)

NO_TIME_LABEL = "--:--"

_ZERO = datetime.timedelta(0)


def daily_totals(intervals: Iterable[AnyInterval], period: Period, now: datetime.datetime,
                 config: StatsConfig = DEFAULT_CONFIG, ) -> list[DailySleepData]:
    """Hours slept per calendar day of the series window."""
    tz = now.tzinfo
    today = now.date()
    totals: dict[datetime.date, datetime.timedelta] = {}
    for interval in intervals:
        day = local_day(interval.start_time, tz)
        # Clamp records whose end precedes their start
        totals[day] = totals.get(day, _ZERO) + max(interval.duration(now), _ZERO)

    data: list[DailySleepData] = []
    for index, day in enumerate(window_days(period, now, config)):
        hours = totals.get(day, _ZERO).total_seconds() / 3600.0
        data.append(DailySleepData(date=day, total_hours=hours, day_label=day_label(day, period, config),
                                   is_today=day == today, index=index, ))
    return data


def _time_series(period: Period, now: datetime.datetime, config: StatsConfig,
                 pick: Callable[[datetime.date], Optional[datetime.datetime]], ) -> list[DailyTimeData]:
    tz = now.tzinfo
    today = now.date()
    data: list[DailyTimeData] = []
    for index, day in enumerate(window_days(period, now, config)):
        ts = pick(day)
        label = day_label(day, period, config)
        if ts is None:
            data.append(DailyTimeData(date=day, time_value=0.0, time_label=NO_TIME_LABEL, day_label=label,
                                      is_today=day == today, has_data=False, index=index, ))
        else:
            data.append(DailyTimeData(date=day, time_value=clock_hours(ts, tz), time_label=clock_label(ts, tz),
                                      day_label=label, is_today=day == today, has_data=True, index=index, ))
    return data


def sleep_time_data(intervals: Iterable[AnyInterval], period: Period, now: datetime.datetime,
                    config: StatsConfig = DEFAULT_CONFIG, ) -> list[DailyTimeData]:
    """Evening bedtime per day of the series window."""
    tz = now.tzinfo
    bedtimes: dict[datetime.date, datetime.datetime] = {}
    for entry in intervals:
        if not isinstance(entry, CompletedSleep):
            continue
        if local_hour(entry.start_time, tz) < config.night_start_hour:
            continue
        day = local_day(entry.start_time, tz)
        if day not in bedtimes or entry.start_time < bedtimes[day]:
            bedtimes[day] = entry.start_time

    return _time_series(period, now, config, bedtimes.get)


def wake_time_data(intervals: Iterable[AnyInterval], period: Period, now: datetime.datetime,
                   config: StatsConfig = DEFAULT_CONFIG, ) -> list[DailyTimeData]:
    """Morning wake-up per day of the series window."""
    tz = now.tzinfo
    wakeups: dict[datetime.date, datetime.datetime] = {}
    for entry in intervals:
        if not isinstance(entry, CompletedSleep):
            continue
        hour = local_hour(entry.end_time, tz)
        if not config.wake_window_start_hour <= hour < config.wake_window_end_hour:
            continue
        day = local_day(entry.end_time, tz)
        if day not in wakeups or entry.end_time < wakeups[day]:
            wakeups[day] = entry.end_time

    return _time_series(period, now, config, wakeups.get)
