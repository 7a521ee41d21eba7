"""
Average bedtime, consumed by the bedtime-reminder planner.

The average is taken over the last week's evening bedtimes
(:func:`~snoozy.stats.series.sleep_time_data`), skipping today and days
without data.

Clock times are averaged arithmetically by :func:`mean_clock_hours`.
This is wrong for bedtimes straddling midnight (23:45 and 00:15 average
to 12:00); only evening starts (>= 18:00) feed it, which keeps the
values on one side of midnight.  Callers go through this one function so
a circular mean can replace it.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Optional, Sequence

from snoozy.schemas.statistics import Period
from snoozy.stats.periods import DEFAULT_CONFIG, AnyInterval, StatsConfig
from snoozy.stats.series import sleep_time_data


def mean_clock_hours(values: Sequence[float]) -> float:
    """Arithmetic mean of decimal clock hours."""
    return sum(values) / len(values)


def hours_to_clock(value: float) -> datetime.time:
    """19.25 -> 19:15.  Hours truncate, minutes round; 60 minutes carry over."""
    hour = int(value)
    minute = round((value - hour) * 60)
    if minute == 60:
        hour, minute = hour + 1, 0
    return datetime.time(hour % 24, minute)


def average_bedtime(intervals: Iterable[AnyInterval], now: datetime.datetime,
                    config: StatsConfig = DEFAULT_CONFIG, ) -> Optional[datetime.time]:
    """Average evening bedtime of the past week, or ``None`` without data."""
    series = sleep_time_data(intervals, Period.WEEK, now, config)
    values = [point.time_value for point in series if point.has_data and not point.is_today]
    if not values:
        return None
    return hours_to_clock(mean_clock_hours(values))
