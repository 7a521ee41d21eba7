"""
Aggregate statistics over a period.

Every aggregate works on :func:`~snoozy.stats.periods.filter_entries`,
i.e. completed entries only; an ongoing sleep is never counted here.
Averages divide by the number of **distinct days with data** (never the
window length) and the divisor is clamped to 1, so an empty period
yields zeros rather than an error.

Longest and shortest are deliberately asymmetric:

- ``longest_sleep`` compares individual daytime naps with **merged**
  night totals, so a night split at midnight counts as one block;
- ``shortest_sleep`` looks at individual entries only, split halves
  included.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Sequence

from snoozy.schemas.sleep_interval import CompletedSleep
from snoozy.schemas.statistics import Period, SleepSummary
from snoozy.stats.night import group_by_night, is_night_start
from snoozy.stats.periods import DEFAULT_CONFIG, AnyInterval, StatsConfig, filter_entries, local_day

_ZERO = datetime.timedelta(0)

# ======================================================================
# Building blocks (operate on already-filtered entries)
# ======================================================================


def _unique_days(entries: Sequence[CompletedSleep], tz: datetime.tzinfo) -> int:
    days = {local_day(e.start_time, tz) for e in entries}
    return max(len(days), 1)


def _total_duration(entries: Sequence[CompletedSleep]) -> datetime.timedelta:
    return sum((e.duration() for e in entries), _ZERO)


def _average_night(entries: Sequence[CompletedSleep], tz: datetime.tzinfo,
                   config: StatsConfig) -> datetime.timedelta:
    nights = group_by_night(entries, tz, config)
    if not nights:
        return _ZERO
    return sum(nights.values(), _ZERO) / len(nights)


def _longest(entries: Sequence[CompletedSleep], tz: datetime.tzinfo, config: StatsConfig) -> datetime.timedelta:
    naps = [e.duration() for e in entries if not is_night_start(e.start_time, tz, config)]
    nights = list(group_by_night(entries, tz, config).values())
    return max(naps + nights, default=_ZERO)


def _shortest(entries: Sequence[CompletedSleep]) -> datetime.timedelta:
    # Individual records only; see module docstring.
    return min((e.duration() for e in entries), default=_ZERO)


# ======================================================================
# Public API
# ======================================================================


def unique_days(intervals: Iterable[AnyInterval], period: Period, now: datetime.datetime,
                config: StatsConfig = DEFAULT_CONFIG, ) -> int:
    return _unique_days(filter_entries(intervals, period, now, config), now.tzinfo)


def total_sleep_duration(intervals: Iterable[AnyInterval], period: Period, now: datetime.datetime,
                         config: StatsConfig = DEFAULT_CONFIG, ) -> datetime.timedelta:
    return _total_duration(filter_entries(intervals, period, now, config))


def average_daily_sleep(intervals: Iterable[AnyInterval], period: Period, now: datetime.datetime,
                        config: StatsConfig = DEFAULT_CONFIG, ) -> datetime.timedelta:
    entries = filter_entries(intervals, period, now, config)
    return _total_duration(entries) / _unique_days(entries, now.tzinfo)


def average_sleep_sessions(intervals: Iterable[AnyInterval], period: Period, now: datetime.datetime,
                           config: StatsConfig = DEFAULT_CONFIG, ) -> float:
    entries = filter_entries(intervals, period, now, config)
    return len(entries) / _unique_days(entries, now.tzinfo)


def average_night_sleep(intervals: Iterable[AnyInterval], period: Period, now: datetime.datetime,
                        config: StatsConfig = DEFAULT_CONFIG, ) -> datetime.timedelta:
    return _average_night(filter_entries(intervals, period, now, config), now.tzinfo, config)


def longest_sleep(intervals: Iterable[AnyInterval], period: Period, now: datetime.datetime,
                  config: StatsConfig = DEFAULT_CONFIG, ) -> datetime.timedelta:
    return _longest(filter_entries(intervals, period, now, config), now.tzinfo, config)


def shortest_sleep(intervals: Iterable[AnyInterval], period: Period, now: datetime.datetime,
                   config: StatsConfig = DEFAULT_CONFIG, ) -> datetime.timedelta:
    return _shortest(filter_entries(intervals, period, now, config))


def total_entries(intervals: Iterable[AnyInterval], period: Period, now: datetime.datetime,
                  config: StatsConfig = DEFAULT_CONFIG, ) -> int:
    return len(filter_entries(intervals, period, now, config))


def has_data(intervals: Iterable[AnyInterval], period: Period, now: datetime.datetime,
             config: StatsConfig = DEFAULT_CONFIG, ) -> bool:
    return bool(filter_entries(intervals, period, now, config))


def compute_summary(intervals: Iterable[AnyInterval], period: Period, now: datetime.datetime,
                    config: StatsConfig = DEFAULT_CONFIG, ) -> SleepSummary:
    """Compute every aggregate in one pass over the filtered entries."""
    entries = filter_entries(intervals, period, now, config)
    tz = now.tzinfo
    days = _unique_days(entries, tz)

    return SleepSummary(
        period=period,
        average_daily_sleep=_total_duration(entries) / days,
        average_sleep_sessions=len(entries) / days,
        average_night_sleep=_average_night(entries, tz, config),
        longest_sleep=_longest(entries, tz, config),
        shortest_sleep=_shortest(entries),
        total_entries=len(entries),
        unique_days=days,
        has_data=bool(entries),
    )
