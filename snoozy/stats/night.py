"""
Night-sleep grouping.

A night spans two calendar days, and a sleep that runs past midnight is
usually stored as two records (the manual-entry split).  For reporting,
night sleep is re-merged under a **night key**: the calendar day of the
evening the night belongs to.

- start hour >= 18  -> night key = start day
- start hour <  6   -> night key = previous day (01:00 continues last night)
- otherwise         -> daytime nap, not night sleep
"""

from __future__ import annotations

import datetime
from collections import defaultdict
from typing import Iterable, Optional

from snoozy.schemas.sleep_interval import CompletedSleep
from snoozy.schemas.statistics import Period
from snoozy.stats.periods import DEFAULT_CONFIG, AnyInterval, StatsConfig, filter_entries, local_day, local_hour


def is_night_start(ts: datetime.datetime, tz: datetime.tzinfo, config: StatsConfig = DEFAULT_CONFIG) -> bool:
    hour = local_hour(ts, tz)
    return hour >= config.night_start_hour or hour < config.night_end_hour


def night_key(ts: datetime.datetime, tz: datetime.tzinfo,
              config: StatsConfig = DEFAULT_CONFIG) -> Optional[datetime.date]:
    """Evening day of the night ``ts`` belongs to, or ``None`` for daytime."""
    if not is_night_start(ts, tz, config):
        return None
    day = local_day(ts, tz)
    if local_hour(ts, tz) >= config.night_start_hour:
        return day
    return day - datetime.timedelta(days=1)


def group_by_night(entries: Iterable[CompletedSleep], tz: datetime.tzinfo,
                   config: StatsConfig = DEFAULT_CONFIG, ) -> dict[datetime.date, datetime.timedelta]:
    """Sum completed night entries per night key."""
    durations: dict[datetime.date, datetime.timedelta] = defaultdict(datetime.timedelta)
    for entry in entries:
        key = night_key(entry.start_time, tz, config)
        if key is not None:
            durations[key] += entry.duration()
    return dict(durations)


def night_sleep_durations(intervals: Iterable[AnyInterval], period: Period, now: datetime.datetime,
                          config: StatsConfig = DEFAULT_CONFIG, ) -> dict[datetime.date, datetime.timedelta]:
    """Merged night totals over the completed entries of ``period``."""
    entries = filter_entries(intervals, period, now, config)
    return group_by_night(entries, now.tzinfo, config)
