"""
Manual sleep entry.

A manual entry is a day plus two clock times.  An end clock at or before
the start clock means the sleep ran past midnight; such an entry is
stored as two records split at the next local midnight:

    [start on day, midnight)  and  [midnight, end on day + 1]

so every stored record starts on the calendar day it counts for.  Night
grouping merges the halves again for reporting.
"""

import datetime
import logging

from snoozy.schemas.sleep_interval import CompletedSleep
from snoozy.services.interval_store import IntervalStore

logger = logging.getLogger(__name__)


def _at(day: datetime.date, clock: datetime.time, tz: datetime.tzinfo) -> datetime.datetime:
    return datetime.datetime.combine(day, clock.replace(second=0, microsecond=0, tzinfo=None), tzinfo=tz)


def crosses_midnight(start: datetime.time, end: datetime.time) -> bool:
    return (end.hour, end.minute) <= (start.hour, start.minute)


def build_manual_entry(day: datetime.date, start: datetime.time, end: datetime.time,
                       tz: datetime.tzinfo, ) -> list[CompletedSleep]:
    """Completed interval(s) for a manually entered sleep."""
    start_time = _at(day, start, tz)

    if not crosses_midnight(start, end):
        return [CompletedSleep(start_time=start_time, end_time=_at(day, end, tz))]

    next_day = day + datetime.timedelta(days=1)
    midnight = _at(next_day, datetime.time(0, 0), tz)
    end_time = _at(next_day, end, tz)

    entries = [CompletedSleep(start_time=start_time, end_time=midnight)]
    # An end of exactly 00:00 leaves nothing after midnight
    if end_time > midnight:
        entries.append(CompletedSleep(start_time=midnight, end_time=end_time))
    return entries


def add_manual_entry(store: IntervalStore, day: datetime.date, start: datetime.time, end: datetime.time,
                     tz: datetime.tzinfo, ) -> list[CompletedSleep]:
    """Build and store a manual entry; returns the stored records."""
    entries = build_manual_entry(day, start, end, tz)
    store.add(*entries)
    logger.info("Manual sleep entry on %s stored as %d record(s)", day.isoformat(), len(entries))
    return entries
