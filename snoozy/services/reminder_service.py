"""
Bedtime reminder planning.

Decides whether the daily bedtime reminder should be scheduled and at
which local time: ``minutes_before`` ahead of the average bedtime,
wrapping across hours and midnight.  Delivering the notification is the
client's job; this service only returns a :class:`ReminderPlan`.
"""

import datetime
from typing import Optional

from sqlmodel import Session

from snoozy.schemas.statistics import ReminderPlan
from snoozy.services.profile_service import ProfileService
from snoozy.stats.engine import StatisticsEngine

REMINDER_TITLE = "Schlafenszeit naht"
_REMINDER_TAIL = "ist die durchschnittliche Einschlafzeit. Zeit, langsam zur Ruhe zu kommen."

_MINUTES_PER_DAY = 24 * 60


def compute_reminder_time(bedtime: datetime.time, minutes_before: int) -> datetime.time:
    """``bedtime`` minus ``minutes_before``, modulo one day."""
    total = (bedtime.hour * 60 + bedtime.minute - minutes_before) % _MINUTES_PER_DAY
    return datetime.time(total // 60, total % 60)


def reminder_body(minutes_before: int) -> str:
    """German notification text for the given lead time."""
    if minutes_before == 60:
        return f"In einer Stunde {_REMINDER_TAIL}"
    if minutes_before < 60:
        return f"In {minutes_before} Minuten {_REMINDER_TAIL}"

    hours, minutes = divmod(minutes_before, 60)
    unit = "Stunden" if hours > 1 else "Stunde"
    if minutes == 0:
        return f"In {hours} {unit} {_REMINDER_TAIL}"
    return f"In {hours} {unit} und {minutes} Minuten {_REMINDER_TAIL}"


class ReminderService:
    """Service combining reminder settings with the average bedtime."""

    def __init__(self, session: Session, engine: StatisticsEngine):
        self.profiles = ProfileService(session)
        self.engine = engine

    def plan(self, now: Optional[datetime.datetime] = None) -> ReminderPlan:
        prefs = self.profiles.get_settings()
        if not prefs.notifications_enabled:
            return ReminderPlan(action="cancel", reason="notifications_disabled")

        bedtime = self.engine.average_bedtime(now)
        if bedtime is None:
            return ReminderPlan(action="cancel", reason="no_bedtime_data")

        minutes_before = prefs.reminder_minutes_before
        return ReminderPlan(action="schedule", reason="average_bedtime", bedtime=bedtime,
                            reminder_time=compute_reminder_time(bedtime, minutes_before),
                            minutes_before=minutes_before, title=REMINDER_TITLE, body=reminder_body(minutes_before), )
