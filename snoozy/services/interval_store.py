"""
Interval store.

Owns the canonical collection of sleep intervals and persists it through
:class:`SleepIntervalRepository`.  The store is constructed explicitly
and passed to whoever needs it.

Storage failures never reach the caller:

- a failed read is logged and treated as an empty collection;
- a failed write is logged and rolled back, not retried.

The store does not reject overlapping intervals or a second ongoing
sleep; callers check :meth:`IntervalStore.ongoing` before ``start``.
"""

import datetime
import logging
import uuid
from typing import Iterable, Optional, Union

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from snoozy.db.repositories.sleep_interval import SleepIntervalRepository
from snoozy.models.sleep_interval import SleepIntervalRecord, as_utc
from snoozy.schemas.sleep_interval import CompletedSleep, OngoingSleep, build_interval

logger = logging.getLogger(__name__)

AnyInterval = Union[OngoingSleep, CompletedSleep]


class IntervalStore:
    """CRUD over the sleep interval collection; every mutation persists."""

    def __init__(self, session: Session):
        self.repository = SleepIntervalRepository(session)
        self._intervals: Optional[list[AnyInterval]] = None

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> list[AnyInterval]:
        """Read the persisted collection; empty on missing or unreadable data."""
        try:
            records = self.repository.get_all()
            intervals = [self._to_interval(r) for r in records]
        except (SQLAlchemyError, ValidationError, ValueError):
            logger.warning("Could not load sleep intervals, starting empty", exc_info=True)
            self.repository.rollback()
            intervals = []
        self._intervals = intervals
        return list(intervals)

    def save(self, intervals: Iterable[AnyInterval]) -> bool:
        """Replace the persisted collection; failures are only logged.

        Returns whether the write reached the database.
        """
        self._intervals = list(intervals)
        try:
            self.repository.replace_all([self._to_record(i) for i in self._intervals])
        except SQLAlchemyError:
            logger.exception("Could not save %d sleep intervals", len(self._intervals))
            self.repository.rollback()
            return False
        return True

    @property
    def intervals(self) -> list[AnyInterval]:
        if self._intervals is None:
            self.load()
        return list(self._intervals)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, interval_id: uuid.UUID) -> Optional[AnyInterval]:
        return next((i for i in self.intervals if i.id == interval_id), None)

    def ongoing(self) -> Optional[OngoingSleep]:
        """The first ongoing interval, if any."""
        return next((i for i in self.intervals if isinstance(i, OngoingSleep)), None)

    def for_day(self, day: datetime.date, tz: datetime.tzinfo) -> list[AnyInterval]:
        """Intervals that started on a local calendar day, ordered by start."""
        matches = [i for i in self.intervals if i.start_time.astimezone(tz).date() == day]
        return sorted(matches, key=lambda i: i.start_time)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def start(self, now: datetime.datetime) -> OngoingSleep:
        interval = OngoingSleep(start_time=now)
        self.save(self.intervals + [interval])
        logger.info("Sleep %s started at %s", interval.id, now.isoformat())
        return interval

    def end(self, now: datetime.datetime) -> Optional[CompletedSleep]:
        """Close the first ongoing interval; ``None`` when nothing is ongoing."""
        current = self.ongoing()
        if current is None:
            return None
        closed = current.close(now)
        self.update(closed)
        logger.info("Sleep %s ended at %s", closed.id, now.isoformat())
        return closed

    def add(self, *intervals: AnyInterval) -> None:
        self.save(self.intervals + list(intervals))

    def update(self, interval: AnyInterval) -> bool:
        """Replace the interval with the same id; no-op when unknown."""
        current = self.intervals
        for index, existing in enumerate(current):
            if existing.id == interval.id:
                current[index] = interval
                self.save(current)
                return True
        return False

    def delete(self, interval_id: uuid.UUID) -> bool:
        """Remove the interval with ``interval_id``; no-op when unknown."""
        current = self.intervals
        remaining = [i for i in current if i.id != interval_id]
        if len(remaining) == len(current):
            return False
        self.save(remaining)
        return True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _to_record(interval: AnyInterval) -> SleepIntervalRecord:
        """Interval -> row, timestamps as aware UTC."""
        end_time = interval.end_time
        return SleepIntervalRecord(
            id=str(interval.id),
            start_time=interval.start_time.astimezone(datetime.timezone.utc),
            end_time=end_time.astimezone(datetime.timezone.utc) if end_time else None,
        )

    @staticmethod
    def _to_interval(record: SleepIntervalRecord) -> AnyInterval:
        """Row -> interval, in UTC."""
        end_time = as_utc(record.end_time) if record.end_time else None
        return build_interval(
            start_time=as_utc(record.start_time),
            end_time=end_time,
            interval_id=uuid.UUID(record.id),
        )
