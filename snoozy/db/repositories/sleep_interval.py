"""
Sleep interval repository.

Handles database operations for :class:`SleepIntervalRecord`.
The interval store persists its whole collection at once, so the
central operation here is :meth:`replace_all`.
"""

from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from snoozy.models.sleep_interval import SleepIntervalRecord, as_utc, utc_now


def _same_times(stored: SleepIntervalRecord, incoming: SleepIntervalRecord) -> bool:
    if as_utc(stored.start_time) != as_utc(incoming.start_time):
        return False
    if stored.end_time is None or incoming.end_time is None:
        return stored.end_time is None and incoming.end_time is None
    return as_utc(stored.end_time) == as_utc(incoming.end_time)


class SleepIntervalRepository:
    """Repository for SleepIntervalRecord database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, interval_id: str) -> Optional[SleepIntervalRecord]:
        return self.session.get(SleepIntervalRecord, interval_id)

    def get_all(self) -> list[SleepIntervalRecord]:
        statement = select(SleepIntervalRecord).order_by(SleepIntervalRecord.start_time)
        return list(self.session.exec(statement).all())

    def count(self) -> int:
        statement = select(func.count()).select_from(SleepIntervalRecord)
        return self.session.exec(statement).first() or 0

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def replace_all(self, records: list[SleepIntervalRecord]) -> None:
        """Make the table hold exactly ``records`` (single commit).

        Rows whose id survives are updated in place, so ``created_at`` is
        kept and ``updated_at`` only moves when start or end changed.
        """
        existing = {row.id: row for row in self.get_all()}
        for record in records:
            row = existing.pop(record.id, None)
            if row is None:
                self.session.add(record)
            elif not _same_times(row, record):
                row.start_time = record.start_time
                row.end_time = record.end_time
                row.updated_at = utc_now()
                self.session.add(row)
        for row in existing.values():
            self.session.delete(row)
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
