"""
Sleep interval database model.

Defines the sleep_intervals table.  Timestamp columns are timezone-aware
and written as aware UTC.  SQLite keeps no offset and hands values back
naive; :func:`as_utc` reattaches UTC on the way out.
A NULL ``end_time`` marks the ongoing sleep.
"""

import datetime
from typing import Optional

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def as_utc(value: datetime.datetime) -> datetime.datetime:
    """Aware UTC for a timestamp read back from the database."""
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)


class SleepIntervalRecord(SQLModel, table=True):
    """A single recorded sleep session."""

    __tablename__ = "sleep_intervals"

    id: str = Field(primary_key=True, max_length=36)
    start_time: datetime.datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False, index=True))
    end_time: Optional[datetime.datetime] = Field(default=None, sa_column=Column(DateTime(timezone=True)))

    # Timestamps; updated_at moves only when start or end changes
    created_at: datetime.datetime = Field(default_factory=utc_now,
                                          sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime.datetime = Field(default_factory=utc_now,
                                          sa_column=Column(DateTime(timezone=True), nullable=False))
