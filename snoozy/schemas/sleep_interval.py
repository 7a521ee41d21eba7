"""
Sleep interval schemas.

A sleep interval is either **ongoing** (the baby has not woken yet) or
**completed**.  The two states are distinct types joined in a
discriminated union on ``kind``, so code that needs an end time has to
deal with the ongoing case explicitly:

- :class:`OngoingSleep`   — ``start_time`` only
- :class:`CompletedSleep` — ``start_time`` and ``end_time``

Both are frozen; an ongoing sleep is ended by :meth:`OngoingSleep.close`,
which returns a new :class:`CompletedSleep` with the same ``id``.
"""

import datetime
import uuid
from typing import Annotated, Literal, Optional, Union

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, TypeAdapter

_ZERO = datetime.timedelta(0)


class _SleepBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: uuid.UUID = Field(default_factory=uuid.uuid4, description="Immutable identifier")
    start_time: AwareDatetime = Field(..., description="When the baby fell asleep")


class OngoingSleep(_SleepBase):
    """A sleep that has started but not ended."""

    kind: Literal["ongoing"] = "ongoing"

    @property
    def is_ongoing(self) -> bool:
        return True

    @property
    def end_time(self) -> None:
        return None

    def effective_end_time(self, now: datetime.datetime) -> datetime.datetime:
        return now

    def duration(self, now: datetime.datetime) -> datetime.timedelta:
        """Time asleep so far; never negative, grows with ``now``."""
        return max(now - self.start_time, _ZERO)

    def close(self, end_time: datetime.datetime) -> "CompletedSleep":
        return CompletedSleep(id=self.id, start_time=self.start_time, end_time=end_time)


class CompletedSleep(_SleepBase):
    """A sleep with both a start and an end."""

    kind: Literal["completed"] = "completed"
    end_time: AwareDatetime = Field(..., description="When the baby woke up")

    @property
    def is_ongoing(self) -> bool:
        return False

    def effective_end_time(self, now: Optional[datetime.datetime] = None) -> datetime.datetime:
        return self.end_time

    def duration(self, now: Optional[datetime.datetime] = None) -> datetime.timedelta:
        return self.end_time - self.start_time


SleepInterval = Annotated[Union[OngoingSleep, CompletedSleep], Field(discriminator="kind")]

sleep_interval_adapter: TypeAdapter = TypeAdapter(SleepInterval)
sleep_interval_list_adapter: TypeAdapter = TypeAdapter(list[SleepInterval])


def build_interval(start_time: datetime.datetime, end_time: Optional[datetime.datetime] = None,
                   interval_id: Optional[uuid.UUID] = None, ) -> Union[OngoingSleep, CompletedSleep]:
    """Build the right variant for a possibly-absent end time."""
    fields: dict = {"start_time": start_time}
    if interval_id is not None:
        fields["id"] = interval_id
    if end_time is None:
        return OngoingSleep(**fields)
    return CompletedSleep(end_time=end_time, **fields)


# ---------------------------------------------------------------------------
# API request / response schemas
# ---------------------------------------------------------------------------


class SleepIntervalUpdate(BaseModel):
    """Schema for editing an interval's timestamps (omit ``end_time`` to reopen it)."""

    start_time: AwareDatetime
    end_time: Optional[AwareDatetime] = None


class ManualEntryCreate(BaseModel):
    """Schema for a manually entered sleep on a given day.

    Only clock times are entered; an end clock at or before the start
    clock means the sleep ran past midnight.
    """

    day: datetime.date = Field(..., description="Calendar day the sleep started on")
    start: datetime.time = Field(..., description="Fell asleep (HH:MM)")
    end: datetime.time = Field(..., description="Woke up (HH:MM)")


class SleepIntervalResponse(BaseModel):
    """Schema for a sleep interval in API responses."""

    id: uuid.UUID
    kind: Literal["ongoing", "completed"]
    start_time: datetime.datetime
    end_time: Optional[datetime.datetime]
    is_ongoing: bool
    duration_seconds: float = Field(..., description="Duration, measured up to 'now' while ongoing")

    @classmethod
    def from_interval(cls, interval: Union[OngoingSleep, CompletedSleep],
                      now: datetime.datetime, ) -> "SleepIntervalResponse":
        return cls(id=interval.id, kind=interval.kind, start_time=interval.start_time, end_time=interval.end_time,
                   is_ongoing=interval.is_ongoing, duration_seconds=interval.duration(now).total_seconds(), )
