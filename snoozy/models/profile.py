"""
Baby profile and app settings models.

Both tables hold a single row (``id = 1``); the repository creates it
with defaults on first access.
"""

import datetime
from typing import Optional

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel

from snoozy.models.sleep_interval import utc_now


class BabyProfileRecord(SQLModel, table=True):
    """The tracked baby's profile."""

    __tablename__ = "baby_profile"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(default="Baby Name", max_length=50)
    birthday: datetime.date = Field(default=datetime.date(2026, 1, 1))
    gender: str = Field(default="Junge", max_length=20)
    breastfeeding: str = Field(default="Ja", max_length=10)

    # Kept as text, as entered (cm / g)
    height: str = Field(default="52", max_length=5)
    weight: str = Field(default="3750", max_length=6)

    updated_at: datetime.datetime = Field(default_factory=utc_now,
                                          sa_column=Column(DateTime(timezone=True), nullable=False))


class AppSettingsRecord(SQLModel, table=True):
    """Reminder preferences."""

    __tablename__ = "app_settings"

    id: Optional[int] = Field(default=None, primary_key=True)
    notifications_enabled: bool = Field(default=False)
    reminder_minutes_before: int = Field(default=60)

    updated_at: datetime.datetime = Field(default_factory=utc_now,
                                          sa_column=Column(DateTime(timezone=True), nullable=False))
