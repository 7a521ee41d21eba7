"""
Baby profile and app settings schemas.

Field names serialize in camelCase, the format of the backup file.
"""

import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BabyProfile(CamelModel):
    """The tracked baby's profile."""

    name: str = Field("Baby Name", max_length=200)
    birthday: datetime.date = datetime.date(2026, 1, 1)
    gender: str = Field("Junge", description="'Junge' or 'Mädchen'")
    breastfeeding: str = Field("Ja", description="'Ja' or 'Nein'")
    height: str = Field("52", description="Height in cm, as entered")
    weight: str = Field("3750", description="Weight in g, as entered")


class AppSettings(CamelModel):
    """Reminder preferences."""

    notifications_enabled: bool = False
    reminder_minutes_before: int = Field(60, ge=1, le=1440)
