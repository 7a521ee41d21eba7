"""
Profile and settings service.

Validates and stores the baby profile and the reminder preferences.

Profile validation keeps what it can instead of rejecting the update:

- name: trimmed and cut to 50 characters
- height (30-120 cm) / weight (500-20000 g): an invalid value keeps the
  previous one
- birthday in the future: replaced by today
"""

import datetime
from typing import Optional

from sqlmodel import Session

from snoozy.db.repositories.profile import AppSettingsRepository, BabyProfileRepository
from snoozy.models.profile import AppSettingsRecord, BabyProfileRecord
from snoozy.models.sleep_interval import utc_now
from snoozy.schemas.profile import AppSettings, BabyProfile

MAX_NAME_LENGTH = 50
HEIGHT_RANGE_CM = (30, 120)
WEIGHT_RANGE_G = (500, 20000)


# ======================================================================
# Validation
# ======================================================================


def validate_name(name: str) -> str:
    return name.strip()[:MAX_NAME_LENGTH]


def _validate_int_range(value: str, bounds: tuple[int, int]) -> Optional[str]:
    try:
        number = int(value.strip())
    except ValueError:
        return None
    low, high = bounds
    if low <= number <= high:
        return str(number)
    return None


def validate_height(value: str) -> Optional[str]:
    return _validate_int_range(value, HEIGHT_RANGE_CM)


def validate_weight(value: str) -> Optional[str]:
    return _validate_int_range(value, WEIGHT_RANGE_G)


def validate_birthday(birthday: datetime.date, today: datetime.date) -> bool:
    return birthday <= today


# ======================================================================
# Service
# ======================================================================


class ProfileService:
    """Service for the baby profile and app settings."""

    def __init__(self, session: Session):
        self.profile_repo = BabyProfileRepository(session)
        self.settings_repo = AppSettingsRepository(session)

    # ------------------------------------------------------------------
    # Profile
    # ------------------------------------------------------------------

    def get_profile(self) -> BabyProfile:
        return self._profile_to_schema(self.profile_repo.get_or_create())

    def update_profile(self, data: BabyProfile, today: Optional[datetime.date] = None) -> BabyProfile:
        today = today or datetime.date.today()
        record = self.profile_repo.get_or_create()

        record.name = validate_name(data.name)
        record.gender = data.gender
        record.breastfeeding = data.breastfeeding
        record.height = validate_height(data.height) or record.height
        record.weight = validate_weight(data.weight) or record.weight
        record.birthday = data.birthday if validate_birthday(data.birthday, today) else today
        record.updated_at = utc_now()

        return self._profile_to_schema(self.profile_repo.update(record))

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    def get_settings(self) -> AppSettings:
        return self._settings_to_schema(self.settings_repo.get_or_create())

    def update_settings(self, data: AppSettings) -> AppSettings:
        record = self.settings_repo.get_or_create()
        record.notifications_enabled = data.notifications_enabled
        record.reminder_minutes_before = data.reminder_minutes_before
        record.updated_at = utc_now()
        return self._settings_to_schema(self.settings_repo.update(record))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _profile_to_schema(record: BabyProfileRecord) -> BabyProfile:
        return BabyProfile(name=record.name, birthday=record.birthday, gender=record.gender,
                           breastfeeding=record.breastfeeding, height=record.height, weight=record.weight, )

    @staticmethod
    def _settings_to_schema(record: AppSettingsRecord) -> AppSettings:
        return AppSettings(notifications_enabled=record.notifications_enabled,
                           reminder_minutes_before=record.reminder_minutes_before, )
