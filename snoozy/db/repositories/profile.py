"""Baby profile and app settings repositories."""

from typing import Optional

from sqlmodel import Session, select

from snoozy.core.config import settings
from snoozy.models.profile import AppSettingsRecord, BabyProfileRecord


class BabyProfileRepository:
    """Repository for the single BabyProfileRecord row."""

    def __init__(self, session: Session):
        self.session = session

    def get(self) -> Optional[BabyProfileRecord]:
        return self.session.exec(select(BabyProfileRecord)).first()

    def update(self, profile: BabyProfileRecord) -> BabyProfileRecord:
        self.session.add(profile)
        self.session.commit()
        self.session.refresh(profile)
        return profile

    def get_or_create(self) -> BabyProfileRecord:
        """Get the profile, or create a default one."""
        existing = self.get()
        if existing:
            return existing
        return self.update(BabyProfileRecord(id=1))


class AppSettingsRepository:
    """Repository for the single AppSettingsRecord row."""

    def __init__(self, session: Session):
        self.session = session

    def get(self) -> Optional[AppSettingsRecord]:
        return self.session.exec(select(AppSettingsRecord)).first()

    def update(self, record: AppSettingsRecord) -> AppSettingsRecord:
        self.session.add(record)
        self.session.commit()
        self.session.refresh(record)
        return record

    def get_or_create(self) -> AppSettingsRecord:
        """Get the settings row, or create one from the configured defaults."""
        existing = self.get()
        if existing:
            return existing
        record = AppSettingsRecord(id=1, notifications_enabled=settings.NOTIFICATIONS_ENABLED,
                                   reminder_minutes_before=settings.REMINDER_MINUTES_BEFORE, )
        return self.update(record)
