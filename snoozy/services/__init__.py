"""Business logic services."""

from snoozy.services.backup_service import BackupImportError, BackupService, BackupWriteError
from snoozy.services.interval_store import IntervalStore
from snoozy.services.profile_service import ProfileService
from snoozy.services.reminder_service import ReminderService

__all__ = [
    "IntervalStore",
    "BackupService",
    "BackupImportError",
    "BackupWriteError",
    "ProfileService",
    "ReminderService",
]
