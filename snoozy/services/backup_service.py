"""
Backup export / import.

Exports the whole app state (profile, settings, every sleep interval
including the ongoing one) as a JSON document, and restores it.

The document is fully parsed and validated before anything is written;
any structural problem raises :class:`BackupImportError`.  The sleep
entries are written first and the profile only once they are stored, so
a failed write (:class:`BackupWriteError`) leaves profile, settings and
intervals as they were.
"""

import datetime
import logging
from typing import Optional

from pydantic import ValidationError
from sqlmodel import Session

from snoozy.core.config import settings
from snoozy.schemas.backup import ExportData, ExportMetadata, SleepEntryExport
from snoozy.services.interval_store import IntervalStore
from snoozy.services.profile_service import ProfileService

logger = logging.getLogger(__name__)


class BackupImportError(ValueError):
    """The backup file is not a valid export document."""


class BackupWriteError(RuntimeError):
    """A valid backup could not be written to the database."""


class BackupService:
    """Service for backup export and import."""

    def __init__(self, session: Session, store: Optional[IntervalStore] = None):
        self.store = store or IntervalStore(session)
        self.profiles = ProfileService(session)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def export_document(self, now: datetime.datetime) -> ExportData:
        entries = [SleepEntryExport.from_interval(i) for i in self.store.load()]
        return ExportData(
            metadata=ExportMetadata(export_date=now, app_version=settings.VERSION),
            baby_profile=self.profiles.get_profile(),
            app_settings=self.profiles.get_settings(),
            sleep_entries=entries,
        )

    def export_json(self, now: datetime.datetime) -> str:
        return self.export_document(now).model_dump_json(by_alias=True, indent=2)

    @staticmethod
    def export_filename(now: datetime.datetime) -> str:
        return f"snoozy_export_{now.strftime('%Y-%m-%d_%H-%M')}.json"

    # ------------------------------------------------------------------
    # Import
    # ------------------------------------------------------------------

    @staticmethod
    def parse(text: str) -> ExportData:
        """Parse and validate a backup document."""
        try:
            document = ExportData.model_validate_json(text)
        except ValidationError as exc:
            raise BackupImportError(f"Invalid backup file ({exc.error_count()} error(s)): {exc}") from exc

        ids = [entry.id for entry in document.sleep_entries]
        if len(ids) != len(set(ids)):
            raise BackupImportError("Invalid backup file: duplicate sleep entry ids")
        return document

    def import_json(self, text: str) -> ExportData:
        return self.import_document(self.parse(text))

    def import_document(self, document: ExportData) -> ExportData:
        """Replace profile, settings and all sleep intervals with the document's."""
        if not self.store.save([entry.to_interval() for entry in document.sleep_entries]):
            raise BackupWriteError("Could not store the imported sleep entries; nothing was imported")
        self.profiles.update_profile(document.baby_profile)
        self.profiles.update_settings(document.app_settings)
        logger.info("Imported backup from %s with %d sleep entries", document.metadata.export_date.isoformat(),
                    len(document.sleep_entries))
        return document
