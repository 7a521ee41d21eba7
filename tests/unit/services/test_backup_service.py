"""Tests for backup export and import."""

import datetime
import json

import pytest
from sqlalchemy.exc import SQLAlchemyError

from snoozy.schemas.profile import AppSettings, BabyProfile
from snoozy.schemas.sleep_interval import CompletedSleep, OngoingSleep
from snoozy.services.backup_service import BackupImportError, BackupService, BackupWriteError
from snoozy.services.interval_store import IntervalStore
from snoozy.services.profile_service import ProfileService


# ======================================================================
# Helpers
# ======================================================================


def _make_intervals(now):
    start = now - datetime.timedelta(hours=20)
    return [
        CompletedSleep(start_time=start, end_time=start + datetime.timedelta(hours=9)),
        OngoingSleep(start_time=now - datetime.timedelta(minutes=40)),
    ]


def _seed(session, now):
    IntervalStore(session).save(_make_intervals(now))
    profiles = ProfileService(session)
    profiles.update_profile(BabyProfile(name="Mia", birthday=datetime.date(2026, 3, 2), gender="Mädchen",
                                        height="58", weight="5200"), today=now.date())
    profiles.update_settings(AppSettings(notifications_enabled=True, reminder_minutes_before=45))


# ======================================================================
# Export
# ======================================================================


class TestExport:
    def test_document_shape(self, session, now):
        _seed(session, now)
        data = json.loads(BackupService(session).export_json(now))

        assert set(data) == {"metadata", "babyProfile", "appSettings", "sleepEntries"}
        assert data["metadata"]["appVersion"] == "1.0.0"
        assert data["babyProfile"]["name"] == "Mia"
        assert data["appSettings"] == {"notificationsEnabled": True, "reminderMinutesBefore": 45}
        assert len(data["sleepEntries"]) == 2

    def test_ongoing_exported_with_null_end(self, session, now):
        _seed(session, now)
        data = json.loads(BackupService(session).export_json(now))
        ends = [entry["endTime"] for entry in data["sleepEntries"]]
        assert ends.count(None) == 1

    def test_filename(self, now):
        assert BackupService.export_filename(now) == "snoozy_export_2026-10-18_14-30.json"


# ======================================================================
# Import
# ======================================================================


class TestImport:
    def test_round_trip_preserves_everything(self, session, now):
        _seed(session, now)
        exported = BackupService(session).export_json(now)

        # wipe, then restore
        IntervalStore(session).save([])
        ProfileService(session).update_settings(AppSettings())
        BackupService(session).import_json(exported)

        restored = IntervalStore(session).load()
        assert len(restored) == 2
        ongoing = [i for i in restored if isinstance(i, OngoingSleep)]
        assert len(ongoing) == 1
        assert ProfileService(session).get_settings().reminder_minutes_before == 45
        assert ProfileService(session).get_profile().name == "Mia"

    def test_round_trip_keeps_ids_and_times(self, session, now):
        intervals = _make_intervals(now)
        IntervalStore(session).save(intervals)
        exported = BackupService(session).export_json(now)
        IntervalStore(session).save([])

        BackupService(session).import_json(exported)
        restored = {i.id: i for i in IntervalStore(session).load()}
        for original in intervals:
            assert restored[original.id].start_time == original.start_time
            assert restored[original.id].end_time == original.end_time

    def test_import_replaces_existing_entries(self, session, now):
        exported = BackupService(session).export_json(now)
        IntervalStore(session).save(_make_intervals(now))
        BackupService(session).import_json(exported)
        assert IntervalStore(session).load() == []

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "not json",
            "[]",
            '{"metadata": {"exportDate": "2026-10-18T14:30:00+02:00", "appVersion": "1.0.0"}}',
        ],
    )
    def test_malformed_raises(self, session, text):
        with pytest.raises(BackupImportError):
            BackupService(session).import_json(text)

    def test_naive_timestamp_rejected(self, session, now):
        doc = json.loads(BackupService(session).export_json(now))
        doc["sleepEntries"] = [{"id": "6f1c1f56-8c1e-4c3a-9f3e-1f0d2b7f9a11", "startTime": "2026-10-17T20:00:00",
                                "endTime": None}]
        with pytest.raises(BackupImportError):
            BackupService(session).import_json(json.dumps(doc))

    def test_duplicate_ids_rejected(self, session, now):
        doc = json.loads(BackupService(session).export_json(now))
        entry = {"id": "6f1c1f56-8c1e-4c3a-9f3e-1f0d2b7f9a11", "startTime": "2026-10-17T20:00:00+02:00",
                 "endTime": "2026-10-18T06:00:00+02:00"}
        doc["sleepEntries"] = [entry, dict(entry)]
        with pytest.raises(BackupImportError, match="duplicate"):
            BackupService(session).import_json(json.dumps(doc))

    def test_failed_import_writes_nothing(self, session, now):
        _seed(session, now)
        with pytest.raises(BackupImportError):
            BackupService(session).import_json("{}")
        assert len(IntervalStore(session).load()) == 2
        assert ProfileService(session).get_profile().name == "Mia"

    def test_write_failure_leaves_everything_untouched(self, session, now, monkeypatch):
        _seed(session, now)
        exported = BackupService(session).export_json(now)
        document = json.loads(exported)
        document["babyProfile"]["name"] = "Lea"
        document["sleepEntries"] = []

        service = BackupService(session)

        def _broken(records):
            raise SQLAlchemyError("database is locked")

        monkeypatch.setattr(service.store.repository, "replace_all", _broken)
        with pytest.raises(BackupWriteError):
            service.import_json(json.dumps(document))

        assert ProfileService(session).get_profile().name == "Mia"
        assert len(IntervalStore(session).load()) == 2
