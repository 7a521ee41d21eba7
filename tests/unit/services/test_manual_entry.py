"""Tests for manual sleep entry and the midnight split."""

import datetime

import pytest

from snoozy.schemas.sleep_interval import CompletedSleep
from snoozy.services.interval_store import IntervalStore
from snoozy.services.manual_entry import add_manual_entry, build_manual_entry, crosses_midnight

DAY = datetime.date(2026, 10, 15)


def _t(text: str) -> datetime.time:
    return datetime.time.fromisoformat(text)


class TestCrossesMidnight:
    @pytest.mark.parametrize(
        "start, end, expected",
        [
            ("13:00", "14:30", False),
            ("20:00", "06:00", True),
            ("22:00", "22:00", True),
            ("23:30", "00:00", True),
            ("00:10", "05:00", False),
        ],
    )
    def test_crosses_midnight(self, start, end, expected):
        assert crosses_midnight(_t(start), _t(end)) is expected


class TestBuildManualEntry:
    def test_same_day_is_single_record(self, tz):
        entries = build_manual_entry(DAY, _t("13:00"), _t("14:30"), tz)
        assert len(entries) == 1
        assert entries[0].start_time == datetime.datetime(2026, 10, 15, 13, 0, tzinfo=tz)
        assert entries[0].duration() == datetime.timedelta(minutes=90)

    def test_overnight_split_at_midnight(self, tz):
        first, second = build_manual_entry(DAY, _t("20:00"), _t("06:00"), tz)
        midnight = datetime.datetime(2026, 10, 16, 0, 0, tzinfo=tz)

        assert first.start_time == datetime.datetime(2026, 10, 15, 20, 0, tzinfo=tz)
        assert first.end_time == midnight
        assert second.start_time == midnight
        assert second.end_time == datetime.datetime(2026, 10, 16, 6, 0, tzinfo=tz)
        assert first.duration() + second.duration() == datetime.timedelta(hours=10)

    def test_split_halves_have_distinct_ids(self, tz):
        first, second = build_manual_entry(DAY, _t("21:00"), _t("05:00"), tz)
        assert first.id != second.id

    def test_end_at_midnight_is_single_record(self, tz):
        entries = build_manual_entry(DAY, _t("23:30"), _t("00:00"), tz)
        assert len(entries) == 1
        assert entries[0].duration() == datetime.timedelta(minutes=30)

    def test_seconds_dropped(self, tz):
        (entry,) = build_manual_entry(DAY, datetime.time(9, 15, 42), datetime.time(10, 0, 5), tz)
        assert entry.duration() == datetime.timedelta(minutes=45)

    def test_all_records_completed(self, tz):
        assert all(isinstance(e, CompletedSleep) for e in build_manual_entry(DAY, _t("19:00"), _t("07:00"), tz))


class TestAddManualEntry:
    def test_stores_both_halves(self, session, tz):
        store = IntervalStore(session)
        entries = add_manual_entry(store, DAY, _t("20:00"), _t("06:00"), tz)
        assert len(entries) == 2
        assert {i.id for i in IntervalStore(session).load()} == {e.id for e in entries}
