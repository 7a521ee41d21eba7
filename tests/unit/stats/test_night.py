"""Tests for night-sleep classification and grouping."""

import datetime
from zoneinfo import ZoneInfo

import pytest

from snoozy.schemas.sleep_interval import CompletedSleep, OngoingSleep
from snoozy.schemas.statistics import Period
from snoozy.stats.night import group_by_night, is_night_start, night_key, night_sleep_durations

TZ = ZoneInfo("Europe/Berlin")
NOW = datetime.datetime(2026, 10, 18, 14, 30, tzinfo=TZ)
DAY = datetime.date(2026, 10, 15)


def _at(day: datetime.date, hour: int, minute: int = 0, second: int = 0) -> datetime.datetime:
    return datetime.datetime.combine(day, datetime.time(hour, minute, second), tzinfo=TZ)


# ======================================================================
# Classification
# ======================================================================


class TestNightKey:
    @pytest.mark.parametrize(
        "hour, expected_offset",
        [
            (18, 0),
            (22, 0),
            (23, 0),
            (0, -1),
            (1, -1),
            (5, -1),
        ],
    )
    def test_night_hours(self, hour, expected_offset):
        assert night_key(_at(DAY, hour), TZ) == DAY + datetime.timedelta(days=expected_offset)

    @pytest.mark.parametrize("hour", [6, 9, 12, 17])
    def test_daytime_has_no_key(self, hour):
        assert night_key(_at(DAY, hour), TZ) is None
        assert is_night_start(_at(DAY, hour), TZ) is False

    def test_uses_given_timezone(self):
        # 17:30 UTC is 19:30 in Berlin (CEST)
        ts = datetime.datetime(2026, 10, 15, 17, 30, tzinfo=datetime.timezone.utc)
        assert night_key(ts, datetime.timezone.utc) is None
        assert night_key(ts, TZ) == DAY


# ======================================================================
# Grouping
# ======================================================================


class TestGroupByNight:
    def test_split_night_merges_into_one_key(self):
        entries = [
            CompletedSleep(start_time=_at(DAY, 22), end_time=_at(DAY, 23, 59, 30)),
            CompletedSleep(start_time=_at(DAY + datetime.timedelta(days=1), 0, 0, 10),
                           end_time=_at(DAY + datetime.timedelta(days=1), 6)),
        ]
        nights = group_by_night(entries, TZ)
        assert list(nights) == [DAY]
        assert nights[DAY] == datetime.timedelta(hours=7, minutes=59, seconds=20)

    def test_naps_excluded(self):
        entries = [CompletedSleep(start_time=_at(DAY, 13), end_time=_at(DAY, 15))]
        assert group_by_night(entries, TZ) == {}

    def test_separate_nights(self):
        next_day = DAY + datetime.timedelta(days=1)
        entries = [
            CompletedSleep(start_time=_at(DAY, 20), end_time=_at(next_day, 6)),
            CompletedSleep(start_time=_at(next_day, 19), end_time=_at(next_day, 23)),
        ]
        nights = group_by_night(entries, TZ)
        assert nights == {DAY: datetime.timedelta(hours=10), next_day: datetime.timedelta(hours=4)}


class TestNightSleepDurations:
    def test_ongoing_not_counted(self):
        intervals = [OngoingSleep(start_time=_at(DAY, 21))]
        assert night_sleep_durations(intervals, Period.WEEK, NOW) == {}

    def test_respects_entry_window(self):
        old = datetime.date(2026, 10, 1)
        intervals = [CompletedSleep(start_time=_at(old, 20), end_time=_at(old, 23))]
        assert night_sleep_durations(intervals, Period.WEEK, NOW) == {}
        assert night_sleep_durations(intervals, Period.MONTH, NOW) == {old: datetime.timedelta(hours=3)}
