"""Tests for bedtime reminder planning."""

import datetime

import pytest

from snoozy.schemas.profile import AppSettings
from snoozy.schemas.sleep_interval import CompletedSleep
from snoozy.services.interval_store import IntervalStore
from snoozy.services.profile_service import ProfileService
from snoozy.services.reminder_service import REMINDER_TITLE, ReminderService, compute_reminder_time, reminder_body
from snoozy.stats.engine import StatisticsEngine


class TestComputeReminderTime:
    @pytest.mark.parametrize(
        "bedtime, minutes_before, expected",
        [
            (datetime.time(20, 15), 60, datetime.time(19, 15)),
            (datetime.time(20, 15), 30, datetime.time(19, 45)),
            (datetime.time(20, 10), 15, datetime.time(19, 55)),
            (datetime.time(0, 30), 60, datetime.time(23, 30)),
            (datetime.time(19, 0), 120, datetime.time(17, 0)),
            (datetime.time(19, 0), 1440, datetime.time(19, 0)),
        ],
    )
    def test_wraps_hours_and_midnight(self, bedtime, minutes_before, expected):
        assert compute_reminder_time(bedtime, minutes_before) == expected


class TestReminderBody:
    @pytest.mark.parametrize(
        "minutes, prefix",
        [
            (60, "In einer Stunde "),
            (30, "In 30 Minuten "),
            (120, "In 2 Stunden "),
            (90, "In 1 Stunde und 30 Minuten "),
            (150, "In 2 Stunden und 30 Minuten "),
        ],
    )
    def test_german_wording(self, minutes, prefix):
        assert reminder_body(minutes).startswith(prefix)


class TestReminderService:
    def _seed_bedtimes(self, session, now):
        store = IntervalStore(session)
        for day_offset, minute in ((-2, 0), (-1, 30)):
            day = now.date() + datetime.timedelta(days=day_offset)
            start = datetime.datetime.combine(day, datetime.time(20, minute), tzinfo=now.tzinfo)
            store.add(CompletedSleep(start_time=start, end_time=start + datetime.timedelta(hours=10)))
        return store

    def test_disabled_cancels(self, session, now):
        store = self._seed_bedtimes(session, now)
        plan = ReminderService(session, StatisticsEngine(store)).plan(now)
        assert plan.action == "cancel"
        assert plan.reason == "notifications_disabled"

    def test_no_data_cancels(self, session, now):
        ProfileService(session).update_settings(AppSettings(notifications_enabled=True))
        plan = ReminderService(session, StatisticsEngine(IntervalStore(session))).plan(now)
        assert plan.action == "cancel"
        assert plan.reason == "no_bedtime_data"

    def test_schedules_before_average_bedtime(self, session, now):
        ProfileService(session).update_settings(AppSettings(notifications_enabled=True, reminder_minutes_before=30))
        store = self._seed_bedtimes(session, now)
        plan = ReminderService(session, StatisticsEngine(store)).plan(now)

        assert plan.action == "schedule"
        assert plan.bedtime == datetime.time(20, 15)
        assert plan.reminder_time == datetime.time(19, 45)
        assert plan.minutes_before == 30
        assert plan.title == REMINDER_TITLE
        assert plan.body.startswith("In 30 Minuten")
