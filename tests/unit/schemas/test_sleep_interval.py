"""Tests for the ongoing / completed sleep interval variants."""

import datetime
import uuid
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from snoozy.schemas.sleep_interval import (
    CompletedSleep,
    OngoingSleep,
    SleepIntervalResponse,
    build_interval,
    sleep_interval_adapter,
    sleep_interval_list_adapter,
)

TZ = ZoneInfo("Europe/Berlin")
START = datetime.datetime(2026, 10, 17, 20, 0, tzinfo=TZ)


# ======================================================================
# CompletedSleep
# ======================================================================


class TestCompletedSleep:
    def test_duration_is_exact_difference(self):
        s = CompletedSleep(start_time=START, end_time=START + datetime.timedelta(hours=9, minutes=45))
        assert s.duration() == datetime.timedelta(hours=9, minutes=45)

    def test_duration_ignores_now(self):
        s = CompletedSleep(start_time=START, end_time=START + datetime.timedelta(hours=1))
        assert s.duration(START + datetime.timedelta(days=3)) == datetime.timedelta(hours=1)

    def test_effective_end_time_is_end_time(self):
        end = START + datetime.timedelta(hours=2)
        s = CompletedSleep(start_time=START, end_time=end)
        assert s.effective_end_time(START + datetime.timedelta(days=1)) == end
        assert s.is_ongoing is False

    def test_end_before_start_is_not_rejected(self):
        s = CompletedSleep(start_time=START, end_time=START - datetime.timedelta(minutes=10))
        assert s.duration() == -datetime.timedelta(minutes=10)

    def test_naive_timestamps_rejected(self):
        with pytest.raises(ValidationError):
            CompletedSleep(start_time=datetime.datetime(2026, 10, 17, 20, 0),
                           end_time=datetime.datetime(2026, 10, 17, 21, 0))

    def test_frozen(self):
        s = CompletedSleep(start_time=START, end_time=START + datetime.timedelta(hours=1))
        with pytest.raises(ValidationError):
            s.end_time = START


# ======================================================================
# OngoingSleep
# ======================================================================


class TestOngoingSleep:
    def test_duration_measured_to_now(self):
        s = OngoingSleep(start_time=START)
        assert s.duration(START + datetime.timedelta(minutes=90)) == datetime.timedelta(minutes=90)

    def test_duration_grows_with_now(self):
        s = OngoingSleep(start_time=START)
        checkpoints = [START + datetime.timedelta(minutes=m) for m in (1, 5, 30, 240)]
        durations = [s.duration(t) for t in checkpoints]
        assert durations == sorted(durations)
        assert len(set(durations)) == len(durations)

    def test_duration_never_negative(self):
        s = OngoingSleep(start_time=START)
        assert s.duration(START - datetime.timedelta(hours=1)) == datetime.timedelta(0)

    def test_no_end_time(self):
        s = OngoingSleep(start_time=START)
        assert s.end_time is None
        assert s.is_ongoing is True
        assert s.effective_end_time(START + datetime.timedelta(hours=1)) == START + datetime.timedelta(hours=1)

    def test_close_keeps_identity(self):
        s = OngoingSleep(start_time=START)
        end = START + datetime.timedelta(hours=3)
        closed = s.close(end)
        assert isinstance(closed, CompletedSleep)
        assert closed.id == s.id
        assert closed.start_time == START
        assert closed.end_time == end


# ======================================================================
# Discriminated union
# ======================================================================


class TestSleepIntervalUnion:
    def test_build_interval_picks_variant(self):
        assert isinstance(build_interval(START), OngoingSleep)
        assert isinstance(build_interval(START, START + datetime.timedelta(hours=1)), CompletedSleep)

    def test_build_interval_keeps_id(self):
        interval_id = uuid.uuid4()
        assert build_interval(START, interval_id=interval_id).id == interval_id

    def test_adapter_dispatches_on_kind(self):
        data = {"kind": "ongoing", "id": str(uuid.uuid4()), "start_time": START.isoformat()}
        assert isinstance(sleep_interval_adapter.validate_python(data), OngoingSleep)

    def test_completed_kind_requires_end_time(self):
        with pytest.raises(ValidationError):
            sleep_interval_adapter.validate_python({"kind": "completed", "start_time": START.isoformat()})

    def test_list_adapter(self):
        items = [OngoingSleep(start_time=START),
                 CompletedSleep(start_time=START, end_time=START + datetime.timedelta(hours=1))]
        parsed = sleep_interval_list_adapter.validate_json(sleep_interval_list_adapter.dump_json(items))
        assert [type(i) for i in parsed] == [OngoingSleep, CompletedSleep]


class TestSleepIntervalResponse:
    def test_ongoing_duration_uses_now(self):
        s = OngoingSleep(start_time=START)
        r = SleepIntervalResponse.from_interval(s, START + datetime.timedelta(minutes=30))
        assert r.is_ongoing is True
        assert r.end_time is None
        assert r.duration_seconds == 1800.0
        assert r.kind == "ongoing"
