"""What would the statistics screen show for a typical week?

Builds a week of naps and nights (including a night entered manually
across midnight) and prints the summary, the chart series and the
bedtime reminder that would be planned.  Nothing touches the database.

Usage:
    python scripts/simulate_week.py
"""

import datetime
import sys
from pathlib import Path
from zoneinfo import ZoneInfo

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from snoozy.schemas.sleep_interval import CompletedSleep, OngoingSleep
from snoozy.schemas.statistics import Period, hours_minutes
from snoozy.services.manual_entry import build_manual_entry
from snoozy.services.reminder_service import compute_reminder_time, reminder_body
from snoozy.stats import average_bedtime, compute_summary, daily_totals, sleep_time_data, wake_time_data

TZ = ZoneInfo("Europe/Berlin")
NOW = datetime.datetime(2026, 10, 18, 14, 30, tzinfo=TZ)

# (days ago, start, end): end <= start means the sleep ran past midnight
RAW_DATA = [
    (6, "09:30", "10:45"), (6, "13:00", "14:40"), (6, "19:45", "06:30"),
    (5, "10:00", "11:00"), (5, "14:15", "15:30"), (5, "20:10", "05:50"),
    (4, "09:45", "11:15"), (4, "19:30", "06:10"),
    (3, "10:30", "11:20"), (3, "13:30", "15:00"), (3, "20:30", "07:00"),
    (2, "09:15", "10:30"), (2, "14:00", "15:45"), (2, "19:50", "06:20"),
    (1, "10:00", "11:30"), (1, "20:00", "06:45"),
    (0, "09:40", "11:00"),
]


def _clock(text: str) -> datetime.time:
    return datetime.time.fromisoformat(text)


def build_week() -> list:
    intervals = []
    for days_ago, start, end in RAW_DATA:
        day = NOW.date() - datetime.timedelta(days=days_ago)
        intervals.extend(build_manual_entry(day, _clock(start), _clock(end), TZ))
    # Afternoon nap still running
    intervals.append(OngoingSleep(start_time=NOW - datetime.timedelta(minutes=35)))
    return intervals


def _hm(value: datetime.timedelta) -> str:
    hours, minutes = hours_minutes(value)
    return f"{hours}h {minutes:02d}m"


if __name__ == "__main__":
    intervals = build_week()
    completed = sum(isinstance(i, CompletedSleep) for i in intervals)
    print(f"{len(intervals)} intervals ({completed} completed) as of {NOW.isoformat()}")
    print()

    summary = compute_summary(intervals, Period.WEEK, NOW)
    print("Summary (week)")
    print(f"  average daily sleep:  {_hm(summary.average_daily_sleep)}")
    print(f"  sessions per day:     {summary.average_sleep_sessions:.1f}")
    print(f"  average night sleep:  {_hm(summary.average_night_sleep)}")
    print(f"  longest / shortest:   {_hm(summary.longest_sleep)} / {_hm(summary.shortest_sleep)}")
    print(f"  entries / days:       {summary.total_entries} / {summary.unique_days}")
    print()

    sleep_times = sleep_time_data(intervals, Period.WEEK, NOW)
    wake_times = wake_time_data(intervals, Period.WEEK, NOW)
    print(f"{'day':<4} {'hours':>6} {'asleep':>7} {'awake':>7}")
    for total, asleep, awake in zip(daily_totals(intervals, Period.WEEK, NOW), sleep_times, wake_times):
        marker = " <- today" if total.is_today else ""
        print(f"{total.day_label:<4} {total.total_hours:>6.1f} {asleep.time_label:>7} {awake.time_label:>7}{marker}")
    print()

    bedtime = average_bedtime(intervals, NOW)
    if bedtime is None:
        print("No bedtime data, reminder would be cancelled")
    else:
        reminder = compute_reminder_time(bedtime, 60)
        print(f"Average bedtime {bedtime:%H:%M}, reminder at {reminder:%H:%M}")
        print(f"  {reminder_body(60)}")
