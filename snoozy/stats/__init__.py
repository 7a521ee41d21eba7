"""Sleep statistics — per-day series, night grouping, aggregates, bedtime."""

from snoozy.stats.bedtime import average_bedtime, mean_clock_hours
from snoozy.stats.night import night_key, night_sleep_durations
from snoozy.stats.periods import DEFAULT_CONFIG, StatsConfig, filter_entries
from snoozy.stats.series import daily_totals, sleep_time_data, wake_time_data
from snoozy.stats.summary import (
    average_daily_sleep,
    average_night_sleep,
    average_sleep_sessions,
    compute_summary,
    has_data,
    longest_sleep,
    shortest_sleep,
    total_entries,
    total_sleep_duration,
    unique_days,
)

__all__ = [
    "StatsConfig",
    "DEFAULT_CONFIG",
    "filter_entries",
    "daily_totals",
    "sleep_time_data",
    "wake_time_data",
    "night_key",
    "night_sleep_durations",
    "average_daily_sleep",
    "average_sleep_sessions",
    "average_night_sleep",
    "longest_sleep",
    "shortest_sleep",
    "total_entries",
    "total_sleep_duration",
    "unique_days",
    "has_data",
    "compute_summary",
    "average_bedtime",
    "mean_clock_hours",
]
