"""Aggregation of raw health samples into periodic statistics.

Modules:
    timerange -- Day-aligned trailing windows
    circular  -- Circular mean of clock times
    sessions  -- Sleep session segmentation and day attribution
    sleep     -- Nightly bed/wake/duration statistics
    exercise  -- Exercise minutes per period
    mood      -- Mood valence per period
    summary   -- Text summary composition
"""

from healthstats.analytics.timerange import EPOCH, TimeRange, date_range
from healthstats.analytics.circular import circular_mean_time, circular_mean_hours
from healthstats.analytics.sessions import SleepSession, segment_sessions, session_day
from healthstats.analytics.sleep import (
    DailySleepRecord,
    SleepStats,
    aggregate_sleep,
    fold_sessions,
)
from healthstats.analytics.exercise import ExerciseStats, aggregate_exercise
from healthstats.analytics.mood import MentalHealthStats, aggregate_mood
from healthstats.analytics.summary import build_health_summary

__all__ = [
    # timerange
    "EPOCH",
    "TimeRange",
    "date_range",
    # circular
    "circular_mean_time",
    "circular_mean_hours",
    # sessions
    "SleepSession",
    "segment_sessions",
    "session_day",
    # sleep
    "DailySleepRecord",
    "SleepStats",
    "aggregate_sleep",
    "fold_sessions",
    # exercise
    "ExerciseStats",
    "aggregate_exercise",
    # mood
    "MentalHealthStats",
    "aggregate_mood",
    # summary
    "build_health_summary",
]
