"""Nightly sleep statistics from raw sleep-stage samples.

Samples are segmented into sessions (:mod:`healthstats.analytics.sessions`),
each session is folded into a per-day record, and the day records are
reduced to an average time in bed plus circular-mean bed and wake times.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Sequence

import numpy as np

from healthstats.analytics.circular import circular_mean_time
from healthstats.analytics.sessions import (
    DAY_BOUNDARY_HOUR,
    SESSION_GAP,
    SleepSession,
    segment_sessions,
    session_day,
)
from healthstats.analytics.timerange import EPOCH, TimeRange
from healthstats.samples import IntervalSample


@dataclass
class DailySleepRecord:
    """Sleep attributed to one calendar day."""

    date_key: date
    first_bedtime: datetime | None = None
    last_wake_time: datetime | None = None
    total_sleep_min: float = 0.0

    def add_session(self, session: SleepSession) -> None:
        # The first bedtime sticks; the wake time tracks the latest session.
        if self.first_bedtime is None:
            self.first_bedtime = session.start
        self.last_wake_time = session.end
        self.total_sleep_min += session.total_minutes


@dataclass(frozen=True)
class SleepStats:
    """Sleep summary for a period."""

    average_time_in_bed: float  # minutes per night with sleep
    average_bedtime: str  # HH:MM
    average_wake_time: str  # HH:MM
    period_start: datetime
    period_end: datetime

    @classmethod
    def empty(cls, period_start: datetime = EPOCH, period_end: datetime = EPOCH) -> SleepStats:
        return cls(
            average_time_in_bed=0.0,
            average_bedtime="00:00",
            average_wake_time="00:00",
            period_start=period_start,
            period_end=period_end,
        )

    @property
    def has_data(self) -> bool:
        return self.period_start != EPOCH

    def to_dict(self) -> dict[str, Any]:
        return {
            "average_time_in_bed": self.average_time_in_bed,
            "average_bedtime": self.average_bedtime,
            "average_wake_time": self.average_wake_time,
            "period_start": self.period_start.isoformat(),
            "period_end": self.period_end.isoformat(),
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def __repr__(self) -> str:
        return (
            f"SleepStats(in_bed={self.average_time_in_bed:.0f}min, "
            f"bed={self.average_bedtime}, wake={self.average_wake_time})"
        )


def fold_sessions(
    sessions: Sequence[SleepSession],
    boundary_hour: int = DAY_BOUNDARY_HOUR,
) -> dict[date, DailySleepRecord]:
    """Fold sessions, in chronological order, into one record per day."""
    days: dict[date, DailySleepRecord] = {}
    for session in sessions:
        key = session_day(session, boundary_hour)
        record = days.get(key)
        if record is None:
            record = days[key] = DailySleepRecord(date_key=key)
        record.add_session(session)
    return days


def aggregate_sleep(
    samples: Sequence[IntervalSample],
    window: TimeRange,
    gap: timedelta = SESSION_GAP,
    boundary_hour: int = DAY_BOUNDARY_HOUR,
) -> SleepStats:
    """Compute sleep statistics for *window*.

    Args:
        samples: Sleep samples in any order.
        window: The reporting period.
        gap: Session gap threshold.
        boundary_hour: Hour before which a wake-up counts for the start day.

    Returns:
        SleepStats. Time in bed is averaged over the days that had any sleep,
        not over the whole period; zero/"00:00" when nothing qualifies.
    """
    sessions = segment_sessions(samples, window=window, gap=gap)
    days = fold_sessions(sessions, boundary_hour)

    records = list(days.values())
    bedtimes = [r.first_bedtime for r in records if r.first_bedtime is not None]
    wake_times = [r.last_wake_time for r in records if r.last_wake_time is not None]
    totals = np.array([r.total_sleep_min for r in records], dtype=np.float64)
    slept = totals[totals > 0]

    average_in_bed = float(slept.mean()) if slept.size > 0 else 0.0

    return SleepStats(
        average_time_in_bed=average_in_bed,
        average_bedtime=circular_mean_time(bedtimes),
        average_wake_time=circular_mean_time(wake_times),
        period_start=window.start,
        period_end=window.end,
    )
