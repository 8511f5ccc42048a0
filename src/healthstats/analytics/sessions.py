"""Group sleep samples into sessions and date them.

A session is a run of samples where no sample starts more than the gap
threshold after the previous one ended. Each session is then attributed to
a calendar day: a session waking at or after the day-boundary hour belongs
to its wake day, one ending earlier (a short nap past midnight, say)
belongs to the day it started.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Sequence

from healthstats.analytics.timerange import TimeRange
from healthstats.samples import IntervalSample

SESSION_GAP = timedelta(hours=4)
DAY_BOUNDARY_HOUR = 4


@dataclass
class SleepSession:
    """An ordered, non-empty run of samples from one sleep episode."""

    samples: list[IntervalSample]

    @property
    def start(self) -> datetime:
        return self.samples[0].start

    @property
    def end(self) -> datetime:
        return self.samples[-1].end

    @property
    def total_minutes(self) -> float:
        return sum(s.duration_min for s in self.samples)

    def __repr__(self) -> str:
        return (
            f"SleepSession({self.start:%Y-%m-%d %H:%M} -> {self.end:%Y-%m-%d %H:%M}, "
            f"{self.total_minutes:.0f}min, samples={len(self.samples)})"
        )


def segment_sessions(
    samples: Sequence[IntervalSample],
    window: TimeRange | None = None,
    gap: timedelta = SESSION_GAP,
) -> list[SleepSession]:
    """Split *samples* into sessions.

    Args:
        samples: Interval samples in any order.
        window: If given, sessions not overlapping it at all are dropped.
        gap: A gap of at least this long between one sample's end and the
            next one's start opens a new session.

    Returns:
        Sessions in chronological order. Samples with equal start times keep
        their input order.
    """
    ordered = sorted(
        (s for s in (x.to_local() for x in samples) if not s.is_malformed),
        key=lambda s: s.start,
    )

    sessions: list[SleepSession] = []
    current: list[IntervalSample] = []
    for i, sample in enumerate(ordered):
        if i == 0 or sample.start - ordered[i - 1].end >= gap:
            if current:
                sessions.append(SleepSession(current))
            current = [sample]
        else:
            current.append(sample)
    if current:
        sessions.append(SleepSession(current))

    if window is not None:
        sessions = [s for s in sessions if window.overlaps(s.start, s.end)]
    return sessions


def session_day(session: SleepSession, boundary_hour: int = DAY_BOUNDARY_HOUR) -> date:
    """Calendar day a session is reported under.

    Wake time at or after *boundary_hour*: the wake day. Otherwise the day
    the session started.
    """
    if session.end.hour >= boundary_hour:
        return session.end.date()
    return session.start.date()
