"""Shared fixtures and helpers for the healthstats test suite."""

from __future__ import annotations

from collections import Counter
from datetime import datetime, timedelta
from typing import Sequence

import pytest

from healthstats.samples import IntervalSample
from healthstats.sources.base import HealthDataSource

# Fixed "now" for deterministic windows: Saturday 2026-02-14, noon local
NOW = datetime(2026, 2, 14, 12, 0)


# ---------------------------------------------------------------------------
# Sample-building helpers
# ---------------------------------------------------------------------------


def at(day: int, hour: int = 0, minute: int = 0, month: int = 2) -> datetime:
    """Naive local datetime in 2026 (February by default)."""
    return datetime(2026, month, day, hour, minute)


def sample(start: datetime, end: datetime, quantity: float = 0.0) -> IntervalSample:
    return IntervalSample(start=start, end=end, quantity=quantity)


def exercise(start: datetime, minutes: float) -> IntervalSample:
    """An exercise interval whose quantity equals its length in minutes."""
    return IntervalSample(start=start, end=start + timedelta(minutes=minutes), quantity=minutes)


def night(day: int, bed_hour: int = 23, minutes: float = 480) -> IntervalSample:
    """One uninterrupted sleep sample starting on *day* at *bed_hour*."""
    start = at(day, bed_hour)
    return sample(start, start + timedelta(minutes=minutes), quantity=1)


# ---------------------------------------------------------------------------
# Test doubles
# ---------------------------------------------------------------------------


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, t: float = 0.0) -> None:
        self.t = t

    def __call__(self) -> float:
        return self.t

    def advance(self, seconds: float) -> None:
        self.t += seconds


class FakeSource(HealthDataSource):
    """In-memory data source that counts calls."""

    name = "fake"

    def __init__(
        self,
        exercise: Sequence[IntervalSample] = (),
        sleep: Sequence[IntervalSample] = (),
        mood: Sequence[IntervalSample] = (),
        granted: bool = True,
        available: bool = True,
        fail: Exception | None = None,
        permission_error: Exception | None = None,
    ) -> None:
        self.exercise = list(exercise)
        self.sleep = list(sleep)
        self.mood = list(mood)
        self.granted = granted
        self.available = available
        self.fail = fail
        self.permission_error = permission_error
        self.calls: Counter[str] = Counter()
        self.closed = False

    async def request_permissions(self) -> bool:
        self.calls["permissions"] += 1
        if self.permission_error is not None:
            raise self.permission_error
        return self.granted

    async def check_availability(self) -> bool:
        self.calls["availability"] += 1
        return self.available

    async def query_exercise_samples(self, start, end):
        self.calls["exercise"] += 1
        if self.fail is not None:
            raise self.fail
        return list(self.exercise)

    async def query_sleep_samples(self, start, end):
        self.calls["sleep"] += 1
        if self.fail is not None:
            raise self.fail
        return list(self.sleep)

    async def query_mood_samples(self, start, end):
        self.calls["mood"] += 1
        if self.fail is not None:
            raise self.fail
        return list(self.mood)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
