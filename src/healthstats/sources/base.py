"""The data source interface every health backend implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from healthstats.samples import IntervalSample


class HealthDataSource(ABC):
    """Supplies raw samples and answers permission/availability checks.

    All methods are coroutines. Query methods may raise
    :class:`healthstats.exceptions.HealthStatsError` subclasses; callers
    treat a failure the same as an empty result.
    """

    name: str = "base"

    @abstractmethod
    async def request_permissions(self) -> bool:
        """Ask for read access. Safe to call repeatedly."""

    @abstractmethod
    async def check_availability(self) -> bool:
        """Whether this backend can supply data at all."""

    @abstractmethod
    async def query_exercise_samples(self, start: datetime, end: datetime) -> list[IntervalSample]:
        """Exercise intervals (quantity in minutes) between *start* and *end*."""

    @abstractmethod
    async def query_sleep_samples(self, start: datetime, end: datetime) -> list[IntervalSample]:
        """Sleep-stage intervals between *start* and *end*."""

    async def query_mood_samples(self, start: datetime, end: datetime) -> list[IntervalSample]:
        """Mood valence samples. No backend records mood yet."""
        return []

    async def aclose(self) -> None:
        """Release any held resources."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
