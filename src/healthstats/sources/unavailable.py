"""Stand-in source for platforms without any health backend."""

from __future__ import annotations

from datetime import datetime

from healthstats.exceptions import SourceUnavailableError
from healthstats.samples import IntervalSample
from healthstats.sources.base import HealthDataSource


class UnavailableSource(HealthDataSource):
    """Never grants access; every sample query raises :class:`SourceUnavailableError`."""

    name = "unavailable"

    async def request_permissions(self) -> bool:
        return False

    async def check_availability(self) -> bool:
        return False

    async def query_exercise_samples(self, start: datetime, end: datetime) -> list[IntervalSample]:
        raise SourceUnavailableError(self.name)

    async def query_sleep_samples(self, start: datetime, end: datetime) -> list[IntervalSample]:
        raise SourceUnavailableError(self.name)

    async def query_mood_samples(self, start: datetime, end: datetime) -> list[IntervalSample]:
        raise SourceUnavailableError(self.name)
