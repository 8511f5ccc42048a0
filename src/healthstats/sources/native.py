"""On-device health store, read from its JSONL export.

The store is loaded lazily on the first query and kept in memory for the
life of the source. See :mod:`healthstats.samples` for the line format.
"""

from __future__ import annotations

import asyncio
import os
from datetime import datetime
from pathlib import Path

from healthstats.exceptions import PermissionDeniedError, UpstreamQueryError
from healthstats.log import get_logger
from healthstats.samples import IntervalSample, SampleKind, iter_sample_file, to_local
from healthstats.sources.base import HealthDataSource

logger = get_logger(__name__)


class NativeStoreSource(HealthDataSource):
    """Reads samples from an exported on-device store file."""

    name = "native"

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._samples: dict[SampleKind, list[IntervalSample]] | None = None
        self._lock = asyncio.Lock()

    async def check_availability(self) -> bool:
        return self.path.is_file()

    async def request_permissions(self) -> bool:
        granted = self.path.is_file() and os.access(self.path, os.R_OK)
        if not granted:
            logger.info("native_store_permission_denied", path=str(self.path))
        return granted

    def _read(self) -> dict[SampleKind, list[IntervalSample]]:
        by_kind: dict[SampleKind, list[IntervalSample]] = {k: [] for k in SampleKind}
        for kind, sample in iter_sample_file(self.path):
            by_kind[kind].append(sample)
        logger.debug(
            "native_store_loaded",
            path=str(self.path),
            counts={k.value: len(v) for k, v in by_kind.items()},
        )
        return by_kind

    async def _load(self) -> dict[SampleKind, list[IntervalSample]]:
        async with self._lock:
            if self._samples is None:
                if not self.path.is_file():
                    raise PermissionDeniedError(self.name)
                try:
                    self._samples = await asyncio.to_thread(self._read)
                except OSError as e:
                    raise UpstreamQueryError(self.name, str(e)) from e
            return self._samples

    async def _query(self, kind: SampleKind, start: datetime, end: datetime) -> list[IntervalSample]:
        samples = (await self._load())[kind]
        start, end = to_local(start), to_local(end)
        # Anything touching the window; the aggregators apply their own edges.
        return [s for s in samples if to_local(s.end) >= start and to_local(s.start) <= end]

    async def query_exercise_samples(self, start: datetime, end: datetime) -> list[IntervalSample]:
        return await self._query(SampleKind.EXERCISE, start, end)

    async def query_sleep_samples(self, start: datetime, end: datetime) -> list[IntervalSample]:
        return await self._query(SampleKind.SLEEP, start, end)

    async def query_mood_samples(self, start: datetime, end: datetime) -> list[IntervalSample]:
        return await self._query(SampleKind.MOOD, start, end)

    def __repr__(self) -> str:
        return f"NativeStoreSource({str(self.path)!r})"
