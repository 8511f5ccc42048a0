"""Time-to-live cache for computed statistics.

All entries share a single freshness stamp: writing any entry restarts the
TTL for every entry, and once the TTL has passed every entry is stale
together. Entries are never evicted; stale ones are simply overwritten by
the next computation for the same key.
"""

from __future__ import annotations

import time
from enum import Enum
from typing import Any, Callable

from healthstats.log import get_logger

logger = get_logger(__name__)

DEFAULT_TTL_S = 30 * 60.0


class StatKind(str, Enum):
    EXERCISE = "exercise"
    SLEEP = "sleep"


class StatsCache:
    """Cache keyed by ``(kind, period_days)``.

    Args:
        ttl_s: Time to live in seconds.
        clock: Monotonic clock returning seconds (injectable for tests).
    """

    def __init__(
        self,
        ttl_s: float = DEFAULT_TTL_S,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_s = ttl_s
        self._clock = clock
        self._entries: dict[tuple[StatKind, int], Any] = {}
        self._last_write: float | None = None

    def _fresh(self) -> bool:
        if self._last_write is None:
            return False
        return self._clock() - self._last_write < self.ttl_s

    def get(self, kind: StatKind, period_days: int) -> Any | None:
        """Return the cached value, or None if absent or stale."""
        key = (kind, period_days)
        if key not in self._entries or not self._fresh():
            return None
        logger.debug("stats_cache_hit", kind=kind.value, period_days=period_days)
        return self._entries[key]

    def put(self, kind: StatKind, period_days: int, value: Any) -> None:
        self._entries[(kind, period_days)] = value
        self._last_write = self._clock()

    def clear(self) -> None:
        self._entries.clear()
        self._last_write = None

    def __len__(self) -> int:
        return len(self._entries)
