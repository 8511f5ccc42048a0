"""Query surface over a health data source.

:class:`HealthFacade` wraps one :class:`~healthstats.sources.HealthDataSource`
chosen by the composition root (:func:`build_facade`) from configuration.
Every public query is total: permission denial returns the empty stats
object with both period bounds at :data:`~healthstats.analytics.EPOCH`,
and source failures are logged and treated as "no samples".
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable

from healthstats.analytics.exercise import ExerciseStats, aggregate_exercise
from healthstats.analytics.mood import MentalHealthStats, aggregate_mood
from healthstats.analytics.sessions import DAY_BOUNDARY_HOUR, SESSION_GAP
from healthstats.analytics.sleep import SleepStats, aggregate_sleep
from healthstats.analytics.summary import build_health_summary
from healthstats.analytics.timerange import TimeRange, date_range
from healthstats.cache import StatKind, StatsCache
from healthstats.config import Backend, Settings, get_settings
from healthstats.exceptions import HealthStatsError
from healthstats.log import get_logger
from healthstats.samples import IntervalSample
from healthstats.sources import (
    CloudFitnessSource,
    HealthDataSource,
    NativeStoreSource,
    UnavailableSource,
)

logger = get_logger(__name__)

WEEK = 7
MONTH = 30
SIX_WEEKS = 42
SIX_MONTHS = 180


@dataclass(frozen=True)
class QueryResult:
    """Stats plus why they are the no-data default, if they are."""

    stats: Any
    unavailable: str | None = None

    @property
    def ok(self) -> bool:
        return self.unavailable is None


class HealthFacade:
    """Per-period health statistics from one data source.

    Args:
        source: The backend to query.
        cache: Shared stats cache (a fresh 30-minute cache by default).
        now: Wall clock used to anchor query windows.
        session_gap: Gap that splits sleep sessions.
        day_boundary_hour: Wake hour before which a session counts for its
            start day.
    """

    def __init__(
        self,
        source: HealthDataSource,
        cache: StatsCache | None = None,
        now: Callable[[], datetime] = datetime.now,
        session_gap: timedelta = SESSION_GAP,
        day_boundary_hour: int = DAY_BOUNDARY_HOUR,
    ) -> None:
        self.source = source
        self.cache = cache if cache is not None else StatsCache()
        self._now = now
        self.session_gap = session_gap
        self.day_boundary_hour = day_boundary_hour

    # ------------------------------------------------------------------
    # Source calls, made total
    # ------------------------------------------------------------------

    async def check_availability(self) -> bool:
        try:
            return await self.source.check_availability()
        except Exception as e:
            logger.warning("availability_check_failed", source=self.source.name, error=str(e))
            return False

    async def request_permissions(self) -> bool:
        try:
            return await self.source.request_permissions()
        except Exception as e:
            logger.warning("permission_request_failed", source=self.source.name, error=str(e))
            return False

    async def _fetch(
        self,
        query: Callable[[datetime, datetime], Any],
        label: str,
        window: TimeRange,
    ) -> list[IntervalSample]:
        try:
            return list(await query(window.start, window.end))
        except HealthStatsError as e:
            logger.warning(f"{label}_query_failed", source=self.source.name, code=e.code, error=e.message)
        except Exception:
            logger.exception(f"{label}_query_error", source=self.source.name)
        return []

    # ------------------------------------------------------------------
    # Per-kind queries
    # ------------------------------------------------------------------

    async def exercise_result(self, period_days: int) -> QueryResult:
        if period_days < 1:
            return QueryResult(ExerciseStats.empty(), unavailable="invalid_period")
        cached = self.cache.get(StatKind.EXERCISE, period_days)
        if cached is not None:
            return QueryResult(cached)

        window = date_range(period_days, self._now())
        if not await self.request_permissions():
            return QueryResult(ExerciseStats.empty(), unavailable="permission_denied")

        samples = await self._fetch(self.source.query_exercise_samples, "exercise", window)
        stats = aggregate_exercise(samples, window, period_days)
        self.cache.put(StatKind.EXERCISE, period_days, stats)
        return QueryResult(stats)

    async def sleep_result(self, period_days: int) -> QueryResult:
        if period_days < 1:
            return QueryResult(SleepStats.empty(), unavailable="invalid_period")
        cached = self.cache.get(StatKind.SLEEP, period_days)
        if cached is not None:
            return QueryResult(cached)

        window = date_range(period_days, self._now())
        if not await self.request_permissions():
            return QueryResult(SleepStats.empty(), unavailable="permission_denied")

        samples = await self._fetch(self.source.query_sleep_samples, "sleep", window)
        stats = aggregate_sleep(
            samples,
            window,
            gap=self.session_gap,
            boundary_hour=self.day_boundary_hour,
        )
        self.cache.put(StatKind.SLEEP, period_days, stats)
        return QueryResult(stats)

    async def mood_result(self, period_days: int) -> QueryResult:
        if period_days < 1:
            return QueryResult(MentalHealthStats.empty(), unavailable="invalid_period")
        # Mood has no permission gate and is not cached.
        window = date_range(period_days, self._now())
        samples = await self._fetch(self.source.query_mood_samples, "mood", window)
        return QueryResult(aggregate_mood(samples, window))

    async def exercise_stats(self, period_days: int) -> ExerciseStats:
        return (await self.exercise_result(period_days)).stats

    async def sleep_stats(self, period_days: int) -> SleepStats:
        return (await self.sleep_result(period_days)).stats

    async def mood_stats(self, period_days: int) -> MentalHealthStats:
        return (await self.mood_result(period_days)).stats

    async def get_weekly_exercise_stats(self) -> ExerciseStats:
        return await self.exercise_stats(WEEK)

    async def get_monthly_exercise_stats(self) -> ExerciseStats:
        return await self.exercise_stats(MONTH)

    async def get_six_week_exercise_stats(self) -> ExerciseStats:
        return await self.exercise_stats(SIX_WEEKS)

    async def get_six_month_exercise_stats(self) -> ExerciseStats:
        return await self.exercise_stats(SIX_MONTHS)

    async def get_daily_mental_health_stats(self) -> MentalHealthStats:
        return await self.mood_stats(1)

    async def get_weekly_mental_health_stats(self) -> MentalHealthStats:
        return await self.mood_stats(WEEK)

    async def get_monthly_mental_health_stats(self) -> MentalHealthStats:
        return await self.mood_stats(MONTH)

    async def get_weekly_sleep_stats(self) -> SleepStats:
        return await self.sleep_stats(WEEK)

    async def get_monthly_sleep_stats(self) -> SleepStats:
        return await self.sleep_stats(MONTH)

    async def get_health_data_summarized(self) -> str:
        """Text summary of exercise, mood and sleep, or ``"unknown"``."""
        return build_health_summary(
            weekly_exercise=await self.get_weekly_exercise_stats(),
            monthly_exercise=await self.get_monthly_exercise_stats(),
            weekly_mood=await self.get_weekly_mental_health_stats(),
            monthly_mood=await self.get_monthly_mental_health_stats(),
            weekly_sleep=await self.get_weekly_sleep_stats(),
            monthly_sleep=await self.get_monthly_sleep_stats(),
        )

    async def aclose(self) -> None:
        await self.source.aclose()

    async def __aenter__(self) -> HealthFacade:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"HealthFacade({self.source!r}, cached={len(self.cache)})"


# ---------------------------------------------------------------------------
# Composition root
# ---------------------------------------------------------------------------


def create_source(settings: Settings) -> HealthDataSource:
    """Instantiate the data source variant named by ``settings.backend``."""
    if settings.backend == Backend.NATIVE:
        return NativeStoreSource(settings.samples_path)
    if settings.backend == Backend.CLOUD:
        return CloudFitnessSource(
            settings.cloud_base_url,
            token=settings.cloud_api_token,
            timeout_s=settings.cloud_timeout_s,
        )
    return UnavailableSource()


def build_facade(settings: Settings | None = None) -> HealthFacade:
    """Build a facade wired from *settings* (default: environment)."""
    if settings is None:
        settings = get_settings()
    source = create_source(settings)
    logger.debug("health_source_selected", backend=settings.backend.value, source=repr(source))
    return HealthFacade(
        source,
        cache=StatsCache(ttl_s=settings.cache_ttl_minutes * 60.0),
        session_gap=timedelta(hours=settings.session_gap_hours),
        day_boundary_hour=settings.day_boundary_hour,
    )
