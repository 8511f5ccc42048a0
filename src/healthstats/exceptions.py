"""Exception classes for the health statistics engine.

Data sources raise these; :class:`healthstats.facade.HealthFacade` catches
them at its boundary and answers with default stats instead.
"""

from __future__ import annotations

from typing import Any


class HealthStatsError(Exception):
    """Base exception for the engine."""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)


class PermissionDeniedError(HealthStatsError):
    """The data source refused read access."""

    def __init__(self, source: str):
        super().__init__(
            message=f"Permission denied by {source}",
            code="PERMISSION_DENIED",
            details={"source": source},
        )


class SourceUnavailableError(HealthStatsError):
    """No health data backend is available on this platform."""

    def __init__(self, source: str):
        super().__init__(
            message=f"Health data source unavailable: {source}",
            code="SOURCE_UNAVAILABLE",
            details={"source": source},
        )


class UpstreamQueryError(HealthStatsError):
    """A store or API query failed."""

    def __init__(self, source: str, message: str):
        super().__init__(
            message=f"Query failed ({source}): {message}",
            code="UPSTREAM_QUERY_FAILED",
            details={"source": source},
        )


class MalformedSampleError(HealthStatsError):
    """A raw sample record could not be parsed."""

    def __init__(self, message: str, record: Any = None):
        super().__init__(
            message=f"Malformed sample: {message}",
            code="MALFORMED_SAMPLE",
            details={"record": record},
        )
