"""Fitness cloud API client.

Endpoints (all JSON, bearer-token authenticated)::

    GET /v1/status                              -> {"available": true}
    GET /v1/permissions                         -> {"granted": true}
    GET /v1/samples/{kind}?start=ISO&end=ISO    -> {"samples": [{"start": ..., "end": ..., "quantity": ...}]}
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

import httpx

from healthstats.exceptions import MalformedSampleError, UpstreamQueryError
from healthstats.log import get_logger
from healthstats.samples import IntervalSample, SampleKind, parse_sample
from healthstats.sources.base import HealthDataSource

logger = get_logger(__name__)


class CloudFitnessSource(HealthDataSource):
    """Pulls samples from a fitness REST API.

    Args:
        base_url: API root, e.g. ``"https://fitness.example.com"``.
        token: Bearer token; sent only when non-empty.
        timeout_s: Per-request timeout.
        client: Pre-built client to use instead of creating one (it is then
            not closed by :meth:`aclose`).
    """

    name = "cloud"

    def __init__(
        self,
        base_url: str,
        token: str = "",
        timeout_s: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url
        self._owns_client = client is None
        if client is None:
            headers = {"Authorization": f"Bearer {token}"} if token else {}
            client = httpx.AsyncClient(
                base_url=base_url,
                headers=headers,
                timeout=httpx.Timeout(timeout_s),
            )
        self._client = client

    async def _get(self, path: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise UpstreamQueryError(self.name, f"{path} returned {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise UpstreamQueryError(self.name, f"{path}: {e}") from e
        except ValueError as e:
            raise UpstreamQueryError(self.name, f"{path}: invalid JSON") from e

    async def check_availability(self) -> bool:
        try:
            body = await self._get("/v1/status")
        except UpstreamQueryError as e:
            logger.warning("cloud_status_failed", error=e.message)
            return False
        return bool(body.get("available", False))

    async def request_permissions(self) -> bool:
        try:
            body = await self._get("/v1/permissions")
        except UpstreamQueryError as e:
            logger.warning("cloud_permission_request_failed", error=e.message)
            return False
        return bool(body.get("granted", False))

    async def _query(self, kind: SampleKind, start: datetime, end: datetime) -> list[IntervalSample]:
        body = await self._get(
            f"/v1/samples/{kind.value}",
            params={"start": start.isoformat(), "end": end.isoformat()},
        )
        samples: list[IntervalSample] = []
        for record in body.get("samples", []):
            try:
                _, sample = parse_sample({"kind": kind.value, **record})
            except (MalformedSampleError, TypeError) as e:
                logger.warning("cloud_sample_malformed", kind=kind.value, record=record, error=str(e))
                continue
            samples.append(sample)
        return samples

    async def query_exercise_samples(self, start: datetime, end: datetime) -> list[IntervalSample]:
        return await self._query(SampleKind.EXERCISE, start, end)

    async def query_sleep_samples(self, start: datetime, end: datetime) -> list[IntervalSample]:
        return await self._query(SampleKind.SLEEP, start, end)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def __repr__(self) -> str:
        return f"CloudFitnessSource({self.base_url!r})"
