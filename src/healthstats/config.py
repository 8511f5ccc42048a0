"""Runtime configuration, read from ``HEALTHSTATS_*`` environment variables or ``.env``."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Backend(str, Enum):
    """Which health data source variant to use."""

    NATIVE = "native"  # on-device health store export
    CLOUD = "cloud"  # fitness cloud REST API
    UNAVAILABLE = "unavailable"  # no data on this platform


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HEALTHSTATS_",
        env_file=".env",
        extra="ignore",
    )

    # Data source selection
    backend: Backend = Backend.UNAVAILABLE

    # Native store
    samples_path: str = "health_samples.jsonl"

    # Cloud fitness API
    cloud_base_url: str = "http://localhost:8080"
    cloud_api_token: str = ""
    cloud_timeout_s: float = 10.0

    # Aggregation
    cache_ttl_minutes: float = 30.0
    session_gap_hours: float = 4.0
    day_boundary_hour: int = 4

    # Logging
    log_level: str = "INFO"
    log_json: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
