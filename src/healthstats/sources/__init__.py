"""Health data backends.

    native      -- On-device health store export (JSONL)
    cloud       -- Fitness cloud REST API
    unavailable -- Stub for platforms with no health data
"""

from healthstats.sources.base import HealthDataSource
from healthstats.sources.native import NativeStoreSource
from healthstats.sources.cloud import CloudFitnessSource
from healthstats.sources.unavailable import UnavailableSource

__all__ = [
    "HealthDataSource",
    "NativeStoreSource",
    "CloudFitnessSource",
    "UnavailableSource",
]
