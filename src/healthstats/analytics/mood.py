"""Mood (valence) over a period.

No data source records mood yet, so in practice the average is 0.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Sequence

import numpy as np

from healthstats.analytics.exercise import samples_in_window
from healthstats.analytics.timerange import EPOCH, TimeRange
from healthstats.samples import IntervalSample


@dataclass(frozen=True)
class MentalHealthStats:
    average_valence: float  # 0-1
    period_start: datetime
    period_end: datetime

    @classmethod
    def empty(cls, period_start: datetime = EPOCH, period_end: datetime = EPOCH) -> MentalHealthStats:
        return cls(average_valence=0.0, period_start=period_start, period_end=period_end)

    def to_dict(self) -> dict[str, Any]:
        return {
            "average_valence": self.average_valence,
            "period_start": self.period_start.isoformat(),
            "period_end": self.period_end.isoformat(),
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


def aggregate_mood(
    samples: Sequence[IntervalSample],
    window: TimeRange,
) -> MentalHealthStats:
    """Mean valence of the mood samples inside *window*, 0 if there are none."""
    kept = samples_in_window(samples, window)
    valence = float(np.mean([s.quantity for s in kept])) if kept else 0.0
    return MentalHealthStats(
        average_valence=valence,
        period_start=window.start,
        period_end=window.end,
    )
