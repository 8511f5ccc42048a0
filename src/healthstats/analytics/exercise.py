"""Exercise minutes over a period."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Sequence

import numpy as np

from healthstats.analytics.timerange import EPOCH, TimeRange
from healthstats.samples import IntervalSample


@dataclass(frozen=True)
class ExerciseStats:
    """Exercise summary for a period."""

    average_minutes: float  # per calendar day of the period
    total_minutes: float
    period_start: datetime
    period_end: datetime

    @classmethod
    def empty(cls, period_start: datetime = EPOCH, period_end: datetime = EPOCH) -> ExerciseStats:
        return cls(
            average_minutes=0.0,
            total_minutes=0.0,
            period_start=period_start,
            period_end=period_end,
        )

    @property
    def has_data(self) -> bool:
        return self.period_start != EPOCH

    def to_dict(self) -> dict[str, Any]:
        return {
            "average_minutes": self.average_minutes,
            "total_minutes": self.total_minutes,
            "period_start": self.period_start.isoformat(),
            "period_end": self.period_end.isoformat(),
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def __repr__(self) -> str:
        return (
            f"ExerciseStats(total={self.total_minutes:.0f}min, "
            f"avg={self.average_minutes:.1f}min/day)"
        )


def samples_in_window(
    samples: Sequence[IntervalSample],
    window: TimeRange,
) -> list[IntervalSample]:
    """Keep well-formed samples lying entirely inside *window*."""
    return [
        s for s in (x.to_local() for x in samples)
        if not s.is_malformed and s.start >= window.start and s.end <= window.end
    ]


def aggregate_exercise(
    samples: Sequence[IntervalSample],
    window: TimeRange,
    period_days: int,
) -> ExerciseStats:
    """Sum exercise minutes in *window*.

    The average divides by *period_days*, the requested period length,
    whether or not every day had exercise.
    """
    kept = samples_in_window(samples, window)
    total = float(np.sum([s.quantity for s in kept])) if kept else 0.0

    return ExerciseStats(
        average_minutes=total / period_days,
        total_minutes=total,
        period_start=window.start,
        period_end=window.end,
    )
