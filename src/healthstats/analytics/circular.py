"""Circular mean of clock times.

Averaging clock times arithmetically breaks across midnight: 23:00 and
01:00 would average to 12:00. Instead each time of day is placed on a
24-hour circle and the direction of the mean vector is taken, so the same
pair averages to 00:00.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Sequence

import numpy as np
from scipy.stats import circmean

HOURS_PER_DAY = 24.0
MINUTES_PER_DAY = 24 * 60

# Float noise around an exact minute (e.g. 23:59:59.9999999 for midnight)
_MINUTE_EPS = 1e-6


def clock_hours(moment: datetime) -> float:
    """Hour of day plus minute fraction; seconds are ignored."""
    return moment.hour + moment.minute / 60.0


def format_hhmm(hours: float) -> str:
    """Format fractional hours of day as zero-padded ``HH:MM``."""
    total_min = math.floor(hours * 60.0 + _MINUTE_EPS) % MINUTES_PER_DAY
    return f"{total_min // 60:02d}:{total_min % 60:02d}"


def circular_mean_hours(times: Sequence[datetime]) -> float | None:
    """Mean time of day in fractional hours, in ``[0, 24)``.

    Returns None for an empty input.
    """
    if len(times) == 0:
        return None
    hours = np.array([clock_hours(t) for t in times], dtype=np.float64)
    return float(circmean(hours, high=HOURS_PER_DAY, low=0.0))


def circular_mean_time(times: Sequence[datetime]) -> str:
    """Average clock time of *times* as ``HH:MM``.

    An empty input gives ``"00:00"``.
    """
    mean = circular_mean_hours(times)
    if mean is None:
        return "00:00"
    return format_hhmm(mean)
