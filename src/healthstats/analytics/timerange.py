"""Day-aligned trailing windows in local time."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time, timedelta, timezone

from healthstats.samples import to_local

# period_start / period_end of a result with no data behind it
EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


@dataclass(frozen=True)
class TimeRange:
    """A ``[start, end]`` window covering a trailing number of days."""

    start: datetime
    end: datetime

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end

    def overlaps(self, start: datetime, end: datetime) -> bool:
        return not (end < self.start or start > self.end)


def date_range(period_days: int, now: datetime | None = None) -> TimeRange:
    """Build the window for the last *period_days* days.

    The end is today at 23:59:59.999 local time; the start is *period_days*
    days before that, moved back to 00:00:00.000.

    Args:
        period_days: Window length in days (positive).
        now: Clock reading to anchor on (default: current time).
    """
    if period_days < 1:
        raise ValueError(f"period_days must be positive, got {period_days}")

    today = to_local(now if now is not None else datetime.now()).date()
    # Each bound carries the UTC offset in force on its own date
    end = datetime.combine(today, time(23, 59, 59, 999000)).astimezone()
    start = datetime.combine(today - timedelta(days=period_days), time.min).astimezone()
    return TimeRange(start=start, end=end)
