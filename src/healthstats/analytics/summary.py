"""Human-readable health summary.

Only sections backed by non-zero averages are included, in the order
exercise, mood, sleep. With nothing to report the summary is ``"unknown"``.
"""

from __future__ import annotations

import math

from healthstats.analytics.exercise import ExerciseStats
from healthstats.analytics.mood import MentalHealthStats
from healthstats.analytics.sleep import SleepStats

UNKNOWN = "unknown"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _fmt(value: float) -> str:
    return f"{value:.1f}".rstrip("0").rstrip(".")


def exercise_section(weekly: ExerciseStats, monthly: ExerciseStats) -> str | None:
    if weekly.average_minutes == 0:
        return None
    return (
        f"exercised average per day this week: {_fmt(weekly.average_minutes)}, "
        f"this month: {_fmt(monthly.average_minutes)} minutes."
    )


def mood_section(weekly: MentalHealthStats, monthly: MentalHealthStats) -> str | None:
    if weekly.average_valence == 0 or monthly.average_valence == 0:
        return None
    return (
        f"average weekly mood (0-10) {_fmt(weekly.average_valence * 10)} "
        f"and average monthly mood is {_fmt(monthly.average_valence * 10)}"
    )


def sleep_section(weekly: SleepStats, monthly: SleepStats) -> str | None:
    if weekly.average_time_in_bed == 0 or monthly.average_time_in_bed == 0:
        return None
    return (
        "Sleep stats:\n"
        f"  Weekly: {_round_half_up(weekly.average_time_in_bed / 60)} hours in bed, "
        f"typically at {weekly.average_bedtime}, up at {weekly.average_wake_time}\n"
        f"  Monthly: {_round_half_up(monthly.average_time_in_bed / 60)} hours in bed, "
        f"typically at {monthly.average_bedtime}, up at {monthly.average_wake_time}"
    )


def build_health_summary(
    weekly_exercise: ExerciseStats,
    monthly_exercise: ExerciseStats,
    weekly_mood: MentalHealthStats,
    monthly_mood: MentalHealthStats,
    weekly_sleep: SleepStats,
    monthly_sleep: SleepStats,
) -> str:
    """Compose the summary text from weekly and monthly stats.

    Returns:
        The non-empty sections joined by a blank line, or ``"unknown"``.
    """
    sections = [
        exercise_section(weekly_exercise, monthly_exercise),
        mood_section(weekly_mood, monthly_mood),
        sleep_section(weekly_sleep, monthly_sleep),
    ]
    present = [s for s in sections if s is not None]
    return "\n\n".join(present) if present else UNKNOWN
