"""Tests for healthstats.analytics.exercise and .mood."""

import json

import pytest

from healthstats.analytics.exercise import ExerciseStats, aggregate_exercise, samples_in_window
from healthstats.analytics.mood import MentalHealthStats, aggregate_mood
from healthstats.analytics.timerange import EPOCH, date_range

from tests.conftest import NOW, at, exercise, sample


@pytest.fixture
def week():
    return date_range(7, now=NOW)


class TestSamplesInWindow:
    def test_keeps_fully_inside(self, week):
        kept = samples_in_window([exercise(at(10, 9), 30)], week)
        assert len(kept) == 1

    def test_drops_straddling_start(self, week):
        kept = samples_in_window([exercise(at(6, 23, 50), 30)], week)
        assert kept == []

    def test_drops_malformed(self, week):
        kept = samples_in_window([sample(at(10, 10), at(10, 9), 30)], week)
        assert kept == []


class TestAggregateExercise:
    @pytest.mark.parametrize("period_days", [1, 7, 30, 42, 180])
    def test_no_samples_is_zero(self, period_days):
        window = date_range(period_days, now=NOW)
        stats = aggregate_exercise([], window, period_days)
        assert stats.average_minutes == 0.0
        assert stats.total_minutes == 0.0

    def test_total_and_average(self, week):
        samples = [exercise(at(d, 7), 20) for d in range(8, 15)]
        stats = aggregate_exercise(samples, week, 7)
        assert stats.total_minutes == 140.0
        assert stats.average_minutes == 20.0

    def test_divides_by_period_not_active_days(self):
        window = date_range(30, now=NOW)
        stats = aggregate_exercise([exercise(at(10, 7), 60)], window, 30)
        assert stats.average_minutes == pytest.approx(2.0)

    def test_out_of_window_excluded(self, week):
        samples = [exercise(at(1, 7), 45), exercise(at(12, 7), 30)]
        stats = aggregate_exercise(samples, week, 7)
        assert stats.total_minutes == 30.0

    def test_period_bounds(self, week):
        stats = aggregate_exercise([], week, 7)
        assert stats.period_start == week.start
        assert stats.period_end == week.end


class TestExerciseStats:
    def test_empty_uses_epoch(self):
        stats = ExerciseStats.empty()
        assert stats.period_start == stats.period_end == EPOCH
        assert not stats.has_data

    def test_to_json(self, week):
        stats = aggregate_exercise([exercise(at(12, 7), 30)], week, 7)
        d = json.loads(stats.to_json())
        assert d["total_minutes"] == 30.0
        assert "period_end" in d

    def test_repr(self):
        s = repr(ExerciseStats(20.0, 140.0, EPOCH, EPOCH))
        assert "140" in s


class TestAggregateMood:
    def test_no_samples(self, week):
        stats = aggregate_mood([], week)
        assert stats.average_valence == 0.0

    def test_mean_valence(self, week):
        samples = [
            sample(at(10, 9), at(10, 9), 0.6),
            sample(at(11, 9), at(11, 9), 0.8),
        ]
        stats = aggregate_mood(samples, week)
        assert stats.average_valence == pytest.approx(0.7)

    def test_empty_stats(self):
        stats = MentalHealthStats.empty()
        assert stats.average_valence == 0.0
        assert stats.period_start == EPOCH
