"""Tests for healthstats.analytics.sessions -- segmentation and day attribution."""

from datetime import date, timedelta

from healthstats.analytics.sessions import (
    DAY_BOUNDARY_HOUR,
    SESSION_GAP,
    SleepSession,
    segment_sessions,
    session_day,
)
from healthstats.analytics.timerange import date_range
from healthstats.samples import parse_sample

from tests.conftest import NOW, at, night, sample


class TestSegmentSessions:
    def test_empty(self):
        assert segment_sessions([]) == []

    def test_three_hour_gap_merges(self):
        samples = [sample(at(10, 22), at(10, 23)), sample(at(11, 2), at(11, 6))]
        sessions = segment_sessions(samples)
        assert len(sessions) == 1
        assert sessions[0].start.hour == 22
        assert sessions[0].end.hour == 6

    def test_five_hour_gap_splits(self):
        samples = [sample(at(10, 20), at(10, 21)), sample(at(11, 2), at(11, 6))]
        assert len(segment_sessions(samples)) == 2

    def test_exactly_threshold_splits(self):
        samples = [sample(at(10, 20), at(10, 22)), sample(at(11, 2), at(11, 6))]
        assert len(segment_sessions(samples)) == 2

    def test_just_under_threshold_merges(self):
        samples = [sample(at(10, 20), at(10, 22)), sample(at(11, 1, 59), at(11, 6))]
        assert len(segment_sessions(samples)) == 1

    def test_unsorted_input(self):
        samples = [
            sample(at(11, 3), at(11, 7)),
            sample(at(10, 23), at(11, 2)),
        ]
        sessions = segment_sessions(samples)
        assert len(sessions) == 1
        assert sessions[0].start.hour == 23
        assert sessions[0].total_minutes == 420.0

    def test_sessions_in_chronological_order(self):
        samples = [night(12), night(10), night(11)]
        sessions = segment_sessions(samples)
        assert [s.start.day for s in sessions] == [10, 11, 12]

    def test_ties_keep_input_order(self):
        first = sample(at(10, 23), at(11, 1), quantity=1)
        second = sample(at(10, 23), at(11, 2), quantity=2)
        sessions = segment_sessions([first, second])
        assert [s.quantity for s in sessions[0].samples] == [1, 2]

        sessions = segment_sessions([second, first])
        assert [s.quantity for s in sessions[0].samples] == [2, 1]

    def test_malformed_sample_excluded(self):
        samples = [sample(at(10, 23), at(11, 7)), sample(at(11, 9), at(11, 8))]
        sessions = segment_sessions(samples)
        assert len(sessions) == 1
        assert len(sessions[0].samples) == 1

    def test_mixed_naive_and_aware_instants(self):
        _, mixed = parse_sample({
            "kind": "sleep",
            "start": "2026-02-12T23:00:00",
            "end": "2026-02-13T23:00:00+00:00",
        })
        sessions = segment_sessions([mixed, sample(at(10, 23), at(11, 7))])
        assert len(sessions) == 2
        assert all(s.start.tzinfo is not None for s in sessions)

    def test_window_drops_non_overlapping(self):
        window = date_range(7, now=NOW)  # from Feb 7 00:00
        samples = [night(1), night(6, bed_hour=22), night(10)]
        sessions = segment_sessions(samples, window=window)
        # Feb 6 22:00 -> Feb 7 06:00 straddles the window start and is kept
        assert [s.start.day for s in sessions] == [6, 10]

    def test_custom_gap(self):
        samples = [sample(at(10, 20), at(10, 21)), sample(at(10, 23), at(11, 6))]
        assert len(segment_sessions(samples, gap=timedelta(hours=1))) == 2
        assert len(segment_sessions(samples, gap=SESSION_GAP)) == 1


class TestSleepSession:
    def test_derived_fields(self):
        session = SleepSession([
            sample(at(10, 23).astimezone(), at(11, 1).astimezone()),
            sample(at(11, 1, 30).astimezone(), at(11, 6).astimezone()),
        ])
        assert session.start.hour == 23
        assert session.end.hour == 6
        assert session.total_minutes == 120.0 + 270.0

    def test_repr(self):
        session = SleepSession([sample(at(10, 23), at(11, 7))])
        assert "480min" in repr(session)


class TestSessionDay:
    def _session(self, start, end):
        return segment_sessions([sample(start, end)])[0]

    def test_early_wake_counts_for_start_day(self):
        session = self._session(at(12, 22), at(13, 3, 30))
        assert session_day(session) == date(2026, 2, 12)

    def test_wake_after_boundary_counts_for_wake_day(self):
        session = self._session(at(12, 22), at(13, 4, 30))
        assert session_day(session) == date(2026, 2, 13)

    def test_wake_exactly_at_boundary_counts_for_wake_day(self):
        session = self._session(at(12, 23), at(13, DAY_BOUNDARY_HOUR))
        assert session_day(session) == date(2026, 2, 13)

    def test_daytime_nap_same_day(self):
        session = self._session(at(13, 14), at(13, 15))
        assert session_day(session) == date(2026, 2, 13)

    def test_custom_boundary(self):
        session = self._session(at(12, 23), at(13, 5))
        assert session_day(session, boundary_hour=6) == date(2026, 2, 12)
