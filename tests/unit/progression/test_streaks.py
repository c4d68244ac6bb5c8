"""Tests for the session / streak tracker."""

import datetime

import pytest

from app.progression.errors import InvalidInputError
from app.progression.streaks import apply_session, next_streak
from app.schemas.progression import SessionStats, WorkoutSession

DAY_1 = datetime.date(2026, 3, 2)


def _day(n: int) -> datetime.date:
    return DAY_1 + datetime.timedelta(days=n - 1)


def _session(n: int, xp: int = 67) -> WorkoutSession:
    return WorkoutSession(date=_day(n), xp_gained=xp)


def _replay(*days: int) -> SessionStats:
    stats = SessionStats()
    for n in days:
        stats = apply_session(stats, _session(n))
    return stats


# ======================================================================
# next_streak
# ======================================================================


class TestNextStreak:
    def test_first_session_starts_streak(self):
        assert next_streak(0, None, _day(1)) == 1

    def test_consecutive_day_extends(self):
        assert next_streak(4, _day(1), _day(2)) == 5

    def test_gap_resets(self):
        assert next_streak(4, _day(1), _day(3)) == 1

    def test_same_day_keeps_streak(self):
        assert next_streak(4, _day(1), _day(1)) == 4

    def test_same_day_leaves_stored_streak_as_is(self):
        assert next_streak(0, _day(1), _day(1)) == 0
        assert next_streak(1, _day(1), _day(1)) == 1


# ======================================================================
# apply_session
# ======================================================================


class TestApplySession:
    def test_first_session(self):
        stats = apply_session(SessionStats(), _session(1, xp=67))
        assert stats.total_sessions == 1
        assert stats.sessions_this_week == 1
        assert stats.total_xp_earned == 67
        assert stats.current_streak == 1
        assert stats.longest_streak == 1
        assert stats.last_workout_date == _day(1)

    def test_three_consecutive_days_then_gap(self):
        stats = _replay(1, 2, 3)
        assert stats.current_streak == 3
        assert stats.longest_streak == 3

        stats = apply_session(stats, _session(5))
        assert stats.current_streak == 1
        assert stats.longest_streak == 3

    def test_longest_streak_follows_new_record(self):
        stats = _replay(1, 2, 4, 5, 6)
        assert stats.current_streak == 3
        assert stats.longest_streak == 3

    def test_same_day_counts_but_does_not_extend_streak(self):
        stats = _replay(1, 2, 2)
        assert stats.total_sessions == 3
        assert stats.sessions_this_week == 3
        assert stats.total_xp_earned == 3 * 67
        assert stats.current_streak == 2

    def test_counters_never_decrease(self):
        stats = SessionStats()
        for n in [1, 2, 5, 6, 6, 10]:
            updated = apply_session(stats, _session(n))
            assert updated.total_sessions == stats.total_sessions + 1
            assert updated.sessions_this_week == stats.sessions_this_week + 1
            assert updated.total_xp_earned >= stats.total_xp_earned
            assert updated.longest_streak >= updated.current_streak
            stats = updated

    def test_out_of_order_session_rejected(self):
        stats = _replay(1, 3)
        with pytest.raises(InvalidInputError):
            apply_session(stats, _session(2))

    def test_input_is_not_mutated(self):
        stats = SessionStats()
        apply_session(stats, _session(1))
        assert stats.total_sessions == 0
        assert stats.last_workout_date is None


class TestSessionStatsModel:
    def test_longest_must_cover_current(self):
        with pytest.raises(ValueError):
            SessionStats(current_streak=3, longest_streak=2)
