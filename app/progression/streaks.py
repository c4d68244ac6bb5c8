"""
Session / streak tracker.

Folds one completed :class:`WorkoutSession` into a hunter's
:class:`SessionStats`:

- ``total_sessions``, ``total_xp_earned`` and ``sessions_this_week``
  always increase.  ``sessions_this_week`` is reset only by the external
  weekly rollover, never here.
- Streak:

  * previous workout exactly one day earlier  -> streak + 1
  * previous workout on the same day          -> streak unchanged
  * no previous workout, or a gap of 2+ days  -> streak restarts at 1

- ``longest_streak`` tracks the maximum ``current_streak`` ever seen.

A same-day second submission is a real session (it counts towards totals,
XP and the weekly count) but it is not streak progress.  Sessions dated
before the last recorded workout are rejected.
"""

from __future__ import annotations

import datetime

from app.progression.errors import InvalidInputError
from app.schemas.progression import SessionStats, WorkoutSession

_ONE_DAY = datetime.timedelta(days=1)


def next_streak(current_streak: int, last_workout_date: datetime.date | None, session_date: datetime.date) -> int:
    """Streak length after a workout on *session_date*."""
    if last_workout_date is None:
        return 1
    if session_date == last_workout_date:
        return current_streak
    if session_date - last_workout_date == _ONE_DAY:
        return current_streak + 1
    return 1


def apply_session(stats: SessionStats, session: WorkoutSession) -> SessionStats:
    """Return *stats* updated with *session*.  Pure; never touches storage.

    Raises:
        InvalidInputError: if the session predates ``last_workout_date``.
    """
    last = stats.last_workout_date
    if last is not None and session.date < last:
        raise InvalidInputError("Session date precedes the last recorded workout",
                                {"session_date": session.date.isoformat(), "last_workout_date": last.isoformat()}, )

    streak = next_streak(stats.current_streak, last, session.date)

    return stats.model_copy(update={
        "sessions_this_week": stats.sessions_this_week + 1,
        "total_sessions": stats.total_sessions + 1,
        "total_xp_earned": stats.total_xp_earned + session.xp_gained,
        "current_streak": streak,
        "longest_streak": max(stats.longest_streak, streak),
        "last_workout_date": session.date,
    })
