"""
Workout log repository.

Logs are append-only: created once per completed workout, never updated.
"""

import datetime

from sqlmodel import Session, select

from app.models.workout_log import WorkoutLog


class WorkoutLogRepository:
    """Repository for WorkoutLog database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: WorkoutLog) -> WorkoutLog:
        self.session.add(entry)
        self.session.flush()
        return entry

    def get_recent_by_user(self, user_id: str, limit: int = 10, ) -> list[WorkoutLog]:
        """Get the most recent logs for a user, newest first."""
        statement = (
            select(WorkoutLog)
            .where(WorkoutLog.user_id == user_id)
            .order_by(WorkoutLog.date.desc(), WorkoutLog.id.desc())
            .limit(limit)
        )
        return list(self.session.exec(statement).all())

    def get_by_user_date_range(self, user_id: str, start: datetime.date, end: datetime.date, ) -> list[WorkoutLog]:
        """Get logs for a user within a date range (inclusive)."""
        statement = (
            select(WorkoutLog)
            .where(
                WorkoutLog.user_id == user_id,
                WorkoutLog.date >= start,
                WorkoutLog.date <= end,
            )
            .order_by(WorkoutLog.date, WorkoutLog.id)
        )
        return list(self.session.exec(statement).all())
