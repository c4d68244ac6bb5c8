"""
Workout log database model.

Stores each completed workout with its logged exercises as JSON and the
XP it earned.  Rows are written once and never updated.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from app.models.timestamps import UTC_TIMESTAMP, utc_now


class WorkoutLog(SQLModel, table=True):
    """A single completed workout."""

    __tablename__ = "workout_logs"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(foreign_key="hunters.id", nullable=False, index=True, max_length=128)
    date: datetime.date = Field(nullable=False, index=True)

    # [{"exercise_id": ..., "exercise_name": ..., "sets": [{"reps", "weight", "rpe"}]}]
    exercises: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False), )
    xp_gained: int = Field(default=0, nullable=False)

    duration_minutes: Optional[int] = Field(default=None)
    notes: Optional[str] = Field(default=None, max_length=1000)

    created_at: datetime.datetime = Field(default_factory=utc_now, sa_type=UTC_TIMESTAMP)
