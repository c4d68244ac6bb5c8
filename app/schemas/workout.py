"""
Workout API schemas.

Set-level constraints (``reps > 0``, ``weight >= 0``, ``1 <= rpe <= 10``)
are enforced by :class:`~app.schemas.progression.LoggedSet`, so malformed
data is rejected with 422 before reaching the engine.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.hunter import StatsResponse
from app.schemas.progression import LoggedExercise, Role


class WorkoutCreate(BaseModel):
    """Schema for completing a workout."""

    date: Optional[datetime.date] = Field(None, description="Workout date (defaults to today)")
    exercises: list[LoggedExercise] = Field(default_factory=list, max_length=50)
    duration_minutes: Optional[int] = Field(None, ge=0, le=1440)
    notes: Optional[str] = Field(None, max_length=1000, description="Optional session notes")


class WorkoutPreviewRequest(BaseModel):
    """Schema for an XP preview; nothing is persisted."""

    exercises: list[LoggedExercise] = Field(default_factory=list, max_length=50)


class WorkoutLogResponse(BaseModel):
    """Schema for a workout log in API responses."""

    id: int
    date: datetime.date
    exercises: list[LoggedExercise]
    xp_gained: int
    duration_minutes: Optional[int]
    notes: Optional[str]
    created_at: datetime.datetime


class ProgressionSnapshot(BaseModel):
    level: int
    xp: int
    skill_points: int
    role: Role


class WorkoutCompletionResponse(BaseModel):
    """Everything the client needs to celebrate a finished workout."""

    workout: WorkoutLogResponse
    xp_gained: int
    level_ups: int = Field(..., description="Levels gained by this workout (0 if none)")
    progression: ProgressionSnapshot
    stats: StatsResponse
    eligible_skills: list[str] = Field(..., description="Skills that can be unlocked right now")
