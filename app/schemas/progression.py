"""
Progression engine data model.

These are the value types the pure engine consumes and produces.  All of
them are frozen: engine functions return new instances via
``model_copy(update=...)`` instead of mutating their inputs.

- :class:`UserProgression`: level / XP / skill points / role.
- :class:`SessionStats`: aggregate session and streak counters.
- :class:`WorkoutSession`: one completed workout, fed to the engine as
  an input event.
- :class:`SkillUnlockRecord`: one unlocked skill for one user.
"""

from __future__ import annotations

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Role(str, Enum):
    """Hunter class chosen during onboarding."""
    ASSASSIN = "Assassin"
    WARDEN = "Warden"
    ARBITER = "Arbiter"
    SHADOWMANCER = "Shadowmancer"


class SkillState(str, Enum):
    """Per-user state of a single skill.

    ``locked -> eligible`` when the skill's predicate holds,
    ``eligible -> unlocked`` only through an explicit unlock.
    ``unlocked`` is terminal.
    """
    LOCKED = "locked"
    ELIGIBLE = "eligible"
    UNLOCKED = "unlocked"


# ======================================================================
# Logged workout data
# ======================================================================


class LoggedSet(BaseModel):
    """A single completed set."""

    model_config = ConfigDict(frozen=True)

    reps: int = Field(..., gt=0, description="Repetitions performed")
    weight: float = Field(..., ge=0.0, description="Load in kilograms")
    rpe: Optional[int] = Field(None, ge=1, le=10, description="Rate of perceived exertion (1-10)")


class LoggedExercise(BaseModel):
    """All sets logged for one exercise, in the order they were performed."""

    model_config = ConfigDict(frozen=True)

    exercise_id: str = Field(..., min_length=1, max_length=100)
    exercise_name: Optional[str] = Field(None, max_length=255)
    sets: list[LoggedSet] = Field(default_factory=list)

    @property
    def total_volume(self) -> float:
        """Sum of ``reps * weight`` over all sets."""
        return sum(s.reps * s.weight for s in self.sets)


class WorkoutSession(BaseModel):
    """A completed workout.  Immutable once created."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    exercises: list[LoggedExercise] = Field(default_factory=list)
    xp_gained: int = Field(..., ge=0)


# ======================================================================
# Per-user state
# ======================================================================


class UserProgression(BaseModel):
    """Level, XP and skill points of one hunter.

    Owned by the progression updater; every other component reads it.
    """

    model_config = ConfigDict(frozen=True)

    level: int = Field(1, ge=1)
    xp: int = Field(0, ge=0)
    skill_points: int = Field(0, ge=0)
    role: Role = Role.ASSASSIN


class SessionStats(BaseModel):
    """Aggregate counters owned by the session/streak tracker."""

    model_config = ConfigDict(frozen=True)

    sessions_this_week: int = Field(0, ge=0)
    current_streak: int = Field(0, ge=0)
    longest_streak: int = Field(0, ge=0)
    total_sessions: int = Field(0, ge=0)
    total_xp_earned: int = Field(0, ge=0)
    last_workout_date: Optional[datetime.date] = None

    @model_validator(mode="after")
    def _longest_covers_current(self) -> "SessionStats":
        if self.longest_streak < self.current_streak:
            raise ValueError("longest_streak must be >= current_streak")
        return self


class SkillUnlockRecord(BaseModel):
    """Unlock bookkeeping for one (user, skill) pair.  Never deleted."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    skill_id: str
    unlocked: bool = False
    unlocked_at: Optional[datetime.datetime] = None


# ======================================================================
# Engine results
# ======================================================================


class ProgressionUpdate(BaseModel):
    """Result of applying earned XP to a progression."""

    model_config = ConfigDict(frozen=True)

    progression: UserProgression
    level_ups: int = Field(0, ge=0)

    @property
    def leveled_up(self) -> bool:
        return self.level_ups > 0


class SetXP(BaseModel):
    """Live XP feedback for one set."""

    reps: int
    weight: float
    rpe: Optional[int] = None
    xp: int


class ExerciseXP(BaseModel):
    """XP breakdown for one exercise."""

    exercise_id: str
    total_volume: float
    set_count: int
    sets: list[SetXP]
    xp: int


class SessionXPPreview(BaseModel):
    """XP breakdown for a whole session, without persisting anything."""

    exercises: list[ExerciseXP]
    session_bonus: int
    total_xp: int
