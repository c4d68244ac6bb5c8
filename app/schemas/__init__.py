"""Pydantic schemas for request/response validation."""

from app.schemas.progression import (
    Role,
    SkillState,
    LoggedSet,
    LoggedExercise,
    WorkoutSession,
    UserProgression,
    SessionStats,
    SkillUnlockRecord,
    ProgressionUpdate,
    SessionXPPreview,
)
from app.schemas.hunter import ProfileResponse, RoleUpdate, StatsResponse
from app.schemas.workout import (
    WorkoutCreate,
    WorkoutPreviewRequest,
    WorkoutLogResponse,
    WorkoutCompletionResponse,
)
from app.schemas.skill import SkillResponse, SkillTreeResponse, SkillUnlockResponse
from app.schemas.character import AttributeRatings, AchievementStatus, CharacterSheet

__all__ = [
    "Role",
    "SkillState",
    "LoggedSet",
    "LoggedExercise",
    "WorkoutSession",
    "UserProgression",
    "SessionStats",
    "SkillUnlockRecord",
    "ProgressionUpdate",
    "SessionXPPreview",
    "ProfileResponse",
    "RoleUpdate",
    "StatsResponse",
    "WorkoutCreate",
    "WorkoutPreviewRequest",
    "WorkoutLogResponse",
    "WorkoutCompletionResponse",
    "SkillResponse",
    "SkillTreeResponse",
    "SkillUnlockResponse",
    "AttributeRatings",
    "AchievementStatus",
    "CharacterSheet",
]
