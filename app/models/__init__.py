"""SQLModel database models."""

from app.models.hunter import Hunter
from app.models.hunter_stats import HunterStats
from app.models.workout_log import WorkoutLog
from app.models.skill_unlock import SkillUnlock

__all__ = [
    "Hunter",
    "HunterStats",
    "WorkoutLog",
    "SkillUnlock",
]
