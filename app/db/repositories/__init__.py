"""Database repositories."""

from app.db.repositories.hunter import HunterRepository
from app.db.repositories.hunter_stats import HunterStatsRepository
from app.db.repositories.workout_log import WorkoutLogRepository
from app.db.repositories.skill_unlock import SkillUnlockRepository

__all__ = [
    "HunterRepository",
    "HunterStatsRepository",
    "WorkoutLogRepository",
    "SkillUnlockRepository",
]
