"""Business logic services."""

from app.services.hunter_service import HunterService
from app.services.workout_service import WorkoutService
from app.services.skill_service import SkillService

__all__ = [
    "HunterService",
    "WorkoutService",
    "SkillService",
]
