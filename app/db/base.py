"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.hunter import Hunter  # noqa: F401
from app.models.hunter_stats import HunterStats  # noqa: F401
from app.models.workout_log import WorkoutLog  # noqa: F401
from app.models.skill_unlock import SkillUnlock  # noqa: F401
