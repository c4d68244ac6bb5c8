"""Progression engine: XP, leveling, streaks and skill unlocks."""

from app.progression.errors import (ConcurrentUpdateConflict, InsufficientSkillPointsError, InvalidInputError,
                                    NotEligibleError, ProgressionError, UnknownSkillError, )
from app.progression.leveling import cumulative_threshold, level_for_xp, progress_fraction
from app.progression.skills import evaluate_skills, unlock_skill
from app.progression.streaks import apply_session
from app.progression.updater import apply_xp
from app.progression.xp import XPConfig, compute_exercise_xp, compute_session_xp, compute_set_xp

__all__ = [
    "ConcurrentUpdateConflict",
    "InsufficientSkillPointsError",
    "InvalidInputError",
    "NotEligibleError",
    "ProgressionError",
    "UnknownSkillError",
    "XPConfig",
    "apply_session",
    "apply_xp",
    "compute_exercise_xp",
    "compute_session_xp",
    "compute_set_xp",
    "cumulative_threshold",
    "evaluate_skills",
    "level_for_xp",
    "progress_fraction",
    "unlock_skill",
]
