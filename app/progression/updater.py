"""
Progression updater: applies earned XP to a hunter's progression.

Each threshold crossed grants one level and one skill point.  A single
session may cross several thresholds; all of them are applied.
"""

from __future__ import annotations

from app.progression.errors import InvalidInputError
from app.progression.leveling import cumulative_threshold
from app.schemas.progression import ProgressionUpdate, UserProgression


def apply_xp(progression: UserProgression, earned_xp: int) -> ProgressionUpdate:
    """Add *earned_xp* and level up as many times as the new total allows.

    Returns:
        :class:`ProgressionUpdate` with the new progression and the number
        of level-ups (0 if none).  The caller uses ``level_ups`` to decide
        whether to surface a level-up notification.

    Raises:
        InvalidInputError: if ``earned_xp`` is negative.
    """
    if earned_xp < 0:
        raise InvalidInputError("earned_xp must not be negative", {"earned_xp": earned_xp})

    xp = progression.xp + earned_xp
    level = progression.level
    skill_points = progression.skill_points
    level_ups = 0

    while xp >= cumulative_threshold(level + 1):
        level += 1
        skill_points += 1
        level_ups += 1

    updated = progression.model_copy(update={"xp": xp, "level": level, "skill_points": skill_points})
    return ProgressionUpdate(progression=updated, level_ups=level_ups)
