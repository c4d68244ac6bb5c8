"""
Character sheet: role lore, attribute ratings and achievements.

Attribute ratings are display values in [0, 100] derived from the same
counters the skill predicates read::

    strength    = min(100, total_sessions * 5)
    endurance   = min(100, current_streak * 10)
    consistency = min(100, sessions_this_week * 20)
    growth      = min(100, xp / 100 * 10)

Achievements follow the skill catalog pattern: a mapping from id to a
pure predicate.  They are not persisted and cost nothing; they are earned
as soon as the predicate holds.
"""

from __future__ import annotations

from typing import Callable

from pydantic import BaseModel, ConfigDict

from app.progression.leveling import progress_fraction, xp_to_next_level
from app.schemas.character import AchievementStatus, AttributeRatings, CharacterSheet
from app.schemas.progression import Role, SessionStats, UserProgression

ROLE_DESCRIPTIONS: dict[Role, str] = {
    Role.ASSASSIN: ("Masters of speed and explosive power. High-intensity training with focus on "
                    "conditioning and athleticism."),
    Role.WARDEN: "Titans of raw strength. Heavy compound movements and progressive overload for maximum power.",
    Role.ARBITER: ("Balanced warriors seeking longevity. Sustainable training with emphasis on consistency "
                   "and health."),
    Role.SHADOWMANCER: "Sculptors of aesthetics. High-volume hypertrophy work for maximum muscle development.",
}

_MAX_RATING = 100


class AchievementDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    achievement_id: str
    name: str
    icon: str = ""
    predicate: Callable[[UserProgression, SessionStats], bool]


ACHIEVEMENT_CATALOG: dict[str, AchievementDefinition] = {
    a.achievement_id: a for a in [
        AchievementDefinition(achievement_id="first_workout", name="First Workout", icon="🎯",
                              predicate=lambda p, s: s.total_sessions >= 1),
        AchievementDefinition(achievement_id="streak_7", name="7 Day Streak", icon="🔥",
                              predicate=lambda p, s: s.current_streak >= 7),
        AchievementDefinition(achievement_id="level_5", name="Level 5", icon="⭐",
                              predicate=lambda p, s: p.level >= 5),
        AchievementDefinition(achievement_id="sessions_50", name="50 Sessions", icon="💪",
                              predicate=lambda p, s: s.total_sessions >= 50),
    ]
}


def _rating(value: float) -> int:
    return int(min(_MAX_RATING, max(0, value)))


def compute_attributes(progression: UserProgression, stats: SessionStats) -> AttributeRatings:
    return AttributeRatings(
        strength=_rating(stats.total_sessions * 5),
        endurance=_rating(stats.current_streak * 10),
        consistency=_rating(stats.sessions_this_week * 20),
        growth=_rating(progression.xp / 100 * 10),
    )


def evaluate_achievements(progression: UserProgression, stats: SessionStats) -> list[AchievementStatus]:
    return [AchievementStatus(achievement_id=a.achievement_id, name=a.name, icon=a.icon,
                              unlocked=bool(a.predicate(progression, stats)), )
            for a in ACHIEVEMENT_CATALOG.values()]


def build_character_sheet(progression: UserProgression, stats: SessionStats) -> CharacterSheet:
    """Assemble the full character sheet for display."""
    return CharacterSheet(
        role=progression.role,
        role_description=ROLE_DESCRIPTIONS[progression.role],
        level=progression.level,
        xp=progression.xp,
        skill_points=progression.skill_points,
        level_progress=progress_fraction(progression.xp, progression.level),
        xp_to_next_level=xp_to_next_level(progression.xp, progression.level),
        attributes=compute_attributes(progression, stats),
        achievements=evaluate_achievements(progression, stats),
    )
