"""
Built-in skill catalog.

Each entry is a :class:`SkillDefinition` whose ``predicate`` is a pure
boolean function of :class:`~app.schemas.progression.UserProgression` and
:class:`~app.schemas.progression.SessionStats`.  The evaluator in
:mod:`app.progression.skills` only ever looks skills up here; it has no
per-skill branches.

To add a skill, call :func:`register_skill` at import time and bump
``SKILL_CATALOG_VERSION``.  Catalog changes ship with a deployment.
"""

from __future__ import annotations

from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.progression import Role, SessionStats, UserProgression

SkillPredicate = Callable[[UserProgression, SessionStats], bool]

SKILL_CATALOG_VERSION = 1


class SkillDefinition(BaseModel):
    """Static description of an unlockable skill."""

    model_config = ConfigDict(frozen=True)

    skill_id: str
    name: str
    description: str
    icon: str = ""
    criteria: str = Field(..., description="Human-readable unlock criteria")
    role_affinity: Optional[Role] = Field(None, description="Role the skill is themed for (informational)")
    predicate: SkillPredicate

    def is_met(self, progression: UserProgression, stats: SessionStats) -> bool:
        return bool(self.predicate(progression, stats))


# ======================================================================
# Catalog storage
# ======================================================================

SKILL_CATALOG: dict[str, SkillDefinition] = {}


def register_skill(skill: SkillDefinition) -> None:
    """Register a skill in the global catalog.

    Raises :class:`ValueError` if ``skill_id`` is already taken.
    """
    if skill.skill_id in SKILL_CATALOG:
        raise ValueError(f"Skill '{skill.skill_id}' already registered")
    SKILL_CATALOG[skill.skill_id] = skill


def get_skill(skill_id: str) -> SkillDefinition | None:
    """Look up a skill by its ID.  Returns ``None`` if not found."""
    return SKILL_CATALOG.get(skill_id)


# ======================================================================
# Predicate helpers
# ======================================================================


def min_total_sessions(n: int) -> SkillPredicate:
    return lambda progression, stats: stats.total_sessions >= n


def min_level(n: int) -> SkillPredicate:
    return lambda progression, stats: progression.level >= n


def min_xp(n: int) -> SkillPredicate:
    return lambda progression, stats: progression.xp >= n


# ======================================================================
# Built-in skills
# ======================================================================

_SKILLS: list[SkillDefinition] = [
    # ── Role skills ───────────────────────────────────────────────
    SkillDefinition(
        skill_id="blade_instinct",
        name="Blade Instinct",
        description="+5% XP on HIIT sessions. Unlocks Assassin Cloak cosmetic.",
        icon="⚡",
        criteria="Complete 10 workouts",
        role_affinity=Role.ASSASSIN,
        predicate=min_total_sessions(10),
    ),
    SkillDefinition(
        skill_id="iron_core",
        name="Iron Core",
        description="Unlock heavy program templates and Iron Aura cosmetic.",
        icon="🛡️",
        criteria="Complete 8 workouts",
        role_affinity=Role.WARDEN,
        predicate=min_total_sessions(8),
    ),
    SkillDefinition(
        skill_id="second_wind",
        name="Second Wind",
        description="One-time revive to preserve streak.",
        icon="⚖️",
        criteria="Complete 15 workouts",
        role_affinity=Role.ARBITER,
        predicate=min_total_sessions(15),
    ),
    SkillDefinition(
        skill_id="echo_shadows",
        name="Echo of Shadows",
        description="Unlock micro-program templates with XP bonus.",
        icon="💪",
        criteria="Accumulate 10,000 XP",
        role_affinity=Role.SHADOWMANCER,
        predicate=min_xp(10_000),
    ),
    # ── General skills ────────────────────────────────────────────
    SkillDefinition(
        skill_id="quick_recovery",
        name="Quick Recovery",
        description="Reduce rest timers by 25%.",
        icon="⏱️",
        criteria="Complete 25 workouts",
        predicate=min_total_sessions(25),
    ),
    SkillDefinition(
        skill_id="xp_boost",
        name="XP Multiplier",
        description="+10% XP on all exercises.",
        icon="✨",
        criteria="Reach Level 10",
        predicate=min_level(10),
    ),
]

for _skill in _SKILLS:
    register_skill(_skill)
