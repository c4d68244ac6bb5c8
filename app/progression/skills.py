"""
Skill unlock evaluator.

Per user and per skill the state machine is::

    locked --(predicate true)--> eligible --(unlock_skill)--> unlocked

``unlocked`` is terminal.  The predicate is looked up in the catalog, so
adding a skill never touches the control flow below.

:func:`unlock_skill` is idempotent: unlocking an already-unlocked skill
succeeds without charging a second skill point.
"""

from __future__ import annotations

import datetime
from typing import Collection, Mapping, Optional

from pydantic import BaseModel

from app.progression.errors import (InsufficientSkillPointsError, NotEligibleError, UnknownSkillError, )
from app.progression.skill_catalog import SKILL_CATALOG, SkillDefinition
from app.schemas.progression import (SessionStats, SkillState, SkillUnlockRecord, UserProgression, )


class SkillStatus(BaseModel):
    """Evaluated state of one catalog skill for one user."""

    skill: SkillDefinition
    state: SkillState
    unlocked_at: Optional[datetime.datetime] = None


def skill_state(skill: SkillDefinition, progression: UserProgression, stats: SessionStats,
                unlocked_ids: Collection[str], ) -> SkillState:
    if skill.skill_id in unlocked_ids:
        return SkillState.UNLOCKED
    if skill.is_met(progression, stats):
        return SkillState.ELIGIBLE
    return SkillState.LOCKED


def evaluate_skills(progression: UserProgression, stats: SessionStats,
                    unlock_records: Collection[SkillUnlockRecord] = (),
                    catalog: Optional[Mapping[str, SkillDefinition]] = None, ) -> list[SkillStatus]:
    """Compute the state of every catalog skill, in catalog order."""
    skills = SKILL_CATALOG if catalog is None else catalog
    unlocked = {r.skill_id: r for r in unlock_records if r.unlocked}

    statuses: list[SkillStatus] = []
    for skill in skills.values():
        record = unlocked.get(skill.skill_id)
        statuses.append(SkillStatus(skill=skill, state=skill_state(skill, progression, stats, unlocked),
                                    unlocked_at=record.unlocked_at if record else None, ))
    return statuses


def eligible_skill_ids(progression: UserProgression, stats: SessionStats,
                       unlock_records: Collection[SkillUnlockRecord] = (),
                       catalog: Optional[Mapping[str, SkillDefinition]] = None, ) -> list[str]:
    """IDs of skills that can be unlocked right now."""
    return [s.skill.skill_id for s in evaluate_skills(progression, stats, unlock_records, catalog)
            if s.state is SkillState.ELIGIBLE]


def unlock_skill(user_id: str, skill_id: str, progression: UserProgression, stats: SessionStats,
                 existing: Optional[SkillUnlockRecord], now: datetime.datetime,
                 catalog: Optional[Mapping[str, SkillDefinition]] = None,
                 ) -> tuple[UserProgression, SkillUnlockRecord]:
    """Spend one skill point to unlock *skill_id*.

    Returns the (possibly unchanged) progression and the unlock record.
    The caller must persist both as a single atomic unit.

    Raises:
        UnknownSkillError: *skill_id* is not in the catalog.
        InsufficientSkillPointsError: ``skill_points <= 0``.
        NotEligibleError: the skill's predicate is false.
    """
    skills = SKILL_CATALOG if catalog is None else catalog
    skill = skills.get(skill_id)
    if skill is None:
        raise UnknownSkillError(skill_id)

    if existing is not None and existing.unlocked:
        return progression, existing

    if progression.skill_points <= 0:
        raise InsufficientSkillPointsError(skill_id, progression.skill_points)
    if not skill.is_met(progression, stats):
        raise NotEligibleError(skill_id, skill.criteria)

    updated = progression.model_copy(update={"skill_points": progression.skill_points - 1})
    record = SkillUnlockRecord(user_id=user_id, skill_id=skill_id, unlocked=True, unlocked_at=now)
    return updated, record
