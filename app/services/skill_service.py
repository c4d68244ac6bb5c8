"""
Skill service.

Evaluates the skill tree for a hunter and performs unlocks.  An unlock
spends exactly one skill point: the version-checked skill-point decrement
and the unlock row are committed together, and the unique
``(user_id, skill_id)`` constraint turns a racing duplicate into a retry
that then sees the skill as already unlocked.
"""

import logging

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.hunter import HunterRepository
from app.db.repositories.hunter_stats import HunterStatsRepository
from app.db.repositories.skill_unlock import SkillUnlockRepository
from app.models.skill_unlock import SkillUnlock
from app.models.timestamps import utc_now
from app.progression.errors import ConcurrentUpdateConflict
from app.progression.skill_catalog import SKILL_CATALOG_VERSION
from app.progression.skills import SkillStatus, evaluate_skills, unlock_skill
from app.schemas.progression import SkillUnlockRecord
from app.schemas.skill import SkillResponse, SkillTreeResponse, SkillUnlockResponse
from app.services.hunter_service import to_progression, to_session_stats
from app.services.transaction import run_with_retries

logger = logging.getLogger(__name__)


class SkillService:
    """Service for the skill tree."""

    def __init__(self, session: Session):
        self.session = session
        self.hunter_repo = HunterRepository(session)
        self.stats_repo = HunterStatsRepository(session)
        self.unlock_repo = SkillUnlockRepository(session)

    def get_tree(self, user_id: str) -> SkillTreeResponse:
        progression, stats, records = self._load(user_id)
        statuses = evaluate_skills(progression, stats, records)
        return SkillTreeResponse(catalog_version=SKILL_CATALOG_VERSION, skill_points=progression.skill_points,
                                 skills=[self._to_response(s) for s in statuses], )

    def unlock(self, user_id: str, skill_id: str) -> SkillUnlockResponse:
        """Unlock *skill_id* for the hunter.  Idempotent."""
        return run_with_retries(self.session, user_id, lambda: self._unlock_once(user_id, skill_id))

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def _unlock_once(self, user_id: str, skill_id: str) -> SkillUnlockResponse:
        hunter = self.hunter_repo.get_by_id(user_id)
        stats_row = self.stats_repo.get_by_user(user_id)
        if not hunter or not stats_row:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Hunter not found")

        progression = to_progression(hunter)
        stats = to_session_stats(stats_row)
        row = self.unlock_repo.get_by_user_and_skill(user_id, skill_id)
        existing = self._to_record(row) if row else None

        updated, record = unlock_skill(user_id, skill_id, progression, stats, existing,
                                       now=utc_now(), )

        if record is not existing:
            if not self.hunter_repo.compare_and_swap(user_id, hunter.version, skill_points=updated.skill_points):
                raise ConcurrentUpdateConflict("hunter", user_id, hunter.version)
            row = row or SkillUnlock(user_id=user_id, skill_id=skill_id)
            row.unlocked = True
            row.unlocked_at = record.unlocked_at
            self.unlock_repo.save(row)
            logger.info(f"Hunter {user_id} unlocked skill {skill_id}", extra={"user_id": user_id,
                                                                              "skill_id": skill_id})

        statuses = evaluate_skills(updated, stats, [record])
        unlocked_status = next(s for s in statuses if s.skill.skill_id == skill_id)
        return SkillUnlockResponse(skill=self._to_response(unlocked_status), skill_points=updated.skill_points)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _load(self, user_id: str):
        hunter = self.hunter_repo.get_by_id(user_id)
        stats_row = self.stats_repo.get_by_user(user_id)
        if not hunter or not stats_row:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Hunter not found")
        records = [self._to_record(u) for u in self.unlock_repo.get_by_user(user_id)]
        return to_progression(hunter), to_session_stats(stats_row), records

    @staticmethod
    def _to_record(row: SkillUnlock) -> SkillUnlockRecord:
        return SkillUnlockRecord(user_id=row.user_id, skill_id=row.skill_id, unlocked=row.unlocked,
                                 unlocked_at=row.unlocked_at, )

    @staticmethod
    def _to_response(skill_status: SkillStatus) -> SkillResponse:
        skill = skill_status.skill
        return SkillResponse(skill_id=skill.skill_id, name=skill.name, description=skill.description,
                             icon=skill.icon, criteria=skill.criteria, role_affinity=skill.role_affinity,
                             state=skill_status.state, unlocked_at=skill_status.unlocked_at, )
