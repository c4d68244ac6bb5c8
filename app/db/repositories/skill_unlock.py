"""
Skill unlock repository.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.skill_unlock import SkillUnlock


class SkillUnlockRepository:
    """Repository for SkillUnlock database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_user(self, user_id: str) -> list[SkillUnlock]:
        statement = select(SkillUnlock).where(SkillUnlock.user_id == user_id).order_by(SkillUnlock.id)
        return list(self.session.exec(statement).all())

    def get_by_user_and_skill(self, user_id: str, skill_id: str) -> Optional[SkillUnlock]:
        statement = select(SkillUnlock).where(SkillUnlock.user_id == user_id, SkillUnlock.skill_id == skill_id, )
        return self.session.exec(statement).first()

    def save(self, unlock: SkillUnlock) -> SkillUnlock:
        """Stage an insert or update and flush.

        A duplicate ``(user_id, skill_id)`` insert raises
        :class:`sqlalchemy.exc.IntegrityError` here.
        """
        self.session.add(unlock)
        self.session.flush()
        return unlock
