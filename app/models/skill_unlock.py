"""
Skill unlock model.

One row per (hunter, skill), created on the first successful unlock and
never deleted.  The unique constraint makes a racing second unlock fail
instead of charging a second skill point.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from app.models.timestamps import UTC_TIMESTAMP


class SkillUnlock(SQLModel, table=True):
    __tablename__ = "skill_unlocks"
    __table_args__ = (UniqueConstraint("user_id", "skill_id", name="uq_skill_unlock_user_skill"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(foreign_key="hunters.id", nullable=False, index=True, max_length=128)
    skill_id: str = Field(nullable=False, max_length=64)
    unlocked: bool = Field(default=False, nullable=False)
    unlocked_at: Optional[datetime.datetime] = Field(default=None, sa_type=UTC_TIMESTAMP)
