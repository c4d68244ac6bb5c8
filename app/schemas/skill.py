"""
Skill tree API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel

from app.schemas.progression import Role, SkillState


class SkillResponse(BaseModel):
    """One skill of the tree with its state for the current hunter."""
    skill_id: str
    name: str
    description: str
    icon: str
    criteria: str
    role_affinity: Optional[Role]
    state: SkillState
    unlocked_at: Optional[datetime.datetime]


class SkillTreeResponse(BaseModel):
    catalog_version: int
    skill_points: int
    skills: list[SkillResponse]


class SkillUnlockResponse(BaseModel):
    skill: SkillResponse
    skill_points: int
