"""
Character sheet schemas.

Display-only view of a hunter: role lore, 0-100 attribute ratings and the
achievement badges.
"""

from pydantic import BaseModel, Field

from app.schemas.progression import Role


class AttributeRatings(BaseModel):
    """Attribute bars, each clamped to [0, 100]."""

    strength: int = Field(..., ge=0, le=100)
    endurance: int = Field(..., ge=0, le=100)
    consistency: int = Field(..., ge=0, le=100)
    growth: int = Field(..., ge=0, le=100)


class AchievementStatus(BaseModel):
    achievement_id: str
    name: str
    icon: str
    unlocked: bool


class CharacterSheet(BaseModel):
    role: Role
    role_description: str
    level: int
    xp: int
    skill_points: int
    level_progress: float = Field(..., ge=0.0, le=1.0, description="Fraction of the way to the next level")
    xp_to_next_level: int
    attributes: AttributeRatings
    achievements: list[AchievementStatus]
