"""
Hunter profile API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.progression import Role


class RoleUpdate(BaseModel):
    """Schema for changing the hunter's role."""
    role: Role


class StatsResponse(BaseModel):
    """Session and streak counters."""
    sessions_this_week: int
    current_streak: int
    longest_streak: int
    total_sessions: int
    total_xp_earned: int
    last_workout_date: Optional[datetime.date]


class ProfileResponse(BaseModel):
    """Schema for the hunter profile in API responses."""
    id: str
    email: Optional[str]
    name: Optional[str]
    role: Role
    level: int
    xp: int
    skill_points: int
    level_progress: float = Field(..., ge=0.0, le=1.0, description="Fraction of the way to the next level")
    xp_to_next_level: int
    stats: StatsResponse
    created_at: datetime.datetime
