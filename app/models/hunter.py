"""
Hunter database model.

One row per identity-provider user.  Holds the progression state
(level / XP / skill points / role) plus a ``version`` counter used for
compare-and-swap writes: every update must match the version it read.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from app.models.timestamps import UTC_TIMESTAMP, utc_now


class Hunter(SQLModel, table=True):
    """A user's progression record."""
    __tablename__ = "hunters"

    # Opaque id issued by the identity provider
    id: str = Field(primary_key=True, max_length=128)
    email: Optional[str] = Field(default=None, max_length=255)
    name: Optional[str] = Field(default=None, max_length=255)

    # Progression
    role: str = Field(default="Assassin", max_length=32, nullable=False)
    level: int = Field(default=1, nullable=False)
    xp: int = Field(default=0, nullable=False)
    skill_points: int = Field(default=0, nullable=False)

    # Optimistic concurrency
    version: int = Field(default=1, nullable=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTC_TIMESTAMP)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=UTC_TIMESTAMP)
