"""
Hunter session statistics model.

Aggregate counters maintained by the session/streak tracker.  One row per
hunter, written in the same transaction as the hunter row.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from app.models.timestamps import UTC_TIMESTAMP, utc_now


class HunterStats(SQLModel, table=True):
    """Session and streak counters for one hunter."""

    __tablename__ = "hunter_stats"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(foreign_key="hunters.id", nullable=False, unique=True, index=True, max_length=128)

    sessions_this_week: int = Field(default=0, nullable=False)
    current_streak: int = Field(default=0, nullable=False)
    longest_streak: int = Field(default=0, nullable=False)
    total_sessions: int = Field(default=0, nullable=False)
    total_xp_earned: int = Field(default=0, nullable=False)
    last_workout_date: Optional[datetime.date] = Field(default=None)

    version: int = Field(default=1, nullable=False)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utc_now, sa_type=UTC_TIMESTAMP)
    updated_at: datetime.datetime = Field(default_factory=utc_now, sa_type=UTC_TIMESTAMP)
