"""
Hunter stats repository.

Same compare-and-swap discipline as :class:`HunterRepository`, plus the
bulk weekly rollover used by the scheduled reset job.
"""

from typing import Any, Optional

from sqlalchemy import update
from sqlmodel import Session, select

from app.models.hunter_stats import HunterStats
from app.models.timestamps import utc_now


class HunterStatsRepository:
    """Repository for HunterStats database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_user(self, user_id: str) -> Optional[HunterStats]:
        statement = select(HunterStats).where(HunterStats.user_id == user_id)
        return self.session.exec(statement).first()

    def create(self, stats: HunterStats) -> HunterStats:
        self.session.add(stats)
        self.session.flush()
        return stats

    def compare_and_swap(self, user_id: str, expected_version: int, **values: Any) -> bool:
        """Update *values* only if the stored version is *expected_version*."""
        statement = (update(HunterStats)
                     .where(HunterStats.user_id == user_id, HunterStats.version == expected_version)
                     .values(**values, version=expected_version + 1, updated_at=utc_now()))
        result = self.session.connection().execute(statement)
        return result.rowcount == 1

    def reset_sessions_this_week(self) -> int:
        """Zero ``sessions_this_week`` for every hunter.

        Bumps each row's version so in-flight workout completions read
        before the reset retry against the fresh counters.

        Returns:
            Number of rows reset
        """
        statement = (update(HunterStats)
                     .where(HunterStats.sessions_this_week != 0)
                     .values(sessions_this_week=0, version=HunterStats.version + 1,
                             updated_at=utc_now()))
        result = self.session.connection().execute(statement)
        return result.rowcount
