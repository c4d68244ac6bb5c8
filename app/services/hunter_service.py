"""
Hunter service.

Profile lifecycle around the progression engine:

- first contact creates the hunter (level 1, 0 XP, 0 skill points,
  role Assassin) and its zeroed stats row;
- profile and character sheet reads;
- role changes (version-checked like every other hunter write);
- the weekly ``sessions_this_week`` rollover.
"""

import logging

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.security import Identity
from app.db.repositories.hunter import HunterRepository
from app.db.repositories.hunter_stats import HunterStatsRepository
from app.models.hunter import Hunter
from app.models.hunter_stats import HunterStats
from app.progression.character import build_character_sheet
from app.progression.errors import ConcurrentUpdateConflict
from app.progression.leveling import progress_fraction, xp_to_next_level
from app.schemas.character import CharacterSheet
from app.schemas.hunter import ProfileResponse, StatsResponse
from app.schemas.progression import Role, SessionStats, UserProgression
from app.services.transaction import run_with_retries, unit_of_work

logger = logging.getLogger(__name__)


# ======================================================================
# Row <-> engine conversions
# ======================================================================


def to_progression(hunter: Hunter) -> UserProgression:
    return UserProgression(level=hunter.level, xp=hunter.xp, skill_points=hunter.skill_points,
                           role=Role(hunter.role), )


def to_session_stats(row: HunterStats) -> SessionStats:
    return SessionStats(sessions_this_week=row.sessions_this_week, current_streak=row.current_streak,
                        longest_streak=row.longest_streak, total_sessions=row.total_sessions,
                        total_xp_earned=row.total_xp_earned, last_workout_date=row.last_workout_date, )


def to_stats_response(stats: SessionStats) -> StatsResponse:
    return StatsResponse(**stats.model_dump())


class HunterService:
    """Service for hunter profile business logic."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session
        self.hunter_repo = HunterRepository(session)
        self.stats_repo = HunterStatsRepository(session)

    def ensure_hunter(self, identity: Identity) -> Hunter:
        """
        Return the caller's hunter, creating it on first contact.

        Args:
            identity: Verified caller identity

        Returns:
            The existing or newly created hunter
        """
        def operation() -> Hunter:
            hunter = self.hunter_repo.get_by_id(identity.user_id)
            if hunter is None:
                hunter = self.hunter_repo.create(Hunter(id=identity.user_id, email=identity.email,
                                                        name=identity.name, role=Role.ASSASSIN.value, ))
                logger.info(f"Created hunter {identity.user_id}", extra={"user_id": identity.user_id})
            if self.stats_repo.get_by_user(identity.user_id) is None:
                self.stats_repo.create(HunterStats(user_id=identity.user_id))
            return hunter

        hunter = run_with_retries(self.session, identity.user_id, operation)
        self.session.refresh(hunter)
        return hunter

    def get_profile(self, user_id: str) -> ProfileResponse:
        hunter, stats_row = self._get_records(user_id)
        progression = to_progression(hunter)
        return ProfileResponse(id=hunter.id, email=hunter.email, name=hunter.name, role=progression.role,
                               level=progression.level, xp=progression.xp, skill_points=progression.skill_points,
                               level_progress=progress_fraction(progression.xp, progression.level),
                               xp_to_next_level=xp_to_next_level(progression.xp, progression.level),
                               stats=to_stats_response(to_session_stats(stats_row)), created_at=hunter.created_at, )

    def get_character_sheet(self, user_id: str) -> CharacterSheet:
        hunter, stats_row = self._get_records(user_id)
        return build_character_sheet(to_progression(hunter), to_session_stats(stats_row))

    def change_role(self, user_id: str, role: Role) -> ProfileResponse:
        """
        Switch the hunter's role.

        Level, XP and skill points are untouched; unlocked skills stay
        unlocked.
        """
        def operation() -> None:
            hunter, _ = self._get_records(user_id)
            if not self.hunter_repo.compare_and_swap(user_id, hunter.version, role=role.value):
                raise ConcurrentUpdateConflict("hunter", user_id, hunter.version)

        run_with_retries(self.session, user_id, operation)
        logger.info(f"Hunter {user_id} switched role to {role.value}", extra={"user_id": user_id})
        return self.get_profile(user_id)

    def rollover_week(self) -> int:
        """
        Reset ``sessions_this_week`` for every hunter.

        Triggered externally once a week; the engine itself only ever
        increments the counter.

        Returns:
            Number of hunters whose counter was reset
        """
        with unit_of_work(self.session):
            count = self.stats_repo.reset_sessions_this_week()
        logger.info(f"Weekly rollover reset {count} hunters")
        return count

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_records(self, user_id: str) -> tuple[Hunter, HunterStats]:
        hunter = self.hunter_repo.get_by_id(user_id)
        stats_row = self.stats_repo.get_by_user(user_id)
        if not hunter or not stats_row:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Hunter not found")
        return hunter, stats_row
