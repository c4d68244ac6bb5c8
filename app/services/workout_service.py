"""
Workout service.

Runs the workout-completion pipeline, in order, as one atomic unit::

    logged exercises
        -> compute_session_xp            (XP calculator)
        -> apply_xp                      (level / skill points, level-ups)
        -> apply_session                 (session + streak counters)
        -> eligible_skill_ids            (skill eligibility)

The hunter and stats rows are written with compare-and-swap on their
``version`` columns, in the same transaction as the new workout log.  A
lost race rolls everything back and the whole cycle is retried.
"""

import datetime
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.config import settings
from app.db.repositories.hunter import HunterRepository
from app.db.repositories.hunter_stats import HunterStatsRepository
from app.db.repositories.skill_unlock import SkillUnlockRepository
from app.db.repositories.workout_log import WorkoutLogRepository
from app.models.workout_log import WorkoutLog
from app.progression.errors import ConcurrentUpdateConflict
from app.progression.skills import eligible_skill_ids
from app.progression.streaks import apply_session
from app.progression.updater import apply_xp
from app.progression.xp import compute_session_xp, preview_session_xp
from app.schemas.progression import (LoggedExercise, SessionXPPreview, SkillUnlockRecord, WorkoutSession, )
from app.schemas.workout import (ProgressionSnapshot, WorkoutCompletionResponse, WorkoutCreate, WorkoutLogResponse,
                                 WorkoutPreviewRequest, )
from app.services.hunter_service import to_progression, to_session_stats, to_stats_response
from app.services.transaction import run_with_retries

logger = logging.getLogger(__name__)


class WorkoutService:
    """Service for workout completion and history."""

    def __init__(self, session: Session):
        self.session = session
        self.hunter_repo = HunterRepository(session)
        self.stats_repo = HunterStatsRepository(session)
        self.log_repo = WorkoutLogRepository(session)
        self.unlock_repo = SkillUnlockRepository(session)

    def complete(self, user_id: str, data: WorkoutCreate,
                 today: Optional[datetime.date] = None, ) -> WorkoutCompletionResponse:
        """Record a finished workout and advance the hunter's progression."""
        workout_date = data.date or today or datetime.date.today()
        result = run_with_retries(self.session, user_id, lambda: self._complete_once(user_id, workout_date, data))

        if result.level_ups:
            logger.info(f"Hunter {user_id} gained {result.level_ups} level(s), now level {result.progression.level}",
                        extra={"user_id": user_id, "level_ups": result.level_ups}, )
        return result

    def preview(self, data: WorkoutPreviewRequest) -> SessionXPPreview:
        """XP breakdown for a workout in progress.  Nothing is persisted."""
        return preview_session_xp(data.exercises)

    def list_recent(self, user_id: str, limit: Optional[int] = None) -> list[WorkoutLogResponse]:
        entries = self.log_repo.get_recent_by_user(user_id, limit or settings.RECENT_WORKOUTS_LIMIT)
        return [self._to_response(e) for e in entries]

    def get_range(self, user_id: str, start: datetime.date, end: datetime.date, ) -> list[WorkoutLogResponse]:
        entries = self.log_repo.get_by_user_date_range(user_id, start, end)
        return [self._to_response(e) for e in entries]

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def _complete_once(self, user_id: str, workout_date: datetime.date,
                       data: WorkoutCreate, ) -> WorkoutCompletionResponse:
        hunter = self.hunter_repo.get_by_id(user_id)
        stats_row = self.stats_repo.get_by_user(user_id)
        if not hunter or not stats_row:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Hunter not found")

        # 1. XP for the session
        xp_gained = compute_session_xp(data.exercises)
        session = WorkoutSession(date=workout_date, exercises=data.exercises, xp_gained=xp_gained)

        # 2. Level / skill points
        update = apply_xp(to_progression(hunter), xp_gained)
        progression = update.progression

        # 3. Session + streak counters
        stats = apply_session(to_session_stats(stats_row), session)

        # 4. Persist as one unit (committed by the caller's unit of work)
        hunter_version, stats_version = hunter.version, stats_row.version
        if not self.hunter_repo.compare_and_swap(user_id, hunter_version, level=progression.level,
                                                 xp=progression.xp, skill_points=progression.skill_points, ):
            raise ConcurrentUpdateConflict("hunter", user_id, hunter_version)
        if not self.stats_repo.compare_and_swap(user_id, stats_version, **stats.model_dump()):
            raise ConcurrentUpdateConflict("hunter_stats", user_id, stats_version)

        entry = self.log_repo.create(WorkoutLog(user_id=user_id, date=workout_date,
                                                exercises=[ex.model_dump() for ex in data.exercises],
                                                xp_gained=xp_gained, duration_minutes=data.duration_minutes,
                                                notes=data.notes, ))

        # 5. Skill eligibility against the new state
        records = [SkillUnlockRecord(user_id=u.user_id, skill_id=u.skill_id, unlocked=u.unlocked,
                                     unlocked_at=u.unlocked_at)
                   for u in self.unlock_repo.get_by_user(user_id)]
        eligible = eligible_skill_ids(progression, stats, records)

        return WorkoutCompletionResponse(workout=self._to_response(entry), xp_gained=xp_gained,
                                         level_ups=update.level_ups,
                                         progression=ProgressionSnapshot(**progression.model_dump()),
                                         stats=to_stats_response(stats), eligible_skills=eligible, )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _to_response(entry: WorkoutLog) -> WorkoutLogResponse:
        return WorkoutLogResponse(id=entry.id, date=entry.date,
                                  exercises=[LoggedExercise.model_validate(ex) for ex in entry.exercises],
                                  xp_gained=entry.xp_gained, duration_minutes=entry.duration_minutes,
                                  notes=entry.notes, created_at=entry.created_at, )
