"""Service-level tests against an in-memory SQLite database.

These exercise the full read -> engine -> compare-and-swap write cycle,
including conflict retries.
"""

import datetime

import pytest
from fastapi import HTTPException
from sqlmodel import select

from app.core.config import settings
from app.core.security import Identity
from app.db.repositories.hunter import HunterRepository
from app.db.repositories.skill_unlock import SkillUnlockRepository
from app.models.hunter import Hunter
from app.models.hunter_stats import HunterStats
from app.models.skill_unlock import SkillUnlock
from app.models.workout_log import WorkoutLog
from app.progression.errors import (ConcurrentUpdateConflict, InsufficientSkillPointsError, InvalidInputError,
                                    NotEligibleError, UnknownSkillError, )
from app.schemas.progression import LoggedExercise, LoggedSet, Role, SkillState
from app.schemas.workout import WorkoutCreate, WorkoutPreviewRequest
from app.services.hunter_service import HunterService
from app.services.skill_service import SkillService
from app.services.workout_service import WorkoutService

MONDAY = datetime.date(2026, 3, 2)


# ======================================================================
# Helpers
# ======================================================================


def _seed(session, user_id: str = "u1", *, level: int = 1, xp: int = 0, skill_points: int = 0,
          total_sessions: int = 0, sessions_this_week: int = 0, current_streak: int = 0,
          last_workout_date: datetime.date | None = None, ) -> None:
    session.add(Hunter(id=user_id, level=level, xp=xp, skill_points=skill_points))
    session.add(HunterStats(user_id=user_id, total_sessions=total_sessions, sessions_this_week=sessions_this_week,
                            current_streak=current_streak, longest_streak=current_streak,
                            last_workout_date=last_workout_date, ))
    session.commit()


def _bench_press(n_sets: int = 3) -> LoggedExercise:
    return LoggedExercise(exercise_id="bench_press", exercise_name="Bench Press",
                          sets=[LoggedSet(reps=10, weight=20.0, rpe=8) for _ in range(n_sets)])


def _workout(day: datetime.date = MONDAY, **kwargs) -> WorkoutCreate:
    return WorkoutCreate(date=day, exercises=[_bench_press()], **kwargs)


def _hunter(session, user_id: str = "u1") -> Hunter:
    session.expire_all()
    return session.get(Hunter, user_id)


def _stats(session, user_id: str = "u1") -> HunterStats:
    session.expire_all()
    return session.exec(select(HunterStats).where(HunterStats.user_id == user_id)).one()


def _logs(session, user_id: str = "u1") -> list[WorkoutLog]:
    return list(session.exec(select(WorkoutLog).where(WorkoutLog.user_id == user_id)).all())


# ======================================================================
# HunterService
# ======================================================================


class TestHunterService:
    def test_first_contact_creates_default_hunter(self, session):
        hunter = HunterService(session).ensure_hunter(Identity(user_id="u1", email="ash@example.com", name="Ash"))
        assert hunter.id == "u1"
        assert hunter.email == "ash@example.com"
        assert hunter.level == 1
        assert hunter.xp == 0
        assert hunter.skill_points == 0
        assert hunter.role == Role.ASSASSIN.value
        assert _stats(session).total_sessions == 0

    def test_ensure_hunter_is_idempotent(self, session):
        service = HunterService(session)
        service.ensure_hunter(Identity(user_id="u1"))
        service.ensure_hunter(Identity(user_id="u1"))
        assert len(session.exec(select(Hunter)).all()) == 1
        assert len(session.exec(select(HunterStats)).all()) == 1

    def test_profile(self, session):
        _seed(session, level=2, xp=300, skill_points=1, total_sessions=5)
        profile = HunterService(session).get_profile("u1")
        assert profile.level == 2
        assert profile.xp == 300
        assert profile.skill_points == 1
        assert profile.xp_to_next_level == 220
        assert profile.stats.total_sessions == 5

    def test_unknown_hunter(self, session):
        with pytest.raises(HTTPException) as exc_info:
            HunterService(session).get_profile("nobody")
        assert exc_info.value.status_code == 404

    def test_change_role_keeps_progression(self, session):
        _seed(session, level=3, xp=600, skill_points=2)
        profile = HunterService(session).change_role("u1", Role.SHADOWMANCER)
        assert profile.role is Role.SHADOWMANCER
        hunter = _hunter(session)
        assert (hunter.level, hunter.xp, hunter.skill_points) == (3, 600, 2)
        assert hunter.version == 2

    def test_character_sheet(self, session):
        _seed(session, total_sessions=1, current_streak=1)
        sheet = HunterService(session).get_character_sheet("u1")
        assert sheet.role is Role.ASSASSIN
        assert sheet.attributes.strength == 5
        achievements = {a.achievement_id: a.unlocked for a in sheet.achievements}
        assert achievements["first_workout"]

    def test_weekly_rollover(self, session):
        _seed(session, "u1", sessions_this_week=3, total_sessions=3)
        _seed(session, "u2")
        assert HunterService(session).rollover_week() == 1
        stats = _stats(session, "u1")
        assert stats.sessions_this_week == 0
        assert stats.total_sessions == 3
        assert stats.version == 2
        assert _stats(session, "u2").version == 1


# ======================================================================
# WorkoutService
# ======================================================================


class TestWorkoutService:
    def test_complete_first_workout(self, session):
        _seed(session)
        result = WorkoutService(session).complete("u1", _workout(duration_minutes=45, notes="felt strong"))

        assert result.xp_gained == 67
        assert result.level_ups == 0
        assert result.progression.xp == 67
        assert result.progression.level == 1
        assert result.stats.current_streak == 1
        assert result.stats.total_xp_earned == 67
        assert result.eligible_skills == []
        assert result.workout.notes == "felt strong"
        assert result.workout.exercises[0].sets[0].rpe == 8

        hunter = _hunter(session)
        assert hunter.xp == 67
        assert hunter.version == 2
        assert _stats(session).version == 2
        assert len(_logs(session)) == 1

    def test_level_up_grants_skill_point(self, session):
        _seed(session, xp=270)
        result = WorkoutService(session).complete("u1", _workout())
        assert result.level_ups == 1
        assert result.progression.level == 2
        assert result.progression.skill_points == 1

    def test_reports_newly_eligible_skills(self, session):
        _seed(session, total_sessions=9)
        result = WorkoutService(session).complete("u1", _workout())
        assert result.stats.total_sessions == 10
        assert result.eligible_skills == ["blade_instinct", "iron_core"]

    def test_streak_across_days(self, session):
        _seed(session)
        service = WorkoutService(session)
        for offset in (0, 1, 2, 4):
            result = service.complete("u1", _workout(MONDAY + datetime.timedelta(days=offset)))
        assert result.stats.current_streak == 1
        assert result.stats.longest_streak == 3
        assert result.stats.sessions_this_week == 4

    def test_default_date_is_today(self, session):
        _seed(session)
        result = WorkoutService(session).complete("u1", WorkoutCreate(exercises=[_bench_press()]), today=MONDAY)
        assert result.workout.date == MONDAY

    def test_out_of_order_session_changes_nothing(self, session):
        _seed(session, xp=50, last_workout_date=MONDAY, total_sessions=1, current_streak=1)
        with pytest.raises(InvalidInputError):
            WorkoutService(session).complete("u1", _workout(MONDAY - datetime.timedelta(days=1)))
        assert _hunter(session).xp == 50
        assert _stats(session).total_sessions == 1
        assert _logs(session) == []

    def test_retries_after_lost_race(self, session, monkeypatch):
        _seed(session)
        original = HunterRepository.compare_and_swap
        calls = []

        def lose_first_race(self, user_id, expected_version, **values):
            calls.append(expected_version)
            if len(calls) == 1:
                return False
            return original(self, user_id, expected_version, **values)

        monkeypatch.setattr(HunterRepository, "compare_and_swap", lose_first_race)
        result = WorkoutService(session).complete("u1", _workout())

        assert len(calls) == 2
        assert result.progression.xp == 67
        assert _hunter(session).xp == 67
        assert _stats(session).total_sessions == 1
        assert len(_logs(session)) == 1

    def test_gives_up_after_max_retries(self, session, monkeypatch):
        _seed(session)
        calls = []

        def always_lose(self, user_id, expected_version, **values):
            calls.append(expected_version)
            return False

        monkeypatch.setattr(HunterRepository, "compare_and_swap", always_lose)
        with pytest.raises(ConcurrentUpdateConflict):
            WorkoutService(session).complete("u1", _workout())

        assert len(calls) == settings.MAX_UPDATE_RETRIES
        assert _hunter(session).xp == 0
        assert _stats(session).total_sessions == 0
        assert _logs(session) == []

    def test_stale_version_is_rejected(self, session):
        _seed(session)
        repo = HunterRepository(session)
        assert repo.compare_and_swap("u1", 1, xp=10)
        assert not repo.compare_and_swap("u1", 1, xp=20)
        session.commit()
        hunter = _hunter(session)
        assert hunter.xp == 10
        assert hunter.version == 2

    def test_preview_persists_nothing(self, session):
        _seed(session)
        preview = WorkoutService(session).preview(WorkoutPreviewRequest(exercises=[_bench_press()]))
        assert preview.total_xp == 67
        assert _logs(session) == []
        assert _hunter(session).xp == 0

    def test_history(self, session):
        _seed(session)
        service = WorkoutService(session)
        for offset in range(4):
            service.complete("u1", _workout(MONDAY + datetime.timedelta(days=offset)))

        recent = service.list_recent("u1", limit=2)
        assert [w.date for w in recent] == [MONDAY + datetime.timedelta(days=3), MONDAY + datetime.timedelta(days=2)]

        in_range = service.get_range("u1", MONDAY + datetime.timedelta(days=1), MONDAY + datetime.timedelta(days=2))
        assert [w.date for w in in_range] == [MONDAY + datetime.timedelta(days=1),
                                             MONDAY + datetime.timedelta(days=2)]


# ======================================================================
# SkillService
# ======================================================================


class TestSkillService:
    def test_fresh_tree(self, session):
        _seed(session)
        tree = SkillService(session).get_tree("u1")
        assert tree.catalog_version == 1
        assert tree.skill_points == 0
        assert len(tree.skills) == 6
        assert all(s.state is SkillState.LOCKED for s in tree.skills)

    def test_unlock_is_charged_exactly_once(self, session):
        _seed(session, skill_points=2, total_sessions=10)
        service = SkillService(session)

        first = service.unlock("u1", "blade_instinct")
        second = service.unlock("u1", "blade_instinct")

        assert first.skill.state is SkillState.UNLOCKED
        assert first.skill.unlocked_at is not None
        assert second.skill_points == 1
        assert _hunter(session).skill_points == 1
        rows = SkillUnlockRepository(session).get_by_user("u1")
        assert [(r.skill_id, r.unlocked) for r in rows] == [("blade_instinct", True)]

        tree = service.get_tree("u1")
        states = {s.skill_id: s.state for s in tree.skills}
        assert states["blade_instinct"] is SkillState.UNLOCKED
        assert states["iron_core"] is SkillState.ELIGIBLE

    def test_zero_points_leaves_state_unchanged(self, session):
        _seed(session, skill_points=0, total_sessions=10)
        with pytest.raises(InsufficientSkillPointsError):
            SkillService(session).unlock("u1", "blade_instinct")
        assert _hunter(session).skill_points == 0
        assert _hunter(session).version == 1
        assert SkillUnlockRepository(session).get_by_user("u1") == []

    def test_not_eligible(self, session):
        _seed(session, skill_points=1, total_sessions=3)
        with pytest.raises(NotEligibleError):
            SkillService(session).unlock("u1", "quick_recovery")
        assert _hunter(session).skill_points == 1

    def test_unknown_skill(self, session):
        _seed(session, skill_points=1)
        with pytest.raises(UnknownSkillError):
            SkillService(session).unlock("u1", "fireball")

    def test_racing_duplicate_unlock_is_not_charged_twice(self, session, monkeypatch):
        _seed(session, skill_points=1, total_sessions=10)
        session.add(SkillUnlock(user_id="u1", skill_id="blade_instinct", unlocked=True,
                                unlocked_at=datetime.datetime(2026, 3, 2, 18, 0, tzinfo=datetime.timezone.utc)))
        session.commit()

        original = SkillUnlockRepository.get_by_user_and_skill
        reads = []

        def miss_first_read(self, user_id, skill_id):
            reads.append(skill_id)
            if len(reads) == 1:
                return None
            return original(self, user_id, skill_id)

        monkeypatch.setattr(SkillUnlockRepository, "get_by_user_and_skill", miss_first_read)
        response = SkillService(session).unlock("u1", "blade_instinct")

        assert len(reads) == 2
        assert response.skill_points == 1
        assert response.skill.state is SkillState.UNLOCKED
        assert _hunter(session).skill_points == 1
        assert len(SkillUnlockRepository(session).get_by_user("u1")) == 1
