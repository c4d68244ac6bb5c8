"""Tests for engine construction and per-session isolation."""

import datetime

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, select

from app.db.repositories.hunter import HunterRepository
from app.db.session import create_db_engine
from app.models.hunter import Hunter
from app.models.hunter_stats import HunterStats
from app.models.skill_unlock import SkillUnlock
from app.models.workout_log import WorkoutLog


@pytest.fixture
def file_engine(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'hunter.db'}")
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


class TestCreateDbEngine:
    @pytest.mark.parametrize("url", ["sqlite://", "sqlite:///:memory:"])
    def test_in_memory_sqlite_shares_one_connection(self, url):
        engine = create_db_engine(url)
        assert isinstance(engine.pool, StaticPool)
        engine.dispose()

    def test_file_sqlite_uses_a_real_pool(self, file_engine):
        assert not isinstance(file_engine.pool, StaticPool)


class TestSessionIsolation:
    def test_rollback_in_one_session_keeps_another_sessions_writes(self, file_engine):
        with Session(file_engine) as setup:
            setup.add(Hunter(id="u1"))
            setup.add(HunterStats(user_id="u1"))
            setup.commit()

        with Session(file_engine) as first, Session(file_engine) as second:
            assert first.get(Hunter, "u1") is not None

            assert HunterRepository(second).compare_and_swap("u1", 1, xp=67)
            first.rollback()
            second.add(WorkoutLog(user_id="u1", date=datetime.date(2026, 3, 2), exercises=[], xp_gained=67))
            second.commit()

        with Session(file_engine) as check:
            hunter = check.get(Hunter, "u1")
            assert hunter.xp == 67
            assert hunter.version == 2
            assert len(check.exec(select(WorkoutLog)).all()) == 1


class TestTimestamps:
    @pytest.mark.parametrize("model, column", [(Hunter, "created_at"), (Hunter, "updated_at"),
                                               (HunterStats, "created_at"), (HunterStats, "updated_at"),
                                               (WorkoutLog, "created_at"), (SkillUnlock, "unlocked_at"), ])
    def test_columns_are_timezone_aware(self, model, column):
        assert model.__table__.c[column].type.timezone is True

    def test_defaults_are_utc(self):
        hunter = Hunter(id="u1")
        assert hunter.created_at.tzinfo is not None
        assert hunter.created_at.utcoffset() == datetime.timedelta(0)

    def test_compare_and_swap_stamps_updated_at(self, session):
        session.add(Hunter(id="u1"))
        session.commit()
        assert HunterRepository(session).compare_and_swap("u1", 1, xp=10)
        session.commit()
        assert session.get(Hunter, "u1").updated_at is not None
