"""
Database session management.

Provides SQLModel engine and session creation.
"""

from typing import Generator

from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine, Session

from app.core.config import settings

DATABASE_URL: str = settings.DATABASE_URL


def _is_in_memory_sqlite(url: str) -> bool:
    return make_url(url).database in (None, "", ":memory:")


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """
    Build an engine for *url*.

    In-memory SQLite only exists inside its one connection, so it is pinned
    to a single shared connection.  Every other database, file-backed SQLite
    included, gets a real pool so each session owns its own transaction.
    """
    if not url.startswith("sqlite"):
        return create_engine(
            url,
            echo=echo,             # Log SQL queries in debug mode
            pool_pre_ping=True,    # Verify connections before using
            pool_size=5,           # Connection pool size
            max_overflow=10        # Max connections beyond pool_size
        )

    connect_args = {"check_same_thread": False}
    if _is_in_memory_sqlite(url):
        return create_engine(url, echo=echo, connect_args=connect_args, poolclass=StaticPool)
    return create_engine(url, echo=echo, connect_args=connect_args)


engine = create_db_engine(DATABASE_URL, echo=settings.DEBUG)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance
    """
    with Session(engine) as session:
        yield session
