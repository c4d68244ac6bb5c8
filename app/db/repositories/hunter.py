"""
Hunter repository.

Handles database operations for the :class:`Hunter` model.

Writes to an existing hunter go through :meth:`compare_and_swap`: the
update only lands if the row still carries the version that was read, and
it bumps the version.  The repository never commits; the calling service
owns the transaction.
"""

from typing import Any, Optional

from sqlalchemy import update
from sqlmodel import Session

from app.models.hunter import Hunter
from app.models.timestamps import utc_now


class HunterRepository:
    """Repository for Hunter database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def get_by_id(self, user_id: str) -> Optional[Hunter]:
        """
        Get a hunter by identity-provider user id.

        Args:
            user_id: Opaque user id

        Returns:
            Hunter instance if found, None otherwise
        """
        return self.session.get(Hunter, user_id)

    def create(self, hunter: Hunter) -> Hunter:
        """
        Stage a new hunter and flush it so constraint violations surface.

        Args:
            hunter: Hunter instance to create

        Returns:
            The flushed hunter
        """
        self.session.add(hunter)
        self.session.flush()
        return hunter

    def compare_and_swap(self, user_id: str, expected_version: int, **values: Any) -> bool:
        """
        Update *values* only if the stored version equals *expected_version*.

        Args:
            user_id: Hunter id
            expected_version: Version read before the transformation
            **values: Column values to write

        Returns:
            True if the row was updated, False if another writer got there first
        """
        statement = (update(Hunter)
                     .where(Hunter.id == user_id, Hunter.version == expected_version)
                     .values(**values, version=expected_version + 1, updated_at=utc_now()))
        result = self.session.connection().execute(statement)
        return result.rowcount == 1
