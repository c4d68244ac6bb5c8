"""
Transaction scope and conflict retry for progression workflows.

Every workflow that changes a hunter's progression follows the same
shape::

    read records -> apply pure engine transformation -> CAS write

:func:`unit_of_work` wraps one attempt:

- **On success** commits.
- **On an engine-reported error** (a non-retryable
  :class:`~app.progression.errors.ProgressionError`) still commits, so
  nothing already staged in the attempt is lost, then re-raises.
- **On a conflict or any other exception** rolls back and re-raises.

:func:`run_with_retries` repeats the whole attempt when the persistence
boundary reports a :class:`~app.progression.errors.ConcurrentUpdateConflict`.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.core.config import settings
from app.progression.errors import ConcurrentUpdateConflict, ProgressionError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@contextmanager
def unit_of_work(session: Session) -> Iterator[Session]:
    """Scope one read-transform-write attempt on *session*."""
    try:
        yield session
    except ProgressionError as exc:
        if exc.is_retryable:
            session.rollback()
        else:
            session.commit()
        raise
    except Exception:
        session.rollback()
        raise
    else:
        session.commit()


def run_with_retries(session: Session, user_id: str, operation: Callable[[], T],
                     max_attempts: Optional[int] = None, ) -> T:
    """Run *operation* inside a unit of work, retrying on conflicts.

    *operation* must re-read everything it needs on each call.  A unique
    constraint violation raised while staging rows is treated as a conflict
    with a concurrent writer.

    Raises:
        ConcurrentUpdateConflict: if every attempt lost its race.
    """
    attempts = max_attempts or settings.MAX_UPDATE_RETRIES
    if attempts < 1:
        raise ValueError("max_attempts must be >= 1")

    for attempt in range(1, attempts + 1):
        try:
            with unit_of_work(session):
                try:
                    return operation()
                except IntegrityError as exc:
                    raise ConcurrentUpdateConflict("unique constraint", user_id) from exc
        except ConcurrentUpdateConflict as exc:
            if attempt >= attempts:
                logger.error(f"Giving up on user {user_id} after {attempt} conflicting attempts: {exc}",
                             extra={"user_id": user_id, "attempt": attempt}, )
                raise
            logger.warning(f"Concurrent update for user {user_id}, retrying (attempt {attempt}/{attempts})",
                           extra={"user_id": user_id, "attempt": attempt}, )

    raise AssertionError("unreachable")
