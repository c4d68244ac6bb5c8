"""
Progression engine errors.

Every failure the engine (or the persistence boundary wrapped around it)
can report is a subclass of :class:`ProgressionError`.  Each error carries:

- ``message``: human-readable description
- ``details``: structured context (dict) for the API layer and logs
- ``error_code``: short, stable identifier for programmatic handling
- ``is_retryable``: whether re-running the whole read-transform-write
  cycle can succeed

The engine raises these synchronously and never swallows, retries or logs
them.  The calling workflow decides what the user sees.
"""

from __future__ import annotations

from typing import Any, Optional


class ProgressionError(Exception):
    """Base class for all progression-engine errors."""

    DEFAULT_RETRYABLE: bool = False

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None,
                 error_code: Optional[str] = None, ) -> None:
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.error_code = error_code or self.__class__.__name__
        self.is_retryable = self.DEFAULT_RETRYABLE
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Serialise for API responses and structured logs."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "is_retryable": self.is_retryable,
        }

    def __str__(self) -> str:
        details_str = f" | Details: {self.details}" if self.details else ""
        return f"[{self.error_code}] {self.message}{details_str}"


class InvalidInputError(ProgressionError):
    """Negative XP, malformed set data, out-of-order sessions.

    Callers are expected to reject these before reaching the engine; the
    engine fails fast instead of clamping.
    """


class UnknownSkillError(InvalidInputError):
    """The requested skill id is not in the catalog."""

    def __init__(self, skill_id: str) -> None:
        super().__init__(f"Unknown skill: '{skill_id}'", {"skill_id": skill_id})


class InsufficientSkillPointsError(ProgressionError):
    """Unlock requested with no skill points left."""

    def __init__(self, skill_id: str, skill_points: int) -> None:
        super().__init__("Not enough skill points to unlock this skill",
                         {"skill_id": skill_id, "skill_points": skill_points}, )


class NotEligibleError(ProgressionError):
    """Unlock requested while the skill's criteria are not met."""

    def __init__(self, skill_id: str, criteria: str) -> None:
        super().__init__(f"Skill '{skill_id}' is not eligible for unlock",
                         {"skill_id": skill_id, "criteria": criteria}, )


class ConcurrentUpdateConflict(ProgressionError):
    """A compare-and-swap write lost against a concurrent update.

    Raised by the persistence boundary only.  The whole
    read-transform-write cycle must be retried.
    """

    DEFAULT_RETRYABLE = True

    def __init__(self, record: str, user_id: str, expected_version: Optional[int] = None) -> None:
        super().__init__(f"Concurrent update detected on {record}",
                         {"record": record, "user_id": user_id, "expected_version": expected_version}, )
