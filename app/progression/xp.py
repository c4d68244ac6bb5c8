"""
XP calculator: logged sets to experience points.

Formulas::

    set_xp      = floor(weight * reps * 0.02) + max(0, rpe - 6) * 5
    exercise_xp = floor(total_volume * 0.02)
                  + max(0, mean_rpe - 6) * 5 * set_count
    session_xp  = sum(exercise_xp) + 25

``mean_rpe`` is taken over *all* sets of the exercise: a set without RPE
adds 0 to the numerator but still counts in ``set_count``.  Because
``(mean_rpe - 6) * set_count == sum_rpe - 6 * set_count`` the intensity
bonus is computed on integers and never divides, so an exercise with no
sets is simply worth 0.

All rates live in :class:`XPConfig` so tests can inject alternatives.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

from pydantic import BaseModel, Field

from app.progression.errors import InvalidInputError
from app.schemas.progression import (ExerciseXP, LoggedExercise, LoggedSet, SessionXPPreview, SetXP, )

# volume * 0.02 can land a hair below a whole number in binary floating
# point; round before flooring so exact products keep their integer part.
_FLOOR_PRECISION = 9


class XPConfig(BaseModel):
    """Tunable XP rates."""

    volume_rate: float = Field(0.02, gt=0.0, description="XP per kg*rep of volume")
    rpe_baseline: int = Field(6, ge=0, le=10, description="RPE at or below which no intensity bonus is paid")
    rpe_bonus: int = Field(5, ge=0, description="XP per RPE point above the baseline")
    session_bonus: int = Field(25, ge=0, description="Flat XP for completing a session")


DEFAULT_XP_CONFIG = XPConfig()


# ======================================================================
# Validation
# ======================================================================


def _check_set(reps: int, weight: float, rpe: Optional[int]) -> None:
    if reps <= 0:
        raise InvalidInputError("reps must be positive", {"reps": reps})
    if weight < 0:
        raise InvalidInputError("weight must not be negative", {"weight": weight})
    if rpe is not None and not 1 <= rpe <= 10:
        raise InvalidInputError("rpe must be between 1 and 10", {"rpe": rpe})


def _volume_xp(volume: float, cfg: XPConfig) -> int:
    return math.floor(round(volume * cfg.volume_rate, _FLOOR_PRECISION))


# ======================================================================
# Set / exercise / session
# ======================================================================


def compute_set_xp(reps: int, weight: float, rpe: Optional[int] = None, config: Optional[XPConfig] = None, ) -> int:
    """XP for a single set.

    Raises:
        InvalidInputError: ``reps <= 0``, ``weight < 0`` or ``rpe`` out of
            the 1-10 range.
    """
    cfg = config or DEFAULT_XP_CONFIG
    _check_set(reps, weight, rpe)

    xp = _volume_xp(weight * reps, cfg)
    if rpe is not None:
        xp += max(0, rpe - cfg.rpe_baseline) * cfg.rpe_bonus
    return xp


def compute_exercise_xp(sets: Sequence[LoggedSet], config: Optional[XPConfig] = None) -> int:
    """XP for one exercise: volume XP plus the mean-RPE intensity bonus."""
    cfg = config or DEFAULT_XP_CONFIG

    total_volume = 0.0
    rpe_total = 0
    for s in sets:
        _check_set(s.reps, s.weight, s.rpe)
        total_volume += s.reps * s.weight
        rpe_total += s.rpe or 0

    set_count = len(sets)
    intensity_bonus = max(0, rpe_total - cfg.rpe_baseline * set_count) * cfg.rpe_bonus
    return _volume_xp(total_volume, cfg) + intensity_bonus


def compute_session_xp(exercises: Iterable[LoggedExercise], config: Optional[XPConfig] = None) -> int:
    """Total XP for a completed session, including the completion bonus.

    A session without any sets is worth exactly the session bonus.
    """
    cfg = config or DEFAULT_XP_CONFIG
    return sum(compute_exercise_xp(ex.sets, cfg) for ex in exercises) + cfg.session_bonus


def preview_session_xp(exercises: Iterable[LoggedExercise], config: Optional[XPConfig] = None) -> SessionXPPreview:
    """Per-set, per-exercise and total XP breakdown.

    Per-set values are the live feedback shown while logging; they do not
    add up to the exercise value, which uses the mean RPE of the exercise.
    """
    cfg = config or DEFAULT_XP_CONFIG

    breakdown: list[ExerciseXP] = []
    for ex in exercises:
        sets = [SetXP(reps=s.reps, weight=s.weight, rpe=s.rpe, xp=compute_set_xp(s.reps, s.weight, s.rpe, cfg))
                for s in ex.sets]
        breakdown.append(ExerciseXP(exercise_id=ex.exercise_id, total_volume=ex.total_volume, set_count=len(ex.sets),
                                    sets=sets, xp=compute_exercise_xp(ex.sets, cfg), ))

    total = sum(e.xp for e in breakdown) + cfg.session_bonus
    return SessionXPPreview(exercises=breakdown, session_bonus=cfg.session_bonus, total_xp=total)
