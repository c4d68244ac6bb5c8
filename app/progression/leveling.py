"""
Leveling curve.

The cumulative XP needed to *reach* a level is::

    T(level) = ceil(100 * level ** 1.5)

    T(1) = 100, T(2) = 283, T(3) = 520, T(4) = 800, T(10) = 3163 ...

``100 * level ** 1.5 == sqrt(10_000 * level ** 3)``, so the threshold is
computed with an integer square root: exact for every level, including
perfect squares where a float ``pow`` could round one XP too high.

A fresh hunter starts at level 1 with 0 XP even though ``T(1) = 100``;
:func:`level_for_xp` therefore floors the derived level at 1.
"""

from __future__ import annotations

import math

from app.progression.errors import InvalidInputError

BASE_XP = 100
MIN_LEVEL = 1


def cumulative_threshold(level: int) -> int:
    """Cumulative XP required to reach *level* (``level >= 1``)."""
    if level < MIN_LEVEL:
        raise InvalidInputError("level must be >= 1", {"level": level})

    radicand = BASE_XP * BASE_XP * level ** 3
    root = math.isqrt(radicand)
    return root if root * root == radicand else root + 1


def level_for_xp(xp: int) -> int:
    """Highest level whose threshold *xp* has reached, never below 1."""
    if xp < 0:
        raise InvalidInputError("xp must not be negative", {"xp": xp})

    level = MIN_LEVEL
    while xp >= cumulative_threshold(level + 1):
        level += 1
    return level


def progress_fraction(xp: int, level: int) -> float:
    """Fraction of the way from *level* to the next one, clamped to [0, 1].

    Display only; the engine never branches on it.
    """
    current = cumulative_threshold(level)
    span = cumulative_threshold(level + 1) - current
    return min(1.0, max(0.0, (xp - current) / span))


def xp_to_next_level(xp: int, level: int) -> int:
    """XP still missing before *level* + 1 is reached."""
    return max(0, cumulative_threshold(level + 1) - xp)
