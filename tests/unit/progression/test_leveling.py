"""Tests for the leveling curve and the progression updater."""

import pytest

from app.progression.errors import InvalidInputError
from app.progression.leveling import cumulative_threshold, level_for_xp, progress_fraction, xp_to_next_level
from app.progression.updater import apply_xp
from app.schemas.progression import Role, UserProgression


# ======================================================================
# Thresholds
# ======================================================================


class TestCumulativeThreshold:
    @pytest.mark.parametrize("level, expected", [(1, 100), (2, 283), (3, 520), (4, 800), (5, 1119),
                                                 (9, 2700), (10, 3163), (16, 6400), (21, 9624), (22, 10319), ])
    def test_known_values(self, level, expected):
        assert cumulative_threshold(level) == expected

    def test_strictly_increasing(self):
        thresholds = [cumulative_threshold(level) for level in range(1, 200)]
        assert all(a < b for a, b in zip(thresholds, thresholds[1:]))

    @pytest.mark.parametrize("level", [0, -3])
    def test_rejects_levels_below_one(self, level):
        with pytest.raises(InvalidInputError):
            cumulative_threshold(level)


class TestLevelForXP:
    def test_fresh_hunter_is_level_one(self):
        assert level_for_xp(0) == 1

    def test_boundaries(self):
        assert level_for_xp(282) == 1
        assert level_for_xp(283) == 2
        assert level_for_xp(519) == 2
        assert level_for_xp(520) == 3

    def test_ten_thousand_xp(self):
        assert level_for_xp(10_000) == 21

    def test_negative_xp_rejected(self):
        with pytest.raises(InvalidInputError):
            level_for_xp(-1)


class TestProgressDisplay:
    def test_fraction_is_clamped(self):
        # Level 1 with less XP than T(1)
        assert progress_fraction(0, 1) == 0.0
        assert progress_fraction(10_000, 1) == 1.0

    def test_fraction_midway(self):
        # T(3) = 520, T(4) = 800
        assert progress_fraction(660, 3) == pytest.approx(0.5)

    def test_xp_to_next_level(self):
        assert xp_to_next_level(0, 1) == 283
        assert xp_to_next_level(283, 2) == 237
        assert xp_to_next_level(900, 3) == 0


# ======================================================================
# Updater
# ======================================================================


class TestApplyXP:
    def test_no_level_up_below_next_threshold(self):
        update = apply_xp(UserProgression(level=1, xp=90), 20)
        assert update.progression.xp == 110
        assert update.progression.level == 1
        assert update.level_ups == 0
        assert not update.leveled_up

    def test_single_level_up_grants_one_skill_point(self):
        update = apply_xp(UserProgression(level=1, xp=270, skill_points=0), 67)
        assert update.progression.level == 2
        assert update.progression.skill_points == 1
        assert update.level_ups == 1
        assert update.leveled_up

    def test_exact_threshold_levels_up(self):
        update = apply_xp(UserProgression(level=1, xp=0), 283)
        assert update.progression.level == 2

    def test_multi_level_jump(self):
        update = apply_xp(UserProgression(level=1, xp=0), 10_000)
        level = update.progression.level
        assert update.level_ups >= 2
        assert cumulative_threshold(level) <= 10_000 < cumulative_threshold(level + 1)
        assert level == 21
        assert update.level_ups == 20
        assert update.progression.skill_points == 20

    def test_zero_xp_is_a_no_op(self):
        progression = UserProgression(level=3, xp=600, skill_points=2)
        update = apply_xp(progression, 0)
        assert update.progression == progression
        assert update.level_ups == 0

    def test_role_is_preserved(self):
        update = apply_xp(UserProgression(role=Role.WARDEN), 1000)
        assert update.progression.role is Role.WARDEN

    def test_input_is_not_mutated(self):
        progression = UserProgression(level=1, xp=0)
        apply_xp(progression, 5000)
        assert progression.level == 1
        assert progression.xp == 0

    def test_negative_xp_rejected(self):
        with pytest.raises(InvalidInputError):
            apply_xp(UserProgression(), -1)

    def test_monotonic(self):
        progression = UserProgression()
        for earned in [25, 67, 0, 300, 1200, 42]:
            update = apply_xp(progression, earned)
            assert update.progression.level >= progression.level
            assert update.progression.xp >= progression.xp
            assert update.progression.skill_points >= progression.skill_points
            assert update.progression.level == level_for_xp(update.progression.xp)
            progression = update.progression
