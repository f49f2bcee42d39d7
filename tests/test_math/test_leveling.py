"""Tests for experience -> level -> tier derivation."""

from __future__ import annotations

import math

import pytest

from gains_engine.exceptions import ValidationError
from gains_engine.math.leveling import (
    experience_for_level,
    experience_to_next_level,
    level_for_experience,
    tier_for_experience,
    tier_for_level,
)
from gains_engine.models.enums import CharacterTier


class TestLevelForExperience:
    @pytest.mark.parametrize(
        "experience, level",
        [(0, 1), (99, 1), (100, 2), (399, 2), (400, 3), (900, 4), (62_500, 26)],
    )
    def test_known_values(self, experience: int, level: int) -> None:
        assert level_for_experience(experience) == level

    def test_matches_float_formula(self) -> None:
        for experience in range(0, 50_000, 37):
            expected = math.floor(math.sqrt(experience / 100)) + 1
            assert level_for_experience(experience) == expected

    def test_monotonically_non_decreasing(self) -> None:
        levels = [level_for_experience(xp) for xp in range(0, 20_000, 13)]
        assert levels == sorted(levels)

    def test_huge_experience_stays_exact(self) -> None:
        assert level_for_experience(10**20) == 10**9 + 1

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValidationError):
            level_for_experience(-1)


class TestExperienceForLevel:
    def test_level_one_needs_nothing(self) -> None:
        assert experience_for_level(1) == 0

    def test_threshold_is_first_xp_at_level(self) -> None:
        for level in range(1, 60):
            threshold = experience_for_level(level)
            assert level_for_experience(threshold) == level
            if threshold > 0:
                assert level_for_experience(threshold - 1) == level - 1

    def test_level_zero_rejected(self) -> None:
        with pytest.raises(ValidationError):
            experience_for_level(0)


class TestExperienceToNextLevel:
    def test_fresh_character(self) -> None:
        assert experience_to_next_level(0) == 100

    def test_mid_level(self) -> None:
        # Level 2 spans [100, 400)
        assert experience_to_next_level(250) == 150

    def test_exactly_on_threshold(self) -> None:
        assert experience_to_next_level(400) == 500


class TestTierForLevel:
    @pytest.mark.parametrize(
        "level, tier",
        [
            (1, CharacterTier.BEGINNER),
            (25, CharacterTier.BEGINNER),
            (26, CharacterTier.INTERMEDIATE),
            (50, CharacterTier.INTERMEDIATE),
            (51, CharacterTier.ADVANCED),
            (75, CharacterTier.ADVANCED),
            (76, CharacterTier.ELITE),
            (100, CharacterTier.ELITE),
            (101, CharacterTier.LEGENDARY),
            (10_000, CharacterTier.LEGENDARY),
        ],
    )
    def test_band_boundaries(self, level: int, tier: CharacterTier) -> None:
        assert tier_for_level(level) == tier

    def test_level_zero_rejected(self) -> None:
        with pytest.raises(ValidationError):
            tier_for_level(0)

    def test_tier_for_experience(self) -> None:
        assert tier_for_experience(0) == CharacterTier.BEGINNER
        assert tier_for_experience(62_500) == CharacterTier.INTERMEDIATE
        assert tier_for_experience(1_000_000) == CharacterTier.LEGENDARY
