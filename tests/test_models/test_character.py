"""Tests for the frozen CharacterState and its derived level/tier."""

from __future__ import annotations

import dataclasses

import pytest

from gains_engine.models.character import CharacterState
from gains_engine.models.enums import CharacterTier


class TestCharacterState:
    def test_first_use_defaults(self, new_character: CharacterState) -> None:
        assert new_character.experience == 0
        assert new_character.level == 1
        assert new_character.tier == CharacterTier.BEGINNER
        assert new_character.strength == 10
        assert new_character.endurance == 10
        assert new_character.total_weight_lifted == 0.0

    def test_frozen(self, new_character: CharacterState) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            new_character.experience = 500  # type: ignore[misc]

    def test_level_derived_from_experience(self) -> None:
        assert CharacterState(experience=400).level == 3

    def test_tier_derived_from_level(self) -> None:
        state = CharacterState(experience=(76 - 1) ** 2 * 100)
        assert state.level == 76
        assert state.tier == CharacterTier.ELITE

    def test_experience_to_next_level(self) -> None:
        assert CharacterState(experience=150).experience_to_next_level == 250
