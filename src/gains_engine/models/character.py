"""Frozen character state, the single record the progression rules update."""

from __future__ import annotations

from dataclasses import dataclass

from gains_engine.math import leveling
from gains_engine.models.enums import (
    INITIAL_ENDURANCE,
    INITIAL_STRENGTH,
    CharacterTier,
)


@dataclass(frozen=True)
class CharacterState:
    """Immutable snapshot of a character's progression.

    ``level`` and ``tier`` are derived from ``experience`` on every access
    rather than stored, so they always agree with the XP total. Updates go
    through ``gains_engine.progression.rules``, which return a new state.
    """

    experience: int = 0
    strength: int = INITIAL_STRENGTH
    endurance: int = INITIAL_ENDURANCE
    total_weight_lifted: float = 0.0

    @classmethod
    def new(cls) -> CharacterState:
        """State created on first use: level 1, no XP."""
        return cls()

    @property
    def level(self) -> int:
        return leveling.level_for_experience(self.experience)

    @property
    def tier(self) -> CharacterTier:
        return leveling.tier_for_level(self.level)

    @property
    def experience_to_next_level(self) -> int:
        return leveling.experience_to_next_level(self.experience)
