"""Experience -> level -> tier derivation.

Level is always recomputed from total accumulated experience, never
incremented on its own, so it cannot drift.
"""

from __future__ import annotations

import math

from gains_engine.exceptions import ValidationError
from gains_engine.models.enums import (
    TIER_LEVEL_BANDS,
    XP_PER_LEVEL_UNIT,
    CharacterTier,
)


def level_for_experience(experience: int) -> int:
    """Return the level reached with ``experience`` total XP.

    level = floor(sqrt(experience / 100)) + 1

    Uses the integer square root of ``experience // 100``, which equals
    floor(sqrt(experience / 100)) for every non-negative integer and stays
    exact for very large totals.

    Raises:
        ValidationError: If ``experience`` is negative.
    """
    if experience < 0:
        raise ValidationError(f"experience must be >= 0, got {experience}")
    return math.isqrt(experience // XP_PER_LEVEL_UNIT) + 1


def experience_for_level(level: int) -> int:
    """Return the minimum total XP needed to reach ``level``."""
    if level < 1:
        raise ValidationError(f"level must be >= 1, got {level}")
    return (level - 1) ** 2 * XP_PER_LEVEL_UNIT


def experience_to_next_level(experience: int) -> int:
    """XP still missing before the next level-up."""
    next_level = level_for_experience(experience) + 1
    return experience_for_level(next_level) - experience


def tier_for_level(level: int) -> CharacterTier:
    """Look up the tier band containing ``level`` (bands are inclusive)."""
    if level < 1:
        raise ValidationError(f"level must be >= 1, got {level}")
    for tier, (low, high) in TIER_LEVEL_BANDS.items():
        if level >= low and (high is None or level <= high):
            return tier
    # Bands cover [1, inf), so this is unreachable
    raise AssertionError(f"no tier band for level {level}")


def tier_for_experience(experience: int) -> CharacterTier:
    return tier_for_level(level_for_experience(experience))
