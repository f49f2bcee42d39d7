"""Pure progression rules: (state, input) -> (new state, emitted events).

Nothing here mutates state or publishes anything. ``ProgressionEngine``
applies these functions and forwards the events to a bus.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field

from gains_engine.exceptions import ValidationError
from gains_engine.models.character import CharacterState
from gains_engine.models.enums import (
    ENDURANCE_XP_MULTIPLIER,
    STRENGTH_XP_MULTIPLIER,
    WEIGHT_PER_BONUS_XP,
    XP_PER_EXERCISE,
)
from gains_engine.models.events import Event, LevelUp, TierChanged


@dataclass(frozen=True)
class ProgressionResult:
    """New state plus the events the update produced (possibly none)."""

    state: CharacterState
    events: tuple[Event, ...] = field(default_factory=tuple)
    experience_gained: int = 0


def add_experience(state: CharacterState, amount: int) -> ProgressionResult:
    """Grant raw XP.

    Zero is accepted as a no-op. However many levels and tiers a single
    grant crosses, at most one ``LevelUp`` and one ``TierChanged`` (carrying
    the final tier) are emitted.

    Raises:
        ValidationError: If ``amount`` is negative or not an integer.
    """
    _require_non_negative_int("amount", amount)
    return _apply(state, state, amount)


def add_strength(state: CharacterState, amount: int) -> ProgressionResult:
    """Raise strength by ``amount`` and grant ``amount * 10`` bonus XP."""
    _require_non_negative_int("amount", amount)
    updated = dataclasses.replace(state, strength=state.strength + amount)
    return _apply(state, updated, amount * STRENGTH_XP_MULTIPLIER)


def add_endurance(state: CharacterState, amount: int) -> ProgressionResult:
    """Raise endurance by ``amount`` and grant ``amount * 8`` bonus XP."""
    _require_non_negative_int("amount", amount)
    updated = dataclasses.replace(state, endurance=state.endurance + amount)
    return _apply(state, updated, amount * ENDURANCE_XP_MULTIPLIER)


def workout_experience(total_weight: float, exercise_count: int) -> int:
    """XP for a finished workout: exercises * 50 + floor(total_weight / 10)."""
    _require_non_negative_int("exercise_count", exercise_count)
    _require_non_negative_weight(total_weight)
    return exercise_count * XP_PER_EXERCISE + math.floor(total_weight / WEIGHT_PER_BONUS_XP)


def record_workout(
    state: CharacterState, total_weight: float, exercise_count: int,
) -> ProgressionResult:
    """Accumulate lifted weight and grant workout XP."""
    xp = workout_experience(total_weight, exercise_count)
    updated = dataclasses.replace(
        state, total_weight_lifted=state.total_weight_lifted + float(total_weight),
    )
    return _apply(state, updated, xp)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _apply(
    before: CharacterState, updated: CharacterState, xp: int,
) -> ProgressionResult:
    """Add ``xp`` to ``updated`` and diff level/tier against ``before``."""
    if xp:
        updated = dataclasses.replace(updated, experience=updated.experience + xp)

    events: list[Event] = []
    if updated.level > before.level:
        events.append(LevelUp(previous_level=before.level, new_level=updated.level))
        if updated.tier != before.tier:
            events.append(TierChanged(
                previous_tier=before.tier,
                new_tier=updated.tier,
                level=updated.level,
            ))

    return ProgressionResult(state=updated, events=tuple(events), experience_gained=xp)


def _require_non_negative_int(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValidationError(f"{name} must be >= 0, got {value}")


def _require_non_negative_weight(value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"total_weight must be a number, got {value!r}")
    if not math.isfinite(value) or value < 0:
        raise ValidationError(f"total_weight must be a finite number >= 0, got {value}")
