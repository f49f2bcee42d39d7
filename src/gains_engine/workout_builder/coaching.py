"""Rule-based coaching commentary on substitutions and finished workouts."""

from __future__ import annotations

from typing import Iterable

from gains_engine.models.enums import (
    DIFFICULTY_LOAD_FACTOR,
    HIGH_INTENSITY_WEIGHT_PER_MIN,
    LOAD_PER_MUSCLE_GROUP,
    MODERATE_INTENSITY_WEIGHT_PER_MIN,
    MOVEMENT_BASE_LOAD,
    ExerciseDifficulty,
    MovementType,
)
from gains_engine.models.exercise import Exercise

# ---------------------------------------------------------------------------
# Message lookups
# ---------------------------------------------------------------------------

_MOVEMENT_CHANGE: dict[tuple[MovementType, MovementType], str] = {
    (MovementType.COMPOUND, MovementType.ISOLATION): (
        "Switching from compound to isolation will reduce overall muscle activation."
    ),
    (MovementType.ISOLATION, MovementType.COMPOUND): (
        "Upgrading to a compound movement will work more muscles."
    ),
    (MovementType.COMPOUND, MovementType.POWER): (
        "Adding an explosive power element, great for strength gains."
    ),
    (MovementType.POWER, MovementType.COMPOUND): (
        "Reducing the explosive element but keeping the multi-muscle focus."
    ),
}

_D = ExerciseDifficulty

_DIFFICULTY_CHANGE: dict[tuple[ExerciseDifficulty, ExerciseDifficulty], str] = {
    (_D.BEGINNER, _D.INTERMEDIATE): "Increasing difficulty, make sure your form is perfect.",
    (_D.INTERMEDIATE, _D.ADVANCED): "Increasing difficulty, make sure your form is perfect.",
    (_D.ADVANCED, _D.INTERMEDIATE): "Reducing difficulty, good for active recovery or form focus.",
    (_D.INTERMEDIATE, _D.BEGINNER): "Reducing difficulty, good for active recovery or form focus.",
    (_D.BEGINNER, _D.ADVANCED): "Big jump in difficulty. Consider an intermediate variation first.",
    (_D.ADVANCED, _D.BEGINNER): (
        "Significant reduction in difficulty, great for a deload or technique work."
    ),
}


def exercise_load(exercise: Exercise) -> float:
    """Relative training load of an exercise.

    load = movement base load x difficulty factor + 0.1 per muscle group
    """
    load = MOVEMENT_BASE_LOAD[exercise.movement_type] * DIFFICULTY_LOAD_FACTOR[exercise.difficulty]
    return load + len(exercise.muscle_groups) * LOAD_PER_MUSCLE_GROUP


def analyze_substitution(original: Exercise, substitute: Exercise) -> str:
    """Describe what swapping ``original`` for ``substitute`` changes.

    Covers muscle-group coverage, movement type, difficulty and the
    recovery impact of the load difference.
    """
    feedback: list[str] = []

    original_groups = set(original.muscle_groups)
    substitute_groups = set(substitute.muscle_groups)
    missing = [g for g in original.muscle_groups if g not in substitute_groups]
    additional = [g for g in substitute.muscle_groups if g not in original_groups]

    if not missing:
        feedback.append("Perfect substitution: this targets the same muscle groups.")
    else:
        feedback.append(f"Missing muscle groups: {_group_names(missing)}.")
    if additional:
        feedback.append(f"Bonus: also targets {_group_names(additional)}.")

    if original.movement_type != substitute.movement_type:
        message = _MOVEMENT_CHANGE.get((original.movement_type, substitute.movement_type))
        if message:
            feedback.append(message)

    if original.difficulty != substitute.difficulty:
        feedback.append(_DIFFICULTY_CHANGE[(original.difficulty, substitute.difficulty)])

    feedback.append(_recovery_impact(exercise_load(substitute) - exercise_load(original)))
    return " ".join(feedback)


def workout_feedback(
    exercises: Iterable[Exercise], total_weight: float, duration_seconds: float,
) -> str:
    """Summarize intensity, muscle balance and recovery for a finished workout."""
    exercises = list(exercises)
    return " ".join([
        _intensity_message(total_weight, duration_seconds),
        _balance_message(exercises),
        _recovery_message(total_weight, duration_seconds),
    ])


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _group_names(groups) -> str:
    return ", ".join(g.name.capitalize() for g in groups)


def _recovery_impact(load_difference: float) -> str:
    if abs(load_difference) < 0.1:
        return "Similar training load, minimal impact on recovery."
    if load_difference > 0.2:
        return "Higher training load, may increase fatigue for tomorrow's session."
    if load_difference < -0.2:
        return "Lower training load, good for managing fatigue."
    if load_difference > 0:
        return "Slightly higher load, monitor your energy levels."
    return "Slightly lower load, good for active recovery."


def _intensity_message(total_weight: float, duration_seconds: float) -> str:
    minutes = duration_seconds / 60
    weight_per_min = total_weight / minutes if minutes > 0 else 0.0
    if weight_per_min > HIGH_INTENSITY_WEIGHT_PER_MIN:
        return "High-intensity session. Great work pushing your limits."
    if weight_per_min > MODERATE_INTENSITY_WEIGHT_PER_MIN:
        return "Solid moderate-intensity workout."
    return "Good active session, perfect for building consistency."


def _balance_message(exercises: list[Exercise]) -> str:
    counts: dict = {}
    for exercise in exercises:
        for group in exercise.muscle_groups:
            counts[group] = counts.get(group, 0) + 1
    spread = (max(counts.values()) - min(counts.values())) if counts else 0
    if spread <= 1:
        return "Even muscle group balance."
    if spread <= 2:
        return "Good muscle group distribution."
    return "Consider balancing muscle groups in future sessions."


def _recovery_message(total_weight: float, duration_seconds: float) -> str:
    if total_weight > 2000 or duration_seconds > 3600:
        return "Consider stretching and extra rest before your next session."
    if total_weight > 1000 or duration_seconds > 2400:
        return "Standard recovery should be sufficient."
    return "You could train again sooner with this lighter load."
