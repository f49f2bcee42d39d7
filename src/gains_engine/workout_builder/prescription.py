"""Level-scaled set prescription."""

from __future__ import annotations

from gains_engine.models.enums import (
    REST_SECONDS_BY_LEVEL,
    SETS_BY_LEVEL,
    FitnessLevel,
)
from gains_engine.models.exercise import Exercise, ExerciseSet
from gains_engine.workout_builder.exercise_catalog import ExerciseTemplate


def build_sets(template: ExerciseTemplate, level: FitnessLevel) -> tuple[ExerciseSet, ...]:
    """Build the prescribed sets for one exercise.

    Beginner = 3 sets / 90 s rest, intermediate = 4 / 120 s,
    advanced = 5 / 150 s. Reps come from the template's per-level table.
    """
    exercise_set = ExerciseSet(
        target_reps=template.reps_for(level),
        target_weight=template.target_weight,
        rest_seconds=REST_SECONDS_BY_LEVEL[level],
    )
    return tuple(exercise_set for _ in range(SETS_BY_LEVEL[level]))


def prescribe(template: ExerciseTemplate, level: FitnessLevel) -> Exercise:
    """Instantiate a fresh Exercise from a template."""
    return Exercise(
        key=template.key,
        name=template.name,
        muscle_groups=template.muscle_groups,
        equipment=template.equipment,
        sets=build_sets(template, level),
        instructions=template.instructions,
        difficulty=template.difficulty,
        movement_type=template.movement_type,
        is_timed=template.is_timed,
    )
