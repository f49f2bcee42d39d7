"""WorkoutGenerator — deterministic exercise selection for a workout day.

Generation is a pure function of (day, available equipment, fitness
level): no randomness, no stored state, and always a non-empty result.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, TypeVar

from gains_engine.exceptions import UnknownCategoryError
from gains_engine.models.enums import FitnessLevel, WorkoutDay
from gains_engine.models.equipment import Equipment
from gains_engine.models.exercise import Exercise
from gains_engine.models.workout import Workout
from gains_engine.workout_builder.exercise_catalog import (
    ExerciseTemplate,
    get_exercise_template,
)
from gains_engine.workout_builder.prescription import prescribe
from gains_engine.workout_builder.slot_templates import ExerciseSlot, get_day_template

logger = logging.getLogger(__name__)

_E = TypeVar("_E", WorkoutDay, FitnessLevel)


def generate_exercises(
    day: WorkoutDay | str,
    equipment: Iterable[Equipment | str],
    fitness_level: FitnessLevel | str,
) -> list[Exercise]:
    """Fill every slot of ``day`` with the best variant the equipment allows.

    Algorithm:
    1. Look up the ordered slots for the day
    2. Reduce the equipment to the set of available names (unavailable
       entries and anything the day never asks for are simply unused)
    3. Per slot, take the first variant whose required equipment is all
       available; the last variant of each slot needs none
    4. Scale sets / reps / rest by fitness level

    Args:
        day: Workout day, or its lower-case name (e.g. "upper_push").
        equipment: Equipment records or plain equipment names.
        fitness_level: Fitness level, or its lower-case name.

    Returns:
        Exercises in slot order.

    Raises:
        UnknownCategoryError: If ``day`` or ``fitness_level`` is not one of
            the defined values.
    """
    day = _coerce(WorkoutDay, day, "workout day")
    level = _coerce(FitnessLevel, fitness_level, "fitness level")
    available = available_equipment_names(equipment)

    exercises = [
        prescribe(select_variant(slot, available), level)
        for slot in get_day_template(day)
    ]
    logger.debug(
        "Generated %s (%s): %s",
        day.name, level.name, ", ".join(e.name for e in exercises),
    )
    return exercises


def generate_workout(
    day: WorkoutDay | str,
    equipment: Iterable[Equipment | str],
    fitness_level: FitnessLevel | str,
    created_at: datetime | None = None,
) -> Workout:
    """Wrap ``generate_exercises`` in a new, not-yet-started Workout."""
    exercises = generate_exercises(day, equipment, fitness_level)
    return Workout(
        day=_coerce(WorkoutDay, day, "workout day"),
        exercises=tuple(exercises),
        created_at=created_at or datetime.now(),
    )


def select_variant(slot: ExerciseSlot, available: frozenset[str]) -> ExerciseTemplate:
    """Return the highest-priority variant of ``slot`` that ``available`` satisfies."""
    for key in slot.variants:
        template = get_exercise_template(key)
        if all(name.casefold() in available for name in template.required_equipment):
            return template
    # Slot templates always end in an equipment-free variant
    raise AssertionError(f"slot {slot.role!r} has no equipment-free fallback")


def available_equipment_names(equipment: Iterable[Equipment | str]) -> frozenset[str]:
    """Case-folded names of the equipment marked available."""
    names = set()
    for item in equipment:
        if isinstance(item, Equipment):
            if item.is_available:
                names.add(item.name.casefold())
        else:
            names.add(str(item).casefold())
    return frozenset(names)


def _coerce(enum_cls: type[_E], value, label: str) -> _E:
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls[value.strip().upper()]
        except KeyError:
            pass
    raise UnknownCategoryError(f"unknown {label}: {value!r}")


class WorkoutGenerator:
    """Facade over the module-level generation functions.

    Usage::

        generator = WorkoutGenerator()
        workout = generator.generate_workout(WorkoutDay.UPPER_PUSH, inventory.available(), FitnessLevel.BEGINNER)
    """

    def generate_exercises(
        self,
        day: WorkoutDay | str,
        equipment: Iterable[Equipment | str],
        fitness_level: FitnessLevel | str,
    ) -> list[Exercise]:
        return generate_exercises(day, equipment, fitness_level)

    def generate_workout(
        self,
        day: WorkoutDay | str,
        equipment: Iterable[Equipment | str],
        fitness_level: FitnessLevel | str,
        created_at: datetime | None = None,
    ) -> Workout:
        workout = generate_workout(day, equipment, fitness_level, created_at)
        logger.debug(
            "Generated %s workout with %d exercises",
            workout.day.name, len(workout.exercises),
        )
        return workout
