"""Exercise and set models.

Exercises are generated fresh for every workout. The only change ever made
to one is recording what was actually performed in a set, which produces
a new object via ``with_set``.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from gains_engine.models.enums import (
    EquipmentCategory,
    ExerciseDifficulty,
    MovementType,
    MuscleGroup,
)
from gains_engine.models.equipment import Equipment


@dataclass(frozen=True)
class ExerciseSet:
    """One prescribed set, plus the actual performance once logged.

    For timed exercises (``Exercise.is_timed``) reps are hold seconds.
    """

    target_reps: int
    target_weight: float | None = None
    rest_seconds: int = 90
    actual_reps: int | None = None
    actual_weight: float | None = None
    is_completed: bool = False

    def record(self, reps: int, weight: float) -> ExerciseSet:
        """Return a completed copy of this set with the performed values."""
        return dataclasses.replace(
            self, actual_reps=reps, actual_weight=weight, is_completed=True,
        )

    @property
    def volume(self) -> float:
        """Weight x reps for a completed set, 0 otherwise."""
        if not self.is_completed:
            return 0.0
        return (self.actual_weight or 0.0) * (self.actual_reps or 0)


@dataclass(frozen=True)
class Exercise:
    """A concrete exercise inside a workout."""

    key: str
    name: str
    muscle_groups: tuple[MuscleGroup, ...]
    equipment: tuple[Equipment, ...]
    sets: tuple[ExerciseSet, ...]
    instructions: str = ""
    difficulty: ExerciseDifficulty = ExerciseDifficulty.BEGINNER
    movement_type: MovementType = MovementType.COMPOUND
    is_timed: bool = False

    def with_set(self, index: int, exercise_set: ExerciseSet) -> Exercise:
        sets = list(self.sets)
        sets[index] = exercise_set
        return dataclasses.replace(self, sets=tuple(sets))

    @property
    def is_bodyweight(self) -> bool:
        return all(eq.category == EquipmentCategory.BODYWEIGHT for eq in self.equipment)

    @property
    def completed_sets(self) -> int:
        return sum(1 for s in self.sets if s.is_completed)

    @property
    def volume(self) -> float:
        return sum(s.volume for s in self.sets)
