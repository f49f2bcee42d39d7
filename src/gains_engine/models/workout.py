"""Workout models: a generated workout and the summary of a finished session."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from gains_engine.models.enums import MuscleGroup, WorkoutDay
from gains_engine.models.exercise import Exercise


@dataclass(frozen=True)
class Workout:
    """An ordered list of exercises for one workout day.

    Only the per-session instance is persisted; the templates it was built
    from are recreated on every generation call.
    """

    day: WorkoutDay
    exercises: tuple[Exercise, ...]
    created_at: datetime
    is_completed: bool = False
    completed_at: datetime | None = None
    total_weight_lifted: float = 0.0

    @property
    def duration_seconds(self) -> float:
        if self.completed_at is None:
            return 0.0
        return (self.completed_at - self.created_at).total_seconds()

    @property
    def muscle_groups(self) -> tuple[MuscleGroup, ...]:
        """Muscle groups worked, in first-seen order without duplicates."""
        seen: dict[MuscleGroup, None] = {}
        for exercise in self.exercises:
            for group in exercise.muscle_groups:
                seen.setdefault(group, None)
        return tuple(seen)


@dataclass(frozen=True)
class CompletedWorkout:
    """Outcome of ``WorkoutSession.complete()``."""

    workout: Workout
    total_weight: float
    exercise_count: int
    muscle_groups: tuple[MuscleGroup, ...] = field(default_factory=tuple)
    coaching_feedback: str = ""
