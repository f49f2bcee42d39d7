"""WorkoutSession — tracks one in-progress workout from start to completion."""

from __future__ import annotations

import dataclasses
import logging
import math
from datetime import datetime
from typing import TYPE_CHECKING

from gains_engine.exceptions import SessionStateError, ValidationError
from gains_engine.models.events import WorkoutCompleted
from gains_engine.models.exercise import Exercise
from gains_engine.models.workout import CompletedWorkout, Workout
from gains_engine.workout_builder.coaching import analyze_substitution, workout_feedback

if TYPE_CHECKING:
    from gains_engine.event_bus import EventPublisher
    from gains_engine.progression.engine import ProgressionEngine

logger = logging.getLogger(__name__)


class WorkoutSession:
    """Records actual performance for the current workout.

    Usage::

        session = WorkoutSession(bus=bus, progression=engine)
        session.start(generator.generate_workout(WorkoutDay.UPPER_PUSH, gear, level))
        session.complete_set(0, 0, weight=60.0, reps=8)
        summary = session.complete()
    """

    def __init__(
        self,
        bus: EventPublisher | None = None,
        progression: ProgressionEngine | None = None,
        history: list[CompletedWorkout] | None = None,
    ) -> None:
        self._bus = bus
        self._progression = progression
        self._workout: Workout | None = None
        self.history: list[CompletedWorkout] = list(history or [])

    @property
    def workout(self) -> Workout | None:
        return self._workout

    @property
    def is_active(self) -> bool:
        return self._workout is not None

    def start(self, workout: Workout) -> None:
        """Begin tracking ``workout``.

        Raises:
            SessionStateError: If a workout is already in progress.
        """
        if self._workout is not None:
            raise SessionStateError("a workout is already in progress")
        self._workout = workout
        logger.debug("Started %s workout", workout.day.name)

    def complete_set(
        self, exercise_index: int, set_index: int, weight: float, reps: int,
    ) -> Exercise:
        """Record the weight and reps actually performed for one set.

        Returns the updated exercise.

        Raises:
            SessionStateError: If no workout is in progress.
            ValidationError: On negative or non-finite values or indexes
                outside the workout.
        """
        workout = self._require_active()
        if isinstance(reps, bool) or not isinstance(reps, int) or reps < 0:
            raise ValidationError(f"reps must be a non-negative int, got {reps!r}")
        if (
            isinstance(weight, bool)
            or not isinstance(weight, (int, float))
            or not math.isfinite(weight)
            or weight < 0
        ):
            raise ValidationError(f"weight must be a non-negative number, got {weight!r}")
        exercise = self._exercise_at(workout, exercise_index)
        if not 0 <= set_index < len(exercise.sets):
            raise ValidationError(
                f"set index {set_index} out of range for {exercise.name}"
            )

        updated = exercise.with_set(set_index, exercise.sets[set_index].record(reps, weight))
        self._replace_exercise(exercise_index, updated)
        return updated

    def substitute_exercise(self, exercise_index: int, new_exercise: Exercise) -> str:
        """Swap in ``new_exercise`` and return coaching feedback on the change."""
        workout = self._require_active()
        original = self._exercise_at(workout, exercise_index)
        self._replace_exercise(exercise_index, new_exercise)
        logger.debug("Substituted %s with %s", original.name, new_exercise.name)
        return analyze_substitution(original, new_exercise)

    def complete(self, completed_at: datetime | None = None) -> CompletedWorkout:
        """Finish the workout, publish it and feed the progression engine.

        Raises:
            SessionStateError: If no workout is in progress.
        """
        workout = self._require_active()
        total_weight = sum(e.volume for e in workout.exercises)
        exercise_count = sum(1 for e in workout.exercises if e.completed_sets > 0)
        finished = dataclasses.replace(
            workout,
            is_completed=True,
            completed_at=completed_at or datetime.now(),
            total_weight_lifted=total_weight,
        )
        summary = CompletedWorkout(
            workout=finished,
            total_weight=total_weight,
            exercise_count=exercise_count,
            muscle_groups=finished.muscle_groups,
            coaching_feedback=workout_feedback(
                finished.exercises, total_weight, finished.duration_seconds,
            ),
        )
        self._workout = None
        self.history.append(summary)
        logger.info(
            "Completed %s workout: %d exercises, %.1f lifted",
            finished.day.name, exercise_count, total_weight,
        )

        try:
            if self._progression is not None:
                self._progression.record_workout(total_weight, exercise_count)
        finally:
            if self._bus is not None:
                self._bus.publish(WorkoutCompleted(
                    day=finished.day,
                    total_weight=total_weight,
                    exercise_count=exercise_count,
                    muscle_groups=summary.muscle_groups,
                ))
        return summary

    def cancel(self) -> None:
        """Drop the current workout without recording anything."""
        self._workout = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_active(self) -> Workout:
        if self._workout is None:
            raise SessionStateError("no workout in progress")
        return self._workout

    @staticmethod
    def _exercise_at(workout: Workout, index: int) -> Exercise:
        if not 0 <= index < len(workout.exercises):
            raise ValidationError(f"exercise index {index} out of range")
        return workout.exercises[index]

    def _replace_exercise(self, index: int, exercise: Exercise) -> None:
        exercises = list(self._workout.exercises)
        exercises[index] = exercise
        self._workout = dataclasses.replace(self._workout, exercises=tuple(exercises))
