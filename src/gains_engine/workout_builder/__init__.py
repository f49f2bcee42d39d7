"""Workout builder: fills workout-day slots with equipment-appropriate exercises."""

from gains_engine.workout_builder.generator import (
    WorkoutGenerator,
    generate_exercises,
    generate_workout,
)

__all__ = ["WorkoutGenerator", "generate_exercises", "generate_workout"]
