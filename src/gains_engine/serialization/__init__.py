"""Export characters, workouts and records as JSON-ready dicts, and back."""

from gains_engine.serialization.json_codec import (
    character_from_dict,
    character_to_dict,
    completed_workout_from_dict,
    completed_workout_to_dict,
    equipment_from_dict,
    equipment_to_dict,
    exercise_from_dict,
    exercise_to_dict,
    record_from_dict,
    record_to_dict,
    to_json_string,
    workout_from_dict,
    workout_to_dict,
)

__all__ = [
    "character_from_dict",
    "character_to_dict",
    "completed_workout_from_dict",
    "completed_workout_to_dict",
    "equipment_from_dict",
    "equipment_to_dict",
    "exercise_from_dict",
    "exercise_to_dict",
    "record_from_dict",
    "record_to_dict",
    "to_json_string",
    "workout_from_dict",
    "workout_to_dict",
]
