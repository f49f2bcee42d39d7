"""JSON-compatible dict conversion for characters, workouts and records.

All functions are pure (no I/O). Enums are written by lower-cased name.
"""

from __future__ import annotations

import json
import math
from datetime import date, datetime
from enum import Enum
from typing import TypeVar

from gains_engine.exceptions import ValidationError
from gains_engine.models.character import CharacterState
from gains_engine.models.enums import (
    TIER_DISPLAY_NAMES,
    EquipmentCategory,
    ExerciseDifficulty,
    MovementType,
    MuscleGroup,
    WorkoutDay,
)
from gains_engine.models.equipment import Equipment
from gains_engine.models.exercise import Exercise, ExerciseSet
from gains_engine.models.records import PersonalRecord
from gains_engine.models.workout import CompletedWorkout, Workout

_SCHEMA_VERSION = 1

_E = TypeVar("_E", bound=Enum)


def character_to_dict(state: CharacterState) -> dict:
    """Serialize a character. ``level`` and ``tier`` are informational only."""
    return {
        "schema_version": _SCHEMA_VERSION,
        "experience": state.experience,
        "strength": state.strength,
        "endurance": state.endurance,
        "total_weight_lifted": state.total_weight_lifted,
        "level": state.level,
        "tier": state.tier.name.lower(),
        "tier_name": TIER_DISPLAY_NAMES[state.tier],
    }


def character_from_dict(data: dict) -> CharacterState:
    """Rebuild a character, recomputing level from experience.

    Raises:
        ValidationError: On missing or invalid fields.
    """
    try:
        experience = data["experience"]
        strength = data["strength"]
        endurance = data["endurance"]
        total_weight = data["total_weight_lifted"]
    except KeyError as exc:
        raise ValidationError(f"missing character field: {exc.args[0]}") from exc

    for name, value in (("experience", experience), ("strength", strength), ("endurance", endurance)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"{name} must be an integer, got {value!r}")
    if experience < 0:
        raise ValidationError(f"experience must be >= 0, got {experience}")
    if isinstance(total_weight, bool) or not isinstance(total_weight, (int, float)):
        raise ValidationError(f"total_weight_lifted must be a number, got {total_weight!r}")
    if not math.isfinite(total_weight) or total_weight < 0:
        raise ValidationError(f"total_weight_lifted must be >= 0, got {total_weight}")

    return CharacterState(
        experience=experience,
        strength=strength,
        endurance=endurance,
        total_weight_lifted=float(total_weight),
    )


def equipment_to_dict(equipment: Equipment) -> dict:
    return {
        "name": equipment.name,
        "category": equipment.category.name.lower(),
        "icon": equipment.icon,
        "is_available": equipment.is_available,
        "is_custom": equipment.is_custom,
    }


def equipment_from_dict(data: dict) -> Equipment:
    return Equipment(
        name=_require(data, "name"),
        category=_enum(EquipmentCategory, _require(data, "category")),
        icon=data.get("icon", ""),
        is_available=data.get("is_available", True),
        is_custom=data.get("is_custom", False),
    )


def exercise_to_dict(exercise: Exercise) -> dict:
    return {
        "key": exercise.key,
        "name": exercise.name,
        "muscle_groups": [g.name.lower() for g in exercise.muscle_groups],
        "equipment": [equipment_to_dict(eq) for eq in exercise.equipment],
        "sets": [_set_to_dict(s) for s in exercise.sets],
        "instructions": exercise.instructions,
        "difficulty": exercise.difficulty.name.lower(),
        "movement_type": exercise.movement_type.name.lower(),
        "is_timed": exercise.is_timed,
    }


def exercise_from_dict(data: dict) -> Exercise:
    return Exercise(
        key=_require(data, "key"),
        name=_require(data, "name"),
        muscle_groups=tuple(_enum(MuscleGroup, g) for g in _require(data, "muscle_groups")),
        equipment=tuple(equipment_from_dict(eq) for eq in _require(data, "equipment")),
        sets=tuple(_set_from_dict(s) for s in _require(data, "sets")),
        instructions=data.get("instructions", ""),
        difficulty=_enum(ExerciseDifficulty, _require(data, "difficulty")),
        movement_type=_enum(MovementType, _require(data, "movement_type")),
        is_timed=data.get("is_timed", False),
    )


def workout_to_dict(workout: Workout) -> dict:
    return {
        "day": workout.day.name.lower(),
        "created_at": workout.created_at.isoformat(),
        "is_completed": workout.is_completed,
        "completed_at": _iso_or_none(workout.completed_at),
        "total_weight_lifted": workout.total_weight_lifted,
        "exercises": [exercise_to_dict(e) for e in workout.exercises],
    }


def workout_from_dict(data: dict) -> Workout:
    """Rebuild a workout written by ``workout_to_dict``.

    Raises:
        ValidationError: On missing fields, unknown enum names or bad dates.
    """
    completed_at = data.get("completed_at")
    return Workout(
        day=_enum(WorkoutDay, _require(data, "day")),
        exercises=tuple(exercise_from_dict(e) for e in _require(data, "exercises")),
        created_at=_datetime(_require(data, "created_at")),
        is_completed=data.get("is_completed", False),
        completed_at=_datetime(completed_at) if completed_at is not None else None,
        total_weight_lifted=float(data.get("total_weight_lifted", 0.0)),
    )


def completed_workout_to_dict(completed: CompletedWorkout) -> dict:
    return {
        "workout": workout_to_dict(completed.workout),
        "total_weight": completed.total_weight,
        "exercise_count": completed.exercise_count,
        "muscle_groups": [g.name.lower() for g in completed.muscle_groups],
        "coaching_feedback": completed.coaching_feedback,
    }


def completed_workout_from_dict(data: dict) -> CompletedWorkout:
    return CompletedWorkout(
        workout=workout_from_dict(_require(data, "workout")),
        total_weight=float(_require(data, "total_weight")),
        exercise_count=_require(data, "exercise_count"),
        muscle_groups=tuple(_enum(MuscleGroup, g) for g in data.get("muscle_groups", [])),
        coaching_feedback=data.get("coaching_feedback", ""),
    )


def record_to_dict(record: PersonalRecord) -> dict:
    return {
        "exercise_name": record.exercise_name,
        "one_rep_max": record.one_rep_max,
        "max_weight": record.max_weight,
        "max_reps": record.max_reps,
        "best_volume": record.best_volume,
        "date_achieved": record.date_achieved.isoformat(),
        "previous_one_rep_max": record.previous_one_rep_max,
    }


def record_from_dict(data: dict) -> PersonalRecord:
    """Rebuild a personal record.

    Raises:
        ValidationError: On missing fields, a bad date or a non-finite
            or negative one-rep max.
    """
    one_rep_max = _require(data, "one_rep_max")
    if isinstance(one_rep_max, bool) or not isinstance(one_rep_max, (int, float)):
        raise ValidationError(f"one_rep_max must be a number, got {one_rep_max!r}")
    if not math.isfinite(one_rep_max) or one_rep_max < 0:
        raise ValidationError(f"one_rep_max must be a finite number >= 0, got {one_rep_max}")
    try:
        achieved = date.fromisoformat(_require(data, "date_achieved"))
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"invalid date_achieved: {data['date_achieved']!r}") from exc
    return PersonalRecord(
        exercise_name=_require(data, "exercise_name"),
        one_rep_max=float(one_rep_max),
        max_weight=float(_require(data, "max_weight")),
        max_reps=_require(data, "max_reps"),
        best_volume=float(_require(data, "best_volume")),
        date_achieved=achieved,
        previous_one_rep_max=float(data.get("previous_one_rep_max", 0.0)),
    )


def to_json_string(data: dict, indent: int = 2) -> str:
    return json.dumps(data, indent=indent)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _set_to_dict(exercise_set: ExerciseSet) -> dict:
    return {
        "target_reps": exercise_set.target_reps,
        "target_weight": exercise_set.target_weight,
        "rest_seconds": exercise_set.rest_seconds,
        "actual_reps": exercise_set.actual_reps,
        "actual_weight": exercise_set.actual_weight,
        "is_completed": exercise_set.is_completed,
    }


def _set_from_dict(data: dict) -> ExerciseSet:
    return ExerciseSet(
        target_reps=_require(data, "target_reps"),
        target_weight=data.get("target_weight"),
        rest_seconds=data.get("rest_seconds", 90),
        actual_reps=data.get("actual_reps"),
        actual_weight=data.get("actual_weight"),
        is_completed=data.get("is_completed", False),
    )


def _require(data: dict, key: str):
    try:
        return data[key]
    except (KeyError, TypeError) as exc:
        raise ValidationError(f"missing field: {key}") from exc


def _enum(enum_cls: type[_E], name) -> _E:
    try:
        return enum_cls[str(name).upper()]
    except KeyError as exc:
        raise ValidationError(f"unknown {enum_cls.__name__}: {name!r}") from exc


def _datetime(value) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"invalid timestamp: {value!r}") from exc


def _iso_or_none(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None
