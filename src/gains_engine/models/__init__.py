"""Data models for the gains engine."""

from gains_engine.models.character import CharacterState
from gains_engine.models.enums import (
    CharacterTier,
    EquipmentCategory,
    ExerciseDifficulty,
    FitnessLevel,
    MovementType,
    MuscleGroup,
    WorkoutDay,
)
from gains_engine.models.equipment import Equipment
from gains_engine.models.events import (
    Event,
    LevelUp,
    PersonalRecordBroken,
    TierChanged,
    WorkoutCompleted,
)
from gains_engine.models.exercise import Exercise, ExerciseSet
from gains_engine.models.records import PersonalRecord
from gains_engine.models.workout import CompletedWorkout, Workout

__all__ = [
    "CharacterState",
    "CharacterTier",
    "CompletedWorkout",
    "Equipment",
    "EquipmentCategory",
    "Event",
    "Exercise",
    "ExerciseDifficulty",
    "ExerciseSet",
    "FitnessLevel",
    "LevelUp",
    "MovementType",
    "MuscleGroup",
    "PersonalRecord",
    "PersonalRecordBroken",
    "TierChanged",
    "Workout",
    "WorkoutCompleted",
    "WorkoutDay",
]
