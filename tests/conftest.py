"""Shared test fixtures: characters, equipment sets, buses and workouts."""

from __future__ import annotations

from datetime import datetime

import pytest

from gains_engine.event_bus import EventBus, EventLog
from gains_engine.inventory import EquipmentInventory
from gains_engine.models.character import CharacterState
from gains_engine.models.enums import EquipmentCategory, FitnessLevel, WorkoutDay
from gains_engine.models.equipment import Equipment
from gains_engine.models.workout import Workout
from gains_engine.workout_builder.generator import generate_workout


@pytest.fixture
def new_character() -> CharacterState:
    """First-use character: level 1, 0 XP, strength 10, endurance 10."""
    return CharacterState.new()


@pytest.fixture
def home_gym() -> list[Equipment]:
    """Barbell and dumbbells, both available."""
    return [
        Equipment("Barbell", EquipmentCategory.FREE_WEIGHTS),
        Equipment("Dumbbells", EquipmentCategory.FREE_WEIGHTS),
    ]


@pytest.fixture
def inventory() -> EquipmentInventory:
    return EquipmentInventory()


@pytest.fixture
def bus():
    with EventBus() as b:
        yield b


@pytest.fixture
def event_log(bus: EventBus) -> EventLog:
    """Records every event published on ``bus``."""
    log = EventLog()
    bus.subscribe_all(log)
    return log


@pytest.fixture
def push_workout(home_gym: list[Equipment]) -> Workout:
    """Intermediate upper-push workout: bench, shoulder press, extension, laterals."""
    return generate_workout(
        WorkoutDay.UPPER_PUSH,
        home_gym,
        FitnessLevel.INTERMEDIATE,
        created_at=datetime(2024, 3, 4, 18, 0),
    )


@pytest.fixture
def bodyweight_workout() -> Workout:
    """Beginner full-body circuit with no equipment."""
    return generate_workout(
        WorkoutDay.FULL_BODY, [], FitnessLevel.BEGINNER,
        created_at=datetime(2024, 3, 5, 7, 0),
    )
