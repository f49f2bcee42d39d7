"""Typed events emitted by the progression engine and the session tracker.

Each event type carries its own payload fields and a stable ``name`` for
consumers that only understand ``publish(event_name, payload)``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar

from gains_engine.models.enums import (
    TIER_DISPLAY_NAMES,
    CharacterTier,
    MuscleGroup,
    WorkoutDay,
)


@dataclass(frozen=True)
class Event(ABC):
    """Base class for all events."""

    name: ClassVar[str] = "event"

    @abstractmethod
    def payload(self) -> dict:
        """Plain-dict form of the event fields."""
        ...


@dataclass(frozen=True)
class LevelUp(Event):
    """The character's level rose (possibly by several levels at once)."""

    name: ClassVar[str] = "level_up"

    previous_level: int
    new_level: int

    def payload(self) -> dict:
        return {"previous_level": self.previous_level, "level": self.new_level}


@dataclass(frozen=True)
class TierChanged(Event):
    """The derived tier changed. Emitted once per update, final tier only."""

    name: ClassVar[str] = "tier_changed"

    previous_tier: CharacterTier
    new_tier: CharacterTier
    level: int

    def payload(self) -> dict:
        return {
            "previous_tier": self.previous_tier.name.lower(),
            "tier": self.new_tier.name.lower(),
            "tier_name": TIER_DISPLAY_NAMES[self.new_tier],
            "level": self.level,
        }


@dataclass(frozen=True)
class WorkoutCompleted(Event):
    name: ClassVar[str] = "workout_completed"

    day: WorkoutDay
    total_weight: float
    exercise_count: int
    muscle_groups: tuple[MuscleGroup, ...] = field(default_factory=tuple)

    def payload(self) -> dict:
        return {
            "day": self.day.name.lower(),
            "total_weight": self.total_weight,
            "exercise_count": self.exercise_count,
            "muscle_groups": [g.name.lower() for g in self.muscle_groups],
        }


@dataclass(frozen=True)
class PersonalRecordBroken(Event):
    name: ClassVar[str] = "personal_record_broken"

    exercise_name: str
    one_rep_max: float
    previous_one_rep_max: float = 0.0

    def payload(self) -> dict:
        return {
            "exercise": self.exercise_name,
            "one_rep_max": self.one_rep_max,
            "previous_one_rep_max": self.previous_one_rep_max,
        }
