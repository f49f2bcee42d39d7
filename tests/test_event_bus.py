"""Tests for the in-process EventBus."""

from __future__ import annotations

import pytest

from gains_engine.event_bus import EventBus, EventLog
from gains_engine.exceptions import EventBusClosedError
from gains_engine.models.enums import CharacterTier, WorkoutDay
from gains_engine.models.events import (
    Event,
    LevelUp,
    PersonalRecordBroken,
    TierChanged,
    WorkoutCompleted,
)


class TestSubscribe:
    def test_handler_receives_typed_event(self, bus: EventBus) -> None:
        received = []
        bus.subscribe(LevelUp, received.append)
        bus.publish(LevelUp(previous_level=1, new_level=2))
        assert received == [LevelUp(previous_level=1, new_level=2)]

    def test_only_matching_type(self, bus: EventBus) -> None:
        received = []
        bus.subscribe(TierChanged, received.append)
        bus.publish(LevelUp(previous_level=1, new_level=2))
        assert received == []

    def test_subscription_order(self, bus: EventBus) -> None:
        calls = []
        bus.subscribe(LevelUp, lambda e: calls.append("first"))
        bus.subscribe(LevelUp, lambda e: calls.append("second"))
        bus.publish(LevelUp(previous_level=1, new_level=2))
        assert calls == ["first", "second"]

    def test_unsubscribe(self, bus: EventBus) -> None:
        received = []
        unsubscribe = bus.subscribe(LevelUp, received.append)
        unsubscribe()
        unsubscribe()
        bus.publish(LevelUp(previous_level=1, new_level=2))
        assert received == []

    def test_subscribe_all(self, bus: EventBus, event_log: EventLog) -> None:
        bus.publish(LevelUp(previous_level=1, new_level=2))
        bus.publish(PersonalRecordBroken("Barbell Squat", 120.0))
        assert event_log.names() == ["level_up", "personal_record_broken"]


class TestHandlerErrors:
    def test_all_handlers_run_then_first_error_raised(self, bus: EventBus) -> None:
        calls = []

        def boom(event) -> None:
            calls.append("boom")
            raise RuntimeError("handler failed")

        def other(event) -> None:
            calls.append("other")
            raise KeyError("second")

        bus.subscribe(LevelUp, boom)
        bus.subscribe(LevelUp, other)
        bus.subscribe(LevelUp, lambda e: calls.append("last"))
        with pytest.raises(RuntimeError, match="handler failed"):
            bus.publish(LevelUp(previous_level=1, new_level=2))
        assert calls == ["boom", "other", "last"]


class TestLifecycle:
    def test_publish_after_close(self) -> None:
        bus = EventBus()
        bus.close()
        assert bus.closed
        with pytest.raises(EventBusClosedError):
            bus.publish(LevelUp(previous_level=1, new_level=2))

    def test_context_manager_closes(self) -> None:
        with EventBus() as bus:
            assert not bus.closed
        assert bus.closed


class TestPayloads:
    def test_base_event_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Event()

    def test_subclass_without_payload_is_abstract(self) -> None:
        class Bare(Event):
            name = "bare"

        with pytest.raises(TypeError):
            Bare()

    def test_tier_changed_payload(self) -> None:
        event = TierChanged(CharacterTier.ELITE, CharacterTier.LEGENDARY, level=101)
        assert event.name == "tier_changed"
        assert event.payload() == {
            "previous_tier": "elite",
            "tier": "legendary",
            "tier_name": "Shadow Monarch",
            "level": 101,
        }

    def test_workout_completed_payload(self) -> None:
        event = WorkoutCompleted(WorkoutDay.FULL_BODY, total_weight=0.0, exercise_count=3)
        assert event.payload()["day"] == "full_body"
        assert event.payload()["muscle_groups"] == []
