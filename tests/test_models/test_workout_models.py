"""Tests for exercise sets, exercises and workouts."""

from __future__ import annotations

import dataclasses
from datetime import datetime, timedelta

from gains_engine.models.enums import MuscleGroup
from gains_engine.models.exercise import ExerciseSet
from gains_engine.models.workout import Workout


class TestExerciseSet:
    def test_record_marks_completed(self) -> None:
        done = ExerciseSet(target_reps=8, target_weight=60.0).record(reps=7, weight=57.5)
        assert done.is_completed
        assert done.actual_reps == 7
        assert done.actual_weight == 57.5
        assert done.target_reps == 8

    def test_volume_only_when_completed(self) -> None:
        pending = ExerciseSet(target_reps=8, target_weight=60.0)
        assert pending.volume == 0.0
        assert pending.record(8, 60.0).volume == 480.0

    def test_bodyweight_set_has_no_volume(self) -> None:
        assert ExerciseSet(target_reps=15).record(15, 0.0).volume == 0.0


class TestExercise:
    def test_with_set_replaces_one_set(self, push_workout: Workout) -> None:
        bench = push_workout.exercises[0]
        updated = bench.with_set(1, bench.sets[1].record(8, 60.0))
        assert updated.completed_sets == 1
        assert bench.completed_sets == 0
        assert updated.volume == 480.0

    def test_is_bodyweight(self, push_workout: Workout, bodyweight_workout: Workout) -> None:
        assert not push_workout.exercises[0].is_bodyweight
        assert all(e.is_bodyweight for e in bodyweight_workout.exercises)


class TestWorkout:
    def test_duration_zero_until_completed(self, push_workout: Workout) -> None:
        assert push_workout.duration_seconds == 0.0

    def test_duration(self, push_workout: Workout) -> None:
        done = dataclasses.replace(
            push_workout, completed_at=push_workout.created_at + timedelta(minutes=45),
        )
        assert done.duration_seconds == 45 * 60

    def test_muscle_groups_unique_in_first_seen_order(self, push_workout: Workout) -> None:
        assert push_workout.muscle_groups == (
            MuscleGroup.CHEST, MuscleGroup.SHOULDERS, MuscleGroup.TRICEPS,
        )

    def test_created_at_kept(self, push_workout: Workout) -> None:
        assert push_workout.created_at == datetime(2024, 3, 4, 18, 0)
