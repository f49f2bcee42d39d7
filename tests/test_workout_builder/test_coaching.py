"""Tests for rule-based coaching feedback."""

from __future__ import annotations

import pytest

from gains_engine.models.enums import FitnessLevel
from gains_engine.models.exercise import Exercise
from gains_engine.models.workout import Workout
from gains_engine.workout_builder.coaching import (
    analyze_substitution,
    exercise_load,
    workout_feedback,
)
from gains_engine.workout_builder.exercise_catalog import get_exercise_template
from gains_engine.workout_builder.prescription import prescribe


def _exercise(key: str) -> Exercise:
    return prescribe(get_exercise_template(key), FitnessLevel.BEGINNER)


class TestExerciseLoad:
    def test_compound_intermediate(self) -> None:
        # 0.8 x 1.0 + 3 x 0.1
        assert exercise_load(_exercise("barbell_bench_press")) == pytest.approx(1.1)

    def test_isolation_beginner(self) -> None:
        # 0.4 x 0.7 + 1 x 0.1
        assert exercise_load(_exercise("lateral_raises")) == pytest.approx(0.38)

    def test_power_outweighs_compound(self) -> None:
        assert exercise_load(_exercise("jump_squats")) > exercise_load(_exercise("bodyweight_squats"))


class TestAnalyzeSubstitution:
    def test_same_muscles_easier_variant(self) -> None:
        text = analyze_substitution(_exercise("barbell_bench_press"), _exercise("push_ups"))
        assert "Perfect substitution" in text
        assert "Reducing difficulty" in text
        assert "Lower training load" in text

    def test_missing_muscle_groups(self) -> None:
        text = analyze_substitution(_exercise("barbell_bench_press"), _exercise("lateral_raises"))
        assert "Missing muscle groups: Chest, Triceps." in text
        assert "compound to isolation" in text

    def test_bonus_muscle_groups(self) -> None:
        text = analyze_substitution(_exercise("bicep_curls"), _exercise("bent_over_rows"))
        assert "Bonus: also targets Back." in text
        assert "Upgrading to a compound movement" in text

    def test_power_upgrade(self) -> None:
        text = analyze_substitution(_exercise("bodyweight_squats"), _exercise("jump_squats"))
        assert "explosive power" in text
        assert "Increasing difficulty" in text
        assert "Higher training load" in text

    def test_equivalent_swap(self) -> None:
        text = analyze_substitution(_exercise("superman_pulls"), _exercise("prone_reverse_flyes"))
        assert text.startswith("Perfect substitution")
        assert "Similar training load" in text


class TestWorkoutFeedback:
    def test_high_intensity_long_session(self, push_workout: Workout) -> None:
        text = workout_feedback(push_workout.exercises, 40_000.0, 3600.0)
        assert "High-intensity" in text
        assert "Good muscle group distribution." in text
        assert "extra rest" in text

    def test_moderate_intensity(self, push_workout: Workout) -> None:
        text = workout_feedback(push_workout.exercises, 20_000.0, 3600.0)
        assert "moderate-intensity" in text

    def test_light_bodyweight_session(self, bodyweight_workout: Workout) -> None:
        text = workout_feedback(bodyweight_workout.exercises, 0.0, 1200.0)
        assert "Good active session" in text
        assert "train again sooner" in text

    def test_zero_duration(self) -> None:
        text = workout_feedback([], 0.0, 0.0)
        assert text.startswith("Good active session")
        assert "Even muscle group balance." in text
