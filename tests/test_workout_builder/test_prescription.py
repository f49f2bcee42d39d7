"""Tests for level-scaled set prescription."""

from __future__ import annotations

import pytest

from gains_engine.models.enums import FitnessLevel
from gains_engine.workout_builder.exercise_catalog import get_exercise_template
from gains_engine.workout_builder.prescription import build_sets, prescribe


class TestBuildSets:
    @pytest.mark.parametrize(
        "level, sets, rest",
        [
            (FitnessLevel.BEGINNER, 3, 90),
            (FitnessLevel.INTERMEDIATE, 4, 120),
            (FitnessLevel.ADVANCED, 5, 150),
        ],
    )
    def test_sets_and_rest_by_level(self, level: FitnessLevel, sets: int, rest: int) -> None:
        built = build_sets(get_exercise_template("goblet_squat"), level)
        assert len(built) == sets
        assert all(s.rest_seconds == rest for s in built)

    def test_sets_start_uncompleted(self) -> None:
        built = build_sets(get_exercise_template("bicep_curls"), FitnessLevel.BEGINNER)
        assert not any(s.is_completed for s in built)
        assert all(s.actual_reps is None for s in built)

    def test_bodyweight_has_no_target_weight(self) -> None:
        built = build_sets(get_exercise_template("glute_bridges"), FitnessLevel.ADVANCED)
        assert all(s.target_weight is None for s in built)
        assert built[0].target_reps == 25


class TestPrescribe:
    def test_copies_template_fields(self) -> None:
        template = get_exercise_template("barbell_squat")
        exercise = prescribe(template, FitnessLevel.INTERMEDIATE)
        assert exercise.key == template.key
        assert exercise.name == "Barbell Squat"
        assert exercise.muscle_groups == template.muscle_groups
        assert exercise.difficulty == template.difficulty
        assert exercise.sets[0].target_weight == 80.0
        assert exercise.sets[0].target_reps == 8
