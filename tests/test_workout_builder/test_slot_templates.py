"""Tests for day slot templates and the exercise catalog they reference."""

from __future__ import annotations

import pytest

from gains_engine.models.enums import FitnessLevel, MuscleGroup, WorkoutDay
from gains_engine.workout_builder.exercise_catalog import (
    EXERCISE_CATALOG,
    get_exercise_template,
)
from gains_engine.workout_builder.slot_templates import DAY_TEMPLATES, get_day_template


class TestDayTemplates:
    def test_every_day_has_template(self) -> None:
        assert set(DAY_TEMPLATES) == set(WorkoutDay)

    def test_slot_counts(self) -> None:
        assert len(get_day_template(WorkoutDay.UPPER_PUSH)) == 4
        assert len(get_day_template(WorkoutDay.LOWER_POWER)) == 4
        assert len(get_day_template(WorkoutDay.UPPER_PULL)) == 3
        assert len(get_day_template(WorkoutDay.FULL_BODY)) == 3

    @pytest.mark.parametrize("day", list(WorkoutDay))
    def test_variants_exist_in_catalog(self, day: WorkoutDay) -> None:
        for slot in get_day_template(day):
            assert slot.variants
            for key in slot.variants:
                assert key in EXERCISE_CATALOG

    @pytest.mark.parametrize("day", list(WorkoutDay))
    def test_last_variant_needs_no_equipment(self, day: WorkoutDay) -> None:
        for slot in get_day_template(day):
            assert get_exercise_template(slot.variants[-1]).required_equipment == ()

    def test_primary_push_priority(self) -> None:
        primary = get_day_template(WorkoutDay.UPPER_PUSH)[0]
        assert primary.role == "primary_push"
        assert primary.variants == ("barbell_bench_press", "dumbbell_chest_press", "push_ups")

    def test_upper_pull_focus(self) -> None:
        groups = {
            g
            for slot in get_day_template(WorkoutDay.UPPER_PULL)
            for g in get_exercise_template(slot.variants[0]).muscle_groups
        }
        assert {MuscleGroup.BACK, MuscleGroup.BICEPS} <= groups


class TestExerciseCatalog:
    def test_unknown_key(self) -> None:
        with pytest.raises(KeyError):
            get_exercise_template("zercher_squat")

    def test_keys_match_entries(self) -> None:
        for key, template in EXERCISE_CATALOG.items():
            assert template.key == key

    def test_reps_scale_with_level(self) -> None:
        push_ups = get_exercise_template("push_ups")
        assert push_ups.reps_for(FitnessLevel.BEGINNER) == 10
        assert push_ups.reps_for(FitnessLevel.INTERMEDIATE) == 15
        assert push_ups.reps_for(FitnessLevel.ADVANCED) == 20

    def test_weighted_exercises_have_target_weight(self) -> None:
        for template in EXERCISE_CATALOG.values():
            if {"Barbell", "Dumbbells"} & set(template.required_equipment):
                assert template.target_weight is not None

    def test_timed_exercises(self) -> None:
        timed = {k for k, t in EXERCISE_CATALOG.items() if t.is_timed}
        assert timed == {"plank_hold", "towel_curls"}
