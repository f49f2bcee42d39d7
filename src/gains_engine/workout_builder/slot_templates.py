"""Slot templates — the fixed exercise roles that make up each workout day.

Each slot lists exercise variants in equipment priority order (e.g.
barbell > dumbbells > bodyweight). The last variant of every slot requires
no equipment, which is what makes generation total.
"""

from __future__ import annotations

from dataclasses import dataclass

from gains_engine.models.enums import WorkoutDay


@dataclass(frozen=True)
class ExerciseSlot:
    """A named role within a workout day and its candidate variants.

    Attributes:
        role: Slot name, e.g. "primary_push".
        variants: Exercise catalog keys, highest priority first.
    """

    role: str
    variants: tuple[str, ...]


# ---------------------------------------------------------------------------
# Slot definitions for all 4 workout days
# ---------------------------------------------------------------------------

DAY_TEMPLATES: dict[WorkoutDay, tuple[ExerciseSlot, ...]] = {
    # Chest, shoulders, triceps
    WorkoutDay.UPPER_PUSH: (
        ExerciseSlot("primary_push", ("barbell_bench_press", "dumbbell_chest_press", "push_ups")),
        ExerciseSlot("shoulder", ("dumbbell_shoulder_press", "pike_push_ups")),
        ExerciseSlot("triceps", ("tricep_extension", "tricep_dips", "diamond_push_ups")),
        ExerciseSlot("lateral_accessory", ("lateral_raises", "prone_y_raises")),
    ),

    # Legs, glutes, power
    WorkoutDay.LOWER_POWER: (
        ExerciseSlot("primary_lower", ("barbell_squat", "goblet_squat", "bodyweight_squats")),
        ExerciseSlot("power", ("jump_squats",)),
        ExerciseSlot("glutes", ("glute_bridges",)),
        ExerciseSlot("single_leg", ("walking_lunges",)),
    ),

    # Back, biceps, rear delts
    WorkoutDay.UPPER_PULL: (
        ExerciseSlot("primary_pull", ("pull_ups", "bent_over_rows", "superman_pulls")),
        ExerciseSlot("biceps", ("bicep_curls", "towel_curls")),
        ExerciseSlot("rear_delt", ("rear_delt_flyes", "prone_reverse_flyes")),
    ),

    # Bodyweight conditioning circuit
    WorkoutDay.FULL_BODY: (
        ExerciseSlot("conditioning", ("burpees",)),
        ExerciseSlot("core_cardio", ("mountain_climbers",)),
        ExerciseSlot("core_hold", ("plank_hold",)),
    ),
}


def get_day_template(day: WorkoutDay) -> tuple[ExerciseSlot, ...]:
    """Look up the ordered slots for a workout day.

    Raises:
        KeyError: If no template is defined for the day.
    """
    return DAY_TEMPLATES[day]
