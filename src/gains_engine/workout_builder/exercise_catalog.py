"""Exercise catalog — immutable templates every generated exercise is built from.

A template names the equipment it *requires* (matched against the user's
available equipment) separately from the equipment it *displays*. Floor
space is always available, so floor exercises require nothing.
"""

from __future__ import annotations

from dataclasses import dataclass

from gains_engine.models.enums import (
    EquipmentCategory,
    ExerciseDifficulty,
    FitnessLevel,
    MovementType,
    MuscleGroup,
)
from gains_engine.models.equipment import Equipment

BARBELL = Equipment("Barbell", EquipmentCategory.FREE_WEIGHTS, "minus.rectangle.fill")
DUMBBELLS = Equipment("Dumbbells", EquipmentCategory.FREE_WEIGHTS, "dumbbell.fill")
PULL_UP_BAR = Equipment(
    "Pull-up Bar", EquipmentCategory.FUNCTIONAL, "figure.strengthtraining.functional",
)
BENCH = Equipment("Bench", EquipmentCategory.BODYWEIGHT, "rectangle.fill")
FLOOR_SPACE = Equipment("Floor Space", EquipmentCategory.BODYWEIGHT, "square.fill")


@dataclass(frozen=True)
class ExerciseTemplate:
    """Static description of an exercise variant.

    Attributes:
        key: Stable catalog key.
        reps: Target reps (or hold seconds if ``is_timed``) for
            (beginner, intermediate, advanced).
        required_equipment: Equipment names that must all be available.
            Empty means the variant can always be selected.
        equipment: Equipment shown on the generated exercise.
        target_weight: Suggested starting weight, None for bodyweight.
    """

    key: str
    name: str
    muscle_groups: tuple[MuscleGroup, ...]
    reps: tuple[int, int, int]
    required_equipment: tuple[str, ...] = ()
    equipment: tuple[Equipment, ...] = (FLOOR_SPACE,)
    target_weight: float | None = None
    instructions: str = ""
    difficulty: ExerciseDifficulty = ExerciseDifficulty.BEGINNER
    movement_type: MovementType = MovementType.COMPOUND
    is_timed: bool = False

    def reps_for(self, level: FitnessLevel) -> int:
        return self.reps[list(FitnessLevel).index(level)]


def _weighted(key, name, muscles, gear, reps, weight, instructions, difficulty, movement):
    return ExerciseTemplate(
        key=key,
        name=name,
        muscle_groups=muscles,
        reps=(reps, reps, reps),
        required_equipment=(gear.name,),
        equipment=(gear,),
        target_weight=weight,
        instructions=instructions,
        difficulty=difficulty,
        movement_type=movement,
    )


_G = MuscleGroup
_D = ExerciseDifficulty
_M = MovementType

_TEMPLATES: tuple[ExerciseTemplate, ...] = (
    # --- Push ---
    _weighted(
        "barbell_bench_press", "Barbell Bench Press",
        (_G.CHEST, _G.SHOULDERS, _G.TRICEPS), BARBELL, 8, 60.0,
        "Lie on bench, grip bar slightly wider than shoulders, lower to chest, press up",
        _D.INTERMEDIATE, _M.COMPOUND,
    ),
    _weighted(
        "dumbbell_chest_press", "Dumbbell Chest Press",
        (_G.CHEST, _G.SHOULDERS, _G.TRICEPS), DUMBBELLS, 10, 20.0,
        "Lie on bench with dumbbells, press weights up and together",
        _D.INTERMEDIATE, _M.COMPOUND,
    ),
    ExerciseTemplate(
        key="push_ups",
        name="Push-ups",
        muscle_groups=(_G.CHEST, _G.SHOULDERS, _G.TRICEPS),
        reps=(10, 15, 20),
        instructions="Start in plank position, lower chest to floor, push back up",
        difficulty=_D.BEGINNER,
        movement_type=_M.COMPOUND,
    ),
    _weighted(
        "dumbbell_shoulder_press", "Dumbbell Shoulder Press",
        (_G.SHOULDERS, _G.TRICEPS), DUMBBELLS, 12, 15.0,
        "Press dumbbells overhead from shoulder height",
        _D.INTERMEDIATE, _M.COMPOUND,
    ),
    ExerciseTemplate(
        key="pike_push_ups",
        name="Pike Push-ups",
        muscle_groups=(_G.SHOULDERS, _G.TRICEPS),
        reps=(8, 12, 15),
        instructions="Start in downward dog position, lower head toward floor, push back up",
        difficulty=_D.INTERMEDIATE,
        movement_type=_M.COMPOUND,
    ),
    _weighted(
        "tricep_extension", "Tricep Extension",
        (_G.TRICEPS,), DUMBBELLS, 12, 10.0,
        "Hold dumbbell overhead, lower behind head, extend back up",
        _D.BEGINNER, _M.ISOLATION,
    ),
    ExerciseTemplate(
        key="tricep_dips",
        name="Tricep Dips",
        muscle_groups=(_G.TRICEPS, _G.SHOULDERS),
        reps=(8, 12, 15),
        required_equipment=(BENCH.name,),
        equipment=(BENCH,),
        instructions="Support body on bench, lower body down, push back up",
        difficulty=_D.INTERMEDIATE,
        movement_type=_M.COMPOUND,
    ),
    ExerciseTemplate(
        key="diamond_push_ups",
        name="Diamond Push-ups",
        muscle_groups=(_G.TRICEPS, _G.CHEST),
        reps=(6, 10, 14),
        instructions="Push-up with hands together under the chest, elbows tucked to the sides",
        difficulty=_D.INTERMEDIATE,
        movement_type=_M.COMPOUND,
    ),
    _weighted(
        "lateral_raises", "Lateral Raises",
        (_G.SHOULDERS,), DUMBBELLS, 15, 8.0,
        "Raise arms out to sides until parallel with floor",
        _D.BEGINNER, _M.ISOLATION,
    ),
    ExerciseTemplate(
        key="prone_y_raises",
        name="Prone Y-Raises",
        muscle_groups=(_G.SHOULDERS, _G.BACK),
        reps=(10, 12, 15),
        instructions="Lie face down, arms overhead in a Y, lift arms off the floor",
        difficulty=_D.BEGINNER,
        movement_type=_M.ISOLATION,
    ),
    # --- Lower ---
    _weighted(
        "barbell_squat", "Barbell Squat",
        (_G.LEGS, _G.GLUTES, _G.CORE), BARBELL, 8, 80.0,
        "Bar on upper back, squat down keeping knees over toes",
        _D.INTERMEDIATE, _M.COMPOUND,
    ),
    _weighted(
        "goblet_squat", "Goblet Squat",
        (_G.LEGS, _G.GLUTES, _G.CORE), DUMBBELLS, 12, 20.0,
        "Hold one dumbbell at chest height, squat between the knees, stand tall",
        _D.BEGINNER, _M.COMPOUND,
    ),
    ExerciseTemplate(
        key="bodyweight_squats",
        name="Bodyweight Squats",
        muscle_groups=(_G.LEGS, _G.GLUTES),
        reps=(15, 20, 25),
        instructions="Stand with feet shoulder-width apart, lower hips back and down, return to standing",
        difficulty=_D.BEGINNER,
        movement_type=_M.COMPOUND,
    ),
    ExerciseTemplate(
        key="jump_squats",
        name="Jump Squats",
        muscle_groups=(_G.LEGS, _G.GLUTES),
        reps=(10, 15, 20),
        instructions="Squat down then explode up into a jump",
        difficulty=_D.INTERMEDIATE,
        movement_type=_M.POWER,
    ),
    ExerciseTemplate(
        key="glute_bridges",
        name="Glute Bridges",
        muscle_groups=(_G.GLUTES, _G.CORE),
        reps=(15, 20, 25),
        instructions="Lie on back, lift hips up squeezing glutes",
        difficulty=_D.BEGINNER,
        movement_type=_M.ISOLATION,
    ),
    ExerciseTemplate(
        key="walking_lunges",
        name="Walking Lunges",
        muscle_groups=(_G.LEGS, _G.GLUTES),
        reps=(10, 12, 15),
        instructions="Step forward into lunge, alternate legs",
        difficulty=_D.INTERMEDIATE,
        movement_type=_M.COMPOUND,
    ),
    # --- Pull ---
    ExerciseTemplate(
        key="pull_ups",
        name="Pull-ups",
        muscle_groups=(_G.BACK, _G.BICEPS),
        reps=(5, 8, 12),
        required_equipment=(PULL_UP_BAR.name,),
        equipment=(PULL_UP_BAR,),
        instructions="Hang from bar, pull body up until chin over bar",
        difficulty=_D.ADVANCED,
        movement_type=_M.COMPOUND,
    ),
    _weighted(
        "bent_over_rows", "Bent Over Dumbbell Rows",
        (_G.BACK, _G.BICEPS), DUMBBELLS, 10, 25.0,
        "Bend over, row dumbbells to sides of torso",
        _D.INTERMEDIATE, _M.COMPOUND,
    ),
    ExerciseTemplate(
        key="superman_pulls",
        name="Superman Pulls",
        muscle_groups=(_G.BACK, _G.SHOULDERS),
        reps=(10, 12, 15),
        instructions="Lie face down, arms overhead, lift chest and pull elbows down to the ribs",
        difficulty=_D.BEGINNER,
        movement_type=_M.ISOLATION,
    ),
    _weighted(
        "bicep_curls", "Bicep Curls",
        (_G.BICEPS,), DUMBBELLS, 12, 15.0,
        "Curl dumbbells up to shoulders",
        _D.BEGINNER, _M.ISOLATION,
    ),
    ExerciseTemplate(
        key="towel_curls",
        name="Isometric Towel Curls",
        muscle_groups=(_G.BICEPS,),
        reps=(20, 30, 40),
        instructions="Loop a towel under one foot and curl against the resistance of your leg",
        difficulty=_D.BEGINNER,
        movement_type=_M.ISOLATION,
        is_timed=True,
    ),
    _weighted(
        "rear_delt_flyes", "Rear Delt Flyes",
        (_G.SHOULDERS,), DUMBBELLS, 15, 8.0,
        "Bend over, fly arms out to sides",
        _D.BEGINNER, _M.ISOLATION,
    ),
    ExerciseTemplate(
        key="prone_reverse_flyes",
        name="Prone Reverse Flyes",
        muscle_groups=(_G.SHOULDERS, _G.BACK),
        reps=(10, 12, 15),
        instructions="Lie face down, arms out to the sides, lift them squeezing the shoulder blades",
        difficulty=_D.BEGINNER,
        movement_type=_M.ISOLATION,
    ),
    # --- Full body ---
    ExerciseTemplate(
        key="burpees",
        name="Burpees",
        muscle_groups=(_G.CHEST, _G.LEGS, _G.CORE),
        reps=(8, 12, 15),
        instructions="Squat, jump back to plank, push-up, jump feet in, jump up",
        difficulty=_D.ADVANCED,
        movement_type=_M.COMPOUND,
    ),
    ExerciseTemplate(
        key="mountain_climbers",
        name="Mountain Climbers",
        muscle_groups=(_G.CORE, _G.SHOULDERS),
        reps=(20, 30, 40),
        instructions="Plank position, alternate bringing knees to chest",
        difficulty=_D.INTERMEDIATE,
        movement_type=_M.CARDIO,
    ),
    ExerciseTemplate(
        key="plank_hold",
        name="Plank Hold",
        muscle_groups=(_G.CORE,),
        reps=(30, 45, 60),
        instructions="Hold plank position keeping body straight",
        difficulty=_D.BEGINNER,
        movement_type=_M.ISOLATION,
        is_timed=True,
    ),
)

EXERCISE_CATALOG: dict[str, ExerciseTemplate] = {t.key: t for t in _TEMPLATES}


def get_exercise_template(key: str) -> ExerciseTemplate:
    """Look up a template by catalog key.

    Raises:
        KeyError: If no template has this key.
    """
    return EXERCISE_CATALOG[key]
