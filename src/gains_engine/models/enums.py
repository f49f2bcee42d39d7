"""Enumerations and progression constants for the gains engine.

The XP multipliers and tier bands are fixed game-design values; changing
them changes every existing character's level, so treat them as a format.
"""

from enum import IntEnum, auto


class CharacterTier(IntEnum):
    """Cosmetic character tiers, ordered from lowest to highest."""

    BEGINNER = auto()
    INTERMEDIATE = auto()
    ADVANCED = auto()
    ELITE = auto()
    LEGENDARY = auto()


class WorkoutDay(IntEnum):
    """Workout-day categories the generator knows how to fill."""

    UPPER_PUSH = auto()
    LOWER_POWER = auto()
    UPPER_PULL = auto()
    FULL_BODY = auto()


class FitnessLevel(IntEnum):
    """Self-reported training experience; scales sets, reps and rest."""

    BEGINNER = auto()
    INTERMEDIATE = auto()
    ADVANCED = auto()


class MuscleGroup(IntEnum):
    CHEST = auto()
    SHOULDERS = auto()
    TRICEPS = auto()
    BACK = auto()
    BICEPS = auto()
    LEGS = auto()
    GLUTES = auto()
    CORE = auto()
    CALVES = auto()


class ExerciseDifficulty(IntEnum):
    """Technical difficulty of an exercise, independent of the lifter's level."""

    BEGINNER = auto()
    INTERMEDIATE = auto()
    ADVANCED = auto()


class MovementType(IntEnum):
    COMPOUND = auto()
    ISOLATION = auto()
    POWER = auto()
    CARDIO = auto()


class EquipmentCategory(IntEnum):
    FREE_WEIGHTS = auto()
    MACHINES = auto()
    CARDIO = auto()
    FUNCTIONAL = auto()
    BODYWEIGHT = auto()


# ---------------------------------------------------------------------------
# Display names
# ---------------------------------------------------------------------------

TIER_DISPLAY_NAMES = {
    CharacterTier.BEGINNER: "Novice",
    CharacterTier.INTERMEDIATE: "Warrior",
    CharacterTier.ADVANCED: "Champion",
    CharacterTier.ELITE: "Elite Beast",
    CharacterTier.LEGENDARY: "Shadow Monarch",
}

TIER_IMAGE_NAMES = {
    CharacterTier.BEGINNER: "character_tier_1",
    CharacterTier.INTERMEDIATE: "character_tier_2",
    CharacterTier.ADVANCED: "character_tier_3",
    CharacterTier.ELITE: "character_tier_4",
    CharacterTier.LEGENDARY: "character_tier_5",
}

WORKOUT_DAY_DISPLAY_NAMES = {
    WorkoutDay.UPPER_PUSH: "Upper Push",
    WorkoutDay.LOWER_POWER: "Lower Power",
    WorkoutDay.UPPER_PULL: "Upper Pull",
    WorkoutDay.FULL_BODY: "Full Body",
}

WORKOUT_DAY_FOCUS = {
    WorkoutDay.UPPER_PUSH: "Chest, Shoulders, Triceps",
    WorkoutDay.LOWER_POWER: "Legs, Glutes, Power",
    WorkoutDay.UPPER_PULL: "Back, Biceps, Rear Delts",
    WorkoutDay.FULL_BODY: "Compound Movements",
}

EQUIPMENT_CATEGORY_DISPLAY_NAMES = {
    EquipmentCategory.FREE_WEIGHTS: "Free Weights",
    EquipmentCategory.MACHINES: "Machines",
    EquipmentCategory.CARDIO: "Cardio",
    EquipmentCategory.FUNCTIONAL: "Functional",
    EquipmentCategory.BODYWEIGHT: "Bodyweight",
}

# ---------------------------------------------------------------------------
# Leveling
# ---------------------------------------------------------------------------

# level = floor(sqrt(experience / XP_PER_LEVEL_UNIT)) + 1
XP_PER_LEVEL_UNIT = 100

# Inclusive (low, high) level bands; None = open-ended
TIER_LEVEL_BANDS = {
    CharacterTier.BEGINNER: (1, 25),
    CharacterTier.INTERMEDIATE: (26, 50),
    CharacterTier.ADVANCED: (51, 75),
    CharacterTier.ELITE: (76, 100),
    CharacterTier.LEGENDARY: (101, None),
}

# Bonus XP per stat point gained
STRENGTH_XP_MULTIPLIER = 10
ENDURANCE_XP_MULTIPLIER = 8

# Workout XP = exercises * XP_PER_EXERCISE + floor(total_weight / WEIGHT_PER_BONUS_XP)
XP_PER_EXERCISE = 50
WEIGHT_PER_BONUS_XP = 10

# First-use character stats
INITIAL_STRENGTH = 10
INITIAL_ENDURANCE = 10

# ---------------------------------------------------------------------------
# Set / rest prescription by fitness level
# ---------------------------------------------------------------------------

SETS_BY_LEVEL = {
    FitnessLevel.BEGINNER: 3,
    FitnessLevel.INTERMEDIATE: 4,
    FitnessLevel.ADVANCED: 5,
}

REST_SECONDS_BY_LEVEL = {
    FitnessLevel.BEGINNER: 90,
    FitnessLevel.INTERMEDIATE: 120,
    FitnessLevel.ADVANCED: 150,
}

# ---------------------------------------------------------------------------
# Coaching feedback thresholds
# ---------------------------------------------------------------------------

# Base training load per movement type, scaled by difficulty
MOVEMENT_BASE_LOAD = {
    MovementType.COMPOUND: 0.8,
    MovementType.ISOLATION: 0.4,
    MovementType.POWER: 1.0,
    MovementType.CARDIO: 0.6,
}

DIFFICULTY_LOAD_FACTOR = {
    ExerciseDifficulty.BEGINNER: 0.7,
    ExerciseDifficulty.INTERMEDIATE: 1.0,
    ExerciseDifficulty.ADVANCED: 1.3,
}

LOAD_PER_MUSCLE_GROUP = 0.1

# Weight lifted per minute above which a session counts as high / moderate intensity
HIGH_INTENSITY_WEIGHT_PER_MIN = 500
MODERATE_INTENSITY_WEIGHT_PER_MIN = 300

# ---------------------------------------------------------------------------
# Analytics
# ---------------------------------------------------------------------------

# Weekly volume slope (weight units per week) treated as flat
VOLUME_TREND_TOLERANCE = 1.0
