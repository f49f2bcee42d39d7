"""Utility helpers bridging the Streamlit UI and the gains engine.

Pure functions for formatting, color maps, chart data and character
persistence.
"""

from __future__ import annotations

import pandas as pd

from gains_engine.config import CHARACTER_FILE, HISTORY_FILE
from gains_engine.math import leveling
from gains_engine.math.training_volume import weekly_volume
from gains_engine.models.character import CharacterState
from gains_engine.models.enums import CharacterTier, WorkoutDay
from gains_engine.models.exercise import Exercise, ExerciseSet
from gains_engine.models.workout import CompletedWorkout
from gains_engine.persistence import JsonCharacterStore, JsonHistoryStore

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_weight(weight: float | None) -> str:
    """e.g. 60.0 -> '60 kg', 12.5 -> '12.5 kg', None -> 'Bodyweight'."""
    if weight is None:
        return "Bodyweight"
    if float(weight).is_integer():
        return f"{int(weight)} kg"
    return f"{weight:.1f} kg"


def format_rest(seconds: int) -> str:
    """e.g. 90 -> '1:30 rest'."""
    return f"{seconds // 60}:{seconds % 60:02d} rest"


def format_target(exercise: Exercise, exercise_set: ExerciseSet) -> str:
    """Target for one set, e.g. '8 reps @ 60 kg' or '30 s hold'."""
    if exercise.is_timed:
        return f"{exercise_set.target_reps} s hold"
    text = f"{exercise_set.target_reps} reps"
    if exercise_set.target_weight is not None:
        text += f" @ {format_weight(exercise_set.target_weight)}"
    return text


def format_muscle_groups(exercise: Exercise) -> str:
    return ", ".join(g.name.capitalize() for g in exercise.muscle_groups)


# ---------------------------------------------------------------------------
# Color maps
# ---------------------------------------------------------------------------

TIER_COLORS: dict[CharacterTier, str] = {
    CharacterTier.BEGINNER: "#95A5A6",      # gray
    CharacterTier.INTERMEDIATE: "#3498DB",  # blue
    CharacterTier.ADVANCED: "#8E44AD",      # purple
    CharacterTier.ELITE: "#E67E22",         # orange
    CharacterTier.LEGENDARY: "#E74C3C",     # red
}

DAY_COLORS: dict[WorkoutDay, str] = {
    WorkoutDay.UPPER_PUSH: "#F5B041",
    WorkoutDay.LOWER_POWER: "#82E0AA",
    WorkoutDay.UPPER_PULL: "#AED6F1",
    WorkoutDay.FULL_BODY: "#D7BDE2",
}


# ---------------------------------------------------------------------------
# Progress and chart data
# ---------------------------------------------------------------------------


def level_progress(state: CharacterState) -> float:
    """Fraction (0-1) of the way from the current level to the next."""
    start = leveling.experience_for_level(state.level)
    end = leveling.experience_for_level(state.level + 1)
    return (state.experience - start) / (end - start)


def weekly_volume_frame(history: list[CompletedWorkout]) -> pd.DataFrame:
    """Weekly volume as a DataFrame indexed by week label, ready for ``st.bar_chart``."""
    weekly = weekly_volume(history)
    frame = weekly.to_frame(name="Total weight (kg)")
    frame.index = [ts.strftime("%d %b") for ts in weekly.index]
    return frame


def history_frame(history: list[CompletedWorkout]) -> pd.DataFrame:
    """One row per completed workout, newest first."""
    rows = [
        {
            "Date": w.workout.completed_at or w.workout.created_at,
            "Day": w.workout.day.name.replace("_", " ").title(),
            "Exercises": w.exercise_count,
            "Total weight (kg)": w.total_weight,
        }
        for w in history
    ]
    frame = pd.DataFrame(rows, columns=["Date", "Day", "Exercises", "Total weight (kg)"])
    return frame.sort_values("Date", ascending=False).reset_index(drop=True)


# ---------------------------------------------------------------------------
# Character persistence
# ---------------------------------------------------------------------------


def character_store(path=None) -> JsonCharacterStore:
    """JSON store for the dashboard's character (``GAINS_CHARACTER_FILE`` by default)."""
    return JsonCharacterStore(path or CHARACTER_FILE)


def history_store(path=None) -> JsonHistoryStore:
    """JSON store for finished workouts and records (``GAINS_HISTORY_FILE`` by default)."""
    return JsonHistoryStore(path or HISTORY_FILE)
