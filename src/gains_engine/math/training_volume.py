"""Training volume analytics over completed workouts: weekly totals, streaks, trend."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable

import numpy as np
import pandas as pd

from gains_engine.models.enums import VOLUME_TREND_TOLERANCE, MuscleGroup
from gains_engine.models.workout import CompletedWorkout


def workout_date(completed: CompletedWorkout) -> date:
    """Calendar day a workout counts towards (completion, else creation)."""
    moment = completed.workout.completed_at or completed.workout.created_at
    return moment.date()


def weekly_volume(workouts: Iterable[CompletedWorkout]) -> pd.Series:
    """Total weight lifted per week.

    Returns:
        Series indexed by the Monday that starts each week (as Timestamps,
        ascending), valued in total weight. Weeks without workouts are
        omitted. Empty input gives an empty float Series.
    """
    rows = [(workout_date(w), w.total_weight) for w in workouts]
    if not rows:
        return pd.Series(dtype=np.float64, name="total_weight")

    frame = pd.DataFrame(rows, columns=["day", "total_weight"])
    days = pd.to_datetime(frame["day"])
    frame["week_start"] = days - pd.to_timedelta(days.dt.weekday, unit="D")
    weekly = frame.groupby("week_start")["total_weight"].sum().astype(np.float64)
    weekly.index.name = "week_start"
    return weekly


def current_streak(workout_dates: Iterable[date], today: date | None = None) -> int:
    """Number of consecutive days, ending today, with at least one workout.

    A day without a workout today means the streak is 0.
    """
    today = today or date.today()
    days = set(workout_dates)
    streak = 0
    day = today
    while day in days:
        streak += 1
        day -= timedelta(days=1)
    return streak


def volume_slope(weekly: pd.Series) -> float:
    """Least-squares slope of weekly volume (weight per week)."""
    if len(weekly) < 2:
        return 0.0
    x = np.arange(len(weekly), dtype=np.float64)
    y = weekly.to_numpy(dtype=np.float64)
    slope, _intercept = np.polyfit(x, y, 1)
    return float(slope)


def volume_trend(weekly: pd.Series) -> str:
    """Classify weekly volume as "increasing", "decreasing" or "stable"."""
    slope = volume_slope(weekly)
    if slope > VOLUME_TREND_TOLERANCE:
        return "increasing"
    if slope < -VOLUME_TREND_TOLERANCE:
        return "decreasing"
    return "stable"


def most_worked_muscle_group(workouts: Iterable[CompletedWorkout]) -> MuscleGroup | None:
    """Muscle group appearing in the most workouts; ties go to the first seen."""
    groups = [g for w in workouts for g in w.muscle_groups]
    if not groups:
        return None
    counts = pd.Series(groups, dtype=object).value_counts(sort=False)
    return counts.idxmax()
