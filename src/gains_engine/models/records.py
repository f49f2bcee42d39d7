"""Personal record model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class PersonalRecord:
    """Best recorded performance for one exercise.

    ``previous_one_rep_max`` is the estimate this record replaced (0 for the
    first record of an exercise).
    """

    exercise_name: str
    one_rep_max: float
    max_weight: float
    max_reps: int
    best_volume: float
    date_achieved: date
    previous_one_rep_max: float = 0.0
