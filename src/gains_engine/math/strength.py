"""Strength estimates.

Reference: Epley (1985), Poundage Chart. Boyd Epley Workout.
"""

from __future__ import annotations

import math

from gains_engine.exceptions import ValidationError


def one_rep_max(weight: float, reps: int) -> float:
    """Estimate a one-rep max with the Epley formula.

    1RM = weight x (1 + reps / 30)

    Raises:
        ValidationError: If ``weight`` is not a finite number >= 0 or
            ``reps`` is not an integer >= 0.
    """
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise ValidationError(f"weight must be a number, got {weight!r}")
    if not math.isfinite(weight) or weight < 0:
        raise ValidationError(f"weight must be a finite number >= 0, got {weight}")
    if isinstance(reps, bool) or not isinstance(reps, int):
        raise ValidationError(f"reps must be an integer, got {reps!r}")
    if reps < 0:
        raise ValidationError(f"reps must be >= 0, got {reps}")
    return weight * (1 + reps / 30.0)


def training_volume(weight: float, reps: int, sets: int = 1) -> float:
    """Weight x reps x sets."""
    return weight * reps * sets
