"""Tests for Epley one-rep-max and volume."""

from __future__ import annotations

import pytest

from gains_engine.exceptions import ValidationError
from gains_engine.math.strength import one_rep_max, training_volume


class TestOneRepMax:
    def test_epley(self) -> None:
        assert one_rep_max(100.0, 10) == pytest.approx(133.333, rel=1e-4)

    def test_single_rep_close_to_weight(self) -> None:
        assert one_rep_max(100.0, 1) == pytest.approx(103.333, rel=1e-4)

    def test_zero_reps_is_weight(self) -> None:
        assert one_rep_max(80.0, 0) == 80.0

    def test_more_reps_higher_estimate(self) -> None:
        assert one_rep_max(60.0, 12) > one_rep_max(60.0, 8)

    def test_negative_weight_rejected(self) -> None:
        with pytest.raises(ValidationError):
            one_rep_max(-1.0, 5)

    def test_negative_reps_rejected(self) -> None:
        with pytest.raises(ValidationError):
            one_rep_max(50.0, -1)

    @pytest.mark.parametrize(
        "weight", [float("nan"), float("inf"), float("-inf"), True, "100", None],
    )
    def test_non_finite_or_non_numeric_weight_rejected(self, weight) -> None:
        with pytest.raises(ValidationError):
            one_rep_max(weight, 5)

    @pytest.mark.parametrize("reps", [5.5, True, "5"])
    def test_non_integer_reps_rejected(self, reps) -> None:
        with pytest.raises(ValidationError):
            one_rep_max(100.0, reps)

    def test_integer_weight_accepted(self) -> None:
        assert one_rep_max(100, 0) == 100.0


class TestTrainingVolume:
    def test_weight_reps_sets(self) -> None:
        assert training_volume(60.0, 8, 4) == 1920.0

    def test_defaults_to_one_set(self) -> None:
        assert training_volume(20.0, 10) == 200.0
