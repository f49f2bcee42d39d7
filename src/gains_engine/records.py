"""Personal records: best one-rep-max estimate per exercise."""

from __future__ import annotations

import dataclasses
import logging
from datetime import date
from typing import TYPE_CHECKING, Iterable

from gains_engine.exceptions import ValidationError
from gains_engine.math.strength import one_rep_max, training_volume
from gains_engine.models.events import PersonalRecordBroken
from gains_engine.models.records import PersonalRecord

if TYPE_CHECKING:
    from gains_engine.event_bus import EventPublisher

logger = logging.getLogger(__name__)


class PersonalRecordBook:
    """Tracks personal records keyed by lower-cased exercise name.

    The one-rep-max estimate (and its date) is replaced only when a log
    beats it. Max weight, max reps and best volume are running maxima
    updated on every log.
    """

    def __init__(
        self,
        bus: EventPublisher | None = None,
        records: Iterable[PersonalRecord] = (),
    ) -> None:
        self._bus = bus
        self._records: dict[str, PersonalRecord] = {
            r.exercise_name.lower(): r for r in records
        }

    def get(self, exercise_name: str) -> PersonalRecord | None:
        return self._records.get(exercise_name.lower())

    @property
    def records(self) -> list[PersonalRecord]:
        return list(self._records.values())

    def update(
        self,
        exercise_name: str,
        weight: float,
        reps: int,
        sets: int = 1,
        achieved_on: date | None = None,
    ) -> PersonalRecord | None:
        """Log a performance; returns the new record if the 1RM was beaten.

        Raises:
            ValidationError: If weight is not a finite number >= 0, or reps
                or sets is not an integer >= 0.
        """
        if isinstance(sets, bool) or not isinstance(sets, int) or sets < 0:
            raise ValidationError(f"sets must be an integer >= 0, got {sets!r}")
        estimate = one_rep_max(weight, reps)
        volume = training_volume(weight, reps, sets)
        achieved_on = achieved_on or date.today()
        key = exercise_name.lower()
        existing = self._records.get(key)

        if existing is not None and estimate <= existing.one_rep_max:
            self._records[key] = dataclasses.replace(
                existing,
                max_weight=max(existing.max_weight, weight),
                max_reps=max(existing.max_reps, reps),
                best_volume=max(existing.best_volume, volume),
            )
            return None

        if existing is None:
            record = PersonalRecord(
                exercise_name=exercise_name,
                one_rep_max=estimate,
                max_weight=weight,
                max_reps=reps,
                best_volume=volume,
                date_achieved=achieved_on,
            )
        else:
            record = PersonalRecord(
                exercise_name=exercise_name,
                one_rep_max=estimate,
                max_weight=max(existing.max_weight, weight),
                max_reps=max(existing.max_reps, reps),
                best_volume=max(existing.best_volume, volume),
                date_achieved=achieved_on,
                previous_one_rep_max=existing.one_rep_max,
            )
        self._records[key] = record
        logger.info("New personal record: %s 1RM %.1f", exercise_name, estimate)

        if self._bus is not None:
            self._bus.publish(PersonalRecordBroken(
                exercise_name=exercise_name,
                one_rep_max=estimate,
                previous_one_rep_max=record.previous_one_rep_max,
            ))
        return record

    def records_since(self, since: date) -> list[PersonalRecord]:
        return [r for r in self._records.values() if r.date_achieved >= since]

    def strength_gain_pct(self) -> float:
        """Average 1RM improvement (%) across records that replaced an earlier one."""
        gains = [
            (r.one_rep_max - r.previous_one_rep_max) / r.previous_one_rep_max * 100
            for r in self._records.values()
            if r.previous_one_rep_max > 0
        ]
        return sum(gains) / len(gains) if gains else 0.0
