"""Persistence collaborators.

The progression engine only depends on the ``CharacterStore`` protocol:
``load() -> CharacterState`` and ``save(state) -> bool``. Workout history
and personal records live in a separate document, see ``JsonHistoryStore``.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Iterable, Protocol

from gains_engine.exceptions import PersistenceError, ValidationError
from gains_engine.models.character import CharacterState
from gains_engine.models.records import PersonalRecord
from gains_engine.models.workout import CompletedWorkout
from gains_engine.serialization.json_codec import (
    character_from_dict,
    character_to_dict,
    completed_workout_from_dict,
    completed_workout_to_dict,
    record_from_dict,
    record_to_dict,
)

logger = logging.getLogger(__name__)


class CharacterStore(Protocol):
    def load(self) -> CharacterState: ...

    def save(self, state: CharacterState) -> bool: ...


class InMemoryCharacterStore:
    """Keeps the last saved state in memory. Useful for tests and the dashboard."""

    def __init__(self, state: CharacterState | None = None) -> None:
        self._state = state

    def load(self) -> CharacterState:
        return self._state if self._state is not None else CharacterState.new()

    def save(self, state: CharacterState) -> bool:
        self._state = state
        return True


class JsonCharacterStore:
    """Stores the character as a JSON document on disk.

    A missing file means first use and loads ``CharacterState.new()``.
    Writes go to a temporary sibling file that is then renamed over the
    target, so a crash mid-write leaves the previous save intact.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).expanduser()

    def load(self) -> CharacterState:
        """Read the saved character.

        Raises:
            PersistenceError: If the file exists but cannot be parsed.
        """
        if not self.path.exists():
            logger.info("No saved character at %s, starting fresh", self.path)
            return CharacterState.new()
        try:
            with open(self.path) as f:
                data = json.load(f)
            return character_from_dict(data)
        except (OSError, json.JSONDecodeError, ValidationError) as exc:
            raise PersistenceError(
                f"Cannot read character from {self.path}: {exc}", path=str(self.path),
            ) from exc

    def save(self, state: CharacterState) -> bool:
        """Write ``state``; returns False if the filesystem refuses."""
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w") as f:
                json.dump(character_to_dict(state), f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            logger.warning("Failed to save character to %s: %s", self.path, exc)
            return False
        logger.info("Saved character (level %d) to %s", state.level, self.path)
        return True

    def delete(self) -> None:
        """Remove the saved file (full data reset)."""
        self.path.unlink(missing_ok=True)


class JsonHistoryStore:
    """Stores finished workouts and personal records as one JSON document.

    Layout::

        {"schema_version": 1, "workouts": [...], "records": [...]}

    Same contract as ``JsonCharacterStore``: a missing file loads empty,
    an unreadable one raises ``PersistenceError`` and a failed write
    returns False.
    """

    SCHEMA_VERSION = 1

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).expanduser()

    def load(self) -> tuple[list[CompletedWorkout], list[PersonalRecord]]:
        """Read the saved history and records.

        Raises:
            PersistenceError: If the file exists but cannot be parsed.
        """
        if not self.path.exists():
            logger.info("No saved history at %s, starting fresh", self.path)
            return [], []
        try:
            with open(self.path) as f:
                data = json.load(f)
            workouts = [completed_workout_from_dict(w) for w in data.get("workouts", [])]
            records = [record_from_dict(r) for r in data.get("records", [])]
        except (OSError, json.JSONDecodeError, ValidationError, AttributeError) as exc:
            raise PersistenceError(
                f"Cannot read history from {self.path}: {exc}", path=str(self.path),
            ) from exc
        return workouts, records

    def save(
        self,
        workouts: Iterable[CompletedWorkout],
        records: Iterable[PersonalRecord],
    ) -> bool:
        """Write the full history; returns False if the filesystem refuses."""
        data = {
            "schema_version": self.SCHEMA_VERSION,
            "workouts": [completed_workout_to_dict(w) for w in workouts],
            "records": [record_to_dict(r) for r in records],
        }
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            logger.warning("Failed to save history to %s: %s", self.path, exc)
            return False
        logger.info(
            "Saved %d workouts and %d records to %s",
            len(data["workouts"]), len(data["records"]), self.path,
        )
        return True

    def delete(self) -> None:
        """Remove the saved file (full data reset)."""
        self.path.unlink(missing_ok=True)
