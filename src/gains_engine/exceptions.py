"""Custom exception hierarchy for the gains engine."""

from __future__ import annotations


class GainsEngineError(Exception):
    """Base exception for all gains_engine errors."""


class ValidationError(GainsEngineError, ValueError):
    """Caller supplied an invalid value (negative XP, weight, reps, ...)."""


class UnknownCategoryError(GainsEngineError, ValueError):
    """A closed-enum argument (workout day, fitness level) was out of range."""


class SessionStateError(GainsEngineError):
    """A workout session operation was called in the wrong state."""


class PersistenceError(GainsEngineError):
    """Persisted character state could not be read back."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class EventBusClosedError(GainsEngineError):
    """An event was published after the bus was closed."""
