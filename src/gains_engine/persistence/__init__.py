"""Persistence collaborators for character state, workout history and records."""

from gains_engine.persistence.store import (
    CharacterStore,
    InMemoryCharacterStore,
    JsonCharacterStore,
    JsonHistoryStore,
)

__all__ = ["CharacterStore", "InMemoryCharacterStore", "JsonCharacterStore", "JsonHistoryStore"]
