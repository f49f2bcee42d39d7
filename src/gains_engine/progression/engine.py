"""ProgressionEngine — owns the current character and publishes its events."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gains_engine.models.character import CharacterState
from gains_engine.models.enums import TIER_DISPLAY_NAMES, CharacterTier
from gains_engine.models.events import LevelUp, TierChanged
from gains_engine.progression import rules
from gains_engine.progression.rules import ProgressionResult

if TYPE_CHECKING:
    from gains_engine.event_bus import EventPublisher
    from gains_engine.persistence.store import CharacterStore

logger = logging.getLogger(__name__)


class ProgressionEngine:
    """Applies progression rules to a single character.

    The engine holds the current ``CharacterState``, runs each update
    through the pure functions in ``progression.rules``, swaps in the new
    state and forwards the emitted events to the bus (if one was given).

    Usage::

        engine = ProgressionEngine(store=JsonCharacterStore(path), bus=bus)
        engine.load()
        engine.record_workout(total_weight=1200.0, exercise_count=4)
        engine.save()
    """

    def __init__(
        self,
        store: CharacterStore | None = None,
        bus: EventPublisher | None = None,
        state: CharacterState | None = None,
    ) -> None:
        self._store = store
        self._bus = bus
        self._state = state or CharacterState.new()

    @property
    def state(self) -> CharacterState:
        return self._state

    @property
    def level(self) -> int:
        return self._state.level

    @property
    def tier(self) -> CharacterTier:
        return self._state.tier

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def add_experience(self, amount: int) -> ProgressionResult:
        return self._commit(rules.add_experience(self._state, amount))

    def add_strength(self, amount: int) -> ProgressionResult:
        return self._commit(rules.add_strength(self._state, amount))

    def add_endurance(self, amount: int) -> ProgressionResult:
        return self._commit(rules.add_endurance(self._state, amount))

    def record_workout(self, total_weight: float, exercise_count: int) -> ProgressionResult:
        result = self._commit(rules.record_workout(self._state, total_weight, exercise_count))
        logger.info(
            "Recorded workout: %d exercises, %.1f lifted, +%d XP",
            exercise_count, total_weight, result.experience_gained,
        )
        return result

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> CharacterState:
        """Replace the current state with the stored one."""
        if self._store is not None:
            self._state = self._store.load()
        return self._state

    def save(self) -> bool:
        """Persist the current state. Returns False if there is no store or it failed."""
        if self._store is None:
            return False
        ok = self._store.save(self._state)
        if not ok:
            logger.warning("Character save failed; state kept in memory only")
        return ok

    def reset(self) -> CharacterState:
        """Full data reset back to a first-use character."""
        logger.info("Resetting character (was level %d)", self._state.level)
        self._state = CharacterState.new()
        return self._state

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _commit(self, result: ProgressionResult) -> ProgressionResult:
        """Swap in the new state and publish every event of ``result``.

        A failing handler does not stop later events of the same result
        from being published; the first handler error is re-raised after.
        """
        self._state = result.state
        first_error: Exception | None = None
        for event in result.events:
            if isinstance(event, LevelUp):
                logger.info("Level up: %d -> %d", event.previous_level, event.new_level)
            elif isinstance(event, TierChanged):
                logger.info(
                    "Tier changed: %s -> %s",
                    TIER_DISPLAY_NAMES[event.previous_tier],
                    TIER_DISPLAY_NAMES[event.new_tier],
                )
            if self._bus is None:
                continue
            try:
                self._bus.publish(event)
            except Exception as exc:
                if first_error is None:
                    first_error = exc
        if first_error is not None:
            raise first_error
        return result
