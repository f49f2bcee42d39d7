"""Equipment inventory — the user's equipment list and its availability flags."""

from __future__ import annotations

import dataclasses
import logging

from gains_engine.exceptions import ValidationError
from gains_engine.models.enums import EquipmentCategory
from gains_engine.models.equipment import Equipment

logger = logging.getLogger(__name__)

_F = EquipmentCategory

# (name, category, icon, available by default)
DEFAULT_EQUIPMENT: tuple[tuple[str, EquipmentCategory, str, bool], ...] = (
    # Free weights
    ("Barbell", _F.FREE_WEIGHTS, "minus.rectangle.fill", False),
    ("Dumbbells", _F.FREE_WEIGHTS, "dumbbell.fill", False),
    ("Kettlebells", _F.FREE_WEIGHTS, "circle.fill", False),
    ("Weight Plates", _F.FREE_WEIGHTS, "circle.dashed", False),
    # Machines
    ("Leg Press", _F.MACHINES, "rectangle.fill", False),
    ("Lat Pulldown", _F.MACHINES, "arrow.down.square.fill", False),
    ("Chest Press", _F.MACHINES, "arrow.forward.square.fill", False),
    ("Cable Machine", _F.MACHINES, "cable.connector", False),
    ("Smith Machine", _F.MACHINES, "rectangle.grid.1x2.fill", False),
    # Cardio
    ("Treadmill", _F.CARDIO, "figure.run", False),
    ("Stationary Bike", _F.CARDIO, "bicycle", False),
    ("Elliptical", _F.CARDIO, "figure.elliptical", False),
    ("Rowing Machine", _F.CARDIO, "figure.rower", False),
    # Functional
    ("Pull-up Bar", _F.FUNCTIONAL, "figure.strengthtraining.functional", False),
    ("Resistance Bands", _F.FUNCTIONAL, "oval.fill", False),
    ("Medicine Ball", _F.FUNCTIONAL, "soccerball", False),
    ("Battle Ropes", _F.FUNCTIONAL, "waveform", False),
    ("TRX Suspension", _F.FUNCTIONAL, "triangle.fill", False),
    # Bodyweight
    ("Floor Space", _F.BODYWEIGHT, "square.fill", True),
    ("Bench", _F.BODYWEIGHT, "rectangle.fill", False),
    ("Box/Platform", _F.BODYWEIGHT, "cube.fill", False),
)


class EquipmentInventory:
    """Ordered collection of built-in and custom equipment.

    Equipment records are immutable; ``toggle`` swaps in a copy with the
    availability flipped.
    """

    def __init__(self, equipment: list[Equipment] | None = None) -> None:
        if equipment is None:
            equipment = [
                Equipment(name, category, icon, is_available=available)
                for name, category, icon, available in DEFAULT_EQUIPMENT
            ]
        self._items: dict[str, Equipment] = {}
        for item in equipment:
            self._items[item.name.casefold()] = item

    def __iter__(self):
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def get(self, name: str) -> Equipment:
        """Look up equipment by name (case-insensitive).

        Raises:
            KeyError: If nothing by that name is in the inventory.
        """
        return self._items[name.casefold()]

    def toggle(self, name: str) -> Equipment:
        """Flip availability of ``name`` and return the updated record."""
        current = self.get(name)
        updated = dataclasses.replace(current, is_available=not current.is_available)
        self._items[name.casefold()] = updated
        logger.debug("Toggled %s -> available=%s", updated.name, updated.is_available)
        return updated

    def set_available(self, names: list[str]) -> None:
        """Mark exactly ``names`` as available and everything else as unavailable."""
        wanted = {n.casefold() for n in names}
        unknown = wanted - set(self._items)
        if unknown:
            raise KeyError(f"unknown equipment: {', '.join(sorted(unknown))}")
        for key, item in self._items.items():
            self._items[key] = dataclasses.replace(item, is_available=key in wanted)

    def add_custom(
        self,
        name: str,
        category: EquipmentCategory,
        icon: str = "",
        is_available: bool = True,
    ) -> Equipment:
        """Add user-defined equipment.

        Raises:
            ValidationError: If the name is blank or already present.
        """
        name = name.strip()
        if not name:
            raise ValidationError("equipment name must not be empty")
        if name.casefold() in self._items:
            raise ValidationError(f"equipment already exists: {name}")
        item = Equipment(name, category, icon, is_available=is_available, is_custom=True)
        self._items[name.casefold()] = item
        return item

    def by_category(self, category: EquipmentCategory, search: str = "") -> list[Equipment]:
        """Equipment in ``category``, optionally filtered by a name substring."""
        needle = search.casefold()
        return [
            item for item in self._items.values()
            if item.category == category and needle in item.name.casefold()
        ]

    def available(self) -> list[Equipment]:
        """Equipment currently marked available, in inventory order."""
        return [item for item in self._items.values() if item.is_available]
