"""Equipment model."""

from __future__ import annotations

from dataclasses import dataclass

from gains_engine.models.enums import EquipmentCategory


@dataclass(frozen=True)
class Equipment:
    """A piece of equipment the user may have access to.

    Availability changes only through ``EquipmentInventory.toggle``, which
    replaces the record rather than mutating it.
    """

    name: str
    category: EquipmentCategory
    icon: str = ""
    is_available: bool = True
    is_custom: bool = False
