"""Tests for EquipmentInventory."""

from __future__ import annotations

import pytest

from gains_engine.exceptions import ValidationError
from gains_engine.inventory import DEFAULT_EQUIPMENT, EquipmentInventory
from gains_engine.models.enums import EquipmentCategory
from gains_engine.models.equipment import Equipment


class TestDefaults:
    def test_default_catalog(self, inventory: EquipmentInventory) -> None:
        assert len(inventory) == len(DEFAULT_EQUIPMENT)

    def test_only_floor_space_available(self, inventory: EquipmentInventory) -> None:
        assert [e.name for e in inventory.available()] == ["Floor Space"]

    def test_custom_list(self) -> None:
        inv = EquipmentInventory([Equipment("Sandbag", EquipmentCategory.FUNCTIONAL)])
        assert [e.name for e in inv] == ["Sandbag"]


class TestToggle:
    def test_toggle_flips_availability(self, inventory: EquipmentInventory) -> None:
        updated = inventory.toggle("Dumbbells")
        assert updated.is_available
        assert inventory.get("dumbbells").is_available
        assert not inventory.toggle("Dumbbells").is_available

    def test_unknown_name(self, inventory: EquipmentInventory) -> None:
        with pytest.raises(KeyError):
            inventory.toggle("Hover Board")

    def test_set_available(self, inventory: EquipmentInventory) -> None:
        inventory.set_available(["Barbell", "bench"])
        assert {e.name for e in inventory.available()} == {"Barbell", "Bench"}

    def test_set_available_unknown(self, inventory: EquipmentInventory) -> None:
        with pytest.raises(KeyError):
            inventory.set_available(["Barbell", "Hover Board"])


class TestCustomEquipment:
    def test_add_custom(self, inventory: EquipmentInventory) -> None:
        item = inventory.add_custom("  Sandbag ", EquipmentCategory.FUNCTIONAL)
        assert item.name == "Sandbag"
        assert item.is_custom
        assert item in inventory.available()

    def test_duplicate_rejected(self, inventory: EquipmentInventory) -> None:
        with pytest.raises(ValidationError):
            inventory.add_custom("barbell", EquipmentCategory.FREE_WEIGHTS)

    def test_blank_rejected(self, inventory: EquipmentInventory) -> None:
        with pytest.raises(ValidationError):
            inventory.add_custom("   ", EquipmentCategory.FUNCTIONAL)


class TestByCategory:
    def test_category_filter(self, inventory: EquipmentInventory) -> None:
        names = [e.name for e in inventory.by_category(EquipmentCategory.CARDIO)]
        assert names == ["Treadmill", "Stationary Bike", "Elliptical", "Rowing Machine"]

    def test_search_case_insensitive(self, inventory: EquipmentInventory) -> None:
        found = inventory.by_category(EquipmentCategory.MACHINES, search="PRESS")
        assert [e.name for e in found] == ["Leg Press", "Chest Press"]
