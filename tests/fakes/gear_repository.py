"""
Fake Gear Repository for Testing.

Counts loads so cache behavior can be asserted.
"""
from typing import Iterable, List, Optional

from models.exercise import GearDefinition, GymEquipment


class FakeGearRepository:
    """In-memory fake implementation of GearRepository."""

    def __init__(
        self,
        gear_definitions: Optional[Iterable[GearDefinition]] = None,
        gym_equipment: Optional[Iterable[GymEquipment]] = None,
    ):
        self._gear: List[GearDefinition] = list(gear_definitions or [])
        self._gym: List[GymEquipment] = list(gym_equipment or [])
        self.gear_loads = 0
        self.gym_loads = 0
        self.fail = False

    def reset(self) -> None:
        """Clear all stored data and counters."""
        self._gear.clear()
        self._gym.clear()
        self.gear_loads = 0
        self.gym_loads = 0
        self.fail = False

    def seed(
        self,
        gear_definitions: Iterable[GearDefinition] = (),
        gym_equipment: Iterable[GymEquipment] = (),
    ) -> None:
        self._gear.extend(gear_definitions)
        self._gym.extend(gym_equipment)

    def get_all_gear_definitions(self) -> List[GearDefinition]:
        self.gear_loads += 1
        if self.fail:
            raise ConnectionError("gear definitions unavailable")
        return list(self._gear)

    def get_all_gym_equipment(self) -> List[GymEquipment]:
        self.gym_loads += 1
        if self.fail:
            raise ConnectionError("gym equipment unavailable")
        return list(self._gym)
