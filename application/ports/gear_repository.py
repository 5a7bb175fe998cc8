"""
Gear repository port (interface).

Read access to gear definitions and gym equipment definitions. Both are
used for display labels and brand-specific media, not for eligibility.
"""

from typing import List, Protocol

from models.exercise import GearDefinition, GymEquipment


class GearRepository(Protocol):
    """Repository interface for gear and gym equipment definitions."""

    def get_all_gear_definitions(self) -> List[GearDefinition]:
        """Get every named gear definition."""
        ...

    def get_all_gym_equipment(self) -> List[GymEquipment]:
        """Get every gym equipment definition, with brands."""
        ...
