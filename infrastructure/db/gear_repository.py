"""
Supabase implementation of GearRepository.

Gear definitions (personal gear) and gym equipment (park stations) are
small reference tables; they are read in full and cached by
GearDefinitionCache, never per request.
"""

import logging
from typing import List

from supabase import Client

from models.exercise import GearDefinition, GymEquipment

logger = logging.getLogger(__name__)


class SupabaseGearRepository:
    """Supabase implementation of GearRepository protocol."""

    GEAR_TABLE = "gear_definitions"
    GYM_EQUIPMENT_TABLE = "gym_equipment"

    def __init__(self, client: Client):
        self._client = client

    def get_all_gear_definitions(self) -> List[GearDefinition]:
        result = self._client.table(self.GEAR_TABLE).select("id, name, category").execute()
        return [GearDefinition.model_validate(row) for row in result.data or []]

    def get_all_gym_equipment(self) -> List[GymEquipment]:
        result = (
            self._client.table(self.GYM_EQUIPMENT_TABLE)
            .select("id, name, brands")
            .execute()
        )
        return [GymEquipment.model_validate(row) for row in result.data or []]
