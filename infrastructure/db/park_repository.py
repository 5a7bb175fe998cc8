"""
Supabase implementation of ParkRepository.
"""

from typing import Optional

from supabase import Client

from models.exercise import Park


class SupabaseParkRepository:
    """Supabase implementation of ParkRepository protocol."""

    TABLE = "parks"

    def __init__(self, client: Client):
        self._client = client

    def get_by_id(self, park_id: str) -> Optional[Park]:
        result = (
            self._client.table(self.TABLE)
            .select("id, name, gym_equipment")
            .eq("id", park_id)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return Park.model_validate(result.data[0])
