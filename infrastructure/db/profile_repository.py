"""
Supabase implementation of ProfileRepository.

Profiles are stored one row per user with the progression and equipment
documents as JSON columns.
"""

import logging
from typing import Optional

from supabase import Client

from models.profile import UserProfile

logger = logging.getLogger(__name__)


class SupabaseProfileRepository:
    """Supabase implementation of ProfileRepository protocol."""

    TABLE = "user_profiles"

    def __init__(self, client: Client):
        self._client = client

    def get_by_id(self, user_id: str) -> Optional[UserProfile]:
        """
        Get a user's profile snapshot.

        Args:
            user_id: User ID

        Returns:
            UserProfile if found, None otherwise
        """
        result = (
            self._client.table(self.TABLE)
            .select("id, name, progression, equipment, goals")
            .eq("id", user_id)
            .limit(1)
            .execute()
        )
        if not result.data:
            logger.info(f"No profile row for user {user_id}")
            return None
        return UserProfile.model_validate(result.data[0])
