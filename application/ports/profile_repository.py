"""
Profile repository port (interface).

Read access to user profiles. Progression data is mutated elsewhere
(progression/reward side); the engine only reads snapshots.
"""

from typing import Optional, Protocol

from models.profile import UserProfile


class ProfileRepository(Protocol):
    """Repository interface for user profiles."""

    def get_by_id(self, user_id: str) -> Optional[UserProfile]:
        """
        Get a user's full profile.

        Args:
            user_id: The user's ID

        Returns:
            UserProfile if found, None otherwise
        """
        ...
