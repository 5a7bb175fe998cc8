"""
Park repository port (interface).

Read access to a park's installed fixed equipment.
"""

from typing import Optional, Protocol

from models.exercise import Park


class ParkRepository(Protocol):
    """Repository interface for park facilities."""

    def get_by_id(self, park_id: str) -> Optional[Park]:
        """
        Get a park with its installed equipment.

        Args:
            park_id: The park identifier

        Returns:
            Park if found, None otherwise
        """
        ...
