"""
Fake Park Repository for Testing.
"""
from typing import Dict, Iterable, Optional

from models.exercise import Park


class FakeParkRepository:
    """In-memory fake implementation of ParkRepository."""

    def __init__(self, parks: Optional[Iterable[Park]] = None):
        self._parks: Dict[str, Park] = {}
        if parks:
            self.seed(parks)

    def reset(self) -> None:
        """Clear all stored data."""
        self._parks.clear()

    def seed(self, parks: Iterable[Park]) -> None:
        for park in parks:
            self._parks[park.id] = park

    def get_by_id(self, park_id: str) -> Optional[Park]:
        return self._parks.get(park_id)
